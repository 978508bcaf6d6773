"""Constants for reference face field names"""


class FaceFields:
    """Field name constants for faces/{id} records"""
    NAME = "name"
    IMAGE_URLS = "imageUrls"
