"""Constants for memory (captured image) field names as written by the device"""


class MemoryFields:
    """Field name constants for images/{id} records"""
    IMG_URL = "imgUrl"
    TIMESTAMP = "timestamp"
    LOCATION = "location"
    DETECTED_FACES = "detectedFaces"


class LocationFields:
    CITY = "city"
    COUNTRY = "country"
    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    DETAILED = "detailed"
    DISPLAY_NAME = "display_name"
    STATE = "state"
    SUBURB = "suburb"


class DetectedFaceFields:
    DETECTION = "detection"
    BOX = "box"
    SCORE = "score"
    NAME = "name"
    CONFIDENCE = "confidence"
    X = "x"
    Y = "y"
    WIDTH = "width"
    HEIGHT = "height"
