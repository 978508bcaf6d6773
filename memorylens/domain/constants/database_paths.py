"""Top-level nodes of the realtime database."""

STATUS_PATH = "status"
IMAGES_PATH = "images"
FACES_PATH = "faces"
USERS_PATH = "users"
