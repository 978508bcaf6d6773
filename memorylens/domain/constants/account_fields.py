"""Field names of users/{id} records. The record key is the user ID."""


class UserFields:
    FULL_NAME = "full_name"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
    CREATED_AT = "created_at"
