from pydantic import BaseModel


class UploadAuthResponse(BaseModel):
    """Signed parameters a client needs for a direct ImageKit upload"""
    signature: str
    token: str
    expire: int
