from .get_upload_auth import GetUploadAuthUseCase

__all__ = ["GetUploadAuthUseCase"]
