# Local application imports
from ....infrastructure.external.imagekit_client import ImageKitClient
from ...dto.upload_dto import UploadAuthResponse


class GetUploadAuthUseCase:
    """Use case for minting signed ImageKit upload parameters"""

    def __init__(self, imagekit_client: ImageKitClient) -> None:
        self.imagekit_client = imagekit_client

    async def execute(self) -> UploadAuthResponse:
        """
        Raises:
            ImageKitConfigurationError: If the private key is not configured
        """
        parameters = self.imagekit_client.get_authentication_parameters()
        return UploadAuthResponse(**parameters)
