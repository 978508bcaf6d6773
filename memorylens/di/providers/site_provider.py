from typing import TYPE_CHECKING
from ...infrastructure.external.imagekit_client import ImageKitClient
from ...application.use_cases.upload.get_upload_auth import GetUploadAuthUseCase
from ...application.use_cases.contact.submit_contact import SubmitContactUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SiteProvider:
    """Registers upload signing and contact form use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetUploadAuthUseCase,
            lambda: GetUploadAuthUseCase(imagekit_client=container.get(ImageKitClient))
        )
        container.register_factory(SubmitContactUseCase, SubmitContactUseCase)
