from .submit_contact import SubmitContactUseCase

__all__ = ["SubmitContactUseCase"]
