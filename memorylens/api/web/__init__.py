from .pages_controller import router as pages_router
from .session import LoginRequiredError

__all__ = ["pages_router", "LoginRequiredError"]
