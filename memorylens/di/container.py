# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    FaceProvider,
    MemoryProvider,
    RepositoryProvider,
    ServiceProvider,
    SiteProvider,
    StatusProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.

    Registration order: repositories, then infrastructure services that use
    them, then use cases.
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        RepositoryProvider.register(self)
        ServiceProvider.register(self)

        AuthProvider.register(self)
        MemoryProvider.register(self)
        FaceProvider.register(self)
        StatusProvider.register(self)
        SiteProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
