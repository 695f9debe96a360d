"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The credential store and token service live here rather than as
module-level singletons, so every consumer (middleware, auth service,
tests) receives the same explicitly injected instances.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from shared.database import Database
    from modules.auth.interfaces import IAuthService, ICredentialStore, ITokenService
    from modules.auth.passwords import PasswordHasher
    from modules.users.repository import UserRepository
    from modules.users.service import UserService
    from modules.orders.interfaces import IFactoryClient
    from modules.orders.service import OrderService
    from modules.franchises.service import FranchiseService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._database: "Database | None" = None
        self._tokens: "ITokenService | None" = None
        self._credentials: "ICredentialStore | None" = None
        self._passwords: "PasswordHasher | None" = None
        self._user_repository: "UserRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "UserService | None" = None
        self._factory: "IFactoryClient | None" = None
        self._order_service: "OrderService | None" = None
        self._franchise_service: "FranchiseService | None" = None

    @property
    def settings(self) -> Settings:
        """Settings this container was built with (global settings by default)."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def database(self) -> "Database":
        """Get the relational store."""
        if self._database is None:
            from shared.database import Database
            self._database = Database(
                self.settings.database_url,
                echo=self.settings.database_echo,
            )
        return self._database

    @property
    def tokens(self) -> "ITokenService":
        """Get the token service."""
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            self._tokens = TokenService(self.settings.jwt_secret)
        return self._tokens

    @property
    def credentials(self) -> "ICredentialStore":
        """Get the active-session store."""
        if self._credentials is None:
            from modules.auth.store import CredentialStore
            self._credentials = CredentialStore(self.database)
        return self._credentials

    @property
    def passwords(self) -> "PasswordHasher":
        """Get the password hasher."""
        if self._passwords is None:
            from modules.auth.passwords import PasswordHasher
            self._passwords = PasswordHasher(self.settings.bcrypt_rounds)
        return self._passwords

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.database, self.passwords)
        return self._user_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                tokens=self.tokens,
                credentials=self.credentials,
            )
        return self._auth_service

    @property
    def users(self) -> "UserService":
        """Get the user service."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                repository=self.user_repository,
                auth=self.auth,
            )
        return self._user_service

    @property
    def factory(self) -> "IFactoryClient":
        """Get the pizza factory client."""
        if self._factory is None:
            from modules.orders.factory import FactoryClient
            self._factory = FactoryClient(
                url=self.settings.factory_url,
                api_key=self.settings.factory_api_key,
                timeout=self.settings.factory_timeout,
            )
        return self._factory

    @property
    def orders(self) -> "OrderService":
        """Get the order service."""
        if self._order_service is None:
            from modules.orders.repository import OrderRepository
            from modules.orders.service import OrderService
            self._order_service = OrderService(
                repository=OrderRepository(self.database),
                factory=self.factory,
                per_page=self.settings.list_per_page,
            )
        return self._order_service

    @property
    def franchises(self) -> "FranchiseService":
        """Get the franchise service."""
        if self._franchise_service is None:
            from modules.franchises.repository import FranchiseRepository
            from modules.franchises.service import FranchiseService
            self._franchise_service = FranchiseService(FranchiseRepository(self.database))
        return self._franchise_service

    def override(self, **services) -> None:
        """
        Replace cached services with the given instances.

        Keys are attribute names without the leading underscore,
        e.g. override(factory=fake_factory, credentials=fake_store).
        """
        for name, service in services.items():
            attr = f"_{name}"
            if not hasattr(self, attr):
                raise AttributeError(f"Unknown service: {name}")
            setattr(self, attr, service)

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._database = None
        self._tokens = None
        self._credentials = None
        self._passwords = None
        self._user_repository = None
        self._auth_service = None
        self._user_service = None
        self._factory = None
        self._order_service = None
        self._franchise_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a specific container (used by tests and the app factory)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "ITokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_credential_store() -> "ICredentialStore":
    """FastAPI dependency for the credential store."""
    return get_container().credentials


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "UserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_order_service() -> "OrderService":
    """FastAPI dependency for order service."""
    return get_container().orders


def get_franchise_service() -> "FranchiseService":
    """FastAPI dependency for franchise service."""
    return get_container().franchises


def get_app_settings() -> Settings:
    """FastAPI dependency for the settings the container was built with."""
    return get_container().settings
