"""Error taxonomy shared by the store, the services and the HTTP layer."""


class RegistryError(Exception):
    """Base class for script registry errors."""


class ValidationError(RegistryError):
    """Raised when caller supplied input is missing or malformed."""


class ConflictError(RegistryError):
    """Raised when a uniqueness or referential constraint would be violated."""


class NotFoundError(RegistryError):
    """Raised when the targeted entity does not exist."""


class StoreError(RegistryError):
    """Raised when the underlying persistence layer fails."""


class StoreTimeoutError(StoreError, TimeoutError):
    """Raised when a store operation exceeds the configured time bound."""
