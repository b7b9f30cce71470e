"""Custom exception classes for koneque-contracts library."""


class RegistryError(Exception):
    """Base exception for contract registry errors."""

    pass


class UnknownKeyError(RegistryError, ValueError):
    """Raised when a name is outside one of the registry's closed sets."""

    pass


class UnknownContractError(UnknownKeyError):
    """Raised when a contract name is not in the registry."""

    pass


class UnknownCategoryError(UnknownKeyError):
    """Raised when a category name is not in the registry."""

    pass


class UnknownInteractionError(UnknownKeyError):
    """Raised when an interaction key is not in the registry."""

    pass


class RelationshipNotFoundError(RegistryError, ValueError):
    """Raised when a known contract declares no relationship."""

    pass


class InvalidRegistryError(RegistryError, ValueError):
    """Raised when registry data is malformed or fails integrity checks."""

    pass


class RegistryFileNotFoundError(RegistryError, FileNotFoundError):
    """Raised when a registry data file is not found."""

    pass
