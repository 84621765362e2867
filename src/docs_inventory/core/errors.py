"""Exception types shared across the docs inventory."""


class DocsInventoryError(Exception):
    """Base class for errors that abort a listing run."""


class DocsRootError(DocsInventoryError):
    """Raised when no docs directory can be resolved from the invocation."""


class ConfigValidationError(DocsInventoryError, ValueError):
    """Raised when a listing configuration is invalid."""
