"""Custom exception classes for the application."""


class StorefrontException(Exception):
    """Base exception for all storefront errors."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class NotFoundError(StorefrontException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} with identifier '{identifier}' not found")


class CategoryCycleError(StorefrontException):
    """Raised when the category parent graph loops back on itself."""

    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"Category tree contains a cycle at '{category_id}'")


class CatalogLoadError(StorefrontException):
    """Raised when a catalog snapshot cannot be read or validated."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Could not load catalog from '{path}': {reason}")
