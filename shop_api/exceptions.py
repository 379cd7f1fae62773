"""
Errors raised by the service layer and translated to HTTP status codes by the routers
"""


class ProductValidationError(ValueError):
    """Client input violates a field constraint (400)"""


class ProductNotFoundError(LookupError):
    """Referenced product does not exist (404)"""


class CategoryNotFoundError(LookupError):
    """Referenced category does not exist (404)"""


class StoreError(RuntimeError):
    """The persistence layer failed (500)"""
