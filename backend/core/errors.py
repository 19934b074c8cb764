"""Error kinds raised by the stores and services.

Each kind carries a default message. The HTTP layer decides how a kind is
reported (see ``backend.core.error_handlers``).
"""


class SweetShopError(Exception):
    """Base class for expected, caller-recoverable failures."""

    message = "Sweet shop error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class NotFound(SweetShopError):
    message = "Sweet not found"


class OutOfStock(SweetShopError):
    message = "Sweet is out of stock"


class InvalidCredentials(SweetShopError):
    message = "Invalid credentials"


class EmailTaken(SweetShopError):
    message = "Email already registered"


class InvalidEmail(SweetShopError):
    message = "Invalid email format"


class WeakPassword(SweetShopError):
    message = "Password must be at least 8 characters long"


class InvalidPrice(SweetShopError):
    message = "Price must be a positive number"


class InvalidQuantity(SweetShopError):
    message = "Quantity must be a non-negative integer"


class DuplicateKey(SweetShopError):
    message = "Record already exists"


class InvalidToken(SweetShopError):
    message = "Invalid token"


class ExpiredToken(SweetShopError):
    message = "Token has expired"
