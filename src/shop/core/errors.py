"""Domain errors raised by services and mapped to HTTP status codes by the API."""


class StoreError(Exception):
    """Base class for errors surfaced by the storefront services."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(StoreError):
    """A referenced cart line, product or account does not exist."""

    status_code = 404


class InvalidArgument(StoreError):
    """Malformed identifier or an out-of-range/non-integer quantity or stock."""

    status_code = 400


class Conflict(StoreError):
    """A unique key (account email, cart user/product pair) is already taken."""

    status_code = 409


class Unauthorized(StoreError):
    """Credentials did not match."""

    status_code = 401


class StoreUnavailable(StoreError):
    """The underlying persistence layer failed."""

    status_code = 500
