"""Domain-level exceptions.

Every rule the storefront enforces is expressed as a subclass of
DomainException so the CLI and API layers can catch them uniformly and
turn them into a user-facing message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value does not have the shape the domain expects."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# --- Session operations ------------------------------------------------------


class EmptyCartError(DomainException):
    """Checkout was requested with nothing in the cart."""


class InsufficientFundsError(DomainException):
    """Profit is too low to pay for another lemon."""


class OutOfStockError(DomainException):
    """There are no lemons left to sell."""


class InvalidCartPositionError(DomainException):
    """A cart position outside ``0 <= position < count`` was given."""


# --- Catalog fetching --------------------------------------------------------


class CatalogError(DomainException):
    """The product catalog could not be produced."""


class UpstreamUnavailableError(CatalogError):
    """The drink catalog service answered with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(
            message or f"Drink catalog service returned HTTP {status_code}"
        )


class CatalogFetchError(CatalogError):
    """The request failed or the response body was not usable."""
