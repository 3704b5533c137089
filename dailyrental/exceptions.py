"""
Custom exception classes for the daily rental checkout service.

These exceptions provide precise error types that callers (and the HTTP
adapter) can catch instead of relying on generic errors.
"""


class RentalNotFoundError(Exception):
    """Raised when a rental record cannot be found in the store."""

    def __init__(self, message: str = "Error: rental not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class CustomerNotFoundError(Exception):
    """Raised when a customer ID cannot be found in the store."""

    def __init__(self, message: str = "Error: customer not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidDateRangeError(Exception):
    """Raised when start is after end or a timestamp cannot be used."""

    def __init__(self, message: str = "Error: invalid date range") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidCategoryError(Exception):
    """Raised when a rental category is neither garage nor private."""

    def __init__(self, message: str = "Error: invalid rental category") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class CheckoutPreconditionError(Exception):
    """
    Raised when checkout is called with a missing or malformed rental or
    timestamp. Nothing on the rental has been touched when this is raised.
    """

    def __init__(self, message: str = "Error: invalid checkout request") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
