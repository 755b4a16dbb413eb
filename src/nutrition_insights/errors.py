"""Errors raised by provider clients and application services."""


class ProviderError(Exception):
    """A remote provider failed or answered with an unsuccessful envelope."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProductNotFoundError(ProviderError):
    """The scanner provider could not resolve a barcode or image to a product."""
