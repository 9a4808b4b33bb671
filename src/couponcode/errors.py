"""Exceptions raised by the couponcode package."""


class CouponCodeError(Exception):
    """Base exception for coupon code errors."""

    pass


class ConfigurationError(CouponCodeError, ValueError):
    """Raised when parts, part length, seed or bad words are malformed."""

    pass


class GenerationError(CouponCodeError):
    """Raised when generation gives up after the configured number of attempts."""

    def __init__(self, message: str, attempts: int):
        super().__init__(message)
        self.attempts = attempts


class UnmappableSymbolError(CouponCodeError, KeyError):
    """Raised when a symbol has no index in the coupon alphabet."""

    def __init__(self, symbol: str):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self):
        return f"Symbol {self.symbol!r} is not part of the coupon alphabet"
