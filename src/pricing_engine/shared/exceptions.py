"""Custom exceptions for Pricing Engine."""


class PricingEngineError(Exception):
    """Base exception for all Pricing Engine errors."""

    pass


class ParseError(PricingEngineError):
    """Error parsing a fleet snapshot file."""

    pass


class UnsupportedFileError(ParseError):
    """File format not supported."""

    pass


class ValidationError(PricingEngineError):
    """Data validation error."""

    pass


class InvalidYearMonthError(ValidationError, ValueError):
    """Malformed YYYY-MM reference."""

    pass
