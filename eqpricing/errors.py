"""
Exception taxonomy for the pricing kernel.

Every error derives from `PricingError`, itself a `ValueError`, so callers that
already guard pricing calls with `except ValueError` (the API service layer does)
keep working. None of these are retried internally: they signal a configuration
problem the caller must fix before calling `amount()` again.
"""


class PricingError(ValueError):
    """Base class for all pricing kernel errors."""


class DateOrderingError(PricingError):
    """Cash flow dates are in the wrong order (fixing before base date)."""


class MissingMarketDataError(PricingError):
    """A required curve, surface or quote is not available at valuation time."""


class InconsistentReferenceDateError(PricingError):
    """Term structures combined in one formula do not share a reference date."""


class MissingFixingError(PricingError):
    """A historic index fixing was requested but is not in the fixing history."""


class InvalidFixingDateError(PricingError):
    """The requested date is not a valid fixing date for the index calendar."""


class EmptyHandleError(PricingError):
    """An empty handle was dereferenced."""
