class PropertyAnnotationsError(Exception):
    """Base class for errors raised by property_attributes."""


class ContractViolation(PropertyAnnotationsError, AssertionError):
    """A caller broke an internal contract, e.g. passed a None property.

    Raised explicitly rather than through ``assert`` so it is not stripped
    under ``python -O``.
    """
