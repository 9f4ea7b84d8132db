__all__ = ["ConfigurationError"]


class ConfigurationError(ValueError):
    """
    Raised when an operation is configured with an invalid option, such as a melodic
    direction other than `1` or `-1`. Invalid musical input never raises; it yields `None`.
    """
