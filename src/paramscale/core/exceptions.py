"""Exception classes for paramscale."""


class ParamScaleError(Exception):
    """Base exception for paramscale errors."""
    pass


class ParamRangeError(ParamScaleError, ValueError):
    """Raised when a parameter range cannot be used for a conversion."""

    def __init__(self, message: str, minimum: float, maximum: float):
        self.minimum = minimum
        self.maximum = maximum
        self.message = message
        super().__init__(f"Invalid range [{minimum}, {maximum}]: {message}")
