"""Parameter range models."""

from dataclasses import dataclass
from enum import Enum
from paramscale.core import conversions
from paramscale.utils.validate import check_linear_range, check_log_range, clamp as clamp_value


class Scale(Enum):
    """How normalized positions are spread over a range."""

    LINEAR = "linear"
    LOG = "log"


@dataclass(frozen=True)
class ParamRange:
    """
    A parameter range with its scaling.

    Widgets and envelopes keep one of these per controlled parameter and use it
    to translate between their normalized positions and the parameter's units.
    The range is validated on construction; ``minimum`` may be greater than
    ``maximum`` for an inverted control.
    """

    minimum: float
    """Parameter value at normalized position 0 (or -1 when signed)."""

    maximum: float
    """Parameter value at normalized position 1."""

    scale: Scale = Scale.LINEAR
    """Linear or logarithmic spacing."""

    def __post_init__(self):
        if self.scale is Scale.LOG:
            check_log_range(self.minimum, self.maximum)
        else:
            check_linear_range(self.minimum, self.maximum)

    @property
    def span(self) -> float:
        """Signed width of the range."""
        return self.maximum - self.minimum

    def from_unsigned_norm(self, t):
        """Map [0, 1] onto this range."""
        if self.scale is Scale.LOG:
            return conversions.unsigned_norm_to_log(t, self.minimum, self.maximum)
        return conversions.unsigned_norm_to_param(t, self.minimum, self.maximum)

    def to_unsigned_norm(self, p):
        """Map a value of this range onto [0, 1]."""
        if self.scale is Scale.LOG:
            return conversions.log_to_unsigned_norm(p, self.minimum, self.maximum)
        return conversions.param_to_unsigned_norm(p, self.minimum, self.maximum)

    def from_signed_norm(self, t):
        """Map [-1, 1] onto this range."""
        return self.from_unsigned_norm(conversions.signed_to_unsigned_norm(t))

    def to_signed_norm(self, p):
        """Map a value of this range onto [-1, 1]."""
        return conversions.unsigned_to_signed_norm(self.to_unsigned_norm(p))

    def clamp(self, p: float) -> float:
        """Clamp a scalar value into this range."""
        return clamp_value(p, self.minimum, self.maximum)


AUDIBLE_FREQUENCY = ParamRange(20.0, 20000.0, Scale.LOG)
"""Human hearing range in Hz."""

MIDI_NOTE = ParamRange(0.0, 127.0)
"""Full MIDI note range."""

UNIT_GAIN = ParamRange(0.0, 1.0)
"""Linear gain from silence to unity."""
