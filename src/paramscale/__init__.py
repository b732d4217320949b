"""
paramscale - conversions between audio control values and parameter values.

This package maps the normalized values produced by sliders, knobs and
envelopes onto the physical ranges used by audio nodes, linearly or on a
logarithmic scale, and converts MIDI note numbers to frequencies.
"""

from paramscale.core.conversions import (
    unsigned_norm_to_param,
    param_to_unsigned_norm,
    unsigned_to_signed_norm,
    signed_to_unsigned_norm,
    signed_norm_to_param,
    param_to_signed_norm,
    unsigned_norm_to_log,
    log_to_unsigned_norm,
    signed_norm_to_log,
    log_to_signed_norm,
    midi_note_to_hz,
    hz_to_midi_note,
)
from paramscale.core.models import (
    ParamRange,
    Scale,
    AUDIBLE_FREQUENCY,
    MIDI_NOTE,
    UNIT_GAIN,
)
from paramscale.core.exceptions import ParamScaleError, ParamRangeError

__version__ = "0.1.0"

__all__ = [
    "unsigned_norm_to_param",
    "param_to_unsigned_norm",
    "unsigned_to_signed_norm",
    "signed_to_unsigned_norm",
    "signed_norm_to_param",
    "param_to_signed_norm",
    "unsigned_norm_to_log",
    "log_to_unsigned_norm",
    "signed_norm_to_log",
    "log_to_signed_norm",
    "midi_note_to_hz",
    "hz_to_midi_note",
    "ParamRange",
    "Scale",
    "AUDIBLE_FREQUENCY",
    "MIDI_NOTE",
    "UNIT_GAIN",
    "ParamScaleError",
    "ParamRangeError",
]
