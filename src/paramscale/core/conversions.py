"""
Conversions between normalized control values and audio parameter values.

Every function here is pure. Inputs may be Python scalars or array-likes;
scalars come back as ``float``, arrays as ``numpy.ndarray``. Degenerate input
follows IEEE-754 rather than raising: a zero-width linear range gives ``inf``
(or ``nan`` for ``0/0``), and any non-positive value in a logarithmic
conversion gives ``nan``. Use ``paramscale.utils.validate`` for explicit checks.
"""

import numpy as np

A4_HZ = 440.0
"""Concert pitch reference (Hz)."""

A4_NOTE = 69
"""MIDI note number of A4."""

SEMITONES_PER_OCTAVE = 12
"""Equal-tempered semitones per doubling of frequency."""


def _as_array(x) -> np.ndarray:
    return np.asarray(x, dtype=np.float64)


def _result(x):
    """Return a float for 0-d results, the array otherwise."""
    if np.ndim(x) == 0:
        return float(x)
    return x


def unsigned_norm_to_param(t, minimum, maximum):
    """
    Map an unsigned normalized value in [0, 1] onto [minimum, maximum].

    Args:
        t: Normalized value. Values outside [0, 1] extrapolate.
        minimum: Parameter value at t=0.
        maximum: Parameter value at t=1.

    Returns:
        ``minimum + (maximum - minimum) * t``.

    Example:
        >>> unsigned_norm_to_param(0.5, 200, 400)
        300.0
    """
    t, minimum, maximum = _as_array(t), _as_array(minimum), _as_array(maximum)
    with np.errstate(invalid="ignore", over="ignore"):
        return _result(minimum + (maximum - minimum) * t)


def param_to_unsigned_norm(p, minimum, maximum):
    """
    Map a parameter value in [minimum, maximum] onto [0, 1].

    Inverse of :func:`unsigned_norm_to_param`. ``minimum == maximum`` gives
    ``inf``, or ``nan`` when ``p`` also equals ``minimum``.

    Example:
        >>> param_to_unsigned_norm(300, 200, 400)
        0.5
    """
    p, minimum, maximum = _as_array(p), _as_array(minimum), _as_array(maximum)
    with np.errstate(divide="ignore", invalid="ignore"):
        return _result((p - minimum) / (maximum - minimum))


def unsigned_to_signed_norm(t):
    """Map [0, 1] onto [-1, 1]."""
    with np.errstate(over="ignore", invalid="ignore"):
        return _result(_as_array(t) * 2 - 1)


def signed_to_unsigned_norm(t):
    """Map [-1, 1] onto [0, 1]."""
    with np.errstate(over="ignore", invalid="ignore"):
        return _result((_as_array(t) + 1) / 2)


def signed_norm_to_param(t, minimum, maximum):
    """
    Map a signed normalized value in [-1, 1] onto [minimum, maximum].

    t=-1 gives minimum, t=0 the midpoint, t=1 maximum.
    """
    return unsigned_norm_to_param(signed_to_unsigned_norm(t), minimum, maximum)


def param_to_signed_norm(p, minimum, maximum):
    """Map a parameter value in [minimum, maximum] onto [-1, 1]."""
    return unsigned_to_signed_norm(param_to_unsigned_norm(p, minimum, maximum))


def unsigned_norm_to_log(t, minimum, maximum):
    """
    Map an unsigned normalized value onto [minimum, maximum] on a log scale.

    Equal steps in ``t`` give equal frequency ratios, which is how pitch and
    loudness are perceived. Both bounds must be positive, otherwise the result
    is ``nan``.

    Args:
        t: Normalized value, typically a slider position.
        minimum: Positive parameter value at t=0.
        maximum: Positive parameter value at t=1.

    Returns:
        ``exp((ln(maximum) - ln(minimum)) * t + ln(minimum))``.
    """
    t, minimum, maximum = _as_array(t), _as_array(minimum), _as_array(maximum)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        log_min = np.log(minimum)
        scale = np.log(maximum) - log_min
        value = np.exp(scale * t + log_min)
        return _result(np.where((minimum > 0) & (maximum > 0), value, np.nan))


def log_to_unsigned_norm(p, minimum, maximum):
    """
    Map a parameter value in [minimum, maximum] onto [0, 1] on a log scale.

    Inverse of :func:`unsigned_norm_to_log`. ``p``, ``minimum`` and ``maximum``
    must all be positive, otherwise the result is ``nan``.

    Example:
        >>> log_to_unsigned_norm(20000, 20, 20000)
        1.0
    """
    p, minimum, maximum = _as_array(p), _as_array(minimum), _as_array(maximum)
    with np.errstate(divide="ignore", invalid="ignore"):
        log_min = np.log(minimum)
        scale = np.log(maximum) - log_min
        t = (np.log(p) - log_min) / scale
        return _result(np.where((p > 0) & (minimum > 0) & (maximum > 0), t, np.nan))


def signed_norm_to_log(t, minimum, maximum):
    """Map a signed normalized value in [-1, 1] onto a log-scaled range."""
    return unsigned_norm_to_log(signed_to_unsigned_norm(t), minimum, maximum)


def log_to_signed_norm(p, minimum, maximum):
    """Map a log-scaled parameter value onto [-1, 1]."""
    return unsigned_to_signed_norm(log_to_unsigned_norm(p, minimum, maximum))


def midi_note_to_hz(note_number, a4: float = A4_HZ):
    """
    Convert a MIDI note number to a frequency in Hz (12-tone equal temperament).

    Args:
        note_number: MIDI note, nominally in [0, 127]. Not bounds checked and
            fractional notes are accepted.
        a4: Frequency of note 69.

    Returns:
        ``a4 * 2 ** ((note_number - 69) / 12)``. Note 69 is exactly ``a4``.
    """
    n = _as_array(note_number)
    with np.errstate(over="ignore", invalid="ignore"):
        return _result(a4 * np.power(2.0, (n - A4_NOTE) / SEMITONES_PER_OCTAVE))


def hz_to_midi_note(hz, a4: float = A4_HZ):
    """
    Convert a frequency in Hz to a (fractional) MIDI note number.

    The result is not rounded. Non-positive frequencies give ``nan``.
    """
    hz = _as_array(hz)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        note = A4_NOTE + SEMITONES_PER_OCTAVE * np.log2(hz / a4)
        return _result(np.where(hz > 0, note, np.nan))
