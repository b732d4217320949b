"""Example: Map slider positions onto a filter cutoff and a pan control."""

import sys

from paramscale import (
    AUDIBLE_FREQUENCY,
    midi_note_to_hz,
    param_to_unsigned_norm,
    signed_norm_to_param,
)

if __name__ == "__main__":
    steps = int(sys.argv[1]) if len(sys.argv) > 1 else 10

    print("Slider -> cutoff (Hz), log scale")
    for position in range(steps + 1):
        # Slider reports 0..100
        t = param_to_unsigned_norm(position * 100 / steps, 0, 100)
        print(f"  {t:4.2f} -> {AUDIBLE_FREQUENCY.from_unsigned_norm(t):9.2f}")

    print("Pan knob -> balance (0..100)")
    for t in (-1.0, -0.5, 0.0, 0.5, 1.0):
        print(f"  {t:+4.1f} -> {signed_norm_to_param(t, 0, 100):6.1f}")

    print("MIDI note -> Hz")
    for note in (21, 60, 69, 81, 108):
        print(f"  {note:3d} -> {midi_note_to_hz(note):8.2f}")
