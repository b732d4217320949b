"""Tests for the public package API."""

import paramscale


def test_public_api():
    """Test that every exported name resolves."""
    for name in paramscale.__all__:
        assert hasattr(paramscale, name)


def test_top_level_conversions():
    """Test the concrete conversions through the package namespace."""
    assert paramscale.unsigned_norm_to_param(0.5, 200, 400) == 300
    assert paramscale.param_to_unsigned_norm(300, 200, 400) == 0.5
    assert paramscale.unsigned_to_signed_norm(0.5) == 0
    assert paramscale.signed_to_unsigned_norm(0.0) == 0.5
    assert paramscale.signed_norm_to_param(0.0, 200, 400) == 300
    assert paramscale.param_to_signed_norm(300, 200, 400) == 0.0
    assert paramscale.log_to_unsigned_norm(20000, 20, 20000) == 1.0
    assert paramscale.midi_note_to_hz(69) == 440.0
    assert paramscale.midi_note_to_hz(81) == 880.0
