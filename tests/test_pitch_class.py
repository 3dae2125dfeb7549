import pytest

import altpitch.pitch_class


PitchClass = altpitch.pitch_class.PitchClass


PITCH_CLASS_CASES = [
	(PitchClass.C, "C"),
	(PitchClass.C_SHARP, "C#"),
	(PitchClass.D, "D"),
	(PitchClass.D_SHARP, "D#"),
	(PitchClass.E, "E"),
	(PitchClass.F, "F"),
	(PitchClass.F_SHARP, "F#"),
	(PitchClass.G, "G"),
	(PitchClass.G_SHARP, "G#"),
	(PitchClass.A, "A"),
	(PitchClass.A_SHARP, "A#"),
	(PitchClass.B, "B"),
]


def test_parse_pitch_class () -> None:

	"""Every canonical spelling parses to its class."""

	for pitch_class, spelling in PITCH_CLASS_CASES:
		assert altpitch.pitch_class.parse_pitch_class(spelling) is pitch_class


def test_render_pitch_class () -> None:

	"""Rendering returns the canonical spelling, and str() matches it."""

	for pitch_class, spelling in PITCH_CLASS_CASES:
		assert altpitch.pitch_class.render_pitch_class(pitch_class) == spelling
		assert str(pitch_class) == spelling


def test_round_trip () -> None:

	"""parse(render(pc)) returns pc for all 12 classes."""

	assert len(list(PitchClass)) == 12

	for pitch_class in PitchClass:
		rendered = altpitch.pitch_class.render_pitch_class(pitch_class)
		assert altpitch.pitch_class.parse_pitch_class(rendered) is pitch_class


def test_lowercase_rejected () -> None:

	"""Spellings are case-sensitive."""

	for _, spelling in PITCH_CLASS_CASES:
		with pytest.raises(altpitch.pitch_class.PitchClassParseError):
			altpitch.pitch_class.parse_pitch_class(spelling.lower())


def test_invalid_spellings () -> None:

	"""Unknown letters, flats, double sharps, whitespace and empty input all fail."""

	for text in ["", "H", "Db", "C##", "E#x", " C", "C ", "#", "CC"]:
		with pytest.raises(altpitch.pitch_class.PitchClassParseError):
			altpitch.pitch_class.parse_pitch_class(text)


def test_parse_error_is_value_error () -> None:

	"""Callers that only expect ValueError still catch parse failures."""

	with pytest.raises(ValueError):
		altpitch.pitch_class.parse_pitch_class("x")


def test_chromatic_order () -> None:

	"""Classes are ordered chromatically from C, not alphabetically."""

	ordered = [pitch_class for pitch_class, _ in PITCH_CLASS_CASES]

	assert sorted(reversed(ordered)) == ordered
	assert PitchClass.B > PitchClass.C
	assert PitchClass.C_SHARP < PitchClass.D
	assert PitchClass.A <= PitchClass.A
	assert [pc.semitone for pc in ordered] == list(range(12))


def test_register_shifted_classes () -> None:

	"""Only A, A# and B take the register word of the next octave up."""

	shifted = {pc for pc in PitchClass if pc.is_register_shifted}

	assert shifted == {PitchClass.A, PitchClass.A_SHARP, PitchClass.B}
