"""Pitch class definitions and the canonical sharp-only spelling codec.

Module-level helpers:
- `parse_pitch_class(text)`: Exact, case-sensitive lookup of one of the 12
  canonical spellings. Raises `PitchClassParseError` for anything else.
- `render_pitch_class(pitch_class)`: Return the canonical spelling.

Spellings: `"C"`, `"C#"`, `"D"`, `"D#"`, `"E"`, `"F"`, `"F#"`, `"G"`, `"G#"`,
`"A"`, `"A#"`, `"B"`. Flats and double accidentals are not accepted.
"""

import enum
import functools
import typing


class PitchClassParseError (ValueError):
	pass


@functools.total_ordering
class PitchClass (enum.Enum):

	"""
	One of the 12 chromatic pitch classes, ordered from C.
	"""

	C = "C"
	C_SHARP = "C#"
	D = "D"
	D_SHARP = "D#"
	E = "E"
	F = "F"
	F_SHARP = "F#"
	G = "G"
	G_SHARP = "G#"
	A = "A"
	A_SHARP = "A#"
	B = "B"


	@property
	def semitone (self) -> int:

		"""
		Chromatic index of this class (C = 0 ... B = 11).
		"""

		return _SEMITONES[self]


	@property
	def is_register_shifted (self) -> bool:

		"""
		True for A, A# and B.

		Register words change one semitone below the scientific octave
		boundary, so these three classes are named with the register above
		their scientific octave.
		"""

		return self in _REGISTER_SHIFTED


	def __lt__ (self, other: object) -> bool:

		if not isinstance(other, PitchClass):
			return NotImplemented

		return self.semitone < other.semitone


	def __str__ (self) -> str:

		return self.value


_SEMITONES: typing.Dict[PitchClass, int] = {pc: index for index, pc in enumerate(PitchClass)}

_REGISTER_SHIFTED: typing.FrozenSet[PitchClass] = frozenset({PitchClass.A, PitchClass.A_SHARP, PitchClass.B})

SPELLING_TO_PITCH_CLASS: typing.Dict[str, PitchClass] = {pc.value: pc for pc in PitchClass}


def parse_pitch_class (text: str) -> PitchClass:

	"""Return the pitch class for a canonical spelling.

	Parameters:
		text: Exact spelling, e.g. ``"C"`` or ``"F#"``.

	Raises:
		PitchClassParseError: If ``text`` is not one of the 12 spellings.

	Example:
		```python
		parse_pitch_class("F#")  # → PitchClass.F_SHARP
		parse_pitch_class("f#")  # raises PitchClassParseError
		```
	"""

	if text not in SPELLING_TO_PITCH_CLASS:
		raise PitchClassParseError(f"Unknown pitch class: {text!r}. Expected e.g. 'C', 'F#', 'B'.")

	return SPELLING_TO_PITCH_CLASS[text]


def render_pitch_class (pitch_class: PitchClass) -> str:

	"""
	Return the canonical spelling of a pitch class.
	"""

	return pitch_class.value
