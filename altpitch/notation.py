"""Scientific and alternative pitch notation.

Two surface notations describe the same ``Pitch``:

- **Scientific**: class spelling followed by the octave number, e.g. ``"C#4"``.
  Each octave begins at C; octave 4 holds middle C.
- **Alternative**: a register word followed by the class spelling, e.g.
  ``"mid2C#"`` or ``"hihiA"``. Register boundaries sit one semitone below the
  scientific ones, so A, A# and B take the register word of the *next*
  scientific octave: ``A4`` is ``"hiA"`` while ``C4`` is ``"mid2C"``.

``parse_notation()`` detects which notation a string uses. The two grammars
accept disjoint languages (a digit suffix versus a register-word prefix), so
at most one can match.

Example:
	```python
	result = parse_notation("hiA")
	result.format                    # → NotationFormat.ALTERNATIVE
	render_scientific(result.pitch)  # → "A4"

	convert("C#4")                   # → "mid2C#"
	```
"""

import dataclasses
import enum
import re
import typing

import altpitch.pitch_class
import altpitch.registers


MAX_OCTAVE = 255

# ASCII digits only; no sign, no leading zero except "0" itself.
_SCIENTIFIC_PATTERN = re.compile(r"(?P<pitch_class>[A-G]#?)(?P<octave>0|[1-9][0-9]*)")


class NotationParseError (ValueError):
	pass


class NotationFormat (enum.Enum):

	"""
	Which surface grammar produced, or should render, a pitch.
	"""

	SCIENTIFIC = "scientific"
	ALTERNATIVE = "alternative"


	def other (self) -> "NotationFormat":

		"""
		Return the opposite format.
		"""

		if self is NotationFormat.SCIENTIFIC:
			return NotationFormat.ALTERNATIVE

		return NotationFormat.SCIENTIFIC


@dataclasses.dataclass(frozen=True, order=True)
class Pitch:

	"""
	A concrete pitch in scientific octave numbering.

	Ordered by octave, then by pitch class. The octave is limited to
	0-255 inclusive.
	"""

	octave: int
	pitch_class: altpitch.pitch_class.PitchClass

	def __post_init__ (self) -> None:
		if not isinstance(self.pitch_class, altpitch.pitch_class.PitchClass):
			raise ValueError(f"pitch_class must be a PitchClass, got {self.pitch_class!r}")
		if not isinstance(self.octave, int) or isinstance(self.octave, bool):
			raise ValueError(f"octave must be an integer, got {self.octave!r}")
		if not 0 <= self.octave <= MAX_OCTAVE:
			raise ValueError(f"octave must be between 0 and {MAX_OCTAVE}, got {self.octave}")

	def __str__ (self) -> str:
		return render_scientific(self)


@dataclasses.dataclass(frozen=True)
class PitchWithFormat:

	"""
	A parsed pitch tagged with the notation it was written in.
	"""

	pitch: Pitch
	format: NotationFormat


def parse_scientific (text: str) -> Pitch:

	"""Parse scientific notation such as ``"C#4"``.

	Raises:
		NotationParseError: If ``text`` is not exactly a class spelling
			followed by an octave in 0-255.
	"""

	match = _SCIENTIFIC_PATTERN.fullmatch(text)

	if match is None:
		raise NotationParseError(f"Not scientific pitch notation: {text!r}")

	digits = match.group("octave")

	# No octave in range has more digits than MAX_OCTAVE.
	if len(digits) > len(str(MAX_OCTAVE)):
		raise NotationParseError(f"Octave with {len(digits)} digits out of range")

	octave = int(digits)

	if octave > MAX_OCTAVE:
		raise NotationParseError(f"Octave {octave} out of range in {text!r}")

	try:
		pitch_class = altpitch.pitch_class.parse_pitch_class(match.group("pitch_class"))
	except altpitch.pitch_class.PitchClassParseError as exc:
		raise NotationParseError(f"Not scientific pitch notation: {text!r}") from exc

	return Pitch(octave=octave, pitch_class=pitch_class)


def parse_alternative (text: str) -> Pitch:

	"""Parse alternative notation such as ``"mid2C#"`` or ``"hihiA"``.

	The register word gives a base octave. A, A# and B sit one octave
	below it; every other class sits at the base octave.

	Raises:
		NotationParseError: If ``text`` is not a register word followed by
			a class spelling, or if the resulting octave falls outside
			0-255 (``"lowlowlowA"`` has no octave to borrow from).
	"""

	try:
		token, remainder = altpitch.registers.split_register(text)
		pitch_class = altpitch.pitch_class.parse_pitch_class(remainder)
	except (altpitch.registers.RegisterError, altpitch.pitch_class.PitchClassParseError) as exc:
		raise NotationParseError(f"Not alternative pitch notation: {text!r}") from exc

	base_octave = altpitch.registers.register_base_octave(token)

	octave = base_octave - 1 if pitch_class.is_register_shifted else base_octave

	if octave < 0:
		raise NotationParseError(f"No register below lowlowlow for {pitch_class} in {text!r}")

	if octave > MAX_OCTAVE:
		raise NotationParseError(f"Octave {octave} out of range in {text!r}")

	return Pitch(octave=octave, pitch_class=pitch_class)


def render_scientific (pitch: Pitch) -> str:

	"""
	Render a pitch in scientific notation, e.g. ``"C#4"``.
	"""

	return f"{altpitch.pitch_class.render_pitch_class(pitch.pitch_class)}{pitch.octave}"


def render_alternative (pitch: Pitch) -> str:

	"""Render a pitch in alternative notation, e.g. ``"mid2C#"``.

	Example:
		```python
		render_alternative(Pitch(0, PitchClass.A))  # → "lowlowA"
		render_alternative(Pitch(5, PitchClass.A))  # → "hihiA"
		```
	"""

	base_octave = pitch.octave + 1 if pitch.pitch_class.is_register_shifted else pitch.octave

	return altpitch.registers.register_token(base_octave) + altpitch.pitch_class.render_pitch_class(pitch.pitch_class)


_PARSERS: typing.List[typing.Tuple[NotationFormat, typing.Callable[[str], Pitch]]] = [
	(NotationFormat.SCIENTIFIC, parse_scientific),
	(NotationFormat.ALTERNATIVE, parse_alternative),
]

_RENDERERS: typing.Dict[NotationFormat, typing.Callable[[Pitch], str]] = {
	NotationFormat.SCIENTIFIC: render_scientific,
	NotationFormat.ALTERNATIVE: render_alternative,
}


def parse_notation (text: str) -> PitchWithFormat:

	"""Parse a pitch in either notation and report which one it used.

	Scientific notation is tried first, then alternative notation. The
	reason a grammar declined is not reported; any failure raises the same
	error.

	Raises:
		NotationParseError: If ``text`` matches neither notation.
	"""

	for notation_format, parser in _PARSERS:

		try:
			pitch = parser(text)
		except NotationParseError:
			continue

		return PitchWithFormat(pitch=pitch, format=notation_format)

	raise NotationParseError(f"Invalid pitch: {text!r}")


def parse_pitch (text: str) -> Pitch:

	"""
	Parse a pitch in either notation, discarding the detected format.
	"""

	return parse_notation(text).pitch


def render (pitch: Pitch, notation_format: NotationFormat) -> str:

	"""
	Render a pitch in the given notation.
	"""

	return _RENDERERS[notation_format](pitch)


def convert (text: str) -> str:

	"""Convert a pitch to the notation it is *not* written in.

	Example:
		```python
		convert("A0")       # → "lowlowA"
		convert("lowlowA")  # → "A0"
		```
	"""

	result = parse_notation(text)

	return render(result.pitch, result.format.other())
