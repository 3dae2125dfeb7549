"""Register words used by the alternative pitch notation.

Registers, low to high: ``lowlowlow``, ``lowlow``, ``low``, ``mid1``,
``mid2``, then one or more repetitions of ``hi``. Each register maps to a
base scientific octave::

    lowlowlow  0
    lowlow     1
    low        2
    mid1       3
    mid2       4
    hi         5
    hihi       6
    hi * n     4 + n

The base octave is the scientific octave of every class except A, A# and B,
which sit one octave lower (see ``altpitch.notation``).
"""

import typing


HIGH_UNIT = "hi"

FIXED_REGISTERS: typing.Dict[str, int] = {
	"lowlowlow": 0,
	"lowlow": 1,
	"low": 2,
	"mid1": 3,
	"mid2": 4,
}

BASE_OCTAVE_TO_REGISTER: typing.Dict[int, str] = {octave: token for token, octave in FIXED_REGISTERS.items()}

# Longest first, so "lowlowlow" is not read as "low" + "lowlow".
_FIXED_BY_LENGTH: typing.List[str] = sorted(FIXED_REGISTERS, key=len, reverse=True)

_HIGHEST_FIXED_OCTAVE = max(FIXED_REGISTERS.values())


class RegisterError (ValueError):
	pass


def _count_high_units (text: str) -> int:

	"""
	Count consecutive ``hi`` units at the start of ``text``.
	"""

	count = 0
	position = 0
	step = len(HIGH_UNIT)

	while text.startswith(HIGH_UNIT, position):
		count += 1
		position += step

	return count


def split_register (text: str) -> typing.Tuple[str, str]:

	"""Split a register word off the front of ``text``.

	Scans the prefix directly rather than with a regular expression, so the
	cost is linear in the length of the input however many ``hi`` units it
	repeats.

	Returns:
		A ``(token, remainder)`` tuple.

	Raises:
		RegisterError: If ``text`` does not start with a register word.

	Example:
		```python
		split_register("hihiA#")   # → ("hihi", "A#")
		split_register("lowlowC")  # → ("lowlow", "C")
		```
	"""

	count = _count_high_units(text)

	if count:
		end = count * len(HIGH_UNIT)
		return text[:end], text[end:]

	for token in _FIXED_BY_LENGTH:
		if text.startswith(token):
			return token, text[len(token):]

	raise RegisterError(f"No register word at the start of {text!r}")


def register_base_octave (token: str) -> int:

	"""Return the base scientific octave of a complete register word.

	Raises:
		RegisterError: If ``token`` is not a register word.
	"""

	if token in FIXED_REGISTERS:
		return FIXED_REGISTERS[token]

	count = _count_high_units(token)

	if count == 0 or count * len(HIGH_UNIT) != len(token):
		raise RegisterError(f"Unknown register word: {token!r}")

	return _HIGHEST_FIXED_OCTAVE + count


def register_token (base_octave: int) -> str:

	"""Return the register word for a base scientific octave.

	Octaves above 4 are spelled as ``base_octave - 4`` repetitions of ``hi``.

	Example:
		```python
		register_token(0)  # → "lowlowlow"
		register_token(4)  # → "mid2"
		register_token(6)  # → "hihi"
		```
	"""

	if base_octave < 0:
		raise ValueError(f"No register below lowlowlow (base octave {base_octave})")

	if base_octave in BASE_OCTAVE_TO_REGISTER:
		return BASE_OCTAVE_TO_REGISTER[base_octave]

	return HIGH_UNIT * (base_octave - _HIGHEST_FIXED_OCTAVE)
