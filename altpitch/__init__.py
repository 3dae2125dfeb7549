
"""
altpitch - convert pitch names between scientific and register-word notation.

Two notations describe the same pitch:

- **Scientific pitch notation.** Class spelling plus octave number, where
  each octave begins at C and octave 4 holds middle C: ``C4``, ``F#2``,
  ``A#0``.
- **Alternative (register-word) notation.** A register word plus class
  spelling: ``lowlowlow``, ``lowlow``, ``low``, ``mid1``, ``mid2``, then
  ``hi``, ``hihi``, ``hihihi`` and so on upward. Register words change one
  semitone below the scientific octave boundary, so A, A# and B carry the
  register word of the next octave up: ``C4`` is ``mid2C`` but ``A4`` is
  ``hiA``.

Only sharps are spelled (``C#``, never ``Db``) and spellings are
case-sensitive. Octaves run from 0 to 255.

Minimal example:

    ```python
    import altpitch

    result = altpitch.parse_notation("hiA")
    result.format                                   # NotationFormat.ALTERNATIVE
    altpitch.render_scientific(result.pitch)        # "A4"

    altpitch.convert("C#4")                         # "mid2C#"
    ```

From the command line::

    python -m altpitch C#4        # mid2C#
    echo lowlowA | python -m altpitch   # A0

Package-level exports: ``Pitch``, ``PitchClass``, ``NotationFormat``,
``PitchWithFormat``, ``parse_pitch_class``, ``render_pitch_class``,
``parse_notation``, ``parse_pitch``, ``render_scientific``,
``render_alternative``, ``convert`` and the error types
``PitchClassParseError`` and ``NotationParseError``.
"""

import altpitch.notation
import altpitch.pitch_class


PitchClass = altpitch.pitch_class.PitchClass
PitchClassParseError = altpitch.pitch_class.PitchClassParseError
parse_pitch_class = altpitch.pitch_class.parse_pitch_class
render_pitch_class = altpitch.pitch_class.render_pitch_class

Pitch = altpitch.notation.Pitch
NotationFormat = altpitch.notation.NotationFormat
PitchWithFormat = altpitch.notation.PitchWithFormat
NotationParseError = altpitch.notation.NotationParseError
parse_notation = altpitch.notation.parse_notation
parse_pitch = altpitch.notation.parse_pitch
render_scientific = altpitch.notation.render_scientific
render_alternative = altpitch.notation.render_alternative
convert = altpitch.notation.convert
