"""Pitch classes and note names.

`Letter` is the twelve-way cyclic pitch class (C = 0 ... B = 11), `Octave` is
a plain integer octave number, and `LetterOctave` pairs them into a note name
such as ``C#4``. Octave numbering is scientific pitch notation: C4 is middle C
and octave -1 holds Steps 0-11.

Module-level constants:
- `NOTE_NAME_TO_LETTER`: Maps note names (e.g. ``"C"``, ``"F#"``, ``"Bb"``) to `Letter` members
- `LETTER_TO_NOTE_NAME`: Sharp spelling for each pitch class

Module-level helpers:
- `letter_from_name(name)`: Validate a pitch class name and return its `Letter`.
- `letter_octave_from_name(name)`: Parse a full note name such as ``"Bb3"``.
"""

import dataclasses
import enum
import re
import typing


Octave = typing.NewType("Octave", int)


@enum.unique
class Letter (enum.Enum):

	"""
	The twelve chromatic pitch classes, valued as semitones above C.

	Letters are not integers: use ``letter.value`` for the semitone offset.
	"""

	C = 0
	Cs = 1
	D = 2
	Ds = 3
	E = 4
	F = 5
	Fs = 6
	G = 7
	Gs = 8
	A = 9
	As = 10
	B = 11


	@property
	def name_text (self) -> str:

		"""Return the conventional sharp spelling, e.g. ``"C#"``."""

		return LETTER_TO_NOTE_NAME[self.value]


LETTER_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]

NOTE_NAME_TO_LETTER: typing.Dict[str, Letter] = {
	"C": Letter.C,
	"C#": Letter.Cs,
	"Db": Letter.Cs,
	"D": Letter.D,
	"D#": Letter.Ds,
	"Eb": Letter.Ds,
	"E": Letter.E,
	"F": Letter.F,
	"F#": Letter.Fs,
	"Gb": Letter.Fs,
	"G": Letter.G,
	"G#": Letter.Gs,
	"Ab": Letter.Gs,
	"A": Letter.A,
	"A#": Letter.As,
	"Bb": Letter.As,
	"B": Letter.B,
}

_NOTE_NAME_PATTERN = re.compile(r"^([A-Ga-g][#b]?)(-?\d+)$")


@dataclasses.dataclass(frozen=True)
class LetterOctave:

	"""
	A discrete note: pitch class plus octave.
	"""

	letter: Letter
	octave: Octave


	def __str__ (self) -> str:
		return f"{self.letter.name_text}{self.octave}"


def letter_from_name (name: str) -> Letter:

	"""Validate a pitch class name and return its `Letter`.

	Parameters:
		name: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``).

	Raises:
		ValueError: If the name is not recognised.

	Example:
		```python
		letter_from_name("F#")  # → Letter.Fs
		letter_from_name("Bb")  # → Letter.As
		```
	"""

	if name not in NOTE_NAME_TO_LETTER:
		raise ValueError(
			f"Unknown note name: {name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return NOTE_NAME_TO_LETTER[name]


def letter_octave_from_name (name: str) -> LetterOctave:

	"""Parse a note name with octave, e.g. ``"C#4"`` or ``"Bb-1"``.

	The letter is case-insensitive, the accidental is ``#`` or ``b``.

	Raises:
		ValueError: If the name cannot be parsed.
	"""

	match = _NOTE_NAME_PATTERN.match(name.strip())

	if match is None:
		raise ValueError(
			f"Invalid note name: {name!r}. Expected e.g. 'A4', 'C#3', 'Bb-1'."
		)

	pitch_class, octave = match.groups()
	letter = letter_from_name(pitch_class[0].upper() + pitch_class[1:])

	return LetterOctave(letter, Octave(int(octave)))
