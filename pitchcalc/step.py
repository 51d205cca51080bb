"""The central pitch unit.

A `Step` is a continuous semitone value using the MIDI note numbering: Step 60
is middle C (C4), Step 69 is A4 (440 Hz), and fractional steps lie between
equal-tempered semitones. Every other unit is reached from a Step with one
method call, and converted back with one class method:

    step = Step(69)
    step.hz()                     # 440.0
    step.to_letter_octave()       # LetterOctave(letter=<Letter.A: 9>, octave=4)
    Step.from_hz(Hz(220.0))       # Step(57.0)

Arithmetic (``+ - * / %`` and unary ``-``) works on the raw value and returns
a new Step. The right-hand side may be another Step or a plain number, so
``Step(60) + 12`` transposes up an octave. Division by zero follows IEEE
arithmetic (an infinity or NaN) and never raises; ``%`` is the truncated
remainder, taking the sign of the dividend.

Comparison operators follow float semantics: with NaN on either side they all
return False. ``partial_cmp()`` reports that case as ``None`` and ``cmp()``
raises `ValueError` for it.
"""

import dataclasses
import typing

import pitchcalc.calc
import pitchcalc.coerce
import pitchcalc.constants
import pitchcalc.letter
import pitchcalc.units


_T = typing.TypeVar("_T")


def _expect (value: typing.Any, expected: typing.Type[_T], method: str) -> _T:

	"""Check that a unit wrapper of the right type was passed to a ``from_*`` method."""

	if not isinstance(value, expected):
		raise TypeError(
			f"Step.{method}() expects {expected.__name__}, got {type(value).__name__}"
		)

	return value


@dataclasses.dataclass(frozen=True, eq=False, repr=False)
class Step:

	"""
	Pitch as a MIDI-style continuous semitone value.

	Construction does not validate: any float (including NaN and the
	infinities) can be wrapped. Conversions from such values return NaN or an
	infinity rather than raising.
	"""

	value: float


	def __post_init__ (self) -> None:

		object.__setattr__(self, "value", float(self.value))


	# ─── Construction from other units ────────────────────────────────────────

	@classmethod
	def from_hz (cls, hz: pitchcalc.units.Hz) -> "Step":

		"""Return the Step of a frequency."""

		hz = _expect(hz, pitchcalc.units.Hz, "from_hz")

		return cls(pitchcalc.calc.step_from_hz(hz.hz()))


	@classmethod
	def from_mel (cls, mel: pitchcalc.units.Mel) -> "Step":
		mel = _expect(mel, pitchcalc.units.Mel, "from_mel")
		return cls(pitchcalc.calc.step_from_mel(mel.mel()))


	@classmethod
	def from_perc (cls, perc: pitchcalc.units.Perc) -> "Step":
		perc = _expect(perc, pitchcalc.units.Perc, "from_perc")
		return cls(pitchcalc.calc.step_from_perc(perc.perc()))


	@classmethod
	def from_scaled_perc (cls, scaled_perc: pitchcalc.units.ScaledPerc) -> "Step":

		"""Return the Step of a scaled percentage, undoing the weight it carries."""

		scaled_perc = _expect(scaled_perc, pitchcalc.units.ScaledPerc, "from_scaled_perc")

		return cls(pitchcalc.calc.step_from_scaled_perc(scaled_perc.perc, scaled_perc.weight))


	@classmethod
	def from_letter_octave (cls, letter_octave: pitchcalc.letter.LetterOctave) -> "Step":
		letter_octave = _expect(letter_octave, pitchcalc.letter.LetterOctave, "from_letter_octave")
		return cls(pitchcalc.calc.step_from_letter_octave(letter_octave.letter, letter_octave.octave))


	@classmethod
	def from_name (cls, name: str) -> "Step":

		"""Return the Step of a note name such as ``"A4"`` or ``"C#3"``."""

		return cls.from_letter_octave(pitchcalc.letter.letter_octave_from_name(name))


	@classmethod
	def from_int (cls, value: int, kind: pitchcalc.coerce.IntKind = pitchcalc.coerce.I64) -> "Step":

		"""Widen an integer of the given kind (e.g. a MIDI note number) to a Step.

		Raises:
			TypeError: If ``value`` is not an integer.
			ValueError: If ``value`` is outside the range of ``kind``.

		Example:
			```python
			Step.from_int(60, pitchcalc.coerce.U8)   # → Step(60.0)
			```
		"""

		return cls(pitchcalc.coerce.float_from_int(value, kind))


	# ─── Conversion to other units ────────────────────────────────────────────

	def step (self) -> float:

		"""Return the raw Step value."""

		return self.value


	def hz (self) -> float:

		"""Return the equivalent frequency in Hz."""

		return pitchcalc.calc.hz_from_step(self.value)


	def to_hz (self) -> pitchcalc.units.Hz:
		return pitchcalc.units.Hz(self.hz())


	def letter_octave (self) -> typing.Tuple[pitchcalc.letter.Letter, int]:

		"""Return the closest ``(Letter, octave)``.

		The Step is rounded to the nearest semitone first, with exact halves
		rounding up: Step 60.5 is C#4, Step -0.5 is C-1.
		"""

		return pitchcalc.calc.letter_octave_from_step(self.value)


	def letter (self) -> pitchcalc.letter.Letter:

		"""Return the closest Letter."""

		letter, _ = self.letter_octave()
		return letter


	def octave (self) -> pitchcalc.letter.Octave:

		"""Return the closest Octave."""

		_, octave = self.letter_octave()
		return pitchcalc.letter.Octave(octave)


	def to_letter_octave (self) -> pitchcalc.letter.LetterOctave:
		letter, octave = self.letter_octave()
		return pitchcalc.letter.LetterOctave(letter, pitchcalc.letter.Octave(octave))


	def mel (self) -> float:

		"""Return the Mel value."""

		return pitchcalc.calc.mel_from_step(self.value)


	def to_mel (self) -> pitchcalc.units.Mel:
		return pitchcalc.units.Mel(self.mel())


	def perc (self) -> float:

		"""Return the linear percentage of the human hearing range."""

		return pitchcalc.calc.perc_from_step(self.value)


	def to_perc (self) -> pitchcalc.units.Perc:
		return pitchcalc.units.Perc(self.perc())


	def scaled_perc_with_weight (self, weight: pitchcalc.calc.ScaleWeight) -> float:

		"""Return the percentage of the hearing range scaled by ``weight``.

		``IDENTITY_SCALE_WEIGHT`` gives the same value as ``perc()``.
		"""

		return pitchcalc.calc.scaled_perc_from_step(self.value, weight)


	def scaled_perc (self) -> float:

		"""Return the percentage of the hearing range scaled by ``DEFAULT_SCALE_WEIGHT``."""

		return self.scaled_perc_with_weight(pitchcalc.constants.DEFAULT_SCALE_WEIGHT)


	def to_scaled_perc_with_weight (self, weight: pitchcalc.calc.ScaleWeight) -> pitchcalc.units.ScaledPerc:
		return pitchcalc.units.ScaledPerc(self.scaled_perc_with_weight(weight), weight)


	def to_scaled_perc (self) -> pitchcalc.units.ScaledPerc:
		return self.to_scaled_perc_with_weight(pitchcalc.constants.DEFAULT_SCALE_WEIGHT)


	def to_int (self, kind: pitchcalc.coerce.IntKind = pitchcalc.coerce.I64) -> int:

		"""Narrow to an integer of the given kind.

		Truncates toward zero, saturates at the kind's bounds and maps NaN to
		0, so this never fails.

		Example:
			```python
			Step(60.7).to_int(pitchcalc.coerce.U8)    # → 60
			Step(300.0).to_int(pitchcalc.coerce.U8)   # → 255
			```
		"""

		return pitchcalc.coerce.int_from_float(self.value, kind)


	def __int__ (self) -> int:
		return self.to_int()


	def __float__ (self) -> float:
		return self.value


	# ─── Arithmetic ───────────────────────────────────────────────────────────

	@staticmethod
	def _operand (other: typing.Any) -> typing.Optional[float]:

		"""Return the raw value of a Step or plain number, or None for anything else."""

		if isinstance(other, Step):
			return other.value

		if isinstance(other, (int, float)) and not isinstance(other, bool):
			return float(other)

		return None


	def __add__ (self, other: typing.Any) -> "Step":
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		return Step(self.value + rhs)


	def __radd__ (self, other: typing.Any) -> "Step":
		lhs = self._operand(other)
		if lhs is None:
			return NotImplemented
		return Step(lhs + self.value)


	def __sub__ (self, other: typing.Any) -> "Step":
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		return Step(self.value - rhs)


	def __rsub__ (self, other: typing.Any) -> "Step":
		lhs = self._operand(other)
		if lhs is None:
			return NotImplemented
		return Step(lhs - self.value)


	def __mul__ (self, other: typing.Any) -> "Step":
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		return Step(self.value * rhs)


	def __rmul__ (self, other: typing.Any) -> "Step":
		lhs = self._operand(other)
		if lhs is None:
			return NotImplemented
		return Step(lhs * self.value)


	def __truediv__ (self, other: typing.Any) -> "Step":
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		return Step(pitchcalc.calc.divide(self.value, rhs))


	def __rtruediv__ (self, other: typing.Any) -> "Step":
		lhs = self._operand(other)
		if lhs is None:
			return NotImplemented
		return Step(pitchcalc.calc.divide(lhs, self.value))


	def __mod__ (self, other: typing.Any) -> "Step":
		rhs = self._operand(other)
		if rhs is None:
			return NotImplemented
		return Step(pitchcalc.calc.remainder(self.value, rhs))


	def __rmod__ (self, other: typing.Any) -> "Step":
		lhs = self._operand(other)
		if lhs is None:
			return NotImplemented
		return Step(pitchcalc.calc.remainder(lhs, self.value))


	def __neg__ (self) -> "Step":
		return Step(-self.value)


	def __pos__ (self) -> "Step":
		return self


	def __abs__ (self) -> "Step":
		return Step(abs(self.value))


	# ─── Equality and ordering ────────────────────────────────────────────────

	def __eq__ (self, other: object) -> bool:
		if not isinstance(other, Step):
			return NotImplemented
		return self.value == other.value


	def __hash__ (self) -> int:
		return hash(self.value)


	def __lt__ (self, other: "Step") -> bool:
		if not isinstance(other, Step):
			return NotImplemented
		return self.value < other.value


	def __le__ (self, other: "Step") -> bool:
		if not isinstance(other, Step):
			return NotImplemented
		return self.value <= other.value


	def __gt__ (self, other: "Step") -> bool:
		if not isinstance(other, Step):
			return NotImplemented
		return self.value > other.value


	def __ge__ (self, other: "Step") -> bool:
		if not isinstance(other, Step):
			return NotImplemented
		return self.value >= other.value


	def partial_cmp (self, other: "Step") -> typing.Optional[int]:

		"""Compare two Steps: -1, 0 or 1, or None if either is NaN.

		Raises:
			TypeError: If ``other`` is not a Step.
		"""

		if not isinstance(other, Step):
			raise TypeError(f"Cannot compare Step with {type(other).__name__}")

		if self.value < other.value:
			return -1
		if self.value > other.value:
			return 1
		if self.value == other.value:
			return 0
		return None


	def cmp (self, other: "Step") -> int:

		"""Compare two Steps as a total order: -1, 0 or 1.

		Raises:
			TypeError: If ``other`` is not a Step.
			ValueError: If either Step is NaN, which has no place in the order.
		"""

		result = self.partial_cmp(other)

		if result is None:
			raise ValueError(f"Cannot order {self!r} and {other!r}: NaN is unordered")

		return result


	def __repr__ (self) -> str:
		return f"Step({self.value!r})"
