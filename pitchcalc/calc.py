"""Scalar pitch conversion functions.

Every function here maps a raw ``float`` to a raw ``float`` (or, for letters,
a ``(Letter, int)`` pair). The wrapper types in ``pitchcalc.step`` and
``pitchcalc.units`` are built on top of these.

Forward conversions take a Step scalar:

- ``hz_from_step(step)`` - equal temperament, ``A4_STEP`` maps to ``TUNING_PITCH_A4``
- ``mel_from_step(step)`` - via Hz, using ``2595 * log10(1 + hz / 700)``
- ``perc_from_step(step)`` - linear position of Hz within ``[MIN_HZ, MAX_HZ]``, 0-100
- ``scaled_perc_from_step(step, weight)`` - Perc raised to ``1 / weight``
- ``letter_octave_from_step(step)`` - nearest semitone, rounding half up

Inverse conversions (``step_from_hz``, ``hz_from_mel``, ...) undo these.

Python raises on float overflow and division by zero where IEEE arithmetic
would return an infinity or NaN. The helpers in this module return the IEEE
result instead, so no finite or non-finite input raises. Inputs outside a
function's musical domain (zero or negative Hz, NaN) give NaN or an infinity
rather than an error; validating them is the caller's job.
"""

import math
import typing

import pitchcalc.coerce
import pitchcalc.constants
import pitchcalc.letter


ScaleWeight = float


# ─── IEEE helpers ─────────────────────────────────────────────────────────────


def _power (base: float, exponent: float) -> float:

	"""``base ** exponent`` for a non-negative base, saturating instead of raising."""

	try:
		return base ** exponent
	except OverflowError:
		return math.inf
	except ZeroDivisionError:
		# 0.0 raised to a negative power
		return math.inf


def _log (value: float, log_fn: typing.Callable[[float], float]) -> float:

	"""Apply a logarithm with IEEE results for zero and negative input."""

	if math.isnan(value) or value < 0.0:
		return math.nan
	if value == 0.0:
		return -math.inf
	return log_fn(value)


def _signed_power (fraction: float, exponent: float) -> float:

	"""Raise ``|fraction|`` to ``exponent`` and restore the sign of ``fraction``."""

	if math.isnan(fraction):
		return math.nan
	return math.copysign(_power(abs(fraction), exponent), fraction)


def _reciprocal (value: float) -> float:
	if value == 0.0:
		return math.copysign(math.inf, value)
	return 1.0 / value


def divide (a: float, b: float) -> float:

	"""Divide with IEEE semantics: ``x / 0`` is a signed infinity, ``0 / 0`` is NaN."""

	try:
		return a / b
	except ZeroDivisionError:
		if math.isnan(a) or a == 0.0:
			return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)


def remainder (a: float, b: float) -> float:

	"""Truncated remainder (the result takes the sign of ``a``).

	A zero divisor or an infinite dividend gives NaN.

	Example:
		```python
		remainder(7.0, 3.0)    # → 1.0
		remainder(-7.0, 3.0)   # → -1.0
		```
	"""

	try:
		return math.fmod(a, b)
	except ValueError:
		return math.nan


# ─── Hz ───────────────────────────────────────────────────────────────────────


def hz_from_step (step: float) -> float:

	"""Return the frequency in Hz of a Step value.

	Each step is one equal-tempered semitone and twelve steps double the
	frequency. Steps too high to represent saturate to ``inf``.

	Example:
		```python
		hz_from_step(69.0)   # → 440.0
		hz_from_step(57.0)   # → 220.0
		```
	"""

	semitones = step - pitchcalc.constants.A4_STEP
	octaves = semitones / pitchcalc.constants.SEMITONES_PER_OCTAVE

	return pitchcalc.constants.TUNING_PITCH_A4 * _power(2.0, octaves)


def step_from_hz (hz: float) -> float:

	"""Return the Step value of a frequency. Zero Hz gives ``-inf``, negative Hz gives NaN."""

	octaves = _log(hz / pitchcalc.constants.TUNING_PITCH_A4, math.log2)

	return pitchcalc.constants.A4_STEP + octaves * pitchcalc.constants.SEMITONES_PER_OCTAVE


# ─── Mel ──────────────────────────────────────────────────────────────────────


def mel_from_hz (hz: float) -> float:
	return pitchcalc.constants.MEL_FACTOR * _log(1.0 + hz / pitchcalc.constants.MEL_BREAK_HZ, math.log10)


def hz_from_mel (mel: float) -> float:
	return pitchcalc.constants.MEL_BREAK_HZ * (_power(10.0, mel / pitchcalc.constants.MEL_FACTOR) - 1.0)


def mel_from_step (step: float) -> float:

	"""Return the Mel value of a Step (computed through its frequency)."""

	return mel_from_hz(hz_from_step(step))


def step_from_mel (mel: float) -> float:
	return step_from_hz(hz_from_mel(mel))


# ─── Perc ─────────────────────────────────────────────────────────────────────


def perc_from_hz (hz: float) -> float:

	"""Return the position of ``hz`` within the hearing range as a percentage.

	``MIN_HZ`` is 0 and ``MAX_HZ`` is 100. Frequencies outside the range give
	values below 0 or above 100; they are not clamped.
	"""

	span = pitchcalc.constants.MAX_HZ - pitchcalc.constants.MIN_HZ

	return pitchcalc.constants.PERC_SCALE * (hz - pitchcalc.constants.MIN_HZ) / span


def hz_from_perc (perc: float) -> float:

	span = pitchcalc.constants.MAX_HZ - pitchcalc.constants.MIN_HZ

	return pitchcalc.constants.MIN_HZ + span * perc / pitchcalc.constants.PERC_SCALE


def perc_from_step (step: float) -> float:
	return perc_from_hz(hz_from_step(step))


def step_from_perc (perc: float) -> float:
	return step_from_hz(hz_from_perc(perc))


# ─── ScaledPerc ───────────────────────────────────────────────────────────────


def scaled_perc_from_perc (perc: float, weight: ScaleWeight) -> float:

	"""Apply a weight to a percentage.

	The percentage is normalised to a fraction, raised to ``1 / weight`` and
	scaled back to 0-100. Weights above ``IDENTITY_SCALE_WEIGHT`` stretch the
	low end of the range, which is where most musical pitches sit when
	measured linearly in Hz.

	Negative percentages (below ``MIN_HZ``) keep their sign, so the mapping
	stays monotonic over the whole real line.

	Parameters:
		perc: Linear percentage from ``perc_from_hz``.
		weight: Positive scale weight. ``IDENTITY_SCALE_WEIGHT`` returns ``perc`` unchanged.
	"""

	fraction = perc / pitchcalc.constants.PERC_SCALE

	return pitchcalc.constants.PERC_SCALE * _signed_power(fraction, _reciprocal(weight))


def perc_from_scaled_perc (scaled_perc: float, weight: ScaleWeight) -> float:

	"""Undo ``scaled_perc_from_perc`` for the same weight."""

	fraction = scaled_perc / pitchcalc.constants.PERC_SCALE

	return pitchcalc.constants.PERC_SCALE * _signed_power(fraction, weight)


def scaled_perc_from_step (step: float, weight: ScaleWeight) -> float:
	return scaled_perc_from_perc(perc_from_step(step), weight)


def step_from_scaled_perc (scaled_perc: float, weight: ScaleWeight) -> float:
	return step_from_perc(perc_from_scaled_perc(scaled_perc, weight))


# ─── Letter / Octave ──────────────────────────────────────────────────────────


def round_half_up (step: float) -> int:

	"""Round a Step to the nearest semitone, with exact halves rounding up.

	Non-finite values saturate through the I32 integer coercion, so NaN
	becomes 0 and the infinities become the I32 bounds.

	Example:
		```python
		round_half_up(60.5)    # → 61
		round_half_up(-60.5)   # → -60
		```
	"""

	if not math.isfinite(step):
		return pitchcalc.coerce.int_from_float(step, pitchcalc.coerce.I32)

	rounded = math.floor(step)

	if step - rounded >= 0.5:
		rounded += 1

	return pitchcalc.coerce.int_from_float(float(rounded), pitchcalc.coerce.I32)


def letter_octave_from_step (step: float) -> typing.Tuple[pitchcalc.letter.Letter, int]:

	"""Return the nearest ``(Letter, octave)`` for a Step.

	Octaves follow scientific pitch notation, so Step 60 is ``(C, 4)`` and
	Step 69 is ``(A, 4)``. Fractional steps round half up (see
	``round_half_up``).
	"""

	rounded = round_half_up(step)
	semitones = pitchcalc.constants.SEMITONES_PER_OCTAVE

	letter = pitchcalc.letter.Letter(rounded % semitones)
	octave = rounded // semitones - 1

	return letter, octave


def step_from_letter_octave (letter: pitchcalc.letter.Letter, octave: int) -> float:

	"""Return the Step value of a letter and octave, e.g. ``(A, 4)`` → ``69.0``."""

	return float((octave + 1) * pitchcalc.constants.SEMITONES_PER_OCTAVE + letter.value)
