import json
import math

import pytest

import pitchcalc
import pitchcalc.serialization


def test_step_serializes_as_number () -> None:

	"""A Step is a single JSON number."""

	assert pitchcalc.serialization.to_json(pitchcalc.Step(60.5)) == "60.5"
	assert pitchcalc.serialization.to_data(pitchcalc.Step(60)) == 60.0


def test_step_round_trip_is_exact () -> None:

	"""The raw value survives serialization bit-for-bit."""

	for value in [0.1 + 0.2, -1e-300, 1.0 / 3.0, 69.0, 1e300]:
		text = pitchcalc.serialization.to_json(pitchcalc.Step(value))
		assert pitchcalc.serialization.from_json(text, pitchcalc.Step).step() == value


def test_non_finite_step_round_trip () -> None:

	"""NaN and infinities use the json module's extended tokens."""

	text = pitchcalc.serialization.to_json(pitchcalc.Step(math.nan))

	assert text == "NaN"
	assert math.isnan(pitchcalc.serialization.from_json(text, pitchcalc.Step).step())
	assert pitchcalc.serialization.from_json("-Infinity", pitchcalc.Step) == pitchcalc.Step(-math.inf)


def test_scalar_units_round_trip () -> None:

	"""Hz, Mel and Perc serialize to numbers and back."""

	for value in [pitchcalc.Hz(440.0), pitchcalc.Mel(549.6), pitchcalc.Perc(2.1)]:
		text = pitchcalc.serialization.to_json(value)
		assert pitchcalc.serialization.from_json(text, type(value)) == value


def test_scaled_perc_record () -> None:

	"""ScaledPerc serializes as a record carrying its weight."""

	scaled = pitchcalc.Step(60).to_scaled_perc()
	data = pitchcalc.serialization.to_data(scaled)

	assert data == {"perc": scaled.perc, "weight": pitchcalc.DEFAULT_SCALE_WEIGHT}
	assert pitchcalc.serialization.from_json(json.dumps(data), pitchcalc.ScaledPerc) == scaled


def test_letter_octave_record () -> None:

	"""LetterOctave serializes with the sharp spelling of its letter."""

	letter_octave = pitchcalc.Step(61).to_letter_octave()
	data = pitchcalc.serialization.to_data(letter_octave)

	assert data == {"letter": "C#", "octave": 4}
	assert pitchcalc.serialization.from_data(data, pitchcalc.LetterOctave) == letter_octave


def test_malformed_data_raises () -> None:

	"""Data of the wrong shape raises ValueError."""

	bad_inputs = [
		("60", pitchcalc.Step),
		(True, pitchcalc.Step),
		(None, pitchcalc.Hz),
		({"perc": 1.0}, pitchcalc.ScaledPerc),
		({"perc": 1.0, "weight": "4"}, pitchcalc.ScaledPerc),
		({"letter": "H", "octave": 4}, pitchcalc.LetterOctave),
		({"letter": "A", "octave": 4.0}, pitchcalc.LetterOctave),
		([9, 4], pitchcalc.LetterOctave),
		(10 ** 400, pitchcalc.Step),
		({"perc": 1.0, "weight": -10 ** 400}, pitchcalc.ScaledPerc),
	]

	for data, cls in bad_inputs:
		with pytest.raises(ValueError):
			pitchcalc.serialization.from_data(data, cls)


def test_invalid_json_raises () -> None:

	"""Unparseable text raises ValueError."""

	with pytest.raises(ValueError):
		pitchcalc.serialization.from_json("{", pitchcalc.Step)


def test_huge_json_integer_raises () -> None:

	"""A JSON integer too large for a float raises ValueError, not OverflowError."""

	with pytest.raises(ValueError):
		pitchcalc.serialization.from_json("1" + "0" * 400, pitchcalc.Step)


class TaggedStep (pitchcalc.Step):

	"""A Step subclass, standing in for application-specific pitch types."""


def test_unit_subclasses_serialize () -> None:

	"""Subclasses of the unit types serialize like their base class."""

	assert pitchcalc.serialization.to_data(TaggedStep(60)) == 60.0
	assert pitchcalc.serialization.to_json(TaggedStep(60)) == "60.0"

	restored = pitchcalc.serialization.from_data(61, TaggedStep)

	assert isinstance(restored, TaggedStep)
	assert restored == pitchcalc.Step(61)


def test_unsupported_types_raise () -> None:

	"""Only the pitch unit types can be serialized."""

	with pytest.raises(TypeError):
		pitchcalc.serialization.to_data(60.0)

	with pytest.raises(TypeError):
		pitchcalc.serialization.from_data(60.0, float)
