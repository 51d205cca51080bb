"""JSON serialization for the pitch unit types.

Single-value units serialize to a bare number and the pair types to a small
object:

    Step(60.5)                      → 60.5
    Hz(440.0)                       → 440.0
    ScaledPerc(30.2, 4.0)           → {"perc": 30.2, "weight": 4.0}
    LetterOctave(Letter.A, 4)       → {"letter": "A", "octave": 4}

Python writes floats with enough digits to read them back exactly, so a Step
survives a round trip bit-for-bit. NaN and the infinities use the ``NaN`` /
``Infinity`` tokens accepted by the ``json`` module (not strict JSON).
"""

import json
import logging
import typing

import pitchcalc.letter
import pitchcalc.step
import pitchcalc.units


logger = logging.getLogger(__name__)

Serializable = typing.Union[
	pitchcalc.step.Step,
	pitchcalc.units.Hz,
	pitchcalc.units.Mel,
	pitchcalc.units.Perc,
	pitchcalc.units.ScaledPerc,
	pitchcalc.letter.LetterOctave,
]

_T = typing.TypeVar("_T")

# Types that serialize to the single number held in their ``value`` field.
_SCALAR_TYPES: typing.Tuple[type, ...] = (
	pitchcalc.step.Step,
	pitchcalc.units.Hz,
	pitchcalc.units.Mel,
	pitchcalc.units.Perc,
)


def _reject (message: str) -> ValueError:
	logger.warning(f"Rejected serialized pitch data: {message}")
	return ValueError(message)


def _number (data: typing.Any, what: str) -> float:

	if isinstance(data, bool) or not isinstance(data, (int, float)):
		raise _reject(f"{what} must be a number, got {data!r}")

	try:
		return float(data)
	except OverflowError as exc:
		raise _reject(f"{what} is too large for a float: {data!r}") from exc


def to_data (value: Serializable) -> typing.Any:

	"""Return the plain-Python (JSON-compatible) form of a unit value.

	Raises:
		TypeError: If ``value`` is not one of the pitch unit types.
	"""

	if isinstance(value, pitchcalc.units.ScaledPerc):
		return {"perc": value.perc, "weight": value.weight}

	if isinstance(value, pitchcalc.letter.LetterOctave):
		return {"letter": value.letter.name_text, "octave": int(value.octave)}

	if not isinstance(value, _SCALAR_TYPES):
		raise TypeError(f"Cannot serialize {type(value).__name__}")

	return value.value


def from_data (data: typing.Any, cls: typing.Type[_T]) -> _T:

	"""Rebuild a unit value of type ``cls`` from its plain-Python form.

	Raises:
		TypeError: If ``cls`` is not one of the pitch unit types.
		ValueError: If ``data`` does not have the expected shape.
	"""

	if not isinstance(cls, type):
		raise TypeError(f"Cannot deserialize {cls!r}")

	if issubclass(cls, pitchcalc.units.ScaledPerc):

		if not isinstance(data, dict) or set(data) != {"perc", "weight"}:
			raise _reject(f"ScaledPerc expects {{'perc', 'weight'}}, got {data!r}")

		return cls(_number(data["perc"], "perc"), _number(data["weight"], "weight"))  # type: ignore[call-arg]

	if issubclass(cls, pitchcalc.letter.LetterOctave):

		if not isinstance(data, dict) or set(data) != {"letter", "octave"}:
			raise _reject(f"LetterOctave expects {{'letter', 'octave'}}, got {data!r}")

		octave = data["octave"]

		if isinstance(octave, bool) or not isinstance(octave, int):
			raise _reject(f"octave must be an integer, got {octave!r}")

		try:
			letter = pitchcalc.letter.letter_from_name(data["letter"])
		except (ValueError, TypeError) as exc:
			raise _reject(str(exc)) from exc

		return cls(letter, pitchcalc.letter.Octave(octave))  # type: ignore[call-arg]

	if not issubclass(cls, _SCALAR_TYPES):
		raise TypeError(f"Cannot deserialize {cls.__name__}")

	return cls(_number(data, cls.__name__))  # type: ignore[call-arg]


def to_json (value: Serializable) -> str:

	"""Serialize a unit value to a JSON string."""

	return json.dumps(to_data(value))


def from_json (text: str, cls: typing.Type[_T]) -> _T:

	"""Deserialize a unit value of type ``cls`` from a JSON string.

	Example:
		```python
		from_json("69.0", Step)   # → Step(69.0)
		```
	"""

	try:
		data = json.loads(text)
	except json.JSONDecodeError as exc:
		raise _reject(f"Invalid JSON: {exc}") from exc

	return from_data(data, cls)
