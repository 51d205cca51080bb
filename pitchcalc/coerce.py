"""Fixed-width integer coercion.

Python integers are unbounded, so each fixed-width kind is described by an
`IntKind` and the conversions take the kind as a parameter:

- ``float_from_int(value, kind)`` widens an integer to a float. The value
  must fit the kind.
- ``int_from_float(value, kind)`` narrows a float to an integer. This never
  fails: it truncates toward zero, saturates at the kind's bounds and maps
  NaN to 0.

Kinds: `U8`, `U16`, `U32`, `U64`, `I8`, `I16`, `I32`, `I64`. MIDI note
numbers (0-127) fit every kind.
"""

import dataclasses
import logging
import math
import typing


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class IntKind:

	"""
	A fixed-width integer kind, e.g. unsigned 8-bit.
	"""

	name: str
	bits: int
	signed: bool


	@property
	def min_value (self) -> int:

		"""Smallest representable value."""

		return -(1 << (self.bits - 1)) if self.signed else 0


	@property
	def max_value (self) -> int:

		"""Largest representable value."""

		return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


	def contains (self, value: int) -> bool:
		return self.min_value <= value <= self.max_value


U8 = IntKind("u8", 8, False)
U16 = IntKind("u16", 16, False)
U32 = IntKind("u32", 32, False)
U64 = IntKind("u64", 64, False)
I8 = IntKind("i8", 8, True)
I16 = IntKind("i16", 16, True)
I32 = IntKind("i32", 32, True)
I64 = IntKind("i64", 64, True)

INT_KINDS: typing.Tuple[IntKind, ...] = (U8, U16, U32, U64, I8, I16, I32, I64)


def float_from_int (value: int, kind: IntKind = I64) -> float:

	"""Widen an integer of the given kind to a float.

	Values above 2**53 lose precision, as any integer-to-float widening does.

	Raises:
		TypeError: If ``value`` is not an integer.
		ValueError: If ``value`` does not fit ``kind``.
	"""

	if isinstance(value, bool) or not isinstance(value, int):
		raise TypeError(f"Expected an integer, got {type(value).__name__}")

	if not kind.contains(value):
		raise ValueError(
			f"{value} is out of range for {kind.name} ({kind.min_value}..{kind.max_value})"
		)

	return float(value)


def int_from_float (value: float, kind: IntKind = I64) -> int:

	"""Narrow a float to an integer of the given kind.

	Truncates toward zero. Values beyond the kind's range (including the
	infinities) saturate to its nearest bound, and NaN becomes 0.

	Example:
		```python
		int_from_float(60.9, U8)     # → 60
		int_from_float(-3.7, I8)     # → -3
		int_from_float(300.0, U8)    # → 255
		int_from_float(-1.0, U8)     # → 0
		```
	"""

	if math.isnan(value):
		logger.debug(f"NaN coerced to 0 for {kind.name}")
		return 0

	if value >= kind.max_value:
		if value >= kind.max_value + 1:
			logger.debug(f"{value} saturated to {kind.name} max {kind.max_value}")
		return kind.max_value

	if value <= kind.min_value:
		if value <= kind.min_value - 1:
			logger.debug(f"{value} saturated to {kind.name} min {kind.min_value}")
		return kind.min_value

	return int(value)
