"""Unit-tagged wrappers for the non-Step pitch representations.

These carry no behaviour of their own beyond unwrapping the value they hold.
They are produced by `Step` conversion methods (``Step(69).to_hz()``) and
consumed by the matching `Step` class methods (``Step.from_hz(hz)``), so a
value in one unit cannot be passed where another is expected without going
through Step. None of them support arithmetic, and values of different units
never compare equal.
"""

import dataclasses


@dataclasses.dataclass(frozen=True)
class Hz:

	"""
	Frequency in cycles per second.
	"""

	value: float

	def hz (self) -> float:
		return self.value


@dataclasses.dataclass(frozen=True)
class Mel:

	"""
	Position on the Mel perceptual pitch scale.
	"""

	value: float

	def mel (self) -> float:
		return self.value


@dataclasses.dataclass(frozen=True)
class Perc:

	"""
	Linear percentage of the human hearing range (0 at ``MIN_HZ``, 100 at ``MAX_HZ``).
	"""

	value: float

	def perc (self) -> float:
		return self.value


@dataclasses.dataclass(frozen=True)
class ScaledPerc:

	"""
	A weighted percentage together with the weight that produced it.

	Two ScaledPerc values are only comparable when their weights match; equality
	compares both fields.
	"""

	perc: float
	weight: float
