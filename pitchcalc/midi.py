"""MIDI interop for Steps.

A Step is a MIDI note number that may have a fractional part. MIDI itself
only carries whole notes, so a fractional Step is sent as the nearest note
plus a pitch bend for the remainder:

    note, bend = note_and_bend(Step(60.25))      # (60, 1024) with a ±2 semitone bend range

``bend_range`` must match the receiving synth's pitch bend range in
semitones. Steps outside the MIDI note range are clamped to 0-127 and the
bend saturates at -8192..8191.

The ``note_on()``, ``note_off()`` and ``pitch_bend()`` helpers return
``mido.Message`` objects ready to send to any mido output port.
"""

import logging
import typing

import mido

import pitchcalc.calc
import pitchcalc.constants
import pitchcalc.step


logger = logging.getLogger(__name__)


def _clamp (value: int, low: int, high: int) -> int:
	return max(low, min(high, value))


def note_and_bend (
	step: pitchcalc.step.Step,
	bend_range: float = pitchcalc.constants.DEFAULT_BEND_RANGE
) -> typing.Tuple[int, int]:

	"""Split a Step into a MIDI note number and a pitchwheel value.

	The note is the nearest semitone (halves round up), clamped to 0-127.
	The pitchwheel value covers the remaining distance, scaled so that
	``bend_range`` semitones is full deflection.

	Parameters:
		step: The pitch to send.
		bend_range: The synth's pitch bend range in semitones (default 2).

	Returns:
		``(note, bend)`` with ``bend`` in -8192..8191.

	Example:
		```python
		note_and_bend(Step(69))        # → (69, 0)
		note_and_bend(Step(60.5))      # → (61, -2048)
		```
	"""

	if bend_range <= 0:
		raise ValueError("Bend range must be positive")

	nearest = pitchcalc.calc.round_half_up(step.step())
	note = _clamp(nearest, pitchcalc.constants.MIDI_NOTE_MIN, pitchcalc.constants.MIDI_NOTE_MAX)

	if note != nearest:
		logger.debug(f"{step!r} is outside the MIDI note range - clamped to {note}")

	offset = step.step() - note
	scaled = offset / bend_range * (pitchcalc.constants.PITCH_BEND_MAX + 1)
	bend = _clamp(
		pitchcalc.calc.round_half_up(scaled),
		pitchcalc.constants.PITCH_BEND_MIN,
		pitchcalc.constants.PITCH_BEND_MAX
	)

	return note, bend


def step_from_note_and_bend (
	note: int,
	bend: int = 0,
	bend_range: float = pitchcalc.constants.DEFAULT_BEND_RANGE
) -> pitchcalc.step.Step:

	"""Return the Step sounded by a MIDI note with a pitchwheel value applied.

	Raises:
		ValueError: If ``note`` or ``bend`` is outside the MIDI range.
	"""

	if not pitchcalc.constants.MIDI_NOTE_MIN <= note <= pitchcalc.constants.MIDI_NOTE_MAX:
		raise ValueError(f"MIDI note must be 0-127, got {note}")

	if not pitchcalc.constants.PITCH_BEND_MIN <= bend <= pitchcalc.constants.PITCH_BEND_MAX:
		raise ValueError(f"Pitch bend must be -8192..8191, got {bend}")

	offset = bend / (pitchcalc.constants.PITCH_BEND_MAX + 1) * bend_range

	return pitchcalc.step.Step(note + offset)


def note_on (
	step: pitchcalc.step.Step,
	velocity: int = pitchcalc.constants.DEFAULT_VELOCITY,
	channel: int = 0
) -> mido.Message:

	"""Build a note_on message for the nearest MIDI note to ``step``."""

	note, _ = note_and_bend(step)

	return mido.Message('note_on', channel=channel, note=note, velocity=velocity)


def note_off (
	step: pitchcalc.step.Step,
	velocity: int = 0,
	channel: int = 0
) -> mido.Message:

	"""Build a note_off message for the nearest MIDI note to ``step``."""

	note, _ = note_and_bend(step)

	return mido.Message('note_off', channel=channel, note=note, velocity=velocity)


def pitch_bend (
	step: pitchcalc.step.Step,
	channel: int = 0,
	bend_range: float = pitchcalc.constants.DEFAULT_BEND_RANGE
) -> mido.Message:

	"""Build the pitchwheel message that tunes the nearest note up or down to ``step``.

	Send it before the matching ``note_on()`` so the note starts in tune.
	"""

	_, bend = note_and_bend(step, bend_range)

	return mido.Message('pitchwheel', channel=channel, pitch=bend)


def step_from_message (
	message: mido.Message,
	bend: int = 0,
	bend_range: float = pitchcalc.constants.DEFAULT_BEND_RANGE
) -> pitchcalc.step.Step:

	"""Return the Step of a note_on or note_off message.

	Parameters:
		message: A mido note message.
		bend: The channel's current pitchwheel value, if any.
		bend_range: The synth's pitch bend range in semitones.

	Raises:
		ValueError: If the message is not a note message.
	"""

	if message.type not in ('note_on', 'note_off'):
		raise ValueError(f"Expected a note_on or note_off message, got {message.type!r}")

	return step_from_note_and_bend(message.note, bend, bend_range)
