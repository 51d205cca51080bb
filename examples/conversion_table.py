import logging

import pitchcalc
import pitchcalc.midi
import pitchcalc.serialization

logging.basicConfig(level=logging.INFO)

# One row per octave of A, from A0 (the lowest piano key) up to A7.
NOTES = ["A0", "A1", "A2", "A3", "A4", "A5", "A6", "A7"]

# Weight used for the extra ScaledPerc column (the default column uses DEFAULT_SCALE_WEIGHT).
WIDE_WEIGHT = 2.0

print(f"{'note':>5} {'step':>6} {'hz':>10} {'mel':>9} {'perc':>7} {'scaled':>7} {'w=2':>7}")

for name in NOTES:

	step = pitchcalc.Step.from_name(name)

	print(
		f"{name:>5} {step.step():>6.1f} {step.hz():>10.2f} {step.mel():>9.2f} "
		f"{step.perc():>7.2f} {step.scaled_perc():>7.2f} {step.scaled_perc_with_weight(WIDE_WEIGHT):>7.2f}"
	)

# Detuned pitches: a quarter-tone above middle C needs a note plus a pitch bend.
quarter_tone = pitchcalc.Step.from_name("C4") + 0.5

logging.info(f"{quarter_tone!r} sounds as {quarter_tone.to_letter_octave()} at {quarter_tone.hz():.2f} Hz")

for message in (pitchcalc.midi.pitch_bend(quarter_tone), pitchcalc.midi.note_on(quarter_tone)):
	logging.info(f"MIDI: {message}")

# Frequencies from elsewhere (e.g. a pitch tracker) come back through Step.
tracked = pitchcalc.Step.from_hz(pitchcalc.Hz(446.0))

logging.info(f"446 Hz is {tracked.to_letter_octave()} ({tracked.step() - tracked.to_int():+.2f} steps from the note below)")
logging.info(f"Serialized: {pitchcalc.serialization.to_json(tracked.to_letter_octave())}")
