"""Tuning and range constants.

All conversions in ``pitchcalc.calc`` are defined relative to these values:

- `TUNING_PITCH_A4 = 440.0` - concert pitch in Hz
- `A4_STEP = 69.0` - the Step value of A4 (MIDI convention, so C4 = 60)
- `MIN_HZ` / `MAX_HZ` - the conventional human hearing range used by Perc
- `DEFAULT_SCALE_WEIGHT = 4.0` - the weight used by ``Step.scaled_perc()``
- `IDENTITY_SCALE_WEIGHT = 1.0` - the weight at which ScaledPerc equals Perc

These are plain constants. Nothing in the package mutates them.
"""

# Tuning

TUNING_PITCH_A4 = 440.0
A4_STEP = 69.0
SEMITONES_PER_OCTAVE = 12

# Human hearing range (Perc is 0 at MIN_HZ and 100 at MAX_HZ)

MIN_HZ = 20.0
MAX_HZ = 20000.0
PERC_SCALE = 100.0

# Mel scale (O'Shaughnessy)

MEL_FACTOR = 2595.0
MEL_BREAK_HZ = 700.0

# Scale weights

DEFAULT_SCALE_WEIGHT = 4.0
IDENTITY_SCALE_WEIGHT = 1.0

# MIDI standard ranges

MIDI_NOTE_MIN = 0
MIDI_NOTE_MAX = 127
PITCH_BEND_MIN = -8192
PITCH_BEND_MAX = 8191
DEFAULT_BEND_RANGE = 2.0        # Semitones either side of the note (GM default)
DEFAULT_VELOCITY = 100
