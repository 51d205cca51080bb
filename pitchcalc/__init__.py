"""
pitchcalc - pitch representation and unit conversion.

Pitch is represented canonically as a ``Step``: a continuous semitone value
using MIDI note numbering (Step 60 is middle C, Step 69 is A4 at 440 Hz).
Every other representation is one conversion away:

- **Hz** - frequency, ``Step(69).hz()`` → ``440.0``
- **Mel** - perceptual pitch scale, ``Step(69).mel()``
- **Perc** - linear percentage of the human hearing range (20 Hz - 20 kHz)
- **ScaledPerc** - a weighted percentage that spreads low pitches out,
  carried together with the weight that produced it
- **LetterOctave** - the nearest note name, ``Step(61).to_letter_octave()`` → ``C#4``

Conversions back go through Step class methods (``Step.from_hz(Hz(220))``),
so there is never a direct Hz-to-Mel path and units cannot be mixed by
accident. Steps support arithmetic (``Step(60) + 12``), ordering, hashing,
and saturating conversion to fixed-width integers for MIDI interop.

Minimal example:

    ```python
    import pitchcalc

    step = pitchcalc.Step.from_name("A4")
    step.hz()                              # 440.0
    (step + 12).to_letter_octave()         # LetterOctave(letter=<Letter.A: 9>, octave=5)
    pitchcalc.Step.from_hz(pitchcalc.Hz(261.63)).letter()   # Letter.C
    ```

Package-level exports: ``Step``, ``Hz``, ``Mel``, ``Perc``, ``ScaledPerc``,
``Letter``, ``Octave``, ``LetterOctave``, ``DEFAULT_SCALE_WEIGHT``.
"""

import pitchcalc.constants
import pitchcalc.letter
import pitchcalc.step
import pitchcalc.units


Step = pitchcalc.step.Step
Hz = pitchcalc.units.Hz
Mel = pitchcalc.units.Mel
Perc = pitchcalc.units.Perc
ScaledPerc = pitchcalc.units.ScaledPerc
Letter = pitchcalc.letter.Letter
Octave = pitchcalc.letter.Octave
LetterOctave = pitchcalc.letter.LetterOctave
DEFAULT_SCALE_WEIGHT = pitchcalc.constants.DEFAULT_SCALE_WEIGHT
