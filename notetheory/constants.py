# ── Note-name lookup tables ───────────────────────────────────────────────────
# Indexed by pitch class, anchored so that index 0 is A.

SHARP_NOTATIONS: tuple[str, ...] = (
    "A", "A#", "B", "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#"
)
FLAT_NOTATIONS: tuple[str, ...] = (
    "A", "Bb", "B", "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab"
)
# Sharps/flats that land on a natural, and the natural they resolve to.
ODD_NOTATIONS: tuple[str, ...] = ("B#", "Cb", "E#", "Fb")
CORRECTED_NOTATIONS: tuple[str, ...] = ("C", "C", "F", "F")

# ── Tuning reference ──────────────────────────────────────────────────────────

SEMITONES_PER_OCTAVE = 12
DEFAULT_OCTAVE = 4
A4_MIDI = 69
A4_FREQUENCY = 440.0
# MIDI numbers are offset from octave 5, frequencies from octave 4.
MIDI_REFERENCE_OCTAVE = 5
FREQUENCY_REFERENCE_OCTAVE = 4

# ── Scale degrees ─────────────────────────────────────────────────────────────
# Semitone offsets above the root for each of the seven degrees.

MAJOR_OFFSETS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)   # W W H W W W H
MINOR_OFFSETS: tuple[int, ...] = (0, 2, 3, 5, 7, 8, 10)   # W H W W H W W
