"""
Note-name conversions: note names to MIDI numbers and frequencies, and the
seven notes of a major or natural-minor key signature.

A note name is a letter (A-G), an optional accidental (# or b) and an optional
single trailing octave digit, e.g. "C#4", "Bb", "Eb3". The octave defaults to 4.
Unrecognised names give None rather than raising.
"""
from notetheory.constants import (
    A4_FREQUENCY,
    A4_MIDI,
    CORRECTED_NOTATIONS,
    DEFAULT_OCTAVE,
    FLAT_NOTATIONS,
    FREQUENCY_REFERENCE_OCTAVE,
    MAJOR_OFFSETS,
    MIDI_REFERENCE_OCTAVE,
    MINOR_OFFSETS,
    ODD_NOTATIONS,
    SEMITONES_PER_OCTAVE,
    SHARP_NOTATIONS,
)

_ASCII_DIGITS = "0123456789"


def correct_odd_notation(name: str) -> str:
    """Resolve B#, Cb, E# and Fb to the natural the tables spell them as."""
    if name in ODD_NOTATIONS:
        return CORRECTED_NOTATIONS[ODD_NOTATIONS.index(name)]
    return name


def _find_pitch_class(name: str) -> int | None:
    # Sharp spelling first, then flat.
    if name in SHARP_NOTATIONS:
        return SHARP_NOTATIONS.index(name)
    if name in FLAT_NOTATIONS:
        return FLAT_NOTATIONS.index(name)
    return None


def parse_note_name(note_name: str) -> tuple[int, int] | None:
    """
    Split a note name into (pitch_class, octave).

    Only a single trailing digit is read as the octave, so "C10" is not
    recognised. The pitch class is 0-11 counted from A.

    Returns:
        (pitch_class, octave), or None if the note is not recognised.
    """
    octave = DEFAULT_OCTAVE
    name = note_name

    # does the notation include the octave?
    if name and name[-1] in _ASCII_DIGITS:
        octave = int(name[-1])
        name = name[:-1]

    pc = _find_pitch_class(correct_odd_notation(name))
    if pc is None:
        return None
    return pc, octave


def to_midi(note_name: str) -> int | None:
    """
    Convert a note name to a MIDI note number (unclamped).

    Counted from MIDI 69 with octave 5 as the zero offset:
        midi = 69 + pitch_class + (octave - 5) * 12

    Returns:
        int, or None for an unrecognised note name.
    """
    parsed = parse_note_name(note_name)
    if parsed is None:
        return None
    pc, octave = parsed
    return A4_MIDI + pc + (octave - MIDI_REFERENCE_OCTAVE) * SEMITONES_PER_OCTAVE


def to_frequency(note_name: str) -> float | None:
    """
    Convert a note name to its equal-tempered frequency in Hz, A4 = 440.

    The value is not rounded. Returns None for an unrecognised note name.
    """
    parsed = parse_note_name(note_name)
    if parsed is None:
        return None
    pc, octave = parsed
    index = pc + (octave - FREQUENCY_REFERENCE_OCTAVE) * SEMITONES_PER_OCTAVE
    return A4_FREQUENCY * 2 ** (index / SEMITONES_PER_OCTAVE)


def notes_in_key_signature(root_note: str, is_major: bool,
                           octave: int | None = None) -> list[str] | None:
    """
    List the seven notes of the major or natural-minor key on root_note.

    The root is a bare letter + accidental; a trailing octave digit is not
    stripped. The spelling (sharps or flats) follows whichever table holds the
    root, sharps first.

    Args:
        root_note (str): Root of the key, e.g. "C", "F#", "Bb".
        is_major (bool): Major key if True, natural minor otherwise.
        octave (int | None): Octave suffix for the notes. Notes past the end
            of the 12-note table get octave + 1. None gives bare names.

    Returns:
        list[str] of seven note names, root first, or None if the root is
        not recognised.
    """
    root = correct_odd_notation(root_note)

    if root in SHARP_NOTATIONS:
        table = SHARP_NOTATIONS
    elif root in FLAT_NOTATIONS:
        table = FLAT_NOTATIONS
    else:
        return None
    start_pos = table.index(root)

    # Two copies of the table so stepping past G#/Ab rolls into the next octave.
    if octave is None:
        notes = list(table) + list(table)
    else:
        notes = ([f"{n}{octave}" for n in table]
                 + [f"{n}{octave + 1}" for n in table])

    notes = notes[start_pos:]
    offsets = MAJOR_OFFSETS if is_major else MINOR_OFFSETS
    return [notes[i] for i in offsets]
