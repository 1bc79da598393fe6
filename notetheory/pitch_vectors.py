import numpy as np

from notetheory.constants import SEMITONES_PER_OCTAVE
from notetheory.notes import notes_in_key_signature, parse_note_name, to_frequency


def pitch_class_vector(note_names):
    """
    Build a 12-element multi-hot vector of the pitch classes in note_names.

    Index 0 is A, matching the note tables. Octaves are ignored and names
    that are not recognised are skipped.

    Returns:
        np.array: A 12-element array of float32.
    """
    v = np.zeros(SEMITONES_PER_OCTAVE, dtype=np.float32)
    for name in note_names:
        parsed = parse_note_name(name)
        if parsed is None:
            continue
        pc, _ = parsed
        v[pc] = 1.0
    return v


def key_signature_vector(root_note, is_major):
    """Pitch-class vector of a key signature, or None for an unknown root."""
    notes = notes_in_key_signature(root_note, is_major)
    if notes is None:
        return None
    return pitch_class_vector(notes)


def frequencies(note_names):
    """Frequencies in Hz for each name, NaN where the name is not recognised."""
    values = [to_frequency(name) for name in note_names]
    return np.array([np.nan if f is None else f for f in values], dtype=np.float64)
