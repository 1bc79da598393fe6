#!/usr/bin/env python3
"""
scripts/note_table.py — print MIDI numbers, frequencies and key signatures.

For each note name given, prints one row:

    [Note]  [MIDI]  [Frequency Hz]

Unrecognised names print "-" in both columns.

Usage:
    python scripts/note_table.py C4 F#3 Bb
    python scripts/note_table.py --key Eb              # Eb major
    python scripts/note_table.py --key A --minor --octave 3
"""
import argparse
import os
import sys

_HERE = os.path.dirname(os.path.abspath(__file__))
_ROOT = os.path.dirname(_HERE)
sys.path.insert(0, _ROOT)

from notetheory.notes import notes_in_key_signature, to_frequency, to_midi


def format_row(note_name: str) -> str:
    midi = to_midi(note_name)
    freq = to_frequency(note_name)
    midi_col = "-" if midi is None else str(midi)
    freq_col = "-" if freq is None else f"{freq:.4f}"
    return f"{note_name:<6}{midi_col:>6}{freq_col:>14}"


def print_key_signature(root: str, is_major: bool, octave: int | None) -> bool:
    """Print the key's seven notes. Returns False if the root is unknown."""
    notes = notes_in_key_signature(root, is_major, octave)
    if notes is None:
        print(f"Unrecognised key root: {root!r}", file=sys.stderr)
        return False
    mode = "major" if is_major else "minor"
    print(f"{root} {mode}: {' '.join(notes)}")
    return True


def main():
    parser = argparse.ArgumentParser(description="Convert note names to MIDI numbers and frequencies.")
    parser.add_argument("notes", nargs="*", help="Note names, e.g. C#4 Bb Eb3.")
    parser.add_argument("--key", default=None, help="Print the key signature on this root (e.g. F#, Bb).")
    parser.add_argument("--minor", action="store_true", help="Natural minor instead of major.")
    parser.add_argument("--octave", type=int, default=None, help="Octave suffix for key signature notes.")
    args = parser.parse_args()

    if not args.notes and args.key is None:
        parser.error("give at least one note name or --key")

    if args.notes:
        print(f"{'Note':<6}{'MIDI':>6}{'Hz':>14}")
        for name in args.notes:
            print(format_row(name))

    if args.key is not None:
        if not print_key_signature(args.key, not args.minor, args.octave):
            sys.exit(1)


if __name__ == "__main__":
    main()
