import unittest
import io
import os
import sys
from unittest.mock import patch

sys.path.insert(0, os.getcwd())
sys.path.insert(0, os.path.join(os.getcwd(), 'scripts'))

try:
    import note_table
except ImportError:
    from scripts import note_table

class TestNoteTable(unittest.TestCase):
    def run_main(self, *argv):
        with patch.object(sys, "argv", ["note_table.py", *argv]), \
             patch("sys.stdout", new_callable=io.StringIO) as out, \
             patch("sys.stderr", new_callable=io.StringIO) as err:
            code = 0
            try:
                note_table.main()
            except SystemExit as e:
                code = e.code
        return code, out.getvalue(), err.getvalue()

    def test_format_row(self):
        row = note_table.format_row("C4")
        self.assertEqual(row.split(), ["C4", "60", "523.2511"])

    def test_format_row_unknown(self):
        self.assertEqual(note_table.format_row("H4").split(), ["H4", "-", "-"])

    def test_notes(self):
        code, out, _ = self.run_main("A4", "Bb3")
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 3)  # header + 2 rows
        self.assertEqual(lines[1].split(), ["A4", "57", "440.0000"])
        self.assertEqual(lines[2].split()[:2], ["Bb3", "46"])

    def test_key_signature(self):
        code, out, _ = self.run_main("--key", "C", "--octave", "4")
        self.assertEqual(code, 0)
        self.assertIn("C major: C4 D4 E4 F4 G4 A5 B5", out)

    def test_minor_key_signature(self):
        code, out, _ = self.run_main("--key", "A", "--minor")
        self.assertEqual(code, 0)
        self.assertIn("A minor: A B C D E F G", out)

    def test_unknown_key_exits(self):
        code, out, err = self.run_main("--key", "H")
        self.assertEqual(code, 1)
        self.assertIn("Unrecognised key root", err)

    def test_no_arguments_is_usage_error(self):
        code, _, err = self.run_main()
        self.assertEqual(code, 2)
        self.assertIn("--key", err)

if __name__ == "__main__":
    unittest.main()
