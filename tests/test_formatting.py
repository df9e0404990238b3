"""Tests for idiombench.formatting: shared text helpers."""

from __future__ import annotations

import unittest

from idiombench.formatting import (
    format_count,
    format_elapsed,
    format_ratio,
    format_section_header,
    format_table,
    truncate,
)


class TestFormatElapsed(unittest.TestCase):
    """Tests for format_elapsed()."""

    def test_units(self) -> None:
        self.assertEqual(format_elapsed(850), "850ns")
        self.assertEqual(format_elapsed(12_500), "12.50µs")
        self.assertEqual(format_elapsed(3_200_000), "3.20ms")
        self.assertEqual(format_elapsed(1_050_000_000), "1.05s")

    def test_precision(self) -> None:
        self.assertEqual(format_elapsed(3_212_345, precision=3), "3.212ms")

    def test_zero(self) -> None:
        self.assertEqual(format_elapsed(0), "0ns")

    def test_nan(self) -> None:
        self.assertEqual(format_elapsed(float("nan")), "N/A")


class TestFormatRatio(unittest.TestCase):
    """Tests for format_ratio()."""

    def test_fixed_point(self) -> None:
        self.assertEqual(format_ratio(0.5), "0.50x")
        self.assertEqual(format_ratio(1.0, 4), "1.0000x")
        self.assertEqual(format_ratio(12345.678, 1), "12345.7x")

    def test_no_exponent(self) -> None:
        self.assertNotIn("e", format_ratio(1e-7, 2))

    def test_special_values(self) -> None:
        self.assertEqual(format_ratio(float("inf")), "inf")
        self.assertEqual(format_ratio(float("nan")), "N/A")


class TestSmallHelpers(unittest.TestCase):
    """Tests for format_count, truncate and format_section_header."""

    def test_format_count(self) -> None:
        self.assertEqual(format_count(1_000_000), "1,000,000")
        self.assertEqual(format_count(7), "7")

    def test_truncate(self) -> None:
        self.assertEqual(truncate("hello", 10), "hello")
        self.assertEqual(truncate("hello world", 8), "hello...")
        self.assertEqual(truncate("hello", 2), "..")

    def test_section_header(self) -> None:
        header = format_section_header("Calls", width=30)
        self.assertTrue(header.startswith("─── Calls "))
        self.assertEqual(len(header), 30)

    def test_section_header_long_title(self) -> None:
        header = format_section_header("x" * 50, width=20)
        self.assertIn("x" * 50, header)


class TestFormatTable(unittest.TestCase):
    """Tests for format_table()."""

    def test_empty_headers(self) -> None:
        self.assertEqual(format_table([], [["a"]]), "")

    def test_columns_aligned(self) -> None:
        out = format_table(["Name", "N"], [["a", "1"], ["long name", "100"]], alignments="lr")
        lines = out.splitlines()
        self.assertEqual(len(lines), 4)  # header, rule, two rows
        self.assertTrue(lines[0].startswith("  Name"))
        self.assertTrue(set(lines[1].strip()) == {"─"})
        # Right-aligned column ends at the same position on every row.
        self.assertEqual(len(lines[2]), len(lines[3]))
        self.assertTrue(lines[2].endswith("  1"))

    def test_no_rule_no_indent(self) -> None:
        out = format_table(["A"], [["x"]], indent=0, rule=False)
        self.assertEqual(out, "A\nx")

    def test_short_rows_padded(self) -> None:
        out = format_table(["A", "B", "C"], [["x"]], rule=False)
        self.assertEqual(len(out.splitlines()), 2)

    def test_long_rows_cut(self) -> None:
        out = format_table(["A"], [["x", "extra"]], rule=False)
        self.assertNotIn("extra", out)

    def test_max_width_truncates(self) -> None:
        out = format_table(["Label"], [["abcdefghijkl"]], max_widths={0: 8}, rule=False)
        self.assertIn("abcde...", out)
        self.assertNotIn("abcdefghijkl", out)


if __name__ == "__main__":
    unittest.main()
