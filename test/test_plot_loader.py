#!/usr/bin/env python3


"""
Test module for plot_loader.py
"""

import gzip
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import numpy as np

from gene_insert_sites.core import plot_loader
from gene_insert_sites.exceptions import PlotFormatError, PlotReadError


class PlotFileTestCase(unittest.TestCase):
    """
    Base class creating plot files in a temporary directory.
    """

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self.tmp_dir.name)

    def tearDown(self):
        self.tmp_dir.cleanup()

    def write_plot(self, name, lines, compress=False):
        path = self.tmp_path / name
        content = "".join(f"{line}\n" for line in lines)
        if compress:
            with gzip.open(path, "wt") as handle:
                handle.write(content)
        else:
            path.write_text(content)
        return path


class TestLoad(PlotFileTestCase):
    """
    Unit tests for the load function.
    """

    def test_combines_strands_in_line_order(self):
        path = self.write_plot("a.insert_site_plot", ["1 0", "0 0", "2 3", "0 4"])

        profile = plot_loader.load(path)

        np.testing.assert_array_equal(profile, [1, 0, 5, 4])

    def test_gzip_file_is_decompressed(self):
        path = self.write_plot("a.insert_site_plot.gz", ["1 1", "0 2"], compress=True)

        profile = plot_loader.load(path)

        np.testing.assert_array_equal(profile, [2, 2])

    def test_accepts_tabs_and_repeated_whitespace(self):
        path = self.write_plot("a.plot", ["3\t0", "  0    7  "])

        np.testing.assert_array_equal(plot_loader.load(path), [3, 7])

    def test_empty_file_gives_empty_profile(self):
        path = self.write_plot("empty.plot", [])

        self.assertEqual(len(plot_loader.load(path)), 0)

    def test_logs_file_read(self):
        path = self.write_plot("a.plot", ["1 0"])
        logger = MagicMock()

        plot_loader.load(path, logger)

        logger.info.assert_called_once()
        self.assertEqual(logger.info.call_args.kwargs["positions"], 1)

    def test_malformed_line_reports_line_number(self):
        path = self.write_plot("bad.plot", ["1 0", "1 0 2"])

        with self.assertRaises(PlotFormatError) as ctx:
            plot_loader.load(path)

        self.assertEqual(ctx.exception.line_number, 2)
        self.assertEqual(ctx.exception.path, path)

    def test_non_integer_value(self):
        path = self.write_plot("bad.plot", ["1 x"])

        with self.assertRaises(PlotFormatError):
            plot_loader.load(path)

    def test_negative_value(self):
        path = self.write_plot("bad.plot", ["1 -1"])

        with self.assertRaises(PlotFormatError):
            plot_loader.load(path)

    def test_blank_line_is_rejected(self):
        path = self.write_plot("bad.plot", ["1 0", "", "0 1"])

        with self.assertRaises(PlotFormatError) as ctx:
            plot_loader.load(path)

        self.assertEqual(ctx.exception.line_number, 2)

    def test_missing_file(self):
        with self.assertRaises(PlotReadError):
            plot_loader.load(self.tmp_path / "missing.plot")

    def test_corrupt_gzip(self):
        path = self.tmp_path / "corrupt.plot.gz"
        path.write_bytes(b"not gzip data")

        with self.assertRaises(PlotReadError):
            plot_loader.load(path)

    def test_corrupt_gzip_body(self):
        path = self.tmp_path / "corrupt_body.plot.gz"
        data = bytearray(gzip.compress(b"1 0\n" * 5000))
        for i in range(20, 60):
            data[i] ^= 0xFF
        path.write_bytes(bytes(data))

        with self.assertRaises(PlotReadError) as ctx:
            plot_loader.load(path)

        self.assertEqual(ctx.exception.path, path)

    def test_profile_grows_past_initial_capacity(self):
        path = self.write_plot("long.plot", [f"{i} 1" for i in range(10)])

        with patch.object(plot_loader, "INITIAL_CAPACITY", 4):
            profile = plot_loader.load(path)

        self.assertEqual(profile.dtype, np.int64)
        np.testing.assert_array_equal(profile, np.arange(10) + 1)


class TestMerge(PlotFileTestCase):
    """
    Unit tests for merge_into and load_many.
    """

    def test_merge_equals_load_of_pointwise_sum(self):
        a = self.write_plot("a.plot", ["1 0", "0 2", "3 3", "0 0"])
        b = self.write_plot("b.plot", ["0 1", "5 0", "0 0", "1 1"])
        summed = self.write_plot("sum.plot", ["1 1", "5 2", "3 3", "1 1"])

        merged = plot_loader.merge_into(plot_loader.load(a), b)

        np.testing.assert_array_equal(merged, plot_loader.load(summed))

    def test_longer_file_grows_profile(self):
        a = self.write_plot("a.plot", ["1 0", "1 0"])
        b = self.write_plot("b.plot", ["1 0", "1 0", "4 0", "0 2"])

        merged = plot_loader.merge_into(plot_loader.load(a), b)

        np.testing.assert_array_equal(merged, [2, 2, 4, 2])

    def test_shorter_file_keeps_existing_tail(self):
        a = self.write_plot("a.plot", ["1 0", "1 0", "7 0"])
        b = self.write_plot("b.plot", ["1 0"])

        merged = plot_loader.merge_into(plot_loader.load(a), b)

        np.testing.assert_array_equal(merged, [2, 1, 7])

    def test_merge_does_not_modify_existing(self):
        a = self.write_plot("a.plot", ["1 0"])
        existing = plot_loader.load(a)

        plot_loader.merge_into(existing, a)

        np.testing.assert_array_equal(existing, [1])

    def test_load_many(self):
        a = self.write_plot("a.plot", ["1 0"])
        b = self.write_plot("b.plot.gz", ["0 1", "2 0"], compress=True)
        c = self.write_plot("c.plot", ["1 1", "0 0", "0 9"])

        profile = plot_loader.load_many([a, b, c])

        np.testing.assert_array_equal(profile, [4, 2, 9])

    def test_load_many_single_file_equals_load(self):
        a = self.write_plot("a.plot", ["1 2", "0 0"])

        np.testing.assert_array_equal(plot_loader.load_many([a]), plot_loader.load(a))


if __name__ == "__main__":
    unittest.main()
