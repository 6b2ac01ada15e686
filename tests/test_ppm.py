"""Tests for the plain-text PPM writer and reader."""

import io

import numpy as np
import pytest

from rt_one.renderer import ppm

SAMPLE = [100, 0, 0, 0, 100, 0, 0, 0, 0, 100, 100, 100]


class TestWrite:
    """Tests for ppm.write."""

    def test_two_by_two(self):
        stream = io.StringIO()
        ppm.write(2, SAMPLE, stream)
        assert stream.getvalue() == (
            "P3\n"
            "2 2\n"
            "255\n"
            "100 0 0 0 100 0 \n"
            "0 0 0 100 100 100 \n"
        )

    def test_single_row(self):
        stream = io.StringIO()
        ppm.write(1, SAMPLE, stream)
        lines = stream.getvalue().splitlines()
        assert lines[1] == "4 1"
        assert len(lines) == 4

    def test_accepts_image_arrays(self):
        data = np.array(SAMPLE, dtype=np.uint8).reshape(2, 2, 3)
        a, b = io.StringIO(), io.StringIO()
        ppm.write(2, data, a)
        ppm.write(2, SAMPLE, b)
        assert a.getvalue() == b.getvalue()

    @pytest.mark.parametrize("rows,data", [
        (2, SAMPLE[:-1]),
        (5, SAMPLE),
        (0, SAMPLE),
        (1, []),
    ])
    def test_rejects_mismatched_sizes(self, rows, data):
        with pytest.raises(ValueError):
            ppm.write(rows, data, io.StringIO())

    def test_write_path(self, tmp_path):
        path = tmp_path / "out.ppm"
        ppm.write_path(2, SAMPLE, path)
        assert path.read_text(encoding="ascii").startswith("P3\n2 2\n255\n")


class TestRead:
    """Tests for ppm.read."""

    def test_reads_back_what_was_written(self):
        stream = io.StringIO()
        ppm.write(2, SAMPLE, stream)
        stream.seek(0)
        image = ppm.read(stream)
        assert image.shape == (2, 2, 3)
        assert image.reshape(-1).tolist() == SAMPLE

    def test_ignores_comments(self):
        text = "P3\n# made by hand\n1 1\n255\n1 2 3 # one pixel\n"
        assert ppm.read(io.StringIO(text)).tolist() == [[[1, 2, 3]]]

    def test_rejects_other_formats(self):
        with pytest.raises(ValueError):
            ppm.read(io.StringIO("P6\n1 1\n255\n"))

    def test_rejects_truncated_data(self):
        with pytest.raises(ValueError):
            ppm.read(io.StringIO("P3\n2 1\n255\n1 2 3\n"))
