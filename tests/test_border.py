"""
File        : test_border.py
Author      : Eldridge M. Mount IV
Description : Tests for the scanline border strategies.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from cl_bayer.imaging.image_defs import BayerDepth
from cl_bayer.stream.border import BorderError, BorderMirror, BorderNone, BorderReplicate

import io
import struct

import pytest


def read_row(strategy, samples):
    row = strategy.new_row()
    strategy.read_line(io.BytesIO(bytes(samples)), row)
    return row.tolist()


def test_none_reads_verbatim():
    strategy = BorderNone(4, BayerDepth.DEPTH8)
    assert strategy.row_len == 4
    assert read_row(strategy, [9, 8, 7, 6]) == [9, 8, 7, 6]


@pytest.mark.parametrize("samples, padding, expected", [
    ([1, 2, 3, 4, 5, 6], 4, [1, 2, 1, 2, 1, 2, 3, 4, 5, 6, 5, 6, 5, 6]),
    ([1, 2, 3, 4, 5], 3, [2, 1, 2, 1, 2, 3, 4, 5, 4, 5, 4]),
    ([1, 2, 3, 4], 1, [2, 1, 2, 3, 4, 3]),
])
def test_replicate(samples, padding, expected):
    strategy = BorderReplicate(len(samples), padding, BayerDepth.DEPTH8)
    assert read_row(strategy, samples) == expected


@pytest.mark.parametrize("samples, padding, expected", [
    ([1, 2, 3, 4, 5, 6], 4, [5, 4, 3, 2, 1, 2, 3, 4, 5, 6, 5, 4, 3, 2]),
    ([1, 2, 3, 4, 5], 3, [4, 3, 2, 1, 2, 3, 4, 5, 4, 3, 2]),
])
def test_mirror(samples, padding, expected):
    strategy = BorderMirror(len(samples), padding, BayerDepth.DEPTH8)
    assert read_row(strategy, samples) == expected


def test_sixteen_bit_rows():
    strategy = BorderMirror(4, 3, BayerDepth.DEPTH16BE)
    data = struct.pack('>4H', 1000, 2000, 3000, 40000)
    row = strategy.new_row()
    strategy.read_line(io.BytesIO(data), row)
    assert row.tolist() == [40000, 3000, 2000, 1000, 2000, 3000, 40000, 3000, 2000, 1000]


def test_preconditions():
    with pytest.raises(BorderError):
        BorderReplicate(1, 1, BayerDepth.DEPTH8)

    with pytest.raises(BorderError):
        BorderMirror(3, 3, BayerDepth.DEPTH8)

    with pytest.raises(BorderError):
        BorderNone(0, BayerDepth.DEPTH8)


def test_source_rows():
    replicate = BorderReplicate(4, 1, BayerDepth.DEPTH8)
    assert [replicate.source_row(row, 5) for row in (-2, -1, 0, 4, 5, 6)] == [0, 1, 0, 4, 3, 4]

    mirror = BorderMirror(4, 3, BayerDepth.DEPTH8)
    assert [mirror.source_row(row, 5) for row in (-3, -1, 2, 5, 7)] == [3, 1, 2, 3, 1]

    none = BorderNone(4, BayerDepth.DEPTH8)
    assert none.source_row(2, 5) == 2
    with pytest.raises(BorderError):
        none.source_row(-1, 5)
