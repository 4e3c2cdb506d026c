"""
File        : test_raster.py
Author      : Eldridge M. Mount IV
Description : Tests for raster views over caller-owned buffers.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from cl_bayer.imaging.image_defs import RasterDepth
from cl_bayer.imaging.raster import RasterError, RasterView, new_raster, new_raster_with_geometry

import sys

import numpy
import pytest


def test_packed_raster_rows_are_live():
    buf = bytearray(2 * 3 * 3)
    raster = new_raster(3, 2, RasterDepth.DEPTH8, buf)
    assert raster.stride == 9
    assert raster.bytes_per_pixel == 3

    row = raster.row_u8(1)
    assert len(row) == 9
    row[:] = range(1, 10)
    assert list(buf[9:]) == list(range(1, 10))
    assert list(buf[:9]) == [0] * 9


def test_windowed_raster():
    buf = bytearray(12 * 3)
    raster = new_raster_with_geometry(1, 1, 2, 2, 12, RasterDepth.DEPTH8, buf)
    raster.row(0)[:] = 7
    raster.row(1)[:] = 9
    assert list(buf[15:21]) == [7] * 6
    assert list(buf[27:33]) == [9] * 6
    assert buf.count(0) == (len(buf) - 12)


@pytest.mark.parametrize("byteorder, expected", [
    ('little', [0x02, 0x01]),
    ('big', [0x01, 0x02]),
])
def test_word_rows_honour_byte_order(byteorder, expected):
    buf = bytearray(6)
    raster = new_raster(1, 1, RasterDepth.DEPTH16, buf, byteorder=byteorder)
    row = raster.row_u16(0)
    assert len(row) == 3
    row[0] = 0x0102
    assert list(buf[:2]) == expected
    assert int(raster.row(0)[0]) == 0x0102


def test_numpy_buffers():
    buf = numpy.zeros(4 * 3, dtype=numpy.uint8)
    raster = new_raster(2, 2, RasterDepth.DEPTH8, buf)
    raster.row(1)[0] = 200
    assert buf[6] == 200


def test_image_copy():
    buf = bytearray(range(2 * 2 * 3))
    image = new_raster(2, 2, RasterDepth.DEPTH8, buf).image()
    assert image.shape == (2, 2, 3)
    assert image[1, 0].tolist() == [6, 7, 8]


def test_mismatched_row_width():
    with pytest.raises(RasterError):
        new_raster(2, 2, RasterDepth.DEPTH8, bytearray(12)).row_u16(0)

    with pytest.raises(RasterError):
        new_raster(2, 2, RasterDepth.DEPTH16, bytearray(24)).row_u8(0)


@pytest.mark.parametrize("index", [-1, 2])
def test_row_out_of_range(index):
    with pytest.raises(RasterError):
        new_raster(2, 2, RasterDepth.DEPTH8, bytearray(12)).row(index)


@pytest.mark.parametrize("args", [
    (0, 0, 0, 2, 6, RasterDepth.DEPTH8),    # empty width
    (0, 0, 2, 0, 6, RasterDepth.DEPTH8),    # empty height
    (0, 0, 2, 2, 5, RasterDepth.DEPTH8),    # stride below row bytes
    (0, 0, 2, 2, 7, RasterDepth.DEPTH8),    # stride not a pixel multiple
    (1, 0, 2, 2, 6, RasterDepth.DEPTH8),    # origin pushes row past stride
    (0, 0, 2, 3, 6, RasterDepth.DEPTH8),    # extent beyond buffer
    (0, 0, 2, 2, 12, RasterDepth.DEPTH16),  # extent beyond buffer
    (-1, 0, 2, 2, 6, RasterDepth.DEPTH8),   # negative origin
    (0, 0, 2, 2, 6, 'rgb24'),               # unknown depth
])
def test_geometry_invariants(args):
    with pytest.raises(RasterError):
        RasterView(*args, bytearray(12))


def test_overflow_is_rejected():
    with pytest.raises(RasterError):
        new_raster(sys.maxsize, 1, RasterDepth.DEPTH8, bytearray(12))

    with pytest.raises(RasterError):
        new_raster_with_geometry(0, sys.maxsize, 1, 1, 3, RasterDepth.DEPTH8, bytearray(12))


def test_read_only_buffer():
    with pytest.raises(RasterError):
        new_raster(2, 2, RasterDepth.DEPTH8, bytes(12))


def test_unknown_byte_order():
    with pytest.raises(RasterError):
        new_raster(1, 1, RasterDepth.DEPTH16, bytearray(6), byteorder='middle')
