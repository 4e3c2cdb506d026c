"""
File        : test_reader.py
Author      : Eldridge M. Mount IV
Description : Tests for the raw sample readers.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from cl_bayer.errors import BayerError, BayerIOError
from cl_bayer.imaging.image_defs import BayerDepth
from cl_bayer.stream.reader import (as_stream, new_samples, read_exact_u16be, read_exact_u16le, read_exact_u8,
                                    reader_for)

import io

import numpy
import pytest


class TrickleStream:
    """Stream returning at most one byte per read"""

    def __init__(self, data):
        self._data = io.BytesIO(data)

    def read(self, size):
        return self._data.read(min(size, 1))


class FailingStream:
    """Stream whose reads always fail"""

    def __init__(self, error):
        self.error = error

    def read(self, size):
        raise self.error


def test_read_u8():
    dst = new_samples(BayerDepth.DEPTH8, 4)
    read_exact_u8(io.BytesIO(bytes([1, 2, 3, 4, 5])), dst)
    assert dst.tolist() == [1, 2, 3, 4]


def test_read_u16_byte_orders():
    data = bytes([0x01, 0x02, 0xFF, 0x00])

    dst = new_samples(BayerDepth.DEPTH16BE, 2)
    read_exact_u16be(io.BytesIO(data), dst)
    assert dst.tolist() == [0x0102, 0xFF00]

    dst = new_samples(BayerDepth.DEPTH16LE, 2)
    read_exact_u16le(io.BytesIO(data), dst)
    assert dst.tolist() == [0x0201, 0x00FF]
    assert dst.dtype == numpy.uint16


def test_short_reads_are_retried():
    dst = new_samples(BayerDepth.DEPTH16LE, 3)
    read_exact_u16le(TrickleStream(bytes([1, 0, 2, 0, 3, 0])), dst)
    assert dst.tolist() == [1, 2, 3]


def test_exhaustion():
    dst = new_samples(BayerDepth.DEPTH8, 4)
    with pytest.raises(BayerIOError) as excinfo:
        read_exact_u8(io.BytesIO(bytes([1, 2])), dst)

    assert isinstance(excinfo.value.error, EOFError)


def test_odd_byte_count_for_words():
    dst = new_samples(BayerDepth.DEPTH16BE, 2)
    with pytest.raises(BayerIOError):
        read_exact_u16be(io.BytesIO(bytes([1, 2, 3])), dst)


def test_os_error_is_wrapped():
    error = OSError("device unplugged")
    dst = new_samples(BayerDepth.DEPTH8, 1)
    with pytest.raises(BayerIOError) as excinfo:
        read_exact_u8(FailingStream(error), dst)

    assert excinfo.value.error is error
    assert excinfo.value.__cause__ is error
    assert excinfo.value.status == 1


def test_reader_for():
    assert reader_for(BayerDepth.DEPTH8) is read_exact_u8
    assert reader_for(BayerDepth.DEPTH16BE) is read_exact_u16be
    assert reader_for(BayerDepth.DEPTH16LE) is read_exact_u16le
    with pytest.raises(BayerError):
        reader_for(16)


def test_as_stream():
    stream = io.BytesIO(b'abc')
    assert as_stream(stream) is stream
    assert as_stream(b'abc').read(3) == b'abc'
    assert as_stream(bytearray(b'xy')).read(2) == b'xy'
    with pytest.raises(BayerError):
        as_stream(42)
