"""
File        : conftest.py
Author      : Eldridge M. Mount IV
Description : Shared fixtures for the cl_bayer test suite.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
import cl_bayer
from cl_bayer.config import DecodeConfig, ExecutionMode
from cl_bayer.imaging.image_defs import BayerDepth, CFA, ImageDefs, RasterDepth
from cl_bayer.imaging.raster import new_raster
from cl_bayer.imaging.transform import BayerPattern

import numpy
import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keeps decode defaults independent of the invoking shell"""
    monkeypatch.delenv(DecodeConfig.MODE_ENV, raising=False)
    monkeypatch.delenv(DecodeConfig.WORKERS_ENV, raising=False)


def raster_depth_for(depth):
    """Returns the raster depth matching a Bayer sample depth"""
    return RasterDepth.DEPTH8 if (depth is BayerDepth.DEPTH8) else RasterDepth.DEPTH16


def encode(samples, width, height, depth=BayerDepth.DEPTH8):
    """Encodes a flat, row-major list of samples into a raw stream"""
    plane = numpy.asarray(samples, dtype=numpy.int64).reshape(height, width)
    return BayerPattern.encode_samples(plane, depth)


@pytest.fixture
def decode_frame():
    """Factory fixture decoding raw samples into a fresh (h, w, 3) image"""

    def _decode(samples,
                width,
                height,
                algorithm,
                cfa=CFA.RGGB,
                depth=BayerDepth.DEPTH8,
                mode=ExecutionMode.SEQUENTIAL,
                workers=None,
                byteorder='little'):
        if not isinstance(samples, (bytes, bytearray)):
            samples = encode(samples, width, height, depth)

        raster_depth = raster_depth_for(depth)
        buf = bytearray(width * height * ImageDefs.bytes_per_pixel(raster_depth))
        raster = new_raster(width, height, raster_depth, buf, byteorder=byteorder)
        cl_bayer.decode(samples, depth, cfa, algorithm, raster, mode=mode, workers=workers)

        return raster.image()

    return _decode


@pytest.fixture
def raw_frame():
    """Fixture providing the raw stream encoder for flat sample lists"""
    return encode
