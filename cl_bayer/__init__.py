"""
File        : __init__.py
Author      : Eldridge M. Mount IV
Description : Module initialization file for package cl_bayer

              This package reconstructs full-colour RGB rasters from raw,
              header-less Bayer sensor streams, writing into caller-owned
              pixel buffers.

              The common entry points are declared directly herein.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
__all__ = ['config', 'demosaic', 'errors', 'imaging', 'stream']

from .demosaic import Demosaic, run_demosaic
from .imaging.raster import new_raster, new_raster_with_geometry

import logging


logging.getLogger(__name__).addHandler(logging.NullHandler())


def decode(stream, sample_depth, cfa_origin, algorithm, raster_view, mode=None, workers=None, log=None):
    """Decodes one raw Bayer frame into a raster view

    The frame geometry is taken from the raster view; exactly
    (width * height) samples are consumed from the stream.

    Args:
        stream: Readable stream, or bytes-like object, of raw samples
        sample_depth: BayerDepth of the samples on the wire
        cfa_origin: CFA phase of the frame's top-left sample
        algorithm: Demosaic value selecting the kernel
        raster_view: Destination RasterView

    Kwargs:
        mode: ExecutionMode; defaults through config.DecodeConfig
        workers: Row worker threads for a parallel decode
        log: Optional log to use in place of the kernel's logger
    """
    run_demosaic(stream, sample_depth, cfa_origin, algorithm, raster_view, mode=mode, workers=workers, log=log)
