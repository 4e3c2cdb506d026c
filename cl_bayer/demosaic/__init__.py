"""
File        : __init__.py
Author      : Eldridge M. Mount IV
Description : Module initialization file for subpackage cl_bayer.demosaic

              This subpackage provides the demosaicing kernels, the row
              drivers feeding them, and dispatch from an algorithm
              selection onto its kernel.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
__all__ = ['base', 'cubic', 'linear', 'nearest_neighbour', 'none']

from .base import check_depth
from .cubic import Cubic
from .linear import Linear
from .nearest_neighbour import NearestNeighbour
from .none import NoInterpolation
from ..errors import BayerError

import enum
from enum import Enum


"""Enumeration of demosaicing algorithms"""
Demosaic = Enum('Demosaic', 'NONE NEAREST_NEIGHBOUR LINEAR CUBIC', start=0)


"""Algorithm classes, by enumerated algorithm"""
ALGORITHMS = {
    Demosaic.NONE : NoInterpolation,
    Demosaic.NEAREST_NEIGHBOUR : NearestNeighbour,
    Demosaic.LINEAR : Linear,
    Demosaic.CUBIC : Cubic
}


def algorithm_for(algorithm, log=None):
    """Returns an instance of the kernel class for an enumerated algorithm

    Args:
        algorithm: Demosaic value, or its numeric code

    Kwargs:
        log: Optional log handed to the kernel
    """
    if not isinstance(algorithm, Demosaic):
        try:
            algorithm = Demosaic(algorithm)
        except ValueError:
            raise BayerError("Unrecognized demosaicing algorithm \"{}\"".format(algorithm))

    return ALGORITHMS[algorithm](log=log)


def run_demosaic(stream, depth, cfa, algorithm, raster, mode=None, workers=None, log=None):
    """Demosaics a raw sample stream into a raster with the selected algorithm

    Args:
        stream: Readable stream, or bytes-like object, of raw samples
        depth: BayerDepth of the sample stream
        cfa: Phase of the frame's top-left sample
        algorithm: Demosaic value selecting the kernel
        raster: Destination RasterView

    Kwargs:
        mode: ExecutionMode for the decode
        workers: Row worker threads for a parallel decode
        log: Optional log to use in place of the kernel's logger
    """
    algorithm_for(algorithm, log=log).run(stream, depth, cfa, raster, mode=mode, workers=workers)
