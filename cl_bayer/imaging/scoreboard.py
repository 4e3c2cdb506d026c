"""
File        : scoreboard.py
Author      : Eldridge M. Mount IV
Description : Module implementing a scoreboard for verification of
              reconstructed raster data against expected images.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from .image_defs import RGBPlanes
from .raster import RasterView
from ..errors import BayerError

import logging

import numpy


class ScoreboardError(BayerError):
    """Exception class for scoreboard mismatches"""
    pass


class RasterScoreboard:
    """Class comparing produced rasters against expected images

    Images are compared pel by pel; the first mismatch found in row-major,
    plane-minor order is logged with its coordinates and plane.
    """

    def __init__(self, plane_names=None, log=None):
        """Initializes the scoreboard

        Kwargs:
            plane_names: Sequence of string names for image planes
            log: Optional log to use in place of the class logger
        """
        if plane_names is None:
            plane_names = [plane.name for plane in RGBPlanes if plane is not RGBPlanes.NUM_PLANES]

        self._plane_names = plane_names
        self.log = log if log else logging.getLogger("cl_bayer.imaging.{}".format(self.__class__.__name__))
        self.matched = 0


    def compare(self, got, exp):
        """Compares a produced image with the expected one

        Args:
            got: Produced RasterView or (height, width, planes) ndarray
            exp: Expected (height, width, planes) ndarray
        """
        got_image = got.image() if isinstance(got, RasterView) else numpy.asarray(got)
        exp = numpy.asarray(exp)

        if got_image.shape != exp.shape:
            self.log.error("Produced image of shape {}, expected {}".format(got_image.shape, exp.shape))
            raise ScoreboardError("Produced image does not match the expected shape")

        mismatches = numpy.argwhere(got_image != exp)
        if len(mismatches):
            row_index, col_index, plane_index = mismatches[0]
            plane_label = self._plane_names[plane_index] if self._plane_names else plane_index
            self.log.error("Incorrect pel value at ({}, {}) plane ({}) : received 0x{:04X}, expected 0x{:04X}".format(
                col_index,
                row_index,
                plane_label,
                int(got_image[row_index, col_index, plane_index]),
                int(exp[row_index, col_index, plane_index])))

            raise ScoreboardError("Mismatched image data on {} of {} pels".format(len(mismatches), exp.size))

        self.matched = (self.matched + 1)
        self.log.debug("Image {} matched, shape {}".format(self.matched, exp.shape))
