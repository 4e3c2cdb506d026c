"""
File        : transform.py
Author      : Eldridge M. Mount IV
Description : Module providing transforms from RGB images into the raw
              Bayer domain.

              Images are subsampled through a CFA phase into a single
              plane, which may then be serialized into the raw wire
              encoding read back by the demosaicing kernels.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from .image_defs import CFA, CfaPhase, ImageDefs, RGBPlanes
from .patterns import PatternGenerator
from ..errors import BayerError

import enum
from enum import Enum

import numpy


class TransformError(BayerError):
    """Exception class for image transforms"""
    pass


class BayerPattern:
    """Static class for Bayer-patterned image definitions and subsampling"""


    """Enumeration of Bayer pattern row-modes"""
    RowMode = Enum('RowMode', 'RED_FIRST BLUE_FIRST', start=0)


    """Enumeration of Bayer pattern column-modes"""
    ColumnMode = Enum('ColumnMode', 'GREEN_FIRST GREEN_SECOND', start=0)


    # CFA phases by (row mode, column mode); the row mode names the colour
    # sharing the first row with green
    __CFAS = {
        (RowMode.RED_FIRST, ColumnMode.GREEN_FIRST) : CFA.GRBG,
        (RowMode.RED_FIRST, ColumnMode.GREEN_SECOND) : CFA.RGGB,
        (RowMode.BLUE_FIRST, ColumnMode.GREEN_FIRST) : CFA.GBRG,
        (RowMode.BLUE_FIRST, ColumnMode.GREEN_SECOND) : CFA.BGGR
    }


    @staticmethod
    def cfa(row_mode, column_mode):
        """Returns the CFA phase described by a row and column mode pair"""
        try:
            return BayerPattern.__CFAS[(row_mode, column_mode)]
        except KeyError:
            raise TransformError("Unrecognized Bayer modes [{} / {}]".format(row_mode, column_mode))


    @staticmethod
    def modes(cfa):
        """Returns the (row mode, column mode) pair describing a CFA phase"""
        for modes, phase in BayerPattern.__CFAS.items():
            if phase is cfa:
                return modes

        raise TransformError("Unrecognized CFA phase \"{}\"".format(cfa))


    @staticmethod
    def mosaic(source_image, cfa, log=None):
        """Sub-samples the source image through a CFA phase

        Args:
            source_image: Source RGB image data, as a numpy.ndarray
            cfa: CFA phase of the image's top-left pel

        Kwargs:
            log: Optional log for progress messages

        Returns:
            The single-plane, Bayer-subsampled image, shaped (height, width)
        """
        # Sanity-check the source image for the appropriate number of planes
        if (source_image.ndim != 3) or (source_image.shape[2] != RGBPlanes.NUM_PLANES.value):
            raise TransformError("Incorrect source shape {} for Bayer subsampling".format(source_image.shape))

        if log:
            log.info("Subsampling image in {} phase".format(cfa.name))

        bayer_image = numpy.empty(source_image.shape[:2], source_image.dtype)

        # Each of the four sites of the 2x2 tile samples the plane of its own colour
        for row in (0, 1):
            for col in (0, 1):
                phase = CfaPhase.at(cfa, row, col)
                plane = RGBPlanes.GREEN.value if CfaPhase.is_green(phase) else CfaPhase.channels(phase)[0]
                bayer_image[row::2, col::2] = source_image[row::2, col::2, plane]

        if log:
            log.info("  * Bayer-subsampled image resolution : ({}, {})".format(bayer_image.shape[1],
                                                                               bayer_image.shape[0]))

        return bayer_image


    @staticmethod
    def encode_samples(plane, depth):
        """Serializes a single-plane image into its raw wire encoding

        Args:
            plane: Bayer-subsampled image, shaped (height, width)
            depth: BayerDepth of the encoding

        Returns:
            A bytes object of row-major samples
        """
        plane = numpy.asarray(plane)
        if plane.ndim != 2:
            raise TransformError("Expected a single-plane image but got shape {}".format(plane.shape))

        if plane.size and ((plane.min() < 0) or (plane.max() > ImageDefs.max_pel(depth))):
            raise TransformError("Pel values exceed a {} encoding".format(depth.name))

        return plane.astype(ImageDefs.wire_dtype(depth)).tobytes()


class BayerTransform(PatternGenerator):
    """Concrete pattern generator transform class for Bayer subsampling

    This class operates as a transform, encapsulating another generator producing
    images in an RGB colorspace. This transform layer permits development of an
    ecosystem of pure-RGB pattern generator classes, with a simple transformability
    to single-plane Bayer-patterned sensor data.
    """

    def __init__(self, source, cfa, *args, **kwargs):
        """Initializes a Bayer-subsampling transform generator instance

        Args:
            source: Source image generator to transform images from
            cfa: CFA phase to subsample through
        """
        PatternGenerator.__init__(self, *args, **kwargs)

        self._source = source
        self._cfa = cfa


    def images(self, num_images, vert_res, horiz_res, pel_depth):
        """Overloaded image generator method"""
        for frame in self._source.images(num_images, vert_res, horiz_res, pel_depth):
            yield BayerPattern.mosaic(frame, self._cfa, log=self.log)
