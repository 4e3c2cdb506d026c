"""
File        : patterns.py
Author      : Eldridge M. Mount IV
Description : Module for programmatically generating patterned images

              The abstract and concrete classes in this module support a
              dependency-injection style of testing; instances may be
              placed into parameter collections, passing autonomous yet
              distinct pattern generators to each test case.

     o  0
     | /       Copyright (c) 2017-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from .image_defs import ImageDefs, RGBPlanes
from ..errors import BayerError

from abc import ABC, abstractmethod

import enum
from enum import Enum

import logging

import numpy as np


class PatternError(BayerError):
    """Exception class for image pattern generators"""
    pass


class PatternGenerator(ABC):
    """Abstract class providing various image pattern generators

    Concrete subclasses provide specific implementations for a generator method
    returning a sequence of iterated pattern images, each an ndarray shaped
    (vert_res, horiz_res, planes). Pattern generators are able to produce
    either static or dynamic sequences of images, since the generator method
    is able to retain its own state space.
    """

    def __init__(self, dtype=None):
        """Initializes an instance of the abstract pattern generator class

        Kwargs:
            dtype: Underlying data type for representing image pels; by
                   default the narrowest unsigned type holding the pel depth
        """
        self._dtype = dtype
        self.log = logging.getLogger("cl_bayer.imaging.{}".format(self.__class__.__name__))


    @abstractmethod
    def images(self, num_images, vert_res, horiz_res, pel_depth):
        """Abstract generator method for producing image pattern sequences

        Iterating the value returned by this generator yields the specified
        number of images in a subclass-specific manner.

        Args:
            num_images: Number of images in the sequence
            vert_res: Vertical resolution
            horiz_res: Horizontal resolution
            pel_depth: Pixel element depth (bits)
        """
        pass


    def dtype(self, pel_depth):
        """Returns the pel data type for images of the passed depth"""
        if self._dtype is not None:
            return np.dtype(self._dtype)

        return np.dtype(np.uint8) if (pel_depth <= 8) else np.dtype(np.uint16)


    """Enumeration for gradient directionality"""
    GradientDir = Enum('GradientDir', 'HORIZ VERT', start=0)


class RgbGradient(PatternGenerator):
    """Concrete pattern generator class producing colorful RGB gradient images"""

    def images(self, num_images, vert_res, horiz_res, pel_depth):
        """Overloaded image generator method

        The gradient image data is constructed as so for each channel:

          * Red   : Pixel value equals the X coordinate
          * Green : Pixel value equals the Y coordinate
          * Blue  : Pixel value equals [MAX_PEL - abs(x  - y)]

        All values wrap at the modulus of the pel depth.
        """
        modulus = (1 << pel_depth)
        max_pel = (modulus - 1)
        rows, cols = np.indices((vert_res, horiz_res))

        for image_index in range(num_images):
            gradient = np.empty(ImageDefs.ndarray_shape(vert_res, horiz_res, RGBPlanes.NUM_PLANES.value),
                                dtype=self.dtype(pel_depth))
            gradient[..., RGBPlanes.RED.value] = (cols % modulus)
            gradient[..., RGBPlanes.GREEN.value] = (rows % modulus)
            gradient[..., RGBPlanes.BLUE.value] = ((max_pel - np.abs(cols - rows)) % modulus)

            yield gradient


class MonoGradient(PatternGenerator):
    """Concrete pattern generator class producing monochromatic gradient images"""

    def __init__(self, direction, num_planes=1, *args, **kwargs):
        """Initializes a monochromatic image generator

        A sequence of static, monochromatic gradient images are generated in the
        passed direction. Identical spatial data is encoded on each image plane.

        Args:
            direction: Direction of the gradient to be generated
            num_planes: Number of image planes in the generated images
        """
        PatternGenerator.__init__(self, *args, **kwargs)

        if not isinstance(direction, PatternGenerator.GradientDir):
            raise PatternError("Unrecognized gradient direction parameter \"{}\"".format(direction))

        self._direction = direction
        self._num_planes = num_planes


    def images(self, num_images, vert_res, horiz_res, pel_depth):
        """Overloaded image generator method

        For a horizontal gradient, each pixel value equals its X coordinate.
        Conversely, vertical gradient pixels each equal their Y coordinate.
        """
        modulus = (1 << pel_depth)
        rows, cols = np.indices((vert_res, horiz_res))
        ramp = cols if (self._direction is PatternGenerator.GradientDir.HORIZ) else rows

        for image_index in range(num_images):
            gradient = np.empty(ImageDefs.ndarray_shape(vert_res, horiz_res, self._num_planes),
                                dtype=self.dtype(pel_depth))
            for plane_index in range(self._num_planes):
                gradient[..., plane_index] = (ramp % modulus)

            yield gradient


class UniformRandom(PatternGenerator):
    """Concrete pattern generator class producing uniformly-distributed random images"""

    def __init__(self, num_planes=1, seed=None, *args, **kwargs):
        """Initializes a uniform-random image generator

        A sequence of dynamic random images consisting of uniformly-distributed,
        pseudo-random image data are generated. Different spatial data is encoded
        on each image plane.

        Args:
            num_planes: Number of image planes in the generated images
            seed: Seed for a reproducible sequence of images
        """
        PatternGenerator.__init__(self, *args, **kwargs)

        self._num_planes = num_planes
        self._rng = np.random.default_rng(seed)


    def images(self, num_images, vert_res, horiz_res, pel_depth):
        """Overloaded image generator method"""
        max_pel = ((1 << pel_depth) - 1)
        dtype = self.dtype(pel_depth)

        for image_index in range(num_images):
            random_image = np.empty(ImageDefs.ndarray_shape(vert_res, horiz_res, self._num_planes), dtype=dtype)

            # Populate each image plane with its own uniformly-distributed field
            for plane_index in range(self._num_planes):
                random_image[..., plane_index] = self._rng.integers(0, (max_pel + 1), (vert_res, horiz_res))

            yield random_image


class FlatField(PatternGenerator):
    """Concrete pattern generator class producing uniform images of one value"""

    def __init__(self, value=None, num_planes=1, *args, **kwargs):
        """Initializes a flat-field image generator

        Args:
            value: Pel value of the field; mid-scale when omitted
            num_planes: Number of image planes in the generated images
        """
        PatternGenerator.__init__(self, *args, **kwargs)

        self._value = value
        self._num_planes = num_planes


    def images(self, num_images, vert_res, horiz_res, pel_depth):
        """Overloaded image generator method"""
        value = (1 << (pel_depth - 1)) if (self._value is None) else self._value
        if (value < 0) or (value >= (1 << pel_depth)):
            raise PatternError("Flat-field value {} exceeds a {}-bit pel".format(value, pel_depth))

        for image_index in range(num_images):
            yield np.full(ImageDefs.ndarray_shape(vert_res, horiz_res, self._num_planes),
                          value,
                          dtype=self.dtype(pel_depth))


class Impulse(PatternGenerator):
    """Concrete pattern generator class producing a single lit pel on black"""

    def __init__(self, row, col, value=None, num_planes=1, *args, **kwargs):
        """Initializes an impulse image generator

        Args:
            row: Row of the impulse
            col: Column of the impulse
            value: Pel value of the impulse; full-scale when omitted
            num_planes: Number of image planes in the generated images
        """
        PatternGenerator.__init__(self, *args, **kwargs)

        self._row = row
        self._col = col
        self._value = value
        self._num_planes = num_planes


    def images(self, num_images, vert_res, horiz_res, pel_depth):
        """Overloaded image generator method"""
        if not ((0 <= self._row < vert_res) and (0 <= self._col < horiz_res)):
            raise PatternError("Impulse at ({}, {}) lies outside a {}x{} image".format(self._col,
                                                                                     self._row,
                                                                                     horiz_res,
                                                                                     vert_res))

        value = ((1 << pel_depth) - 1) if (self._value is None) else self._value

        for image_index in range(num_images):
            impulse = np.zeros(ImageDefs.ndarray_shape(vert_res, horiz_res, self._num_planes),
                               dtype=self.dtype(pel_depth))
            impulse[self._row, self._col, :] = value

            yield impulse
