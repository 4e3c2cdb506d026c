"""
File        : image_defs.py
Author      : Eldridge M. Mount IV
Description : Module housing definitions and utilities for working with
              Bayer-patterned sensor data and the RGB rasters it is
              reconstructed into.

              The 2x2 colour filter array (CFA) is described by one of four
              phases, named by the colours of its top-left, top-right,
              bottom-left and bottom-right sites:

                BGGR     GBRG     GRBG     RGGB
                B G      G B      G R      R G
                G R      R G      B G      G B

     o  0
     | /       Copyright (c) 2017-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from ..errors import BayerError, WrongDepthError

import enum
from enum import Enum

import numpy


"""Enumeration of RGB colorspace planes"""
RGBPlanes = Enum('RGBPlanes', 'RED GREEN BLUE NUM_PLANES', start=0)


"""Enumeration of CFA phases, valued by their boundary codes"""
CFA = Enum('CFA', 'BGGR GBRG GRBG RGGB', start=0)


"""Enumeration of raw sample depths and byte orders on the wire"""
BayerDepth = Enum('BayerDepth', 'DEPTH8 DEPTH16BE DEPTH16LE', start=0)


"""Enumeration of reconstructed raster depths, per channel"""
RasterDepth = Enum('RasterDepth', 'DEPTH8 DEPTH16', start=0)


class CfaPhase:
    """Static class housing the 2x2 phase-stepping algebra

    Phases are never stored per pixel; the phase of any site follows from
    the phase of the frame origin and the parity of the site's coordinates.
    """

    # Phase seen after moving one column to the right
    __STEP_RIGHT = {
        CFA.BGGR : CFA.GBRG,
        CFA.GBRG : CFA.BGGR,
        CFA.GRBG : CFA.RGGB,
        CFA.RGGB : CFA.GRBG
    }

    # Phase seen after moving one row down
    __STEP_DOWN = {
        CFA.BGGR : CFA.GRBG,
        CFA.GBRG : CFA.RGGB,
        CFA.GRBG : CFA.BGGR,
        CFA.RGGB : CFA.GBRG
    }

    # Colour sites map onto (own, diagonal) planes
    __COLOR_SITES = {
        CFA.BGGR : (RGBPlanes.BLUE.value, RGBPlanes.RED.value),
        CFA.RGGB : (RGBPlanes.RED.value, RGBPlanes.BLUE.value)
    }

    # Green sites map onto (horizontal, vertical) planes; a GBRG green sits
    # on a blue row, a GRBG green on a red row
    __GREEN_SITES = {
        CFA.GBRG : (RGBPlanes.BLUE.value, RGBPlanes.RED.value),
        CFA.GRBG : (RGBPlanes.RED.value, RGBPlanes.BLUE.value)
    }


    @staticmethod
    def step_right(cfa):
        """Returns the phase of the 2x2 block one column to the right"""
        return CfaPhase.__STEP_RIGHT[cfa]


    @staticmethod
    def step_down(cfa):
        """Returns the phase of the 2x2 block one row down"""
        return CfaPhase.__STEP_DOWN[cfa]


    @staticmethod
    def at(cfa, row, col):
        """Returns the phase of the block whose top-left site is (row, col)

        Args:
            cfa: Phase of the frame origin
            row: Row index of the site
            col: Column index of the site
        """
        phase = cfa
        if (row % 2) == 1:
            phase = CfaPhase.step_down(phase)
        if (col % 2) == 1:
            phase = CfaPhase.step_right(phase)

        return phase


    @staticmethod
    def is_green(cfa):
        """Returns True if the top-left site of the phase is green"""
        return cfa in CfaPhase.__GREEN_SITES


    @staticmethod
    def channels(cfa):
        """Returns the plane indices interpolated at the phase's top-left site

        Colour sites return (own, diagonal); green sites return
        (horizontal, vertical), naming the colour found along each axis.
        """
        if cfa in CfaPhase.__GREEN_SITES:
            return CfaPhase.__GREEN_SITES[cfa]

        return CfaPhase.__COLOR_SITES[cfa]


    @staticmethod
    def from_code(code):
        """Parses a numeric CFA code (0 - 3) into a phase"""
        try:
            return CFA(code)
        except ValueError:
            raise BayerError("Invalid CFA code {}".format(code))


class ImageDefs:
    """Static class housing definitions for image processing"""

    # Sample formats for the raw Bayer wire encodings
    __SAMPLE_FORMATS = {
        BayerDepth.DEPTH8 : {
            'pel_bits' : 8,
            'bytes_per_sample' : 1,
            'wire_dtype' : numpy.dtype('u1')
        },
        BayerDepth.DEPTH16BE : {
            'pel_bits' : 16,
            'bytes_per_sample' : 2,
            'wire_dtype' : numpy.dtype('>u2')
        },
        BayerDepth.DEPTH16LE : {
            'pel_bits' : 16,
            'bytes_per_sample' : 2,
            'wire_dtype' : numpy.dtype('<u2')
        }
    }

    # Pixel formats for reconstructed rasters
    __RASTER_FORMATS = {
        RasterDepth.DEPTH8 : {
            'pel_bits' : 8,
            'bytes_per_pixel' : 3
        },
        RasterDepth.DEPTH16 : {
            'pel_bits' : 16,
            'bytes_per_pixel' : 6
        }
    }


    @staticmethod
    def ndarray_shape(vert_res, horiz_res, num_planes):
        """Returns a tuple of (height, width, planes) for the passed parameters

        The returned tuple is directly applicable to 'numpy.ndarray' sizes for use
        with numpy image processing operations.

        Args:
            vert_res: Vertical resolution
            horiz_res: Horizontal resolution
            num_planes: Number of image planes

        Returns:
            A tuple of (height, width, planes) suitable for numpy.ndarray sizing
        """
        return (vert_res, horiz_res, num_planes)


    @staticmethod
    def bytes_per_pixel(depth):
        """Returns the number of bytes occupied by one RGB pixel of a raster depth"""
        return ImageDefs.__RASTER_FORMATS[depth]['bytes_per_pixel']


    @staticmethod
    def bytes_per_sample(depth):
        """Returns the number of bytes occupied by one raw sample on the wire"""
        return ImageDefs.__SAMPLE_FORMATS[depth]['bytes_per_sample']


    @staticmethod
    def pel_bits(depth):
        """Returns the pel depth, in bits, of a sample or raster depth"""
        if depth in ImageDefs.__SAMPLE_FORMATS:
            return ImageDefs.__SAMPLE_FORMATS[depth]['pel_bits']

        return ImageDefs.__RASTER_FORMATS[depth]['pel_bits']


    @staticmethod
    def max_pel(depth):
        """Returns the largest value representable at a sample or raster depth"""
        return ((1 << ImageDefs.pel_bits(depth)) - 1)


    @staticmethod
    def wire_dtype(depth):
        """Returns the numpy dtype describing raw samples as they sit on the wire"""
        return ImageDefs.__SAMPLE_FORMATS[depth]['wire_dtype']


    @staticmethod
    def sample_dtype(depth):
        """Returns the native numpy dtype holding decoded samples of a depth"""
        return numpy.uint8 if (ImageDefs.pel_bits(depth) == 8) else numpy.uint16


    @staticmethod
    def bayer_depth(bits, big_endian):
        """Parses a (bits, big_endian) pair into a Bayer sample depth

        Args:
            bits: Sample depth in bits; either 8 or 16
            big_endian: Truthy for big-endian 16-bit samples

        Returns:
            The corresponding BayerDepth value
        """
        if bits == 8:
            return BayerDepth.DEPTH8
        elif bits == 16:
            return BayerDepth.DEPTH16BE if big_endian else BayerDepth.DEPTH16LE

        raise WrongDepthError("Invalid sample depth of {} bits".format(bits))


    @staticmethod
    def raster_depth(bits):
        """Parses a per-channel depth in bits into a raster depth"""
        if bits == 8:
            return RasterDepth.DEPTH8
        elif bits == 16:
            return RasterDepth.DEPTH16

        raise WrongDepthError("Invalid raster depth of {} bits".format(bits))
