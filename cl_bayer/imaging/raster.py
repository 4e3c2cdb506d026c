"""
File        : raster.py
Author      : Eldridge M. Mount IV
Description : Module providing a mutable raster view over a caller-owned
              pixel buffer.

              The view describes a rectangular window (origin, size and
              row stride in bytes) of RGB pixels at a fixed depth, and
              hands out live, typed slices of each of its rows. Pixels
              are packed as R, G, B channel triplets; 16-bit channels are
              read and written through an explicit byte order rather than
              by reinterpreting the buffer.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from .image_defs import ImageDefs, RasterDepth, RGBPlanes
from ..errors import BayerError

import numbers
import sys

import numpy


class RasterError(BayerError):
    """Exception class for raster view construction and access"""
    pass


class RasterView:
    """Class describing a rectangular, strided window into a pixel buffer

    The view never owns its buffer; the caller keeps it alive for as long
    as the view (and any row slice obtained from it) is in use.
    """

    # Dtypes used for 16-bit channels, by byte order
    __WORD_DTYPES = {
        'little' : numpy.dtype('<u2'),
        'big' : numpy.dtype('>u2')
    }


    def __init__(self, x, y, width, height, stride, depth, buf, byteorder='little'):
        """Initializes a raster view, validating its geometry against the buffer

        Args:
            x: Horizontal origin of the window, in pixels
            y: Vertical origin of the window, in rows
            width: Width of the window, in pixels
            height: Height of the window, in rows
            stride: Distance between successive buffer rows, in bytes
            depth: RasterDepth of the pixels
            buf: Writable buffer holding the pixels

        Kwargs:
            byteorder: Byte order of 16-bit channels, 'little' or 'big'
        """
        for name, value in (('x', x), ('y', y), ('width', width), ('height', height), ('stride', stride)):
            if not isinstance(value, numbers.Integral) or isinstance(value, bool) or (value < 0):
                raise RasterError("Raster {} must be a non-negative integer, got {!r}".format(name, value))

        if not isinstance(depth, RasterDepth):
            raise RasterError("Unrecognized raster depth \"{}\"".format(depth))

        if byteorder not in RasterView.__WORD_DTYPES:
            raise RasterError("Unrecognized byte order \"{}\"".format(byteorder))

        try:
            view = memoryview(buf)
        except TypeError:
            raise RasterError("Raster buffer of type {} does not expose a buffer".format(type(buf).__name__))

        if view.readonly:
            raise RasterError("Raster buffer is read-only")

        # Compute the bounds of the window, treating anything beyond the
        # platform's native size as an overflow rather than a valid extent
        bytes_per_pixel = ImageDefs.bytes_per_pixel(depth)
        x1 = RasterView.__checked(x + width)
        y1 = RasterView.__checked(y + height)
        row_bytes = RasterView.__checked(x1 * bytes_per_pixel)
        extent = RasterView.__checked(stride * y1)

        if (width == 0) or (height == 0):
            raise RasterError("Raster of {}x{} pixels is empty".format(width, height))

        if row_bytes > stride:
            raise RasterError("Raster row of {} bytes exceeds stride of {} bytes".format(row_bytes, stride))

        if (stride % bytes_per_pixel) != 0:
            raise RasterError("Stride of {} bytes is not a multiple of {} bytes per pixel".format(stride,
                                                                                                  bytes_per_pixel))

        if extent > view.nbytes:
            raise RasterError("Raster extent of {} bytes exceeds buffer of {} bytes".format(extent, view.nbytes))

        self._x = x
        self._y = y
        self._w = width
        self._h = height
        self._stride = stride
        self._depth = depth
        self._byteorder = byteorder
        self._bytes_per_pixel = bytes_per_pixel
        self._buf = buf
        try:
            self._bytes = numpy.frombuffer(view.cast('B'), dtype=numpy.uint8)
        except TypeError:
            raise RasterError("Raster buffer must be contiguous")


    @staticmethod
    def __checked(value):
        """Raises a RasterError if a computed bound exceeds the native size"""
        if value > sys.maxsize:
            raise RasterError("Raster geometry overflows")

        return value


    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def width(self):
        return self._w

    @property
    def height(self):
        return self._h

    @property
    def stride(self):
        return self._stride

    @property
    def depth(self):
        return self._depth

    @property
    def byteorder(self):
        return self._byteorder

    @property
    def bytes_per_pixel(self):
        return self._bytes_per_pixel


    def row_u8(self, index):
        """Returns a live uint8 slice of 3 * width channel values for a row

        Args:
            index: Row index within the window

        Returns:
            A writable numpy view into the caller's buffer
        """
        if self._depth is not RasterDepth.DEPTH8:
            raise RasterError("8-bit row requested from a {} raster".format(self._depth.name))

        return self.__row_bytes(index)


    def row_u16(self, index):
        """Returns a live 16-bit slice of 3 * width channel values for a row

        Channel values are presented in native integer form; the view's byte
        order is applied as they are read from or written into the buffer.

        Args:
            index: Row index within the window

        Returns:
            A writable numpy view into the caller's buffer
        """
        if self._depth is not RasterDepth.DEPTH16:
            raise RasterError("16-bit row requested from a {} raster".format(self._depth.name))

        return self.__row_bytes(index).view(RasterView.__WORD_DTYPES[self._byteorder])


    def row(self, index):
        """Returns the typed row slice matching the raster's depth"""
        if self._depth is RasterDepth.DEPTH8:
            return self.row_u8(index)

        return self.row_u16(index)


    def rows(self):
        """Generator yielding each typed row slice, top to bottom"""
        for index in range(self._h):
            yield self.row(index)


    def image(self):
        """Returns a copy of the window as a (height, width, planes) ndarray"""
        dtype = numpy.uint8 if (self._depth is RasterDepth.DEPTH8) else numpy.uint16
        image = numpy.empty(ImageDefs.ndarray_shape(self._h, self._w, RGBPlanes.NUM_PLANES.value), dtype=dtype)
        for index in range(self._h):
            image[index] = self.row(index).reshape(self._w, RGBPlanes.NUM_PLANES.value)

        return image


    def __row_bytes(self, index):
        """Returns the byte slice backing a row of the window"""
        if not isinstance(index, numbers.Integral) or (index < 0) or (index >= self._h):
            raise RasterError("Row {} is outside a raster of height {}".format(index, self._h))

        start = ((self._y + index) * self._stride) + (self._x * self._bytes_per_pixel)
        return self._bytes[start:(start + (self._w * self._bytes_per_pixel))]


    def __repr__(self):
        return "RasterView(x={}, y={}, width={}, height={}, stride={}, depth={})".format(self._x,
                                                                                       self._y,
                                                                                       self._w,
                                                                                       self._h,
                                                                                       self._stride,
                                                                                       self._depth.name)


def new_raster(width, height, depth, buf, byteorder='little'):
    """Returns a raster view packing rows of the passed width back to back

    Args:
        width: Width of the raster, in pixels
        height: Height of the raster, in rows
        depth: RasterDepth of the pixels
        buf: Writable buffer holding the pixels

    Kwargs:
        byteorder: Byte order of 16-bit channels
    """
    if not isinstance(depth, RasterDepth):
        raise RasterError("Unrecognized raster depth \"{}\"".format(depth))

    if not isinstance(width, numbers.Integral) or (width < 0):
        raise RasterError("Raster width must be a non-negative integer, got {!r}".format(width))

    stride = (width * ImageDefs.bytes_per_pixel(depth))
    if stride > sys.maxsize:
        raise RasterError("Raster geometry overflows")

    return RasterView(0, 0, width, height, stride, depth, buf, byteorder=byteorder)


def new_raster_with_geometry(x, y, width, height, stride, depth, buf, byteorder='little'):
    """Returns a raster view over a window of a larger, strided buffer

    Args:
        x: Horizontal origin of the window, in pixels
        y: Vertical origin of the window, in rows
        width: Width of the window, in pixels
        height: Height of the window, in rows
        stride: Distance between successive buffer rows, in bytes
        depth: RasterDepth of the pixels
        buf: Writable buffer holding the pixels

    Kwargs:
        byteorder: Byte order of 16-bit channels
    """
    return RasterView(x, y, width, height, stride, depth, buf, byteorder=byteorder)
