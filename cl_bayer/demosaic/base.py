"""
File        : base.py
Author      : Eldridge M. Mount IV
Description : Module providing the abstract demosaicing algorithm and the
              row drivers shared by all concrete kernels.

              A kernel evaluates one output row at a time from a window of
              padded input rows. Two drivers feed it:

              * Sequential : a fixed ring of row buffers slides down the
                             frame, reading each stream row exactly once
                             and never past the last row. Suitable for
                             non-seekable streams.
              * Parallel   : the whole bordered frame is read up front,
                             its top and bottom padding rows are filled by
                             explicit copies, and rows are evaluated as
                             independent tasks on a thread pool.

              Both drivers present identical windows to the kernel, so
              their output is bit-identical.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from ..config import DecodeConfig, ExecutionMode
from ..errors import BayerError, WrongDepthError, WrongResolutionError
from ..imaging.image_defs import BayerDepth, CFA, CfaPhase, ImageDefs, RasterDepth, RGBPlanes
from ..stream.reader import as_stream

from abc import ABC, abstractmethod

import logging
from multiprocessing.pool import ThreadPool

import numpy


def check_depth(bayer_depth, raster_depth):
    """Returns True if samples of a Bayer depth may fill a raster depth

    An 8-bit raster requires 8-bit samples; a 16-bit raster accepts 16-bit
    samples of either byte order.
    """
    if raster_depth is RasterDepth.DEPTH8:
        return (bayer_depth is BayerDepth.DEPTH8)

    return bayer_depth in (BayerDepth.DEPTH16BE, BayerDepth.DEPTH16LE)


def tap(row, offset, padding, width):
    """Returns the width samples of a padded row displaced by offset columns"""
    start = (padding + offset)
    return row[start:(start + width)]


def widen(window):
    """Returns the rows of a window widened for kernel accumulation"""
    return [row.astype(numpy.int64) for row in window]


def saturate(pos, neg, divisor, max_pel):
    """Divides the saturating difference of two accumulators, clamped to max_pel

    Negative differences clip to zero rather than wrapping.
    """
    return numpy.minimum((numpy.maximum((pos - neg), 0) // divisor), max_pel)


def assign_pels(rgb, cfa, sample, green, diagonal, horiz, vert):
    """Scatters per-column estimates of a row into its RGB pels

    Even columns carry the row's phase and odd columns its right-stepped
    phase. At colour sites the sample fills its own plane, with the green
    and diagonal estimates filling the others; at green sites the sample is
    green, with the horizontal and vertical estimates filling the colour
    found along each axis.

    Args:
        rgb: Output row shaped (width, planes)
        cfa: Phase of the row's first pel
        sample: Raw samples of the row
        green: Green estimates for colour sites
        diagonal: Diagonal-colour estimates for colour sites
        horiz: Horizontal-axis colour estimates for green sites
        vert: Vertical-axis colour estimates for green sites
    """
    green_plane = RGBPlanes.GREEN.value
    phase = cfa
    for parity in (0, 1):
        cols = slice(parity, None, 2)
        first, second = CfaPhase.channels(phase)
        if CfaPhase.is_green(phase):
            rgb[cols, first] = horiz[cols]
            rgb[cols, green_plane] = sample[cols]
            rgb[cols, second] = vert[cols]
        else:
            rgb[cols, first] = sample[cols]
            rgb[cols, green_plane] = green[cols]
            rgb[cols, second] = diagonal[cols]

        phase = CfaPhase.step_right(phase)


class DemosaicAlgorithm(ABC):
    """Abstract class for row-wise demosaicing kernels

    Concrete subclasses declare their receptive field through the class
    attributes below, supply a border strategy, and evaluate one output
    row from a window of (ROWS_BEFORE + 1 + ROWS_AFTER) padded rows.
    """

    # Samples synthesized beyond each side of a scanline
    PADDING = 0

    # Rows of context above and below each output row
    ROWS_BEFORE = 0
    ROWS_AFTER = 0

    # Smallest width and height the kernel accepts
    MIN_RES = 2


    def __init__(self, log=None):
        """Initializes an instance of the abstract algorithm class

        Kwargs:
            log: Optional log to use in place of the class logger
        """
        self.log = log if log else logging.getLogger("cl_bayer.demosaic.{}".format(self.__class__.__name__))


    @classmethod
    def ring_size(cls):
        """Returns the number of rows in the kernel's sliding window"""
        return (cls.ROWS_BEFORE + 1 + cls.ROWS_AFTER)


    @abstractmethod
    def border(self, width, depth):
        """Returns the border strategy feeding the kernel

        Args:
            width: Number of samples per scanline
            depth: BayerDepth of the sample stream
        """
        pass


    @abstractmethod
    def apply_kernel_row(self, row, window, cfa, width, max_pel):
        """Evaluates the kernel for one output row

        Args:
            row: Typed output row slice of 3 * width channel values
            window: Padded input rows, topmost first, centred on the output row
            cfa: Phase of the row's first pel
            width: Number of pels in the row
            max_pel: Largest value representable in the output
        """
        pass


    def validate(self, depth, cfa, raster):
        """Checks the decode preconditions, before any data is read

        Args:
            depth: BayerDepth of the sample stream
            cfa: Phase of the frame's top-left sample
            raster: Destination RasterView
        """
        if not isinstance(depth, BayerDepth):
            raise BayerError("Unrecognized Bayer depth \"{}\"".format(depth))

        if not isinstance(cfa, CFA):
            raise BayerError("Unrecognized CFA phase \"{}\"".format(cfa))

        if (raster.width < self.MIN_RES) or (raster.height < self.MIN_RES):
            raise WrongResolutionError("{} requires at least {}x{} pels, got {}x{}".format(self.__class__.__name__,
                                                                                         self.MIN_RES,
                                                                                         self.MIN_RES,
                                                                                         raster.width,
                                                                                         raster.height))

        if not check_depth(depth, raster.depth):
            raise WrongDepthError("{} samples cannot fill a {} raster".format(depth.name, raster.depth.name))


    def run(self, stream, depth, cfa, raster, mode=None, workers=None):
        """Demosaics a raw sample stream into a raster

        Args:
            stream: Readable stream, or bytes-like object, of raw samples
            depth: BayerDepth of the sample stream
            cfa: Phase of the frame's top-left sample
            raster: Destination RasterView, already sized to the frame

        Kwargs:
            mode: ExecutionMode; resolved through DecodeConfig when omitted
            workers: Row worker threads for parallel mode
        """
        self.validate(depth, cfa, raster)

        mode = DecodeConfig.mode(mode)
        stream = as_stream(stream)
        border = self.border(raster.width, depth)
        max_pel = ImageDefs.max_pel(raster.depth)

        self.log.info("Demosaicing {}x{} {} frame, origin {}, {} mode".format(raster.width,
                                                                            raster.height,
                                                                            depth.name,
                                                                            cfa.name,
                                                                            mode.name.lower()))

        if mode is ExecutionMode.PARALLEL:
            self._run_parallel(stream, cfa, raster, border, max_pel, DecodeConfig.workers(workers))
        else:
            self._run_sequential(stream, cfa, raster, border, max_pel)

        self.log.debug("  * Produced {} rows".format(raster.height))


    def _window_rows(self, index, height, border):
        """Returns the interior rows forming the window of an output row"""
        return [border.source_row(row, height)
                for row in range((index - self.ROWS_BEFORE), (index + self.ROWS_AFTER + 1))]


    def _run_sequential(self, stream, cfa, raster, border, max_pel):
        """Sliding-window driver

        Stream row r lives in ring slot (r % ring_size). Each output row
        reads ahead only as far as its window reaches, which at the top edge
        may include the rows mirrored into the padding.
        """
        width, height = raster.width, raster.height
        ring_size = self.ring_size()
        ring = [border.new_row() for slot in range(ring_size)]
        rows_read = 0

        self.log.debug("  * Sequential ring of {} rows, {} samples each".format(ring_size, border.row_len))

        row_cfa = cfa
        for index in range(height):
            sources = self._window_rows(index, height, border)
            while rows_read <= max(sources):
                border.read_line(stream, ring[rows_read % ring_size])
                rows_read = (rows_read + 1)

            window = [ring[source % ring_size] for source in sources]
            self.apply_kernel_row(raster.row(index), window, row_cfa, width, max_pel)
            row_cfa = CfaPhase.step_down(row_cfa)


    def _run_parallel(self, stream, cfa, raster, border, max_pel, workers):
        """Whole-frame driver

        The bordered frame is fully materialized and frozen before any row
        task starts; tasks write disjoint output rows.
        """
        width, height = raster.width, raster.height
        before, after = self.ROWS_BEFORE, self.ROWS_AFTER
        frame = numpy.zeros(((before + height + after), border.row_len), dtype=border.new_row().dtype)

        # Read all data
        for index in range(height):
            border.read_line(stream, frame[before + index])

        # Fill the top and bottom padding rows from the interior
        for distance in range(1, (before + 1)):
            frame[before - distance] = frame[before + border.source_row(-distance, height)]

        for distance in range(1, (after + 1)):
            row = (height - 1 + distance)
            frame[before + row] = frame[before + border.source_row(row, height)]

        frame.flags.writeable = False

        self.log.debug("  * Parallel frame of {}x{} samples across {} workers".format(border.row_len,
                                                                                     frame.shape[0],
                                                                                     workers))

        def apply_row(index):
            row_cfa = cfa if ((index % 2) == 0) else CfaPhase.step_down(cfa)
            window = list(frame[index:(index + before + 1 + after)])
            self.apply_kernel_row(raster.row(index), window, row_cfa, width, max_pel)

        with ThreadPool(workers) as pool:
            pool.map(apply_row, range(height))
