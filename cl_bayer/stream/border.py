"""
File        : border.py
Author      : Eldridge M. Mount IV
Description : Module providing border strategies for Bayer row readers.

              A strategy reads one scanline of raw samples into the middle
              of a padded row buffer and synthesizes the samples beyond
              the left and right frame edges, so interpolation kernels
              never index outside the buffer. Synthesized samples always
              carry the CFA colour of the position they stand in for.

              With unprimed values read from the stream and primed values
              synthesized, the strategies produce rows as so:

                None      :                 r0 g0 r1 g1 ... rm gm rn gn
                Replicate :     r0' g0' | r0 g0 r1 g1 ... rm gm rn gn | rn' gn'
                Mirror    : g1' r1' g0' | r0 g0 r1 g1 ... rm gm rn gn | rn' gm' rm'

              The same synthesis applies across rows at the top and bottom
              frame edges, through the source_row() mapping.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from .reader import new_samples, reader_for
from ..errors import BayerError

from abc import ABC, abstractmethod


class BorderError(BayerError):
    """Exception class for border strategies"""
    pass


class BorderStrategy(ABC):
    """Abstract class for reading padded rows of Bayer samples

    Rows produced by a strategy are (width + 2 * padding) samples long:

        0 .. x1   => left border
        x1 .. x2  => raw data
        x2 .. x3  => right border
    """

    def __init__(self, width, padding, depth):
        """Initializes a border strategy

        Args:
            width: Number of samples per scanline
            padding: Number of synthesized samples on each side
            depth: BayerDepth of the sample stream
        """
        if (width < 1) or (padding < 0):
            raise BorderError("Invalid border geometry of width {} and padding {}".format(width, padding))

        self._width = width
        self._padding = padding
        self._depth = depth
        self._read = reader_for(depth)

        self._x1 = padding
        self._x2 = (padding + width)
        self._x3 = (padding + width + padding)


    @property
    def width(self):
        return self._width

    @property
    def padding(self):
        return self._padding

    @property
    def row_len(self):
        return self._x3


    def new_row(self):
        """Returns a zeroed row buffer sized for this strategy"""
        return new_samples(self._depth, self._x3)


    def read_line(self, stream, dst):
        """Reads one scanline into dst, then synthesizes its borders

        Args:
            stream: Object with a read(size) method
            dst: Row buffer of row_len samples
        """
        self._read(stream, dst[self._x1:self._x2])
        self.fill_row(dst)


    @abstractmethod
    def fill_row(self, dst):
        """Synthesizes the left and right borders of a row already read"""
        pass


    @abstractmethod
    def source_row(self, row, height):
        """Maps a padded row index onto the interior row standing in for it

        Args:
            row: Row index, possibly above (< 0) or below (>= height) the frame
            height: Number of rows in the frame

        Returns:
            The index of an interior row, 0 <= index < height
        """
        pass


class BorderNone(BorderStrategy):
    """Concrete border strategy reading scanlines without padding"""

    def __init__(self, width, depth):
        """Initializes a strategy with no borders"""
        BorderStrategy.__init__(self, width, 0, depth)


    def fill_row(self, dst):
        """Overloaded border synthesis; nothing to synthesize"""
        pass


    def source_row(self, row, height):
        """Overloaded row mapping; only interior rows exist"""
        if (row < 0) or (row >= height):
            raise BorderError("Row {} lies outside a frame of {} rows".format(row, height))

        return row


class BorderReplicate(BorderStrategy):
    """Concrete border strategy replicating the two samples nearest each edge

    A border sample at distance k outside an edge copies the interior
    sample at distance 1 (k odd) or 0 (k even) from that edge, keeping
    the two-sample colour period intact.
    """

    def __init__(self, width, padding, depth):
        """Initializes a replicating strategy; requires at least two samples"""
        if width < 2:
            raise BorderError("Replicated borders need a width of at least 2, got {}".format(width))

        BorderStrategy.__init__(self, width, padding, depth)


    def fill_row(self, dst):
        """Overloaded border synthesis"""
        x1, x2, x3 = self._x1, self._x2, self._x3

        # Left border
        r0 = dst[x1]
        g0 = dst[x1 + 1]
        i = 0
        if (x1 % 2) == 1:
            dst[0] = g0
            i = 1

        while i < x1:
            dst[i] = r0
            dst[i + 1] = g0
            i = (i + 2)

        # Right border; an odd padding leaves a final single cell
        rn = dst[x2 - 2]
        gn = dst[x2 - 1]
        i = x2
        while (i + 1) < x3:
            dst[i] = rn
            dst[i + 1] = gn
            i = (i + 2)

        if i == (x3 - 1):
            dst[i] = rn


    def source_row(self, row, height):
        """Overloaded row mapping, replicating the two edge rows"""
        if row < 0:
            return ((-row) % 2)
        elif row >= height:
            distance = (row - height + 1)
            return (height - 2) if ((distance % 2) == 1) else (height - 1)

        return row


class BorderMirror(BorderStrategy):
    """Concrete border strategy reflecting samples about each edge sample

    A border sample at distance k outside an edge equals the interior
    sample at distance k inside it.
    """

    def __init__(self, width, padding, depth):
        """Initializes a mirroring strategy; requires more samples than padding"""
        if width <= padding:
            raise BorderError("Mirrored borders need a width above the padding of {}, got {}".format(padding, width))

        BorderStrategy.__init__(self, width, padding, depth)


    def fill_row(self, dst):
        """Overloaded border synthesis"""
        x1, x2, x3 = self._x1, self._x2, self._x3

        # Left border
        i = x1
        j = (x1 + 1)
        while i > 0:
            dst[i - 1] = dst[j]
            i = (i - 1)
            j = (j + 1)

        # Right border
        i = x2
        j = (x2 - 2)
        while i < x3:
            dst[i] = dst[j]
            i = (i + 1)
            j = (j - 1)


    def source_row(self, row, height):
        """Overloaded row mapping, reflecting rows about the edge rows"""
        if row < 0:
            return (-row)
        elif row >= height:
            return ((2 * (height - 1)) - row)

        return row
