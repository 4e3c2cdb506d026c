"""
File        : cubic.py
Author      : Eldridge M. Mount IV
Description : Module providing bicubic demosaicing.

              Missing colours are interpolated along each axis with the
              cubic weights (-1, 9, 9, -1) / 16, applied to the sites of
              the wanted colour within three samples of the current one.
              Green at a colour site and the diagonal colour combine the
              separable weights over both axes, giving

                (81 * near - 9 * mid + far) / 256

              Accumulation is done in 64-bit integers; negative lobes
              saturate to zero and results are clamped to the channel
              maximum.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from .base import DemosaicAlgorithm, assign_pels, saturate, tap, widen
from ..imaging.image_defs import RGBPlanes
from ..stream.border import BorderMirror


class Cubic(DemosaicAlgorithm):
    """Concrete algorithm interpolating with cubic convolution"""

    PADDING = 3
    ROWS_BEFORE = 3
    ROWS_AFTER = 3
    MIN_RES = 4


    def border(self, width, depth):
        """Overloaded border strategy"""
        return BorderMirror(width, Cubic.PADDING, depth)


    def apply_kernel_row(self, row, window, cfa, width, max_pel):
        """Overloaded kernel

        The window holds rows p3, p2, p1, c, n1, n2 and n3, three above to
        three below the output row.
        """
        p3, p2, p1, c, n1, n2, n3 = widen(window)
        pad = Cubic.PADDING

        def at(src, offset):
            return tap(src, offset, pad, width)

        # Green at colour sites, from the cross neighbours
        pos = ((81 * (at(p1, 0) + at(c, -1) + at(c, 1) + at(n1, 0))) +
               (at(p3, 0) + at(c, -3) + at(c, 3) + at(n3, 0)))
        neg = (9 * (at(p2, -1) + at(p2, 1) + at(p1, -2) + at(p1, 2) +
                    at(n1, -2) + at(n1, 2) + at(n2, -1) + at(n2, 1)))
        green = saturate(pos, neg, 256, max_pel)

        # Opposite colour at colour sites, from the diagonal neighbours
        pos = ((81 * (at(p1, -1) + at(p1, 1) + at(n1, -1) + at(n1, 1))) +
               (at(p3, -3) + at(p3, 3) + at(n3, -3) + at(n3, 3)))
        neg = (9 * (at(p3, -1) + at(p3, 1) + at(p1, -3) + at(p1, 3) +
                    at(n1, -3) + at(n1, 3) + at(n3, -1) + at(n3, 1)))
        diagonal = saturate(pos, neg, 256, max_pel)

        # Colours along each axis at green sites
        horiz = saturate((9 * (at(c, -1) + at(c, 1))), (at(c, -3) + at(c, 3)), 16, max_pel)
        vert = saturate((9 * (at(p1, 0) + at(n1, 0))), (at(p3, 0) + at(n3, 0)), 16, max_pel)

        assign_pels(row.reshape(width, RGBPlanes.NUM_PLANES.value),
                    cfa,
                    sample=at(c, 0),
                    green=green,
                    diagonal=diagonal,
                    horiz=horiz,
                    vert=vert)
