"""
File        : linear.py
Author      : Eldridge M. Mount IV
Description : Module providing bilinear demosaicing.

              Missing colours are the truncated mean of the nearest sites
              of that colour: the four cross neighbours for green at a
              colour site, the four diagonal neighbours for the opposite
              colour, and the two neighbours along the matching axis at a
              green site.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from .base import DemosaicAlgorithm, assign_pels, tap, widen
from ..imaging.image_defs import RGBPlanes
from ..stream.border import BorderReplicate


class Linear(DemosaicAlgorithm):
    """Concrete algorithm averaging neighbouring samples"""

    PADDING = 1
    ROWS_BEFORE = 1
    ROWS_AFTER = 1


    def border(self, width, depth):
        """Overloaded border strategy"""
        return BorderReplicate(width, Linear.PADDING, depth)


    def apply_kernel_row(self, row, window, cfa, width, max_pel):
        """Overloaded kernel"""
        prev, curr, nxt = widen(window)
        pad = Linear.PADDING

        def at(src, offset):
            return tap(src, offset, pad, width)

        horiz = (at(curr, -1) + at(curr, 1))
        vert = (at(prev, 0) + at(nxt, 0))
        diagonal = (at(prev, -1) + at(prev, 1) + at(nxt, -1) + at(nxt, 1))

        assign_pels(row.reshape(width, RGBPlanes.NUM_PLANES.value),
                    cfa,
                    sample=at(curr, 0),
                    green=((horiz + vert) // 4),
                    diagonal=(diagonal // 4),
                    horiz=(horiz // 2),
                    vert=(vert // 2))
