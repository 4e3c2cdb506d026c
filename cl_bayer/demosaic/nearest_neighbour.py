"""
File        : nearest_neighbour.py
Author      : Eldridge M. Mount IV
Description : Module providing nearest neighbour demosaicing.

              Each missing colour is copied from the nearest site of that
              colour to the left of, or above and to the left of, the
              current site:

                colour site : green <- left, diagonal <- up-left
                green site  : horizontal <- left, vertical <- up

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from .base import DemosaicAlgorithm, assign_pels, tap
from ..imaging.image_defs import RGBPlanes
from ..stream.border import BorderReplicate


class NearestNeighbour(DemosaicAlgorithm):
    """Concrete algorithm copying the nearest neighbouring samples"""

    PADDING = 1
    ROWS_BEFORE = 1
    ROWS_AFTER = 0


    def border(self, width, depth):
        """Overloaded border strategy"""
        return BorderReplicate(width, NearestNeighbour.PADDING, depth)


    def apply_kernel_row(self, row, window, cfa, width, max_pel):
        """Overloaded kernel"""
        prev, curr = window
        pad = NearestNeighbour.PADDING

        left = tap(curr, -1, pad, width)
        assign_pels(row.reshape(width, RGBPlanes.NUM_PLANES.value),
                    cfa,
                    sample=tap(curr, 0, pad, width),
                    green=left,
                    diagonal=tap(prev, -1, pad, width),
                    horiz=left,
                    vert=tap(prev, 0, pad, width))
