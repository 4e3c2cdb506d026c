"""
File        : none.py
Author      : Eldridge M. Mount IV
Description : Module providing the pass-through "demosaic", which spreads
              each raw sample into the plane of its own colour and leaves
              the other two planes zeroed.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from .base import DemosaicAlgorithm
from ..imaging.image_defs import CfaPhase, RGBPlanes
from ..stream.border import BorderNone


class NoInterpolation(DemosaicAlgorithm):
    """Concrete algorithm placing samples without interpolating"""

    def border(self, width, depth):
        """Overloaded border strategy; scanlines are read as-is"""
        return BorderNone(width, depth)


    def apply_kernel_row(self, row, window, cfa, width, max_pel):
        """Overloaded kernel"""
        curr, = window
        rgb = row.reshape(width, RGBPlanes.NUM_PLANES.value)
        rgb[:] = 0

        phase = cfa
        for parity in (0, 1):
            plane = RGBPlanes.GREEN.value if CfaPhase.is_green(phase) else CfaPhase.channels(phase)[0]
            rgb[parity::2, plane] = curr[parity::2]
            phase = CfaPhase.step_right(phase)
