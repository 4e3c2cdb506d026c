"""
File        : __init__.py
Author      : Eldridge M. Mount IV
Description : Module initialization file for subpackage cl_bayer.imaging

              This subpackage provides the CFA and depth definitions, the
              raster view, and utilities for synthesizing and verifying
              images.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
__all__ = ['image_defs', 'patterns', 'raster', 'scoreboard', 'transform']
