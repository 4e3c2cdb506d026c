"""
File        : __init__.py
Author      : Eldridge M. Mount IV
Description : Module initialization file for subpackage cl_bayer.stream

              This subpackage provides readers for raw sample streams and
              the border strategies padding each scanline read.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
__all__ = ['border', 'reader']
