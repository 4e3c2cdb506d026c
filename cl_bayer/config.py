"""
File        : config.py
Author      : Eldridge M. Mount IV
Description : Module housing decode configuration defaults.

              Explicit arguments passed to a decode always win; otherwise
              the environment variables below are consulted, and failing
              those the static defaults apply.

                CL_BAYER_MODE    : 'sequential' or 'parallel'
                CL_BAYER_WORKERS : Positive number of row worker threads

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from .errors import BayerError

import enum
from enum import Enum

import os


"""Enumeration of decode execution modes"""
ExecutionMode = Enum('ExecutionMode', 'SEQUENTIAL PARALLEL', start=0)


class DecodeConfig:
    """Static class housing decode defaults and their resolution"""

    # Environment variable names
    MODE_ENV = 'CL_BAYER_MODE'
    WORKERS_ENV = 'CL_BAYER_WORKERS'

    # Static defaults
    DEFAULT_MODE = ExecutionMode.SEQUENTIAL
    DEFAULT_WORKERS = (os.cpu_count() or 1)


    @staticmethod
    def mode(mode=None):
        """Resolves the execution mode for a decode

        Kwargs:
            mode: Explicit ExecutionMode, or its case-insensitive name

        Returns:
            An ExecutionMode value
        """
        if mode is None:
            mode = os.environ.get(DecodeConfig.MODE_ENV)
            if not mode:
                return DecodeConfig.DEFAULT_MODE

        if isinstance(mode, ExecutionMode):
            return mode

        try:
            return ExecutionMode[str(mode).strip().upper()]
        except KeyError:
            raise BayerError("Unrecognized execution mode \"{}\"".format(mode))


    @staticmethod
    def workers(workers=None):
        """Resolves the number of row worker threads for a parallel decode

        Kwargs:
            workers: Explicit positive worker count

        Returns:
            A positive integer
        """
        if workers is None:
            workers = os.environ.get(DecodeConfig.WORKERS_ENV)
            if not workers:
                return DecodeConfig.DEFAULT_WORKERS

        try:
            count = int(workers)
        except (TypeError, ValueError):
            raise BayerError("Worker count \"{}\" is not an integer".format(workers))

        if count < 1:
            raise BayerError("Worker count must be positive, got {}".format(count))

        return count
