"""
File        : errors.py
Author      : Eldridge M. Mount IV
Description : Module housing the exception hierarchy shared by the Bayer
              decoding components, along with the mapping of exceptions
              onto the small integer status codes reported at the
              library boundary.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""


class BayerError(Exception):
    """Exception class for generic Bayer decoding failures"""

    """Boundary status code reported for this class of failure"""
    status = 1


class WrongResolutionError(BayerError):
    """Exception class for rasters smaller than an algorithm's receptive field"""
    status = 2


class WrongDepthError(BayerError):
    """Exception class for incompatible sample and raster depths"""
    status = 3


class BayerIOError(BayerError):
    """Exception class wrapping a failed or truncated sample stream read"""

    def __init__(self, error):
        """Initializes the instance around the underlying I/O failure

        Args:
            error: The exception raised by (or synthesized for) the stream
        """
        BayerError.__init__(self, "IO error: {}".format(error))
        self.error = error


def status_code(error):
    """Returns the boundary status code for the passed exception

    Args:
        error: An exception instance, or None for a successful decode

    Returns:
        0 on success, otherwise the status of the exception's class; any
        exception foreign to this package maps onto the generic failure
    """
    if error is None:
        return 0

    if isinstance(error, BayerError):
        return error.status

    return BayerError.status
