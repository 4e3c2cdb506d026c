"""
File        : reader.py
Author      : Eldridge M. Mount IV
Description : Module providing readers for raw, header-less Bayer sample
              streams.

              Samples arrive row-major with no gaps, either one byte per
              sample or one 16-bit word per sample in big- or little-
              endian byte order. Each reader fills a caller-provided
              numpy destination completely, or fails.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from ..errors import BayerError, BayerIOError
from ..imaging.image_defs import BayerDepth, ImageDefs

import io

import numpy


def as_stream(source):
    """Returns a readable stream for the passed sample source

    Args:
        source: Either an object with a read(size) method, or a bytes-like
                object holding the complete sample stream

    Returns:
        An object with a read(size) method
    """
    if hasattr(source, 'read'):
        return source

    try:
        return io.BytesIO(memoryview(source))
    except TypeError:
        raise BayerError("Expected a readable stream or bytes-like object but got {}".format(type(source)))


def read_bytes(stream, num_bytes):
    """Reads exactly the requested number of bytes from a stream

    Short reads are retried until the stream reports exhaustion by
    returning an empty result.

    Args:
        stream: Object with a read(size) method
        num_bytes: Number of bytes to read

    Returns:
        A bytes-like object of exactly num_bytes bytes
    """
    chunks = []
    remaining = num_bytes
    while remaining > 0:
        try:
            chunk = stream.read(remaining)
        except OSError as error:
            raise BayerIOError(error) from error

        if not chunk:
            raise BayerIOError(EOFError("Sample stream exhausted with {} of {} bytes unread".format(remaining,
                                                                                                    num_bytes)))

        chunks.append(chunk)
        remaining = (remaining - len(chunk))

    if len(chunks) == 1:
        return chunks[0]

    return b''.join(chunks)


def read_exact_u8(stream, dst):
    """Fills an 8-bit destination with samples copied directly from the stream"""
    dst[:] = numpy.frombuffer(read_bytes(stream, dst.size), dtype=numpy.uint8)


def read_exact_u16be(stream, dst):
    """Fills a 16-bit destination with big-endian words decoded from the stream"""
    dst[:] = numpy.frombuffer(read_bytes(stream, (2 * dst.size)), dtype='>u2')


def read_exact_u16le(stream, dst):
    """Fills a 16-bit destination with little-endian words decoded from the stream"""
    dst[:] = numpy.frombuffer(read_bytes(stream, (2 * dst.size)), dtype='<u2')


_READERS = {
    BayerDepth.DEPTH8 : read_exact_u8,
    BayerDepth.DEPTH16BE : read_exact_u16be,
    BayerDepth.DEPTH16LE : read_exact_u16le
}


def reader_for(depth):
    """Returns the read-exact function for a Bayer sample depth

    Args:
        depth: BayerDepth of the stream

    Returns:
        A function of (stream, dst) filling dst from the stream
    """
    try:
        return _READERS[depth]
    except KeyError:
        raise BayerError("Unrecognized Bayer depth \"{}\"".format(depth))


def new_samples(depth, count):
    """Returns a zeroed destination array for count samples of a depth"""
    return numpy.zeros(count, dtype=ImageDefs.sample_dtype(depth))
