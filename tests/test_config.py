"""
File        : test_config.py
Author      : Eldridge M. Mount IV
Description : Tests for decode configuration resolution.

     o  0
     | /       Copyright (c) 2018-2019
    (CL)---o   Critical Link, LLC
      \
       O
"""
from cl_bayer.config import DecodeConfig, ExecutionMode
from cl_bayer.errors import BayerError

import pytest


def test_defaults():
    assert DecodeConfig.mode() is ExecutionMode.SEQUENTIAL
    assert DecodeConfig.workers() == DecodeConfig.DEFAULT_WORKERS
    assert DecodeConfig.DEFAULT_WORKERS >= 1


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv(DecodeConfig.MODE_ENV, 'Parallel')
    monkeypatch.setenv(DecodeConfig.WORKERS_ENV, '3')
    assert DecodeConfig.mode() is ExecutionMode.PARALLEL
    assert DecodeConfig.workers() == 3


def test_explicit_arguments_win(monkeypatch):
    monkeypatch.setenv(DecodeConfig.MODE_ENV, 'parallel')
    monkeypatch.setenv(DecodeConfig.WORKERS_ENV, '3')
    assert DecodeConfig.mode(ExecutionMode.SEQUENTIAL) is ExecutionMode.SEQUENTIAL
    assert DecodeConfig.mode('sequential') is ExecutionMode.SEQUENTIAL
    assert DecodeConfig.workers(5) == 5


@pytest.mark.parametrize("mode", ['threaded', 7])
def test_bad_mode(mode):
    with pytest.raises(BayerError):
        DecodeConfig.mode(mode)


@pytest.mark.parametrize("workers", [0, -2, 'many'])
def test_bad_workers(workers):
    with pytest.raises(BayerError):
        DecodeConfig.workers(workers)


def test_bad_environment(monkeypatch):
    monkeypatch.setenv(DecodeConfig.WORKERS_ENV, 'none')
    with pytest.raises(BayerError):
        DecodeConfig.workers()
