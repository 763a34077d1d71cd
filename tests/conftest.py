"""
Shared fixtures for the boundarypaths test-suite.

The example shapes are read from the bundled asset files so the tests also
exercise the input reader.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path as FsPath

import pytest

# Add src to sys.path for importing the package when it is not installed
sys.path.insert(0, str(FsPath(__file__).resolve().parents[1] / "src"))

from boundarypaths.config import EXAMPLE_PATHS_PATH
from boundarypaths.model.diagnostics import DiagnosticLog
from boundarypaths.model.io import IOManager
from boundarypaths.model.path import Path


def load_example(filename: str, dim: int) -> Path:
    log = DiagnosticLog.silent()
    paths = IOManager.load_paths(os.path.join(EXAMPLE_PATHS_PATH, filename), dim, log)
    assert not log.has_errors, [d.format() for d in log]
    assert len(paths) == 1
    return paths[0]


@pytest.fixture
def log() -> DiagnosticLog:
    return DiagnosticLog.silent()


@pytest.fixture
def m_path() -> Path:
    return load_example("m.paths", dim=2)


@pytest.fixture
def mr_path() -> Path:
    return load_example("mr.paths", dim=3)


@pytest.fixture
def sqr2_path() -> Path:
    return load_example("sqr2.paths", dim=3)
