from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pytest

from vtkwriter import _config
from vtkwriter._config import WriterSettings
from vtkwriter.topology import hemisphere_points
from vtkwriter.writer import VtkWriter


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep every test away from the real ~/.vtkwriter directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(_config, "CONFIG_FILE", config_dir / "vtkwriter.cfg")
    yield config_dir
    # the CLI installs its own handlers; put the package logger back for caplog
    logger = logging.getLogger("vtkwriter")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> WriterSettings:
    return WriterSettings(force_default_file_extension=True, precision=10)


@pytest.fixture
def writer(settings: WriterSettings) -> VtkWriter:
    return VtkWriter("Test document", settings=settings)


@pytest.fixture
def dome_points() -> np.ndarray:
    """Apex plus 3 rings of 4 sectors: 13 points."""
    return hemisphere_points(3, 4, radius=2.0)
