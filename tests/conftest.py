from __future__ import annotations

import numpy as np
import pytest
from PySide6.QtCore import QCoreApplication

from wordsphere.controller.rotation import RotationController
from wordsphere.controller.session import WordCloudSession


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def rotation() -> RotationController:
    return RotationController(rng=np.random.default_rng(1234), now=0.0)


@pytest.fixture
def session(qapp, rotation) -> WordCloudSession:
    s = WordCloudSession(rotation=rotation)
    s.set_viewport_size(800, 600)
    return s


class RecordingSink:
    """Draw sink that keeps every submitted frame."""
    def __init__(self) -> None:
        self.frames = []

    def submit(self, commands) -> None:
        self.frames.append(list(commands))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
