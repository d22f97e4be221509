"""Shared pytest fixtures for viewer tests.

pygame is forced into a headless configuration through the SDL ``dummy``
video and audio drivers before it is first imported.
"""

from __future__ import annotations

import os
from typing import Generator

import pytest


@pytest.fixture(scope="session", autouse=True)
def configure_headless_environment() -> Generator[None, None, None]:
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
    yield


@pytest.fixture(scope="session")
def pygame_module(configure_headless_environment):
    pygame = pytest.importorskip("pygame")
    pygame.display.init()
    pygame.font.init()
    try:
        yield pygame
    finally:
        pygame.quit()
