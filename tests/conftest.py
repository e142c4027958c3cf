from __future__ import annotations

import logging
import random
import sys
from typing import TYPE_CHECKING

import pytest

from retrier.logging import reset

if TYPE_CHECKING:
    from collections.abc import Generator


def pytest_configure() -> None:
    logging.basicConfig(level=logging.ERROR)  # set log levels very high for tests


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption("--seed", action="store")
    parser.addoption("--samples", action="store")


@pytest.fixture
def seed(request: pytest.FixtureRequest) -> str:
    seed = request.config.getoption("--seed")

    if not isinstance(seed, str):
        return str(random.randint(0, sys.maxsize))

    return seed


@pytest.fixture
def samples(request: pytest.FixtureRequest) -> int:
    samples = request.config.getoption("--samples")

    if isinstance(samples, str):
        try:
            return int(samples)
        except ValueError:
            pass

    return 1000


@pytest.fixture(autouse=True)
def quiet_logger() -> Generator[None]:
    yield
    reset()
