from typing import Callable

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(0)


@pytest.fixture
def uniform_draws() -> Callable[[int, int], list[float]]:
    """Reference sequence of scalar uniform draws over [-1.0, 1.0]."""

    def draws(seed: int, count: int) -> list[float]:
        rng = np.random.default_rng(seed)
        return [float(rng.uniform(-1.0, 1.0)) for _ in range(count)]

    return draws
