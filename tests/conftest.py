import numpy as np
import pytest

import pyparscan.environment as env


@pytest.fixture(scope="session", autouse=True)
def taichi_cpu():
    """Taichi CPU runtime with the default pool of 4 workers."""
    env.ensure_initialised()
    yield


@pytest.fixture
def rng():
    return np.random.default_rng(1234)

