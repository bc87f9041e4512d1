import numpy as np
import pytest

# y = x^2 at x = -2..2
PARABOLA_X = [-2.0, -1.0, 0.0, 1.0, 2.0]
PARABOLA_Y = [4.0, 1.0, 0.0, 1.0, 4.0]


@pytest.fixture
def parabola():
    return list(PARABOLA_X), list(PARABOLA_Y)


def random_samples(seed: int, n: int) -> tuple[np.ndarray, np.ndarray]:
    """n well-separated nodes on roughly [-3, 3] with random ordinates."""
    rng = np.random.default_rng(seed)
    xs = np.linspace(-3.0, 3.0, n) + rng.uniform(-0.1, 0.1, n)
    ys = rng.normal(scale=5.0, size=n)
    return xs, ys
