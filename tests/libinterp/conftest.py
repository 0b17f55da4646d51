import numpy as np
import pytest

# R reference case:
#   x <- 0:6
#   y <- c(0.66, 0.905, 0.731, 0.638, 0.087, 0.382, 0.285)
#   z <- c(0.04, 1.57, 2.06, 2.87, 3.75, 4.55, 5.56)
X = [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
Y = [0.66, 0.905, 0.731, 0.638, 0.087, 0.382, 0.285]


@pytest.fixture
def xy():
    return list(X), list(Y)


@pytest.fixture
def two_series():
    x = [0.0, 1.0, 2.0, 3.0, 4.0]
    y = [[0.38, 0.93, 0.73, 0.93, 0.82],
         [0.13, 0.15, 0.16, 0.94, 0.47]]
    return x, y


@pytest.fixture
def uneven():
    rng = np.random.default_rng(0)
    x = np.cumsum(rng.uniform(0.2, 1.5, 25))
    y = np.stack([np.sin(x), np.cos(0.5 * x) + 0.1 * x])
    return x, y
