import pytest
from exactgauss import CoefficientMatrix

# X0 + X1 = 3, X0 - X1 = 1
UNIQUE = [[1, 1, 3], [1, -1, 1]]
# 2*X0 = 1, 3*X0 + X1 = 2
FRACTIONAL = [[2, 0, 1], [3, 1, 2]]
# third equation is the sum of the first two
OVERDETERMINED = [[1, 1, 3], [1, -1, 1], [2, 0, 4]]


@pytest.fixture
def unique_system() -> CoefficientMatrix:
    """Square system with solution [2, 1]."""
    return CoefficientMatrix.from_rows(UNIQUE)


@pytest.fixture
def fractional_system() -> CoefficientMatrix:
    """Square system with solution [1/2, 1/2]."""
    return CoefficientMatrix.from_rows(FRACTIONAL)


@pytest.fixture
def overdetermined_system() -> CoefficientMatrix:
    """Three consistent equations in two variables, solution [2, 1]."""
    return CoefficientMatrix.from_rows(OVERDETERMINED)


@pytest.fixture(params=[0, 1, 2, 3, 4, 5, 6, 7], scope="session")
def seed(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for seeds of random systems."""
    return request.param
