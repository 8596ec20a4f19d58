import logging

import pytest

from lingebra import Vector


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("lingebra")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def vectors() -> tuple[Vector, Vector, Vector, Vector]:
    u = Vector.from_iter([-1.0, 2.0])
    v = Vector.from_iter([2.0, 3.0])
    w = Vector.from_iter([3.0, -1.0, -5.0])
    x = Vector.from_iter([6.0, -2.0, 3.0])
    return u, v, w, x
