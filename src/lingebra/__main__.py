"""
Demonstration Entry Point
=========================
Builds two small vectors and reports their dot product.

Usage:
    $ python -m lingebra
"""
import logging

from lingebra.config import LOGGER_NAME
from lingebra.logging_config import setup_logging
from lingebra.vector import Vector

logger = logging.getLogger(f"{LOGGER_NAME}.demo")


def main() -> None:
    setup_logging(level=logging.INFO)

    u = Vector.from_iter([-1.0, 2.0])
    v = Vector.from_iter([2.0, 3.0])

    logger.info(f"u = {u}, v = {v}")
    logger.info(f"u . v = {u * v}")


if __name__ == "__main__":
    main()
