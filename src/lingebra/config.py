"""
Configuration & Constants
=========================
Central registry for the package-wide constants.

Exports:
    DTYPE: Storage dtype of every vector entry (single precision).
    LOGGER_NAME (str): Name of the package logger.
    LOG_FORMAT (str): Record format used by `setup_logging`.
    LOG_DATEFMT (str): Timestamp format used by `setup_logging`.
"""
import numpy as np

# Global Constants
DTYPE = np.float32

LOGGER_NAME: str = "lingebra"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT: str = '%H:%M:%S'
