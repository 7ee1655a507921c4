import logging
import time
from functools import wraps
from typing import Callable, Optional, Union

from .exceptions import ConfigurationError

# Parent of every module logger in the project (`src.surveillance...`).
PACKAGE_LOGGER = "src"

def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Sets the level inherited by all project module loggers.
    Accepts a level number or a name such as "DEBUG".
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ConfigurationError(f"Unknown logging level: {level}")
        level = resolved
    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(level)
    return package

def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Sets up a logger with a standard format.
    Without an explicit level the logger follows the package level.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if level is not None:
        logger.setLevel(level)
    else:
        package = logging.getLogger(PACKAGE_LOGGER)
        if package.level == logging.NOTSET:
            package.setLevel(logging.INFO)
    return logger

def log_execution_time(logger: logging.Logger):
    """
    Decorator to measure and log execution time of a function.
    Failures are logged and re-raised.
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__name__} failed: {e}", exc_info=True)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                elapsed = time.perf_counter() - start
                logger.debug(f"{func.__name__} executed in {elapsed * 1000:.2f}ms")
            return result
        return wrapper
    return decorator
