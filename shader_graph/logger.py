import logging
import sys

# Package root logger; module loggers (logging.getLogger(__name__)) are its children
LOGGER_NAME = "shader_graph"


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def setup_logger(level=logging.INFO) -> logging.Logger:
    """
    Attach a single stdout handler to the package logger.

    Safe to call repeatedly (e.g. when the host reloads): earlier handlers
    are replaced, never stacked.

    Args:
        level: Threshold for both the logger and its handler (default: INFO)
    """
    logger = get_logger()
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    # [shader_graph] [WARNING] [warning] Cycle: link 3.Result -> 2.A ignored ...
    handler.setFormatter(logging.Formatter(f'[{LOGGER_NAME}] [%(levelname)s] %(message)s'))
    logger.addHandler(handler)
    return logger


def log_info(msg: str):
    get_logger().info(msg)


def log_warning(msg: str):
    get_logger().warning(msg)


def log_error(msg: str):
    get_logger().error(msg)


def log_debug(msg: str):
    get_logger().debug(msg)
