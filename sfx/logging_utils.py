import logging

from sfx.logging_handlers import build_handlers


def setup_logger(name, debug=False, verbose=True):
    """
    Setup unified logger with ISO 8601 style timestamps.

    Format: timestamp [level] module: message

    Args:
        name: Logger name (typically __name__)
        debug: Enable debug level logging
        verbose: Enable console/file output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)
    # Prevent double logging via root logger
    logger.propagate = False

    handlers = build_handlers(verbose=verbose, debug=debug)
    if handlers:
        formatter = logging.Formatter(
            fmt='%(asctime)s [%(levelname)-8s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    return logger

def log_warning(logger, message):
    """Consistent warning logging"""
    logger.warning(f"⚠️  {message}")

def log_error(logger, message):
    """Consistent error logging"""
    logger.error(f"❌ {message}")

def log_debug(logger, message):
    """Consistent debug logging"""
    logger.debug(f"🔍 {message}")

def log_audio(logger, message):
    """Consistent audio logging"""
    logger.info(f"🎵 {message}")


def make_log_sink(logger):
    """
    Build the engine's (level, message) sink on top of a logger.

    Levels other than "error" are delivered as warnings. Delivery failures
    are swallowed: logging must never break playback.
    """
    def sink(level: str, message: str) -> None:
        try:
            if level == "error":
                log_error(logger, message)
            else:
                log_warning(logger, message)
        except Exception:
            return

    return sink
