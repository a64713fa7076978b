from .logs import LOG_FORMAT, LOGGER_NAME, configure_logger, resolve_level

__all__ = ["LOG_FORMAT", "LOGGER_NAME", "configure_logger", "resolve_level"]
