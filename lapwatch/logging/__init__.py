from lapwatch.logging.logger import LapwatchContextFilter, bind_context, get_logger, reset_logging

__all__ = ["LapwatchContextFilter", "bind_context", "get_logger", "reset_logging"]
