from .logging import JsonFormatter, configure_logging
from .reporter import Reporter

__all__ = ["JsonFormatter", "Reporter", "configure_logging"]
