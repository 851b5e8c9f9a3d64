from .config_logging import LOGGING, build_logging_config, configure_logging
from .converters_scalar import to_amount_string, to_datetime, to_decimal, to_iso_midnight
from .core_util import (
    is_hidden_name,
    open_for_read,
    open_for_write,
)
from .errors import (
    AmountFormatError,
    DateFormatError,
    InvalidHeaderError,
    QifError,
    ReadFailureError,
)

__all__ = [
    "is_hidden_name",
    "open_for_read",
    "open_for_write",
    "to_datetime",
    "to_decimal",
    "to_iso_midnight",
    "to_amount_string",
    "QifError",
    "InvalidHeaderError",
    "DateFormatError",
    "AmountFormatError",
    "ReadFailureError",
    "LOGGING",
    "build_logging_config",
    "configure_logging",
]
