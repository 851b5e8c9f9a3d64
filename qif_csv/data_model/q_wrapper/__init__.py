# qif_csv/data_model/q_wrapper/__init__.py

from .q_entry import CSV_COLUMNS, QifEntry
from .qif_header import QIF_SECTION_PREFIX, QifHeader, is_section_header

__all__ = [
    "CSV_COLUMNS",
    "QIF_SECTION_PREFIX",
    "QifEntry",
    "QifHeader",
    "is_section_header",
]
