from .csv_sink import CsvRecordSink, ListRecordSink, open_csv_sink
from .qif_loader import (
    QIF_EXTENSION,
    ConversionOptions,
    ConversionResult,
    convert_source,
    convert_sources,
    find_qif_files,
    load_entries,
)

__all__ = [
    "CsvRecordSink",
    "ListRecordSink",
    "open_csv_sink",
    "QIF_EXTENSION",
    "ConversionOptions",
    "ConversionResult",
    "convert_source",
    "convert_sources",
    "find_qif_files",
    "load_entries",
]
