# qif_csv/data_model/__init__.py
from .interfaces import (
    FieldCode, ParserState, IDiagnosticSink, IEntry, IHeader,
    IRecordSink, IToDict)
from .q_wrapper import (
    CSV_COLUMNS, QIF_SECTION_PREFIX, QifEntry, QifHeader, is_section_header)
__all__ = [
    "FieldCode", "ParserState", "IDiagnosticSink", "IEntry", "IHeader",
    "IRecordSink", "IToDict", "CSV_COLUMNS", "QIF_SECTION_PREFIX",
    "QifEntry", "QifHeader", "is_section_header"]
