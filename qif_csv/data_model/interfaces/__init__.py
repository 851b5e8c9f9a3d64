"""
Interfaces and Enums for the QIF record data model.
"""

from .enum_field_code import FieldCode
from .enum_parser_state import ParserState
from .i_diagnostic_sink import IDiagnosticSink
from .i_entry import IEntry
from .i_header import IHeader
from .i_record_sink import IRecordSink
from .i_to_dict import IToDict

__all__ = [
    "FieldCode",
    "ParserState",
    "IDiagnosticSink",
    "IEntry",
    "IHeader",
    "IRecordSink",
    "IToDict",
]
