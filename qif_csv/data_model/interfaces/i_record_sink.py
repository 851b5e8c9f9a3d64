# qif_csv/data_model/interfaces/i_record_sink.py
"""
Destination for completed records.

A sink owns its output (file, stream, list...) and receives records in the
order the parser completes them. The parser never buffers: each record is
handed over as soon as its terminator is read, so records written before a
fatal error on the same source remain delivered.
"""

from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .i_entry import IEntry


@runtime_checkable
class IRecordSink(Protocol):
    def write(self, record: IEntry) -> None: ...
