# qif_csv/controllers/csv_sink.py
from __future__ import annotations

import contextlib
import csv
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, List, TextIO, Union

from qif_csv.data_model.interfaces import IEntry, IRecordSink
from qif_csv.data_model.q_wrapper import CSV_COLUMNS
from qif_csv.utilities.core_util import open_for_write


class CsvRecordSink:
    """
    Write records as CSV rows to an open text stream.

    The ``date,reference,note,amount`` header row is written on construction,
    so an output with no records still carries it. Rows end with ``\\n``.
    The stream is not closed.
    """

    def __init__(self, stream: TextIO) -> None:
        self._writer = csv.writer(stream, lineterminator="\n")
        self._writer.writerow(CSV_COLUMNS)
        self.count = 0

    def write(self, record: IEntry) -> None:
        self._writer.writerow(record.as_row())
        self.count += 1


class ListRecordSink:
    """Collect records in memory."""

    def __init__(self) -> None:
        self.records: List[IEntry] = []

    def write(self, record: IEntry) -> None:
        self.records.append(record)


@contextlib.contextmanager
def open_csv_sink(
    out: Union[str, os.PathLike, TextIO, None] = None, encoding: str = "utf-8"
) -> Iterator[CsvRecordSink]:
    """
    Yield a :class:`CsvRecordSink` writing to either:
      - ``None`` or ``"-"``: standard output,
      - a text stream with ``.write()`` (left open),
      - a filesystem path (parents created, closed on exit).
    """
    if out is None or out == "-":
        yield CsvRecordSink(sys.stdout)
        sys.stdout.flush()
        return

    # If it's already a file-like object, write to it directly
    if hasattr(out, "write") and callable(getattr(out, "write")):
        yield CsvRecordSink(out)  # type: ignore[arg-type]
        return

    with open_for_write(Path(out), encoding=encoding, newline="") as fp:  # type: ignore[arg-type]
        yield CsvRecordSink(fp)


if TYPE_CHECKING:
    _is_sink_csv: type[IRecordSink] = CsvRecordSink
    _is_sink_list: type[IRecordSink] = ListRecordSink
