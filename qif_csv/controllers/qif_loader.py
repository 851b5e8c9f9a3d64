# qif_csv/controllers/qif_loader.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from qif_csv.controllers.csv_sink import ListRecordSink
from qif_csv.data_model.interfaces import IDiagnosticSink, IRecordSink
from qif_csv.data_model.q_wrapper import QifEntry
from qif_csv.parsers.qif_record_parser import parse_qif_lines
from qif_csv.utilities.core_util import is_hidden_name, open_for_read
from qif_csv.utilities.errors import QifError, ReadFailureError

log = logging.getLogger(__name__)

QIF_EXTENSION = ".qif"


@dataclass
class ConversionOptions:
    encoding: str = "utf-8"
    continue_on_error: bool = False
    extension: str = QIF_EXTENSION


@dataclass
class ConversionResult:
    records: int = 0
    converted: List[Path] = field(default_factory=list)
    failures: Dict[Path, QifError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


# --------------------------
# Source discovery
# --------------------------
def find_qif_files(root: Path, extension: str = QIF_EXTENSION) -> List[Path]:
    """
    Return the QIF files under ``root`` in walk order.

    - A file ``root`` is returned as-is, whatever its suffix.
    - Hidden directories are not descended into; hidden files are skipped.
    - Suffix comparison is case-insensitive.
    """
    root = Path(root)
    if root.is_file():
        return [root]

    wanted = extension.lower()
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # prune in place so os.walk skips them
        dirnames[:] = sorted(d for d in dirnames if not is_hidden_name(d))
        for name in sorted(filenames):
            if is_hidden_name(name):
                continue
            path = Path(dirpath) / name
            if path.suffix.lower() == wanted:
                found.append(path)
    return found


# --------------------------
# Per-source conversion
# --------------------------
def convert_source(
    path: Path,
    sink: IRecordSink,
    encoding: str = "utf-8",
    diagnostics: Optional[IDiagnosticSink] = None,
) -> int:
    """
    Parse one QIF file and hand each completed record to ``sink``.

    Records reach the sink as they are completed, so on a fatal error the
    ones before it are already written. Returns the number of records.
    """
    log.info("parsing: %s", path)
    count = 0
    try:
        f = open_for_read(path=path, binary=False, encoding=encoding)
    except OSError as e:
        raise ReadFailureError(f"cannot open: {e.strerror or e}", str(path)) from e
    with f:
        for record in parse_qif_lines(f, source=str(path), diagnostics=diagnostics):
            sink.write(record)
            count += 1
    return count


def load_entries(
    path: Path,
    encoding: str = "utf-8",
    diagnostics: Optional[IDiagnosticSink] = None,
) -> List[QifEntry]:
    """Return all records of one QIF file."""
    sink = ListRecordSink()
    convert_source(path, sink, encoding=encoding, diagnostics=diagnostics)
    return list(sink.records)  # type: ignore[arg-type]


def convert_sources(
    paths: Iterable[Path],
    sink: IRecordSink,
    options: Optional[ConversionOptions] = None,
    diagnostics: Optional[IDiagnosticSink] = None,
) -> ConversionResult:
    """
    Convert each source in order into the shared ``sink``.

    With ``continue_on_error`` off the first :class:`QifError` propagates and
    no later source is read. With it on, the failure is logged, recorded in
    the result and the next source is processed.
    """
    options = options or ConversionOptions()
    result = ConversionResult()
    for path in paths:
        try:
            n = convert_source(path, sink, encoding=options.encoding, diagnostics=diagnostics)
        except QifError as e:
            if not options.continue_on_error:
                raise
            log.error("%s", e)
            result.failures[path] = e
            continue
        result.records += n
        result.converted.append(path)
    return result
