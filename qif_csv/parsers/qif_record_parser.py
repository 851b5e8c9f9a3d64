# qif_csv/parsers/qif_record_parser.py
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Union

from qif_csv.data_model.interfaces import IDiagnosticSink, ParserState
from qif_csv.data_model.q_wrapper import QifEntry, QifHeader, is_section_header
from qif_csv.parsers.qif_field_decoder import DecodedLine, decode_line
from qif_csv.utilities.errors import InvalidHeaderError, QifError, ReadFailureError

log = logging.getLogger(__name__)

_BOM = "\ufeff"


class QifLineReader:
    """
    Iterate the trimmed, non-blank lines of one source.

    Keeps the 1-based physical line number of the last line returned and turns
    I/O or decoding failures of the underlying iterable into
    :class:`ReadFailureError`.
    """

    def __init__(self, lines: Iterable[str], source: str = "<stream>") -> None:
        self.source = source
        self.line_number = 0
        self._lines = iter(lines)

    def __iter__(self) -> "QifLineReader":
        return self

    def __next__(self) -> str:
        while True:
            try:
                raw = next(self._lines)
            except (OSError, UnicodeDecodeError) as e:
                raise ReadFailureError(
                    f"read failed: {e}", self.source, self.line_number + 1
                ) from e
            self.line_number += 1
            if self.line_number == 1:
                raw = raw.lstrip(_BOM)
            line = raw.strip()
            if line:
                return line


def read_header(
    lines: Union[QifLineReader, Iterable[str]], source: str = "<stream>"
) -> QifHeader:
    """
    Skip blank lines and consume the ``!Type:`` declaration.

    On return exactly the header line has been consumed from ``lines``.

    Raises
    ------
    InvalidHeaderError
        If the first non-blank line is not a type declaration, or there is none.
    """
    reader = lines if isinstance(lines, QifLineReader) else QifLineReader(lines, source)
    for line in reader:
        if not is_section_header(line):
            raise InvalidHeaderError(
                f"invalid qif header {line!r}, expected '!Type:'",
                reader.source,
                reader.line_number,
            )
        return QifHeader.from_line(line)
    raise InvalidHeaderError("invalid qif header: input is empty", reader.source)


class RecordAccumulator:
    """Holds the record being built; last write wins per field."""

    def __init__(self) -> None:
        self._record = QifEntry()
        self._has_data = False

    @property
    def record(self) -> QifEntry:
        return self._record

    @property
    def has_data(self) -> bool:
        return self._has_data

    def apply(self, decoded: DecodedLine) -> None:
        if decoded.attribute is None:
            return
        setattr(self._record, decoded.attribute, decoded.value)
        self._has_data = True

    def flush(self) -> QifEntry:
        record = self._record
        self.reset()
        return record

    def reset(self) -> None:
        self._record = QifEntry()
        self._has_data = False


class QifRecordParser:
    """
    Line-driven parser for one QIF transaction source.

    ``parse`` is a generator: each record is yielded as soon as its ``^``
    terminator is read. Lines after a fatal error are never read. Field lines
    left over at end of input without a terminator are dropped.
    """

    def __init__(
        self,
        source: str = "<stream>",
        diagnostics: Optional[IDiagnosticSink] = None,
    ) -> None:
        self.source = source
        self.diagnostics: IDiagnosticSink = diagnostics if diagnostics is not None else log
        self.state = ParserState.SCANNING
        self.header: Optional[QifHeader] = None
        self.accumulator = RecordAccumulator()
        self.records_emitted = 0

    def parse(self, lines: Iterable[str]) -> Iterator[QifEntry]:
        self.state = ParserState.SCANNING
        self.header = None
        self.accumulator.reset()
        self.records_emitted = 0
        reader = QifLineReader(lines, self.source)
        try:
            self.header = read_header(reader)
            self.state = ParserState.READING
            for line in reader:
                decoded = decode_line(line)
                if decoded.is_terminator:
                    self.records_emitted += 1
                    yield self.accumulator.flush()
                elif decoded.is_known:
                    self.accumulator.apply(decoded)
                else:
                    self.diagnostics.warning(
                        "'%s' line %d: unknown field code %r",
                        self.source,
                        reader.line_number,
                        decoded.code,
                    )
        except QifError as e:
            self.state = ParserState.FAILED
            raise e.with_context(self.source, reader.line_number)

        if self.accumulator.has_data:
            log.debug(
                "'%s': discarding unterminated record at end of input", self.source
            )
            self.accumulator.reset()
        self.state = ParserState.DONE


def parse_qif_lines(
    lines: Iterable[str],
    source: str = "<stream>",
    diagnostics: Optional[IDiagnosticSink] = None,
) -> Iterator[QifEntry]:
    """Lazily parse ``lines``; see :class:`QifRecordParser`."""
    return QifRecordParser(source, diagnostics).parse(lines)


def parse_qif_text(
    text: str,
    source: str = "<string>",
    diagnostics: Optional[IDiagnosticSink] = None,
) -> List[QifEntry]:
    """Parse a whole QIF document held in memory."""
    return list(parse_qif_lines(text.splitlines(), source, diagnostics))
