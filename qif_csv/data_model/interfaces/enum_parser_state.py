from enum import Enum


class ParserState(Enum):
    """
    Lifecycle of a record stream parser.
    """
    SCANNING = "scanning"  # header not yet confirmed
    READING = "reading"  # consuming field lines
    DONE = "done"  # input exhausted cleanly
    FAILED = "failed"  # aborted on a fatal error
