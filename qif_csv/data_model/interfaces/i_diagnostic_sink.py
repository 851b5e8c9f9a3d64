# qif_csv/data_model/interfaces/i_diagnostic_sink.py
"""
Receiver for non-fatal parse diagnostics.

The signature matches ``logging.Logger.warning`` so a logger can be passed
directly; tests pass a small collector instead.
"""

from __future__ import annotations

from typing import Any

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class IDiagnosticSink(Protocol):
    def warning(self, msg: str, *args: Any) -> None: ...
