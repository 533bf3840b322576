from __future__ import annotations

"""JSON event log for batch conversion runs.

``convert`` writes exactly two kinds of record: ``convert.complete`` once a
file has been written and ``convert.failed`` for the line that stopped it.
Each record is a single JSON object on one line.
"""

import json
import logging
import random
from datetime import datetime, timezone
from typing import Any

from oboBridge.config import LoggingConfig

LOGGER_NAME = "obobridge.convert.json"


def _clip(text: str, max_bytes: int) -> str:
    """Shorten ``text`` to at most ``max_bytes`` UTF-8 bytes, marking the cut."""

    blob = text.encode("utf-8")
    if max_bytes <= 0 or len(blob) <= max_bytes:
        return text
    return blob[:max_bytes].decode("utf-8", errors="ignore") + "...[truncated]"


class ConversionLog:
    """Write conversion outcomes as JSON lines.

    Summaries are subject to ``sample_rate``; failures are always written
    while the log is enabled. Offending tokens and error messages are clipped
    to ``max_details_bytes``.
    """

    def __init__(
        self,
        *,
        logger: logging.Logger | None = None,
        enabled: bool = True,
        sample_rate: float = 1.0,
        max_details_bytes: int = 4096,
    ) -> None:
        self._logger = logger or logging.getLogger(LOGGER_NAME)
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)
        self._logger.propagate = False
        self._logger.setLevel(logging.INFO)
        self.enabled = enabled
        self.sample_rate = max(0.0, min(1.0, float(sample_rate)))
        self.max_details_bytes = max(0, int(max_details_bytes))

    @classmethod
    def from_config(
        cls, cfg: LoggingConfig, *, logger: logging.Logger | None = None
    ) -> "ConversionLog":
        return cls(
            logger=logger,
            enabled=cfg.enabled,
            sample_rate=cfg.sample_rate,
            max_details_bytes=cfg.max_details_bytes,
        )

    def complete(
        self,
        direction: str,
        *,
        converted: int,
        unchanged: int,
        output: str,
        ontology_id: str | None = None,
    ) -> dict[str, Any] | None:
        """Record a finished run; returns the entry, or ``None`` if dropped."""

        if not self.enabled:
            return None
        if self.sample_rate < 1.0 and random.random() >= self.sample_rate:
            return None
        entry = self._entry("convert.complete", direction)
        entry.update(converted=converted, unchanged=unchanged, output=str(output))
        if ontology_id:
            entry["ontology_id"] = ontology_id
        self._write(logging.INFO, entry)
        return entry

    def failed(
        self, direction: str, *, line: int, token: str, error: str
    ) -> dict[str, Any] | None:
        if not self.enabled:
            return None
        entry = self._entry("convert.failed", direction)
        entry.update(
            line=line,
            token=_clip(token, self.max_details_bytes),
            error=_clip(error, self.max_details_bytes),
        )
        self._write(logging.ERROR, entry)
        return entry

    @staticmethod
    def _entry(event: str, direction: str) -> dict[str, Any]:
        return {
            "ts": datetime.now(timezone.utc).isoformat(),
            "event": event,
            "direction": direction,
        }

    def _write(self, level: int, entry: dict[str, Any]) -> None:
        self._logger.log(level, json.dumps(entry, ensure_ascii=False, sort_keys=True))


__all__ = ["ConversionLog", "LOGGER_NAME"]
