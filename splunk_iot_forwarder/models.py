# Copyright 2025 Loopper-AI
# Data models for the Splunk IoT forwarder

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class HecMetadata:
    """Event metadata understood by the HTTP Event Collector.

    ``time`` and ``index`` are left to collector defaults unless set.
    """

    host: str
    source: str
    sourcetype: str
    time: float | None = None
    index: str | None = None


@dataclass
class HecRecord:
    """A single event plus its metadata, ready for the collector."""

    message: Any
    metadata: HecMetadata

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.metadata.time is not None:
            # Collector expects epoch seconds, millisecond precision
            body["time"] = round(self.metadata.time, 3)
        body["host"] = self.metadata.host
        body["source"] = self.metadata.source
        body["sourcetype"] = self.metadata.sourcetype
        if self.metadata.index:
            body["index"] = self.metadata.index
        body["event"] = self.message
        return body


@dataclass
class ForwardResult:
    """Result of POSTing a record to the collector."""

    success: bool
    status_code: int | None = None
    response_body: str = ""
    body: dict[str, Any] | None = None
    error: str | None = None
    retryable: bool = False
    attempts: int = 0


class ForwardError(RuntimeError):
    """Raised to the Lambda runtime when a record could not be delivered."""

    def __init__(self, result: ForwardResult):
        super().__init__(result.error or "Forward to Splunk failed")
        self.result = result
