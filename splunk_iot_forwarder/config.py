# Copyright 2025 Loopper-AI
# Configuration management for the Splunk IoT forwarder

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlparse

DEFAULT_COLLECTOR_PATH = "/services/collector/event/1.0"

# Fixed delivery policy: every invocation is sent on its own, retried 3 times
MAX_RETRIES = 3


def _resolve_url(raw: str) -> str:
    """Append the default collector path when the URL has none."""
    url = raw.strip()
    if url and urlparse(url).path in ("", "/"):
        url = f"{url.rstrip('/')}{DEFAULT_COLLECTOR_PATH}"
    return url


@dataclass(frozen=True)
class Config:
    """Immutable configuration from environment variables."""

    url: str
    token: str
    token_secret_arn: str | None = None
    index: str | None = None
    request_timeout: float = 15.0
    verify_ssl: bool = True
    log_level: str = "INFO"
    max_retries: int = MAX_RETRIES

    @classmethod
    def from_environment(cls) -> Config:
        return cls(
            url=_resolve_url(os.environ.get("SPLUNK_HEC_URL") or ""),
            token=(os.environ.get("SPLUNK_HEC_TOKEN") or "").strip(),
            token_secret_arn=os.environ.get("SPLUNK_HEC_TOKEN_SECRET_ARN") or None,
            index=os.environ.get("SPLUNK_HEC_INDEX") or None,
            request_timeout=float(os.environ.get("REQUEST_TIMEOUT", "15")),
            verify_ssl=os.environ.get("SPLUNK_HEC_VERIFY_SSL", "true").lower() in ("1", "true", "yes"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> tuple[bool, str | None]:
        if not self.url:
            return False, "SPLUNK_HEC_URL not configured"
        if not self.token and not self.token_secret_arn:
            return False, "SPLUNK_HEC_TOKEN or SPLUNK_HEC_TOKEN_SECRET_ARN required"
        return True, None
