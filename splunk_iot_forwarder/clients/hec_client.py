# Copyright 2025 Loopper-AI
# HTTP Event Collector client for forwarding records to Splunk

from __future__ import annotations

import http.client
import json
import logging
import ssl
import urllib.error
import urllib.request
from typing import Any

from ..models import ForwardResult, HecRecord

logger = logging.getLogger(__name__)


def _parse_body(text: str) -> dict[str, Any] | None:
    """Collector status body, e.g. {"text": "Success", "code": 0}."""
    if not text.strip():
        return None
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


class HecClient:
    """Stateless client posting one record per request to the collector.

    Holds only connection settings, so a single instance can be shared by
    every invocation in the execution environment.
    """

    def __init__(
        self,
        url: str,
        token: str,
        timeout: float = 15.0,
        max_retries: int = 3,
        verify_ssl: bool = True,
    ):
        self.url = url
        self.token = token
        self.timeout = timeout
        self.max_retries = max_retries
        self._ssl_ctx = ssl.create_default_context()
        if not verify_ssl:
            self._ssl_ctx.check_hostname = False
            self._ssl_ctx.verify_mode = ssl.CERT_NONE

    def send(self, record: HecRecord) -> ForwardResult:
        """Send record immediately. Retries transient failures, no backoff."""
        payload = json.dumps(record.to_dict(), default=str).encode("utf-8")
        max_attempts = self.max_retries + 1

        result = ForwardResult(success=False)
        for attempt in range(1, max_attempts + 1):
            result = self._post(payload)
            result.attempts = attempt
            if result.success or not result.retryable:
                break
            if attempt < max_attempts:
                logger.warning("Retrying Splunk request: attempt=%d/%d error=%s", attempt, max_attempts, result.error)
        return result

    def _post(self, payload: bytes) -> ForwardResult:
        """Single POST. Success requires no transport error and HEC code 0 when a status body is present."""
        try:
            req = urllib.request.Request(
                self.url,
                data=payload,
                headers={
                    "Authorization": f"Splunk {self.token}",
                    "Content-Type": "application/json",
                },
                method="POST",
            )
            with urllib.request.urlopen(req, timeout=self.timeout, context=self._ssl_ctx) as resp:
                code = resp.getcode()
                text = resp.read().decode("utf-8", errors="replace")

        except urllib.error.HTTPError as exc:
            text = exc.read()[:500].decode("utf-8", errors="replace")
            body = _parse_body(text)
            logger.error("HTTPError: code=%s body=%s", exc.code, text)
            # 5xx without a collector status body is treated as transient
            return ForwardResult(
                success=False,
                status_code=exc.code,
                response_body=text,
                body=body,
                error=f"HTTPError {exc.code}: {text}" if text else f"HTTPError {exc.code}",
                retryable=body is None and exc.code >= 500,
            )

        except urllib.error.URLError as exc:
            logger.error("URLError: reason=%s", exc.reason)
            return ForwardResult(success=False, error=f"URLError: {exc.reason}", retryable=True)

        except (OSError, http.client.HTTPException) as exc:
            logger.error("Connection error: %s", exc)
            return ForwardResult(success=False, error=f"Connection error: {exc}", retryable=True)

        except Exception as exc:
            logger.exception("Unexpected HTTP error: %s", exc)
            return ForwardResult(success=False, error=str(exc))

        body = _parse_body(text)
        if body is not None and body.get("code") != 0:
            return ForwardResult(
                success=False,
                status_code=code,
                response_body=text,
                body=body,
                error=f"Splunk error: code={body.get('code')} text={body.get('text')}",
            )
        return ForwardResult(success=True, status_code=code, response_body=text, body=body)
