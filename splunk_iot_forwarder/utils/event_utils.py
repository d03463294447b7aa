# Copyright 2025 Loopper-AI
# Event enrichment and record construction

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..models import HecMetadata, HecRecord

REQUEST_ID_FIELD = "awsRequestId"

HOST = "serverless"
SOURCE_PREFIX = "lambda:"
SOURCETYPE = "httpevent"


def with_request_id(event: Any, request_id: str) -> Any:
    """Return event with the Lambda request id added for tracing.

    Only JSON objects are enriched, and an existing value is kept. The
    caller's event is never modified; a shallow copy is returned instead.
    """
    if not isinstance(event, Mapping) or REQUEST_ID_FIELD in event:
        return event
    enriched = dict(event)
    enriched[REQUEST_ID_FIELD] = request_id
    return enriched


def build_record(
    event: Any,
    request_id: str,
    function_name: str,
    index: str | None = None,
) -> HecRecord:
    """Wrap an inbound event with the fixed collector metadata."""
    metadata = HecMetadata(
        host=HOST,
        source=f"{SOURCE_PREFIX}{function_name}",
        sourcetype=SOURCETYPE,
        index=index,
    )
    return HecRecord(message=with_request_id(event, request_id), metadata=metadata)
