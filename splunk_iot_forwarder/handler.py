# Copyright 2025 Loopper-AI
# Lambda handler: AWS IoT rule action → Splunk HTTP Event Collector
#
# Add an IoT rule with a Lambda action pointing at this function.
# Each invocation is sent to Splunk on its own, retried up to 3 times.
#   success → original event returned (echoed back to the caller)
#   failure → ForwardError raised after logging the failing payload

from __future__ import annotations

import json
import logging
from typing import Any

from .clients import HecClient, SecretsClient
from .config import Config
from .models import ForwardError, ForwardResult
from .utils import build_record

logger = logging.getLogger()

# Built once per execution environment, reused across invocations
_config: Config | None = None
_client: HecClient | None = None


def _get_client() -> tuple[Config, HecClient]:
    global _config, _client
    if _client is not None:
        return _config, _client

    config = Config.from_environment()
    logger.setLevel(getattr(logging, config.log_level, logging.INFO))

    is_valid, err = config.validate()
    if not is_valid:
        # Not fatal: the request itself reports the connection/auth failure
        logger.warning("Configuration warning: %s", err)

    token = config.token
    token_missing = False
    if not token and config.token_secret_arn:
        token = SecretsClient().get_hec_token(config.token_secret_arn) or ""
        token_missing = not token

    client = HecClient(
        config.url,
        token,
        timeout=config.request_timeout,
        max_retries=config.max_retries,
        verify_ssl=config.verify_ssl,
    )
    if token_missing:
        # Lookup is repeated on the next invocation
        logger.warning("HEC token unavailable from %s, client not cached", config.token_secret_arn)
        return config, client

    _config, _client = config, client
    return _config, _client


def _context_attr(context: Any, name: str) -> str:
    return getattr(context, name, "") if context else ""


def forward(event: Any, context: Any) -> ForwardResult:
    """Send one IoT event to Splunk and return the outcome."""
    config, client = _get_client()
    logger.info("Received event: %s", json.dumps(event, indent=2, default=str))

    record = build_record(
        event,
        request_id=_context_attr(context, "aws_request_id"),
        function_name=_context_attr(context, "function_name"),
        index=config.index,
    )
    result = client.send(record)

    if not result.success:
        logger.error(
            "error=%s context=%s attempts=%d",
            result.error,
            json.dumps(record.to_dict(), default=str),
            result.attempts,
        )
    return result


def lambda_handler(event: Any, context: Any) -> Any:
    """IoT rule action → Splunk. Echoes the event back on success."""
    result = forward(event, context)
    if not result.success:
        raise ForwardError(result)

    logger.info("Response from Splunk: %s", result.body if result.body is not None else result.response_body)
    return event
