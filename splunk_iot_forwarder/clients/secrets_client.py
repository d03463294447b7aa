# Copyright 2025 Loopper-AI
# AWS Secrets Manager client

from __future__ import annotations

import json
import logging

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

TOKEN_KEY = "SPLUNK_HEC_TOKEN"


class SecretsClient:
    """Client for AWS Secrets Manager operations."""

    def __init__(self):
        """Initialize Secrets Manager client."""
        self._client = boto3.client("secretsmanager")

    def get_hec_token(self, secret_arn: str) -> str | None:
        """
        Retrieve the HEC token from Secrets Manager.

        The secret is either a JSON object with a SPLUNK_HEC_TOKEN key or
        the bare token string.

        Args:
            secret_arn: ARN of the secret holding the token

        Returns:
            Token string or None if retrieval fails
        """
        try:
            response = self._client.get_secret_value(SecretId=secret_arn)
            secret_string = (response.get("SecretString") or "").strip()
        except ClientError as e:
            logger.error("Failed to retrieve secret %s: %s", secret_arn, e)
            return None
        except Exception as e:
            logger.exception("Unexpected error retrieving secret: %s", e)
            return None

        token = secret_string
        if secret_string.startswith("{"):
            try:
                data = json.loads(secret_string)
            except json.JSONDecodeError as e:
                logger.error("Invalid JSON in secret %s: %s", secret_arn, e)
                return None
            if not isinstance(data, dict):
                logger.error("Secret %s is not a JSON object", secret_arn)
                return None
            token = data.get(TOKEN_KEY) or ""
            if not isinstance(token, str):
                logger.error("%s in secret %s is not a string", TOKEN_KEY, secret_arn)
                return None
            token = token.strip()

        if not token:
            logger.error("Missing %s in secret", TOKEN_KEY)
            return None
        return token
