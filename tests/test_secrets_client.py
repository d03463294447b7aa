# Copyright 2025 Loopper-AI
# Tests for the Secrets Manager client

from __future__ import annotations

from unittest.mock import patch

from botocore.exceptions import ClientError

ARN = "arn:aws:secretsmanager:us-east-1:123:secret:hec"


class TestSecretsClient:
    """Test suite for SecretsClient.get_hec_token."""

    @patch("splunk_iot_forwarder.clients.secrets_client.boto3")
    def test_json_secret(self, mock_boto3):
        from splunk_iot_forwarder.clients import SecretsClient

        mock_boto3.client.return_value.get_secret_value.return_value = {"SecretString": '{"SPLUNK_HEC_TOKEN": " abc "}'}

        assert SecretsClient().get_hec_token(ARN) == "abc"
        mock_boto3.client.assert_called_once_with("secretsmanager")
        mock_boto3.client.return_value.get_secret_value.assert_called_once_with(SecretId=ARN)

    @patch("splunk_iot_forwarder.clients.secrets_client.boto3")
    def test_plain_secret(self, mock_boto3):
        from splunk_iot_forwarder.clients import SecretsClient

        mock_boto3.client.return_value.get_secret_value.return_value = {"SecretString": "plain-token"}

        assert SecretsClient().get_hec_token(ARN) == "plain-token"

    @patch("splunk_iot_forwarder.clients.secrets_client.boto3")
    def test_missing_key(self, mock_boto3):
        from splunk_iot_forwarder.clients import SecretsClient

        mock_boto3.client.return_value.get_secret_value.return_value = {"SecretString": '{"other": "x"}'}

        assert SecretsClient().get_hec_token(ARN) is None

    @patch("splunk_iot_forwarder.clients.secrets_client.boto3")
    def test_client_error(self, mock_boto3):
        from splunk_iot_forwarder.clients import SecretsClient

        mock_boto3.client.return_value.get_secret_value.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "not found"}},
            "GetSecretValue",
        )

        assert SecretsClient().get_hec_token(ARN) is None

    @patch("splunk_iot_forwarder.clients.secrets_client.boto3")
    def test_non_string_token(self, mock_boto3):
        from splunk_iot_forwarder.clients import SecretsClient

        mock_boto3.client.return_value.get_secret_value.return_value = {"SecretString": '{"SPLUNK_HEC_TOKEN": 123}'}

        assert SecretsClient().get_hec_token(ARN) is None

    @patch("splunk_iot_forwarder.clients.secrets_client.boto3")
    def test_invalid_json(self, mock_boto3):
        from splunk_iot_forwarder.clients import SecretsClient

        mock_boto3.client.return_value.get_secret_value.return_value = {"SecretString": '{"SPLUNK_HEC_TOKEN": '}

        assert SecretsClient().get_hec_token(ARN) is None
