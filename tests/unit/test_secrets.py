from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from caep.errors import ErrorCode, SecretConfigurationError
from caep.secrets import get_secret, get_signing_key


def test_get_secret_from_context():
    assert get_secret("SSF_KEY_ID", {"SSF_KEY_ID": "key-1"}) == "key-1"


def test_get_secret_context_wins_over_env(monkeypatch):
    monkeypatch.setenv("SSF_KEY_ID", "env-key")
    assert get_secret("SSF_KEY_ID", {"SSF_KEY_ID": "ctx-key"}) == "ctx-key"


def test_get_secret_env_fallback(monkeypatch):
    monkeypatch.setenv("SSF_KEY_ID", "env-key")
    assert get_secret("SSF_KEY_ID", {}) == "env-key"


def test_get_secret_missing():
    with patch("caep.secrets.boto3.client") as mock_client:
        assert get_secret("SSF_KEY_ID", None) is None
        mock_client.assert_not_called()


def test_get_secret_from_secrets_manager(monkeypatch):
    monkeypatch.setenv("SSF_KEY_SECRET_ARN", "arn:aws:secretsmanager:us-east-1:123:secret:ssf-key")

    with patch("caep.secrets.boto3.client") as mock_client_factory:
        mock_client = MagicMock()
        mock_client.get_secret_value.return_value = {"SecretString": "pem-from-sm"}
        mock_client_factory.return_value = mock_client

        assert get_secret("SSF_KEY", {}) == "pem-from-sm"
        mock_client_factory.assert_called_once_with("secretsmanager", region_name="us-east-1")
        mock_client.get_secret_value.assert_called_once_with(
            SecretId="arn:aws:secretsmanager:us-east-1:123:secret:ssf-key"
        )


def test_get_secret_secrets_manager_error(monkeypatch):
    monkeypatch.setenv("SSF_KEY_SECRET_ARN", "arn:aws:secretsmanager:us-east-1:123:secret:ssf-key")
    error = ClientError({"Error": {"Code": "ResourceNotFoundException", "Message": "nope"}}, "GetSecretValue")

    with patch("caep.secrets.boto3.client") as mock_client_factory:
        mock_client_factory.return_value.get_secret_value.side_effect = error

        with pytest.raises(SecretConfigurationError, match="ResourceNotFoundException") as exc_info:
            get_secret("SSF_KEY", {})
        assert exc_info.value.code == ErrorCode.SECRET_LOOKUP_FAILED


def test_get_signing_key():
    key = get_signing_key({"SSF_KEY": "pem", "SSF_KEY_ID": "key-1"}, "ES256")
    assert key.key == "pem"
    assert key.kid == "key-1"
    assert key.alg == "ES256"


def test_get_signing_key_requires_key():
    with pytest.raises(SecretConfigurationError, match="SSF_KEY secret is required"):
        get_signing_key({"SSF_KEY_ID": "key-1"}, "RS256")


def test_get_signing_key_requires_key_id():
    with pytest.raises(SecretConfigurationError, match="SSF_KEY_ID secret is required"):
        get_signing_key({"SSF_KEY": "pem"}, "RS256")
