"""Shared test fixtures for the CAEP transmitter."""

import sys
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

SECRET_ENV_VARS = (
    "SSF_KEY",
    "SSF_KEY_ID",
    "BEARER_AUTH_TOKEN",
    "AUTH_TOKEN",
    "BASIC_USERNAME",
    "BASIC_PASSWORD",
)

CONFIG_ENV_VARS = (
    "AWS_REGION",
    "ADDRESS",
    "DEFAULT_ISSUER",
    "DEFAULT_SIGNING_METHOD",
    "DEFAULT_USER_AGENT",
    "SET_REQUEST_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep developer secrets and a cached config out of every test."""
    from caep.config import _reset_config

    for name in SECRET_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(f"{name}_SECRET_ARN", raising=False)
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    _reset_config()
    yield
    _reset_config()


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_key_pem(rsa_private_key):
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture(scope="session")
def public_key_pem(rsa_private_key):
    return rsa_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


@pytest.fixture
def action_context(private_key_pem):
    return {
        "environment": {"ADDRESS": "https://receiver.example.com/events"},
        "secrets": {
            "SSF_KEY": private_key_pem,
            "SSF_KEY_ID": "key-1",
            "BEARER_AUTH_TOKEN": "test-token",
        },
        "data": {},
    }


@pytest.fixture
def valid_params():
    return {
        "audience": "https://example.com",
        "subject": '{"format":"account","uri":"acct:user@service.example.com"}',
        "address": "https://receiver.example.com/events",
        "namespace": "NIST-AAL",
        "currentLevel": "nist-aal2",
    }
