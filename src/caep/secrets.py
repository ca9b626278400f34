"""Secret lookup for signing material and receiver credentials.

Secrets come from the invocation context first. Outside the action
framework (local runs, plain Lambda deployments) they fall back to an
environment variable of the same name, then to AWS Secrets Manager when
``<NAME>_SECRET_ARN`` is set.
"""

import logging
from collections.abc import Mapping
from os import environ

import boto3
from botocore.exceptions import ClientError

from caep.config import get_config
from caep.errors import ErrorCode, SecretConfigurationError
from caep.models import SigningKey

logger = logging.getLogger(__name__)


def get_secret(name: str, secrets: Mapping[str, str] | None = None) -> str | None:
    value = (secrets or {}).get(name)
    if value:
        return value

    # Local dev: use env var directly
    direct = environ.get(name, "")
    if direct:
        return direct

    arn = environ.get(f"{name}_SECRET_ARN", "")
    if not arn:
        return None

    client = boto3.client("secretsmanager", region_name=get_config().aws_region)
    try:
        return client.get_secret_value(SecretId=arn)["SecretString"]
    except ClientError as e:
        error_code = e.response["Error"]["Code"]
        logger.error("Secrets Manager lookup for %s failed: %s", name, error_code)
        raise SecretConfigurationError(
            f"Failed to fetch {name} secret: {error_code}",
            code=ErrorCode.SECRET_LOOKUP_FAILED,
        ) from e


def get_signing_key(secrets: Mapping[str, str] | None, alg: str) -> SigningKey:
    key = get_secret("SSF_KEY", secrets)
    if not key:
        raise SecretConfigurationError("SSF_KEY secret is required")

    kid = get_secret("SSF_KEY_ID", secrets)
    if not kid:
        raise SecretConfigurationError("SSF_KEY_ID secret is required")

    return SigningKey(key=key, kid=kid, alg=alg)
