"""Receiver credentials for SET delivery."""

from collections.abc import Mapping

from requests import PreparedRequest
from requests.auth import AuthBase, HTTPBasicAuth

from caep.secrets import get_secret

BEARER_PREFIX = "Bearer "


class BearerAuth(AuthBase):
    """Attaches a bearer token, keeping an existing ``Bearer`` prefix."""

    def __init__(self, token: str):
        if not token.lower().startswith(BEARER_PREFIX.lower()):
            token = f"{BEARER_PREFIX}{token}"
        self.token = token

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BearerAuth) and self.token == other.token

    def __call__(self, request: PreparedRequest) -> PreparedRequest:
        request.headers["Authorization"] = self.token
        return request


def get_receiver_auth(secrets: Mapping[str, str] | None) -> AuthBase | None:
    """Pick the receiver credential from whichever secret is configured.

    Precedence: BEARER_AUTH_TOKEN, AUTH_TOKEN, then BASIC_USERNAME/BASIC_PASSWORD.
    Returns None when the receiver needs no authentication.
    """
    token = get_secret("BEARER_AUTH_TOKEN", secrets) or get_secret("AUTH_TOKEN", secrets)
    if token:
        return BearerAuth(token)

    username = get_secret("BASIC_USERNAME", secrets)
    password = get_secret("BASIC_PASSWORD", secrets)
    if username and password:
        return HTTPBasicAuth(username, password)

    return None
