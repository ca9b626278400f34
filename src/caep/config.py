from os import environ

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    address: str | None = None
    default_issuer: str
    default_signing_method: str
    default_user_agent: str
    request_timeout: int


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        address=environ.get("ADDRESS") or None,
        default_issuer=environ.get("DEFAULT_ISSUER", "https://sgnl.ai/"),
        default_signing_method=environ.get("DEFAULT_SIGNING_METHOD", "RS256"),
        default_user_agent=environ.get("DEFAULT_USER_AGENT", "SGNL-CAEP-Hub/2.0"),
        request_timeout=int(environ.get("SET_REQUEST_TIMEOUT", "30")),
    )
    return _cached_config
