"""Validation and claim assembly for the assurance-level-change SET."""

import uuid
from time import time
from typing import Any

import pydantic

from caep.errors import ErrorCode, ValidationError
from caep.models import ActionParams, AssuranceLevelChangeEvent, ChangeDirection
from caep.parsing import parse_reason, parse_subject

ASSURANCE_LEVEL_CHANGE_EVENT = "https://schemas.openid.net/secevent/caep/event-type/assurance-level-change"

# (field, name reported to the caller), checked in this order
REQUIRED_PARAMS: tuple[tuple[str, str], ...] = (
    ("audience", "audience"),
    ("subject", "subject"),
    ("address", "address"),
    ("namespace", "namespace"),
    ("current_level", "currentLevel"),
)

CHANGE_DIRECTIONS = frozenset(d.value for d in ChangeDirection)


def load_params(raw: dict[str, Any]) -> ActionParams:
    try:
        return ActionParams.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid parameters: {e}") from e


def validate_params(params: ActionParams) -> None:
    for field, name in REQUIRED_PARAMS:
        if not getattr(params, field):
            raise ValidationError(f"{name} is required", code=ErrorCode.MISSING_PARAMETER)

    if params.change_direction and params.change_direction not in CHANGE_DIRECTIONS:
        raise ValidationError(
            'changeDirection must be either "increase" or "decrease"',
            code=ErrorCode.INVALID_CHANGE_DIRECTION,
        )


def build_event_payload(params: ActionParams, now: int | None = None) -> AssuranceLevelChangeEvent:
    """Assemble the event payload from validated params.

    Optional fields whose parameter is unset stay None and are omitted
    from the signed claim.
    """
    if now is None:
        now = int(time())

    return AssuranceLevelChangeEvent(
        event_timestamp=params.event_timestamp or now,
        namespace=params.namespace,
        current_level=params.current_level,
        previous_level=params.previous_level or None,
        change_direction=params.change_direction or None,
        initiating_entity=params.initiating_entity or None,
        reason_admin=parse_reason(params.reason_admin) if params.reason_admin else None,
        reason_user=parse_reason(params.reason_user) if params.reason_user else None,
    )


def build_claims(
    *,
    issuer: str,
    audience: str,
    subject: Any,
    event: AssuranceLevelChangeEvent,
    issued_at: int | None = None,
) -> dict[str, Any]:
    return {
        "iss": issuer,
        "aud": audience,
        "iat": issued_at if issued_at is not None else int(time()),
        "jti": uuid.uuid4().hex,
        "sub_id": subject,
        "events": {ASSURANCE_LEVEL_CHANGE_EVENT: event.to_claim()},
    }


def build_set_claims(params: ActionParams, default_issuer: str) -> dict[str, Any]:
    """Parse the subject and build the full claim set for a validated request."""
    subject = parse_subject(params.subject)
    event = build_event_payload(params)
    return build_claims(
        issuer=params.issuer or default_issuer,
        audience=params.audience,
        subject=subject,
        event=event,
    )
