"""
Entry points of the assurance level change transmitter.

invoke() runs the whole pipeline: resolve params, validate, sign the SET
and deliver it. error() tells the framework whether a failed invocation is
worth retrying. halt() acknowledges a cancellation.

The two handler variants share this module and differ only in the
``resolve_params`` step they pass to invoke().
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from caep.auth import get_receiver_auth
from caep.config import get_config
from caep.errors import TransmissionError, ValidationError
from caep.events import build_set_claims, load_params, validate_params
from caep.parsing import build_url
from caep.secrets import get_signing_key
from caep.signing import sign_set
from caep.templates import resolve_jsonpath_templates
from caep.transmitter import transmit_set

logger = logging.getLogger(__name__)

ParamResolver = Callable[[Mapping[str, Any], Mapping[str, Any]], dict[str, Any]]

# Matched as substrings of the error message, not as parsed status codes.
RETRYABLE_MARKERS: tuple[str, ...] = ("429", "502", "503", "504")


def passthrough_params(params: Mapping[str, Any], context: Mapping[str, Any]) -> dict[str, Any]:
    return dict(params)


def resolve_template_params(params: Mapping[str, Any], context: Mapping[str, Any]) -> dict[str, Any]:
    resolved, errors = resolve_jsonpath_templates(dict(params), context.get("data") or {})
    if errors:
        logger.warning("Template resolution errors: %s", errors)
    return resolved


def invoke(
    params: Mapping[str, Any],
    context: Mapping[str, Any] | None = None,
    resolve_params: ParamResolver = passthrough_params,
) -> dict[str, object]:
    """Build, sign and transmit a CAEP assurance-level-change SET."""
    context = context or {}
    config = get_config()
    secrets = context.get("secrets") or {}
    environment = context.get("environment") or {}

    action_params = load_params(resolve_params(params, context))
    if not action_params.address:
        fallback = environment.get("ADDRESS") or config.address
        if fallback:
            action_params = action_params.model_copy(update={"address": fallback})
    validate_params(action_params)

    signing_key = get_signing_key(secrets, action_params.signing_method or config.default_signing_method)
    claims = build_set_claims(action_params, config.default_issuer)
    token = sign_set(claims, signing_key)

    url = build_url(action_params.address, action_params.address_suffix)
    return transmit_set(
        token,
        url,
        auth=get_receiver_auth(secrets),
        headers={"User-Agent": action_params.user_agent or config.default_user_agent},
        timeout=config.request_timeout,
    )


def _error_message(err: Any) -> str:
    if isinstance(err, BaseException):
        return str(err)
    if isinstance(err, Mapping):
        return str(err.get("message") or "")
    return str(err)


def error(params: Mapping[str, Any], context: Mapping[str, Any] | None = None) -> dict[str, str]:
    """Request a retry for throttling and gateway errors, re-raise anything else."""
    err = params.get("error")
    if err is None:
        raise ValidationError("error is required")

    message = _error_message(err)
    if any(marker in message for marker in RETRYABLE_MARKERS):
        logger.info("Requesting retry after error: %s", message)
        return {"status": "retry_requested"}

    if isinstance(err, BaseException):
        raise err
    raise TransmissionError(message)


def halt(params: Mapping[str, Any] | None = None, context: Mapping[str, Any] | None = None) -> dict[str, str]:
    return {"status": "halted"}


def dispatch(event: Mapping[str, Any], invoke_fn: Callable[..., dict[str, object]]) -> dict[str, object]:
    """Route a Lambda event of the form {"operation", "params", "context"}."""
    operation = event.get("operation", "invoke")
    params = event.get("params") or {}
    context = event.get("context") or {}

    if operation == "invoke":
        return invoke_fn(params, context)
    if operation == "error":
        return error(params, context)
    if operation == "halt":
        return halt(params, context)
    raise ValidationError(f"Unsupported operation: {operation}")
