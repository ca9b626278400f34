"""CAEP assurance level change transmitter for params that arrive already resolved."""

from collections.abc import Mapping
from typing import Any

from caep import action


def invoke(params: Mapping[str, Any], context: Mapping[str, Any] | None = None) -> dict[str, object]:
    return action.invoke(params, context, resolve_params=action.passthrough_params)


error = action.error
halt = action.halt


def handler(event: dict[str, Any], context: object) -> dict[str, object]:
    return action.dispatch(event, invoke)
