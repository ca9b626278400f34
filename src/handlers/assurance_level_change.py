"""CAEP assurance level change transmitter for params that may carry JSONPath templates."""

import logging
from collections.abc import Mapping
from typing import Any

from caep import action

logger = logging.getLogger(__name__)


def invoke(params: Mapping[str, Any], context: Mapping[str, Any] | None = None) -> dict[str, object]:
    return action.invoke(params, context, resolve_params=action.resolve_template_params)


error = action.error
halt = action.halt


def handler(event: dict[str, Any], context: object) -> dict[str, object]:
    logger.info("Handling %s operation", event.get("operation", "invoke"))
    return action.dispatch(event, invoke)
