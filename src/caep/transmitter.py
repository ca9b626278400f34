"""SET delivery to a push receiver (RFC 8935)."""

import logging

import requests
from requests.auth import AuthBase

from caep.errors import ErrorCode, TransmissionError
from caep.models import TransmissionResult

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})


def transmit_set(
    token: str,
    url: str,
    *,
    auth: AuthBase | None = None,
    headers: dict[str, str] | None = None,
    timeout: int = 30,
) -> dict[str, object]:
    """POST a signed SET to the receiver.

    Returns the result for any status the receiver answered with, except
    429/502/503/504, which raise a retryable TransmissionError.
    """
    request_headers = {
        "Content-Type": "application/secevent+jwt",
        "Accept": "application/json",
        **(headers or {}),
    }

    try:
        response = requests.post(url, data=token, headers=request_headers, auth=auth, timeout=timeout)
    except requests.RequestException as e:
        logger.error("SET transmission to %s failed: %s", url, e)
        raise TransmissionError(f"SET transmission failed: {e}") from e

    if response.status_code in RETRYABLE_STATUS_CODES:
        logger.warning("Receiver %s returned retryable status %d", url, response.status_code)
        raise TransmissionError(
            f"SET transmission failed: {response.status_code} {response.reason}",
            code=ErrorCode.RETRYABLE_STATUS,
        )

    succeeded = 200 <= response.status_code < 300
    if succeeded:
        logger.info("Transmitted SET to %s: %d", url, response.status_code)
    else:
        logger.warning("Receiver %s rejected SET: %d", url, response.status_code)

    result = TransmissionResult(
        status="success" if succeeded else "failed",
        status_code=response.status_code,
        body=response.text,
        retryable=False,
    )
    return result.to_dict()
