from enum import Enum
from typing import Any

from pydantic import BaseModel

Reason = str | dict[str, Any] | list[Any]


class ChangeDirection(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"


class AssuranceLevelChangeEvent(BaseModel):
    """Payload of the CAEP assurance-level-change event.

    Optional fields left as None are dropped from the serialized claim
    rather than emitted as null.
    """

    event_timestamp: int
    namespace: str
    current_level: str
    previous_level: str | None = None
    change_direction: ChangeDirection | None = None
    initiating_entity: str | None = None
    reason_admin: Reason | None = None
    reason_user: Reason | None = None

    def to_claim(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
