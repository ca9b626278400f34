"""
Pydantic models for the transmitter action.
"""

from caep.models.event import AssuranceLevelChangeEvent, ChangeDirection
from caep.models.params import ActionParams
from caep.models.transmission import SigningKey, TransmissionResult

__all__ = ["ActionParams", "AssuranceLevelChangeEvent", "ChangeDirection", "SigningKey", "TransmissionResult"]
