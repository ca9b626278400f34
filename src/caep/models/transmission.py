from pydantic import BaseModel, ConfigDict, Field


class SigningKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, repr=False)
    kid: str = Field(..., min_length=1)
    alg: str = "RS256"


class TransmissionResult(BaseModel):
    """Outcome of a SET delivery, serialized with the receiver-facing key names."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(..., pattern="^(success|failed)$")
    status_code: int = Field(..., alias="statusCode")
    body: str
    retryable: bool = False

    def to_dict(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)
