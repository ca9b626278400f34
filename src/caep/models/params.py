from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _alias(camel: str, snake: str) -> AliasChoices:
    return AliasChoices(camel, snake)


class ActionParams(BaseModel):
    """Action inputs. Accepts both camelCase and snake_case parameter names."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    audience: str | None = None
    subject: str | None = None
    address: str | None = None
    namespace: str | None = None
    current_level: str | None = Field(default=None, validation_alias=_alias("currentLevel", "current_level"))
    previous_level: str | None = Field(default=None, validation_alias=_alias("previousLevel", "previous_level"))
    change_direction: str | None = Field(default=None, validation_alias=_alias("changeDirection", "change_direction"))
    initiating_entity: str | None = Field(
        default=None, validation_alias=_alias("initiatingEntity", "initiating_entity")
    )
    reason_admin: str | None = Field(default=None, validation_alias=_alias("reasonAdmin", "reason_admin"))
    reason_user: str | None = Field(default=None, validation_alias=_alias("reasonUser", "reason_user"))
    issuer: str | None = None
    signing_method: str | None = Field(default=None, validation_alias=_alias("signingMethod", "signing_method"))
    event_timestamp: int | None = Field(default=None, validation_alias=_alias("eventTimestamp", "event_timestamp"))
    address_suffix: str | None = Field(default=None, validation_alias=_alias("addressSuffix", "address_suffix"))
    user_agent: str | None = Field(default=None, validation_alias=_alias("userAgent", "user_agent"))

    @field_validator("*", mode="before")
    @classmethod
    def empty_string_is_missing(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @field_validator(
        "namespace",
        "current_level",
        "previous_level",
        "initiating_entity",
        "reason_admin",
        "reason_user",
        mode="before",
    )
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        # Resolved templates keep the JSON type of the job data.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
