from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator


class Actor(BaseModel):
    """Snapshot of the authenticated caller."""

    model_config = ConfigDict(frozen=True)

    id: Optional[Union[int, str]] = None
    role: Optional[str] = None


class TargetUser(BaseModel):
    """Snapshot of the account being acted upon."""

    model_config = ConfigDict(frozen=True)

    id: Optional[Union[int, str]] = None
    role: Optional[str] = None


class GuardErrorCode(str, Enum):
    ACTOR_REQUIRED = "ACTOR_REQUIRED"
    INVALID_ROLE = "INVALID_ROLE"
    INSUFFICIENT_ROLE_LEVEL = "INSUFFICIENT_ROLE_LEVEL"
    SELF_ROLE_CHANGE_NOT_ALLOWED = "SELF_ROLE_CHANGE_NOT_ALLOWED"
    SELF_MODIFICATION_NOT_ALLOWED = "SELF_MODIFICATION_NOT_ALLOWED"
    FOUNDER_ONLY = "FOUNDER_ONLY"


class GuardResult(BaseModel):
    """Outcome of a guard: allowed, or denied with a code and a reason."""

    model_config = ConfigDict(frozen=True)

    allowed: bool
    code: Optional[GuardErrorCode] = None
    reason: Optional[str] = None

    @model_validator(mode="after")
    def _check_shape(self) -> "GuardResult":
        if self.allowed and (self.code is not None or self.reason is not None):
            raise ValueError("An allowed result carries no code or reason")
        if not self.allowed and (self.code is None or self.reason is None):
            raise ValueError("A denied result requires a code and a reason")
        return self

    @classmethod
    def allow(cls) -> "GuardResult":
        return cls(allowed=True)

    @classmethod
    def deny(cls, code: GuardErrorCode, reason: str) -> "GuardResult":
        return cls(allowed=False, code=code, reason=reason)
