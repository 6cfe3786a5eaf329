"""Domain models for the listener registry."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

try:
    from enum import StrEnum
except ImportError:  # pragma: no cover - fallback for older Python runtimes

    class StrEnum(str, Enum):
        pass


Listener = Callable[..., Any]


class ListenerKind(StrEnum):
    PERSISTENT = "on"
    ONCE = "once"


class EmitterSettings(BaseModel):
    """Validated emitter configuration."""

    model_config = ConfigDict(frozen=True)

    max_listeners: int = Field(ge=0)
