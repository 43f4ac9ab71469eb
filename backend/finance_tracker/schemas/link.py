"""Account-link flow schemas."""

from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class ButtonVariant(str, Enum):
    """Presentation variant of the connect control."""

    DEFAULT = "default"
    OUTLINE = "outline"
    SECONDARY = "secondary"
    GHOST = "ghost"
    LINK = "link"
    DESTRUCTIVE = "destructive"


class LinkState(str, Enum):
    """Controller state."""

    IDLE = "idle"
    PENDING = "pending"


class LinkMode(str, Enum):
    """How the current attempt is being served."""

    PROVIDER = "provider"
    SIMULATED = "simulated"


class Institution(BaseModel):
    """Institution reported by the provider."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    institution_id: str | None = None


class LinkAccountMeta(BaseModel):
    """Account descriptor reported by the provider."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = None
    mask: str | None = None
    type: str | None = None
    subtype: str | None = None


class LinkMetadata(BaseModel):
    """Provider metadata for a link attempt.

    Every field is optional; unknown fields sent by the provider are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    institution: Institution | None = None
    accounts: list[LinkAccountMeta] = Field(default_factory=list)
    link_session_id: str | None = None

    @property
    def institution_name(self) -> str | None:
        return self.institution.name if self.institution else None


class LinkSessionRequest(BaseModel):
    """Options for starting a link attempt."""

    link_token: str | None = None
    is_loading: bool = False
    variant: ButtonVariant = ButtonVariant.DEFAULT


class LinkSuccessRequest(BaseModel):
    """Provider success callback."""

    public_token: str
    metadata: LinkMetadata = Field(default_factory=LinkMetadata)


class LinkExitRequest(BaseModel):
    """Provider exit callback."""

    error: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None


class LinkEventRequest(BaseModel):
    """Provider lifecycle event."""

    event_name: str
    metadata: dict[str, Any] | None = None


class LinkButtonView(BaseModel):
    """What the connect control should render."""

    label: str
    disabled: bool
    variant: ButtonVariant
    is_loading: bool


class LinkSessionResponse(BaseModel):
    """Current state of a user's link controller."""

    state: LinkState
    mode: LinkMode | None = None
    link_token: str | None = None
    ready: bool = False
    pending: bool = False
    view: LinkButtonView
