"""Team and member models read from team config files."""

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import MODEL_FAMILY_PATTERNS, TEAM_LEAD_AGENT_TYPE


class ModelFamily(Enum):
    """Model family an agent runs on."""
    OPUS = "opus"
    SONNET = "sonnet"
    HAIKU = "haiku"
    OTHER = "other"

    @classmethod
    def classify(cls, model: str) -> "ModelFamily":
        """Classify a free-form model identifier by substring."""
        for pattern in MODEL_FAMILY_PATTERNS:
            if pattern in model:
                return cls(pattern)
        return cls.OTHER


def _from_epoch_ms(value: float) -> datetime:
    try:
        return datetime.fromtimestamp(value / 1000)
    except (OverflowError, OSError, ValueError):
        # outside the platform's timestamp range
        return datetime.fromtimestamp(0)


class TeamMember(BaseModel):
    """One agent participating in a team."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    agent_id: str = Field(..., alias="agentId")
    name: str
    agent_type: str = Field(..., alias="agentType", description="Role tag, e.g. 'team-lead'")
    model: str
    joined_at: Optional[float] = Field(None, alias="joinedAt", description="Epoch milliseconds")
    cwd: Optional[str] = None

    @property
    def model_family(self) -> ModelFamily:
        return ModelFamily.classify(self.model)

    @property
    def model_short(self) -> str:
        """Display name of the model: family name, or the raw model string."""
        family = self.model_family
        if family is ModelFamily.OTHER:
            return self.model
        return family.value.capitalize()

    @property
    def is_team_lead(self) -> bool:
        return self.agent_type == TEAM_LEAD_AGENT_TYPE

    @property
    def joined_date(self) -> Optional[datetime]:
        if self.joined_at is None:
            return None
        return _from_epoch_ms(self.joined_at)


class TeamConfig(BaseModel):
    """An agent team as described by ``teams/<dir>/config.json``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    created_at: float = Field(..., alias="createdAt", description="Epoch milliseconds")
    members: Tuple[TeamMember, ...]

    @property
    def created_date(self) -> datetime:
        return _from_epoch_ms(self.created_at)

    @property
    def lead(self) -> Optional[TeamMember]:
        """First member tagged as team lead, if any."""
        for member in self.members:
            if member.is_team_lead:
                return member
        return None
