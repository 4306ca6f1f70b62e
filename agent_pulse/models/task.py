"""Task data models."""
import re
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import STATUS_COMPLETED, STATUS_IN_PROGRESS, STATUS_PENDING

_INTEGER_ID = re.compile(r"([+-]?)0*([0-9]+)")
_INT64_MIN = -2 ** 63
_INT64_MAX = 2 ** 63 - 1
_INT64_MAX_DIGITS = 19


class TaskStatus(Enum):
    """Task status enumeration."""
    PENDING = STATUS_PENDING
    IN_PROGRESS = STATUS_IN_PROGRESS
    COMPLETED = STATUS_COMPLETED
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, raw: str) -> "TaskStatus":
        """Map a raw status string, treating unrecognised values as UNKNOWN."""
        if raw == cls.UNKNOWN.value:
            return cls.UNKNOWN
        try:
            return cls(raw)
        except ValueError:
            return cls.UNKNOWN


class TaskItem(BaseModel):
    """One unit of work belonging to a team.

    The owning team is not stored on the record; it is implied by the
    ``tasks/<team-name>/`` directory the file was read from.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    subject: str
    description: str
    status: str  # pending, in_progress, completed; other values are kept as-is
    owner: Optional[str] = None
    blocked_by: Optional[Tuple[str, ...]] = Field(None, alias="blockedBy")
    blocks: Optional[Tuple[str, ...]] = None
    active_form: Optional[str] = Field(
        None, alias="activeForm", description="Present-progressive label shown while in progress"
    )

    @property
    def is_blocked(self) -> bool:
        return bool(self.blocked_by)

    @property
    def known_status(self) -> TaskStatus:
        return TaskStatus.from_raw(self.status)

    @property
    def sort_key(self) -> int:
        """Signed 64-bit value of ``id``; anything else sorts as 0."""
        match = _INTEGER_ID.fullmatch(self.id)
        if match is None or len(match.group(2)) > _INT64_MAX_DIGITS:
            return 0
        value = int(match.group(1) + match.group(2))
        if not _INT64_MIN <= value <= _INT64_MAX:
            return 0
        return value

    @property
    def progress_label(self) -> Optional[str]:
        if self.status == STATUS_IN_PROGRESS:
            return self.active_form
        return None
