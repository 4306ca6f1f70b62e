"""Read-only loader turning the team/task JSON tree into snapshots."""
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..models.snapshot import LoadResult, SkippedEntry, SkipReason, Snapshot
from ..models.task import TaskItem
from ..models.team import TeamConfig
from .constants import (
    HIDDEN_PREFIX,
    TASK_FILE_SUFFIX,
    TASKS_DIR_NAME,
    TEAM_CONFIG_FILE_NAME,
    TEAMS_DIR_NAME,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def read_record(path: Path, model: Type[RecordT]) -> LoadResult[RecordT]:
    """Read and validate one JSON file without raising.

    Args:
        path: File to read
        model: Pydantic model the document must satisfy

    Returns:
        A successful LoadResult holding the record, or a skip with its reason
    """
    try:
        data = path.read_bytes()
    except (FileNotFoundError, NotADirectoryError):
        return LoadResult.skip(path, SkipReason.MISSING)
    except OSError as e:
        return LoadResult.skip(path, SkipReason.UNREADABLE, f"{type(e).__name__}: {e.strerror or e}")
    except ValueError as e:
        # path not representable by the OS, e.g. an embedded NUL
        return LoadResult.skip(path, SkipReason.UNREADABLE, f"{type(e).__name__}: {e}")

    try:
        return LoadResult.success(path, model.model_validate_json(data))
    except ValidationError as e:
        return LoadResult.skip(path, SkipReason.MALFORMED, f"{e.error_count()} validation error(s)")


def _list_dir(directory: Path) -> List[str]:
    """Sorted entry names of a directory; empty when it cannot be listed."""
    try:
        return sorted(os.listdir(directory))
    except (OSError, ValueError):
        return []


def _is_single_component(name: str) -> bool:
    return (
        bool(name)
        and name not in (".", "..")
        and "\x00" not in name
        and Path(name).name == name
        and os.sep not in name
    )


class StoreLoader:
    """Loads teams and their tasks from a Claude data directory.

    Layout::

        <root>/teams/<dir>/config.json
        <root>/tasks/<team-name>/<task-id>.json

    Loading never raises for filesystem or parse problems; affected entries are
    skipped and reported on ``Snapshot.skipped``.
    """

    def __init__(self, root: Union[str, Path]):
        """Initialize the loader.

        Args:
            root: The data directory containing ``teams/`` and ``tasks/``
        """
        self.root = Path(root).expanduser()
        self.teams_dir = self.root / TEAMS_DIR_NAME
        self.tasks_dir = self.root / TASKS_DIR_NAME

    def load(self) -> Snapshot:
        """Build a complete snapshot of the current on-disk state."""
        skipped: List[SkippedEntry] = []
        teams = self._load_teams(skipped)
        tasks_by_team = {
            team.name: self._load_tasks(team.name, skipped)
            for team in teams
        }

        for entry in skipped:
            logger.debug(f"Skipped {entry.path} ({entry.reason.value}) {entry.detail}".rstrip())
        logger.debug(
            f"Loaded {len(teams)} teams and {sum(len(t) for t in tasks_by_team.values())} tasks "
            f"from {self.root} ({len(skipped)} skipped)"
        )

        return Snapshot(
            teams=teams,
            tasks_by_team=MappingProxyType(tasks_by_team),
            skipped=tuple(skipped),
        )

    def _load_teams(self, skipped: List[SkippedEntry]) -> Tuple[TeamConfig, ...]:
        """Discover team configs, newest first.

        A later directory declaring an already-seen team name replaces the
        earlier record but keeps its discovery position.
        """
        by_name: Dict[str, TeamConfig] = {}
        for entry in _list_dir(self.teams_dir):
            if entry.startswith(HIDDEN_PREFIX):
                continue
            result = read_record(self.teams_dir / entry / TEAM_CONFIG_FILE_NAME, TeamConfig)
            if not result.ok:
                skipped.append(result.skipped)
                continue
            team = result.value
            if team.name in by_name:
                logger.debug(f"Team name '{team.name}' declared again in {entry}; keeping the later one")
            by_name[team.name] = team

        # sorted() is stable, so equal timestamps keep discovery order
        return tuple(sorted(by_name.values(), key=lambda t: t.created_at, reverse=True))

    def _load_tasks(self, team_name: str, skipped: List[SkippedEntry]) -> Tuple[TaskItem, ...]:
        """Load one team's tasks ordered by numeric id."""
        if not _is_single_component(team_name):
            return ()

        team_dir = self.tasks_dir / team_name
        tasks: List[TaskItem] = []
        for entry in _list_dir(team_dir):
            if not entry.endswith(TASK_FILE_SUFFIX):
                continue
            result = read_record(team_dir / entry, TaskItem)
            if not result.ok:
                skipped.append(result.skipped)
                continue
            tasks.append(result.value)

        tasks.sort(key=lambda t: t.sort_key)
        return tuple(tasks)


def refresh(root: Union[str, Path]) -> Snapshot:
    """Load a fresh snapshot from ``root``. Never raises for on-disk problems."""
    return StoreLoader(root).load()
