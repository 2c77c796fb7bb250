"""File I/O for tuido task lists."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .models import Task

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for task file problems."""


class IOFailure(StoreError):
    """The task file could not be read or written."""


class ParseFailure(StoreError):
    """The task file exists but does not hold a task list."""


def _field(raw: Dict[str, Any], name: str, kind: type, default: Any) -> Any:
    value = raw.get(name, default)
    # bool is an int subclass; keep ids and flags apart
    if isinstance(value, bool) and kind is not bool:
        raise ValueError(f"field {name!r} must be {kind.__name__}, got bool")
    if not isinstance(value, kind):
        raise ValueError(f"field {name!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


def task_from_dict(raw: Any) -> Task:
    """Build a Task from one decoded JSON record. Missing fields take zero values."""
    if not isinstance(raw, dict):
        raise ValueError(f"task record must be an object, got {type(raw).__name__}")
    return Task(
        id=_field(raw, "id", int, 0),
        title=_field(raw, "title", str, ""),
        done=_field(raw, "done", bool, False),
    )


def task_to_dict(task: Task) -> Dict[str, Any]:
    return {"id": task.id, "title": task.title, "done": task.done}


class TaskStore:
    """Reads and rewrites one JSON file holding the whole task list."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[Task]:
        """Load the task list.

        A missing file is an empty list. Unreadable files raise IOFailure;
        anything that is not a JSON array of task objects raises ParseFailure.
        Bytes that are not valid UTF-8 are a ParseFailure, not replaced.
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No task file at %s, starting empty", self._path)
            return []
        except UnicodeDecodeError as err:
            raise ParseFailure(f"{self._path} is not UTF-8 text: {err}") from err
        except OSError as err:
            raise IOFailure(f"cannot read {self._path}: {err}") from err

        try:
            data = json.loads(text)
        except ValueError as err:
            raise ParseFailure(f"{self._path} is not valid JSON: {err}") from err

        if data is None:
            return []
        if not isinstance(data, list):
            raise ParseFailure(f"{self._path}: expected a list of tasks, got {type(data).__name__}")

        try:
            tasks = [task_from_dict(raw) for raw in data]
        except ValueError as err:
            raise ParseFailure(f"{self._path}: {err}") from err

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: List[Task]) -> None:
        """Rewrite the file with the full list (4-space indented JSON)."""
        payload = json.dumps([task_to_dict(t) for t in tasks], indent=4, ensure_ascii=False)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(payload, encoding="utf-8")
        except OSError as err:
            raise IOFailure(f"cannot write {self._path}: {err}") from err
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
