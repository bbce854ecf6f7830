import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator
from pydantic import TypeAdapter, ValidationError

from src.common.exceptions import StorageException
from src.tasks.schemas import Task

logger = logging.getLogger(__name__)

document_adapter = TypeAdapter(list[Any])
task_list_adapter = TypeAdapter(list[Task])


class TaskStore:
    """Persists the whole task collection as a single JSON array document.

    Callers that read, modify and write back the collection must do so inside
    ``lock()`` so that concurrent requests cannot overwrite each other.

    Array entries that are not valid tasks are skipped on read and carried
    over unchanged on write, so they are never dropped from the document.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    @contextmanager
    def lock(self) -> Iterator[None]:
        with self._lock:
            yield

    def ensure(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.write_text("[]", encoding="utf-8")
            logger.info(f"Created task document at {self.path}")

    def _load_entries(self) -> list[Any]:
        self.ensure()
        raw = self.path.read_text(encoding="utf-8")
        return document_adapter.validate_json(raw or "[]")

    def _split_entries(self, entries: list[Any]) -> tuple[list[Task], list[Any]]:
        tasks: list[Task] = []
        foreign_entries: list[Any] = []
        for entry in entries:
            try:
                tasks.append(Task.model_validate(entry))
            except ValidationError:
                foreign_entries.append(entry)
        return tasks, foreign_entries

    def read_all(self) -> list[Task]:
        try:
            entries = self._load_entries()
        except (OSError, ValidationError) as e:
            logger.warning(
                f"Could not read tasks from {self.path}, using an empty list: {e}"
            )
            return []

        tasks, foreign_entries = self._split_entries(entries)
        if foreign_entries:
            logger.warning(
                f"Skipped {len(foreign_entries)} invalid entries in {self.path}"
            )
        return tasks

    def write_all(self, tasks: list[Task]) -> None:
        try:
            _, foreign_entries = self._split_entries(self._load_entries())
        except (OSError, ValidationError):
            foreign_entries = []

        try:
            self.ensure()
            document = task_list_adapter.dump_python(
                tasks, mode="json", by_alias=True
            )
            payload = document_adapter.dump_json(
                document + foreign_entries, indent=2
            )
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "wb") as tmp_file:
                    tmp_file.write(payload)
                os.replace(tmp_path, self.path)
            except OSError:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageException("Failed to write tasks") from e
