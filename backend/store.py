import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path

from pydantic import ValidationError

from errors import StorageError
from models import Schedule

logger = logging.getLogger(__name__)

# Get the backing document path from environment, default to a local file for dev
env = os.getenv("ENV", "dev").lower()

if os.getenv("SCHEDULES_PATH"):
    SCHEDULES_PATH = os.getenv("SCHEDULES_PATH")
else:
    # Guard against writing into the working directory in production
    if env in ("prod", "production"):
        raise RuntimeError(
            "SCHEDULES_PATH missing in production; refusing to start with a relative path. "
            "Please configure SCHEDULES_PATH environment variable."
        )
    SCHEDULES_PATH = "./data/schedules.json"

logger.info(f"SCHEDULES_PATH={SCHEDULES_PATH}")


class ScheduleStore:
    """The single JSON document holding every schedule, in insertion order."""

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._lock = threading.RLock()

    def load(self) -> list[Schedule]:
        """Read all schedules. A missing or unreadable document means no data yet."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {self.path}, treating as empty: {e}")
            return []

        if not isinstance(raw, list):
            logger.warning(f"{self.path} does not hold a JSON array, treating as empty")
            return []

        schedules = []
        for item in raw:
            try:
                schedules.append(Schedule.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping malformed schedule in {self.path}: {e}")
        return schedules

    def replace(self, schedules: list[Schedule]) -> None:
        """Overwrite the document with the given schedules."""
        data = [s.model_dump() for s in schedules]
        folder = self.path.parent
        tmp_name = None
        try:
            folder.mkdir(parents=True, exist_ok=True)
            # Atomic write: the old document survives a failed serialize or write
            with tempfile.NamedTemporaryFile(
                "w", delete=False, encoding="utf-8", dir=folder, suffix=".tmp"
            ) as tf:
                tmp_name = tf.name
                json.dump(data, tf, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error(f"Failed to write {self.path}: {e}")
            raise StorageError("Failed to save schedules") from e

    @contextmanager
    def transaction(self):
        """Hold the document lock across a load -> mutate -> replace sequence."""
        with self._lock:
            yield

    def remove(self, schedule_id: str) -> bool:
        """Remove a schedule by id. Returns False, without writing, when absent."""
        with self.transaction():
            schedules = self.load()
            remaining = [s for s in schedules if s.id != schedule_id]
            if len(remaining) == len(schedules):
                return False
            self.replace(remaining)
            return True


_stores: dict[Path, ScheduleStore] = {}
_stores_lock = threading.Lock()


def get_store(path: str | os.PathLike | None = None) -> ScheduleStore:
    """Shared store for a document path, so every caller uses the same lock."""
    key = Path(path or SCHEDULES_PATH).resolve()
    with _stores_lock:
        if key not in _stores:
            _stores[key] = ScheduleStore(key)
        return _stores[key]


def get_schedule_store() -> ScheduleStore:
    """Get the configured schedule store."""
    return get_store()
