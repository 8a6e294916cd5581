import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from typing import Dict, Iterator

from pydantic import ValidationError as SchemaError

from app.core.config import settings
from app.core.exceptions import PersistenceError
from app.db.Models.models import Database, StatsRecord, URLRecord

logger = logging.getLogger(__name__)


class JSONStore:
    """In-memory URL and stats maps backed by a single JSON file.

    Every mutation rewrites the whole file. Writers are serialized through
    ``transaction()`` so concurrent requests cannot lose each other's updates.
    """

    def __init__(self, path: str):
        self.path = path
        self.data = Database()
        self._lock = threading.RLock()

    @property
    def urls(self) -> Dict[str, URLRecord]:
        return self.data.urls

    @property
    def stats(self) -> Dict[str, StatsRecord]:
        return self.data.stats

    @contextmanager
    def transaction(self) -> Iterator["JSONStore"]:
        """Hold the store lock for a read-modify-write, then persist once."""
        with self._lock:
            yield self
            self.save()

    @contextmanager
    def reading(self) -> Iterator["JSONStore"]:
        with self._lock:
            yield self

    def load(self):
        with self._lock:
            if not os.path.exists(self.path):
                self.data = Database()
                self.save()
                logger.info("Database created at %s", self.path)
                return

            try:
                self.data = self._read()
            except PersistenceError as e:
                logger.error("Failed to load database from %s: %s", self.path, e)
                self.data = Database()
                return

            self._repair_pairs()
            logger.info("Database loaded from %s (%d URLs)", self.path, len(self.urls))

    def save(self):
        with self._lock:
            try:
                self._write()
            except PersistenceError as e:
                logger.error("Failed to save database to %s: %s", self.path, e)

    def _read(self) -> Database:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return Database.model_validate(json.load(f))
        except (OSError, ValueError, SchemaError) as e:
            raise PersistenceError(str(e)) from e

    def _write(self):
        payload = self.data.model_dump(mode="json", by_alias=True)
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".db-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise PersistenceError(str(e)) from e

    def _repair_pairs(self):
        for code in list(self.urls):
            if code not in self.stats:
                logger.warning("URL %s had no stats entry, recreating it", code)
                self.stats[code] = StatsRecord()
        for code in list(self.stats):
            if code not in self.urls:
                logger.warning("Dropping orphan stats entry %s", code)
                del self.stats[code]


store = JSONStore(settings.DB_FILE)


def get_store():
    return store
