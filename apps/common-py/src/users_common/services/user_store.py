"""Flat-file persistence for the user collection."""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from users_common.errors import UserStoreError
from users_common.models.user import User

logger = logging.getLogger(__name__)

_collection_adapter = TypeAdapter(list[User])


class UserStore(ABC):
    """Abstract interface for the user collection store."""

    @abstractmethod
    def exists(self) -> bool:
        """Whether the collection has ever been persisted."""
        pass

    @abstractmethod
    def load(self) -> list[User]:
        """Load the full collection."""
        pass

    @abstractmethod
    def save(self, users: list[User]) -> None:
        """Persist the full collection, replacing what was stored."""
        pass


class JsonFileUserStore(UserStore):
    """Stores the whole collection as one JSON array in a single file.

    Every call reads or rewrites the entire file. Writes overwrite in place:
    there is no temp-file rename and no locking, so an interrupted write can
    leave the file truncated, after which every load fails until the file is
    repaired.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the store.

        Args:
            path: Backing JSON file
        """
        self.path = Path(path)

    def exists(self) -> bool:
        """Whether the backing file exists."""
        return self.path.exists()

    def load(self) -> list[User]:
        """Load the collection, treating a missing file as empty.

        Raises:
            UserStoreError: The file cannot be read or is not a JSON array of users
        """
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
            users = _collection_adapter.validate_python(json.loads(raw))
        except (OSError, ValueError, ValidationError) as e:
            logger.error("Failed to load users from %s: %s", self.path, e)
            raise UserStoreError() from e
        logger.debug("Loaded %d users from %s", len(users), self.path)
        return users

    def save(self, users: list[User]) -> None:
        """Overwrite the file with the collection, 2-space indented.

        Raises:
            UserStoreError: The file cannot be written
        """
        documents = [user.to_document() for user in users]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(documents, ensure_ascii=False, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save users to %s: %s", self.path, e)
            raise UserStoreError() from e
        logger.debug("Saved %d users to %s", len(users), self.path)
