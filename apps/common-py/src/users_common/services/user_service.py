"""User service: create, read, update and delete over the record store."""

import logging
import time
from collections.abc import Callable, Iterable

from users_common.errors import UserDataNotFoundError, UserNotFoundError
from users_common.models.user import User, UserPayload
from users_common.services.user_store import UserStore

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def generate_user_id(existing_ids: Iterable[str], clock: Callable[[], int] = _now_ms) -> str:
    """Generate an id from the current epoch time in milliseconds.

    A value already present in ``existing_ids`` is bumped by one millisecond
    until it is free, so ids stay unique within the collection.

    Args:
        existing_ids: Ids already in the collection
        clock: Returns epoch milliseconds

    Returns:
        New user ID as a decimal string
    """
    taken = set(existing_ids)
    candidate = clock()
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def _find_index(users: list[User], user_id: str) -> int:
    for index, user in enumerate(users):
        if user.id == user_id:
            return index
    return -1


class UserService:
    """Request handlers for the user collection.

    Each operation loads the whole collection, mutates it in memory and
    writes it back. Nothing is cached between calls.
    """

    def __init__(self, store: UserStore, clock: Callable[[], int] = _now_ms) -> None:
        """Initialize the service.

        Args:
            store: Collection store
            clock: Epoch-millisecond clock used for id generation
        """
        self.store = store
        self.clock = clock

    def create_user(self, payload: UserPayload) -> User:
        """Append a new user and persist the collection."""
        users = self.store.load()
        user = User(
            id=generate_user_id((u.id for u in users), self.clock),
            first_name=payload.first_name,
            second_name=payload.second_name,
            age=payload.age,
            city=payload.city,
        )
        users.append(user)
        self.store.save(users)
        logger.info("Created user %s", user.id)
        return user

    def get_user(self, user_id: str) -> User:
        """Get a user by ID.

        Raises:
            UserDataNotFoundError: Nothing has been stored yet
            UserNotFoundError: No user with this ID
        """
        if not self.store.exists():
            raise UserDataNotFoundError()
        users = self.store.load()
        index = _find_index(users, user_id)
        if index == -1:
            raise UserNotFoundError()
        return users[index]

    def update_user(self, user_id: str, payload: UserPayload) -> User:
        """Merge the payload into an existing user.

        A field keeps its stored value when the request value is falsy, so
        ``age: 0`` leaves the age unchanged.

        Raises:
            UserNotFoundError: No user with this ID
        """
        users = self.store.load()
        index = _find_index(users, user_id)
        if index == -1:
            raise UserNotFoundError()

        current = users[index]
        updated = current.model_copy(
            update={
                "first_name": payload.first_name or current.first_name,
                "second_name": payload.second_name or current.second_name,
                "age": payload.age or current.age,
                "city": payload.city or current.city,
            }
        )
        users[index] = updated
        self.store.save(users)
        logger.info("Updated user %s", user_id)
        return updated

    def delete_user(self, user_id: str) -> None:
        """Remove a user; later records keep their ids.

        Raises:
            UserNotFoundError: No user with this ID
        """
        users = self.store.load()
        index = _find_index(users, user_id)
        if index == -1:
            raise UserNotFoundError()
        del users[index]
        self.store.save(users)
        logger.info("Deleted user %s", user_id)
