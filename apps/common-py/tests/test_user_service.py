"""Tests for the user service handlers."""

import itertools

import pytest
from users_common.errors import UserDataNotFoundError, UserNotFoundError, UserStoreError
from users_common.models.user import User, UserPayload
from users_common.services.user_service import UserService, generate_user_id
from users_common.services.user_store import JsonFileUserStore, UserStore


def _payload(**overrides) -> UserPayload:
    return UserPayload.model_validate({"firstName": "Ana", "secondName": "Li", "age": 30, **overrides})


class FailingSaveStore(UserStore):
    """Store whose writes always fail."""

    def __init__(self, users: list[User]) -> None:
        self.users = users

    def exists(self) -> bool:
        return True

    def load(self) -> list[User]:
        return list(self.users)

    def save(self, users: list[User]) -> None:
        raise UserStoreError()


@pytest.fixture
def service(store: JsonFileUserStore) -> UserService:
    ticks = itertools.count(1_700_000_000_000)
    return UserService(store, clock=lambda: next(ticks))


@pytest.mark.unit
def test_generate_user_id_uses_clock_milliseconds() -> None:
    assert generate_user_id([], clock=lambda: 1_718_035_200_123) == "1718035200123"


@pytest.mark.unit
def test_generate_user_id_skips_taken_values() -> None:
    taken = ["1000", "1001", "1003"]

    assert generate_user_id(taken, clock=lambda: 1000) == "1002"


@pytest.mark.unit
def test_generate_user_id_default_clock_is_current_time() -> None:
    user_id = generate_user_id([])

    assert user_id.isdigit() and len(user_id) >= 13


@pytest.mark.unit
def test_same_millisecond_creates_get_distinct_ids(store: JsonFileUserStore) -> None:
    service = UserService(store, clock=lambda: 42)

    ids = [service.create_user(_payload()).id for _ in range(3)]

    assert ids == ["42", "43", "44"]


@pytest.mark.unit
def test_create_appends_and_persists(service: UserService, store: JsonFileUserStore) -> None:
    first = service.create_user(_payload())
    second = service.create_user(_payload(firstName="Bo", city="Porto"))

    assert first.id == "1700000000000"
    assert second.city == "Porto"
    assert store.load() == [first, second]


@pytest.mark.unit
def test_get_user_before_anything_is_stored(service: UserService, store: JsonFileUserStore) -> None:
    with pytest.raises(UserDataNotFoundError) as exc_info:
        service.get_user("1")

    assert exc_info.value.message == "Users data not found"
    assert not store.exists()


@pytest.mark.unit
def test_get_unknown_user(service: UserService) -> None:
    service.create_user(_payload())

    with pytest.raises(UserNotFoundError):
        service.get_user("missing")


@pytest.mark.unit
def test_update_merges_truthy_values(service: UserService) -> None:
    created = service.create_user(_payload(city="Porto"))

    updated = service.update_user(created.id, _payload(firstName="Maria", age=0))

    assert updated.id == created.id
    assert updated.first_name == "Maria"
    assert updated.second_name == "Li"
    assert updated.age == 30
    assert updated.city == "Porto"
    assert service.get_user(created.id) == updated


@pytest.mark.unit
def test_update_sets_city_when_supplied(service: UserService) -> None:
    created = service.create_user(_payload())

    updated = service.update_user(created.id, _payload(city="Lisbon", age=45))

    assert (updated.city, updated.age) == ("Lisbon", 45)


@pytest.mark.unit
def test_update_unknown_user_does_not_write(service: UserService, store: JsonFileUserStore) -> None:
    with pytest.raises(UserNotFoundError):
        service.update_user("missing", _payload())

    assert not store.exists()


@pytest.mark.unit
def test_delete_unknown_user_does_not_write(service: UserService, store: JsonFileUserStore) -> None:
    with pytest.raises(UserNotFoundError):
        service.delete_user("missing")

    assert not store.exists()


@pytest.mark.unit
def test_delete_shifts_later_records_but_keeps_ids(service: UserService, store: JsonFileUserStore) -> None:
    first, middle, last = (service.create_user(_payload(firstName=name)) for name in ("A", "B", "C"))

    service.delete_user(middle.id)

    assert store.load() == [first, last]
    assert service.get_user(last.id) == last


@pytest.mark.unit
def test_save_failure_propagates() -> None:
    existing = User(id="1", first_name="Ana", second_name="Li", age=30)
    service = UserService(FailingSaveStore([existing]))

    with pytest.raises(UserStoreError):
        service.create_user(_payload())
    with pytest.raises(UserStoreError):
        service.update_user("1", _payload())
    with pytest.raises(UserStoreError):
        service.delete_user("1")
