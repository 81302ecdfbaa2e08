"""Exceptions raised by the user registry services."""


class UserRegistryError(Exception):
    """Base error carrying the HTTP status and client-facing message."""

    status_code: int = 500
    message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UserNotFoundError(UserRegistryError):
    """No record with the requested id."""

    status_code = 404
    message = "User not found"


class UserDataNotFoundError(UserRegistryError):
    """The backing file has never been created."""

    status_code = 404
    message = "Users data not found"


class UserStoreError(UserRegistryError):
    """Reading, parsing or writing the backing file failed."""

    status_code = 500
    message = "Server error"
