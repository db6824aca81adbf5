import json
import os
from functools import lru_cache
from typing import Annotated, Any, List, Union
from pydantic import Field, TypeAdapter
from pydantic_core import PydanticSerializationError
from ..models.models import user_record
from ..helper.errors import StorageError
from ..helper.utils import setup_logging
from .settings import USERS_FILE_PATH

logger = setup_logging() # initialize logger

# entries that are not user records are carried through untouched so a save never drops them
stored_entry = Annotated[Union[user_record, Any], Field(union_mode="left_to_right")]
users_adapter = TypeAdapter(List[stored_entry])


class UserStore:
    """
    Flat-file store holding every user record as one JSON array.

    Each call to load or save touches the whole file. Failures are logged and
    swallowed: load falls back to an empty list, save returns as if it succeeded.
    There is no locking, so two processes doing load -> modify -> save can lose updates.
    """

    def __init__(self, path: str):
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> List[user_record]:
        try:
            if not os.path.exists(self._path):
                # first read creates the file with an empty list
                self._write("[]")
                return []
            return self._read()
        except StorageError as e:
            logger.error(f"Error reading user data: {e}")
            return []

    def save(self, users: List[user_record]) -> None:
        try:
            self._write(self._serialize(users))
        except StorageError as e:
            logger.error(f"Error writing user data: {e}")

    def _read(self) -> List[user_record]:
        try:
            with open(self._path, "rb") as file:
                raw_data = file.read()
        except OSError as e:
            raise StorageError(f"cannot read {self._path}: {e}") from e

        if not raw_data.strip():
            logger.warning(f"User store {self._path} is empty")
            return []
        try:
            document = json.loads(raw_data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageError(f"unparseable content in {self._path}: {e}") from e
        if not isinstance(document, list):
            raise StorageError(f"{self._path} does not hold a JSON array")

        users = users_adapter.validate_python(document)
        skipped = sum(1 for user in users if not isinstance(user, user_record))
        if skipped:
            logger.warning(f"User store {self._path} has {skipped} entries that are not user records")
        return users

    def _serialize(self, users: List[user_record]) -> str:
        try:
            return users_adapter.dump_json(users, indent=2, exclude_none=True).decode("utf-8")
        except PydanticSerializationError as e:
            raise StorageError(f"cannot serialize user data: {e}") from e

    def _write(self, content: str) -> None:
        try:
            directory = os.path.dirname(self._path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as file:
                file.write(content)
        except (OSError, UnicodeEncodeError) as e:
            raise StorageError(f"cannot write {self._path}: {e}") from e


@lru_cache
def get_user_store() -> UserStore:
    return UserStore(USERS_FILE_PATH)
