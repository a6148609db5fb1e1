"""
Publisher - File-based store for user-created model objects.

Each value is encoded as JSON and saved to its own file inside one directory.
The file is named by a digest of the value's content, so a value is both
stored and found again by what it contains.
"""

from pathlib import Path
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ..errors import (
    DecodeError,
    DuplicateKeyError,
    EncodeError,
    MissingEntryError,
    NotFoundError,
    StoreIOError,
)
from .digest import content_digest, validate_key

Model = TypeVar("Model")

DigestFunc = Callable[[Any], Union[str, int]]


class Publisher(Generic[Model]):
    """
    Saves, loads and deletes `Model` values in a directory.

    `Model` is anything pydantic can validate: a BaseModel, a dataclass,
    a TypedDict, or plain JSON values (`typing.Any`).

    Usage:
        class Note(BaseModel):
            title: str

        publisher = Publisher(user_library_directory("notes"), Note)

        notes = publisher.enumerate()
        publisher.put(Note(title="groceries"))
        publisher.delete(Note(title="groceries"))

    Values with equal digests are the same value to the store: publishing
    a second one fails with DuplicateKeyError. Changing a value means
    deleting the old one and publishing the new one.

    The store does no locking. Callers sharing a directory between threads
    must serialize calls themselves.
    """

    def __init__(
        self,
        directory: Union[str, Path],
        model_type: Type[Model],
        digest: Optional[DigestFunc] = None,
    ):
        """
        Initialize Publisher. Performs no I/O.

        Args:
            directory: Directory where values are stored. Created on first put.
            model_type: Type used to encode and decode stored values.
            digest: Optional function mapping a value to its storage key.
                Defaults to the SHA-256 of the value's canonical JSON.
        """
        self.directory = Path(directory).expanduser().absolute()
        self.model_type = model_type
        self._adapter = TypeAdapter(model_type)
        self._digest = digest

    def __repr__(self):
        return f"Publisher(directory={str(self.directory)!r}, model_type={self.model_type!r})"

    def _type_name(self) -> str:
        return getattr(self.model_type, "__name__", repr(self.model_type))

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    def key(self, value: Model) -> str:
        """Return the storage key (file name) for a value."""
        if self._digest is not None:
            return validate_key(str(self._digest(value)))
        try:
            return validate_key(content_digest(self._adapter, value))
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodeError(f"Could not digest {type(value).__name__}: {e}") from e

    def path_for(self, value: Model) -> Path:
        """Return the path a value is (or would be) stored at."""
        return self.directory / self.key(value)

    def exists(self, value: Model) -> bool:
        """Check if a value is currently published."""
        return self.path_for(value).is_file()

    # ------------------------------------------------------------------
    # I/O
    # ------------------------------------------------------------------

    def enumerate(self) -> List[Model]:
        """
        Load every value stored in the directory.

        Returns:
            Stored values in file-system order, [] if the directory is empty.

        Raises:
            NotFoundError: the directory does not exist.
            MissingEntryError: an entry vanished between listing and reading.
            DecodeError: an entry could not be decoded; no values are returned.
            StoreIOError: any other file-system failure.
        """
        if not self.directory.exists():
            raise NotFoundError(self.directory)

        try:
            entries = list(self.directory.iterdir())
        except FileNotFoundError as e:
            raise NotFoundError(self.directory) from e
        except OSError as e:
            raise StoreIOError(e, self.directory) from e

        values = []
        for path in entries:
            try:
                data = path.read_bytes()
            except FileNotFoundError as e:
                raise MissingEntryError(path) from e
            except OSError as e:
                raise StoreIOError(e, path) from e

            try:
                values.append(self._adapter.validate_json(data))
            except ValueError as e:
                raise DecodeError(path) from e

        return values

    def put(self, value: Model) -> None:
        """
        Encode a value and save it as a new file named by its digest.

        The directory (and any missing parents) is created if needed.
        The bytes go to a temporary file first and are renamed into place,
        so a failed put never leaves a partial file behind.

        Raises:
            EncodeError: the value is not a model_type or could not be serialized.
            DuplicateKeyError: a value with the same digest is already stored.
            StoreIOError: any other file-system failure.
        """
        # Stored bytes must decode back as model_type
        try:
            self._adapter.validate_python(value, strict=True)
        except ValidationError as e:
            raise EncodeError(
                f"{type(value).__name__} is not a valid {self._type_name()}: {e}"
            ) from e

        try:
            data = self._adapter.dump_json(value)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodeError(f"Could not encode {type(value).__name__}: {e}") from e

        key = self.key(value)

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreIOError(e, self.directory) from e

        path = self.directory / key
        if path.exists():
            raise DuplicateKeyError(key)

        tmp = self.directory / f".{key}.tmp"
        try:
            with open(tmp, "wb") as f:
                f.write(data)
            tmp.replace(path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise StoreIOError(e, path) from e

    def delete(self, value: Model) -> None:
        """
        Delete the stored file whose key matches the value's digest.

        Raises:
            NotFoundError: no stored file has that key.
            StoreIOError: any other file-system failure.
        """
        path = self.path_for(value)
        if not path.exists():
            raise NotFoundError(path)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise NotFoundError(path) from e
        except OSError as e:
            raise StoreIOError(e, path) from e

    # Aliases
    load_published_data = enumerate
    publish = put
