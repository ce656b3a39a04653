"""Configuration values together with the place they were defined."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class DefinitionKind(enum.Enum):
    """Where a configuration value came from."""

    PATH = "path"
    ENVIRONMENT = "environment"
    CLI = "cli"


@dataclass(frozen=True, eq=False)
class Definition:
    """Location where a config value is defined.

    Two definitions compare equal when they are of the same kind, wherever
    exactly they point to.
    """

    kind: DefinitionKind
    file: Optional[Path] = None
    key: Optional[str] = None

    @classmethod
    def path(cls, path: str | Path) -> Definition:
        """Defined in a config file at ``path``."""
        return cls(DefinitionKind.PATH, file=Path(path))

    @classmethod
    def environment(cls, key: str) -> Definition:
        """Defined in the environment variable ``key``."""
        return cls(DefinitionKind.ENVIRONMENT, key=key)

    @classmethod
    def cli(cls, path: str | Path | None = None) -> Definition:
        """Passed on the command line, optionally as a path to a config file."""
        return cls(DefinitionKind.CLI, file=None if path is None else Path(path))

    def _file_root(self) -> Optional[Path]:
        if self.kind is DefinitionKind.PATH or (
            self.kind is DefinitionKind.CLI and self.file is not None
        ):
            assert self.file is not None
            return self.file.parent.parent
        return None

    def root(self, current_dir: str | Path) -> Path:
        """Directory this definition is relative to.

        For a file it is the directory above ``.cargo/config``; for the
        command line and the environment it is ``current_dir``.
        """
        file_root = self._file_root()
        return file_root if file_root is not None else Path(current_dir)

    def root_opt(self, current_dir: str | Path | None) -> Optional[Path]:
        """Like :meth:`root`, but ``current_dir`` may be absent."""
        file_root = self._file_root()
        if file_root is not None:
            return file_root
        return None if current_dir is None else Path(current_dir)

    def __str__(self) -> str:
        if self.file is not None:
            return str(self.file)
        if self.kind is DefinitionKind.ENVIRONMENT:
            return f"environment variable `{self.key}`"
        return "--config cli option"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Definition):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass
class Value(Generic[T]):
    """A deserialized value and the location where it was defined."""

    val: T
    definition: Optional[Definition] = None

    def parse(self, converter: Callable[[T], U]) -> Value[U]:
        """Convert the inner value, keeping the definition.

        Errors raised by ``converter`` propagate unchanged.
        """
        return Value(converter(self.val), self.definition)

    def resolve_as_program_path(self, current_dir: str | Path) -> Path:
        """Resolve the value as a program path.

        Only values that contain a path separator are made relative to the
        definition's root; bare program names are left for a PATH lookup.
        """
        text = str(self.val)
        path = Path(text)
        if (
            self.definition is not None
            and not path.is_absolute()
            and ("/" in text or "\\" in text)
        ):
            return self.definition.root(current_dir) / text
        return path

    def resolve_as_path(self, current_dir: str | Path) -> Path:
        """Resolve the value as a path relative to the definition's root."""
        text = str(self.val)
        path = Path(text)
        if self.definition is not None and not path.is_absolute():
            return self.definition.root(current_dir) / text
        return path

    def set_path(self, path: str | Path) -> None:
        """Mark this value as defined in the config file at ``path``."""
        self.definition = Definition.path(path)


def set_path(obj: Any, path: str | Path) -> None:
    """Mark every value reachable from ``obj`` as defined in ``path``.

    Walks lists, tuples, dict values and dataclass fields; anything else
    that is not a :class:`Value` is left untouched.
    """
    if obj is None:
        return
    method = getattr(obj, "set_path", None)
    if callable(method):
        method(path)
    elif isinstance(obj, dict):
        for item in obj.values():
            set_path(item, path)
    elif isinstance(obj, (list, tuple)):
        for item in obj:
            set_path(item, path)
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        for field in dataclasses.fields(obj):
            set_path(getattr(obj, field.name), path)