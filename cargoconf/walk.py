"""Discovery of Cargo configuration files.

Files are probed in the current directory and every parent directory,
and finally in ``$CARGO_HOME``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Optional


def config_path(path: str | Path) -> Optional[Path]:
    """Return the config file inside the ``.cargo`` directory ``path``.

    ``config`` is preferred over ``config.toml`` when both exist.
    """
    base = Path(path)
    for name in ("config", "config.toml"):
        candidate = base / name
        if candidate.exists():
            return candidate
    return None


def home_dir() -> Optional[Path]:
    """Return the user's home directory, or None if it cannot be found."""
    if os.name == "nt":
        profile = os.environ.get("USERPROFILE")
        if profile:
            return Path(profile)
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def _home_from_env(var: str, cwd: Path, default_name: str) -> Optional[Path]:
    value = os.environ.get(var)
    if value:
        home = Path(value)
        return home if home.is_absolute() else Path(cwd) / home
    home = home_dir()
    return None if home is None else home / default_name


def cargo_home_with_cwd(cwd: str | Path) -> Optional[Path]:
    """Return ``$CARGO_HOME`` resolved against ``cwd``, or ``~/.cargo``."""
    return _home_from_env("CARGO_HOME", Path(cwd), ".cargo")


def rustup_home_with_cwd(cwd: str | Path) -> Optional[Path]:
    """Return ``$RUSTUP_HOME`` resolved against ``cwd``, or ``~/.rustup``."""
    return _home_from_env("RUSTUP_HOME", Path(cwd), ".rustup")


class Walk:
    """An iterator over Cargo configuration file paths.

    Yields the config files of ``current_dir`` and its ancestors, nearest
    first, followed by the one in ``cargo_home`` unless that directory was
    already visited as an ancestor.
    """

    def __init__(self, current_dir: str | Path, cargo_home: str | Path | None) -> None:
        start = Path(current_dir)
        self._ancestors: Iterator[Path] = iter([start, *start.parents])
        self._cargo_home: Optional[Path] = None if cargo_home is None else Path(cargo_home)

    @classmethod
    def with_default_home(cls, current_dir: str | Path) -> Walk:
        """Walk from ``current_dir`` using the default ``CARGO_HOME``."""
        return cls(current_dir, cargo_home_with_cwd(current_dir))

    def __iter__(self) -> Walk:
        return self

    def __next__(self) -> Path:
        for ancestor in self._ancestors:
            dot_cargo = ancestor / ".cargo"
            if self._cargo_home is not None and self._cargo_home == dot_cargo:
                self._cargo_home = None
            found = config_path(dot_cargo)
            if found is not None:
                return found
        home, self._cargo_home = self._cargo_home, None
        if home is None:
            raise StopIteration
        found = config_path(home)
        if found is None:
            raise StopIteration
        return found