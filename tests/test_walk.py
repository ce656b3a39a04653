from pathlib import Path

from cargoconf.walk import (
    Walk,
    cargo_home_with_cwd,
    config_path,
    home_dir,
    rustup_home_with_cwd,
)


def test_walk(tmp_path):
    p = tmp_path
    home = p / "a" / ".cargo"
    cwd = p / "a" / "b" / "c"
    home.mkdir(parents=True)
    (p / "a/.cargo/config").write_text("")
    (p / "a/b/.cargo").mkdir(parents=True)
    (p / "a/b/.cargo/config").write_text("")
    (p / "a/b/.cargo/config.toml").write_text("")
    (p / "a/b/c/.cargo").mkdir(parents=True)
    (p / "a/b/c/.cargo/config.toml").write_text("")
    w = Walk(cwd, home)
    assert next(w, None) == p / "a/b/c/.cargo/config.toml"
    assert next(w, None) == p / "a/b/.cargo/config"
    assert next(w, None) == p / "a/.cargo/config"
    assert next(w, None) is None
    assert next(w, None) is None


def test_walk_cargo_home_outside_ancestors(tmp_path):
    (tmp_path / "proj/.cargo").mkdir(parents=True)
    (tmp_path / "proj/.cargo/config.toml").write_text("")
    home = tmp_path / "home/.cargo"
    home.mkdir(parents=True)
    (home / "config.toml").write_text("")
    found = list(Walk(tmp_path / "proj", home))
    assert found == [tmp_path / "proj/.cargo/config.toml", home / "config.toml"]


def test_walk_without_cargo_home(tmp_path):
    (tmp_path / "proj/.cargo").mkdir(parents=True)
    (tmp_path / "proj/.cargo/config").write_text("")
    assert list(Walk(tmp_path / "proj", None)) == [tmp_path / "proj/.cargo/config"]


def test_walk_cargo_home_without_config(tmp_path):
    home = tmp_path / "home/.cargo"
    home.mkdir(parents=True)
    (tmp_path / "proj").mkdir()
    assert list(Walk(tmp_path / "proj", home)) == []


def test_config_path_prefers_config(tmp_path):
    (tmp_path / "config.toml").write_text("")
    assert config_path(tmp_path) == tmp_path / "config.toml"
    (tmp_path / "config").write_text("")
    assert config_path(tmp_path) == tmp_path / "config"
    assert config_path(tmp_path / "missing") is None


def test_cargo_home_absolute(monkeypatch, tmp_path):
    monkeypatch.setenv("CARGO_HOME", str(tmp_path / "ch"))
    assert cargo_home_with_cwd(tmp_path / "cwd") == tmp_path / "ch"


def test_cargo_home_relative(monkeypatch, tmp_path):
    monkeypatch.setenv("CARGO_HOME", "rel")
    assert cargo_home_with_cwd(tmp_path) == tmp_path / "rel"


def test_cargo_home_empty_falls_back(monkeypatch, tmp_path):
    monkeypatch.setenv("CARGO_HOME", "")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert home_dir() == tmp_path
    assert cargo_home_with_cwd(tmp_path / "cwd") == tmp_path / ".cargo"


def test_rustup_home(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_HOME", "r")
    assert rustup_home_with_cwd(tmp_path) == tmp_path / "r"
    monkeypatch.delenv("RUSTUP_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert rustup_home_with_cwd(Path("/unused")) == tmp_path / ".rustup"


def test_with_default_home(monkeypatch, tmp_path):
    home = tmp_path / "ch"
    home.mkdir()
    (home / "config.toml").write_text("")
    (tmp_path / "proj").mkdir()
    monkeypatch.setenv("CARGO_HOME", str(home))
    assert list(Walk.with_default_home(tmp_path / "proj")) == [home / "config.toml"]