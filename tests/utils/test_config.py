"""Tests for rname.utils.config.

Covers config file location, saving, and setting precedence
(CLI > env > config file > default).
"""

from pathlib import Path

import pytest
import tomli

from rname.utils.config import (
    MissingAPIKeyError,
    RnameConfig,
    get_config_file,
    load_config,
    resolve_setting,
    save_config,
)


def test_config_file_respects_xdg(isolated_environment: Path) -> None:
    """The config file lives under $XDG_CONFIG_HOME/rname."""
    assert get_config_file() == isolated_environment / "rname" / "config.toml"


def test_load_config_without_sources() -> None:
    """No file, no env var and no CLI value leaves the key unset."""
    config = load_config()
    assert config.api_key is None
    with pytest.raises(MissingAPIKeyError, match="rname config"):
        config.require_api_key()


def test_save_and_load_roundtrip() -> None:
    """A saved key is written under [tmdb] and read back."""
    path = save_config(RnameConfig(api_key="abc123"))
    assert path == get_config_file()
    with path.open("rb") as f:
        assert tomli.load(f) == {"tmdb": {"api_key": "abc123"}}
    assert load_config().api_key == "abc123"


def test_save_config_keeps_other_keys() -> None:
    """Unrelated settings in the file are preserved."""
    config_file = get_config_file()
    config_file.parent.mkdir(parents=True)
    config_file.write_text('[other]\nvalue = 1\n\n[tmdb]\napi_key = "old"\n')
    save_config(RnameConfig(api_key="new"))
    with config_file.open("rb") as f:
        data = tomli.load(f)
    assert data == {"other": {"value": 1}, "tmdb": {"api_key": "new"}}


def test_env_overrides_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """RNAME_TMDB_API_KEY wins over the config file."""
    save_config(RnameConfig(api_key="from-file"))
    monkeypatch.setenv("RNAME_TMDB_API_KEY", "from-env")
    assert load_config().api_key == "from-env"


def test_cli_value_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """An explicit value wins over everything else."""
    monkeypatch.setenv("RNAME_TMDB_API_KEY", "from-env")
    assert load_config(api_key="from-cli").api_key == "from-cli"


def test_non_string_file_value_is_read_as_text() -> None:
    """A bare TOML integer api_key still loads as a string."""
    config_file = get_config_file()
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[tmdb]\napi_key = 12345\n")
    assert load_config().api_key == "12345"


def test_resolve_setting_falls_back_to_default() -> None:
    """A key found nowhere resolves to the default."""
    assert resolve_setting("tmdb.api_key") is None
    assert resolve_setting("tmdb.api_key", default="fallback") == "fallback"
