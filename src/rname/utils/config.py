"""Config utility for persistent rname settings (TMDb API key).

Reads and writes ~/.config/rname/config.toml (respecting XDG_CONFIG_HOME) with
tomli/tomli-w. The resolved configuration is loaded once per command and
passed explicitly to the metadata clients.
"""

import os
from pathlib import Path
from typing import Any, Optional

import tomli
import tomli_w
from pydantic import BaseModel

from rname.core.errors import RnameError

ENV_PREFIX = "RNAME_"
API_KEY_SETTING = "tmdb.api_key"


def get_config_dir() -> Path:
    """Return the rname config directory (``$XDG_CONFIG_HOME/rname``)."""
    xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return xdg_config_home / "rname"


def get_config_file() -> Path:
    """Return the path of the TOML config file."""
    return get_config_dir() / "config.toml"


class MissingAPIKeyError(RnameError):
    """Raised when no TMDb API key is configured."""

    def __init__(self) -> None:
        """Initialize the error with setup instructions."""
        super().__init__(
            "Missing TMDb API key. Run `rname config` or set "
            f"{_make_env_var_name(API_KEY_SETTING)}."
        )


class RnameConfig(BaseModel):
    """Resolved rname configuration."""

    api_key: Optional[str] = None
    """TMDb API key (v3 auth)."""

    def require_api_key(self) -> str:
        """Return the API key or raise MissingAPIKeyError."""
        if not self.api_key:
            raise MissingAPIKeyError()
        return self.api_key


def load_config(api_key: Optional[str] = None) -> RnameConfig:
    """Load the configuration, resolving every setting by precedence.

    Args:
        api_key: Explicit value (e.g. from a CLI option), wins when given.
    """
    return RnameConfig(
        api_key=resolve_setting(API_KEY_SETTING, default=None, cli_value=api_key)
    )


def save_config(config: RnameConfig) -> Path:
    """Persist *config* to the config file, keeping unrelated keys.

    Returns:
        The path written to.
    """
    config_file = get_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    data = _read_config_file()
    data.setdefault("tmdb", {})
    if config.api_key is not None:
        data["tmdb"]["api_key"] = config.api_key
    with config_file.open("wb") as f:
        tomli_w.dump(data, f)
    return config_file


# ---------------------------------------------------------------------------
# Generic configuration resolution
# ---------------------------------------------------------------------------


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""
    config_file = get_config_file()
    if not config_file.exists():
        return {}
    with config_file.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="tmdb.api_key" will attempt ``data["tmdb"]["api_key"]``
    returning None if any level is missing.
    """
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "tmdb.api_key" -> "RNAME_TMDB_API_KEY".
    """
    return prefix + dotted_key.replace(".", "_").upper()


def resolve_setting(
    key: str,
    *,
    default: Optional[str] = None,
    cli_value: Optional[str] = None,
) -> Optional[str]:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"tmdb.api_key"``.
        default: Value to fall back to when no overrides found.
        cli_value: Value passed from a CLI option (``None`` when not provided).

    Returns:
        The resolved value. Non-string TOML values are returned as text.
    """
    if cli_value is not None:
        return cli_value

    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return os.environ[env_var]

    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return str(file_val)

    return default
