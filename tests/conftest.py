"""Shared fixtures for the rname test suite."""

import logging
from pathlib import Path
from typing import Iterator

import pytest

from rname.metadata.models import MediaMetadata, MediaMetadataType


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Iterator[Path]:
    """Point the config at a throwaway directory and clear rname env vars.

    Yields:
        The XDG config home used for the test.
    """
    config_home = tmp_path_factory.mktemp("xdg")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    # setenv first so that teardown restores the original state.
    for name in ("RNAME_TMDB_API_KEY", "RNAME_NO_RICH", "RNAME_DEBUG"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield config_home
    logging.getLogger("rname").handlers.clear()


@pytest.fixture
def movie_metadata() -> MediaMetadata:
    """Metadata for The Thing (1982)."""
    return MediaMetadata(
        provider_id="1091",
        title="The Thing",
        year="1982",
        overview="Antarctic researchers meet an alien.",
        media_type=MediaMetadataType.MOVIE,
    )


@pytest.fixture
def show_metadata() -> MediaMetadata:
    """Metadata for Stargate SG-1."""
    return MediaMetadata(
        provider_id="4629",
        title="Stargate SG-1",
        year="1997",
        media_type=MediaMetadataType.TV_SHOW,
    )
