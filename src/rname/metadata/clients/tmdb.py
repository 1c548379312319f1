"""TMDb metadata provider clients.

Implements the MetadataClient interface for movies and TV shows against The
Movie Database v3 API, plus the season lookup used for episode titles.
"""

import logging
from typing import Any, Optional

import httpx

from rname.metadata.base import MetadataClient
from rname.metadata.models import MediaMetadata, MediaMetadataType, extract_year
from rname.metadata.utils import require_query, split_year_hint
from rname.utils.config import RnameConfig

logger = logging.getLogger(__name__)

TMDB_API_URL = "https://api.themoviedb.org/3"
TMDB_WEB_URL = "https://www.themoviedb.org"
DEFAULT_LANGUAGE = "en-US"
DEFAULT_TIMEOUT = 10.0


class TMDBClient(MetadataClient):
    """Shared HTTP plumbing for the TMDb clients.

    An ``httpx.AsyncClient`` may be injected; otherwise a short-lived client is
    opened per request.
    """

    media_type: MediaMetadataType
    web_path: str
    title_key: str
    date_key: str

    def __init__(
        self, config: RnameConfig, client: Optional[httpx.AsyncClient] = None
    ) -> None:
        """Initialize the client with an explicit configuration.

        Raises:
            MissingAPIKeyError: If *config* has no API key.
        """
        self.api_key = config.require_api_key()
        self._client = client

    def web_url(self, provider_id: str) -> str:
        """Return the themoviedb.org page of *provider_id*."""
        return f"{TMDB_WEB_URL}/{self.web_path}/{provider_id}"

    async def _get(self, path: str, **params: Any) -> dict[str, Any]:
        query = {"api_key": self.api_key, "language": DEFAULT_LANGUAGE, **params}
        url = f"{TMDB_API_URL}{path}"
        logger.debug("TMDb GET %s %s", path, params)
        if self._client is not None:
            resp = await self._client.get(url, params=query)
        else:
            async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as client:
                resp = await client.get(url, params=query)
        resp.raise_for_status()
        return resp.json()  # type: ignore[no-any-return]

    async def _search(self, path: str, query: str, **params: Any) -> list[Any]:
        data = await self._get(path, include_adult=True, page=1, query=query, **params)
        return list(data.get("results", []))

    def _to_metadata(self, item: dict[str, Any]) -> MediaMetadata:
        """Normalize a TMDb search result or details payload."""
        return MediaMetadata(
            provider_id=item["id"],
            title=item[self.title_key],
            year=extract_year(item.get(self.date_key)),
            overview=item.get("overview"),
            media_type=self.media_type,
        )


class TMDBMovieClient(TMDBClient):
    """Client for TMDb movie search and details."""

    media_type = MediaMetadataType.MOVIE
    web_path = "movie"
    title_key = "title"
    date_key = "release_date"

    async def search(self, query: str) -> list[MediaMetadata]:
        """Search movies; a ``y:YYYY`` hint in *query* filters by year."""
        text, year = split_year_hint(query)
        params = {"year": year} if year else {}
        results = await self._search("/search/movie", text, **params)
        return [self._to_metadata(item) for item in results]

    async def details(self, provider_id: str) -> MediaMetadata:
        """Fetch a movie by TMDb id."""
        data = await self._get(f"/movie/{provider_id}")
        return self._to_metadata(data)


class TMDBShowClient(TMDBClient):
    """Client for TMDb TV show search, details and season episode titles."""

    media_type = MediaMetadataType.TV_SHOW
    web_path = "tv"
    title_key = "name"
    date_key = "first_air_date"

    async def search(self, query: str) -> list[MediaMetadata]:
        """Search TV shows by name."""
        results = await self._search("/search/tv", require_query(query))
        return [self._to_metadata(item) for item in results]

    async def details(self, provider_id: str) -> MediaMetadata:
        """Fetch a TV show by TMDb id."""
        data = await self._get(f"/tv/{provider_id}")
        return self._to_metadata(data)

    async def episode_titles(self, provider_id: str, season: int) -> dict[int, str]:
        """Return episode number to episode title for one season.

        The first title listed for an episode number wins.
        """
        data = await self._get(f"/tv/{provider_id}/season/{season}")
        titles: dict[int, str] = {}
        for episode in data.get("episodes", []):
            number = int(episode["episode_number"])
            titles.setdefault(number, episode.get("name") or "")
        return titles
