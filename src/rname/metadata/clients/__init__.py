"""Metadata provider clients."""

from rname.metadata.clients.tmdb import TMDBClient, TMDBMovieClient, TMDBShowClient

__all__ = ["TMDBClient", "TMDBMovieClient", "TMDBShowClient"]
