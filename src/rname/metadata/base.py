"""Base abstraction for metadata provider clients.

Defines the interface the commands use to resolve a movie or show. Clients
receive their configuration explicitly and are used for dependency injection
in tests.
"""

from abc import ABC, abstractmethod

from rname.metadata.models import MediaMetadata


class MetadataClient(ABC):
    """Abstract base class for metadata provider clients."""

    @abstractmethod
    async def search(self, query: str) -> list[MediaMetadata]:
        """Search for media items matching a free-text query.

        Args:
            query: The text to search for.

        Returns:
            Zero or more MediaMetadata candidates, in provider order.

        Raises:
            EmptyQueryError: If the query is empty.
        """
        raise NotImplementedError

    @abstractmethod
    async def details(self, provider_id: str) -> MediaMetadata:
        """Fetch metadata for an explicit provider-specific ID.

        Args:
            provider_id: The unique ID in the provider's system.

        Returns:
            The MediaMetadata for that ID.
        """
        raise NotImplementedError
