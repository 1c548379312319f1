"""Metadata models and provider clients for rname.

The TMDb clients live in ``rname.metadata.clients`` and are imported from
there explicitly.
"""

from rname.metadata.base import MetadataClient
from rname.metadata.models import MediaMetadata, MediaMetadataType

__all__ = ["MediaMetadata", "MediaMetadataType", "MetadataClient"]
