"""Models Initialization Module."""

from src.models.bag import MetadataBag
from src.models.keys import DISCRIMINATOR_KEY, KEY_SCHEMA, MediaKind, MetadataKey
from src.models.media import CastBaseModel, Media, StreamType, Track, TrackType
from src.models.variants import (
    GenericMetadata,
    MovieMetadata,
    MusicTrackMetadata,
    PhotoMetadata,
    TvShowMetadata,
    VariantMetadata,
)
from src.models.view import MetadataView

__all__ = [
    "CastBaseModel",
    "DISCRIMINATOR_KEY",
    "GenericMetadata",
    "KEY_SCHEMA",
    "Media",
    "MediaKind",
    "MetadataBag",
    "MetadataKey",
    "MetadataView",
    "MovieMetadata",
    "MusicTrackMetadata",
    "PhotoMetadata",
    "StreamType",
    "Track",
    "TrackType",
    "TvShowMetadata",
    "VariantMetadata",
]
