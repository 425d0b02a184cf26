"""Metadata kinds, well-known metadata keys and the per-kind key schema.

Key names follow the Cast `MediaMetadata` reference:
https://developers.google.com/android/reference/com/google/android/gms/cast/MediaMetadata
"""

from __future__ import annotations

from enum import IntEnum, StrEnum
from types import MappingProxyType

__all__ = [
    "DISCRIMINATOR_KEY",
    "KEY_SCHEMA",
    "MediaKind",
    "MetadataKey",
]


class MediaKind(IntEnum):
    """Metadata variant stored as an integer under the `metadataType` key.

    The integer values are part of the wire contract.
    """

    GENERIC = 0
    MOVIE = 1
    TV_SHOW = 2
    MUSIC_TRACK = 3
    PHOTO = 4

    @classmethod
    def from_discriminator(cls, value: int) -> MediaKind | None:
        """Look up the kind for a discriminator value.

        Args:
            value (int): Integer stored under `metadataType`

        Returns:
            MediaKind | None: The matching kind, or None for unknown values
        """
        return _KIND_BY_DISCRIMINATOR.get(value)

    def __repr__(self) -> str:
        """Return the kind name, e.g. 'MOVIE'."""
        return f"'{self.name}'"


# Explicit table so the wire values never depend on declaration order
_KIND_BY_DISCRIMINATOR: dict[int, MediaKind] = {
    0: MediaKind.GENERIC,
    1: MediaKind.MOVIE,
    2: MediaKind.TV_SHOW,
    3: MediaKind.MUSIC_TRACK,
    4: MediaKind.PHOTO,
}


class MetadataKey(StrEnum):
    """Well-known keys of a receiver metadata bag."""

    METADATA_TYPE = "metadataType"

    ALBUM_ARTIST = "albumArtist"
    ALBUM_NAME = "albumName"
    ALBUM_TITLE = "albumTitle"
    ARTIST = "artist"
    BROADCAST_DATE = "broadcastDate"
    COMPOSER = "composer"
    CREATION_DATE = "creationDate"
    DISC_NUMBER = "discNumber"
    EPISODE_NUMBER = "episodeNumber"
    HEIGHT = "height"
    IMAGES = "images"
    LOCATION_NAME = "locationName"
    LOCATION_LATITUDE = "locationLatitude"
    LOCATION_LONGITUDE = "locationLongitude"
    RELEASE_DATE = "releaseDate"
    SEASON_NUMBER = "seasonNumber"
    SERIES_TITLE = "seriesTitle"
    STUDIO = "studio"
    SUBTITLE = "subtitle"
    TITLE = "title"
    TRACK_NUMBER = "trackNumber"
    WIDTH = "width"


DISCRIMINATOR_KEY = MetadataKey.METADATA_TYPE

# Keys most likely present for each kind. Advisory only: a listed key may be
# missing from a given bag, and bags may hold keys not listed here.
KEY_SCHEMA: MappingProxyType[MediaKind, tuple[MetadataKey, ...]] = MappingProxyType(
    {
        MediaKind.GENERIC: (
            MetadataKey.RELEASE_DATE,
            MetadataKey.TITLE,
            MetadataKey.SUBTITLE,
            MetadataKey.ARTIST,
            MetadataKey.IMAGES,
        ),
        MediaKind.MOVIE: (
            MetadataKey.RELEASE_DATE,
            MetadataKey.TITLE,
            MetadataKey.SUBTITLE,
            MetadataKey.STUDIO,
            MetadataKey.IMAGES,
        ),
        MediaKind.TV_SHOW: (
            MetadataKey.RELEASE_DATE,
            MetadataKey.BROADCAST_DATE,
            MetadataKey.TITLE,
            MetadataKey.SEASON_NUMBER,
            MetadataKey.EPISODE_NUMBER,
            MetadataKey.SERIES_TITLE,
            MetadataKey.IMAGES,
        ),
        MediaKind.MUSIC_TRACK: (
            MetadataKey.RELEASE_DATE,
            MetadataKey.TITLE,
            MetadataKey.ARTIST,
            MetadataKey.ALBUM_ARTIST,
            MetadataKey.ALBUM_TITLE,
            MetadataKey.ALBUM_NAME,
            MetadataKey.COMPOSER,
            MetadataKey.DISC_NUMBER,
            MetadataKey.TRACK_NUMBER,
            MetadataKey.IMAGES,
        ),
        MediaKind.PHOTO: (
            MetadataKey.CREATION_DATE,
            MetadataKey.TITLE,
            MetadataKey.ARTIST,
            MetadataKey.WIDTH,
            MetadataKey.HEIGHT,
            MetadataKey.LOCATION_NAME,
            MetadataKey.LOCATION_LATITUDE,
            MetadataKey.LOCATION_LONGITUDE,
        ),
    }
)
