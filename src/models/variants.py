"""Typed, read-only accessors for each metadata variant.

Every field getter reads the bag on each call and propagates accessor errors
unchanged; nothing is cached and no placeholder values are returned.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from src.models.bag import MetadataBag
from src.models.keys import KEY_SCHEMA, MediaKind, MetadataKey

__all__ = [
    "GenericMetadata",
    "MovieMetadata",
    "MusicTrackMetadata",
    "PhotoMetadata",
    "TvShowMetadata",
    "VariantMetadata",
]


@dataclass(frozen=True, slots=True)
class VariantMetadata:
    """Base class for variant accessors bound to a metadata bag."""

    kind: ClassVar[MediaKind]

    bag: MetadataBag

    # Bags compare by value over nested read-only mappings and are unhashable
    __hash__ = None  # type: ignore[assignment]

    @property
    def raw(self) -> Mapping[str, Any]:
        """The underlying bag mapping, including keys without accessors."""
        return self.bag.raw

    def likely_keys(self) -> tuple[MetadataKey, ...]:
        """Keys most likely present for this variant. Advisory only."""
        return KEY_SCHEMA[self.kind]


@dataclass(frozen=True, slots=True, eq=False)
class GenericMetadata(VariantMetadata):
    """Metadata for generic media."""

    kind: ClassVar[MediaKind] = MediaKind.GENERIC

    def release_date(self) -> str:
        return self.bag.get_string(MetadataKey.RELEASE_DATE)

    def title(self) -> str:
        return self.bag.get_string(MetadataKey.TITLE)

    def subtitle(self) -> str:
        return self.bag.get_string(MetadataKey.SUBTITLE)

    def artist(self) -> str:
        return self.bag.get_string(MetadataKey.ARTIST)

    def images(self) -> list[str]:
        return self.bag.get_string_array(MetadataKey.IMAGES)


@dataclass(frozen=True, slots=True, eq=False)
class MovieMetadata(VariantMetadata):
    """Metadata for a movie."""

    kind: ClassVar[MediaKind] = MediaKind.MOVIE

    def release_date(self) -> str:
        return self.bag.get_string(MetadataKey.RELEASE_DATE)

    def title(self) -> str:
        return self.bag.get_string(MetadataKey.TITLE)

    def subtitle(self) -> str:
        return self.bag.get_string(MetadataKey.SUBTITLE)

    def studio(self) -> str:
        return self.bag.get_string(MetadataKey.STUDIO)

    def images(self) -> list[str]:
        return self.bag.get_string_array(MetadataKey.IMAGES)


@dataclass(frozen=True, slots=True, eq=False)
class TvShowMetadata(VariantMetadata):
    """Metadata for a TV show episode."""

    kind: ClassVar[MediaKind] = MediaKind.TV_SHOW

    def release_date(self) -> str:
        return self.bag.get_string(MetadataKey.RELEASE_DATE)

    def broadcast_date(self) -> str:
        return self.bag.get_string(MetadataKey.BROADCAST_DATE)

    def title(self) -> str:
        return self.bag.get_string(MetadataKey.TITLE)

    def season_number(self) -> int:
        return self.bag.get_int(MetadataKey.SEASON_NUMBER)

    def episode_number(self) -> int:
        return self.bag.get_int(MetadataKey.EPISODE_NUMBER)

    def series_title(self) -> str:
        return self.bag.get_string(MetadataKey.SERIES_TITLE)

    def images(self) -> list[str]:
        return self.bag.get_string_array(MetadataKey.IMAGES)


@dataclass(frozen=True, slots=True, eq=False)
class MusicTrackMetadata(VariantMetadata):
    """Metadata for a music track."""

    kind: ClassVar[MediaKind] = MediaKind.MUSIC_TRACK

    def release_date(self) -> str:
        return self.bag.get_string(MetadataKey.RELEASE_DATE)

    def title(self) -> str:
        return self.bag.get_string(MetadataKey.TITLE)

    def artist(self) -> str:
        return self.bag.get_string(MetadataKey.ARTIST)

    def album_artist(self) -> str:
        return self.bag.get_string(MetadataKey.ALBUM_ARTIST)

    def album_title(self) -> str:
        return self.bag.get_string(MetadataKey.ALBUM_TITLE)

    def composer(self) -> str:
        return self.bag.get_string(MetadataKey.COMPOSER)

    def disc_number(self) -> int:
        return self.bag.get_int(MetadataKey.DISC_NUMBER)

    def track_number(self) -> int:
        return self.bag.get_int(MetadataKey.TRACK_NUMBER)

    def images(self) -> list[str]:
        return self.bag.get_string_array(MetadataKey.IMAGES)


@dataclass(frozen=True, slots=True, eq=False)
class PhotoMetadata(VariantMetadata):
    """Metadata for a photo."""

    kind: ClassVar[MediaKind] = MediaKind.PHOTO

    def creation_date(self) -> str:
        return self.bag.get_string(MetadataKey.CREATION_DATE)

    def title(self) -> str:
        return self.bag.get_string(MetadataKey.TITLE)

    def artist(self) -> str:
        return self.bag.get_string(MetadataKey.ARTIST)

    def width(self) -> int:
        return self.bag.get_int(MetadataKey.WIDTH)

    def height(self) -> int:
        return self.bag.get_int(MetadataKey.HEIGHT)

    def location_name(self) -> str:
        return self.bag.get_string(MetadataKey.LOCATION_NAME)

    def location_latitude(self) -> float:
        return self.bag.get_double(MetadataKey.LOCATION_LATITUDE)

    def location_longitude(self) -> float:
        return self.bag.get_double(MetadataKey.LOCATION_LONGITUDE)
