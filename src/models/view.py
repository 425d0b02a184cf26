"""Discriminator resolution and dispatch to variant accessors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src import log
from src.exceptions import (
    InvalidDiscriminatorError,
    MissingDiscriminatorError,
    UnknownVariantError,
)
from src.models.bag import MetadataBag
from src.models.keys import DISCRIMINATOR_KEY, KEY_SCHEMA, MediaKind, MetadataKey
from src.models.variants import (
    GenericMetadata,
    MovieMetadata,
    MusicTrackMetadata,
    PhotoMetadata,
    TvShowMetadata,
    VariantMetadata,
)

__all__ = ["ACCESSOR_BY_KIND", "MetadataView"]

ACCESSOR_BY_KIND: Mapping[MediaKind, type[VariantMetadata]] = {
    MediaKind.GENERIC: GenericMetadata,
    MediaKind.MOVIE: MovieMetadata,
    MediaKind.TV_SHOW: TvShowMetadata,
    MediaKind.MUSIC_TRACK: MusicTrackMetadata,
    MediaKind.PHOTO: PhotoMetadata,
}


def _coerce_discriminator(value: Any) -> int:
    """Coerce a raw `metadataType` value to an int.

    Accepts ints, integer-valued floats and decimal strings such as `"2"`.
    Booleans are rejected even though Python treats them as ints.
    """
    if isinstance(value, bool):
        raise InvalidDiscriminatorError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidDiscriminatorError(value) from None
    raise InvalidDiscriminatorError(value)


@dataclass(frozen=True, slots=True)
class MetadataView:
    """Stateless lens that interprets a metadata bag by its discriminator.

    Holds a reference to the bag and never copies or mutates it. The resolved
    accessor is bound to the same bag, so the view and every accessor derived
    from it observe the same snapshot.
    """

    bag: MetadataBag

    # Bags compare by value over nested read-only mappings and are unhashable
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def of(cls, metadata: Mapping[str, Any]) -> MetadataView:
        """Create a view over a raw metadata mapping without copying it."""
        return cls(MetadataBag(metadata))

    @property
    def raw(self) -> Mapping[str, Any]:
        """The raw bag mapping, for keys and kinds the model does not know."""
        return self.bag.raw

    def resolve_kind(self) -> MediaKind:
        """Resolve the `metadataType` discriminator to a media kind.

        Returns:
            MediaKind: The variant the bag describes

        Raises:
            MissingDiscriminatorError: If `metadataType` is absent.
            InvalidDiscriminatorError: If it is not coercible to an integer.
            UnknownVariantError: If it is an integer outside the known kinds.
        """
        raw_value = self.bag.raw.get(DISCRIMINATOR_KEY)
        if raw_value is None:
            raise MissingDiscriminatorError(DISCRIMINATOR_KEY)

        value = _coerce_discriminator(raw_value)
        kind = MediaKind.from_discriminator(value)
        if kind is None:
            raise UnknownVariantError(value)
        return kind

    def resolve(self) -> VariantMetadata:
        """Build the variant accessor matching the bag's discriminator.

        Raises:
            MissingDiscriminatorError: If `metadataType` is absent.
            InvalidDiscriminatorError: If it is not coercible to an integer.
            UnknownVariantError: If it is an integer outside the known kinds.
        """
        kind = self.resolve_kind()
        accessor = ACCESSOR_BY_KIND[kind](self.bag)
        log.debug(f"Resolved metadata type $$'{kind.name}'$$")
        return accessor

    def likely_keys(self) -> tuple[MetadataKey, ...]:
        """Keys most likely present for the bag's kind. Advisory only.

        Raises the same errors as `resolve_kind`.
        """
        return KEY_SCHEMA[self.resolve_kind()]
