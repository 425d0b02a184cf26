"""Media descriptor exchanged with a streaming receiver.

See the Cast `MediaInformation` reference:
https://developers.google.com/cast/docs/reference/web_receiver/cast.framework.messages.MediaInformation
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    FieldSerializationInfo,
    PlainSerializer,
    ValidationError,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

from src import log
from src.config.settings import BaseStrEnum, StreamTypeCase, get_config
from src.exceptions import MediaPayloadError, NoMetadataError
from src.models.bag import MetadataBag
from src.models.view import MetadataView
from src.utils.frozen import freeze, thaw

__all__ = ["CastBaseModel", "Media", "StreamType", "Track", "TrackType"]

FrozenValue = Annotated[Any, AfterValidator(freeze), PlainSerializer(thaw)]
FrozenMapping = Annotated[
    Mapping[str, Any], AfterValidator(freeze), PlainSerializer(thaw)
]

# Fields accepted from the receiver but never sent back
_INBOUND_ONLY = {"text_track_style", "tracks"}


class StreamType(BaseStrEnum):
    """Stream type of a media item.

    Some receivers use upper-case tokens (like Pandora), others lower-case
    (like Google Audio); both parse to the same member.
    """

    BUFFERED = "BUFFERED"
    LIVE = "LIVE"
    NONE = "NONE"


class TrackType(BaseStrEnum):
    """Type of a media track."""

    TEXT = "TEXT"
    AUDIO = "AUDIO"
    VIDEO = "VIDEO"


class CastBaseModel(BaseModel):
    """Base class for immutable models exchanged with a receiver.

    Fields are named in snake_case and mapped to the receiver's camelCase wire
    names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def model_dump(self, **kwargs) -> dict:
        """Convert the model to a dictionary, converting all keys to camelCase.

        Returns:
            dict: Dictionary representation of the model.
        """
        return super().model_dump(by_alias=True, **kwargs)

    def model_dump_json(self, **kwargs) -> str:
        """Serialize the model to JSON, converting all keys to camelCase.

        Returns:
            str: JSON serialized string of the model.
        """
        return super().model_dump_json(by_alias=True, **kwargs)

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> CastBaseModel:
        # Every value is an immutable snapshot, so a shallow copy is already deep
        return self.__copy__()


class Track(CastBaseModel):
    """A text, audio or video track of a media item.

    Only the well-known fields are typed; any other keys the receiver sends
    are kept as a read-only snapshot in `model_extra`.
    """

    model_config = ConfigDict(extra="allow")

    __pydantic_extra__: dict[str, FrozenValue] = Field(init=False)

    track_id: int
    type: TrackType | None = None
    track_content_id: str | None = None
    track_content_type: str | None = None
    name: str | None = None
    language: str | None = None
    subtype: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value: Any) -> Any:
        """Accept track type tokens in any letter case."""
        if isinstance(value, str) and not isinstance(value, TrackType):
            return TrackType(value)
        return value


class Media(CastBaseModel):
    """Immutable descriptor of a media item streamed on a receiver.

    Every mapping or list handed to the constructor is deep-copied into a
    read-only snapshot (mappings become `MappingProxyType`, lists become
    tuples), so later changes to caller-held structures never show through and
    instances can be shared between threads without locking.

    Equality and hashing consider only the playback identity: `url`,
    `content_type`, `stream_type` and `duration`. Two descriptors with the same
    identity but different metadata, custom data, text track style or tracks
    compare equal.

    Examples:
        >>> media = Media("http://host/movie.mp4", "video/mp4", 5400.0, "buffered")
        >>> media.stream_type
        BUFFERED
        >>> media.to_wire()["contentId"]
        'http://host/movie.mp4'
    """

    model_config = ConfigDict(extra="ignore")

    url: str = Field(alias="contentId")
    content_type: str
    duration: float | None = None
    stream_type: StreamType | None = None
    custom_data: FrozenMapping | None = None
    metadata: FrozenMapping | None = None
    text_track_style: FrozenMapping | None = None
    tracks: tuple[Track, ...] | None = None

    def __init__(
        self,
        url: str,
        content_type: str,
        duration: float | None = None,
        stream_type: StreamType | str | None = None,
        custom_data: Mapping[str, Any] | None = None,
        metadata: Mapping[str, Any] | None = None,
        text_track_style: Mapping[str, Any] | None = None,
        tracks: Sequence[Track | Mapping[str, Any]] | None = None,
    ) -> None:
        """Create a media descriptor; only `url` and `content_type` are required.

        Args:
            url (str): Content locator, sent as `contentId`
            content_type (str): MIME type of the content
            duration (float | None): Duration in seconds; None if unknown or live
            stream_type (StreamType | str | None): Stream type, any letter case
            custom_data (Mapping | None): Opaque application data
            metadata (Mapping | None): Receiver metadata bag
            text_track_style (Mapping | None): Text track style, inbound only
            tracks (Sequence | None): Media tracks, inbound only
        """
        super().__init__(
            url=url,
            content_type=content_type,
            duration=duration,
            stream_type=stream_type,
            custom_data=custom_data,
            metadata=metadata,
            text_track_style=text_track_style,
            tracks=tracks,
        )

    @field_validator("stream_type", mode="before")
    @classmethod
    def parse_stream_type(cls, value: Any) -> Any:
        """Accept stream type tokens in any letter case."""
        if isinstance(value, str) and not isinstance(value, StreamType):
            return StreamType(value)
        return value

    @field_serializer("stream_type")
    def serialize_stream_type(
        self, value: StreamType | None, info: FieldSerializationInfo
    ) -> str | None:
        """Emit the stream type token in the requested or configured case."""
        if value is None:
            return None
        case = (info.context or {}).get("stream_type_case")
        return (case or get_config().stream_type_case).apply(value.value)

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> Media:
        """Decode a media descriptor from a receiver payload.

        Accepts all eight wire fields (`contentId`, `contentType`, `duration`,
        `streamType`, `customData`, `metadata`, `textTrackStyle`, `tracks`);
        other keys are ignored.

        Raises:
            MediaPayloadError: If required fields are missing or malformed.
        """
        try:
            media = cls.model_validate(payload)
        except ValidationError as e:
            raise MediaPayloadError(f"Invalid media payload: {e}") from e

        log.debug(f"Decoded media $$'{media.url}'$$")
        return media

    @classmethod
    def from_json(cls, data: str | bytes) -> Media:
        """Decode a media descriptor from a JSON document.

        Raises:
            MediaPayloadError: If the document is not valid JSON or not a valid
                media payload.
        """
        try:
            media = cls.model_validate_json(data)
        except ValidationError as e:
            raise MediaPayloadError(f"Invalid media payload: {e}") from e

        log.debug(f"Decoded media $$'{media.url}'$$")
        return media

    def to_wire(
        self, stream_type_case: StreamTypeCase | None = None
    ) -> dict[str, Any]:
        """Encode the descriptor for a receiver.

        `contentId` and `contentType` are always present; `duration`,
        `streamType`, `customData` and `metadata` only when set.
        `textTrackStyle` and `tracks` are never emitted, so they do not survive
        an encode/decode round trip.

        Args:
            stream_type_case (StreamTypeCase | None): Letter case of the
                `streamType` token. Defaults to the configured case.

        Returns:
            dict[str, Any]: Plain, JSON-encodable payload
        """
        payload = self.model_dump(
            mode="json",
            exclude_none=True,
            exclude=_INBOUND_ONLY,
            context={"stream_type_case": stream_type_case},
        )

        log.debug(f"Encoded media $$'{self.url}'$$ $${sorted(payload)}$$")
        return payload

    def to_json(
        self,
        stream_type_case: StreamTypeCase | None = None,
        indent: int | None = None,
    ) -> str:
        """Encode the descriptor as a JSON document. See `to_wire`."""
        return self.model_dump_json(
            indent=indent,
            exclude_none=True,
            exclude=_INBOUND_ONLY,
            context={"stream_type_case": stream_type_case},
        )

    def metadata_view(self) -> MetadataView:
        """Get a view interpreting this descriptor's metadata bag.

        Raises:
            NoMetadataError: If the descriptor carries no metadata.
        """
        if self.metadata is None:
            raise NoMetadataError(f"Media '{self.url}' has no metadata")
        return MetadataView(MetadataBag(self.metadata))

    def _identity(self) -> tuple[str, str, StreamType | None, float | None]:
        return (self.url, self.content_type, self.stream_type, self.duration)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Media):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return (
            f"Media{{url: {self.url}, contentType: {self.content_type}, "
            f"duration: {self.duration}}}"
        )
