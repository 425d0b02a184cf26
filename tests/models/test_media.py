"""Tests for the media descriptor."""

import copy
import json
import threading
from types import MappingProxyType

import pytest
from pydantic import ValidationError

from src.config.settings import StreamTypeCase
from src.exceptions import MediaPayloadError, NoMetadataError
from src.models.keys import MediaKind
from src.models.media import Media, StreamType, Track, TrackType
from src.models.variants import MovieMetadata

URL = "http://host/movie.mp4"


@pytest.fixture
def full_payload(movie_bag: dict) -> dict:
    """A wire payload carrying all eight fields."""
    return {
        "contentId": URL,
        "contentType": "video/mp4",
        "duration": 8880.0,
        "streamType": "buffered",
        "customData": {"queue": [1, 2]},
        "metadata": movie_bag,
        "textTrackStyle": {"fontScale": 1.2},
        "tracks": [{"trackId": 1, "type": "text", "language": "en"}],
    }


def test_construction_requires_only_url_and_content_type():
    """Every field besides url and content type defaults to None."""
    media = Media(URL, "video/mp4")

    assert media.url == URL
    assert media.content_type == "video/mp4"
    assert media.duration is None
    assert media.stream_type is None
    assert media.custom_data is None
    assert media.metadata is None
    assert media.text_track_style is None
    assert media.tracks is None


def test_construction_with_playback_fields():
    """The four-argument form sets duration and stream type."""
    media = Media(URL, "video/mp4", 12.5, StreamType.LIVE)

    assert media.duration == 12.5
    assert media.stream_type is StreamType.LIVE


def test_full_construction_form(movie_bag: dict):
    """The eight-argument form accepts every field."""
    media = Media(
        URL,
        "video/mp4",
        1.0,
        "NONE",
        {"a": 1},
        movie_bag,
        {"fontScale": 1.0},
        [Track(track_id=1)],
    )

    assert media.stream_type is StreamType.NONE
    assert media.custom_data == {"a": 1}
    assert media.metadata["title"] == "Inception"
    assert media.text_track_style == {"fontScale": 1.0}
    assert media.tracks == (Track(track_id=1),)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("BUFFERED", StreamType.BUFFERED),
        ("buffered", StreamType.BUFFERED),
        ("LIVE", StreamType.LIVE),
        ("live", StreamType.LIVE),
        ("NONE", StreamType.NONE),
        ("none", StreamType.NONE),
        ("Live", StreamType.LIVE),
    ],
)
def test_stream_type_tokens_are_case_insensitive(token: str, expected: StreamType):
    """Upper- and lower-case stream type tokens normalize to one member."""
    assert Media(URL, "video/mp4", stream_type=token).stream_type is expected
    assert Media.from_wire(
        {"contentId": URL, "contentType": "video/mp4", "streamType": token}
    ).stream_type is expected


def test_unknown_stream_type_is_rejected():
    """Unknown stream type tokens fail validation."""
    with pytest.raises(ValidationError):
        Media(URL, "video/mp4", stream_type="progressive")


def test_construction_deep_copies_inputs(movie_bag: dict):
    """Later mutation of caller-held structures does not affect the media."""
    custom = {"queue": [1, 2]}
    media = Media(URL, "video/mp4", custom_data=custom, metadata=movie_bag)

    custom["queue"].append(3)
    custom["new"] = True
    movie_bag["title"] = "Changed"
    movie_bag["images"][0]["url"] = "http://img/changed.jpg"

    assert media.custom_data == {"queue": (1, 2)}
    assert media.metadata["title"] == "Inception"
    accessor = media.metadata_view().resolve()
    assert accessor.images() == ["http://img/1.jpg"]


def test_bags_are_read_only(movie_bag: dict):
    """Mapping fields are read-only views with tuple sequences."""
    media = Media(URL, "video/mp4", metadata=movie_bag)

    assert isinstance(media.metadata, MappingProxyType)
    assert isinstance(media.metadata["images"], tuple)
    with pytest.raises(TypeError):
        media.metadata["title"] = "Changed"  # type: ignore[index]
    with pytest.raises(TypeError):
        media.metadata["images"][0]["url"] = "x"  # type: ignore[index]


def test_fields_cannot_be_reassigned():
    """The descriptor is frozen."""
    media = Media(URL, "video/mp4")

    with pytest.raises(ValidationError):
        media.url = "http://elsewhere"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("other", "equal"),
    [
        (Media(URL, "video/mp4", 10.0, "BUFFERED"), True),
        (Media(URL, "video/mp4", 10.0, "buffered", metadata={"a": 1}), True),
        (Media(URL, "video/mp4", 10.0, "BUFFERED", custom_data={"x": 1}), True),
        (Media(URL, "video/mp4", 10.0, "BUFFERED", tracks=[{"trackId": 2}]), True),
        (Media("http://other", "video/mp4", 10.0, "BUFFERED"), False),
        (Media(URL, "audio/mp3", 10.0, "BUFFERED"), False),
        (Media(URL, "video/mp4", 11.0, "BUFFERED"), False),
        (Media(URL, "video/mp4", None, "BUFFERED"), False),
        (Media(URL, "video/mp4", 10.0, "LIVE"), False),
        (Media(URL, "video/mp4", 10.0, None), False),
    ],
)
def test_equality_uses_identity_fields_only(other: Media, equal: bool):
    """Equality compares url, content type, stream type and duration only."""
    media = Media(URL, "video/mp4", 10.0, "BUFFERED", metadata={"b": 2})

    assert (media == other) is equal
    assert (other == media) is equal
    if equal:
        assert hash(media) == hash(other)


def test_equality_is_null_safe():
    """Absent identity fields compare equal to each other."""
    assert Media(URL, "video/mp4") == Media(URL, "video/mp4")
    assert Media(URL, "video/mp4") != Media(URL, "video/mp4", 0.0)


def test_media_is_usable_in_sets():
    """Descriptors with the same identity collapse in a set."""
    items = {
        Media(URL, "video/mp4", metadata={"metadataType": 0}),
        Media(URL, "video/mp4", metadata={"metadataType": 1}),
        Media(URL, "audio/mp3"),
    }

    assert len(items) == 2


def test_media_does_not_equal_other_types():
    """Comparison with unrelated objects is False."""
    assert Media(URL, "video/mp4") != URL


def test_to_wire_emits_only_present_fields():
    """Absent optional fields are omitted."""
    assert Media(URL, "video/mp4").to_wire() == {
        "contentId": URL,
        "contentType": "video/mp4",
    }


def test_to_wire_never_emits_text_track_style_or_tracks(full_payload: dict):
    """textTrackStyle and tracks are accepted but never sent."""
    media = Media.from_wire(full_payload)

    payload = media.to_wire()

    assert set(payload) == {
        "contentId",
        "contentType",
        "duration",
        "streamType",
        "customData",
        "metadata",
    }
    assert payload["customData"] == {"queue": [1, 2]}
    assert isinstance(payload["metadata"], dict)
    assert isinstance(payload["metadata"]["images"], list)


def test_from_wire_accepts_all_eight_fields(full_payload: dict):
    """All wire fields populate the descriptor."""
    media = Media.from_wire(full_payload)

    assert media.url == URL
    assert media.duration == 8880.0
    assert media.stream_type is StreamType.BUFFERED
    assert media.text_track_style == {"fontScale": 1.2}
    assert media.tracks is not None
    assert media.tracks[0].track_id == 1
    assert media.tracks[0].type is TrackType.TEXT
    assert media.tracks[0].language == "en"


def test_round_trip_preserves_wire_fields_and_drops_input_only_fields(
    full_payload: dict,
):
    """A round trip keeps six fields and loses textTrackStyle and tracks."""
    original = Media.from_wire(full_payload)

    restored = Media.from_json(original.to_json())

    assert restored == original
    assert restored.url == original.url
    assert restored.content_type == original.content_type
    assert restored.duration == original.duration
    assert restored.stream_type is original.stream_type
    assert restored.custom_data == original.custom_data
    assert restored.metadata == original.metadata
    assert original.text_track_style is not None
    assert original.tracks is not None
    assert restored.text_track_style is None
    assert restored.tracks is None


def test_stream_type_case_of_outbound_token():
    """The streamType token follows the requested or configured case."""
    media = Media(URL, "video/mp4", stream_type="live")

    assert media.to_wire()["streamType"] == "LIVE"
    assert media.to_wire(StreamTypeCase.LOWER)["streamType"] == "live"


def test_to_json_is_valid_json(movie_bag: dict):
    """to_json produces a JSON document of the wire payload."""
    media = Media(URL, "video/mp4", 1.5, metadata=movie_bag)

    assert json.loads(media.to_json(indent=2)) == media.to_wire()


@pytest.mark.parametrize(
    "payload",
    [
        {"contentType": "video/mp4"},
        {"contentId": URL},
        {"contentId": URL, "contentType": "video/mp4", "streamType": "sideways"},
        {"contentId": URL, "contentType": "video/mp4", "metadata": ["not", "a", "map"]},
        {"contentId": URL, "contentType": "video/mp4", "tracks": [{"type": "TEXT"}]},
        ["not", "an", "object"],
    ],
)
def test_from_wire_rejects_malformed_payloads(payload):
    """Structural problems surface as MediaPayloadError."""
    with pytest.raises(MediaPayloadError) as exc_info:
        Media.from_wire(payload)

    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_from_json_rejects_invalid_json():
    """Invalid JSON surfaces as MediaPayloadError."""
    with pytest.raises(MediaPayloadError):
        Media.from_json("{not json")


def test_from_wire_ignores_unknown_top_level_keys():
    """Unknown top-level keys are ignored."""
    media = Media.from_wire(
        {"contentId": URL, "contentType": "video/mp4", "entity": "x"}
    )

    assert media.to_wire() == {"contentId": URL, "contentType": "video/mp4"}


def test_metadata_view_resolves_variant(movie_bag: dict):
    """metadata_view dispatches to the accessor named by the bag."""
    media = Media(URL, "video/mp4", metadata=movie_bag)

    view = media.metadata_view()

    assert view.resolve_kind() is MediaKind.MOVIE
    accessor = view.resolve()
    assert isinstance(accessor, MovieMetadata)
    assert accessor.raw is media.metadata
    assert accessor.title() == "Inception"


def test_metadata_view_without_metadata_fails():
    """A descriptor without metadata has no view."""
    with pytest.raises(NoMetadataError):
        Media(URL, "video/mp4").metadata_view()


def test_str_shows_identity():
    """The string form mirrors the receiver-facing summary."""
    media = Media(URL, "video/mp4", 3.0)

    assert str(media) == f"Media{{url: {URL}, contentType: video/mp4, duration: 3.0}}"


def test_copies_share_immutable_snapshots(movie_bag: dict):
    """Copies, deep or shallow, share the frozen bags of the original."""
    media = Media(
        URL, "video/mp4", metadata=movie_bag, tracks=[{"trackId": 1, "x": {"y": 1}}]
    )

    for copied in (copy.copy(media), copy.deepcopy(media), media.model_copy(deep=True)):
        assert copied == media
        assert copied is not media
        assert copied.metadata is media.metadata
        assert copied.tracks == media.tracks


def test_concurrent_readers_see_the_same_snapshot(movie_bag: dict):
    """Accessors can be read from several threads while the source mutates."""
    media = Media(URL, "video/mp4", metadata=movie_bag)
    results: list[tuple[str, list[str]]] = []
    lock = threading.Lock()

    def read() -> None:
        accessor = media.metadata_view().resolve()
        for _ in range(100):
            value = (accessor.title(), accessor.images())
            with lock:
                results.append(value)

    threads = [threading.Thread(target=read) for _ in range(4)]
    for thread in threads:
        thread.start()
    for _ in range(100):
        movie_bag["title"] = "Mutated"
        movie_bag["images"].append({"url": "http://img/extra.jpg"})
    for thread in threads:
        thread.join()

    assert len(results) == 400
    assert all(value == ("Inception", ["http://img/1.jpg"]) for value in results)


def test_track_keeps_unknown_keys_read_only():
    """Receiver-specific track keys are kept as a read-only snapshot."""
    source = {"trackId": 3, "type": "audio", "customData": {"codec": "aac"}}
    track = Track.model_validate(source)

    source["customData"]["codec"] = "mp3"

    assert track.type is TrackType.AUDIO
    assert track.model_extra["customData"]["codec"] == "aac"
    assert track.model_dump(mode="json", exclude_none=True) == {
        "trackId": 3,
        "type": "AUDIO",
        "customData": {"codec": "aac"},
    }


def test_model_dump_json_serializes_frozen_bags(movie_bag: dict, full_payload: dict):
    """pydantic's own dump methods handle the read-only snapshots."""
    media = Media(URL, "video/mp4", metadata=movie_bag, custom_data={"q": [1]})

    dumped = json.loads(media.model_dump_json())

    assert dumped["contentId"] == URL
    assert dumped["metadata"] == movie_bag
    assert dumped["customData"] == {"q": [1]}
    assert isinstance(media.model_dump()["metadata"], dict)

    full = json.loads(Media.from_wire(full_payload).model_dump_json())
    assert full["textTrackStyle"] == {"fontScale": 1.2}
    assert full["tracks"][0]["trackId"] == 1


def test_to_json_matches_to_wire_with_requested_case():
    """to_json and to_wire share one serializer, including the stream case."""
    media = Media(URL, "video/mp4", 2.0, "Buffered", custom_data={"a": (1, 2)})

    assert json.loads(media.to_json(StreamTypeCase.LOWER)) == {
        "contentId": URL,
        "contentType": "video/mp4",
        "duration": 2.0,
        "streamType": "buffered",
        "customData": {"a": [1, 2]},
    }
