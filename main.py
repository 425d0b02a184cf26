"""CastMedia inspection tool.

Decodes a receiver media payload, prints the typed view of its metadata and
the payload as it would be sent back to a receiver.
"""

import argparse
import sys
from pathlib import Path
from typing import TextIO

from src import log
from src.config.settings import StreamTypeCase
from src.exceptions import (
    MalformedArrayElementError,
    MetadataError,
    MissingKeyError,
    TypeMismatchError,
    WireFormatError,
)
from src.models import DISCRIMINATOR_KEY, Media, VariantMetadata


def _field_names(accessor: VariantMetadata) -> list[str]:
    """List the field getters a variant accessor exposes, in definition order."""
    return [
        name
        for name, attr in vars(type(accessor)).items()
        if callable(attr) and not name.startswith("_")
    ]


def describe(
    media: Media, out: TextIO, stream_type_case: StreamTypeCase | None = None
) -> None:
    """Write a human-readable description of a media descriptor.

    Args:
        media (Media): Descriptor to describe
        out (TextIO): Stream to write to
        stream_type_case (StreamTypeCase | None): Case of the re-encoded
            streamType token; defaults to the configured case

    Raises:
        MetadataError: If the metadata bag cannot be resolved to a variant.
    """
    log.info(
        f"Media $$'{media.url}'$$ $${{contentType: {media.content_type}, "
        f"streamType: {media.stream_type}, duration: {media.duration}}}$$"
    )

    if media.metadata is None:
        out.write("metadata: <none>\n")
    else:
        accessor = media.metadata_view().resolve()
        out.write(f"metadata: {accessor.kind.name}\n")
        for name in _field_names(accessor):
            try:
                value = getattr(accessor, name)()
            except MissingKeyError:
                value = "<missing>"
            except (TypeMismatchError, MalformedArrayElementError) as e:
                value = f"<invalid: {e}>"
            out.write(f"  {name}: {value}\n")

        known = {*accessor.likely_keys(), DISCRIMINATOR_KEY}
        extra = sorted(set(accessor.raw) - known)
        if extra:
            out.write(f"  other keys: {', '.join(extra)}\n")

    out.write(media.to_json(stream_type_case, indent=2))
    out.write("\n")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Inspect a media payload exchanged with a streaming receiver"
    )
    parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        help="JSON file holding the media payload (reads stdin when omitted)",
    )
    parser.add_argument(
        "--stream-type-case",
        type=StreamTypeCase,
        choices=list(StreamTypeCase),
        default=None,
        help="Letter case of the re-encoded streamType token",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Main entry point.

    Args:
        argv (list[str] | None): Command-line arguments
        out (TextIO | None): Output stream; defaults to stdout

    Returns:
        int: Exit code (0 for success, 1 for error)
    """
    args = parse_args(argv)
    out = out or sys.stdout

    if args.log_level:
        log.setLevel(log.level_for(args.log_level))
        for handler in log.handlers:
            handler.setLevel(log.level)

    try:
        if args.file is None:
            data = sys.stdin.read()
        else:
            data = args.file.read_text(encoding="utf-8")
    except OSError as e:
        log.error(f"CastMedia: Could not read payload: {e}")
        return 1

    try:
        media = Media.from_json(data)
        describe(media, out, args.stream_type_case)
    except WireFormatError as e:
        log.error(f"CastMedia: {e}")
        return 1
    except MetadataError as e:
        log.error(f"CastMedia: Unsupported metadata: {e}")
        return 1

    log.success("CastMedia: Payload decoded")
    return 0


if __name__ == "__main__":
    sys.exit(main())
