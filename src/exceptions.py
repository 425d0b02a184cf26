"""CastMedia exception classes."""

from typing import Any


class CastMediaError(Exception):
    """Base class for all CastMedia exceptions."""


# Configuration errors
class ConfigError(CastMediaError):
    """Base class for configuration-related errors."""


class LogDirectoryError(ConfigError, ValueError):
    """The configured log directory exists but is not a directory."""


# Metadata errors
class MetadataError(CastMediaError):
    """Base class for metadata bag and variant resolution errors."""


class NoMetadataError(MetadataError):
    """A metadata view was requested for media that carries no metadata bag."""


class MissingDiscriminatorError(MetadataError, KeyError):
    """The metadata bag has no `metadataType` discriminator."""

    def __init__(self, key: str) -> None:
        """Initialize with the discriminator key that was looked up."""
        super().__init__(f"Metadata bag has no '{key}' discriminator")
        self.key = key

    def __str__(self) -> str:
        """Return the message without KeyError's repr quoting."""
        return str(self.args[0])


class InvalidDiscriminatorError(MetadataError, ValueError):
    """The discriminator value cannot be coerced to an integer."""

    def __init__(self, value: Any) -> None:
        """Initialize with the offending discriminator value."""
        super().__init__(f"Metadata discriminator {value!r} is not an integer")
        self.value = value


class UnknownVariantError(MetadataError, ValueError):
    """The discriminator is an integer outside the known media kinds."""

    def __init__(self, value: int) -> None:
        """Initialize with the unknown discriminator value."""
        super().__init__(f"Unknown metadata type: {value}")
        self.value = value


class MissingKeyError(MetadataError, KeyError):
    """A field accessor was invoked for a key the bag does not hold."""

    def __init__(self, key: str) -> None:
        """Initialize with the missing key."""
        super().__init__(f"Metadata key '{key}' is missing")
        self.key = key

    def __str__(self) -> str:
        """Return the message without KeyError's repr quoting."""
        return str(self.args[0])


class TypeMismatchError(MetadataError, TypeError):
    """A bag value does not have the type the accessor expects."""

    def __init__(self, key: str, expected: str, value: Any) -> None:
        """Initialize with the key, the expected type name and the stored value."""
        super().__init__(
            f"Metadata key '{key}' expected {expected}, got "
            f"{type(value).__name__} {value!r}"
        )
        self.key = key
        self.expected = expected
        self.value = value


class MalformedArrayElementError(MetadataError, ValueError):
    """An element of an image-style array is not a mapping holding a url."""

    def __init__(self, key: str, index: int, element: Any) -> None:
        """Initialize with the array key, element position and element value."""
        super().__init__(
            f"Metadata key '{key}' element {index} is not a mapping with a "
            f"'url' field: {element!r}"
        )
        self.key = key
        self.index = index
        self.element = element


# Wire format errors
class WireFormatError(CastMediaError):
    """Base class for wire (de)serialization errors."""


class MediaPayloadError(WireFormatError, ValueError):
    """An inbound media payload is missing required fields or malformed."""
