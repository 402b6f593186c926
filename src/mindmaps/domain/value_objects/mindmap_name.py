"""Mind map name - storage key within an owner's namespace."""

from dataclasses import dataclass

from mindmaps.domain.exceptions import ValidationError

# File names are capped at 255 bytes; the record key appends ".json".
MAX_NAME_BYTES = 250
_FORBIDDEN_CHARS = ("/", "\\", "\x00")


@dataclass(frozen=True)
class MindMapName:
    """Validated mind map name. Used verbatim as the record key."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("Mind map name must not be empty")
        try:
            encoded = self.value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValidationError("Mind map name must be valid UTF-8") from e
        if len(encoded) > MAX_NAME_BYTES:
            raise ValidationError(f"Mind map name must be at most {MAX_NAME_BYTES} bytes in UTF-8")
        if self.value in (".", ".."):
            raise ValidationError("Mind map name must not be '.' or '..'")
        if any(ch in self.value for ch in _FORBIDDEN_CHARS):
            raise ValidationError("Mind map name must not contain path separators")

    def __str__(self) -> str:
        return self.value
