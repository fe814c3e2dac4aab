import re
import uuid

# hyphenated 8-4-4-4-12 form only
_CANONICAL_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def parse_uuid(value) -> uuid.UUID:
    """Parse a UUID given in the hyphenated form; raises ValueError otherwise."""
    if isinstance(value, uuid.UUID):
        return value
    if not isinstance(value, str) or not _CANONICAL_UUID.fullmatch(value):
        raise ValueError(f"Not a hyphenated UUID: {value!r}")
    return uuid.UUID(value)
