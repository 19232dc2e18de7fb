import re

_ZERO_ID = re.compile(r"^0x0*$")
_HEX_ID = re.compile(r"^0x[0-9a-fA-F]+$")

ZERO_HASH = "0x" + "0" * 64


def normalize_id(value: str | None) -> str:
    """Trim an identifier and lower-case it when it is hex."""
    if value is None:
        return ""
    value = value.strip()
    if _HEX_ID.match(value):
        return value.lower()
    return value


def is_null_id(value: str | None) -> bool:
    value = normalize_id(value)
    return value == "" or bool(_ZERO_ID.match(value))
