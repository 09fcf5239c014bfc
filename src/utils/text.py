import base64
import binascii
from typing import Optional

from .hash import encode_text


def base64_text(text: str) -> str:
    return base64.b64encode(encode_text(text)).decode("ascii")


def text_from_base64(value: str) -> Optional[str]:
    """Decode base64 back to text; None if it is not base64 or not UTF-8."""
    try:
        raw = base64.b64decode(value, validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError):
        return None


def append_extension(name: str, extension: str) -> str:
    # "abc" + ".cache" and "abc" + "cache" both give "abc.cache"
    ext = (extension or "").lstrip(".")
    if not ext:
        return name
    return f"{name}.{ext}"
