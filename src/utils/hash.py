"""SHA-1 fingerprints for text and bytes."""

import hashlib
import logging
import re
from typing import Any, Iterable, Union

logger = logging.getLogger(__name__)

SHA1_HEX_PATTERN = re.compile(r"[0-9a-f]{40}")


class EncodingError(ValueError):
    """Text could not be converted to a well-formed UTF-8 byte sequence"""
    pass


def encode_text(text: str) -> bytes:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        # lone surrogates, e.g. from os.fsdecode or json with \ud800
        raise EncodingError(f"text is not valid UTF-8 at position {e.start}: {e.reason}") from e


def sha1_bytes(b: bytes) -> str:
    h = hashlib.sha1()
    h.update(b)
    return h.hexdigest()


def sha1_text(text: str) -> str:
    return sha1_bytes(encode_text(text))


def sha1_chunks(chunks: Iterable[Union[str, bytes]]) -> str:
    """Digest of the concatenation of ``chunks`` without joining them in memory.

    Text pieces are UTF-8 encoded, byte pieces are hashed as-is, so
    ``sha1_chunks(["ab", "c"]) == sha1_text("abc")``.
    """
    h = hashlib.sha1()
    n = 0
    for chunk in chunks:
        if isinstance(chunk, str):
            chunk = encode_text(chunk)
        h.update(chunk)
        n += len(chunk)
    logger.debug("hashed %d bytes in chunks", n)
    return h.hexdigest()


def is_sha1_hex(value: Any) -> bool:
    return isinstance(value, str) and SHA1_HEX_PATTERN.fullmatch(value) is not None


def key_fingerprint(key: Any) -> str:
    """Stable fingerprint for a cache key (URL, path, name...).

    Strings hash as text, bytes as bytes, anything else through ``str()``.
    """
    if isinstance(key, (bytes, bytearray, memoryview)):
        return sha1_bytes(key)
    if not isinstance(key, str):
        key = str(key)
    return sha1_text(key)
