"""Identity hashing for metrics.

A metric's identity is its name plus its sorted tags. The digest is 64-bit
FNV-1a over the UTF-8 bytes of::

    name \\n key1 \\n value1 \\n key2 \\n value2 \\n ...

Grouping keys computed here may be persisted or compared across processes,
so the byte layout must not change.

Text is UTF-8 encoded; lone surrogates never raise (see _utf8).
"""

from collections.abc import Iterable

from pipemetric.core.models import Tag

FNV64_OFFSET_BASIS = 0xCBF29CE484222325
FNV64_PRIME = 0x100000001B3
_MASK_64 = 0xFFFFFFFFFFFFFFFF

_SEPARATOR = b"\n"


def _utf8(text: str) -> bytes:
    # Lone surrogates from os.fsdecode map back to their original bytes;
    # any other lone surrogate is encoded as-is.
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "surrogatepass")


def fnv1a_64(data: bytes, seed: int = FNV64_OFFSET_BASIS) -> int:
    """Feed bytes into a 64-bit FNV-1a accumulator.

    Args:
        data: Bytes to hash.
        seed: Current accumulator value (offset basis for a fresh hash).

    Returns:
        Updated accumulator value.
    """
    h = seed
    for byte in data:
        h ^= byte
        h = (h * FNV64_PRIME) & _MASK_64
    return h


def hash_id(name: str, tags: Iterable[Tag]) -> int:
    """Compute the identity hash of a measurement.

    Args:
        name: Measurement name.
        tags: Tags in ascending key order. They are hashed as given.

    Returns:
        Unsigned 64-bit digest.
    """
    h = fnv1a_64(_utf8(name))
    h = fnv1a_64(_SEPARATOR, h)
    for tag in tags:
        h = fnv1a_64(_utf8(tag.key), h)
        h = fnv1a_64(_SEPARATOR, h)
        h = fnv1a_64(_utf8(tag.value), h)
        h = fnv1a_64(_SEPARATOR, h)
    return h
