import hashlib

BytesLike = bytes | bytearray | memoryview


def sha256(data: str | BytesLike) -> bytes:
    """Raw 32-byte SHA-256 digest.

    Strings are hashed as their UTF-8 encoding; hex strings get no special
    treatment.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    elif not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("expected str or bytes-like data")
    return hashlib.sha256(data).digest()
