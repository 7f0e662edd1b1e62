import base64
import hashlib
import hmac

_STANDARD_TO_URLSAFE = str.maketrans("+/", "-_")
_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def b64url_encode(raw: bytes) -> str:
    """URL-safe base64 without padding."""
    return base64.b64encode(raw).decode("ascii").translate(_STANDARD_TO_URLSAFE).rstrip("=")


def b64url_decode(data: str) -> bytes:
    """Decode URL-safe base64, with or without padding.

    Characters outside the base64 alphabet are rejected instead of being
    silently dropped.
    """
    standard = data.translate(_URLSAFE_TO_STANDARD)
    padding = "=" * ((4 - (len(standard) % 4)) % 4)
    return base64.b64decode((standard + padding).encode("ascii"), validate=True)


def hmac_sha1(key: bytes, msg: bytes) -> bytes:
    """Return raw 20-byte HMAC-SHA1 digest."""
    return hmac.new(key, msg, hashlib.sha1).digest()


def constant_time_equal(a: bytes, b: bytes) -> bool:
    """Constant-time comparison to avoid timing leaks."""
    return hmac.compare_digest(a, b)
