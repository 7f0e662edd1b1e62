import binascii
from typing import Iterable, List

from .errors import InvalidKey
from .models.signable_url import SignableURL
from .security.crypto import b64url_decode, b64url_encode, hmac_sha1


def decode_signing_key(secret_key: str) -> bytes:
    """
    Decode a URL-safe base64 signing secret into the raw HMAC key.

    Raises:
        InvalidKey: If the secret is empty, non-ASCII or not valid base64.
    """
    if not isinstance(secret_key, str) or not secret_key:
        raise InvalidKey("Signing secret cannot be empty")
    try:
        key = b64url_decode(secret_key)
    except (binascii.Error, ValueError) as e:
        # UnicodeEncodeError is a ValueError subclass
        raise InvalidKey(f"Signing secret is not valid URL-safe base64: {e}") from e
    if not key:
        raise InvalidKey("Signing secret decodes to an empty key")
    return key


def compute_signature(resource: str, key: bytes) -> str:
    """HMAC-SHA1 of the resource string, as unpadded URL-safe base64."""
    return b64url_encode(hmac_sha1(key, resource.encode("utf-8")))


def sign_resource(resource: str, secret_key: str) -> str:
    """Signature text for an already built ``path?query`` resource string."""
    return compute_signature(resource, decode_signing_key(secret_key))


def _sign_parsed(parsed: SignableURL, key: bytes) -> str:
    signature = compute_signature(parsed.resource, key)
    return f"{parsed.origin}{parsed.resource}&signature={signature}"


def sign(url: str, secret_key: str) -> str:
    """
    Sign a URL with a URL signing secret.

    Only the path and query are signed. The result is the original scheme,
    host, path and query with ``&signature=<urlsafe-base64>`` appended.

    Args:
        url (str): Absolute URL to sign.
        secret_key (str): URL-safe base64 signing secret.

    Returns:
        str: The signed URL.

    Raises:
        InvalidURL: If the URL cannot be decomposed.
        InvalidKey: If the secret cannot be decoded.
    """
    parsed = SignableURL.parse(url)
    return _sign_parsed(parsed, decode_signing_key(secret_key))


def sign_many(urls: Iterable[str], secret_key: str) -> List[str]:
    """Sign several URLs with the same secret, decoding it only once."""
    key = decode_signing_key(secret_key)
    return [_sign_parsed(SignableURL.parse(url), key) for url in urls]
