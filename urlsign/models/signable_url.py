from dataclasses import dataclass
from urllib.parse import urlsplit

from ..errors import InvalidURL


@dataclass(frozen=True)
class SignableURL:
    """
    A URL split into the four parts the signing scheme cares about.

    Only ``path`` and ``query`` are signed; ``scheme`` and ``host`` are
    carried through to the signed URL unchanged.
    """
    scheme: str
    host: str
    path: str
    query: str

    @property
    def resource(self) -> str:
        # The "?" is always present, even with an empty query
        return f"{self.path}?{self.query}"

    @property
    def origin(self) -> str:
        return f"{self.scheme}://{self.host}"

    @classmethod
    def parse(cls, url: str) -> 'SignableURL':
        """
        Split an absolute URL into scheme, host, path and query.

        Args:
            url (str): Absolute URL, e.g. ``https://maps.googleapis.com/maps/api/staticmap?center=Rome``

        Returns:
            SignableURL: The decomposed URL. Any fragment is dropped and
                any ``user:password@`` prefix is removed from the host.

        Raises:
            InvalidURL: If the URL is empty, contains control characters or
                lone surrogates, or lacks a scheme, host or path.
        """
        if not isinstance(url, str) or not url.strip():
            raise InvalidURL("URL to sign cannot be empty")

        # urlsplit silently drops tabs and newlines, which would change the signed bytes
        if any(ord(ch) < 0x20 or ord(ch) == 0x7f for ch in url):
            raise InvalidURL(f"URL {url!r} contains control characters")

        try:
            url.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidURL(f"URL {url!r} is not valid UTF-8 text: {e}") from e

        try:
            parts = urlsplit(url)
            # Accessing port validates it (e.g. rejects "host:abc")
            parts.port
        except ValueError as e:
            raise InvalidURL(f"Cannot parse URL {url!r}: {e}") from e

        host = parts.netloc.rpartition("@")[2]
        if not parts.scheme:
            raise InvalidURL(f"URL {url!r} has no scheme")
        if not host:
            raise InvalidURL(f"URL {url!r} has no host")
        if not parts.path:
            raise InvalidURL(f"URL {url!r} has no path")

        return cls(scheme=parts.scheme, host=host, path=parts.path, query=parts.query)
