class UrlSigningError(ValueError):
    """Base class for every error raised while signing a URL."""


class InvalidURL(UrlSigningError):
    """The URL is empty or cannot be split into scheme, host, path and query."""


class InvalidKey(UrlSigningError):
    """The signing secret is empty or is not valid URL-safe base64."""
