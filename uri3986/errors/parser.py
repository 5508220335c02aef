from .base import UriError


class UriParsingError(UriError, ValueError):
    """
    Raised when a URI reference does not follow the RFC 3986 grammar.

    `uri` holds the whole reference, `component` the offending piece of it.
    """

    reason = "Invalid uri was passed through `UriParser3986`."

    def __init__(self, uri: str, component: str = ""):
        self.uri = uri
        self.component = component
        super(UriParsingError, self).__init__(f"{self.reason} ({uri!r})")


class InvalidSchemeError(UriParsingError):
    reason = "Scheme should match ALPHA *( ALPHA / DIGIT / '+' / '-' / '.' )."


class InvalidUserInfoError(UriParsingError):
    reason = "Userinfo contains characters outside of the RFC 3986 userinfo rule."


class InvalidPortError(UriParsingError):
    reason = "Port should be a decimal number not greater than the maximum port."
