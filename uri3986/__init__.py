__version__ = "1.0.0"

from .errors.base import UriError
from .errors.parser import InvalidPortError
from .errors.parser import InvalidSchemeError
from .errors.parser import InvalidUserInfoError
from .errors.parser import UriParsingError
from .urls import ParsedUri
from .urls import Uri
from .urls import UriParser3986
from .urls import parse_uri

__all__ = [
    "Uri",
    "ParsedUri",
    "UriParser3986",
    "parse_uri",
    "UriError",
    "UriParsingError",
    "InvalidSchemeError",
    "InvalidUserInfoError",
    "InvalidPortError",
]
