import logging
from typing import List
from typing import Optional
from typing import Tuple

from .errors.parser import InvalidPortError
from .errors.parser import InvalidSchemeError
from .errors.parser import UriParsingError
from .grammar import decode_userinfo
from .grammar import is_valid_scheme
from .settings import LOGGER_NAME
from .settings import MAX_PORT

log = logging.getLogger(LOGGER_NAME)


def parse_uri(uri: str) -> "ParsedUri":
    return UriParser3986().parse(uri)


class ParsedUri:
    """
    Components of one URI reference.

    `scheme` and `userinfo` are None when the reference has none,
    `host`, `query` and `fragment` are empty strings instead.
    A path starting with an empty segment is absolute.
    """

    __slots__ = (
        "scheme",
        "userinfo",
        "host",
        "port",
        "has_port",
        "path",
        "query",
        "fragment",
    )

    def __init__(
        self,
        scheme: Optional[str] = None,
        userinfo: Optional[str] = None,
        host: str = "",
        port: int = 0,
        has_port: bool = False,
        path: Optional[List[str]] = None,
        query: str = "",
        fragment: str = "",
    ):
        self.scheme = scheme
        self.userinfo = userinfo
        self.host = host
        self.port = port
        self.has_port = has_port
        self.path = list(path) if path else []
        self.query = query
        self.fragment = fragment

    def copy(self) -> "ParsedUri":
        return self.__class__(
            scheme=self.scheme,
            userinfo=self.userinfo,
            host=self.host,
            port=self.port,
            has_port=self.has_port,
            path=self.path,
            query=self.query,
            fragment=self.fragment,
        )

    def is_relative_reference(self) -> bool:
        return not self.scheme

    def contains_relative_path(self) -> bool:
        if not self.path:
            return True
        return self.path[0] != ""

    def __eq__(self, other) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented

        return all(
            getattr(self, attr) == getattr(other, attr) for attr in self.__slots__
        )

    def __repr__(self):
        fields = ", ".join(f"{attr}={getattr(self, attr)!r}" for attr in self.__slots__)
        return f"<ParsedUri {fields}>"


class UriParser3986:
    """
    Splits a URI reference into its components.

    The steps run in a fixed order, each one consuming a prefix
    (or suffix) of the text and handing the rest to the next:

        scheme -> authority -> fragment -> query -> path

    Any grammar violation raises a `UriParsingError` subclass.
    """

    scheme_stoppers = ":/?#"
    authority_stoppers = "/?#"

    def parse(self, value: str) -> ParsedUri:
        parsed = ParsedUri()

        parsed.scheme, next_idx = self.parse_scheme(value)
        rest = value[next_idx:]
        log.trace(f"scheme={parsed.scheme!r}, rest={rest!r}")  # type: ignore

        authority, next_idx = self.parse_authority(rest)
        if authority is not None:
            self.parse_authority_components(authority, parsed, value)
            rest = rest[next_idx:]
        log.trace(f"authority={authority!r}, rest={rest!r}")  # type: ignore

        rest, parsed.fragment = self.split_suffix(rest, "#")
        rest, parsed.query = self.split_suffix(rest, "?")

        parsed.path = self.parse_path(rest)
        log.trace(f"path={parsed.path!r}")  # type: ignore
        return parsed

    def parse_scheme(self, value: str) -> Tuple[Optional[str], int]:
        """
        Returns the scheme (or None) and the index right after its colon.

        A colon only ends a scheme if no "/", "?" or "#" comes before it,
        so "./a:b" and "a/b:c" are paths and "a?b:c" has a query.

        :Example:

        >>> UriParser3986().parse_scheme("urn:book:fantasy:Hobbit")
        ('urn', 4)
        >>> UriParser3986().parse_scheme("./foo:bar")
        (None, 0)
        """
        for idx, char in enumerate(value):
            if char in self.scheme_stoppers:
                break
        else:
            return None, 0

        if char != ":":
            return None, 0

        scheme = value[:idx]
        if not is_valid_scheme(scheme):
            raise InvalidSchemeError(value, scheme)
        return scheme, idx + 1

    def parse_authority(self, value: str) -> Tuple[Optional[str], int]:
        """
        Returns the authority text (or None) and the index where it ends.

        An authority exists only when the text starts with "//",
        nothing that belongs to a path may precede it.
        """
        if not value.startswith("//"):
            return None, 0

        authority_end = len(value)
        for idx in range(2, len(value)):
            if value[idx] in self.authority_stoppers:
                authority_end = idx
                break
        return value[2:authority_end], authority_end

    def parse_authority_components(
        self, authority: str, parsed: ParsedUri, uri: str = ""
    ) -> None:
        host_start = 0
        userinfo_end = authority.find("@")
        if userinfo_end != -1:
            parsed.userinfo = decode_userinfo(authority[:userinfo_end], uri)
            host_start = userinfo_end + 1

        port_start = authority.find(":", host_start)
        if port_start != -1:
            parsed.port = self.parse_port(authority[port_start + 1 :], uri)
            parsed.has_port = True
            parsed.host = authority[host_start:port_start]
        else:
            parsed.host = authority[host_start:]

    def parse_port(self, value: str, uri: str = "") -> int:
        """
        :Example:

        >>> UriParser3986().parse_port("8080")
        8080
        >>> UriParser3986().parse_port("")
        0
        """
        port = 0
        for char in value:
            if not "0" <= char <= "9":
                raise InvalidPortError(uri or value, value)
            port = port * 10 + ord(char) - ord("0")
            if port > MAX_PORT:
                raise InvalidPortError(uri or value, value)
        return port

    @staticmethod
    def split_suffix(value: str, delimiter: str) -> Tuple[str, str]:
        """
        Cuts everything after the first `delimiter` off the text.

        :Example:

        >>> UriParser3986.split_suffix("/foo?bar#frag", "#")
        ('/foo?bar', 'frag')
        >>> UriParser3986.split_suffix("/foo", "?")
        ('/foo', '')
        """
        head, _, tail = value.partition(delimiter)
        return head, tail

    @staticmethod
    def parse_path(value: str) -> List[str]:
        """
        :Example:

        >>> UriParser3986.parse_path("/")
        ['']
        >>> UriParser3986.parse_path("foo/")
        ['foo', '']
        >>> UriParser3986.parse_path("")
        []
        """
        if value == "/":
            return [""]
        if not value:
            return []
        return value.split("/")


class Uri:
    """
    Reusable URI parser holding the result of its last successful parse.

    :Example:

    >>> uri = Uri()
    >>> uri.parse_from_string("http://www.example.com:8080/foo/bar")
    True
    >>> uri.host, uri.port, uri.path
    ('www.example.com', 8080, ['', 'foo', 'bar'])
    >>> uri.parse_from_string("http://www.example.com:spam/")
    False
    >>> uri.port
    8080
    """

    parser = UriParser3986()

    def __init__(self):
        self._parsed = ParsedUri()

    def parse_from_string(self, value: str) -> bool:
        """
        Parses `value` and keeps its components on success.

        A failed parse returns False and leaves the previous result untouched.
        """
        try:
            parsed = self.parser.parse(value)
        except UriParsingError as e:
            log.debug(f"Can't parse {value!r}: {e}")
            return False

        self._parsed = parsed
        return True

    @property
    def result(self) -> ParsedUri:
        return self._parsed.copy()

    @property
    def scheme(self) -> str:
        return self._parsed.scheme or ""

    @property
    def user_info(self) -> str:
        return self._parsed.userinfo or ""

    @property
    def host(self) -> str:
        return self._parsed.host

    @property
    def path(self) -> List[str]:
        return list(self._parsed.path)

    @property
    def has_port(self) -> bool:
        return self._parsed.has_port

    @property
    def port(self) -> int:
        return self._parsed.port

    @property
    def query(self) -> str:
        return self._parsed.query

    @property
    def fragment(self) -> str:
        return self._parsed.fragment

    def is_relative_reference(self) -> bool:
        return self._parsed.is_relative_reference()

    def contains_relative_path(self) -> bool:
        return self._parsed.contains_relative_path()

    def __repr__(self):
        return f"<Uri {self._parsed!r}>"
