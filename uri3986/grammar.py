"""
RFC 3986 grammar rules used to validate URI components
"""
import logging

from lark import Lark
from lark import Transformer
from lark.exceptions import UnexpectedInput

from .errors.parser import InvalidUserInfoError
from .settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
scheme_parser = Lark(
    r"""
        scheme:     SCHEME
        SCHEME:     /[A-Za-z][A-Za-z0-9+\-.]*/
    """,
    parser="lalr",
    start="scheme",
)

# userinfo    = *( unreserved / pct-encoded / sub-delims / ":" )
# pct-encoded = "%" HEXDIG HEXDIG
userinfo_parser = Lark(
    r"""
        userinfo:       (PCT_ENCODED | UNRESERVED | SUB_DELIMS | COLON)*
        PCT_ENCODED:    "%" HEXDIG HEXDIG
        HEXDIG:         /[0-9A-Fa-f]/
        UNRESERVED:     /[A-Za-z0-9\-._~]/
        SUB_DELIMS:     /[!$&'()*+,;=]/
        COLON:          ":"
    """,
    parser="lalr",
    start="userinfo",
    keep_all_tokens=True,
)


class UserInfoDecoder(Transformer):
    """
    Joins userinfo tokens back together, replacing every
    pct-encoded triplet with the character of that byte value
    """

    def PCT_ENCODED(self, token):
        return chr(int(token[1:], 16))

    def userinfo(self, children):
        return "".join(children)


def is_valid_scheme(value: str) -> bool:
    """
    :Example:

    >>> is_valid_scheme("x+")
    True
    >>> is_valid_scheme("0")
    False
    """
    try:
        scheme_parser.parse(value)
    except UnexpectedInput:
        return False
    return True


def decode_userinfo(value: str, uri: str = "") -> str:
    """
    :Example:

    >>> decode_userinfo("%41:b")
    'A:b'
    """
    if not value:
        return value

    try:
        tree = userinfo_parser.parse(value)
    except UnexpectedInput as e:
        log.trace(f"userinfo {value!r} rejected: {e}")  # type: ignore
        raise InvalidUserInfoError(uri or value, value) from e
    return UserInfoDecoder().transform(tree)
