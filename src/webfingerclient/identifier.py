"""
Figure out which host to ask about a resource identifier.

See RFC 7033 section 4 and 8. People hand us identifiers in any of these shapes:

* ``bob@example.com`` -- no scheme at all, looks like an e-mail address
* ``acct:bob@example.com`` or ``mailto:bob@example.com``
* ``https://example.com/~bob`` or any other URI with an authority component

The host is never normalized: no lower-casing, no IDNA conversion, percent-encoding
is kept. The server gets the original identifier in the resource parameter anyway.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import UnresolvableIdentifierException
from .reporting import trace
from .utils import USER_HOST_REGEX, ParsedAcctUri, ParsedUri, uri_scheme


class IdentifierKind(Enum):
    BARE_ACCOUNT = 'bare'
    ACCOUNT_URI = 'account-uri'
    URI = 'uri'


@dataclass(frozen=True)
class ParsedIdentifier:
    """
    A resource identifier, together with the authority its WebFinger server lives at.
    """
    identifier: str
    kind: IdentifierKind
    authority: str
    user: str | None = None # only for the account-like kinds


def parse_identifier(identifier: str) -> ParsedIdentifier:
    """
    Classify the identifier and determine its authority.
    identifier: the identifier as given by the user
    return: the ParsedIdentifier
    raises UnresolvableIdentifierException: if there is no way to tell which host to ask
    """
    parsed = ParsedUri.parse(identifier)
    if parsed is None:
        # a bare user@host is fine, but something like xmpp:bob@example.com is not
        if uri_scheme(identifier) is None and (match := USER_HOST_REGEX.match(identifier)):
            ret = ParsedIdentifier(identifier, IdentifierKind.BARE_ACCOUNT, match[2], match[1])
        else:
            raise UnresolvableIdentifierException(identifier)

    elif isinstance(parsed, ParsedAcctUri):
        ret = ParsedIdentifier(identifier, IdentifierKind.ACCOUNT_URI, parsed.authority, parsed.user)

    else:
        ret = ParsedIdentifier(identifier, IdentifierKind.URI, parsed.authority)

    if not ret.authority:
        raise UnresolvableIdentifierException(identifier)

    trace(f'Identifier "{ identifier }" resolves to host "{ ret.authority }" ({ ret.kind.value })')
    return ret


def webfinger_host_for(identifier: str) -> str:
    """
    Convenience function that only returns the authority (host, or host:port) to send
    the WebFinger query for this identifier to.
    """
    return parse_identifier(identifier).authority
