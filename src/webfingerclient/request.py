"""
Construct WebFinger queries, see RFC 7033 section 4.1 and 4.2.
"""

from urllib.parse import quote

from multidict import MultiDict

from .identifier import webfinger_host_for
from .web import HttpRequest

WEBFINGER_PATH = '/.well-known/webfinger'
JRD_MEDIA_TYPE = 'application/jrd+json'


def _encode_query(params: MultiDict) -> str:
    # Nothing is safe: '@', ':' and '/' in the resource or a rel URI all get escaped
    return '&'.join( f'{ key }={ quote(value, safe="") }' for key, value in params.items() )


def construct_webfinger_uri_for(
    resource_uri: str,
    rels: list[str] | None = None,
    hostname: str | None = None
) -> str:
    """
    Helper method to construct the WebFinger URI from a resource URI, an optional list
    of rels to ask for, and (if given) a non-default hostname.
    The query always goes to https, whatever the scheme of the resource: WebFinger
    does not do plaintext.
    raises UnresolvableIdentifierException: if no hostname was given and it cannot be determined
    """
    if not hostname:
        hostname = webfinger_host_for(resource_uri)

    params : MultiDict = MultiDict()
    params.add('resource', resource_uri)
    for rel in rels or []:
        params.add('rel', rel)

    return f'https://{ hostname }{ WEBFINGER_PATH }?{ _encode_query(params) }'


def construct_webfinger_request_for(
    resource_uri: str,
    rels: list[str] | None = None,
    hostname: str | None = None
) -> HttpRequest:
    """
    Same as construct_webfinger_uri_for, but returns the complete HttpRequest.
    """
    return HttpRequest(
        construct_webfinger_uri_for(resource_uri, rels, hostname),
        'GET',
        JRD_MEDIA_TYPE
    )
