"""
Perform WebFinger lookups.
"""

from .errors import ResourceNotFoundException
from .identifier import parse_identifier
from .jrd import ResourceDescriptor, filter_links, parse_jrd
from .reporting import trace
from .request import construct_webfinger_request_for
from .web import HttpxWebClient, WebClient


class WebFingerClient:
    """
    A WebFinger client. It holds no state other than the WebClient it uses to talk
    HTTP, so one instance can be used for any number of lookups.
    """
    def __init__(self, web_client: WebClient | None = None):
        self._web_client = web_client or HttpxWebClient()


    @property
    def web_client(self) -> WebClient:
        return self._web_client


    def lookup(
        self,
        resource_uri: str,
        rels: list[str] | None = None,
        hostname: str | None = None
    ) -> ResourceDescriptor:
        """
        Perform a WebFinger query for the provided resource and return the JRD.
        resource_uri: the identifier to look up, e.g. 'acct:bob@example.com', 'bob@example.com'
           or 'https://example.com/~bob' (not escaped)
        rels: if given, only ask for, and only return, links with one of these rels
        hostname: if given, ask this host instead of the one responsible for the resource
        raises UnresolvableIdentifierException: no host could be determined. Nothing was sent.
        raises ResourceNotFoundException: the server responded with a non-2xx status
        raises MalformedResponseException: the server responded with something that isn't a JRD
        Transport problems are raised by the WebClient unchanged.
        """
        if not hostname:
            hostname = parse_identifier(resource_uri).authority # may raise
        request = construct_webfinger_request_for(resource_uri, rels, hostname)

        response = self._web_client.http(request)
        if not response.is_success():
            raise ResourceNotFoundException(resource_uri, response.http_status, request.uri)

        jrd = parse_jrd(response.payload or b'', resource_uri)
        trace(f'Obtained JRD for "{ resource_uri }" with { len(jrd.links) if jrd.links is not None else "no" } links')
        return filter_links(jrd, rels)


def lookup(resource_uri: str, rels: list[str] | None = None) -> ResourceDescriptor:
    """
    Perform a WebFinger query with a default WebFingerClient.
    See WebFingerClient.lookup.
    """
    return WebFingerClient().lookup(resource_uri, rels)
