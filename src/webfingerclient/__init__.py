"""
A WebFinger (RFC 7033) client: find the JRD for a resource identifier.
"""

from .client import WebFingerClient, lookup
from .errors import (
    MalformedResponseException,
    ResourceNotFoundException,
    UnresolvableIdentifierException,
    WebFingerClientException
)
from .identifier import IdentifierKind, ParsedIdentifier, parse_identifier, webfinger_host_for
from .jrd import Link, ResourceDescriptor, filter_links, parse_jrd
from .request import JRD_MEDIA_TYPE, construct_webfinger_request_for, construct_webfinger_uri_for
from .web import HttpRequest, HttpResponse, HttpxWebClient, WebClient
