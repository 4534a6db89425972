"""
The HTTP side of things: what we send, what we get back, and who does the sending.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import httpx
from multidict import MultiDict

from .reporting import trace
from .utils import WEBFINGERCLIENT_VERSION, ParsedNonAcctUri, ParsedUri

DEFAULT_TIMEOUT = 10.0 # seconds
DEFAULT_USER_AGENT = f'webfingerclient/{ WEBFINGERCLIENT_VERSION }'


@dataclass
class HttpRequest:
    """
    Captures an HTTP request.
    """
    uri: str
    method: str = 'GET'
    accept_header : str | None = None


    @property
    def parsed_uri(self) -> ParsedNonAcctUri:
        parsed = ParsedUri.parse(self.uri)
        if not isinstance(parsed, ParsedNonAcctUri):
            raise ValueError('Not a valid HTTP URI:', self.uri)
        return parsed


@dataclass
class HttpResponse:
    """
    Captures the response of an HTTP request.
    """
    http_status : int
    response_headers: MultiDict = field(default_factory=MultiDict) # keys are lowercased
    payload : bytes | None = None


    def content_type(self) -> str | None:
        return self.response_headers.get('content-type')


    def is_success(self) -> bool:
        return 200 <= self.http_status < 300


class WebClient(ABC):
    """
    Knows how to perform an HTTP request. This is the only place where we touch
    the network, so tests and applications with their own HTTP setup substitute
    their own.
    """
    @abstractmethod
    def http(self, request: HttpRequest) -> HttpResponse:
        """
        Perform the HTTP request and return the response, whatever its status.
        Redirects, TLS and timeouts are the WebClient's business.
        Raises whatever the underlying HTTP library raises if no response could be obtained.
        """
        ...


class HttpxWebClient(WebClient):
    """
    WebClient implemented with httpx.
    """
    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = True,
        follow_redirects: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None
    ):
        """
        timeout: seconds until connecting or reading gives up
        verify: verify the server's TLS certificate
        follow_redirects: transparently follow HTTP redirects
        user_agent: value of the User-Agent header
        transport: alternate httpx transport, e.g. httpx.MockTransport
        """
        self._timeout = timeout
        self._verify = verify
        self._follow_redirects = follow_redirects
        self._user_agent = user_agent
        self._transport = transport


    # Python 3.12 @override
    def http(self, request: HttpRequest) -> HttpResponse:
        trace( f'Performing HTTP { request.method } on { request.uri }')

        headers = { 'User-Agent': self._user_agent }
        if request.accept_header:
            headers['Accept'] = request.accept_header

        with httpx.Client(
            timeout=self._timeout,
            verify=self._verify,
            follow_redirects=self._follow_redirects,
            transport=self._transport
        ) as httpx_client:
            httpx_request = httpx_client.build_request(request.method, request.uri, headers=headers)
            httpx_response = httpx_client.send(httpx_request) # may raise httpx.TransportError

            response_headers : MultiDict = MultiDict()
            for key, value in httpx_response.headers.multi_items():
                response_headers.add(key.lower(), value)
            ret = HttpResponse(httpx_response.status_code, response_headers, httpx_response.read())

        trace( f'HTTP query returns status { ret.http_status }, content type { ret.content_type() }')
        return ret
