"""
The ways a WebFinger lookup can fail.

Transport-level problems (connection refused, TLS, timeouts) are not in here: they
are raised by the WebClient as whatever the underlying HTTP library raises, so the
caller can inspect the actual cause.
"""


class WebFingerClientException(Exception):
    """
    Common superclass of all failures the WebFinger client itself detects.
    """
    def __init__(self, resource_uri: str, msg: str | None = None):
        super().__init__(msg or resource_uri)
        self.resource_uri = resource_uri


class UnresolvableIdentifierException(WebFingerClientException):
    """
    Raised when no host can be determined for the identifier. No HTTP request
    has been made when this is raised.
    """
    def __init__(self, resource_uri: str):
        super().__init__(resource_uri, f'Cannot determine WebFinger host for: "{ resource_uri }"')


class ResourceNotFoundException(WebFingerClientException):
    """
    Raised when the WebFinger server responded with anything other than a 2xx status.
    RFC 7033 does not give the client anything useful to do with the difference
    between, say, 404 and 503, so they all end up here.
    """
    def __init__(self, resource_uri: str, http_status: int, uri: str):
        super().__init__(resource_uri, f'WebFinger query for "{ resource_uri }" failed with HTTP status { http_status }: { uri }')
        self.http_status = http_status
        self.uri = uri


class MalformedResponseException(WebFingerClientException):
    """
    Raised when the server responded successfully, but the payload could not be
    decoded as a JRD.
    """
    def __init__(self, resource_uri: str, reason: str):
        super().__init__(resource_uri, f'Malformed JRD in response for "{ resource_uri }": { reason }')
        self.reason = reason
