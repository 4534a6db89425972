"""
Utility functions
"""

from abc import ABC, abstractmethod
import importlib.metadata
import pkgutil
import re
from types import ModuleType
from typing import List, Optional
from urllib.parse import ParseResult, parse_qs, urlparse

from langcodes import Language, LanguageTagError


def _version(default_version="0.0.0"):
    try:
        return importlib.metadata.version("webfingerclient")
    except importlib.metadata.PackageNotFoundError:
        return default_version

WEBFINGERCLIENT_VERSION = _version()

# user@host, splitting at the last @. Host is whatever follows, as long as it cannot be
# mistaken for a path, query or fragment: IP literals and percent-encoded labels pass.
USER_HOST_REGEX = re.compile(r"^(\S+)@([^@/?#\s]+)$")
WHITESPACE_REGEX = re.compile(r"\s")

# URI schemes whose scheme-specific part is user@host rather than //authority/path
ACCT_LIKE_SCHEMES = ( 'acct', 'mailto' )


class ParsedUri(ABC):
    """
    An abstract data type for URIs that can tell us which host is responsible for them.
    acct: and mailto: URIs do not have an authority component, so they are so different
    from "normal" URIs that we have subtypes.
    """
    @staticmethod
    def parse(url: str) -> Optional['ParsedUri']:
        """
        The equivalent of urlparse(str), but returns None if this isn't an absolute URI
        that names a host.
        """
        try:
            parsed : ParseResult = urlparse(url)
            parsed.port # pylint: disable=pointless-statement
        except ValueError: # unbalanced brackets in an IPv6 literal, or a port that is not a number 0-65535
            return None

        if not len(parsed.scheme):
            return None

        if parsed.scheme in ACCT_LIKE_SCHEMES:
            # urlparse already removed ?query and #fragment, which matters for mailto:
            if match := USER_HOST_REGEX.match(parsed.path):
                return ParsedAcctUri(parsed.scheme, match[1], match[2])
            return None

        if not len(parsed.netloc):
            return None
        if not parsed.hostname or WHITESPACE_REGEX.search(parsed.netloc.rpartition('@')[2]):
            return None
        return ParsedNonAcctUri(parsed.scheme, parsed.netloc, parsed.path, parsed.params, parsed.query, parsed.fragment)


    @property
    @abstractmethod
    def scheme(self) -> str:
        ...


    @property
    @abstractmethod
    def authority(self) -> str:
        """
        The host, plus port if given, responsible for this URI.
        """
        ...


    @property
    @abstractmethod
    def uri(self) -> str:
        ...


class ParsedNonAcctUri(ParsedUri):
    """
    ParsedUris that are "normal" URIs such as http URIs.
    """
    def __init__(self, scheme: str, netloc: str, path: str, params: str, query: str, fragment: str):
        self._scheme = scheme
        self._netloc = netloc
        self._path = path
        self._params = params
        self._query = query
        self._fragment = fragment
        self._query_params : dict[str,list[str]] | None = None


    # Python 3.12 @override
    @property
    def scheme(self) -> str:
        return self._scheme


    @property
    def netloc(self) -> str:
        return self._netloc


    # Python 3.12 @override
    @property
    def authority(self) -> str:
        # netloc may carry user:password@ in front; not our business
        return self._netloc.rpartition('@')[2]


    @property
    def query(self) -> str:
        return self._query


    # Python 3.12 @override
    @property
    def uri(self) -> str:
        ret = f'{ self._scheme }:'
        if self._netloc:
            ret += f'//{ self._netloc}'
        ret += self._path
        if self._params:
            ret += f';{ self._params}'
        if self._query:
            ret += f'?{ self._query }'
        if self._fragment:
            ret += f'#{ self._fragment }'
        return ret


    def has_query_param(self, name: str) -> bool:
        self._parse_query_params()
        if self._query_params:
            return name in self._query_params
        return False


    def query_param_single(self, name: str) -> str | None:
        self._parse_query_params()
        if self._query_params:
            found = self._query_params.get(name)
            if found:
                match len(found):
                    case 1:
                        return found[0]
                    case _:
                        raise RuntimeError(f'Query has {len(found)} values for query parameter {name}')
        return None


    def query_param_mult(self, name: str) -> List[str] | None:
        self._parse_query_params()
        if self._query_params:
            return self._query_params.get(name)
        return None


    # Python 3.12 @override
    def __repr__(self):
        return f'ParsedNonAcctUri({ self.uri })'


    def _parse_query_params(self):
        if self._query_params is not None:
            return
        if self._query:
            self._query_params = parse_qs(self._query)
        else:
            self._query_params = {}


class ParsedAcctUri(ParsedUri):
    """
    ParsedUris that are acct: or mailto: URIs
    """
    def __init__(self, scheme: str, user: str, host: str):
        self._scheme = scheme
        self._user = user
        self._host = host


    # Python 3.12 @override
    @property
    def scheme(self) -> str:
        return self._scheme


    @property
    def user(self) -> str:
        return self._user


    @property
    def host(self) -> str:
        return self._host


    # Python 3.12 @override
    @property
    def authority(self) -> str:
        return self._host


    # Python 3.12 @override
    @property
    def uri(self) -> str:
        return f'{ self._scheme }:{ self.user }@{ self.host }'


    # Python 3.12 @override
    def __repr__(self):
        return f'ParsedAcctUri({ self.uri })'


def uri_scheme(candidate: str) -> str | None:
    """
    Return the (lower-cased) scheme of the candidate URI, or None if it does not have one.
    """
    try:
        return urlparse(candidate).scheme or None
    except ValueError:
        return None


def find_submodules(package: ModuleType) -> list[str]:
    """
    Find all submodules in the named package

    package: the package
    return: array of module names
    """
    ret = []
    for _, modname, _ in pkgutil.iter_modules(package.__path__):
        ret.append(modname)
    return ret


def rfc5646_language_tag_parse_validate(candidate: str) -> str | None:
    """
    Validate a language tag according to RFC 5646, see https://www.rfc-editor.org/rfc/rfc5646.html
    return: string if valid, None otherwise
    """
    try:
        if Language.get(candidate).is_valid():
            return candidate
    except LanguageTagError:
        pass
    return None


def format_name_value_string(data: dict[str,str | None]) -> str:
    """
    Format name-value pairs to a string similar to how an HTML definition list would
    do it.
    data: the name-value pairs
    return: formatted string
    """
    if not data:
        return ''
    line_width = 120
    col1_width = len(max(data, key=len)) + 1
    ret = ''
    line = ''
    for key, value in data.items():
        line = ("{:<" + str(col1_width) + "}").format(key)
        if not value:
            line += '<no value>\n'
            ret += line
        elif isinstance(value, str):
            for word in value.split():
                if len(line)+1+len(word) <= line_width:
                    line += ' '
                else:
                    ret += line
                    ret += '\n'
                    line = (col1_width+1)*' '
                line += word
            if len(line) > col1_width+1:
                ret += line
                ret += '\n'
        else:
            line += ' ' + str(value)
            ret += line
            ret += '\n'

    return ret
