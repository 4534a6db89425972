"""
The JSON Resource Descriptor (JRD) returned by WebFinger servers, see RFC 7033 section 4.4.

We are on the receiving end here, so we are lenient: members we don't know are ignored,
and if a titles or properties object names the same key twice, the last one wins.
"""

import msgspec
import msgspec.structs
from langcodes import closest_match

from .errors import MalformedResponseException
from .utils import rfc5646_language_tag_parse_validate

UNDETERMINED_LANGUAGE = 'und'


class Link(msgspec.Struct, frozen=True):
    """
    A link relation object in a JRD.
    rel is required by RFC 7033, but we keep links that lack it; they never match a rel filter.
    """
    rel: str | None = None
    type: str | None = None
    href: str | None = None
    titles: dict[str, str] | None = None
    properties: dict[str, str | None] | None = None


    def title_for(self, language: str | None = None) -> str | None:
        """
        Pick the title to show to somebody who speaks the provided language.
        Tries the exact language tag first, then the closest match among the valid
        language tags, then the "und" title.
        language: an RFC 5646 language tag such as "en-US", or None for "no preference"
        return: the title, or None if there isn't a suitable one
        """
        if not self.titles:
            return None

        if language:
            if language in self.titles:
                return self.titles[language]

            if rfc5646_language_tag_parse_validate(language):
                supported = [
                    tag for tag in self.titles
                    if tag != UNDETERMINED_LANGUAGE and rfc5646_language_tag_parse_validate(tag)
                ]
                if supported:
                    match, _ = closest_match(language, supported)
                    if match in self.titles:
                        return self.titles[match]

        return self.titles.get(UNDETERMINED_LANGUAGE)


class ResourceDescriptor(msgspec.Struct, frozen=True):
    """
    A JRD. Members absent from the document are None, not empty.
    """
    subject: str | None = None
    aliases: tuple[str, ...] | None = None
    properties: dict[str, str | None] | None = None
    links: tuple[Link, ...] | None = None


    def links_with_rel(self, rel: str) -> list[Link]:
        """
        All links with this rel, in document order.
        """
        if not self.links:
            return []
        return [ link for link in self.links if link.rel == rel ]


    def link_with_rel(self, rel: str) -> Link | None:
        """
        The first link with this rel, if any.
        """
        found = self.links_with_rel(rel)
        return found[0] if found else None


    def property_value(self, name: str) -> str | None:
        if not self.properties:
            return None
        return self.properties.get(name)


_DECODER = msgspec.json.Decoder(ResourceDescriptor)


def parse_jrd(payload: bytes | str, resource_uri: str = '') -> ResourceDescriptor:
    """
    Decode a JRD.
    payload: the JSON text, typically the body of the HTTP response
    resource_uri: the resource the JRD was requested for, for error reporting only
    raises MalformedResponseException: if the payload isn't UTF-8 JSON, or isn't shaped like a JRD
    """
    try:
        return _DECODER.decode(payload)
    except (msgspec.DecodeError, UnicodeDecodeError) as exc: # ValidationError is a subclass of DecodeError
        raise MalformedResponseException(resource_uri, str(exc)) from exc


def filter_links(jrd: ResourceDescriptor, rels: list[str] | None) -> ResourceDescriptor:
    """
    Only keep the links whose rel is one of the provided rels. Servers are allowed to
    ignore the rel query parameters (RFC 7033 section 4.3), so we do it ourselves.

    If there are no rels, everything is kept. If the JRD has no links at all, it still
    doesn't have any afterwards; if it has links but none match, the result has an
    empty tuple of links.
    """
    if not rels or jrd.links is None:
        return jrd
    return msgspec.structs.replace(jrd, links=tuple( link for link in jrd.links if link.rel in rels ))
