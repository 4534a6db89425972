"""
Look up a resource with WebFinger and print what the server says about it
"""

from argparse import ArgumentParser, Namespace, _SubParsersAction

from webfingerclient.client import WebFingerClient
from webfingerclient.errors import WebFingerClientException
from webfingerclient.jrd import Link, ResourceDescriptor
from webfingerclient.reporting import error, info, warning
from webfingerclient.utils import format_name_value_string
from webfingerclient.web import DEFAULT_TIMEOUT, HttpxWebClient, WebClient


def run(parser: ArgumentParser, args: Namespace, remaining: list[str]) -> int:
    """
    Run this command.
    """
    if len(remaining):
        parser.print_help()
        return 0

    client = WebFingerClient(create_web_client(args))
    info(f'Looking up "{ args.resource }"')
    try:
        jrd = client.lookup(args.resource, args.rel, args.hostname)

    except WebFingerClientException as e:
        error(str(e))
        return 1

    print(format_jrd(jrd, args.language), end='')
    return 0


def create_web_client(args: Namespace) -> WebClient:
    """
    Create the WebClient as configured on the command line.
    """
    if args.insecure:
        warning("Not verifying the server's TLS certificate")
    return HttpxWebClient(
        timeout=args.timeout,
        verify=not args.insecure,
        follow_redirects=not args.no_follow_redirects
    )


def format_jrd(jrd: ResourceDescriptor, language: str | None = None) -> str:
    """
    Format the JRD for humans.
    """
    jrd_data : dict[str, str | None] = {}
    if jrd.subject is not None:
        jrd_data['Subject:'] = jrd.subject
    if jrd.aliases is not None:
        jrd_data['Aliases:'] = ' '.join(jrd.aliases)
    ret = format_name_value_string(jrd_data)

    if jrd.properties:
        ret += 'Properties:\n'
        ret += _indent(format_name_value_string(jrd.properties))

    if jrd.links is not None:
        ret += f'Links: { len(jrd.links) }\n'
        for link in jrd.links:
            ret += _indent(format_name_value_string(_link_data(link, language)))
            ret += '\n'
    return ret


def _link_data(link: Link, language: str | None) -> dict[str, str | None]:
    ret : dict[str, str | None] = { 'rel:' : link.rel }
    if link.type is not None:
        ret['type:'] = link.type
    if link.href is not None:
        ret['href:'] = link.href
    title = link.title_for(language)
    if title is not None:
        ret['title:'] = title
    if link.properties:
        for key, value in link.properties.items():
            ret[key] = value
    return ret


def _indent(text: str) -> str:
    return ''.join( f'    { line }\n' for line in text.splitlines() )


def add_sub_parser(parent_parser: _SubParsersAction, cmd_name: str) -> ArgumentParser:
    """
    Add command-line options for this sub-command
    parent_parser: the parent argparse parser
    cmd_name: name of this command
    """
    parser = parent_parser.add_parser( cmd_name, help='Look up a resource with WebFinger')
    parser.add_argument('resource', help='The resource to look up, e.g. acct:bob@example.com, bob@example.com or https://example.com/~bob')
    parser.add_argument('--rel', action='append', help='Only ask for links with this rel. May be repeated')
    parser.add_argument('--hostname', help='Ask this host instead of the one determined from the resource')
    parser.add_argument('--language', help='Preferred language tag for link titles, e.g. en-US')
    parser.add_argument('--timeout', type=float, default=DEFAULT_TIMEOUT, help='Timeout in seconds for the HTTP request')
    parser.add_argument('--insecure', action='store_true', help='Do not verify the TLS certificate of the server')
    parser.add_argument('--no-follow-redirects', action='store_true', help='Do not follow HTTP redirects')

    return parser
