"""
Test client-side rel filtering, RFC 7033 section 4.3.
"""

from webfingerclient.jrd import filter_links, parse_jrd

from dummy import NO_HREF_REL, PROFILE_PAGE_REL, jrd_payload


def test_no_rels_no_filtering():
    jrd = parse_jrd(jrd_payload('valid_jrd'))
    assert filter_links(jrd, None) is jrd
    assert filter_links(jrd, []) is jrd


def test_keeps_only_matching_links():
    jrd = parse_jrd(jrd_payload('valid_jrd'))
    filtered = filter_links(jrd, [ PROFILE_PAGE_REL ])

    assert filtered.links is not None
    assert len(filtered.links) == 1
    assert filtered.links[0].rel == PROFILE_PAGE_REL
    assert filtered.links[0].href == 'https://www.example.com/~bob/'
    assert filtered.subject == jrd.subject

    # the original is untouched
    assert jrd.links is not None
    assert len(jrd.links) == 2


def test_several_rels_keep_document_order():
    jrd = parse_jrd(jrd_payload('valid_jrd'))
    filtered = filter_links(jrd, [ NO_HREF_REL, PROFILE_PAGE_REL ])
    assert filtered.links is not None
    assert [ link.rel for link in filtered.links ] == [ PROFILE_PAGE_REL, NO_HREF_REL ]


def test_no_match_gives_empty_links():
    jrd = parse_jrd(jrd_payload('valid_jrd'))
    filtered = filter_links(jrd, [ 'http://webfinger.example/rel/non-existing-rel' ])
    assert filtered.links is not None
    assert len(filtered.links) == 0


def test_absent_links_stay_absent():
    jrd = parse_jrd(jrd_payload('minimal_jrd'))
    assert filter_links(jrd, [ PROFILE_PAGE_REL ]).links is None


def test_match_is_exact_and_case_sensitive():
    jrd = parse_jrd(b'''{ "links" : [
        { "rel" : "self" },
        { "rel" : "Self" },
        { "rel" : "self " },
        { "href" : "https://example.com/no-rel" }
    ] }''')
    filtered = filter_links(jrd, [ 'self' ])
    assert filtered.links is not None
    assert [ link.rel for link in filtered.links ] == [ 'self' ]
