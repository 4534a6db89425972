"""
Test how log messages are put together.
"""

import logging

import pytest

from webfingerclient.reporting import error, fatal, info, trace


def test_components_joined(caplog):
    with caplog.at_level(logging.INFO, logger='webfingerclient'):
        info('Looking up', 'acct:bob@example.com', 'with rel', None)
    assert caplog.messages == [ 'Looking up acct:bob@example.com with rel <undef>' ]


def test_trace_only_at_debug(caplog):
    with caplog.at_level(logging.INFO, logger='webfingerclient'):
        trace('Not shown')
    assert caplog.messages == []

    with caplog.at_level(logging.DEBUG, logger='webfingerclient'):
        trace('Shown')
    assert caplog.messages == [ 'Shown' ]


def _raise_and_catch() -> Exception:
    try:
        raise OSError('Network is unreachable')
    except OSError as e:
        return e


def test_traceback_only_at_debug(caplog):
    exc = _raise_and_catch()

    with caplog.at_level(logging.ERROR, logger='webfingerclient'):
        error('Lookup failed:', exc)
    assert caplog.messages == [ 'Lookup failed: Network is unreachable' ]

    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger='webfingerclient'):
        error('Lookup failed:', exc)
    assert len(caplog.messages) == 1
    assert caplog.messages[0].startswith('Lookup failed: Network is unreachable\nTraceback')
    assert 'OSError: Network is unreachable' in caplog.messages[0]


def test_fatal_exits(caplog):
    with caplog.at_level(logging.CRITICAL, logger='webfingerclient'):
        with pytest.raises(SystemExit) as excinfo:
            fatal('Giving up')
    assert excinfo.value.code == 255
    assert caplog.messages == [ 'Giving up' ]
