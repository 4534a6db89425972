"""
Reporting functionality
"""

import logging
import logging.config
import traceback

LOGGING_CONFIG = {
    'version'                  : 1,
    'disable_existing_loggers' : False,
    'formatters'               : {
        'standard' : {
            'format' : '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            'datefmt' : '%Y-%m-%dT%H:%M:%SZ'
        },
    },
    'handlers' : {
        'default' : {
            'level'     : 'DEBUG',
            'formatter' : 'standard',
            'class'     : 'logging.StreamHandler',
            'stream'    : 'ext://sys.stderr'
        }
    },
    'loggers' : {
        '' : { # root logger -- set level to most output that can happen
            'handlers'  : [ 'default' ],
            'level'     : 'WARNING',
            'propagate' : True
        }
    }
}
LOG = logging.getLogger( 'webfingerclient' )


def set_reporting_level(n_verbose_flags: int) :
    """
    Install the console logging configuration and pick the level for our logger.
    Only the CLI does this; as a library we leave the logging setup to the application.
    """
    logging.config.dictConfig(LOGGING_CONFIG)
    if n_verbose_flags == 1:
        LOG.setLevel(logging.INFO)
    elif n_verbose_flags >= 2:
        LOG.setLevel(logging.DEBUG)
    else:
        LOG.setLevel(logging.NOTSET)


def trace(*args):
    """
    Emit a trace message, e.g. the steps of a lookup.

    args: the message or message components
    """
    if LOG.isEnabledFor(logging.DEBUG):
        LOG.debug(_construct_msg(False, args))


def info(*args):
    if LOG.isEnabledFor(logging.INFO):
        LOG.info(_construct_msg(False, args))


def warning(*args):
    if LOG.isEnabledFor(logging.WARNING):
        LOG.warning(_construct_msg(LOG.isEnabledFor(logging.DEBUG), args))


def error(*args):
    """
    Emit an error message. At trace level, a trailing exception argument brings its traceback.

    args: the message or message components
    """
    if LOG.isEnabledFor(logging.ERROR):
        LOG.error(_construct_msg(LOG.isEnabledFor(logging.DEBUG), args))


def fatal(*args):
    """
    Emit a fatal error message and exit with code 255.

    args: the message or message components
    """
    if args and LOG.isEnabledFor(logging.CRITICAL):
        LOG.critical(_construct_msg(LOG.isEnabledFor(logging.DEBUG), args))

    raise SystemExit(255) # Don't call exit() because that will close stdin


def _construct_msg(with_tb: bool, args: tuple) -> str:
    """
    Join the message components into one string.

    with_tb: append the traceback if an exception is the last component
    """
    ret = ' '.join( '<undef>' if a is None else str(a) for a in args )
    if with_tb and args and isinstance(args[-1], Exception):
        last = args[-1]
        ret += '\n' + ''.join(traceback.format_exception(type(last), last, last.__traceback__))
    return ret
