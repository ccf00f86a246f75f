'''
Process-wide default cookie jar for aiohttp.ClientSession.

Some libraries build their own ClientSession and never let you at it.
After init() has been called, every ClientSession constructed without
an explicit cookie_jar gets the current default jar instead of a
private empty one.

    init()                                   # empty in-memory jar
    init(file='~/.cookies.dat', autosave=True)  # persistent jar
    init('none')                             # stop handing out jars

The first init() wraps ClientSession.__init__; there is no way to
unwrap it. Calling init() again only changes the jar that sessions
constructed from then on will get.

Code that can choose how sessions get built can call client_session()
instead, which does the same thing without relying on the wrapper.
'''

import functools
import logging

import aiohttp

from . import config
from . import registry
from . import selector

LOGGER = logging.getLogger(__name__)

default_registry = registry.DefaultJarRegistry()

_initialized = False
_original_init = None


def install():
    global _initialized, _original_init
    if _initialized:
        return

    original = aiohttp.ClientSession.__init__

    @functools.wraps(original)
    def __init__(self, *args, **kwargs):
        default_registry.inject(kwargs)
        original(self, *args, **kwargs)

    _original_init = original
    aiohttp.ClientSession.__init__ = __init__
    _initialized = True
    LOGGER.debug('wrapped aiohttp.ClientSession.__init__')


def init(*args, **kwargs):
    # configure first: a bad selector or a jar that fails to build
    # must leave everything as it was
    default_registry.configure(*args, **kwargs)
    install()


def init_from_config(conf=None):
    if conf is None:
        section = config.read('CookieJar')
    else:
        section = conf.get('CookieJar')
    init(selector.from_config(section))


def client_session(*args, **kwargs):
    return default_registry.session(*args, **kwargs)


def current_jar():
    return default_registry.jar


def is_installed():
    return _initialized
