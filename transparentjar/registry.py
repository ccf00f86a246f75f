'''
A holder for the default cookie jar, and the one rule for using it:
a new session that was not given a cookie_jar gets the default.
'''

import logging

import aiohttp

from . import cookies
from . import selector

LOGGER = logging.getLogger(__name__)


class DefaultJarRegistry:
    def __init__(self, jar_factory=cookies.make_jar):
        self.jar_factory = jar_factory
        self.jar = None

    def resolve(self, sel):
        if isinstance(sel, selector.Disabled):
            return None
        if isinstance(sel, selector.ExistingJar):
            return sel.jar
        return self.jar_factory(sel.options)

    def configure(self, *args, **kwargs):
        '''
        Change the default jar. Takes the same arguments as
        selector.parse_selector(). Sessions that already exist keep
        the jar they were built with.
        '''
        jar = self.resolve(selector.parse_selector(*args, **kwargs))
        self.jar = jar
        LOGGER.debug('default cookie jar is now %r', jar)

    def inject(self, kwargs):
        if self.jar is not None and kwargs.get('cookie_jar') is None:
            kwargs['cookie_jar'] = self.jar
        return kwargs

    def session(self, *args, **kwargs):
        return aiohttp.ClientSession(*args, **self.inject(kwargs))
