'''
Building the cookie jars that get handed out to new ClientSessions.

aiohttp's CookieJar keeps everything in memory. PersistentCookieJar
adds a file it reads at startup, and optionally writes back when the
process exits, so a script run twice sees the same cookies.

A dummy jar (aiohttp.DummyCookieJar) drops every cookie, which is what
you want when you do not want cookies at all but some library insists
on a jar.
'''

import atexit
import logging
import os

import aiohttp

LOGGER = logging.getLogger(__name__)


class PersistentCookieJar(aiohttp.CookieJar):
    '''
    CookieJar backed by a file, in aiohttp's own save/load format.

    With autosave, an atexit handler holds on to the jar until the
    process exits, even after init() has moved on to another default:
    sessions built earlier may still be using it.
    '''
    def __init__(self, *, file=None, autosave=False, **kwargs):
        if autosave and file is None:
            raise ValueError('autosave needs a file to save to')

        super().__init__(**kwargs)

        self.file = os.path.expanduser(file) if file is not None else None
        self.autosave = bool(autosave)

        if self.file is not None and os.path.exists(self.file):
            self.load()

        if self.autosave:
            atexit.register(self._save_at_exit)

    def _path(self, file_path):
        file_path = file_path or self.file
        if file_path is None:
            raise ValueError('no file given and this cookie jar has none')
        return file_path

    def save(self, file_path=None):
        file_path = self._path(file_path)
        super().save(file_path)
        LOGGER.debug('saved %d cookies to %s', len(self), file_path)

    def load(self, file_path=None):
        file_path = self._path(file_path)
        super().load(file_path)
        LOGGER.debug('loaded %d cookies from %s', len(self), file_path)

    def _save_at_exit(self):
        if self.autosave:
            self.save()


def make_jar(options=None):
    '''
    Build a jar from a dict of options.

    dummy=True gives a DummyCookieJar; file= or autosave= give a
    PersistentCookieJar; anything else is passed to aiohttp.CookieJar,
    which raises TypeError for options it does not know.
    '''
    options = dict(options or {})

    if options.pop('dummy', False):
        if options:
            raise ValueError('a dummy cookie jar takes no other options, got {}'.format(sorted(options)))
        return aiohttp.DummyCookieJar()

    if 'file' in options or 'autosave' in options:
        return PersistentCookieJar(**options)

    return aiohttp.CookieJar(**options)
