'''
Ways of saying which cookie jar new ClientSessions should get.

There are three cases:

Fresh(options) -- build a new jar with these options
Disabled()     -- give new sessions no jar from us at all
ExistingJar(jar) -- use a jar the caller already built

init() and friends also accept the looser forms: nothing, the string
'none', a dict, a list of (key, value) pairs or
a flat [key, value, ...] list, keyword args, or a jar.
parse_selector() turns those into one of the three.
'''

from collections import namedtuple
from collections.abc import Mapping

from aiohttp.abc import AbstractCookieJar

Fresh = namedtuple('Fresh', ['options'])
Disabled = namedtuple('Disabled', [])
ExistingJar = namedtuple('ExistingJar', ['jar'])

SELECTOR_TYPES = (Fresh, Disabled, ExistingJar)

# config key -> jar option
config_options = {
    'File': 'file',
    'Autosave': 'autosave',
    'Unsafe': 'unsafe',
    'QuoteCookie': 'quote_cookie',
    'TreatAsSecureOrigin': 'treat_as_secure_origin',
    'Dummy': 'dummy',
}


class InvalidSelector(ValueError):
    pass


def _check_names(options):
    for k in options:
        if not isinstance(k, str):
            raise InvalidSelector('cookie jar option names must be strings, not {!r}'.format(k))
    return options


def _is_pair(p):
    return isinstance(p, (list, tuple)) and len(p) == 2


def _from_pairs(pairs):
    '''
    Either [(key, value), ...] or the flat [key, value, key, value, ...].
    '''
    if all(_is_pair(p) for p in pairs):
        return _check_names(dict(pairs))

    if len(pairs) % 2 == 0 and all(isinstance(k, str) for k in pairs[::2]):
        return dict(zip(pairs[::2], pairs[1::2]))

    raise InvalidSelector('expected (key, value) pairs or a flat key, value list, got {!r}'.format(pairs))


def _check_selector(sel):
    if isinstance(sel, Fresh):
        if not isinstance(sel.options, Mapping):
            raise InvalidSelector('Fresh options must be a mapping, not {!r}'.format(sel.options))
        return Fresh(_check_names(dict(sel.options)))
    if isinstance(sel, ExistingJar) and not isinstance(sel.jar, AbstractCookieJar):
        raise InvalidSelector('not a cookie jar: {!r}'.format(sel.jar))
    return sel


def parse_selector(*args, **kwargs):
    if kwargs:
        if args:
            raise InvalidSelector('pass either one positional selector or keyword options, not both')
        return Fresh(_check_names(dict(kwargs)))

    if not args:
        return Fresh({})
    if len(args) > 1:
        raise InvalidSelector('expected at most one positional selector, got {}'.format(len(args)))

    arg = args[0]
    if isinstance(arg, SELECTOR_TYPES):
        return _check_selector(arg)
    if arg is None or arg == 'none':
        return Disabled()
    if isinstance(arg, AbstractCookieJar):
        return ExistingJar(arg)
    if isinstance(arg, Mapping):
        return Fresh(_check_names(dict(arg)))
    if isinstance(arg, (list, tuple)):
        return Fresh(_from_pairs(arg))

    raise InvalidSelector('not a cookie jar selector: {!r}'.format(arg))


def from_config(section):
    '''
    Turn the CookieJar section of the config into a selector.
    '''
    section = section or {}

    default = str(section.get('Default') or 'fresh').lower()
    if default == 'none':
        return Disabled()
    if default != 'fresh':
        raise InvalidSelector('CookieJar.Default must be fresh or none, not {!r}'.format(default))

    options = {}
    for key, option in config_options.items():
        value = section.get(key)
        if value is not None:
            options[option] = value
    return Fresh(options)
