import logging
import yaml

LOGGER = logging.getLogger(__name__)

'''
default_yaml exists to both set defaults and to document all
possible configuration variables.
'''

default_yaml = '''
CookieJar:
  # fresh: build a new jar for sessions to share
  # none: do not hand out a jar
  Default: fresh
#  File: ~/.cookies.dat
#  Autosave: True
#  Unsafe: True
#  QuoteCookie: False
#  TreatAsSecureOrigin:
#  - http://localhost:8080
#  Dummy: True

Fetch:
  UserAgent: transparentjar/0.1

'''

_config = {}


def print_default():
    print(default_yaml)


def print_final():
    print(yaml.safe_dump(_config, default_flow_style=False))


def merge_dicts(a, b):
    '''
    Merge 2-level dict b into a.
    Not very general purpose!
    '''
    c = a
    for k1 in b:
        for k2 in b[k1]:
            v = b[k1][k2]
            if k1 not in c or not c[k1]:
                c[k1] = {}
            if k2 not in c[k1]:
                c[k1][k2] = {}
            c[k1][k2] = v
    return c


def type_fixup(rhs):
    '''
    Values on the command line are strings; make the obvious ones not.
    '''
    if rhs.startswith('[') and rhs.endswith(']'):
        return rhs[1:-1].split(',')
    if rhs.lower() == 'true':
        return True
    if rhs.lower() == 'false':
        return False
    return rhs


def config(configfile, configlist):
    '''
    Return a config dict which is the sum of all the various configurations
    '''

    default = yaml.safe_load(default_yaml)

    config_from_file = {}
    if configfile:
        with open(configfile, 'r') as c:
            config_from_file = yaml.safe_load(c) or {}

    combined = merge_dicts(default, config_from_file)

    if configlist:
        for c in configlist:
            # the syntax is... dangerous
            if ':' not in c:
                LOGGER.error('invalid config of %s', c)
                continue
            lhs, rhs = c.split(':', maxsplit=1)
            if '.' not in lhs:
                LOGGER.error('invalid config of %s', c)
                continue
            xpath = lhs.split('.')
            key = xpath.pop()
            try:
                temp = combined
                for x in xpath:
                    temp = temp[x]
                temp[key] = type_fixup(rhs)
            except Exception as e:
                LOGGER.error('invalid config of %s, exception was %r', c, e)
                continue

    set_config(combined)
    return combined


def set_config(c):
    global _config
    _config = c


def read(*l):
    c = _config
    for name in l:
        if not isinstance(c, dict) or name not in c:
            return None
        c = c[name]
    return c


def write(value, *l):
    c = _config
    for name in l[:-1]:
        c = c.setdefault(name, {})
    c[l[-1]] = value
