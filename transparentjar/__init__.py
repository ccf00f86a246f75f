'''
Transparent cookie jars for aiohttp.ClientSession
'''

from .selector import Fresh, Disabled, ExistingJar, InvalidSelector, parse_selector
from .cookies import PersistentCookieJar, make_jar
from .registry import DefaultJarRegistry
from .transparent import init, init_from_config, install, client_session, current_jar, is_installed

__title__ = 'transparentjar'
__version__ = '0.1.0'
__license__ = 'Apache 2.0'
