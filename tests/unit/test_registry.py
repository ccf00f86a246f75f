import pytest

import aiohttp

from transparentjar.registry import DefaultJarRegistry
from transparentjar.selector import InvalidSelector, Disabled, Fresh, ExistingJar


@pytest.mark.asyncio
async def test_configure_with_factory():
    built = []

    def factory(options):
        built.append(options)
        return aiohttp.DummyCookieJar()

    reg = DefaultJarRegistry(jar_factory=factory)
    assert reg.jar is None

    reg.configure(unsafe=True)
    assert built == [{'unsafe': True}]
    first = reg.jar
    assert isinstance(first, aiohttp.DummyCookieJar)

    reg.configure(Fresh({}))
    assert built[-1] == {}
    assert reg.jar is not first

    reg.configure('none')
    assert reg.jar is None
    assert len(built) == 2

    jar = aiohttp.DummyCookieJar()
    reg.configure(jar)
    assert reg.jar is jar
    assert len(built) == 2


@pytest.mark.asyncio
async def test_configure_failure_leaves_jar():
    def factory(options):
        raise OSError('cannot open cookie file')

    jar = aiohttp.DummyCookieJar()
    reg = DefaultJarRegistry(jar_factory=factory)
    reg.configure(jar)

    with pytest.raises(OSError):
        reg.configure(file='/nonexistent/c.dat')
    assert reg.jar is jar

    with pytest.raises(InvalidSelector):
        reg.configure('bogus')
    assert reg.jar is jar

    with pytest.raises(InvalidSelector):
        reg.configure(ExistingJar('not a jar'))
    assert reg.jar is jar

    with pytest.raises(InvalidSelector):
        reg.configure(Fresh('x'))
    assert reg.jar is jar


@pytest.mark.asyncio
async def test_inject():
    reg = DefaultJarRegistry()
    assert reg.inject({}) == {}

    jar = aiohttp.DummyCookieJar()
    reg.configure(jar)
    assert reg.inject({}) == {'cookie_jar': jar}
    assert reg.inject({'cookie_jar': None}) == {'cookie_jar': jar}

    mine = aiohttp.DummyCookieJar()
    assert reg.inject({'cookie_jar': mine})['cookie_jar'] is mine

    reg.configure(Disabled())
    assert reg.inject({}) == {}


@pytest.mark.asyncio
async def test_session_factory():
    reg = DefaultJarRegistry()
    reg.configure()
    jar = reg.jar

    session = reg.session(headers={'X-Test': '1'})
    try:
        assert session.cookie_jar is jar
        assert session.headers['X-Test'] == '1'
    finally:
        await session.close()

    mine = aiohttp.CookieJar()
    session = reg.session(cookie_jar=mine)
    try:
        assert session.cookie_jar is mine
    finally:
        await session.close()

    reg.configure('none')
    session = reg.session()
    try:
        assert session.cookie_jar is not jar
    finally:
        await session.close()
