#!/usr/bin/env python

'''
Fetches some urls with plain aiohttp.ClientSession objects, after
pointing transparentjar at a default cookie jar, then prints what
ended up in the jar. Also serves as a minimum example of using
transparentjar.

A persistent jar that survives between runs:

  cookie-fetch.py --config CookieJar.File:~/.cookies.dat --config CookieJar.Autosave:true http://example.com/
'''

import sys
import os

import argparse
import asyncio
import logging

import aiohttp

import transparentjar
import transparentjar.config as config

LOGGER = logging.getLogger(__name__)

ARGS = argparse.ArgumentParser(description='Fetch urls using a transparent default cookie jar')
ARGS.add_argument('--config', action='append')
ARGS.add_argument('--configfile', action='store')
ARGS.add_argument('--printdefault', action='store_true', help='print the default configuration')
ARGS.add_argument('--printfinal', action='store_true', help='print the final configuration')
ARGS.add_argument('--save', action='store_true', help='save a persistent cookie jar when done')
ARGS.add_argument('--loglevel', action='store', default='INFO', help='set logging level, default INFO')
ARGS.add_argument('--verbose', '-v', action='count', help='set logging level to DEBUG')
ARGS.add_argument('urls', nargs='*')


async def fetch(urls, save=False):
    # jars attach to the running loop, so configure from inside it
    transparentjar.init_from_config()
    headers = {'User-Agent': config.read('Fetch', 'UserAgent')}

    # note: no cookie_jar argument, the default gets injected
    session = aiohttp.ClientSession(headers=headers)
    try:
        for url in urls:
            if not url.startswith('http'):
                url = 'http://' + url
            try:
                async with session.get(url, allow_redirects=True) as response:
                    await response.read()
                    print(url, response.status)
            except aiohttp.ClientError as e:
                print('saw error for', url, ':', repr(e), file=sys.stderr)
    finally:
        await session.close()

    jar = transparentjar.current_jar()
    if jar is None:
        print('no default cookie jar')
        return

    print('cookies:')
    for morsel in jar:
        print('  ', morsel['domain'] or '-', morsel.key + '=' + morsel.value)

    if isinstance(jar, transparentjar.PersistentCookieJar) and save:
        jar.save()


def main():
    args = ARGS.parse_args()

    if args.printdefault:
        config.print_default()
        sys.exit(1)

    loglevel = os.getenv('TRANSPARENTJAR_LOGLEVEL')
    if loglevel is None and args.verbose:
        loglevel = 'DEBUG'
    if loglevel is None and args.loglevel:
        loglevel = args.loglevel

    logging.basicConfig(level=loglevel)

    config.config(args.configfile, args.config)

    if args.printfinal:
        config.print_final()
        sys.exit(1)

    try:
        asyncio.run(fetch(args.urls, save=args.save))
    except KeyboardInterrupt:
        sys.stderr.flush()
        print('\nInterrupt. Exiting cleanly.\n')


if __name__ == '__main__':
    main()
