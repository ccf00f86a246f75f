#!/usr/bin/env python

from os import path

from setuptools import setup


packages = [
    'transparentjar',
]

requires = [
    'aiohttp>=3.8',
    'yarl',
    'pyyaml',
]

test_requirements = [
    'pytest>=3.0.0',
    'pytest-cov',
    'pytest-asyncio',
]

extras_require = {
    'test': test_requirements,  # setup no longer tests, so make them an extra
}

scripts = [
    'scripts/cookie-fetch.py',
]

this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    description = f.read()

setup(
    name='transparentjar',
    version='0.1.0',
    description='A shared default cookie jar for every aiohttp ClientSession',
    long_description=description,
    long_description_content_type='text/markdown',
    packages=packages,
    python_requires=">=3.8",
    extras_require=extras_require,
    install_requires=requires,
    scripts=scripts,
    license='Apache 2.0',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Framework :: AsyncIO',
        'Framework :: aiohttp',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3 :: Only',
    ],
)
