##############################################################################
#
# Copyright (c) 2026 Zope Foundation and Contributors.
# All Rights Reserved.
#
# This software is subject to the provisions of the Zope Public License,
# Version 2.1 (ZPL).  A copy of the ZPL should accompany this distribution.
# THIS SOFTWARE IS PROVIDED "AS IS" AND ANY AND ALL EXPRESS OR IMPLIED
# WARRANTIES ARE DISCLAIMED, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED
# WARRANTIES OF TITLE, MERCHANTABILITY, AGAINST INFRINGEMENT, AND FITNESS
# FOR A PARTICULAR PURPOSE.
#
##############################################################################
import os

from setuptools import setup
from setuptools import find_packages


def read_file(*path):
    base_dir = os.path.dirname(__file__)
    file_path = (base_dir, ) + tuple(path)
    with open(os.path.join(*file_path), 'rt', encoding='utf-8') as f:
        result = f.read()
    return result

VERSION = read_file('version.txt').strip()

memcache_require = [
    # Couldn't get this building on 3.12b3;
    # It's deprecated though.
    'pylibmc; platform_python_implementation=="CPython" and sys_platform != "win32" and python_version < "3.12"',
    'python-memcached; platform_python_implementation=="PyPy" or sys_platform == "win32" or python_version >= "3.12"',
]

tests_require = [
    'zope.testrunner',
    'nti.testing',
    'PyHamcrest',
]

setup(
    name="MemcacheStore",
    version=VERSION,
    author="Zope Foundation and Contributors",
    author_email="zope-dev@zope.dev",
    keywords="memcache memcached cache pylibmc",
    packages=find_packages('src'),
    package_dir={'': 'src'},
    package_data={
        'memcachestore': ['component.xml'],
    },
    include_package_data=True,
    license="ZPL 2.1",
    platforms=["any"],
    description="One get/set/delete/flush interface over differing memcache clients.",
    python_requires=">=3.9",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Zope Public License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Development Status :: 4 - Beta",
    ],
    long_description=read_file("README.rst"),
    # ZConfig finds our component.xml through the package directory.
    zip_safe=False,
    install_requires=[
        'perfmetrics >= 3.0.0',
        'zope.interface',
        'ZConfig',
    ],
    tests_require=tests_require,
    extras_require={
        'memcache': memcache_require,
        'test': tests_require,
    },
)
