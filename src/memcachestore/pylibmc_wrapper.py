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
"""A pylibmc client configured for use with MemcacheStore.

This is the default ``cache_module_name``. It talks the binary
protocol with consistent hashing, and compresses large values
when pylibmc supports it.

Errors from pylibmc are *not* caught here; they propagate through
the store to the caller.
"""
import pylibmc  # pylint:disable=import-error
from pylibmc import NotFound  # pylint:disable=no-name-in-module,import-error

__all__ = [
    'Client',
    'NotFound',
    'cache_variant',
]

#: libmemcached raises NotFound for some misses, and we
#: pass absolute expiration times.
cache_variant = 'absolute'


class Client(object):
    behaviors = {
        "tcp_nodelay": True,
        "ketama": True,
    }

    min_compress_len = 0

    def __init__(self, servers):
        self._client = pylibmc.Client(servers, binary=True)
        self._client.set_behaviors(self.behaviors)
        if pylibmc.support_compression: # pylint:disable=no-member
            self.min_compress_len = 1000

    def get(self, key):
        return self._client.get(key)

    def set(self, key, value, time=0):
        return self._client.set(
            key, value, time, min_compress_len=self.min_compress_len)

    def delete(self, key):
        return self._client.delete(key)

    def flush_all(self):
        return self._client.flush_all()

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self._client)
