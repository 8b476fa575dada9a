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
"""
An implementation of ``ICacheStore`` that forwards to a memcache client.

Example::

    import memcache
    store = MemcacheStore(memcache.Client(['127.0.0.1:11211']))
    store.set('records', records, expires_in=30)
    store.get('records')

    import pylibmc
    store = MemcacheStore(pylibmc.Client(['127.0.0.1:11211']),
                          AbsoluteExpiryVariant(pylibmc.NotFound))
"""
import importlib

from zope import interface

from memcachestore._util import metricmethod_sampled
from memcachestore._util import split_servers
from memcachestore.interfaces import ICacheStore
from memcachestore.variants import RelativeExpiryVariant
from memcachestore.variants import variant_for_name

logger = __import__('logging').getLogger(__name__)


@interface.implementer(ICacheStore)
class MemcacheStore(object):

    @classmethod
    def from_options(cls, options):
        """
        Create and return a MemcacheStore from the options,
        if they so request.
        """
        servers = split_servers(options.cache_servers)
        if not servers:
            return None
        module_name = options.cache_module_name
        module = importlib.import_module(module_name)

        variant_name = (
            options.cache_variant
            or getattr(module, 'cache_variant', None)
            or RelativeExpiryVariant.name
        )
        variant = variant_for_name(
            variant_name,
            not_found=getattr(module, 'NotFound', ())
        )
        logger.debug(
            "Using memcache module %s with servers %s and variant %s",
            module_name, servers, variant_name
        )
        return cls(module.Client(servers), variant)

    def __init__(self, client, variant=None):
        # The client is borrowed; we never connect or disconnect it.
        self.client = client
        if variant is None:
            variant = RelativeExpiryVariant()
        elif isinstance(variant, str):
            variant = variant_for_name(variant)
        self.variant = variant

    @metricmethod_sampled
    def get(self, key):
        return self.variant.get(self.client, key)

    @metricmethod_sampled
    def set(self, key, value, expires_in=None):
        if expires_in is not None:
            return self.client.set(key, value, self.variant.expiry(expires_in))
        return self.client.set(key, value)

    @metricmethod_sampled
    def delete(self, key):
        return self.client.delete(key)

    @metricmethod_sampled
    def flush(self):
        return self.variant.flush(self.client)

    def __repr__(self):
        return '<%s client=%r variant=%r>' % (
            type(self).__name__,
            self.client,
            self.variant,
        )
