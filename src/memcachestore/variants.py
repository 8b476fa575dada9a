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
Client variants.

Memcache client libraries agree on the shape of ``get``, ``set``
and ``delete``, but differ in a few details:

- Some (those built on libmemcached) raise an exception for a
  cache miss instead of returning None.
- Some need an absolute Unix timestamp for expirations, while
  others accept a relative number of seconds and let the server
  sort it out.
- Some call it ``flush_all``, some call it ``flush``.

Each variant here captures one set of those conventions.
"""
import time

from zope import interface

from memcachestore._util import get_positive_integer_from_environ
from memcachestore.interfaces import IClientVariant
from memcachestore.interfaces import UnknownVariantError

logger = __import__('logging').getLogger(__name__)

#: Expiration values below this many seconds (30 days) are relative
#: to the current time; values at or above it are absolute Unix
#: timestamps. This is the boundary the memcache protocol uses. Set
#: the environment variable ``MCS_EXPIRES_EDGE`` if your servers
#: were built with something different.
EXPIRES_EDGE = get_positive_integer_from_environ(
    'MCS_EXPIRES_EDGE',
    60 * 60 * 24 * 30,
    logger=logger
)


@interface.implementer(IClientVariant)
class RelativeExpiryVariant(object):
    """
    For clients like python-memcached that return None on a miss
    and accept relative expiration times.
    """

    name = 'relative'

    def get(self, client, key):
        return client.get(key)

    def expiry(self, expires_in):
        return int(expires_in)

    def flush(self, client):
        flush_all = getattr(client, 'flush_all', None)
        if flush_all is not None:
            return flush_all()
        return client.flush()

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.name)


class AbsoluteExpiryVariant(RelativeExpiryVariant):
    """
    For clients in the style of libmemcached.

    A miss on ``get`` raises one of the exception types in
    *not_found*; that's turned into None. Any other exception
    propagates.

    Expiration times shorter than :data:`EXPIRES_EDGE` are
    converted to absolute timestamps using *clock*.
    """

    name = 'absolute'

    def __init__(self, not_found=(), clock=time.time):
        # A bare exception class or a tuple of them; ``except ()``
        # catches nothing.
        self.not_found = not_found or ()
        self.clock = clock

    def get(self, client, key):
        try:
            return client.get(key)
        except self.not_found:
            return None

    def expiry(self, expires_in):
        expires_in = int(expires_in)
        if expires_in < EXPIRES_EDGE:
            expires_in = int(self.clock()) + expires_in
        return expires_in


VARIANT_NAMES = (
    RelativeExpiryVariant.name,
    AbsoluteExpiryVariant.name,
)

def variant_for_name(name, not_found=()):
    """
    Create and return the variant registered for *name*.

    *not_found* is only used by the ``absolute`` variant.
    """
    if name == RelativeExpiryVariant.name:
        return RelativeExpiryVariant()
    if name == AbsoluteExpiryVariant.name:
        return AbsoluteExpiryVariant(not_found)
    raise UnknownVariantError(
        "Unknown client variant: %r (Known: %s)" % (name, ', '.join(VARIANT_NAMES))
    )
