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
Interfaces for memcachestore.
"""
from zope.interface import Attribute
from zope.interface import Interface

# pylint: disable=inherit-non-class,no-method-argument,no-self-argument


class UnknownVariantError(ValueError):
    """
    Raised when a client variant is requested by a name
    that isn't registered.
    """


class IMemcacheClient(Interface):
    """
    The subset of a memcache client object that we call.

    Both ``pylibmc.Client`` and ``memcache.Client`` (python-memcached)
    provide this, although neither declares it. Clients only need to
    provide one of :meth:`flush_all` and :meth:`flush`.
    """

    def get(key):
        """
        Return the value stored for *key*.

        What happens on a miss depends on the library; most return
        None, some raise an exception.
        """

    def set(key, value, expiry=0):
        """
        Store *value* under *key*.

        An *expiry* below 30 days is interpreted by the memcache
        server as a number of seconds from now; anything larger is
        a Unix timestamp.
        """

    def delete(key):
        """
        Remove *key*.
        """

    def flush_all():
        """
        Invalidate every item on every server.
        """

    def flush():
        """
        Alternate name for :meth:`flush_all` used by some libraries.
        """


class IClientVariant(Interface):
    """
    Encapsulates the calling conventions of one family of
    memcache client libraries.

    Variants hold no cache data; the client is passed to each
    method.
    """

    name = Attribute("The name this variant is registered under.")

    def get(client, key):
        """
        Call ``client.get(key)``, converting any library specific
        miss condition into a return value of None.
        """

    def expiry(expires_in):
        """
        Convert the relative number of seconds *expires_in* into the
        value the client library expects to be passed to ``set``.
        """

    def flush(client):
        """
        Call whichever of ``flush_all`` or ``flush`` the *client*
        supports.
        """


class ICacheStore(Interface):
    """
    A uniform, four-method view of a memcache client.

    A store holds no data itself. All errors except a miss on
    :meth:`get` are those of the wrapped client and propagate
    unchanged.
    """

    client = Attribute("The wrapped IMemcacheClient. Not owned by the store.")
    variant = Attribute("The IClientVariant used to call the client.")

    def get(key):
        """
        Return the value for *key*, or the client's empty value
        (usually None) if there is none.
        """

    def set(key, value, expires_in=None):
        """
        Store *value* under *key*.

        If *expires_in* is given, it is a number of seconds (anything
        :func:`int` accepts) after which the entry expires. Otherwise,
        the client's default expiration applies.
        """

    def delete(key):
        """
        Remove *key* from the cache.
        """

    def flush():
        """
        Remove everything from the cache.
        """
