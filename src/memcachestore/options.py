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


class Options(object):
    """Options for building a :class:`.MemcacheStore`.

    These parameters can be provided as keyword arguments. For example:

        options = Options(cache_servers='10.0.0.1:11211 10.0.0.2:11211',
                          cache_module_name='memcache')
        store = MemcacheStore.from_options(options)
    """

    #: List of memcache servers, or a string separating them with spaces.
    cache_servers = ()  # ['127.0.0.1:11211']
    #: Module providing a ``Client(servers)`` callable. It may also
    #: provide ``NotFound`` and ``cache_variant``.
    cache_module_name = 'memcachestore.pylibmc_wrapper'
    #: Name of the client variant ('relative' or 'absolute').
    #: If not given, the module's ``cache_variant`` is used,
    #: falling back to 'relative'.
    cache_variant = None

    def __init__(self, **kwoptions):
        for key, value in kwoptions.items():
            if not hasattr(self, key):
                raise TypeError("Unknown parameter: %s (Known: %s)" % (
                    key,
                    self.valid_option_names()
                ))
            setattr(self, key, value)

    @classmethod
    def copy_valid_options(cls, other_options):
        """
        Produce a new options featuring only the valid settings from
        *other_options*.
        """
        option_dict = {}
        for key in cls.valid_option_names():
            value = getattr(other_options, key, None)
            if value is not None:
                option_dict[key] = value
        return cls(**option_dict)

    @classmethod
    def valid_option_names(cls):
        return sorted(
            x
            for x in vars(cls)
            if not callable(getattr(cls, x)) and not x.startswith('_')
        )

    def __repr__(self):
        opts = ', '.join(
            '%s=%r' % (k, v)
            for k, v in sorted(self.__dict__.items())
        )
        return 'memcachestore.options.Options(%s)' % (opts,)

    def __eq__(self, other):
        if not isinstance(other, Options):
            return NotImplemented
        return all(getattr(self, key) == getattr(other, key)
                   for key in self.valid_option_names())

    def __hash__(self):
        # Equal objects must have equal hashes, and our values
        # may not be hashable.
        return 42

    def copy(self, **kw):
        """
        Produce a copy of these options, with keyword arguments overriding.
        """
        options = dict(self.__dict__)
        options.update(kw)
        return self.__class__(**options)
