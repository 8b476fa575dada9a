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
"""ZConfig directive implementations for memcachestore"""

from memcachestore.options import Options
from memcachestore.store import MemcacheStore

logger = __import__('logging').getLogger(__name__)

class BaseConfig(object):

    def __init__(self, config):
        self.config = config
        self.name = config.getSectionName()

class MemcacheStoreFactory(BaseConfig):
    """Open a MemcacheStore configured via ZConfig"""

    def open(self):
        options = Options.copy_valid_options(self.config)
        logger.debug("Opening memcache store %r with %r", self.name, options)
        return MemcacheStore.from_options(options)
