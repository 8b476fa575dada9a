"""
A small adapter presenting memcache client libraries with differing
conventions through one get/set/delete/flush interface.
"""

from memcachestore.store import MemcacheStore
from memcachestore.variants import EXPIRES_EDGE
from memcachestore.variants import AbsoluteExpiryVariant
from memcachestore.variants import RelativeExpiryVariant

__all__ = [
    'EXPIRES_EDGE',
    'AbsoluteExpiryVariant',
    'MemcacheStore',
    'RelativeExpiryVariant',
]
