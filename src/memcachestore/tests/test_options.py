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
import unittest

from memcachestore.options import Options


class TestOptions(unittest.TestCase):

    def test_defaults(self):
        options = Options()
        self.assertEqual(options.cache_servers, ())
        self.assertEqual(options.cache_module_name, 'memcachestore.pylibmc_wrapper')
        self.assertIsNone(options.cache_variant)

    def test_valid_option_names(self):
        self.assertEqual(
            Options.valid_option_names(),
            ['cache_module_name', 'cache_servers', 'cache_variant'])

    def test_unknown_option(self):
        with self.assertRaisesRegex(TypeError, 'Unknown parameter: expires_in'):
            Options(expires_in=30)

    def test_copy(self):
        options = Options(cache_servers='host:1')
        copy = options.copy(cache_variant='absolute')
        self.assertEqual(copy.cache_servers, 'host:1')
        self.assertEqual(copy.cache_variant, 'absolute')
        self.assertIsNone(options.cache_variant)
        self.assertNotEqual(options, copy)
        self.assertEqual(options, options.copy())

    def test_copy_valid_options(self):
        class Other(object):
            cache_servers = ['host:1']
            cache_module_name = None
            something_else = 42

        options = Options.copy_valid_options(Other())
        self.assertEqual(options.cache_servers, ['host:1'])
        self.assertEqual(options.cache_module_name, 'memcachestore.pylibmc_wrapper')
        self.assertFalse(hasattr(options, 'something_else'))

    def test_eq_other_type(self):
        self.assertNotEqual(Options(), object())

    def test_repr(self):
        self.assertEqual(repr(Options(cache_servers='host:1')),
                         "memcachestore.options.Options(cache_servers='host:1')")
