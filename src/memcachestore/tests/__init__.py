"""memcachestore.tests package"""

import os
import subprocess
import sys
import unittest

from memcachestore.options import Options


class TestCase(unittest.TestCase):
    """
    Common base for tests. Clears the fake memcache modules
    before and after each test.
    """

    def setUp(self):
        super(TestCase, self).setUp()
        from . import fakecache
        from . import fakememcached
        for module in fakecache, fakememcached:
            module.reset()
            self.addCleanup(module.reset)

    def assertIsEmpty(self, container, msg=None):
        self.assertLength(container, 0, msg)

    assertEmpty = assertIsEmpty

    def assertLength(self, container, length, msg=None):
        self.assertEqual(len(container), length,
                         '%s -- %s' % (msg, container) if msg else container)


class MockOptions(Options):
    cache_module_name = 'memcachestore.tests.fakecache'
    cache_servers = 'host:9999'

    @classmethod
    def from_args(cls, **kwargs):
        inst = cls()
        for k, v in kwargs.items():
            setattr(inst, k, v)
        return inst

    def __setattr__(self, name, value):
        if name not in Options.valid_option_names():
            raise AttributeError("Invalid option", name) # pragma: no cover
        object.__setattr__(self, name, value)


class MockOptionsWithFakeMemcached(MockOptions):
    cache_module_name = 'memcachestore.tests.fakememcached'


def run_python(script, **environ):
    """
    Run *script* in a new interpreter with *environ* added to
    the environment, and return its stripped standard output.

    Module level settings are read at import time, so this is how
    we see the effect of changing them.
    """
    import memcachestore
    src_dir = os.path.dirname(os.path.dirname(os.path.abspath(memcachestore.__file__)))
    env = dict(os.environ)
    env.update(environ)
    env['PYTHONPATH'] = os.pathsep.join(
        p for p in (src_dir, env.get('PYTHONPATH')) if p
    )
    output = subprocess.check_output(
        [sys.executable, '-c', script],
        env=env,
        universal_newlines=True,
    )
    return output.strip()
