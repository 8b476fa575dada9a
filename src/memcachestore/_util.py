# -*- coding: utf-8 -*-
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
import sys
import logging

from ZConfig.datatypes import asBoolean
from ZConfig.datatypes import integer
from ZConfig.datatypes import RangeCheckedConversion

from perfmetrics import Metric

_logger = logging.getLogger('memcachestore')

__all__ = [
    'IN_TESTRUNNER',
    'get_boolean_from_environ',
    'get_non_negative_float_from_environ',
    'get_positive_integer_from_environ',
    'metricmethod_sampled',
    'parse_boolean',
    'positive_integer',
    'split_servers',
]

IN_TESTRUNNER = (
    # zope-testrunner --test-path ...
    'zope-testrunner' in sys.argv[0]
    # python -m zope.testrunner --test-path ...
    or os.path.join('zope', 'testrunner') in sys.argv[0]
)

positive_integer = RangeCheckedConversion(integer, min=1)
non_negative_float = RangeCheckedConversion(float, min=0)

def _setting_from_environ(converter, environ_name, default, logger):
    result = default
    env_val = os.environ.get(environ_name, default)
    if env_val is not default:
        try:
            result = converter(env_val)
        except (ValueError, TypeError):
            logger.exception("Failed to parse environment value %r for key %r",
                             env_val, environ_name)
            result = default

    logger.debug('Using value %s from environ %r=%r (default=%r)',
                 result, environ_name, env_val, default)
    return result


def get_positive_integer_from_environ(environ_name, default, logger=_logger):
    return _setting_from_environ(positive_integer, environ_name, default, logger)

def get_non_negative_float_from_environ(environ_name, default, logger=_logger):
    return _setting_from_environ(non_negative_float, environ_name, default, logger)

def parse_boolean(val):
    if val == '0':
        return False
    if val == '1':
        return True
    return asBoolean(val)

def get_boolean_from_environ(environ_name, default, logger=_logger):
    return _setting_from_environ(parse_boolean, environ_name, default, logger)


def split_servers(servers):
    """
    Return *servers* as a list of ``host:port`` strings.

    A single string is split on whitespace; any other iterable
    is copied.
    """
    if isinstance(servers, str):
        return servers.split()
    return list(servers or ())


METRIC_SAMPLE_RATE = get_non_negative_float_from_environ('MCS_PERF_STATSD_SAMPLE_RATE', 0.1,
                                                         logger=_logger)

metricmethod_sampled = Metric(method=True, rate=METRIC_SAMPLE_RATE)

if IN_TESTRUNNER and get_boolean_from_environ('MCS_TEST_DISABLE_METRICS', False):
    # If we're running under the testrunner,
    # don't apply the metric stuff. It makes
    # backtraces ugly and makes stepping in the
    # debugger annoying.
    metricmethod_sampled = lambda f: f
