#
# MIT License
#
# (C) Copyright 2025 Hewlett Packard Enterprise Development LP
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR
# OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE,
# ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#

import unittest

import requests

from cloudhsm.options import DEFAULTS, DefaultOptions, Options
from cloudhsm.rrs import (RETRY_ALLOWED_METHODS,
                          RetrySessionManager,
                          RetryWithLogs,
                          TimeoutHTTPAdapter,
                          requests_retry_session)


class TestRequestsRetrySession(unittest.TestCase):

    def test_adapter(self):
        session = requests_retry_session(retries=4, connect_timeout=2, read_timeout=30)
        adapter = session.get_adapter("https://secure.sakura.ad.jp/")
        self.assertIsInstance(adapter, TimeoutHTTPAdapter)
        self.assertEqual(adapter.timeout, (2, 30))
        retry = adapter.max_retries
        self.assertIsInstance(retry, RetryWithLogs)
        self.assertEqual(retry.total, 4)
        self.assertFalse(retry.raise_on_status)
        self.assertEqual(retry.allowed_methods, RETRY_ALLOWED_METHODS)

    def test_post_not_retried(self):
        self.assertNotIn("POST", RETRY_ALLOWED_METHODS)

    def test_protocol(self):
        session = requests_retry_session(protocol="http")
        self.assertIsInstance(session.get_adapter("http://localhost/"), TimeoutHTTPAdapter)
        self.assertNotIsInstance(session.get_adapter("https://localhost/"), TimeoutHTTPAdapter)


class TestRetrySessionManager(unittest.TestCase):

    def test_lazy_session(self):
        manager = RetrySessionManager(retries=1)
        self.assertIsNone(manager._session)
        session = manager.requests_session
        self.assertIs(manager.requests_session, session)
        self.assertEqual(session.get_adapter("https://localhost/").max_retries.total, 1)

    def test_supplied_session(self):
        session = requests.Session()
        with RetrySessionManager(session=session) as manager:
            self.assertIs(manager.requests_session, session)
        self.assertIs(manager.requests_session, session)


class TestOptions(unittest.TestCase):

    def test_defaults(self):
        options = DefaultOptions()
        self.assertEqual(options.retries, DEFAULTS['retries'])
        self.assertEqual(options.backoff_factor, DEFAULTS['backoff_factor'])
        self.assertEqual(options.retry_adapter_args, {
            'retries': 3,
            'backoff_factor': 0.5,
            'connect_timeout': 3.0,
            'read_timeout': 60.0,
        })

    def test_overrides(self):
        options = Options(retries="0")
        self.assertEqual(options.retries, 0)
        self.assertEqual(options.read_timeout, 60.0)

    def test_unknown_option(self):
        with self.assertRaises(KeyError):
            Options(retry=1)

    def test_unknown_key(self):
        with self.assertRaises(KeyError):
            DefaultOptions().get_option('not_an_option')


if __name__ == '__main__':
    unittest.main()
