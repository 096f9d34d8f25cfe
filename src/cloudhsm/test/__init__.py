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

"""
Shared fixtures for the CloudHSM client unit tests.

Rather than patching the client, the tests hand the factory a requests session with a
FakeAdapter mounted, so URL building, headers, JSON encoding and error handling all run
for real and only the network is replaced.
"""

from collections.abc import Callable, Mapping
import copy
from http import HTTPStatus
import json
import unittest

import requests
from requests.adapters import BaseAdapter

from cloudhsm.client_factory import new_client_with_api_url_and_session
from cloudhsm.clients.client import CloudHSMAPIClient
from cloudhsm.exceptions import APIError

TEST_API_ROOT_URL = "https://cloudhsm.test/cloud/zone/is1b/api/cloud/1.1/"

TEMPLATE_TAGS = ["tag1", "tag2"]

TEMPLATE_CLOUDHSM = {
    "ID": "113600000001",
    "CreatedAt": "2025-01-01T00:00:00+09:00",
    "ModifiedAt": "2025-01-02T00:00:00+09:00",
    "Availability": "available",
    "Name": "Test HSM",
    "Description": "This is a test HSM",
    "Tags": TEMPLATE_TAGS,
    "ServiceClass": "cloud/cloudhsm/partition",
    "Ipv4NetworkAddress": "172.16.0.0",
    "Ipv4PrefixLength": 28,
}

TEMPLATE_CLIENT = {
    "ID": "113600000101",
    "CreatedAt": "2025-01-01T00:00:00+09:00",
    "ModifiedAt": "2025-01-02T00:00:00+09:00",
    "Availability": "available",
    "Name": "test-client",
    "Certificate": "-----BEGIN CERTIFICATE-----\nMIIB\n-----END CERTIFICATE-----\n",
}

TEMPLATE_PEER = {
    "ID": "113600000201",
}

TEMPLATE_LICENSE = {
    "ID": "113600000301",
    "CreatedAt": "2025-01-01T00:00:00+09:00",
    "ModifiedAt": "2025-01-02T00:00:00+09:00",
    "ServiceClass": "cloud/cloudhsm/license/l7",
    "Name": "test-license",
    "Description": "This is a test license",
    "Tags": TEMPLATE_TAGS,
}


def template(record: dict, **changes) -> dict:
    ret = copy.deepcopy(record)
    ret.update(changes)
    return ret


def paginated(key: str, items: list) -> dict:
    return {"Count": len(items), "From": 0, "Total": len(items), key: items}


def error_response(message: str) -> dict:
    return {"error_msg": message, "is_ok": False}


class FakeAdapter(BaseAdapter):
    """
    A requests transport adapter which answers every request with the same canned
    response, and records the requests it was given.
    If error is set, it is raised instead of answering.
    """

    def __init__(self, body=None, status: int = HTTPStatus.OK,
                 error: Exception | None = None) -> None:
        super().__init__()
        self.body = body
        self.status = int(status)
        self.error = error
        self.requests: list[requests.PreparedRequest] = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        response = requests.Response()
        response.status_code = self.status
        response.reason = HTTPStatus(self.status).phrase
        response.url = request.url
        response.request = request
        response.encoding = 'utf-8'
        response.headers['Content-Type'] = 'application/json'
        if self.status == HTTPStatus.NO_CONTENT or self.body is None:
            response._content = b''
        else:
            response._content = json.dumps(self.body).encode('utf-8')
        response._content_consumed = True
        return response

    def close(self) -> None:
        pass

    @property
    def last_request(self) -> requests.PreparedRequest:
        return self.requests[-1]

    @property
    def last_json(self):
        return json.loads(self.last_request.body)


def new_test_client(body=None, status: int = HTTPStatus.OK, error: Exception | None = None,
                    **params) -> tuple[CloudHSMAPIClient, FakeAdapter]:
    adapter = FakeAdapter(body, status, error)
    session = requests.Session()
    session.mount("https://", adapter)
    client = new_client_with_api_url_and_session(TEST_API_ROOT_URL, session, **params)
    return client, adapter


class BaseTestCase(unittest.TestCase):

    def assertRequest(self, adapter: FakeAdapter, method: str, path: str) -> None:
        """
        Assert that exactly one request was made, with the given method, to the given
        path relative to the API root
        """
        self.assertEqual(len(adapter.requests), 1)
        self.assertEqual(adapter.last_request.method, method)
        self.assertEqual(adapter.last_request.url, TEST_API_ROOT_URL + path)

    def assertErrorStatuses(self, operation: str, call: Callable[[CloudHSMAPIClient], object],
                            expected: Mapping[int, type[APIError]]) -> None:
        """
        For each status code, answer the single request made by call with that status,
        and assert that it raises exactly the expected APIError class, carrying the
        observed status and the operation name
        """
        for status, error_class in expected.items():
            with self.subTest(operation=operation, status=status):
                client, adapter = new_test_client(error_response("failed"), status)
                with self.assertRaises(APIError) as cm:
                    call(client)
                self.assertIs(type(cm.exception), error_class)
                self.assertEqual(cm.exception.status_code, status)
                self.assertEqual(cm.exception.operation, operation)
                self.assertEqual(len(adapter.requests), 1)
