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
Fixtures for the CloudHSM integration tests.

These tests talk to a real CloudHSM API and create and delete real resources.
They are skipped unless SAKURACLOUD_ACCESS_TOKEN and SAKURACLOUD_ACCESS_TOKEN_SECRET
are set. SAKURACLOUD_LOCAL_ENDPOINT_CLOUDHSM overrides the API root URL, and the
partition-scoped tests also need SAKURACLOUD_CLOUDHSM_ID.
"""

import os
import uuid

import pytest

from cloudhsm import CloudHSMOp, DEFAULT_API_ROOT_URL, new_client_with_api_url


def require_env(*names: str) -> list[str]:
    missing = [name for name in names if not os.environ.get(name)]
    if missing:
        pytest.skip(f"Environment variable(s) not set: {', '.join(missing)}")
    return [os.environ[name] for name in names]


def random_name(prefix: str) -> str:
    return f"{prefix}{uuid.uuid4().hex[:16]}"


@pytest.fixture
def client():
    token, secret = require_env("SAKURACLOUD_ACCESS_TOKEN", "SAKURACLOUD_ACCESS_TOKEN_SECRET")
    api_url = os.environ.get("SAKURACLOUD_LOCAL_ENDPOINT_CLOUDHSM", DEFAULT_API_ROOT_URL)
    with new_client_with_api_url(api_url, access_token=token,
                                 access_token_secret=secret) as api_client:
        yield api_client


@pytest.fixture
def hsm(client):
    [hsm_id] = require_env("SAKURACLOUD_CLOUDHSM_ID")
    partition = CloudHSMOp(client).read(hsm_id)
    assert partition["Availability"] == "available", \
        f"CloudHSM {hsm_id} is not available: {partition.get('Availability')}"
    return partition
