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

from abc import ABC
from typing import Any, cast

from cloudhsm.utils import path_segment

from .endpoints import ApiResponseFormatError, BaseJsonEndpoint, JsonData


class BaseCloudHSMEndpoint(BaseJsonEndpoint, ABC):
    """
    This base class provides generic access to the CloudHSM API.
    The individual endpoint needs to be overridden for a specific endpoint.
    """

    @staticmethod
    def unwrap(body: JsonData, key: str) -> Any:
        """
        Return the value stored under key in a response envelope such as {"CloudHSM": {...}}
        """
        if not isinstance(body, dict) or key not in body:
            raise ApiResponseFormatError(f"Response body has no '{key}' field")
        return cast(dict, body)[key]

    @classmethod
    def paginated[T](cls, body: T, key: str) -> T:
        """
        Check that a list response carries its items under key, and return it
        """
        cls.unwrap(body, key)
        return body


class BaseHSMScopedEndpoint(BaseCloudHSMEndpoint, ABC):
    """
    Base class for collections nested under a single HSM partition,
    i.e. cloudhsm/cloudhsms/<hsm_id>/<SUB_ENDPOINT>/
    """
    ENDPOINT = 'cloudhsm/cloudhsms'
    SUB_ENDPOINT: str = ''

    @classmethod
    def item_uri(cls, hsm_id: str, item_id: str | None = None) -> str:
        uri = f"{path_segment(hsm_id)}/{cls.SUB_ENDPOINT}"
        if item_id is None:
            return uri
        return f"{uri}/{path_segment(item_id)}"
