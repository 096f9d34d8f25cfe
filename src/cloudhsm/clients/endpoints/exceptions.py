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

import requests

from cloudhsm.utils import compact_response_text

from .response_data import ResponseData


class ApiResponseError(Exception):
    """Raised when API response has non-ok status"""

    def __init__(self, response: requests.Response, method: str, url: str) -> None:
        self.response_data = ResponseData.from_response(response)
        self.request_method = method
        self.request_url = url
        super().__init__(
            f"Non-2XX response ({self.response_data.status_code}) "
            f"to {self.request_method} {self.request_url}; "
            f"{self.response_data.reason} {compact_response_text(self.response_data.text)}"
        )

    @property
    def status_code(self) -> int:
        return self.response_data.status_code


class ApiResponseFormatError(Exception):
    """Raised when a successful API response does not have the expected shape"""
