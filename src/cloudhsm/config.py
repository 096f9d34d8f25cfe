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
Configuration of the CloudHSM API client: API root URL, zones, request headers,
user agent, credentials and transport options
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
import platform
from typing import Self
from urllib.parse import urlparse

import requests

from cloudhsm.exceptions import UnsupportedZoneError
from cloudhsm.options import BaseOptions, DefaultOptions
from cloudhsm.version import __version__

DEFAULT_ZONE = 'is1b'

# The zones currently known to provide the CloudHSM API
ZONE_API_ROOT_URLS = {
    'is1b': "https://secure.sakura.ad.jp/cloud/zone/is1b/api/cloud/1.1/",
    'tk1a': "https://secure.sakura.ad.jp/cloud/zone/tk1a/api/cloud/1.1/",
}

DEFAULT_API_ROOT_URL = ZONE_API_ROOT_URLS[DEFAULT_ZONE]

# Tells the API to encode large integers as JSON numbers rather than strings
BIGINT_AS_INT_HEADER = 'X-Sakura-Bigint-As-Int'


def api_root_url_for_zone(zone: str) -> str:
    try:
        return ZONE_API_ROOT_URLS[zone]
    except KeyError:
        raise UnsupportedZoneError(zone) from None


def default_user_agent() -> str:
    return (f"cloudhsm-api-python/{__version__} "
            f"({platform.system().lower()}/{platform.machine().lower()}) "
            f"{requests.utils.default_user_agent()}")


def default_headers() -> dict[str, str]:
    return {BIGINT_AS_INT_HEADER: '1'}


@dataclass(frozen=True)
class ClientConfig:
    api_root_url: str = DEFAULT_API_ROOT_URL
    access_token: str | None = None
    access_token_secret: str | None = field(default=None, repr=False)
    user_agent: str = field(default_factory=default_user_agent)
    # Extra request headers; the headers the API requires always take precedence
    headers: Mapping[str, str] = field(default_factory=dict)
    options: BaseOptions = field(default_factory=DefaultOptions)

    @property
    def auth(self) -> tuple[str, str] | None:
        """
        HTTP basic auth credentials, if an access key pair was given
        """
        if self.access_token is None and self.access_token_secret is None:
            return None
        return (self.access_token or '', self.access_token_secret or '')

    @property
    def request_headers(self) -> dict[str, str]:
        return {'User-Agent': self.user_agent, **self.headers, **default_headers()}

    @property
    def protocol(self) -> str:
        return urlparse(self.api_root_url).scheme

    def validate(self) -> None:
        """
        Raise ValueError if the API root URL cannot be used
        """
        parsed = urlparse(self.api_root_url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ValueError(f"invalid API root URL: '{self.api_root_url}'")

    def with_zone(self, zone: str) -> Self:
        return replace(self, api_root_url=api_root_url_for_zone(zone))
