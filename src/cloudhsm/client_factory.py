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
Functions for creating a CloudHSM API client
"""

from collections.abc import Mapping
import logging
from typing import TypedDict, Unpack

import requests

from cloudhsm.clients.client import CloudHSMAPIClient
from cloudhsm.config import (ClientConfig,
                             DEFAULT_API_ROOT_URL,
                             api_root_url_for_zone,
                             default_user_agent)
from cloudhsm.exceptions import ClientError
from cloudhsm.options import BaseOptions, DefaultOptions

LOGGER = logging.getLogger(__name__)


class ClientParams(TypedDict, total=False):
    """
    Optional parameters accepted by the new_client* functions
    """
    # Selects the API root URL of a known zone; takes precedence over any URL argument
    zone: str
    access_token: str
    access_token_secret: str
    user_agent: str
    # Extra request headers. They cannot override the headers the API requires.
    headers: Mapping[str, str]
    options: BaseOptions


def new_client(**params: Unpack[ClientParams]) -> CloudHSMAPIClient:
    return new_client_with_api_url(DEFAULT_API_ROOT_URL, **params)


def new_client_with_api_url(api_url: str, **params: Unpack[ClientParams]) -> CloudHSMAPIClient:
    return new_client_with_api_url_and_session(api_url, None, **params)


def new_client_with_api_url_and_session(api_url: str,
                                        session: requests.Session | None,
                                        **params: Unpack[ClientParams]) -> CloudHSMAPIClient:
    """
    Create a client for the API rooted at api_url.

    If session is given, it is used for every request instead of a session with
    the default retry and timeout policy, and it is left open when the client is closed.
    An unknown zone raises UnsupportedZoneError here, not on first use.
    """
    if "zone" in params:
        api_url = api_root_url_for_zone(params["zone"])
    config = ClientConfig(
        api_root_url=api_url,
        access_token=params.get("access_token"),
        access_token_secret=params.get("access_token_secret"),
        user_agent=params.get("user_agent") or default_user_agent(),
        headers=dict(params.get("headers", {})),
        options=params.get("options") or DefaultOptions(),
    )
    try:
        config.validate()
    except ValueError as err:
        raise ClientError("NewClientWithApiUrl", err) from err
    LOGGER.debug("Creating CloudHSM API client for %s", config.api_root_url)
    return CloudHSMAPIClient(config, session=session)
