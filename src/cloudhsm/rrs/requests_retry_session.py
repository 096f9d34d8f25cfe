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
Return a requests session with retries, timeouts, and logging.

The purpose of this module is to provide a unified way of creating a requests
connection for talking to the CloudHSM API; these connections are exposed as a
requests session with an HTTP retry adapter attached to it.
"""

from contextlib import AbstractContextManager
import logging
from typing import TypedDict, Unpack

import requests

from .timeout_http_adapter import TimeoutHTTPAdapter
from .retry_with_logs import RetryWithLogs

LOGGER = logging.getLogger(__name__)

PROTOCOL = 'https'

# POST is not idempotent, so it is never retried
RETRY_ALLOWED_METHODS = frozenset(['GET', 'HEAD', 'PUT', 'DELETE', 'OPTIONS'])


class RequestsRetryAdapterArgs(TypedDict, total=False):
    """
    Kwargs accepted by requests_retry_session (other than session and protocol)
    """
    retries: int
    backoff_factor: float
    status_forcelist: tuple[int, ...]
    connect_timeout: float
    read_timeout: float


def requests_retry_session(retries: int = 3,
                           backoff_factor: float = 0.5,
                           status_forcelist: tuple[int, ...] = (500, 502, 503, 504),
                           connect_timeout: float = 3,
                           read_timeout: float = 60,
                           session: requests.Session | None = None,
                           protocol: str = PROTOCOL) -> requests.Session:
    session = session or requests.Session()
    retry = RetryWithLogs(
        total=retries,
        read=retries,
        connect=retries,
        backoff_factor=backoff_factor,
        status_forcelist=status_forcelist,
        allowed_methods=RETRY_ALLOWED_METHODS,
        # Hand the last response back rather than raising, so that its status code is
        # visible to whoever interprets the failure
        raise_on_status=False,
    )
    adapter = TimeoutHTTPAdapter(max_retries=retry, timeout=(connect_timeout, read_timeout))
    session.mount(f"{protocol}://", adapter)
    return session


class RetrySessionManager(AbstractContextManager):
    """
    Context manager which provides a retrying requests session as self.requests_session.

    The session is created on first use. If a session is passed in, it is used as-is and
    is never closed by this class, since its lifetime belongs to the caller.
    """

    def __init__(self,
                 protocol: str = PROTOCOL,
                 session: requests.Session | None = None,
                 **adapter_kwargs: Unpack[RequestsRetryAdapterArgs]) -> None:
        self._protocol = protocol
        self._adapter_kwargs = adapter_kwargs
        self._session = session
        self._owns_session = session is None

    @property
    def requests_session(self) -> requests.Session:
        if self._session is None:
            LOGGER.debug("Creating %s retry session (%s)", self._protocol, self._adapter_kwargs)
            self._session = requests_retry_session(protocol=self._protocol,
                                                   **self._adapter_kwargs)
        return self._session

    def close(self) -> None:
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool | None:
        self.close()
        return None
