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

from abc import ABC, abstractmethod
from collections.abc import Mapping
import logging
from typing import cast, TYPE_CHECKING, TypedDict, Unpack

import requests

from cloudhsm.utils import compact_response_text

from .defs import RequestData, RequestOptions, RequestsMethod
from .exceptions import ApiResponseError
from .request_error_handler import BaseRequestErrorHandler, RequestErrorHandler

if TYPE_CHECKING:
    from cloudhsm.config import ClientConfig

LOGGER = logging.getLogger(__name__)


class GetDeleteKwargs(TypedDict, total=False):
    """
    Kwargs definition for BaseGenericEndpoint get and delete methods
    """
    uri: str
    params: Mapping[str,object]|None
    headers: Mapping[str,str]|None


class RequestKwargs(GetDeleteKwargs, total=False):
    """
    Kwargs definition for BaseGenericEndpoint patch, post, put, and request methods
    """
    json: object


class BaseGenericEndpoint[RequestReturnT](ABC):
    """
    This base class provides generic access to an API endpoint.
    RequestReturnT represents the type of data this API will return.

    Every request is tagged with an operation name, which only serves to identify
    the call in log messages.

    Exceptions are handled by a separate class, since different API clients
    may want to handle these differently.
    """
    ENDPOINT: str = ''
    error_handler: type[BaseRequestErrorHandler] = RequestErrorHandler

    def __init__(self, session: requests.Session, config: "ClientConfig") -> None:
        super().__init__()
        self.session = session
        self.config = config

    @classmethod
    @abstractmethod
    def format_response(cls, response: requests.Response) -> RequestReturnT:
        ...

    @property
    def base_url(self) -> str:
        return f"{self.config.api_root_url.rstrip('/')}/{self.ENDPOINT.strip('/')}"

    def url(self, uri: str) -> str:
        # The API expects a trailing slash on every resource path
        segments = [self.base_url]
        segments.extend(segment for segment in uri.split('/') if segment)
        return '/'.join(segments) + '/'

    def request(self,
                method: RequestsMethod,
                /,
                *,
                operation: str,
                **kwargs: Unpack[RequestKwargs]) -> RequestReturnT:
        url = self.url(kwargs.pop("uri", ""))
        # After popping 'uri', we know we can consider it a RequestOptions dict
        _kwargs = cast(RequestOptions, kwargs)
        _kwargs["headers"] = {**self.config.request_headers, **(kwargs.get("headers") or {})}
        if self.config.auth is not None:
            _kwargs["auth"] = self.config.auth
        method_name = method.__name__.upper()
        # Request bodies may carry secrets, so only the query parameters are logged
        LOGGER.debug("%s: %s %s (params=%s)", operation, method_name, url, _kwargs.get("params"))
        try:
            return self._request(method, url, **_kwargs)
        except Exception as err:
            self.error_handler.handle_exception(
                err,
                RequestData(operation=operation,
                            method_name=method_name,
                            url=url,
                            request_options=_kwargs))

    @classmethod
    def _request(cls, method: RequestsMethod, url: str, /,
                 **kwargs: Unpack[RequestOptions]) -> RequestReturnT:
        """Make API request"""
        with method(url, **kwargs) as response:
            LOGGER.debug("Response status code=%d, reason=%s, body=%s", response.status_code,
                 response.reason, compact_response_text(response.text))
            if not response.ok:
                raise ApiResponseError(response=response, method=method.__name__.upper(), url=url)
            return cls.format_response(response)

    def delete(self, *, operation: str, **kwargs: Unpack[GetDeleteKwargs]) -> RequestReturnT:
        """Delete request"""
        return self.request(self.session.delete, operation=operation, **kwargs)

    def get(self, *, operation: str, **kwargs: Unpack[GetDeleteKwargs]) -> RequestReturnT:
        """Get request"""
        return self.request(self.session.get, operation=operation, **kwargs)

    def post(self, *, operation: str, **kwargs: Unpack[RequestKwargs]) -> RequestReturnT:
        """Post request"""
        return self.request(self.session.post, operation=operation, **kwargs)

    def put(self, *, operation: str, **kwargs: Unpack[RequestKwargs]) -> RequestReturnT:
        """Put request"""
        return self.request(self.session.put, operation=operation, **kwargs)
