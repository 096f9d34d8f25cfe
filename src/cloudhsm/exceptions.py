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
Exceptions raised by the CloudHSM client, and the translation of request
failures into them
"""

from collections.abc import Iterator
from contextlib import contextmanager
from http import HTTPStatus
from json import JSONDecodeError
from typing import NamedTuple

from requests.exceptions import RequestException
from urllib3.exceptions import MaxRetryError

from cloudhsm.clients.endpoints import ApiResponseError, ApiResponseFormatError
from cloudhsm.utils import exc_type_msg

# Request failures that translate_errors converts into APIError exceptions
REQUEST_EXCEPTIONS = (ApiResponseError, ApiResponseFormatError, RequestException,
                      JSONDecodeError, MaxRetryError)


class CloudHSMException(Exception):
    """
    Base class for all exceptions raised by this package
    """


class ClientError(CloudHSMException):
    """
    Raised when an API client cannot be constructed
    """

    def __init__(self, operation: str, cause: BaseException) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}: {exc_type_msg(cause)}")


class UnsupportedZoneError(CloudHSMException, ValueError):
    """
    Raised as soon as an unknown zone is requested, rather than on first use of the client
    """

    def __init__(self, zone: str) -> None:
        self.zone = zone
        super().__init__(f"unsupported zone: {zone}")


class UnavailableError(CloudHSMException):
    """
    Raised when a certificate or peer operation object is requested for an HSM
    partition that is not in the "available" state. Re-read the partition before
    trying again.
    """

    def __init__(self, hsm_id: str | None, availability: str | None) -> None:
        self.hsm_id = hsm_id
        self.availability = availability
        super().__init__(f"CloudHSM unavailable: {hsm_id} (availability={availability})")


class APIError(CloudHSMException):
    """
    A request to the CloudHSM API failed.

    status_code is the HTTP status of the response, or 0 if the request failed without one
    (connection failure, timeout, undecodable response).
    """

    def __init__(self, operation: str, status_code: int, cause: BaseException,
                 description: str = "internal server error") -> None:
        self.operation = operation
        self.status_code = status_code
        self.cause = cause
        self.description = description
        super().__init__(
            f"API Error: operation={operation}, status_code={status_code}: "
            f"{description}: {cause}"
        )


class NotFoundError(APIError):
    """
    The target resource does not exist (HTTP 404)
    """


class InvalidParameterError(APIError):
    """
    The request payload was rejected (HTTP 422)
    """


class StatusRule(NamedTuple):
    """
    Maps one HTTP status code to the APIError subclass raised for it at a call site
    """
    status_code: int
    error_class: type[APIError]
    description: str


NOT_FOUND = StatusRule(HTTPStatus.NOT_FOUND, NotFoundError, "not found")
INVALID_PARAMETER = StatusRule(HTTPStatus.UNPROCESSABLE_ENTITY, InvalidParameterError,
                               "invalid parameter")


def status_code_of(err: BaseException) -> int:
    """
    Return the HTTP status code carried by a request failure, or 0 if it has none
    """
    if isinstance(err, ApiResponseError):
        return err.status_code
    response = getattr(err, 'response', None)
    if isinstance(err, RequestException) and response is not None:
        return int(response.status_code)
    return 0


def translate_error(operation: str, err: BaseException,
                    rules: tuple[StatusRule, ...] = ()) -> APIError:
    """
    Convert a request failure into an APIError.

    The first rule whose status code matches decides the exception class. Any other
    status results in a plain APIError carrying that status; a failure with no status
    at all is reported as a transport error with status 0.
    """
    status_code = status_code_of(err)
    if not status_code:
        return APIError(operation, 0, err, "transport error")
    for rule in rules:
        if rule.status_code == status_code:
            return rule.error_class(operation, status_code, err, rule.description)
    return APIError(operation, status_code, err)


@contextmanager
def translate_errors(operation: str, *rules: StatusRule) -> Iterator[None]:
    """
    Re-raise any request failure inside the with block as the APIError chosen
    by translate_error
    """
    try:
        yield
    except REQUEST_EXCEPTIONS as err:
        raise translate_error(operation, err, rules) from err
