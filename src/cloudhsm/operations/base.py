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

from cloudhsm.clients.client import CloudHSMAPIClient
from cloudhsm.exceptions import UnavailableError
from cloudhsm.types import Availability, CloudHSM


class BaseOp(ABC):
    """
    Base class for the resource operation objects. Each operation performs exactly
    one request through the API client and either returns the decoded resource or
    raises an APIError.
    """

    def __init__(self, client: CloudHSMAPIClient) -> None:
        self.client = client


class BaseHSMScopedOp(BaseOp, ABC):
    """
    Base class for operations on resources that belong to one HSM partition.

    The partition must be available when the object is created. This is only
    checked here; it is not re-checked on each call.
    """

    def __init__(self, client: CloudHSMAPIClient, hsm: CloudHSM) -> None:
        availability = hsm.get("Availability")
        if availability != Availability.available:
            raise UnavailableError(hsm.get("ID"), availability)
        super().__init__(client)
        self.hsm = CloudHSM(**hsm)

    @property
    def hsm_id(self) -> str:
        return self.hsm["ID"]
