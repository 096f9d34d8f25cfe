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
Operations on the TLS client certificates registered against an HSM partition
"""

from dataclasses import dataclass
import logging

from cloudhsm.clients.client import CloudHSMAPIClient
from cloudhsm.exceptions import INVALID_PARAMETER, NOT_FOUND, translate_errors
from cloudhsm.types import Availability, CloudHSM, CloudHSMClient, WrappedCloudHSMClient

from .base import BaseHSMScopedOp

LOGGER = logging.getLogger(__name__)


@dataclass
class CloudHSMClientCreateParams:
    name: str = ''
    # PEM encoded certificate
    certificate: str = ''


@dataclass
class CloudHSMClientUpdateParams:
    name: str = ''


class ClientOp(BaseHSMScopedOp):

    def list(self) -> list[CloudHSMClient]:
        with translate_errors("CloudHSMClient.List"):
            return self.client.clients.list(self.hsm_id)["Clients"]

    def create(self, params: CloudHSMClientCreateParams) -> CloudHSMClient:
        # The API requires new certificates to be submitted as "precreate"
        data = CloudHSMClient(Name=params.name,
                              Certificate=params.certificate,
                              Availability=Availability.precreate)
        with translate_errors("CloudHSMClient.Create", INVALID_PARAMETER):
            created = self.client.clients.create(self.hsm_id, WrappedCloudHSMClient(Client=data))
        LOGGER.info("Created client certificate %s (%s) on CloudHSM %s",
                    created.get("ID"), created.get("Name"), self.hsm_id)
        return created

    def read(self, client_id: str) -> CloudHSMClient:
        with translate_errors("CloudHSMClient.Read", NOT_FOUND):
            return self.client.clients.retrieve(self.hsm_id, client_id)

    def update(self, client_id: str, params: CloudHSMClientUpdateParams) -> CloudHSMClient:
        """
        Rename a client certificate. The certificate itself cannot be changed once created.
        """
        # Availability cannot be updated, but the API rejects an empty value
        data = CloudHSMClient(Name=params.name, Availability=Availability.available)
        with translate_errors("CloudHSMClient.Update", INVALID_PARAMETER):
            return self.client.clients.update(self.hsm_id, client_id,
                                              WrappedCloudHSMClient(Client=data))

    def delete(self, client_id: str) -> None:
        with translate_errors("CloudHSMClient.Delete", NOT_FOUND):
            self.client.clients.destroy(self.hsm_id, client_id)
        LOGGER.info("Deleted client certificate %s on CloudHSM %s", client_id, self.hsm_id)


def new_client_op(client: CloudHSMAPIClient, hsm: CloudHSM) -> ClientOp:
    """
    Return the certificate operations for an HSM partition.
    Raises UnavailableError, without making any request, if the partition is not available.
    """
    return ClientOp(client, hsm)
