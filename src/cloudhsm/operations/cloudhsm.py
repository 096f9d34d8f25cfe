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
Operations on HSM partitions
"""

from dataclasses import dataclass
import logging

from cloudhsm.exceptions import INVALID_PARAMETER, NOT_FOUND, translate_errors
from cloudhsm.types import (Availability,
                            CloudHSM,
                            CreateCloudHSM,
                            ServiceClass,
                            WrappedCloudHSM,
                            WrappedCreateCloudHSM)

from .base import BaseOp

LOGGER = logging.getLogger(__name__)


@dataclass
class CloudHSMCreateParams:
    name: str = ''
    description: str | None = None
    tags: list[str] | None = None
    ipv4_network_address: str = ''
    ipv4_prefix_length: int = 0


@dataclass
class CloudHSMUpdateParams:
    name: str = ''
    description: str | None = None
    tags: list[str] | None = None
    ipv4_network_address: str = ''
    ipv4_prefix_length: int = 0


class CloudHSMOp(BaseOp):

    def list(self) -> list[CloudHSM]:
        with translate_errors("CloudHSM.List"):
            return self.client.cloudhsms.list()["CloudHSMs"]

    def create(self, params: CloudHSMCreateParams) -> CreateCloudHSM:
        # Availability and service class are not the caller's to choose
        data = CreateCloudHSM(
            Name=params.name,
            Tags=list(params.tags) if params.tags is not None else [],
            Availability=Availability.available,
            ServiceClass=ServiceClass.partition,
            Ipv4NetworkAddress=params.ipv4_network_address,
            Ipv4PrefixLength=params.ipv4_prefix_length,
        )
        if params.description is not None:
            data["Description"] = params.description
        with translate_errors("CloudHSM.Create", INVALID_PARAMETER):
            created = self.client.cloudhsms.create(WrappedCreateCloudHSM(CloudHSM=data))
        LOGGER.info("Created CloudHSM %s (%s)", created.get("ID"), created.get("Name"))
        return created

    def read(self, resource_id: str) -> CloudHSM:
        with translate_errors("CloudHSM.Read", NOT_FOUND):
            return self.client.cloudhsms.retrieve(resource_id)

    def update(self, resource_id: str, params: CloudHSMUpdateParams) -> CloudHSM:
        """
        Replace the partition's mutable fields. This is not a partial update: any field
        left unset in params is sent as its empty value.
        """
        data = CloudHSM(
            ServiceClass=ServiceClass.partition,
            Availability=Availability.available,
            Name=params.name,
            Description=params.description or '',
            Tags=list(params.tags) if params.tags is not None else [],
            Ipv4NetworkAddress=params.ipv4_network_address,
            Ipv4PrefixLength=params.ipv4_prefix_length,
        )
        with translate_errors("CloudHSM.Update", INVALID_PARAMETER):
            return self.client.cloudhsms.update(resource_id, WrappedCloudHSM(CloudHSM=data))

    def delete(self, resource_id: str) -> None:
        with translate_errors("CloudHSM.Delete", NOT_FOUND):
            self.client.cloudhsms.destroy(resource_id)
        LOGGER.info("Deleted CloudHSM %s", resource_id)
