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
Operations on software licenses
"""

from dataclasses import dataclass
import logging

from cloudhsm.exceptions import INVALID_PARAMETER, NOT_FOUND, translate_errors
from cloudhsm.types import (CloudHSMSoftwareLicense,
                            CreateCloudHSMSoftwareLicense,
                            LicenseServiceClassStr,
                            ServiceClass,
                            WrappedCloudHSMSoftwareLicense,
                            WrappedCreateCloudHSMSoftwareLicense)

from .base import BaseOp

LOGGER = logging.getLogger(__name__)


@dataclass
class CloudHSMSoftwareLicenseCreateParams:
    service_class: LicenseServiceClassStr | None = None
    name: str = ''
    description: str | None = None
    tags: list[str] | None = None


@dataclass
class CloudHSMSoftwareLicenseUpdateParams:
    service_class: LicenseServiceClassStr | None = None
    name: str = ''
    description: str | None = None
    tags: list[str] | None = None


class LicenseOp(BaseOp):

    def list(self) -> list[CloudHSMSoftwareLicense]:
        with translate_errors("License.List"):
            return self.client.licenses.list()["CloudHSMs"]

    def create(self,
               params: CloudHSMSoftwareLicenseCreateParams) -> CreateCloudHSMSoftwareLicense:
        data = CreateCloudHSMSoftwareLicense(
            ServiceClass=params.service_class or ServiceClass.license_l7,
            Name=params.name,
            Tags=list(params.tags) if params.tags is not None else [],
        )
        if params.description is not None:
            data["Description"] = params.description
        with translate_errors("License.Create", INVALID_PARAMETER):
            created = self.client.licenses.create(
                WrappedCreateCloudHSMSoftwareLicense(CloudHSM=data))
        LOGGER.info("Created software license %s (%s)", created.get("ID"), created.get("Name"))
        return created

    def read(self, resource_id: str) -> CloudHSMSoftwareLicense:
        with translate_errors("License.Read", NOT_FOUND):
            return self.client.licenses.retrieve(resource_id)

    def update(self, resource_id: str,
               params: CloudHSMSoftwareLicenseUpdateParams) -> CloudHSMSoftwareLicense:
        """
        Replace the license's mutable fields; unset fields are sent as their empty value
        """
        data = CloudHSMSoftwareLicense(
            ServiceClass=params.service_class or ServiceClass.license_l7,
            Name=params.name,
            Description=params.description or '',
            Tags=list(params.tags) if params.tags is not None else [],
        )
        with translate_errors("License.Update", INVALID_PARAMETER):
            return self.client.licenses.update(resource_id,
                                               WrappedCloudHSMSoftwareLicense(CloudHSM=data))

    def delete(self, resource_id: str) -> None:
        with translate_errors("License.Delete", NOT_FOUND):
            self.client.licenses.destroy(resource_id)
        LOGGER.info("Deleted software license %s", resource_id)
