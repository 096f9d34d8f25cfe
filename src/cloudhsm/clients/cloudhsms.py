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
cloudhsm/cloudhsms endpoint definitions
"""

from cloudhsm.types import (CloudHSM,
                            CreateCloudHSM,
                            PaginatedCloudHSMList,
                            WrappedCloudHSM,
                            WrappedCreateCloudHSM)
from cloudhsm.utils import path_segment

from .base import BaseCloudHSMEndpoint


class CloudHSMsEndpoint(BaseCloudHSMEndpoint):
    ENDPOINT = 'cloudhsm/cloudhsms'

    def list(self) -> PaginatedCloudHSMList:
        return self.paginated(self.get(operation='CloudhsmCloudhsmsList'), 'CloudHSMs')

    def create(self, data: WrappedCreateCloudHSM) -> CreateCloudHSM:
        body = self.post(operation='CloudhsmCloudhsmsCreate', json=data)
        return self.unwrap(body, 'CloudHSM')

    def retrieve(self, resource_id: str) -> CloudHSM:
        body = self.get(operation='CloudhsmCloudhsmsRetrieve', uri=path_segment(resource_id))
        return self.unwrap(body, 'CloudHSM')

    def update(self, resource_id: str, data: WrappedCloudHSM) -> CloudHSM:
        body = self.put(operation='CloudhsmCloudhsmsUpdate', uri=path_segment(resource_id),
                        json=data)
        return self.unwrap(body, 'CloudHSM')

    def destroy(self, resource_id: str) -> None:
        self.delete(operation='CloudhsmCloudhsmsDestroy', uri=path_segment(resource_id))
