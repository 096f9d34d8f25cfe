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
cloudhsm/cloudhsms/<hsm_id>/clients endpoint definitions
"""

from cloudhsm.types import CloudHSMClient, PaginatedCloudHSMClientList, WrappedCloudHSMClient

from .base import BaseHSMScopedEndpoint


class CloudHSMClientsEndpoint(BaseHSMScopedEndpoint):
    SUB_ENDPOINT = 'clients'

    def list(self, hsm_id: str) -> PaginatedCloudHSMClientList:
        body = self.get(operation='CloudhsmCloudhsmsClientsList', uri=self.item_uri(hsm_id))
        return self.paginated(body, 'Clients')

    def create(self, hsm_id: str, data: WrappedCloudHSMClient) -> CloudHSMClient:
        body = self.post(operation='CloudhsmCloudhsmsClientsCreate', uri=self.item_uri(hsm_id),
                         json=data)
        return self.unwrap(body, 'Client')

    def retrieve(self, hsm_id: str, client_id: str) -> CloudHSMClient:
        body = self.get(operation='CloudhsmCloudhsmsClientsRetrieve',
                        uri=self.item_uri(hsm_id, client_id))
        return self.unwrap(body, 'Client')

    def update(self, hsm_id: str, client_id: str, data: WrappedCloudHSMClient) -> CloudHSMClient:
        body = self.put(operation='CloudhsmCloudhsmsClientsUpdate',
                        uri=self.item_uri(hsm_id, client_id), json=data)
        return self.unwrap(body, 'Client')

    def destroy(self, hsm_id: str, client_id: str) -> None:
        self.delete(operation='CloudhsmCloudhsmsClientsDestroy',
                    uri=self.item_uri(hsm_id, client_id))
