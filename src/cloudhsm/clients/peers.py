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
cloudhsm/cloudhsms/<hsm_id>/peers endpoint definitions
"""

from cloudhsm.types import CloudHSMPeer, PaginatedCloudHSMPeerList, WrappedCreateCloudHSMPeer

from .base import BaseHSMScopedEndpoint


class CloudHSMPeersEndpoint(BaseHSMScopedEndpoint):
    SUB_ENDPOINT = 'peers'

    def list(self, hsm_id: str) -> PaginatedCloudHSMPeerList:
        body = self.get(operation='CloudhsmCloudhsmsPeersRetrieve', uri=self.item_uri(hsm_id))
        return self.paginated(body, 'Peers')

    def create(self, hsm_id: str, data: WrappedCreateCloudHSMPeer) -> CloudHSMPeer:
        body = self.post(operation='CloudhsmCloudhsmsPeersCreate', uri=self.item_uri(hsm_id),
                         json=data)
        return self.unwrap(body, 'Peer')

    def destroy(self, hsm_id: str, peer_id: str) -> None:
        self.delete(operation='CloudhsmCloudhsmsPeersDestroy', uri=self.item_uri(hsm_id, peer_id))
