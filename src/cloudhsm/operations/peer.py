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
Operations on the VPN router peers of an HSM partition
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
import logging

from cloudhsm.clients.client import CloudHSMAPIClient
from cloudhsm.exceptions import INVALID_PARAMETER, NOT_FOUND, translate_errors
from cloudhsm.types import CloudHSM, CloudHSMPeer, CreateCloudHSMPeer, WrappedCreateCloudHSMPeer

from .base import BaseHSMScopedOp

LOGGER = logging.getLogger(__name__)


@dataclass
class CloudHSMPeerCreateParams:
    router_id: str = ''
    secret_key: str = field(default='', repr=False)


class PeerOp(BaseHSMScopedOp):

    def list(self) -> list[CloudHSMPeer]:
        with translate_errors("Peer.List", NOT_FOUND):
            return self.client.peers.list(self.hsm_id)["Peers"]

    def create(self, params: CloudHSMPeerCreateParams) -> CloudHSMPeer:
        """
        Peer a router with the partition. The router ID becomes the peer's ID.

        The API does not hand back anything that identifies the new peer beyond the
        router ID. Callers that need the stored record should list the peers before
        and after, and compare them with diff_peers.
        """
        data = CreateCloudHSMPeer(ID=params.router_id, SecretKey=params.secret_key)
        with translate_errors("Peer.Create", INVALID_PARAMETER):
            created = self.client.peers.create(self.hsm_id, WrappedCreateCloudHSMPeer(Peer=data))
        LOGGER.info("Created peer %s on CloudHSM %s", params.router_id, self.hsm_id)
        return created

    def delete(self, peer_id: str) -> None:
        with translate_errors("Peer.Delete", NOT_FOUND):
            self.client.peers.destroy(self.hsm_id, peer_id)
        LOGGER.info("Deleted peer %s on CloudHSM %s", peer_id, self.hsm_id)


def new_peer_op(client: CloudHSMAPIClient, hsm: CloudHSM) -> PeerOp:
    """
    Return the peer operations for an HSM partition.
    Raises UnavailableError, without making any request, if the partition is not available.
    """
    return PeerOp(client, hsm)


def diff_peers(before: Iterable[CloudHSMPeer],
               after: Iterable[CloudHSMPeer]) -> list[CloudHSMPeer]:
    """
    Return the peers in after whose ID does not appear in before, in their original order
    """
    known_ids = {peer["ID"] for peer in before}
    return [peer for peer in after if peer["ID"] not in known_ids]
