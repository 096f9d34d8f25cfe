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

from dataclasses import dataclass

from .api_client import APIClient
from .cloudhsm_clients import CloudHSMClientsEndpoint
from .cloudhsms import CloudHSMsEndpoint
from .licenses import LicensesEndpoint
from .peers import CloudHSMPeersEndpoint

@dataclass
class CloudHSMEndpoints:
    cloudhsms: CloudHSMsEndpoint | None = None
    clients: CloudHSMClientsEndpoint | None = None
    peers: CloudHSMPeersEndpoint | None = None
    licenses: LicensesEndpoint | None = None

class CloudHSMAPIClient(APIClient[CloudHSMEndpoints]):
    """
    Low-level client for the CloudHSM API. Use cloudhsm.client_factory to create one.
    """

    @property
    def _init_endpoints(self) -> CloudHSMEndpoints:
        return CloudHSMEndpoints()

    @property
    def cloudhsms(self) -> CloudHSMsEndpoint:
        if self._endpoints.cloudhsms is None:
            with self._lock:
                if self._endpoints.cloudhsms is None:
                    self._endpoints.cloudhsms = CloudHSMsEndpoint(self.requests_session,
                                                                  self.config)
        return self._endpoints.cloudhsms

    @property
    def clients(self) -> CloudHSMClientsEndpoint:
        if self._endpoints.clients is None:
            with self._lock:
                if self._endpoints.clients is None:
                    self._endpoints.clients = CloudHSMClientsEndpoint(self.requests_session,
                                                                      self.config)
        return self._endpoints.clients

    @property
    def peers(self) -> CloudHSMPeersEndpoint:
        if self._endpoints.peers is None:
            with self._lock:
                if self._endpoints.peers is None:
                    self._endpoints.peers = CloudHSMPeersEndpoint(self.requests_session,
                                                                  self.config)
        return self._endpoints.peers

    @property
    def licenses(self) -> LicensesEndpoint:
        if self._endpoints.licenses is None:
            with self._lock:
                if self._endpoints.licenses is None:
                    self._endpoints.licenses = LicensesEndpoint(self.requests_session,
                                                                self.config)
        return self._endpoints.licenses
