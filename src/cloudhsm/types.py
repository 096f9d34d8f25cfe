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
Type definitions for CloudHSM API records, and the enumerated values they use
"""

from typing import Literal, Required, TypedDict

type AvailabilityStr = Literal['precreate', 'available', 'unavailable']
type PartitionServiceClassStr = Literal['cloud/cloudhsm/partition']
type LicenseServiceClassStr = Literal['cloud/cloudhsm/license/l7']


class Availability:
    precreate: AvailabilityStr = "precreate"
    available: AvailabilityStr = "available"
    unavailable: AvailabilityStr = "unavailable"


class ServiceClass:
    partition: PartitionServiceClassStr = "cloud/cloudhsm/partition"
    license_l7: LicenseServiceClassStr = "cloud/cloudhsm/license/l7"


class CloudHSM(TypedDict, total=False):
    """
    An HSM partition
    """
    ID: str
    CreatedAt: str
    ModifiedAt: str
    Availability: AvailabilityStr
    Name: str
    Description: str
    Tags: list[str]
    ServiceClass: PartitionServiceClassStr
    Ipv4NetworkAddress: str
    Ipv4PrefixLength: int


class CreateCloudHSM(CloudHSM, total=False):
    """
    The partition record used in create requests and responses
    """


class WrappedCloudHSM(TypedDict):
    CloudHSM: CloudHSM


class WrappedCreateCloudHSM(TypedDict):
    CloudHSM: CreateCloudHSM


class CloudHSMClient(TypedDict, total=False):
    """
    A TLS client certificate registered against a partition
    """
    ID: str
    CreatedAt: str
    ModifiedAt: str
    Availability: AvailabilityStr
    Name: str
    Certificate: str


class WrappedCloudHSMClient(TypedDict):
    Client: CloudHSMClient


class CloudHSMPeer(TypedDict, total=False):
    """
    A VPN router peered with a partition
    """
    ID: Required[str]


class CreateCloudHSMPeer(TypedDict):
    ID: str
    # Write-only; the API never returns it
    SecretKey: str


class WrappedCreateCloudHSMPeer(TypedDict):
    Peer: CreateCloudHSMPeer


class WrappedCloudHSMPeer(TypedDict):
    Peer: CloudHSMPeer


class CloudHSMSoftwareLicense(TypedDict, total=False):
    """
    A software license, independent of any partition
    """
    ID: str
    CreatedAt: str
    ModifiedAt: str
    ServiceClass: LicenseServiceClassStr
    Name: str
    Description: str
    Tags: list[str]


class CreateCloudHSMSoftwareLicense(CloudHSMSoftwareLicense, total=False):
    """
    The license record used in create requests and responses
    """


class WrappedCloudHSMSoftwareLicense(TypedDict):
    CloudHSM: CloudHSMSoftwareLicense


class WrappedCreateCloudHSMSoftwareLicense(TypedDict):
    CloudHSM: CreateCloudHSMSoftwareLicense


class Paginated(TypedDict, total=False):
    Count: int
    From: int
    Total: int


class PaginatedCloudHSMList(Paginated, total=False):
    CloudHSMs: list[CloudHSM]


class PaginatedCloudHSMClientList(Paginated, total=False):
    Clients: list[CloudHSMClient]


class PaginatedCloudHSMPeerList(Paginated, total=False):
    Peers: list[CloudHSMPeer]


class PaginatedCloudHSMSoftwareLicenseList(Paginated, total=False):
    CloudHSMs: list[CloudHSMSoftwareLicense]
