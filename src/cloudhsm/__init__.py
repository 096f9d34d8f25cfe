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
Client library for the Sakura Cloud CloudHSM API
"""

from cloudhsm.client_factory import (ClientParams,
                                     new_client,
                                     new_client_with_api_url,
                                     new_client_with_api_url_and_session)
from cloudhsm.clients.client import CloudHSMAPIClient
from cloudhsm.config import (ClientConfig,
                             DEFAULT_API_ROOT_URL,
                             ZONE_API_ROOT_URLS,
                             api_root_url_for_zone)
from cloudhsm.exceptions import (APIError,
                                 ClientError,
                                 CloudHSMException,
                                 InvalidParameterError,
                                 NotFoundError,
                                 UnavailableError,
                                 UnsupportedZoneError)
from cloudhsm.operations import (ClientOp,
                                 CloudHSMClientCreateParams,
                                 CloudHSMClientUpdateParams,
                                 CloudHSMCreateParams,
                                 CloudHSMOp,
                                 CloudHSMPeerCreateParams,
                                 CloudHSMSoftwareLicenseCreateParams,
                                 CloudHSMSoftwareLicenseUpdateParams,
                                 CloudHSMUpdateParams,
                                 LicenseOp,
                                 PeerOp,
                                 diff_peers,
                                 new_client_op,
                                 new_peer_op)
from cloudhsm.options import DefaultOptions, Options
from cloudhsm.version import __version__
