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

from http import HTTPStatus
import unittest

from cloudhsm.exceptions import APIError, InvalidParameterError, NotFoundError
from cloudhsm.operations import (CloudHSMSoftwareLicenseCreateParams,
                                 CloudHSMSoftwareLicenseUpdateParams,
                                 LicenseOp)
from cloudhsm.test import (BaseTestCase,
                           TEMPLATE_LICENSE,
                           error_response,
                           new_test_client,
                           paginated)


class TestLicenseOp(BaseTestCase):
    """LicenseOp unit tests"""

    def test_list(self):
        client, adapter = new_test_client(paginated("CloudHSMs", [TEMPLATE_LICENSE]))
        res = LicenseOp(client).list()

        self.assertEqual(res, [TEMPLATE_LICENSE])
        self.assertRequest(adapter, "GET", "cloudhsm/licenses/")

    def test_list_500(self):
        client, _ = new_test_client(error_response("boom"), HTTPStatus.BAD_GATEWAY)
        with self.assertRaises(APIError) as cm:
            LicenseOp(client).list()
        self.assertEqual(cm.exception.status_code, 502)
        self.assertEqual(cm.exception.operation, "License.List")

    def test_create(self):
        client, adapter = new_test_client({"CloudHSM": TEMPLATE_LICENSE}, HTTPStatus.CREATED)
        res = LicenseOp(client).create(CloudHSMSoftwareLicenseCreateParams(
            name="test-license",
            description="This is a test license",
            tags=["tag1", "tag2"],
        ))

        self.assertEqual(res, TEMPLATE_LICENSE)
        self.assertRequest(adapter, "POST", "cloudhsm/licenses/")
        self.assertEqual(adapter.last_json, {"CloudHSM": {
            "ServiceClass": "cloud/cloudhsm/license/l7",
            "Name": "test-license",
            "Description": "This is a test license",
            "Tags": ["tag1", "tag2"],
        }})

    def test_create_defaults(self):
        client, adapter = new_test_client({"CloudHSM": TEMPLATE_LICENSE}, HTTPStatus.CREATED)
        LicenseOp(client).create(CloudHSMSoftwareLicenseCreateParams(name="test-license"))

        body = adapter.last_json["CloudHSM"]
        self.assertEqual(body["ServiceClass"], "cloud/cloudhsm/license/l7")
        self.assertEqual(body["Tags"], [])
        self.assertNotIn("Description", body)

    def test_create_422(self):
        client, _ = new_test_client(error_response("Invalid license."),
                                    HTTPStatus.UNPROCESSABLE_ENTITY)
        with self.assertRaises(InvalidParameterError) as cm:
            LicenseOp(client).create(CloudHSMSoftwareLicenseCreateParams())
        self.assertIn("invalid", str(cm.exception))

    def test_read(self):
        client, adapter = new_test_client({"CloudHSM": TEMPLATE_LICENSE})
        res = LicenseOp(client).read("113600000301")

        self.assertEqual(res, TEMPLATE_LICENSE)
        self.assertRequest(adapter, "GET", "cloudhsm/licenses/113600000301/")

    def test_read_404(self):
        client, _ = new_test_client(error_response("Not found"), HTTPStatus.NOT_FOUND)
        with self.assertRaises(NotFoundError) as cm:
            LicenseOp(client).read("0")
        self.assertEqual(cm.exception.operation, "License.Read")

    def test_update(self):
        client, adapter = new_test_client({"CloudHSM": TEMPLATE_LICENSE})
        LicenseOp(client).update("113600000301",
                                 CloudHSMSoftwareLicenseUpdateParams(name="renamed"))

        self.assertRequest(adapter, "PUT", "cloudhsm/licenses/113600000301/")
        self.assertEqual(adapter.last_json, {"CloudHSM": {
            "ServiceClass": "cloud/cloudhsm/license/l7",
            "Name": "renamed",
            "Description": "",
            "Tags": [],
        }})

    def test_update_422(self):
        client, _ = new_test_client(error_response("Invalid license."),
                                    HTTPStatus.UNPROCESSABLE_ENTITY)
        with self.assertRaises(InvalidParameterError):
            LicenseOp(client).update("0", CloudHSMSoftwareLicenseUpdateParams())

    def test_delete(self):
        client, adapter = new_test_client(None, HTTPStatus.NO_CONTENT)
        LicenseOp(client).delete("113600000301")
        self.assertRequest(adapter, "DELETE", "cloudhsm/licenses/113600000301/")

    def test_delete_404(self):
        client, _ = new_test_client(error_response("Not found"), HTTPStatus.NOT_FOUND)
        with self.assertRaises(NotFoundError):
            LicenseOp(client).delete("0")

    def test_error_statuses(self):
        self.assertErrorStatuses("License.List", lambda c: LicenseOp(c).list(),
                                 {404: APIError, 422: APIError, 500: APIError})
        self.assertErrorStatuses(
            "License.Create",
            lambda c: LicenseOp(c).create(CloudHSMSoftwareLicenseCreateParams()),
            {404: APIError, 422: InvalidParameterError, 500: APIError})
        self.assertErrorStatuses("License.Read", lambda c: LicenseOp(c).read("0"),
                                 {404: NotFoundError, 422: APIError, 500: APIError})
        self.assertErrorStatuses(
            "License.Update",
            lambda c: LicenseOp(c).update("0", CloudHSMSoftwareLicenseUpdateParams()),
            {404: APIError, 422: InvalidParameterError, 500: APIError, 503: APIError})
        self.assertErrorStatuses("License.Delete", lambda c: LicenseOp(c).delete("0"),
                                 {404: NotFoundError, 422: APIError, 500: APIError})

    def test_update_503_keeps_status(self):
        client, _ = new_test_client(error_response("maintenance"),
                                    HTTPStatus.SERVICE_UNAVAILABLE)
        with self.assertRaises(APIError) as cm:
            LicenseOp(client).update("0", CloudHSMSoftwareLicenseUpdateParams(name="renamed"))
        self.assertEqual(cm.exception.status_code, 503)
        self.assertIn("internal server error", str(cm.exception))


if __name__ == '__main__':
    unittest.main()
