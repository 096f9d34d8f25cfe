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

import pytest

from cloudhsm import (CloudHSMSoftwareLicenseCreateParams,
                      CloudHSMSoftwareLicenseUpdateParams,
                      LicenseOp,
                      NotFoundError)

from conftest import random_name


@pytest.mark.integration
def test_license_lifecycle(client):
    api = LicenseOp(client)
    created = api.create(CloudHSMSoftwareLicenseCreateParams(
        name=random_name("test-license-"),
        description=random_name("integration test license "),
    ))
    assert created["ID"]
    try:
        read = api.read(created["ID"])
        assert (read["ID"], read["Name"]) == (created["ID"], created["Name"])

        licenses = api.list()
        assert created["ID"] in [lic["ID"] for lic in licenses]

        new_desc = "updated integration test License"
        updated = api.update(created["ID"], CloudHSMSoftwareLicenseUpdateParams(
            name=read["Name"],
            description=new_desc,
        ))
        assert updated["Description"] == new_desc
    finally:
        api.delete(created["ID"])

    with pytest.raises(NotFoundError):
        api.read(created["ID"])
