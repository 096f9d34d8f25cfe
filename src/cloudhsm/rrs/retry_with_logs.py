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

import logging

from urllib3.util.retry import Retry

LOGGER = logging.getLogger(__name__)


class RetryWithLogs(Retry):
    """
    A urllib3 Retry that logs each reattempt. By overriding the superclass method increment,
    we let the user know how frequently an endpoint is being reattempted, which gives a more
    immediate sense of upstream instability than a single failure at the end would.
    """

    def increment(self, method=None, url=None, *args, **kwargs):
        pool = kwargs.get('_pool')
        if pool is not None:
            endpoint = f"{pool.scheme}://{pool.host}{url}"
        else:
            endpoint = url
        response = kwargs.get('response')
        if response is not None:
            LOGGER.warning("Previous %s attempt on '%s' resulted in %s response.",
                           method, endpoint, response.status)
        LOGGER.info("Reattempting %s request for '%s'", method, endpoint)
        return super().increment(method, url, *args, **kwargs)
