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

from abc import ABC, abstractmethod
from typing import Any

from cloudhsm.rrs import RequestsRetryAdapterArgs


# This is the source of truth for default option values. All other code
# should access these values indirectly through a BaseOptions object.
DEFAULTS = {
    'backoff_factor': 0.5,
    'connect_timeout': 3,
    'read_timeout': 60,
    'retries': 3,
}

class BaseOptions(ABC):
    """
    Abstract base class for getting client option values
    """

    @abstractmethod
    def get_option(self, key: str) -> Any:
        """
        Return the value for the specified option
        """

    # These properties call the method responsible for getting the option value.
    # All these do is convert the response to the appropriate type for the option,
    # and return it.

    @property
    def backoff_factor(self) -> float:
        return float(self.get_option('backoff_factor'))

    @property
    def connect_timeout(self) -> float:
        return float(self.get_option('connect_timeout'))

    @property
    def read_timeout(self) -> float:
        return float(self.get_option('read_timeout'))

    @property
    def retries(self) -> int:
        return int(self.get_option('retries'))

    @property
    def retry_adapter_args(self) -> RequestsRetryAdapterArgs:
        return RequestsRetryAdapterArgs(retries=self.retries,
                                        backoff_factor=self.backoff_factor,
                                        connect_timeout=self.connect_timeout,
                                        read_timeout=self.read_timeout)


class DefaultOptions(BaseOptions):
    """
    Returns the default value for each option
    """
    def get_option(self, key: str) -> Any:
        if key in DEFAULTS:
            return DEFAULTS[key]
        raise KeyError(key)


class Options(DefaultOptions):
    """
    Options with caller-supplied overrides on top of the defaults
    """
    def __init__(self, **overrides: Any) -> None:
        super().__init__()
        unknown = sorted(set(overrides) - set(DEFAULTS))
        if unknown:
            raise KeyError(f"Unknown option(s): {', '.join(unknown)}")
        self.options = overrides

    def get_option(self, key: str) -> Any:
        if key in self.options:
            return self.options[key]
        return super().get_option(key)
