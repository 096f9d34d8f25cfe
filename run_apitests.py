'''
   Filename: run_apitests.py
Description: A test runner for the CloudHSM API integration tests.
'''

import pytest
import sys

sys.exit(
    pytest.main([
        '-x',
        '-v',
        '-s',
        '--disable-pytest-warnings',
        '--maxfail=10',
        '-m', 'integration',
        'api_tests',
    ])
)
