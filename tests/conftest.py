# -*- coding: utf-8 -*-
import os
from unittest import mock

import pytest

from mwsclient import mws

MOCK_DIR = os.path.join(os.path.dirname(__file__), 'mock')

CREDENTIALS = dict(access_key='AKIATESTACCESSKEY',
                   secret_key='testsecretkey',
                   account_id='A2TESTMERCHANT')


@pytest.fixture(autouse=True)
def reset_throttle():
    mws._throttle_buckets.clear()
    yield
    mws._throttle_buckets.clear()


@pytest.fixture
def credentials():
    return dict(CREDENTIALS)


@pytest.fixture
def mock_dir():
    return MOCK_DIR


def read_mock(name):
    with open(os.path.join(MOCK_DIR, name)) as f:
        return f.read()


def make_response(status_code=200, text=''):
    return mock.Mock(status_code=status_code, text=text, content=text.encode('utf-8'), headers={})
