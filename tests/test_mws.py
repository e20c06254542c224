# -*- coding: utf-8 -*-
import base64
import hashlib
import hmac
import logging
from unittest import mock

import pytest
from requests.exceptions import ConnectionError

from conftest import make_response, read_mock
from mwsclient import config
from mwsclient.mws import MWS, MWSError, ServiceStatus, remove_empty


def test_region_selects_endpoint(credentials):
    api = MWS(region='DE', **credentials)
    assert api.domain == 'https://mws-eu.amazonservices.com'


def test_domain_overrides_region(credentials):
    api = MWS(region='DE', domain='https://example.com', **credentials)
    assert api.domain == 'https://example.com'


def test_unknown_region_raises(credentials):
    with pytest.raises(MWSError) as excinfo:
        MWS(region='XX', **credentials)
    assert "Incorrect region supplied ('XX')" in str(excinfo.value)


def test_remove_empty_keeps_falsy_values():
    assert remove_empty({'a': None, 'b': '', 'c': 0, 'd': 'x'}) == {'c': 0, 'd': 'x'}


def test_enumerate_list(credentials):
    api = MWS(**credentials)
    assert api.enumerate_list('MarketplaceIdList.Id', ('123', '345')) == {
        'MarketplaceIdList.Id.1': '123',
        'MarketplaceIdList.Id.2': '345',
    }
    assert api.enumerate_list('Foo.Id', None) == {}


def test_enumerate_list_of_dicts(credentials):
    api = MWS(**credentials)
    params = api.enumerate_list('PackageList.member.', [{'TrackingId': 'T1'}, {'TrackingId': 'T2'}])
    assert params == {
        'PackageList.member.1.TrackingId': 'T1',
        'PackageList.member.2.TrackingId': 'T2',
    }


def test_enumerate_dict_nests_dicts_and_lists(credentials):
    api = MWS(**credentials)
    params = api.enumerate_dict('Data', {'Weight': {'Value': 3, 'Unit': 'pounds'},
                                         'Pallets': [{'Count': 1}]})
    assert params == {
        'Data.Weight.Value': 3,
        'Data.Weight.Unit': 'pounds',
        'Data.Pallets.member.1.Count': 1,
    }


def test_calc_signature(credentials):
    api = MWS(**credentials)
    expected = base64.b64encode(hmac.new(b'testsecretkey',
                                         b'POST\nmws.amazonservices.com\n/\nAction=Test',
                                         hashlib.sha256).digest()).decode()
    assert api.calc_signature('POST', 'Action=Test') == expected


def test_make_request_signs_and_parses(credentials):
    api = MWS(auth_token='amzn.mws.token', **credentials)
    response = make_response(text=read_mock('fetchServiceStatus.xml'))
    with mock.patch('mwsclient.mws.request', return_value=response) as request:
        result = api.make_request({'Action': 'GetServiceStatus', 'Empty': ''}, method='POST')

    method, url = request.call_args[0]
    assert method == 'POST'
    assert url.startswith('https://mws.amazonservices.com/?')
    assert 'Action=GetServiceStatus' in url
    assert 'AWSAccessKeyId=AKIATESTACCESSKEY' in url
    assert 'SellerId=A2TESTMERCHANT' in url
    assert 'MWSAuthToken=amzn.mws.token' in url
    assert 'SignatureMethod=HmacSHA256' in url
    assert 'Version=2009-01-01' in url
    assert '&Signature=' in url
    assert 'Empty=' not in url
    assert request.call_args[1]['headers']['User-Agent'] == config.USER_AGENT

    assert result.parsed.Status == 'GREEN'
    assert result.response is response


def test_make_request_raises_on_error_response(credentials, caplog):
    api = MWS(**credentials)
    response = make_response(400, read_mock('error.xml'))
    with mock.patch('mwsclient.mws.request', return_value=response):
        with pytest.raises(MWSError) as excinfo:
            api.make_request({'Action': 'PutTransportContent'}, method='POST')

    assert excinfo.value.code == 'InvalidParameterValue'
    assert excinfo.value.response is response
    assert 'Bad response 400: InvalidParameterValue' in caplog.text


def test_make_request_wraps_connection_errors(credentials):
    api = MWS(**credentials)
    with mock.patch('mwsclient.mws.request', side_effect=ConnectionError('refused')):
        with pytest.raises(MWSError) as excinfo:
            api.make_request({'Action': 'GetServiceStatus'})
    assert 'refused' in str(excinfo.value)


def test_make_request_raises_on_unparsable_body(credentials):
    api = MWS(**credentials)
    with mock.patch('mwsclient.mws.request', return_value=make_response(text='not xml')):
        with pytest.raises(MWSError):
            api.make_request({'Action': 'GetServiceStatus'})


def test_throttled_request_is_retried(credentials):
    api = MWS(**credentials)
    responses = [make_response(503, read_mock('throttled.xml')),
                 make_response(200, read_mock('fetchServiceStatus.xml'))]
    with mock.patch('mwsclient.mws.request', side_effect=responses) as request, \
            mock.patch('mwsclient.mws.time.sleep') as sleep:
        result = api.make_request({'Action': 'GetServiceStatus'})

    assert request.call_count == 2
    sleep.assert_called_once_with(api.throttle_time)
    assert result.parsed.Status == 'GREEN'


def test_throttled_request_gives_up(credentials):
    api = MWS(max_retries=1, **credentials)
    response = make_response(503, read_mock('throttled.xml'))
    with mock.patch('mwsclient.mws.request', return_value=response) as request, \
            mock.patch('mwsclient.mws.time.sleep'):
        with pytest.raises(MWSError) as excinfo:
            api.make_request({'Action': 'GetServiceStatus'})

    assert request.call_count == 2
    assert excinfo.value.code == 'RequestThrottled'


def test_unthrottled_503_is_not_retried(credentials):
    api = MWS(**credentials)
    response = make_response(503, 'Service Unavailable')
    with mock.patch('mwsclient.mws.request', return_value=response) as request:
        with pytest.raises(MWSError):
            api.make_request({'Action': 'GetServiceStatus'})
    assert request.call_count == 1


def test_check_response(credentials, caplog):
    api = MWS(**credentials)
    assert api.check_response(make_response(200))
    assert not api.check_response(make_response(500, 'Internal Error'))
    assert 'Bad response 500' in caplog.text


def test_throttle_sleeps_when_burst_is_spent(credentials, caplog):
    caplog.set_level(logging.INFO)
    api = ServiceStatus(**credentials)
    with mock.patch('mwsclient.mws.time.time', return_value=1000.0), \
            mock.patch('mwsclient.mws.time.sleep') as sleep:
        api.throttle()
        api.throttle()
        sleep.assert_not_called()
        api.throttle()

    sleep.assert_called_once_with(300.0)
    assert 'Throttled for 300.0 seconds (GetServiceStatus)' in caplog.text


def test_throttle_restores_requests_over_time(credentials):
    api = ServiceStatus(**credentials)
    with mock.patch('mwsclient.mws.time.time', side_effect=[0.0, 0.0, 300.0]), \
            mock.patch('mwsclient.mws.time.sleep') as sleep:
        api.throttle()
        api.throttle()
        api.throttle()
    sleep.assert_not_called()


def test_throttle_is_shared_per_account(credentials):
    first = ServiceStatus(**credentials)
    second = ServiceStatus(**credentials)
    other = dict(credentials, account_id='A2OTHERMERCHANT')
    with mock.patch('mwsclient.mws.time.time', return_value=0.0), \
            mock.patch('mwsclient.mws.time.sleep') as sleep:
        first.throttle()
        second.throttle()
        ServiceStatus(**other).throttle()
        sleep.assert_not_called()
        first.throttle()
    sleep.assert_called_once_with(300.0)


def test_base_class_is_not_throttled(credentials):
    api = MWS(**credentials)
    with mock.patch('mwsclient.mws.time.sleep') as sleep:
        for _ in range(10):
            api.throttle()
    sleep.assert_not_called()


def test_mock_files_rotate(credentials, mock_dir):
    api = MWS(mock=True, mock_files=['fetchServiceStatus.xml', 'fetchServiceStatusGreenI.xml'],
              mock_dir=mock_dir, **credentials)
    api.options['Action'] = 'GetServiceStatus'

    statuses = [api.fetch_mock_file().parsed.Status for _ in range(3)]
    assert statuses == ['GREEN', 'GREEN_I', 'GREEN']


def test_mock_file_missing(credentials, mock_dir, caplog):
    api = MWS(mock=True, mock_files='nope.xml', mock_dir=mock_dir, **credentials)
    assert api.fetch_mock_file() is None
    assert 'Mock file not found' in caplog.text


def test_mock_mode_without_files(credentials, caplog):
    api = MWS(mock=True, **credentials)
    assert api.fetch_result() is None
    assert 'no mock files present' in caplog.text


def test_set_mock_turns_mode_off(credentials, mock_dir):
    api = MWS(mock=True, mock_files='fetchServiceStatus.xml', mock_dir=mock_dir, **credentials)
    api.set_mock(False)
    assert not api.mock_mode
    assert api.mock_files == ['fetchServiceStatus.xml']


def test_fetch_result_mock_error(credentials, mock_dir, caplog):
    api = MWS(mock=True, mock_files='error.xml', mock_dir=mock_dir, **credentials)
    api.options['Action'] = 'PutTransportContent'
    assert api.fetch_result() is None
    assert 'InvalidParameterValue' in caplog.text


def test_fetch_result_mock_does_not_touch_network(credentials, mock_dir):
    api = MWS(mock=True, mock_files='fetchServiceStatus.xml', mock_dir=mock_dir, **credentials)
    api.options['Action'] = 'GetServiceStatus'
    with mock.patch('mwsclient.mws.request') as request:
        assert api.fetch_result().Status == 'GREEN'
    request.assert_not_called()


def test_fetch_result_live_failure_returns_none(credentials, caplog):
    api = MWS(**credentials)
    api.options['Action'] = 'PutTransportContent'
    with mock.patch('mwsclient.mws.request', return_value=make_response(400, read_mock('error.xml'))):
        assert api.fetch_result() is None
    assert 'PutTransportContent request failed: InvalidParameterValue' in caplog.text


def test_from_store(mock_dir):
    api = ServiceStatus.from_store('testStore', config_file=mock_dir + '/mws.ini', service='Orders')
    assert api.account_id == 'A2TESTMERCHANT'
    assert api.access_key == 'AKIATESTACCESSKEY'
    assert api.auth_token == 'amzn.mws.test-token'
    assert api.domain == 'https://mws-eu.amazonservices.com'
    assert api.is_ready()


def test_from_store_reads_secrets_from_environment(mock_dir, monkeypatch):
    monkeypatch.setenv('MWS_ACCESS_KEY', 'AKIAENVIRONMENT')
    monkeypatch.setenv('MWS_SECRET_KEY', 'envsecret')
    api = MWS.from_store('bareStore', config_file=mock_dir + '/mws.ini')
    assert api.access_key == 'AKIAENVIRONMENT'
    assert api.secret_key == 'envsecret'
    assert api.domain == config.MARKETPLACES['US']


def test_from_store_missing_store(mock_dir):
    with pytest.raises(MWSError):
        MWS.from_store('noStore', config_file=mock_dir + '/mws.ini')


def test_from_store_missing_file(tmp_path):
    with pytest.raises(MWSError) as excinfo:
        MWS.from_store('testStore', config_file=str(tmp_path / 'missing.ini'))
    assert 'Config file does not exist' in str(excinfo.value)


def test_enumerate_lower_cases_booleans(credentials):
    api = MWS(**credentials)
    params = api.enumerate_dict('PalletList.member.1', {'IsStacked': True, 'Other': False})
    assert params == {'PalletList.member.1.IsStacked': 'true', 'PalletList.member.1.Other': 'false'}
    assert api.enumerate_list('Flags', [True]) == {'Flags.1': 'true'}


def test_malformed_mock_file(credentials, mock_dir, caplog):
    api = MWS(mock=True, mock_files='truncated.xml', mock_dir=mock_dir, **credentials)
    api.options['Action'] = 'GetServiceStatus'
    assert api.fetch_mock_file() is None
    assert api.fetch_result() is None
    assert 'is not valid XML' in caplog.text


def test_from_store_reads_dotenv(mock_dir, monkeypatch, tmp_path):
    # setenv before delenv so teardown removes whatever the .env file added
    for name in ('MWS_ACCESS_KEY', 'MWS_SECRET_KEY'):
        monkeypatch.setenv(name, 'placeholder')
        monkeypatch.delenv(name)
    (tmp_path / '.env').write_text('MWS_ACCESS_KEY=AKIADOTENV\nMWS_SECRET_KEY=dotenvsecret\n')
    monkeypatch.chdir(tmp_path)

    api = MWS.from_store('bareStore', config_file=mock_dir + '/mws.ini')
    assert api.access_key == 'AKIADOTENV'
    assert api.secret_key == 'dotenvsecret'
