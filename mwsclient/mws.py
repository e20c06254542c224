# -*- coding: utf-8 -*-
import base64
import hashlib
import hmac
import logging
import os
import re
import time
from collections.abc import Mapping
from urllib.parse import quote
from xml.etree.ElementTree import ParseError as XMLError

from requests import request
from requests.exceptions import RequestException

from . import config
from . import utils

__all__ = [
    'InboundShipments',
    'MWS',
    'MWSError',
    'ServiceStatus',
    'TransportContent',
]

logger = logging.getLogger(__name__)

ShipmentType = ['SP',
                'LTL']

# (account_id, throttle group) -> (tokens left, time of last update)
_throttle_buckets = {}


class MWSError(Exception):
    """
    Main MWS Exception class

    """
    # Allows quick access to the response object.
    # Do not rely on this attribute, always check if its not None.
    response = None
    # Amazon error code from the ErrorResponse body, e.g. "RequestThrottled".
    code = None


def remove_empty(d):
    """
    Helper function that removes all keys from a dictionary (d), that have an empty value.

    Args:
        d (`dict`):

    Returns:
        `dict`
    """
    for key in set(d.keys()):
        if d[key] is None or d[key] == '':
            del d[key]
    return d


def remove_namespace(xml):
    """
    Removes the Namespace from XML response

    Raw bytes stay bytes, so the XML declaration decides the encoding.

    Args:
        xml (`bytes` or `str`):

    Returns:
        same type as ``xml``
    """
    if isinstance(xml, bytes):
        regex = re.compile(b' xmlns(:ns2)?="[^"]+"|(ns2:)|(xml:)')
    else:
        regex = re.compile(' xmlns(:ns2)?="[^"]+"|(ns2:)|(xml:)')
    return regex.sub(b'' if isinstance(xml, bytes) else '', xml)


def parse_error(xml):
    """
    Reads Code and Message out of an Amazon ErrorResponse body.

    Returns:
        `tuple` of (code, message); code is None when the body is not an ErrorResponse
    """
    try:
        wrapper = DictWrapper(xml)
    except XMLError:
        if isinstance(xml, bytes):
            xml = xml.decode('utf-8', 'replace')
        return None, xml
    return wrapper.error


class DictWrapper(object):
    def __init__(self, xml, rootkey=None):
        """

        Args:
            xml: response body
            rootkey: child of the root element to expose as :attr:`parsed`
        """
        self.original = xml
        self._rootkey = rootkey
        self._mydict = utils.xml2dict().fromstring(remove_namespace(xml))
        self.root = list(self._mydict.keys())[0]
        self._response_dict = self._mydict.get(self.root, self._mydict)

    @property
    def parsed(self):
        """

        Returns:
            :obj:`mwsclient.utils.object_dict`
        """
        if self._rootkey:
            return self._response_dict.get(self._rootkey)
        else:
            return self._response_dict

    @property
    def is_error(self):
        return self.root == 'ErrorResponse'

    @property
    def error(self):
        if not self.is_error:
            return None, None
        error = self._response_dict.get('Error') or utils.object_dict()
        if isinstance(error, list):
            error = error[0]
        return error.getvalue('Code'), error.getvalue('Message')


class MWS(object):
    """ Base Amazon API class """

    # This is used to post/get to the different uris used by amazon per api
    # ie. /Orders/2011-01-01
    # All subclasses must define their own URI only if needed
    URI = "/"

    # The API version varies in most amazon APIs
    VERSION = "2009-01-01"

    # Some APIs are available only to either a "Merchant" or "Seller"
    # the type of account needs to be sent in every call to the amazon MWS.
    # This constant defines the exact name of the parameter Amazon expects
    # for the specific API being used.
    ACCOUNT_TYPE = "SellerId"

    # Requests allowed in a burst, and seconds to restore one of them.
    # A falsy limit turns the client-side throttle off.
    THROTTLE_LIMIT = None
    THROTTLE_TIME = 1
    THROTTLE_GROUP = None

    def __init__(self, access_key, secret_key, account_id, region='US', domain='', uri="", version="", auth_token="",
                 mock=False, mock_files=None, mock_dir=None, max_retries=None):
        """
        Initialize the MWS object.

        Args:
            access_key:
            secret_key:
            account_id:
            region: key of :data:`mwsclient.config.MARKETPLACES`
            domain: endpoint that overrides the region
            uri:
            version:
            auth_token:
            mock: answer requests from fixture files instead of Amazon
            mock_files: one path or a list of paths, used in rotation
            mock_dir: directory relative mock paths resolve against
            max_retries: retries after a throttled response
        """
        self.access_key = access_key
        self.secret_key = secret_key
        self.account_id = account_id
        self.auth_token = auth_token
        self.version = version or self.VERSION
        self.uri = uri or self.URI
        self.options = {}

        self.throttle_limit = self.THROTTLE_LIMIT
        self.throttle_time = self.THROTTLE_TIME
        self.throttle_group = self.THROTTLE_GROUP or self.__class__.__name__
        self.max_retries = config.MAX_RETRIES if max_retries is None else max_retries

        self.mock_mode = False
        self.mock_files = []
        self.mock_index = 0
        self.mock_dir = mock_dir or config.MOCK_DIR
        self.set_mock(mock, mock_files)

        if domain:
            self.domain = domain
        elif region in config.MARKETPLACES:
            self.domain = config.MARKETPLACES[region]
        else:
            error_msg = "Incorrect region supplied ('%(region)s'). Must be one of the following: %(marketplaces)s" % {
                "marketplaces": ', '.join(config.MARKETPLACES.keys()),
                "region": region,
            }
            raise MWSError(error_msg)

    @classmethod
    def from_store(cls, store, config_file=None, **kwargs):
        """
        Builds the object from a store section of the store file.

        Args:
            store (`str`): name of the store
            config_file (`str`): alternate store file
            **kwargs: overrides and extra constructor arguments

        Returns:
            instance of the calling class
        """
        settings = config.load_store(store, config_file)
        settings.update(kwargs)
        return cls(**settings)

    def set_mock(self, mock=True, files=None):
        """
        Enables or disables Mock Mode.

        Args:
            mock (`bool`):
            files: a path or a list of paths to XML responses

        """
        self.mock_mode = bool(mock)
        if files is not None:
            if isinstance(files, str):
                files = [files]
            self.mock_files = list(files)
            self.mock_index = 0
        if self.mock_mode:
            logger.info("Mock Mode set to ON")

    def fetch_mock_file(self):
        """
        Returns the next mock file in rotation, wrapped like a live response.

        Returns:
            :obj:`DictWrapper` or None when no usable file is found
        """
        if not self.mock_files:
            logger.warning("Attempted to retrieve mock files, but no mock files present")
            return None
        if self.mock_index >= len(self.mock_files):
            self.mock_index = 0
        path = self.mock_files[self.mock_index]
        self.mock_index += 1

        if not os.path.isabs(path):
            path = os.path.join(self.mock_dir, path)
        if not os.path.exists(path):
            logger.warning("Mock file not found: %s", path)
            return None

        logger.debug("Fetched mock file %s", path)
        with open(path, 'rb') as f:
            xml = f.read()
        try:
            return DictWrapper(xml, self.options.get('Action', '') + 'Result')
        except XMLError as e:
            logger.warning("Mock file %s is not valid XML: %s", path, e)
            return None

    def throttle(self):
        """
        Blocks until this object's throttle group has a request to spend.

        Each (account, group) pair holds up to ``throttle_limit`` requests and
        gets one back every ``throttle_time`` seconds.
        """
        if not self.throttle_limit:
            return
        key = (self.account_id, self.throttle_group)
        now = time.time()
        tokens, stamp = _throttle_buckets.get(key, (self.throttle_limit, now))
        tokens = min(self.throttle_limit, tokens + (now - stamp) / self.throttle_time)
        if tokens < 1:
            wait = (1 - tokens) * self.throttle_time
            logger.info("Throttled for %.1f seconds (%s)", wait, self.throttle_group)
            time.sleep(wait)
            now += wait
            tokens = 1
        _throttle_buckets[key] = (tokens - 1, now)

    def check_response(self, response):
        """
        Checks the status of an HTTP response and logs Amazon's error, if any.

        Args:
            response (:obj:`requests.Response`):

        Returns:
            `bool` True for a 2xx response
        """
        if 200 <= response.status_code < 300:
            return True
        code, message = parse_error(response.content)
        logger.warning("Bad response %s: %s - %s", response.status_code, code, message)
        return False

    def make_request(self, extra_data, method="GET", **kwargs):
        """
        Make request to Amazon MWS API.

        1. Removes Blanks from url
        2. Generate Signature
        3. Submit Request
        4. Process Response

        Args:
            extra_data (`dict`): request parameters, including Action
            method (`str`):
            **kwargs: body, extra_headers

        Returns:
            :obj:`DictWrapper`

        Raises:
            MWSError: the request failed or Amazon answered with an error
        """

        # Remove all keys with an empty value
        extra_data = remove_empty(dict(extra_data))
        action = extra_data.get("Action", "")

        attempt = 0
        while True:
            response = self._send(extra_data, method, **kwargs)
            if response.status_code != 503 or attempt >= self.max_retries:
                break
            code, _ = parse_error(response.content)
            if code != 'RequestThrottled':
                break
            attempt += 1
            logger.info("%s was throttled, retry %d of %d in %s seconds",
                        action, attempt, self.max_retries, self.throttle_time)
            time.sleep(self.throttle_time)

        if not self.check_response(response):
            error = MWSError(str(response.text))
            error.response = response
            error.code, _ = parse_error(response.content)
            raise error

        # Amazon's MWS API sometimes returns XML with "text/plain" as the Content-Type,
        # so the body is parsed regardless of the headers.
        try:
            parsed_response = DictWrapper(response.content, action + "Result")
        except XMLError as e:
            error = MWSError("Could not parse %s response: %s" % (action, e))
            error.response = response
            raise error

        # Store the response object in the parsed_response for quick access
        parsed_response.response = response
        return parsed_response

    def _send(self, params, method, **kwargs):
        self.throttle()
        params = dict(params)
        params.update({
            'AWSAccessKeyId': self.access_key,
            self.ACCOUNT_TYPE: self.account_id,
            'SignatureVersion': '2',
            'Timestamp': self.get_request_timestamp(),
            'SignatureMethod': 'HmacSHA256',
        })
        params.setdefault('Version', self.version)
        if self.auth_token:
            params['MWSAuthToken'] = self.auth_token
        request_description = '&'.join(['%s=%s' % (k, quote(str(params[k]), safe='-_.~')) for k in sorted(params)])
        signature = self.calc_signature(method, request_description)
        url = '%s%s?%s&Signature=%s' % (self.domain, self.uri, request_description, quote(signature))
        headers = {'User-Agent': config.USER_AGENT}
        headers.update(kwargs.get('extra_headers', {}))

        logger.debug("%s %s%s Action=%s", method, self.domain, self.uri, params.get('Action'))
        try:
            # The query string is signed as-is, so the full url is passed rather than a params dict.
            return request(method, url, data=kwargs.get('body', ''), headers=headers)
        except RequestException as e:
            error = MWSError("Request to %s failed: %s" % (self.domain, e))
            error.response = getattr(e, 'response', None)
            raise error

    def fetch_result(self):
        """
        Submits the current options, or reads the next mock file in Mock Mode.

        Returns:
            :obj:`mwsclient.utils.object_dict` holding the <Action>Result node,
            or None if something went wrong
        """
        action = self.options.get('Action')
        if self.mock_mode:
            wrapper = self.fetch_mock_file()
            if wrapper is None:
                return None
            if wrapper.is_error:
                code, message = wrapper.error
                logger.warning("Bad mock response for %s: %s - %s", action, code, message)
                return None
            return wrapper.parsed

        try:
            wrapper = self.make_request(self.options, method="POST")
        except MWSError as e:
            logger.warning("%s request failed: %s", action, e.code or e)
            return None
        return wrapper.parsed

    def calc_signature(self, method, request_description):
        """
        Calculate MWS signature to interface with Amazon

        Args:
            method (`str`):
            request_description (`str`):

        Returns:
            `str`
        """
        sig_data = '\n'.join([
            method,
            self.domain.replace('https://', '').lower(),
            self.uri,
            request_description
        ])
        digest = hmac.new(self.secret_key.encode(), sig_data.encode(), hashlib.sha256).digest()
        return base64.b64encode(digest).decode()

    @staticmethod
    def get_request_timestamp():
        """
        Returns the current timestamp in proper format.
        """
        return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())

    def enumerate_dict(self, param, dic):
        """
        Builds a dictionary of an enumerated parameter.
        Nested dicts extend the name with their key; nested lists become
        "member" lists.
        ie. enumerate_dict('Weight', {'Value': 3, 'Unit': 'pounds'})
            returns
            {
                Weight.Value: 3,
                Weight.Unit: 'pounds'
            }

        Args:
            param (`str`):
            dic (`dict`):

        Returns:
            `dict`
        """

        params = {}
        if dic is not None:
            if not param.endswith('.'):
                param = "%s." % param
            for key, value in dic.items():
                name = '%s%s' % (param, key)
                if isinstance(value, dict):
                    params.update(self.enumerate_dict(name, value))
                elif isinstance(value, (list, tuple)):
                    params.update(self.enumerate_list('%s.member' % name, value))
                else:
                    params[name] = _param_value(value)
        return params

    def enumerate_list(self, param, values):
        """
        Builds a dictionary of an enumerated parameter.
        Takes any iterable and returns a dictionary.
        ie. enumerate_list('MarketplaceIdList.Id', (123, 345, 4343))
            returns
            {
                MarketplaceIdList.Id.1: 123,
                MarketplaceIdList.Id.2: 345,
                MarketplaceIdList.Id.3: 4343
            }

        Args:
            param (`str`):
            values:

        Returns:
            `dict`
        """

        params = {}
        if values is not None:
            if not param.endswith('.'):
                param = "%s." % param
            for num, value in enumerate(values, 1):
                name = '%s%d' % (param, num)
                if isinstance(value, dict):
                    params.update(self.enumerate_dict(name, value))
                elif isinstance(value, (list, tuple)):
                    params.update(self.enumerate_list(name, value))
                else:
                    params[name] = _param_value(value)
        return params


"""
#### Status APIs ####
"""

# Service name -> (url branch, API version)
SERVICES = {'Inbound': ('FulfillmentInboundShipment', config.AMAZON_VERSION_INBOUND),
            'Inventory': ('FulfillmentInventory', config.AMAZON_VERSION_INVENTORY),
            'Orders': ('Orders', config.AMAZON_VERSION_ORDERS),
            'Outbound': ('FulfillmentOutboundShipment', config.AMAZON_VERSION_OUTBOUND),
            'Products': ('Products', config.AMAZON_VERSION_PRODUCTS),
            'Sellers': ('Sellers', config.AMAZON_VERSION_SELLERS)}


class ServiceStatus(MWS):
    """
    Fetches the status of a specific Amazon service.

    Amazon restores one GetServiceStatus request every five minutes, with a
    burst of two, so repeated fetches will block in :meth:`MWS.throttle`.
    """

    THROTTLE_LIMIT = config.THROTTLE_LIMIT_STATUS
    THROTTLE_TIME = config.THROTTLE_TIME_STATUS
    THROTTLE_GROUP = 'GetServiceStatus'

    def __init__(self, access_key, secret_key, account_id, service=None, **kwargs):
        """

        Args:
            access_key:
            secret_key:
            account_id:
            service: see :meth:`set_service`
            **kwargs: passed on to :class:`MWS`
        """
        super(ServiceStatus, self).__init__(access_key, secret_key, account_id, **kwargs)
        self.ready = False
        self.status = None
        self.timestamp = None
        self.message_id = None
        self.message_list = None

        if service:
            self.set_service(service)

        self.options['Action'] = 'GetServiceStatus'

    def set_service(self, service):
        """
        Set the service to fetch the status of. (Required)

        Args:
            service (`str`): one of Inbound, Inventory, Orders, Outbound, Products, Sellers

        Returns:
            `bool` False if improper input
        """
        if service is None:
            logger.warning("Service cannot be null")
            return False

        if isinstance(service, bool):
            logger.warning("A boolean is not a service")
            return False

        try:
            branch, version = SERVICES[service]
        except (KeyError, TypeError):
            logger.warning("%s is not a valid service", service)
            return False

        self.uri = '/%s/%s' % (branch, version)
        self.version = version
        self.options['Version'] = version
        self.ready = True
        return True

    def is_ready(self):
        return self.ready

    def fetch_service_status(self):
        """
        Submits a GetServiceStatus request for the selected service.

        Returns:
            `bool` False if something goes wrong
        """
        if not self.ready:
            logger.warning("Service must be set in order to retrieve status")
            return False

        return self.parse_xml(self.fetch_result())

    def parse_xml(self, xml):
        """
        Copies Timestamp and Status out of the result; a GREEN_I status also
        carries a message id and a list of info messages.

        Returns:
            `bool` False if no XML data is found
        """
        if not xml:
            return False
        self.timestamp = xml.getvalue('Timestamp')
        self.status = xml.getvalue('Status')
        self.message_id = None
        self.message_list = None

        if self.status == 'GREEN_I':
            self.message_id = xml.getvalue('MessageId')
            messages = xml.get('Messages') or utils.object_dict()
            self.message_list = [message.getvalue('Text') for message in messages.getlist('Message')]
        return True

    def get_status(self):
        return self.status

    def get_timestamp(self):
        """
        Timestamp of the last response, not to be confused with
        :meth:`MWS.get_request_timestamp` used for signing.
        """
        return self.timestamp

    def get_message_id(self):
        return self.message_id

    def get_message_list(self):
        return self.message_list


"""
#### Fulfillment APIs ####
"""


class InboundShipments(MWS):
    """ Base class of the Fulfillment Inbound Shipment API """

    URI = "/FulfillmentInboundShipment/" + config.AMAZON_VERSION_INBOUND
    VERSION = config.AMAZON_VERSION_INBOUND
    THROTTLE_LIMIT = config.THROTTLE_LIMIT_INBOUND
    THROTTLE_TIME = config.THROTTLE_TIME_INBOUND
    THROTTLE_GROUP = 'FulfillmentInboundShipment'


class TransportContent(InboundShipments):
    """
    Sends transport information for an inbound shipment to Amazon.

    Every option is required before :meth:`put`: a shipment id, a shipment
    type, whether the carrier is Amazon-partnered and the transport details.
    """

    DETAILS = 'TransportDetails'

    def __init__(self, access_key, secret_key, account_id, **kwargs):
        super(TransportContent, self).__init__(access_key, secret_key, account_id, **kwargs)
        self.shipment_id = None
        self.status = None

    def set_details(self, details):
        """
        Information required to create an Amazon-partnered carrier shipping estimate, or
        to alert the Amazon fulfillment center to the arrival of an inbound shipment by a
        non-Amazon-partnered carrier. (Required)

        The mapping may contain any of these blocks:

        NonPartneredSmallParcelData
            CarrierName - string
            PackageList - list of tracking numbers
        NonPartneredLtlData
            CarrierName - string
            ProNumber - string
        PartneredSmallParcelData
            PackageList - list of {Dimensions: {Length, Width, Height, Unit}, Weight: {Value, Unit}}
            CarrierName - string, optional
        PartneredLtlData
            Contact - {Name, Phone, Email, Fax}
            BoxCount - integer
            FreightReadyDate - date
            SellerFreightClass, PalletList, TotalWeight, SellerDeclaredValue - optional

        Any invalid block clears all transport details.

        Args:
            details (`dict`): see above

        Returns:
            `bool` False if improper input
        """
        if not details or isinstance(details, str) or not isinstance(details, Mapping):
            logger.warning("Tried to set transport details to invalid values")
            return False

        self._reset_details()
        builders = {
            'NonPartneredSmallParcelData': self._non_partnered_small_parcel,
            'NonPartneredLtlData': self._non_partnered_ltl,
            'PartneredSmallParcelData': self._partnered_small_parcel,
            'PartneredLtlData': self._partnered_ltl,
        }
        for key, data in details.items():
            builder = builders.get(key)
            if builder is None:
                logger.debug("Ignoring unknown transport detail %s", key)
                continue
            params = builder('%s.%s.' % (self.DETAILS, key), data)
            if params is None:
                self._reset_details()
                logger.warning("Tried to set %s with invalid array", key)
                return False
            self.options.update(params)
        return True

    def _non_partnered_small_parcel(self, prefix, data):
        if not _has_keys(data, 'CarrierName', 'PackageList') or not isinstance(data['PackageList'], (list, tuple)):
            return None
        params = {prefix + 'CarrierName': data['CarrierName']}
        params.update(self.enumerate_list(prefix + 'PackageList.member.',
                                          [{'TrackingId': tracking_id} for tracking_id in data['PackageList']]))
        return params

    def _non_partnered_ltl(self, prefix, data):
        if not _has_keys(data, 'CarrierName', 'ProNumber'):
            return None
        return {prefix + 'CarrierName': data['CarrierName'],
                prefix + 'ProNumber': data['ProNumber']}

    def _partnered_small_parcel(self, prefix, data):
        if not _has_keys(data, 'PackageList'):
            return None
        packages = data['PackageList']
        if not isinstance(packages, (list, tuple)) or not packages:
            return None
        for package in packages:
            if not _has_keys(package, 'Dimensions', 'Weight'):
                return None
            if not _has_keys(package['Dimensions'], 'Length', 'Width', 'Height', 'Unit'):
                return None
            if not _has_keys(package['Weight'], 'Value', 'Unit'):
                return None

        params = {}
        if data.get('CarrierName'):
            params[prefix + 'CarrierName'] = data['CarrierName']
        params.update(self.enumerate_list(prefix + 'PackageList.member.',
                                          [dict(Dimensions=package['Dimensions'], Weight=package['Weight'])
                                           for package in packages]))
        return params

    def _partnered_ltl(self, prefix, data):
        if not _has_keys(data, 'Contact', 'BoxCount', 'FreightReadyDate'):
            return None
        if not _has_keys(data['Contact'], 'Name', 'Phone', 'Email', 'Fax'):
            return None

        optional = ('SellerFreightClass', 'PalletList', 'TotalWeight', 'SellerDeclaredValue')
        fields = dict((key, data[key]) for key in ('Contact', 'BoxCount', 'FreightReadyDate'))
        fields.update((key, data[key]) for key in optional if key in data)
        return self.enumerate_dict(prefix, fields)

    def _reset_details(self):
        """
        Transport details are required, so they are only cleared right before
        being replaced.
        """
        for key in list(self.options):
            if key.startswith(self.DETAILS):
                del self.options[key]

    def set_partnered(self, partnered):
        """
        Indicates whether the request is for an Amazon-partnered carrier. (Required)
        """
        self.options['IsPartnered'] = 'true' if partnered else 'false'
        return True

    def set_type(self, shipment_type):
        """
        Sets the shipment type. (Required)

        Args:
            shipment_type (`str`): "SP" (small parcel) or "LTL" (less than truckload)

        Returns:
            `bool` False if improper input
        """
        if not isinstance(shipment_type, str) or shipment_type not in ShipmentType:
            logger.warning("Tried to set shipment type to invalid value %r", shipment_type)
            return False
        self.options['ShipmentType'] = shipment_type
        return True

    def set_shipment_id(self, shipment_id):
        """
        Sets the shipment ID. (Required)

        Returns:
            `bool` False if improper input
        """
        if not isinstance(shipment_id, str) or not shipment_id:
            logger.warning("Tried to set shipment ID to invalid value %r", shipment_id)
            return False
        self.options['ShipmentId'] = shipment_id
        return True

    def put(self):
        """
        Submits a PutTransportContent request to Amazon.

        Returns:
            `bool` True if Amazon reports the transport as WORKING
        """
        if 'ShipmentId' not in self.options:
            logger.warning("Shipment ID must be set in order to create it")
            return False
        if 'ShipmentType' not in self.options:
            logger.warning("Shipment type must be set in order to create it")
            return False
        if 'IsPartnered' not in self.options:
            logger.warning("Shipment partner indication must be set in order to create it")
            return False
        if not any(key.startswith(self.DETAILS + '.') for key in self.options):
            logger.warning("Shipment details must be set in order to create it")
            return False

        self.options['Action'] = 'PutTransportContent'
        self.status = None
        self.shipment_id = None

        xml = self.fetch_result()
        if xml is None:
            return False

        result = xml.get('TransportResult') or utils.object_dict()
        self.status = result.getvalue('TransportStatus')
        if self.status == 'WORKING':
            self.shipment_id = self.options['ShipmentId']
            logger.info("Successfully sent transport details for shipment %s", self.shipment_id)
            return True
        logger.warning("Transport details for shipment %s came back as %s",
                       self.options['ShipmentId'], self.status)
        return False

    def get_shipment_id(self):
        """
        Returns the shipment ID of the shipment whose transport content was
        accepted, or None before a successful :meth:`put`.
        """
        return self.shipment_id

    def get_status(self):
        return self.status


def _has_keys(data, *keys):
    return isinstance(data, Mapping) and all(key in data for key in keys)


def _param_value(value):
    # Amazon expects lower-case booleans.
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return value
