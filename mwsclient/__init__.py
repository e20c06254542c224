# -*- coding: utf-8 -*-
import logging

from .mws import InboundShipments, MWS, MWSError, ServiceStatus, TransportContent  # noqa: F401

__version__ = '0.1'

logging.getLogger(__name__).addHandler(logging.NullHandler())
