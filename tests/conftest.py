# -*- coding: utf-8 -*-
"""

Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

"""

# Standard
import copy

# Third-Party
import pytest

# First-Party
from tagvalidator.config import Settings
from tagvalidator.validation.catalog import get_rule_catalog
from tagvalidator.validation.structural import StructuralValidator

PAYMENT_TAGS = [
    {
        "descriptor": {"code": "BUYER_FINDER_FEES"},
        "display": False,
        "list": [
            {"descriptor": {"code": "BUYER_FINDER_FEES_TYPE"}, "value": "percent-annualized"},
            {"descriptor": {"code": "BUYER_FINDER_FEES_PERCENTAGE"}, "value": "1"},
        ],
    },
    {
        "descriptor": {"code": "SETTLEMENT_TERMS"},
        "display": False,
        "list": [
            {"descriptor": {"code": "SETTLEMENT_WINDOW"}, "value": "PT60M"},
            {"descriptor": {"code": "SETTLEMENT_BASIS"}, "value": "DELIVERY"},
            {"descriptor": {"code": "STATIC_TERMS"}, "value": "https://api.example-bap.com/booking/terms"},
        ],
    },
]

SETTLEMENT_TERMS = [
    {"code": "SETTLEMENT_WINDOW", "type": "string"},
    {"code": "SETTLEMENT_BASIS", "type": "enum", "value": ["INVOICE_RECEIPT", "DELIVERY"]},
    {"code": "STATIC_TERMS", "type": "string"},
]

PROVIDER_TAGS = [
    {
        "descriptor": {"code": "CONTACT_INFO"},
        "display": True,
        "list": [
            {"descriptor": {"code": "GRO_NAME"}, "value": "Ravi Kumar"},
            {"descriptor": {"code": "GRO_EMAIL"}, "value": "gro@metro.in"},
            {"descriptor": {"code": "GRO_CONTACT_NUMBER"}, "value": "9876543210"},
            {"descriptor": {"code": "CUSTOMER_SUPPORT_LINK"}, "value": "https://support.metro.in"},
            {"descriptor": {"code": "CUSTOMER_SUPPORT_EMAIL"}, "value": "support@metro.in"},
            {"descriptor": {"code": "CUSTOMER_SUPPORT_CONTACT_NUMBER"}, "value": "1800123456"},
        ],
    },
    {
        "descriptor": {"code": "LSP_INFO"},
        "list": [
            {"descriptor": {"code": "LSP_NAME"}, "value": "Metro Logistics"},
            {"descriptor": {"code": "LSP_EMAIL"}, "value": "ops@metrologistics.in"},
            {"descriptor": {"code": "LSP_CONTACT_NUMBER"}, "value": "9123456780"},
            {"descriptor": {"code": "LSP_ADDRESS"}, "value": "12 Ring Road, Delhi"},
        ],
    },
]


@pytest.fixture
def test_settings():
    """Create test settings with defaults only."""
    return Settings(_env_file=None)


@pytest.fixture
def catalog():
    """The packaged rule catalog."""
    return get_rule_catalog()


@pytest.fixture
def validator(catalog):
    """A strict structural validator over the packaged catalog."""
    return StructuralValidator(catalog=catalog, strict_reference_codes=True)


@pytest.fixture
def payment_tags():
    """A valid payment tag collection, safe to mutate."""
    return copy.deepcopy(PAYMENT_TAGS)


@pytest.fixture
def settlement_terms():
    """Reference definitions matching ``payment_tags``."""
    return copy.deepcopy(SETTLEMENT_TERMS)


@pytest.fixture
def provider_tags():
    """A valid provider tag collection, safe to mutate."""
    return copy.deepcopy(PROVIDER_TAGS)
