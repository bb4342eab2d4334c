# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/types.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Enumerations shared across the Tag Validator.
This module defines the closed vocabularies used by the validation engine:
- Log severity levels
- Business domains known to the packaged rule catalog
- Group kinds that drive per-group dispatch
- Item value types declared in the rule catalog
- Error kinds reported in validation outcomes
"""

# Standard
from enum import Enum


class LogLevel(str, Enum):
    """Standard syslog severity levels as defined in RFC 5424.

    Attributes:
        DEBUG (str): Debug level.
        INFO (str): Informational level.
        NOTICE (str): Notice level.
        WARNING (str): Warning level.
        ERROR (str): Error level.
        CRITICAL (str): Critical level.
        ALERT (str): Alert level.
        EMERGENCY (str): Emergency level.
    """

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    ALERT = "alert"
    EMERGENCY = "emergency"


class Domain(str, Enum):
    """Business domains covered by the packaged rule catalog.

    Examples:
        >>> Domain("payments")
        <Domain.PAYMENTS: 'payments'>
        >>> Domain.OFFERS.value
        'offers'
    """

    PAYMENTS = "payments"
    PROVIDER = "provider"
    ITEMS = "items"
    OFFERS = "offers"


class GroupKind(str, Enum):
    """How the items of a tag group are checked.

    Attributes:
        FIXED: items come from a static vocabulary declared in the catalog.
        OPEN: item codes are not restricted; only declared constraints apply.
        CROSS_REFERENCE: items are checked against caller-supplied reference definitions.
    """

    FIXED = "fixed"
    OPEN = "open"
    CROSS_REFERENCE = "cross_reference"


class ItemType(str, Enum):
    """Value types an item constraint can declare.

    Examples:
        >>> ItemType("phone")
        <ItemType.PHONE: 'phone'>
        >>> [t.value for t in ItemType][:3]
        ['string', 'non_empty_string', 'boolean']
    """

    STRING = "string"
    NON_EMPTY_STRING = "non_empty_string"
    BOOLEAN = "boolean"
    POSITIVE_INTEGER = "positive_integer"
    ENUM = "enum"
    EMAIL = "email"
    PHONE = "phone"
    URL = "url"


class ErrorKind(str, Enum):
    """Kinds of defects reported by the validation engine."""

    TAGS_MISSING = "tags_missing"
    MISSING_REQUIRED_GROUP = "missing_required_group"
    MALFORMED_GROUP = "malformed_group"
    UNKNOWN_GROUP_CODE = "unknown_group_code"
    INVALID_FIELD_TYPE = "invalid_field_type"
    MISSING_ITEM_LIST = "missing_item_list"
    MALFORMED_ITEM = "malformed_item"
    UNKNOWN_ITEM_CODE = "unknown_item_code"
    UNEXPECTED_ITEM_POSITION = "unexpected_item_position"
    INVALID_ITEM_VALUE = "invalid_item_value"
    MUTUAL_EXCLUSION_VIOLATED = "mutual_exclusion_violated"
    CROSS_REFERENCE_MISSING = "cross_reference_missing"
    CROSS_REFERENCE_TYPE_MISMATCH = "cross_reference_type_mismatch"
    MALFORMED_REFERENCE = "malformed_reference"
