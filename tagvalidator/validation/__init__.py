# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/validation/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Validation Package.
Provides the tag group validation engine:
- Rule catalog lookup
- Structural validation of tag groups
- Cross-reference validation against negotiated terms
- Per-domain entry points
"""

from tagvalidator.validation.catalog import get_rule_catalog, RuleCatalog, RuleEntry
from tagvalidator.validation.cross_reference import validate_cross_reference
from tagvalidator.validation.errors import RuleCatalogError, TagValidationError, UnknownDomainError
from tagvalidator.validation.formats import FormatCheckers
from tagvalidator.validation.structural import StructuralValidator, validate
from tagvalidator.validation.tags import validate_items_tags, validate_offers_tags, validate_payment_tags, validate_provider_tags

__all__ = [
    "FormatCheckers",
    "get_rule_catalog",
    "RuleCatalog",
    "RuleCatalogError",
    "RuleEntry",
    "StructuralValidator",
    "TagValidationError",
    "UnknownDomainError",
    "validate",
    "validate_cross_reference",
    "validate_items_tags",
    "validate_offers_tags",
    "validate_payment_tags",
    "validate_provider_tags",
]
