# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/validation/tags.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Domain entry points for tag group validation.
This module provides one function per business domain so callers validating a
message section do not have to build a DomainContext by hand:
- Payment tags (finder fees and negotiated settlement terms)
- Provider tags (grievance and logistics contact information)
- Item tags (item details, customization, brand details, variant fields)
- Offer tags (qualifiers, benefits, meta flags)

Examples:
    >>> validate_offers_tags([{"descriptor": {"code": "META"}, "list": [{"descriptor": {"code": "AUTO"}, "value": "true"}]}]).is_valid
    True
    >>> validate_payment_tags(None).errors
    ['payments.tags are empty or missing.']
"""

# Standard
from typing import Optional, Sequence

# First-Party
from tagvalidator.models import DomainContext, ValidationOutcome
from tagvalidator.types import Domain
from tagvalidator.validation.cross_reference import ReferenceInput
from tagvalidator.validation.structural import StructuralValidator, TagGroupInput


def validate_payment_tags(
    tags: Optional[Sequence[TagGroupInput]],
    terms: Optional[Sequence[ReferenceInput]] = None,
    valid_descriptor_codes: Optional[Sequence[str]] = None,
    validator: Optional[StructuralValidator] = None,
) -> ValidationOutcome:
    """Validate the tags of a payment object.

    Args:
        tags: Payment tag groups.
        terms: Negotiated settlement term definitions used to cross-check SETTLEMENT_TERMS.
        valid_descriptor_codes: Group codes expected in this message; defaults to the catalog's.
        validator: Validator to use; a default one is built when omitted.

    Returns:
        ValidationOutcome: The outcome.

    Examples:
        >>> tags = [
        ...     {"descriptor": {"code": "BUYER_FINDER_FEES"}, "display": False, "list": [{"descriptor": {"code": "BUYER_FINDER_FEES_PERCENTAGE"}, "value": "1"}]},
        ...     {"descriptor": {"code": "SETTLEMENT_TERMS"}, "list": [{"descriptor": {"code": "DELAY_INTEREST"}, "value": "2.5"}]},
        ... ]
        >>> validate_payment_tags(tags, terms=[{"code": "DELAY_INTEREST", "type": "string"}]).is_valid
        True
        >>> validate_payment_tags(tags[:1], terms=[], valid_descriptor_codes=["BUYER_FINDER_FEES"]).is_valid
        True
    """
    context = DomainContext(
        reference_definitions=list(terms) if terms is not None else None,
        allowed_group_codes=list(valid_descriptor_codes) if valid_descriptor_codes is not None else None,
    )
    return (validator or StructuralValidator()).validate(Domain.PAYMENTS, tags, context)


def validate_provider_tags(tags: Optional[Sequence[TagGroupInput]], validator: Optional[StructuralValidator] = None) -> ValidationOutcome:
    """Validate the tags of a provider object.

    Args:
        tags: Provider tag groups.
        validator: Validator to use; a default one is built when omitted.

    Returns:
        ValidationOutcome: The outcome.

    Examples:
        >>> tags = [{"descriptor": {"code": "LSP_INFO"}, "list": [{"descriptor": {"code": "LSP_CONTACT_NUMBER"}, "value": "12345"}]}]
        >>> validate_provider_tags(tags).errors
        ['LSP_CONTACT_NUMBER in Tag[0], List item[0] must be a valid 10-digit phone number']
    """
    return (validator or StructuralValidator()).validate(Domain.PROVIDER, tags)


def validate_items_tags(tags: Optional[Sequence[TagGroupInput]], validator: Optional[StructuralValidator] = None) -> ValidationOutcome:
    """Validate the tags of a catalog item.

    Args:
        tags: Item tag groups.
        validator: Validator to use; a default one is built when omitted.

    Returns:
        ValidationOutcome: The outcome.

    Examples:
        >>> tags = [{"descriptor": {"code": "VARIANT_FIELDS"}, "list": [{"descriptor": {"code": "items.price.value"}}]}]
        >>> validate_items_tags(tags).errors
        ['Tag[0], List item[0] descriptor code should be items.tags.ITEM_DETAILS.OCCASION']
    """
    return (validator or StructuralValidator()).validate(Domain.ITEMS, tags)


def validate_offers_tags(tags: Optional[Sequence[TagGroupInput]], validator: Optional[StructuralValidator] = None) -> ValidationOutcome:
    """Validate the tags of an offer.

    Args:
        tags: Offer tag groups.
        validator: Validator to use; a default one is built when omitted.

    Returns:
        ValidationOutcome: The outcome.
    """
    return (validator or StructuralValidator()).validate(Domain.OFFERS, tags)
