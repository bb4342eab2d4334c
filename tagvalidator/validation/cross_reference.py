# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/validation/cross_reference.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Cross-reference validation.
Some tag groups (settlement terms) carry items whose vocabulary is negotiated per
transaction and cannot live in the static rule catalog. Their items are checked
against reference definitions supplied by the caller, in both directions:
- every reference code must be present among the group items
- every group item must match a reference definition of a compatible type

Examples:
    >>> from tagvalidator.models import TagGroup
    >>> group = TagGroup.model_validate({"descriptor": {"code": "SETTLEMENT_TERMS"}, "list": [{"descriptor": {"code": "B"}, "value": "x"}]})
    >>> [issue.message for issue in validate_cross_reference(group, [{"code": "A", "type": "string"}])]
    ["SETTLEMENT_TERMS_[0], Term code 'A' is not present in tag.list", 'SETTLEMENT_TERMS_[0], List item[0] has an invalid descriptor code: B']
"""

# Standard
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

# Third-Party
from pydantic import ValidationError

# First-Party
from tagvalidator.models import ReferenceDefinition, TagGroup, TagItem, ValidationIssue
from tagvalidator.services.logging_service import logging_service
from tagvalidator.types import ErrorKind
from tagvalidator.utils.error_formatter import ErrorFormatter

logger = logging_service.get_logger(__name__)

ReferenceInput = Union[ReferenceDefinition, Mapping[str, Any]]


def parse_reference_definitions(reference_definitions: Sequence[ReferenceInput]) -> Tuple[Dict[str, ReferenceDefinition], List[ValidationIssue]]:
    """Parse caller-supplied reference definitions, keyed by code.

    The first definition of a code wins. Unparseable definitions are reported
    rather than raised.

    Args:
        reference_definitions: Definitions as models or decoded JSON objects.

    Returns:
        Tuple[Dict[str, ReferenceDefinition], List[ValidationIssue]]: Definitions by code and parse issues.

    Examples:
        >>> defs, issues = parse_reference_definitions([{"code": "A", "type": "string"}, {"type": "enum"}])
        >>> list(defs)
        ['A']
        >>> issues[0].message
        'Reference definition[1] is malformed: code is required'
    """
    definitions: Dict[str, ReferenceDefinition] = {}
    issues: List[ValidationIssue] = []
    for index, raw in enumerate(reference_definitions):
        if isinstance(raw, ReferenceDefinition):
            definition = raw
        else:
            try:
                definition = ReferenceDefinition.model_validate(raw)
            except ValidationError as e:
                issues.append(
                    ValidationIssue(
                        kind=ErrorKind.MALFORMED_REFERENCE,
                        message=f"Reference definition[{index}] is malformed: {ErrorFormatter.format_validation_error(e)}",
                    )
                )
                continue
        if definition.code in definitions:
            logger.debug(f"Duplicate reference definition for {definition.code} ignored")
            continue
        definitions[definition.code] = definition
    return definitions, issues


def _check_item(item: TagItem, definition: ReferenceDefinition, prefix: str, group_index: int, item_index: int) -> List[ValidationIssue]:
    """Check an item value against the type its reference definition declares.

    Args:
        item: The tag item.
        definition: Its reference definition.
        prefix: Message prefix naming the group.
        group_index: Index of the group in the collection.
        item_index: Index of the item in the group.

    Returns:
        List[ValidationIssue]: Zero or one issue.
    """
    location = f"{prefix}, List item[{item_index}]"
    if definition.type == "enum":
        if definition.value is None or item.value not in definition.value:
            message = f"{location} has an invalid value for {definition.code}"
        else:
            return []
    elif definition.type == "string":
        if isinstance(item.value, str):
            return []
        message = f"{location} type should be string"
    else:
        message = f"{location} has an invalid type"
    return [ValidationIssue(kind=ErrorKind.CROSS_REFERENCE_TYPE_MISMATCH, message=message, group_index=group_index, item_index=item_index, codes=[definition.code])]


def validate_cross_reference(group: TagGroup, reference_definitions: Sequence[ReferenceInput], group_index: int = 0) -> List[ValidationIssue]:
    """Validate a group against caller-supplied reference definitions.

    Args:
        group: The tag group; a missing item list is treated as empty.
        reference_definitions: Negotiated term definitions.
        group_index: Index of the group in the enclosing collection.

    Returns:
        List[ValidationIssue]: Missing-term issues first, then per-item issues in item order.

    Examples:
        >>> group = TagGroup.model_validate({"descriptor": {"code": "SETTLEMENT_TERMS"}, "list": [{"descriptor": {"code": "COURT"}, "value": "DELHI"}]})
        >>> validate_cross_reference(group, [{"code": "COURT", "type": "enum", "value": ["DELHI", "MUMBAI"]}], group_index=2)
        []
        >>> validate_cross_reference(group, [{"code": "COURT", "type": "enum", "value": ["MUMBAI"]}], group_index=2)[0].message
        'SETTLEMENT_TERMS_[2], List item[0] has an invalid value for COURT'
        >>> validate_cross_reference(group, [{"code": "COURT", "type": "number"}])[0].message
        'SETTLEMENT_TERMS_[0], List item[0] has an invalid type'
    """
    return validate_reference_items(group.descriptor_code, group.items or [], reference_definitions, group_index)


def validate_reference_items(
    group_code: Optional[str],
    items: Sequence[Optional[TagItem]],
    reference_definitions: Sequence[ReferenceInput],
    group_index: int = 0,
) -> List[ValidationIssue]:
    """Validate the items of a group against caller-supplied reference definitions.

    ``None`` entries stand for items that could not be parsed; they keep their
    position so sibling indices stay stable, but are otherwise skipped.

    Args:
        group_code: Descriptor code of the enclosing group.
        items: The group items in order.
        reference_definitions: Negotiated term definitions.
        group_index: Index of the group in the enclosing collection.

    Returns:
        List[ValidationIssue]: Missing-term issues first, then per-item issues in item order.

    Examples:
        >>> item = TagItem.model_validate({"descriptor": {"code": "WINDOW"}, "value": 60})
        >>> [issue.message for issue in validate_reference_items("SETTLEMENT_TERMS", [None, item], [{"code": "WINDOW", "type": "string"}])]
        ['SETTLEMENT_TERMS_[0], List item[1] type should be string']
    """
    definitions, issues = parse_reference_definitions(reference_definitions)
    prefix = f"{group_code}_[{group_index}]"

    present_codes = {item.descriptor_code for item in items if item is not None}
    for code in definitions:
        if code not in present_codes:
            issues.append(
                ValidationIssue(
                    kind=ErrorKind.CROSS_REFERENCE_MISSING,
                    message=f"{prefix}, Term code '{code}' is not present in tag.list",
                    group_index=group_index,
                    codes=[code],
                )
            )

    for item_index, item in enumerate(items):
        if item is None:
            continue
        definition = definitions.get(item.descriptor_code) if item.descriptor_code is not None else None
        if definition is None:
            issues.append(
                ValidationIssue(
                    kind=ErrorKind.UNKNOWN_ITEM_CODE,
                    message=f"{prefix}, List item[{item_index}] has an invalid descriptor code: {item.descriptor_code}",
                    group_index=group_index,
                    item_index=item_index,
                    codes=[item.descriptor_code] if item.descriptor_code else [],
                )
            )
            continue
        issues.extend(_check_item(item, definition, prefix, group_index, item_index))

    return issues
