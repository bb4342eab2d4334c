# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/validation/structural.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Structural validation of tag groups.
This module walks a tag group collection against the rule catalog entry of a
domain and reports every defect in one pass:
- Missing or malformed tag collections
- Missing required groups and unrecognized group codes
- Non-boolean ``display`` flags and missing item lists
- Malformed items, item codes outside the allowed vocabulary or out of position
- Item values violating their declared type or format
- Mutual exclusion violations
Cross-reference groups are handed to the cross-reference validator.

Groups are not parsed as a whole: the descriptor code and ``display`` flag are
read first and items are parsed one by one, so a malformed item never hides the
group code or its siblings.

Examples:
    >>> outcome = validate("offers", [{"descriptor": {"code": "QUALIFIER"}, "list": [{"descriptor": {"code": "UNKNOWN_CODE"}, "value": "1"}]}])
    >>> outcome.is_valid
    False
    >>> outcome.errors
    ['Tag[0], List item[0] descriptor code is not valid, it should be from [ITEM_COUNT, MIN_VALUE]']
    >>> validate("offers", [{"descriptor": {"code": "NOT_A_GROUP"}, "list": "garbage"}]).errors
    ['Tag[0] has an invalid descriptor code']
    >>> validate("offers", []).is_valid
    True
"""

# Standard
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional, Sequence, Union

# Third-Party
from pydantic import ValidationError

# First-Party
from tagvalidator.config import settings
from tagvalidator.models import DomainContext, TagGroup, TagItem, ValidationIssue, ValidationOutcome
from tagvalidator.services.logging_service import logging_service
from tagvalidator.types import ErrorKind, GroupKind, ItemType
from tagvalidator.utils.error_formatter import ErrorFormatter
from tagvalidator.validation.aggregator import ResultAggregator
from tagvalidator.validation.catalog import get_rule_catalog, ItemConstraint, RuleCatalog, RuleEntry
from tagvalidator.validation.cross_reference import validate_reference_items
from tagvalidator.validation.errors import UnknownDomainError
from tagvalidator.validation.formats import FormatCheckers

logger = logging_service.get_logger(__name__)

TagGroupInput = Union[TagGroup, Mapping[str, Any]]

# A parsed item, or the reason it could not be parsed
ParsedItem = Union[TagItem, str]


class GroupFields(NamedTuple):
    """The parts of a tag group read before its items are parsed."""

    code: Optional[str]
    display: Any
    items: Any


def _join_codes(codes: Sequence[str]) -> str:
    """Join codes as "A or B" / "A, B or C".

    Args:
        codes: Item codes.

    Returns:
        str: Human-readable alternatives.

    Examples:
        >>> _join_codes(["A", "B"])
        'A or B'
        >>> _join_codes(["A", "B", "C"])
        'A, B or C'
    """
    return f"{', '.join(codes[:-1])} or {codes[-1]}" if len(codes) > 1 else "".join(codes)


def read_group(raw: TagGroupInput) -> Optional[GroupFields]:
    """Read the descriptor code, display flag and raw item list of a group.

    Args:
        raw: Tag group model or decoded JSON object.

    Returns:
        Optional[GroupFields]: The group fields, or None if the group is not an object.
        A descriptor code that is not a string is read as absent.

    Examples:
        >>> read_group({"descriptor": {"code": "META"}, "display": "yes", "list": "garbage"})
        GroupFields(code='META', display='yes', items='garbage')
        >>> read_group({"descriptor": {"code": 5}}).code is None
        True
        >>> read_group("META") is None
        True
    """
    if isinstance(raw, TagGroup):
        return GroupFields(raw.descriptor_code, raw.display, raw.items)
    if not isinstance(raw, Mapping):
        return None
    descriptor = raw.get("descriptor")
    code = descriptor.get("code") if isinstance(descriptor, Mapping) else None
    return GroupFields(code if isinstance(code, str) else None, raw.get("display"), raw.get("list"))


def parse_items(raw_items: Sequence[Any]) -> List[ParsedItem]:
    """Parse group items one by one.

    Args:
        raw_items: Item models or decoded JSON objects.

    Returns:
        List[ParsedItem]: One entry per item, in order: the item, or why it could not be parsed.

    Examples:
        >>> parse_items([{"descriptor": {"code": "AUTO"}, "value": "true"}, None, {"descriptor": {"code": 5}}])[1:]
        ['value must be an object', 'descriptor.code must be a string']
    """
    parsed: List[ParsedItem] = []
    for raw in raw_items:
        if isinstance(raw, TagItem):
            parsed.append(raw)
            continue
        try:
            parsed.append(TagItem.model_validate(raw))
        except ValidationError as e:
            parsed.append(ErrorFormatter.format_validation_error(e))
    return parsed


class StructuralValidator:
    """Validates tag group collections against the rule catalog.

    A validator holds only read-only collaborators, so one instance can serve
    concurrent callers.

    Examples:
        >>> validator = StructuralValidator()
        >>> outcome = validator.validate("provider", [{"descriptor": {"code": "CONTACT_INFO"}, "list": [{"descriptor": {"code": "GRO_EMAIL"}, "value": "a@b.com"}]}])
        >>> outcome.is_valid
        True
        >>> validator.validate("provider", [{"descriptor": {"code": "BILLING"}}]).errors
        ['Tag[0] has an invalid descriptor code']
    """

    def __init__(self, catalog: Optional[RuleCatalog] = None, checkers: Optional[FormatCheckers] = None, strict_reference_codes: Optional[bool] = None):
        """Initialize the validator.

        Args:
            catalog: Rule catalog; defaults to the cached process-wide catalog.
            checkers: Format predicates; defaults to the configured predicates.
            strict_reference_codes: Report un-negotiated reference codes as errors; defaults to
                the ``strict_reference_codes`` setting.
        """
        self.catalog = catalog or get_rule_catalog()
        self.checkers = checkers or FormatCheckers.default()
        self.strict_reference_codes = settings.strict_reference_codes if strict_reference_codes is None else strict_reference_codes
        self._group_handlers: Dict[GroupKind, Callable[[str, int, str, List[ParsedItem], RuleEntry, DomainContext, ResultAggregator], None]] = {
            GroupKind.FIXED: self._check_items,
            GroupKind.OPEN: self._check_items,
            GroupKind.CROSS_REFERENCE: self._check_cross_reference,
        }

    def validate(self, domain: Union[str, Enum], tag_groups: Optional[Sequence[TagGroupInput]], context: Optional[DomainContext] = None) -> ValidationOutcome:
        """Validate a tag group collection for a domain.

        Args:
            domain: Domain name as used in the rule catalog.
            tag_groups: Tag groups as models or decoded JSON objects.
            context: Per-call domain parameters.

        Returns:
            ValidationOutcome: Every defect found, in group-then-item order with
            cross-reference defects appended.

        Raises:
            UnknownDomainError: If the catalog does not describe ``domain``.
        """
        domain_name = domain.value if isinstance(domain, Enum) else str(domain)
        rules = self.catalog.domain(domain_name)
        if rules is None:
            raise UnknownDomainError(domain_name, self.catalog.domains())

        context = context or DomainContext()
        aggregator = ResultAggregator()

        if tag_groups is not None and (isinstance(tag_groups, (str, bytes, Mapping)) or not isinstance(tag_groups, Sequence)):
            aggregator.add(ValidationIssue(kind=ErrorKind.TAGS_MISSING, message=f"{domain_name}.tags must be a list of tag groups"))
            return self._finish(domain_name, aggregator)
        if not tag_groups and rules.tags_required:
            aggregator.add(ValidationIssue(kind=ErrorKind.TAGS_MISSING, message=f"{domain_name}.tags are empty or missing."))
            return self._finish(domain_name, aggregator)

        if context.allowed_group_codes is not None:
            recognized = list(context.allowed_group_codes)
            required = list(context.allowed_group_codes)
        else:
            recognized = self.catalog.group_codes(domain_name)
            required = self.catalog.required_group_codes(domain_name)

        groups = [read_group(raw) for raw in tag_groups or []]
        present = {group.code for group in groups if group is not None and group.code}

        for code in required:
            if code not in present:
                aggregator.add(ValidationIssue(kind=ErrorKind.MISSING_REQUIRED_GROUP, message=f"Tag-group {code} is missing in {domain_name}", codes=[code]))

        for index, group in enumerate(groups):
            if group is None:
                aggregator.add(ValidationIssue(kind=ErrorKind.MALFORMED_GROUP, message=f"Tag[{index}] is malformed: it must be an object", group_index=index))
                continue
            self._check_group(domain_name, index, group, recognized, context, aggregator)

        return self._finish(domain_name, aggregator)

    def _check_group(self, domain: str, index: int, group: GroupFields, recognized: List[str], context: DomainContext, aggregator: ResultAggregator) -> None:
        """Check one tag group.

        Args:
            domain: Domain name.
            index: Index of the group in the collection.
            group: The group fields.
            recognized: Group codes recognized for this call.
            context: Per-call domain parameters.
            aggregator: Issue collector.
        """
        code = group.code
        if code is None or code not in recognized:
            # Contents of an unrecognized group are never inspected
            aggregator.add(ValidationIssue(kind=ErrorKind.UNKNOWN_GROUP_CODE, message=f"Tag[{index}] has an invalid descriptor code", group_index=index, codes=[code] if code else []))
            return

        if group.display is not None and not isinstance(group.display, bool):
            aggregator.add(
                ValidationIssue(
                    kind=ErrorKind.INVALID_FIELD_TYPE,
                    message=f"Tag[{index}] has an invalid value for the 'display' property. It should be a boolean.",
                    group_index=index,
                    codes=[code],
                )
            )

        entry = self.catalog.rules_for(domain, code)
        if entry is None:
            logger.debug(f"No catalog rules for {domain} group {code}; only group-level checks applied")
            return

        if group.items is None:
            aggregator.add(ValidationIssue(kind=ErrorKind.MISSING_ITEM_LIST, message=f"Tag[{index}] ({code}) list is missing or empty", group_index=index, codes=[code]))
            return
        if isinstance(group.items, (str, bytes, Mapping)) or not isinstance(group.items, Sequence):
            aggregator.add(ValidationIssue(kind=ErrorKind.MALFORMED_GROUP, message=f"Tag[{index}] ({code}) list must be a list of items", group_index=index, codes=[code]))
            return

        items = parse_items(group.items)
        logger.debug(f"Checking {domain} group {code} at Tag[{index}] as {entry.kind.value} with {len(items)} items")
        self._group_handlers[entry.kind](domain, index, code, items, entry, context, aggregator)

    @staticmethod
    def _malformed_item(index: int, item_index: int, reason: str) -> ValidationIssue:
        """Describe an item that could not be parsed.

        Args:
            index: Index of the group in the collection.
            item_index: Index of the item in the group.
            reason: Why the item could not be parsed.

        Returns:
            ValidationIssue: The issue.
        """
        return ValidationIssue(kind=ErrorKind.MALFORMED_ITEM, message=f"Tag[{index}], List item[{item_index}] is malformed: {reason}", group_index=index, item_index=item_index)

    def _check_items(self, domain: str, index: int, code: str, items: List[ParsedItem], entry: RuleEntry, context: DomainContext, aggregator: ResultAggregator) -> None:
        """Check the items of a group with catalog-declared rules.

        Args:
            domain: Domain name.
            index: Index of the group in the collection.
            code: Group descriptor code.
            items: Parsed items.
            entry: Catalog rules for the group.
            context: Per-call domain parameters.
            aggregator: Issue collector.
        """
        for item_index, item in enumerate(items):
            if isinstance(item, str):
                aggregator.add(self._malformed_item(index, item_index, item))
                continue

            item_code = item.descriptor_code
            location = f"Tag[{index}], List item[{item_index}]"

            if item_index < len(entry.positional_codes):
                expected_code = entry.positional_codes[item_index]
                if item_code != expected_code:
                    aggregator.add(
                        ValidationIssue(
                            kind=ErrorKind.UNEXPECTED_ITEM_POSITION,
                            message=f"{location} descriptor code should be {expected_code}",
                            group_index=index,
                            item_index=item_index,
                            codes=[expected_code],
                        )
                    )
                    continue

            if entry.allowed_item_codes is not None and item_code not in entry.allowed_item_codes:
                aggregator.add(
                    ValidationIssue(
                        kind=ErrorKind.UNKNOWN_ITEM_CODE,
                        message=f"{location} descriptor code is not valid, it should be from [{', '.join(entry.allowed_item_codes)}]",
                        group_index=index,
                        item_index=item_index,
                        codes=[item_code] if item_code else [],
                    )
                )
                continue

            constraint = entry.item_constraints.get(item_code) if item_code else None
            if constraint is not None:
                expected = self._value_violation(constraint, item)
                if expected:
                    aggregator.add(
                        ValidationIssue(
                            kind=ErrorKind.INVALID_ITEM_VALUE,
                            message=f"{item_code} in {location} {expected}",
                            group_index=index,
                            item_index=item_index,
                            codes=[item_code],
                        )
                    )

        present = {item.descriptor_code for item in items if isinstance(item, TagItem)}
        for members in entry.exclusion_groups().values():
            found = [member for member in members if member in present]
            if len(found) == 1:
                continue
            if found:
                message = f"Tag[{index}], either of {_join_codes(members)} should be present, not both."
            else:
                message = f"Tag[{index}], either of {_join_codes(members)} should be present as part of {code}"
            aggregator.add(ValidationIssue(kind=ErrorKind.MUTUAL_EXCLUSION_VIOLATED, message=message, group_index=index, codes=list(members)))

    def _value_violation(self, constraint: ItemConstraint, item: TagItem) -> Optional[str]:
        """Describe how an item value violates its constraint.

        Args:
            constraint: The item constraint.
            item: The item.

        Returns:
            Optional[str]: What the value must be, or None if it satisfies the constraint.
        """
        value = item.value
        item_type = constraint.type or (ItemType.ENUM if constraint.enum_values else None)
        if item_type is None:
            return None
        if item_type is ItemType.STRING:
            return None if isinstance(value, str) else "must be a string"
        if item_type is ItemType.NON_EMPTY_STRING:
            return None if isinstance(value, str) and value.strip() else "must be a non-empty string"
        if item_type is ItemType.BOOLEAN:
            return None if isinstance(value, bool) else "must be a boolean"
        if item_type is ItemType.POSITIVE_INTEGER:
            return None if isinstance(value, int) and not isinstance(value, bool) and value > 0 else "must be a positive integer"
        if item_type is ItemType.ENUM:
            allowed = constraint.enum_values or []
            return None if value in allowed else f"must be one of [{', '.join(allowed)}]"
        if item_type is ItemType.EMAIL:
            return None if self.checkers.is_valid_email(value) else "must be a valid email address"
        if item_type is ItemType.PHONE:
            return None if self.checkers.is_valid_phone_number(value) else f"must be a valid {settings.phone_number_digits}-digit phone number"
        return None if self.checkers.is_valid_url(value) else "must be a valid URL"

    def _check_cross_reference(self, domain: str, index: int, code: str, items: List[ParsedItem], entry: RuleEntry, context: DomainContext, aggregator: ResultAggregator) -> None:
        """Check a group against the caller's reference definitions.

        Args:
            domain: Domain name.
            index: Index of the group in the collection.
            code: Group descriptor code.
            items: Parsed items.
            entry: Catalog rules for the group.
            context: Per-call domain parameters.
            aggregator: Issue collector.
        """
        for item_index, item in enumerate(items):
            if isinstance(item, str):
                aggregator.add(self._malformed_item(index, item_index, item))

        if context.reference_definitions is None:
            message = f"Tag[{index}] ({code}) was not cross-checked: no reference definitions supplied"
            logger.warning(message)
            aggregator.warn(message)
            return

        issues = validate_reference_items(code, [item if isinstance(item, TagItem) else None for item in items], context.reference_definitions, index)
        if not self.strict_reference_codes:
            for issue in issues:
                if issue.kind is ErrorKind.UNKNOWN_ITEM_CODE:
                    logger.warning(f"Un-negotiated reference code in {domain}: {issue.message}")
                    aggregator.warn(issue.message)
            issues = [issue for issue in issues if issue.kind is not ErrorKind.UNKNOWN_ITEM_CODE]
        aggregator.extend_cross_reference(issues)

    @staticmethod
    def _finish(domain: str, aggregator: ResultAggregator) -> ValidationOutcome:
        """Build and log the outcome.

        Args:
            domain: Domain name.
            aggregator: Issue collector.

        Returns:
            ValidationOutcome: The outcome.
        """
        outcome = aggregator.outcome()
        if outcome.is_valid:
            logger.debug(f"{domain} tags are valid")
        else:
            logger.info(f"{domain} tags failed validation with {len(outcome.issues)} error(s)")
        return outcome


def validate(
    domain: Union[str, Enum],
    tag_groups: Optional[Sequence[TagGroupInput]],
    context: Optional[DomainContext] = None,
    *,
    catalog: Optional[RuleCatalog] = None,
    checkers: Optional[FormatCheckers] = None,
) -> ValidationOutcome:
    """Validate a tag group collection for a domain.

    Args:
        domain: Domain name as used in the rule catalog.
        tag_groups: Tag groups as models or decoded JSON objects.
        context: Per-call domain parameters.
        catalog: Rule catalog; defaults to the cached process-wide catalog.
        checkers: Format predicates; defaults to the configured predicates.

    Returns:
        ValidationOutcome: Every defect found.

    Raises:
        UnknownDomainError: If the catalog does not describe ``domain``.
    """
    return StructuralValidator(catalog=catalog, checkers=checkers).validate(domain, tag_groups, context)
