# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/models.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Pydantic models for the Tag Validator.
This module implements the models exchanged with the validation engine:
- Tag groups and tag items decoded from protocol messages
- Caller-supplied reference definitions and per-call domain context
- Structured validation issues and the validation outcome

Examples:
    >>> group = TagGroup.model_validate({"descriptor": {"code": "META"}, "list": [{"descriptor": {"code": "AUTO"}, "value": "true"}]})
    >>> group.descriptor_code
    'META'
    >>> group.items[0].descriptor_code
    'AUTO'
    >>> ValidationOutcome.from_issues([]).is_valid
    True
"""

# Standard
from typing import Any, Dict, List, Optional, Union

# Third-Party
from pydantic import BaseModel, ConfigDict, Field

# First-Party
from tagvalidator.types import ErrorKind


class Descriptor(BaseModel):
    """Descriptor naming a tag group or a tag item.

    Attributes:
        code (Optional[str]): Controlled-vocabulary identifier.
        name (Optional[str]): Human-readable name.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    code: Optional[str] = None
    name: Optional[str] = None


class TagItem(BaseModel):
    """One leaf datum inside a tag group.

    Examples:
        >>> item = TagItem.model_validate({"descriptor": {"code": "GRO_EMAIL"}, "value": "a@b.com"})
        >>> item.descriptor_code, item.value
        ('GRO_EMAIL', 'a@b.com')
        >>> TagItem().descriptor_code is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    descriptor: Descriptor = Field(default_factory=Descriptor)
    value: Any = None

    @property
    def descriptor_code(self) -> Optional[str]:
        """Code of the item descriptor.

        Returns:
            Optional[str]: The item code, if any.
        """
        return self.descriptor.code


class TagGroup(BaseModel):
    """A named bag of tag items.

    The item list is exposed as ``items`` and read from / written to the ``list`` key.

    Examples:
        >>> group = TagGroup.model_validate({"descriptor": {"code": "QUALIFIER"}, "display": False})
        >>> group.items is None, group.display
        (True, False)
        >>> group.model_dump(by_alias=True, exclude_none=True)
        {'descriptor': {'code': 'QUALIFIER'}, 'display': False}
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    descriptor: Descriptor = Field(default_factory=Descriptor)
    display: Any = None
    items: Optional[List[TagItem]] = Field(default=None, alias="list")

    @property
    def descriptor_code(self) -> Optional[str]:
        """Code of the group descriptor.

        Returns:
            Optional[str]: The group code, if any.
        """
        return self.descriptor.code


class ReferenceDefinition(BaseModel):
    """A caller-supplied definition of a negotiated term.

    Attributes:
        code (str): Term code that must appear as an item code.
        type (Optional[str]): ``enum`` or ``string``; anything else is an invalid type.
        value (Optional[List[Any]]): Allowed values when ``type`` is ``enum``.

    Examples:
        >>> ReferenceDefinition(code="SETTLEMENT_WINDOW", type="string").type
        'string'
        >>> ReferenceDefinition(code="COURT", type="enum", value=["DELHI"]).value
        ['DELHI']
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    code: str
    type: Optional[str] = None
    value: Optional[List[Any]] = None


class DomainContext(BaseModel):
    """Per-call parameters a domain's rules may need.

    Attributes:
        reference_definitions: Negotiated terms for cross-reference groups. ``None`` means
            the caller has none to offer and the cross-reference check is skipped.
        allowed_group_codes: Caller-supplied vocabulary of group codes. When set it replaces
            the catalog's recognized and required group codes for this call.
    """

    model_config = ConfigDict(frozen=True)

    reference_definitions: Optional[List[Union[ReferenceDefinition, Dict[str, Any]]]] = None
    allowed_group_codes: Optional[List[str]] = None


class ValidationIssue(BaseModel):
    """A single defect found during validation.

    Examples:
        >>> issue = ValidationIssue(kind=ErrorKind.UNKNOWN_ITEM_CODE, message="bad", group_index=1, item_index=0)
        >>> issue.path
        'tags[1].list[0]'
        >>> ValidationIssue(kind=ErrorKind.TAGS_MISSING, message="missing").path
        'tags'
        >>> str(issue)
        'bad'
    """

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    group_index: Optional[int] = None
    item_index: Optional[int] = None
    codes: List[str] = Field(default_factory=list)

    @property
    def path(self) -> str:
        """Location of the defect in the tag collection.

        Returns:
            str: A JSON-path-like location.
        """
        path = "tags"
        if self.group_index is not None:
            path += f"[{self.group_index}]"
            if self.item_index is not None:
                path += f".list[{self.item_index}]"
        return path

    def __str__(self) -> str:
        """Render the issue as its human-readable message.

        Returns:
            str: The message.
        """
        return self.message


class ValidationOutcome(BaseModel):
    """Result of one validation call.

    ``is_valid`` is the only authoritative pass/fail signal; error strings are for humans.

    Examples:
        >>> outcome = ValidationOutcome.from_issues([ValidationIssue(kind=ErrorKind.TAGS_MISSING, message="tags missing")])
        >>> outcome.is_valid, outcome.errors
        (False, ['tags missing'])
        >>> outcome.to_dict()
        {'isValid': False, 'errors': ['tags missing']}
        >>> ValidationOutcome.from_issues([], warnings=["w"]).to_dict()
        {'isValid': True}
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: Optional[List[str]] = None
    issues: List[ValidationIssue] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @classmethod
    def from_issues(cls, issues: List[ValidationIssue], warnings: Optional[List[str]] = None) -> "ValidationOutcome":
        """Build an outcome from ordered issues.

        Args:
            issues: Defects in report order.
            warnings: Non-fatal findings.

        Returns:
            ValidationOutcome: The outcome; ``errors`` is ``None`` when there are no issues.
        """
        return cls(
            is_valid=not issues,
            errors=[issue.message for issue in issues] or None,
            issues=list(issues),
            warnings=list(warnings or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Render the outcome in the ``{isValid, errors}`` shape callers merge into error maps.

        Returns:
            Dict[str, Any]: ``errors`` is omitted when the outcome is valid.
        """
        result: Dict[str, Any] = {"isValid": self.is_valid}
        if self.errors:
            result["errors"] = list(self.errors)
        return result
