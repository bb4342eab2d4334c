# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/validation/catalog.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor, Mihai Criveti

Rule catalog.
This module loads the declarative tag group rules from YAML and exposes them as
a read-only lookup table. The catalog holds configuration data only; the
validation algorithms live in the structural and cross-reference validators.

Examples:
    >>> catalog = RuleCatalog.from_mapping({"domains": {"offers": {"groups": {"META": {"allowed_item_codes": ["AUTO"]}}}}})
    >>> catalog.rules_for("offers", "META").allowed_item_codes
    ['AUTO']
    >>> catalog.rules_for("offers", "QUALIFIER") is None
    True
    >>> catalog.domains()
    ['offers']
"""

# Standard
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Self

# Third-Party
from pydantic import BaseModel, ConfigDict, Field, model_validator, ValidationError
import yaml

# First-Party
from tagvalidator.config import settings
from tagvalidator.services.logging_service import logging_service
from tagvalidator.types import GroupKind, ItemType
from tagvalidator.utils.error_formatter import ErrorFormatter
from tagvalidator.validation.errors import RuleCatalogError

logger = logging_service.get_logger(__name__)

PACKAGED_CATALOG = "catalog.yaml"


class ItemConstraint(BaseModel):
    """Constraint on a single item code.

    Examples:
        >>> ItemConstraint(type="enum", enum_values=["A", "B"]).type
        <ItemType.ENUM: 'enum'>
        >>> try:
        ...     ItemConstraint(type="enum")
        ... except ValueError:
        ...     print("error")
        error
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Optional[ItemType] = None
    enum_values: Optional[List[str]] = None
    mutual_exclusion_group: Optional[str] = None

    @model_validator(mode="after")
    def _enum_needs_values(self) -> Self:
        """Require enum values for enum constraints.

        Returns:
            Self: The validated constraint.

        Raises:
            ValueError: If an enum constraint declares no values.
        """
        if self.type is ItemType.ENUM and not self.enum_values:
            raise ValueError("enum constraints must declare enum_values")
        return self


class RuleEntry(BaseModel):
    """Rules for one group code within a domain.

    Examples:
        >>> entry = RuleEntry(item_constraints={"A": {"mutual_exclusion_group": "x"}, "B": {"mutual_exclusion_group": "x"}})
        >>> entry.kind
        <GroupKind.OPEN: 'open'>
        >>> entry.exclusion_groups()
        {'x': ['A', 'B']}
        >>> RuleEntry(allowed_item_codes=["A"]).kind
        <GroupKind.FIXED: 'fixed'>
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    required: bool = False
    kind: Optional[GroupKind] = None
    allowed_item_codes: Optional[List[str]] = None
    positional_codes: List[str] = Field(default_factory=list)
    item_constraints: Dict[str, ItemConstraint] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _infer_kind(cls, data: Any) -> Any:
        """Default the kind from the presence of a static vocabulary.

        Args:
            data: Raw entry data.

        Returns:
            Any: Entry data with ``kind`` filled in.
        """
        if isinstance(data, dict) and data.get("kind") is None:
            data = {**data, "kind": GroupKind.FIXED if data.get("allowed_item_codes") else GroupKind.OPEN}
        return data

    @model_validator(mode="after")
    def _check_consistency(self) -> Self:
        """Check the entry is internally consistent.

        Returns:
            Self: The validated entry.

        Raises:
            ValueError: If a fixed group has no vocabulary, a constraint names an item
                outside the vocabulary, or an exclusion group has a single member.
        """
        if self.kind is GroupKind.FIXED:
            if not self.allowed_item_codes:
                raise ValueError("fixed groups must declare allowed_item_codes")
            unknown = [code for code in self.item_constraints if code not in self.allowed_item_codes]
            if unknown:
                raise ValueError(f"constraints declared for codes outside allowed_item_codes: {', '.join(unknown)}")
        for name, members in self.exclusion_groups().items():
            if len(members) < 2:
                raise ValueError(f"mutual exclusion group '{name}' needs at least two item codes")
        return self

    def exclusion_groups(self) -> Dict[str, List[str]]:
        """Group item codes by mutual exclusion group, in declaration order.

        Returns:
            Dict[str, List[str]]: Exclusion group name to member item codes.
        """
        groups: Dict[str, List[str]] = {}
        for code, constraint in self.item_constraints.items():
            if constraint.mutual_exclusion_group:
                groups.setdefault(constraint.mutual_exclusion_group, []).append(code)
        return groups


class DomainRules(BaseModel):
    """Rules for every group code of one domain."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    tags_required: bool = False
    groups: Dict[str, RuleEntry] = Field(default_factory=dict)


class CatalogDocument(BaseModel):
    """Top-level shape of a rule catalog file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: int = 1
    domains: Dict[str, DomainRules] = Field(default_factory=dict)


class RuleCatalog:
    """Read-only lookup of tag group rules per domain.

    Examples:
        >>> catalog = get_rule_catalog()
        >>> catalog.required_group_codes("payments")
        ['BUYER_FINDER_FEES', 'SETTLEMENT_TERMS']
        >>> catalog.rules_for("offers", "QUALIFIER").allowed_item_codes
        ['ITEM_COUNT', 'MIN_VALUE']
        >>> catalog.rules_for("unknown", "QUALIFIER") is None
        True
    """

    def __init__(self, document: CatalogDocument, source: str = "<memory>"):
        """Initialize the catalog.

        Args:
            document: Validated catalog document.
            source: Where the catalog came from, for diagnostics.
        """
        self._document = document
        self.source = source

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: str = "<memory>") -> "RuleCatalog":
        """Build a catalog from already-decoded data.

        Args:
            data: Decoded catalog mapping.
            source: Where the data came from, for diagnostics.

        Returns:
            RuleCatalog: The catalog.

        Raises:
            RuleCatalogError: If the data does not describe a valid catalog.
        """
        if not isinstance(data, Mapping):
            raise RuleCatalogError(source, "top level must be a mapping")
        try:
            document = CatalogDocument.model_validate(dict(data))
        except ValidationError as e:
            raise RuleCatalogError(source, ErrorFormatter.format_validation_error(e)) from e
        return cls(document, source)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "RuleCatalog":
        """Load a catalog from a YAML file.

        Args:
            path: Catalog file; the packaged catalog is used when omitted.

        Returns:
            RuleCatalog: The catalog.

        Raises:
            RuleCatalogError: If the file cannot be read or parsed.
        """
        resource = Path(path) if path else files("tagvalidator") / "rules" / PACKAGED_CATALOG
        source = str(resource)
        try:
            text = resource.read_text(encoding="utf-8")
        except OSError as e:
            raise RuleCatalogError(source, f"cannot be read ({e})") from e
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise RuleCatalogError(source, f"is not valid YAML ({e})") from e
        catalog = cls.from_mapping(data, source)
        logger.info(f"Loaded rule catalog from {source} with domains: {', '.join(catalog.domains())}")
        return catalog

    def domains(self) -> List[str]:
        """List the domains described by the catalog.

        Returns:
            List[str]: Domain names in catalog order.
        """
        return list(self._document.domains)

    def domain(self, domain: str) -> Optional[DomainRules]:
        """Get the rules of a domain.

        Args:
            domain: Domain name.

        Returns:
            Optional[DomainRules]: The domain rules, or None if unknown.
        """
        return self._document.domains.get(domain)

    def rules_for(self, domain: str, group_code: Optional[str]) -> Optional[RuleEntry]:
        """Get the rules for a group code within a domain.

        Args:
            domain: Domain name.
            group_code: Group descriptor code.

        Returns:
            Optional[RuleEntry]: The rule entry, or None if the domain or code is unknown.
        """
        rules = self.domain(domain)
        if rules is None or group_code is None:
            return None
        return rules.groups.get(group_code)

    def group_codes(self, domain: str) -> List[str]:
        """List the group codes recognized for a domain.

        Args:
            domain: Domain name.

        Returns:
            List[str]: Group codes, empty for an unknown domain.
        """
        rules = self.domain(domain)
        return list(rules.groups) if rules else []

    def required_group_codes(self, domain: str) -> List[str]:
        """List the group codes a domain requires.

        Args:
            domain: Domain name.

        Returns:
            List[str]: Required group codes, empty for an unknown domain.
        """
        rules = self.domain(domain)
        return [code for code, entry in rules.groups.items() if entry.required] if rules else []

    def to_dict(self, domain: Optional[str] = None) -> Dict[str, Any]:
        """Dump the catalog, or one domain of it, as plain data.

        Args:
            domain: Optional domain to restrict the dump to.

        Returns:
            Dict[str, Any]: JSON-compatible catalog data.
        """
        domains = self._document.domains
        if domain is not None:
            domains = {domain: domains[domain]} if domain in domains else {}
        return {name: rules.model_dump(mode="json", exclude_none=True, exclude_defaults=True) for name, rules in domains.items()}


@lru_cache()
def get_rule_catalog() -> RuleCatalog:
    """Get the cached process-wide rule catalog.

    Returns:
        RuleCatalog: The catalog configured by ``rules_catalog_path``, or the packaged one.

    Examples:
        >>> get_rule_catalog() is get_rule_catalog()
        True
    """
    return RuleCatalog.load(settings.rules_catalog_path)
