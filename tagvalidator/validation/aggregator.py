# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/validation/aggregator.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Result aggregation.
Collects issues from the structural and cross-reference validators and
builds one ValidationOutcome per call.
"""

# Standard
from typing import Iterable, List

# First-Party
from tagvalidator.models import ValidationIssue, ValidationOutcome


class ResultAggregator:
    """Accumulates issues for a single validation call.

    Structural issues are reported first in group-then-item order; cross-reference
    issues are appended after them.

    Examples:
        >>> from tagvalidator.types import ErrorKind
        >>> agg = ResultAggregator()
        >>> agg.add_cross_reference(ValidationIssue(kind=ErrorKind.CROSS_REFERENCE_MISSING, message="term missing"))
        >>> agg.add(ValidationIssue(kind=ErrorKind.UNKNOWN_GROUP_CODE, message="bad group"))
        >>> agg.outcome().errors
        ['bad group', 'term missing']
        >>> len(agg)
        2
    """

    def __init__(self) -> None:
        """Initialize an empty aggregator."""
        self._structural: List[ValidationIssue] = []
        self._cross_reference: List[ValidationIssue] = []
        self._warnings: List[str] = []

    def __len__(self) -> int:
        """Count the issues collected so far.

        Returns:
            int: Number of issues.
        """
        return len(self._structural) + len(self._cross_reference)

    def add(self, issue: ValidationIssue) -> None:
        """Record a structural issue.

        Args:
            issue: The issue.
        """
        self._structural.append(issue)

    def add_cross_reference(self, issue: ValidationIssue) -> None:
        """Record a cross-reference issue.

        Args:
            issue: The issue.
        """
        self._cross_reference.append(issue)

    def extend_cross_reference(self, issues: Iterable[ValidationIssue]) -> None:
        """Record several cross-reference issues.

        Args:
            issues: The issues, in report order.
        """
        self._cross_reference.extend(issues)

    def warn(self, message: str) -> None:
        """Record a non-fatal finding.

        Args:
            message: Human-readable warning.
        """
        self._warnings.append(message)

    def outcome(self) -> ValidationOutcome:
        """Build the outcome for everything collected.

        Returns:
            ValidationOutcome: The frozen outcome.
        """
        return ValidationOutcome.from_issues(self._structural + self._cross_reference, warnings=self._warnings)
