# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/validation/errors.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Teryl Taylor

Validation engine exceptions.
Payload defects are never raised; they are reported in a ValidationOutcome.
These exceptions cover configuration problems only.
"""


class TagValidationError(Exception):
    """Base class for Tag Validator configuration errors."""


class RuleCatalogError(TagValidationError):
    """A rule catalog file could not be read or does not describe a valid catalog.

    Attributes:
        source (str): Where the catalog was loaded from.
        message (str): Why loading failed.

    Examples:
        >>> err = RuleCatalogError("catalog.yaml", "not a mapping")
        >>> str(err)
        'Invalid rule catalog catalog.yaml: not a mapping'
    """

    def __init__(self, source: str, message: str):
        """Initialize a rule catalog error.

        Args:
            source: Where the catalog was loaded from.
            message: Why loading failed.
        """
        self.source = source
        self.message = message
        super().__init__(f"Invalid rule catalog {source}: {message}")


class UnknownDomainError(TagValidationError):
    """Validation was requested for a domain the rule catalog does not describe.

    Examples:
        >>> str(UnknownDomainError("billing", ["items", "offers"]))
        "Unknown domain 'billing'; expected one of: items, offers"
    """

    def __init__(self, domain: str, known_domains: list[str]):
        """Initialize an unknown domain error.

        Args:
            domain: The requested domain.
            known_domains: Domains present in the catalog.
        """
        self.domain = domain
        self.known_domains = known_domains
        super().__init__(f"Unknown domain '{domain}'; expected one of: {', '.join(known_domains)}")
