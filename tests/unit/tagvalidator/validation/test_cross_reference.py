# -*- coding: utf-8 -*-
"""Location: ./tests/unit/tagvalidator/validation/test_cross_reference.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Tests for validation of groups against negotiated reference definitions.
"""

# Third-Party
import pytest

# First-Party
from tagvalidator.models import ReferenceDefinition, TagGroup, TagItem
from tagvalidator.types import ErrorKind
from tagvalidator.validation.cross_reference import parse_reference_definitions, validate_cross_reference, validate_reference_items


def _terms(*items):
    return TagGroup.model_validate({"descriptor": {"code": "SETTLEMENT_TERMS"}, "list": [{"descriptor": {"code": code}, "value": value} for code, value in items]})


class TestBidirectionalCheck:
    """Every reference must be present and every item must be referenced."""

    def test_all_matching(self, settlement_terms):
        group = _terms(("SETTLEMENT_WINDOW", "PT60M"), ("SETTLEMENT_BASIS", "DELIVERY"), ("STATIC_TERMS", "https://example.com/terms"))
        assert validate_cross_reference(group, settlement_terms) == []

    def test_both_directions_reported(self):
        issues = validate_cross_reference(_terms(("B", "x")), [{"code": "A", "type": "string"}])
        assert len(issues) == 2
        assert [issue.kind for issue in issues] == [ErrorKind.CROSS_REFERENCE_MISSING, ErrorKind.UNKNOWN_ITEM_CODE]
        assert issues[0].message == "SETTLEMENT_TERMS_[0], Term code 'A' is not present in tag.list"
        assert issues[1].message == "SETTLEMENT_TERMS_[0], List item[0] has an invalid descriptor code: B"

    def test_missing_terms_listed_in_definition_order(self, settlement_terms):
        issues = validate_cross_reference(_terms(("SETTLEMENT_BASIS", "DELIVERY")), settlement_terms, group_index=3)
        assert [issue.message for issue in issues] == [
            "SETTLEMENT_TERMS_[3], Term code 'SETTLEMENT_WINDOW' is not present in tag.list",
            "SETTLEMENT_TERMS_[3], Term code 'STATIC_TERMS' is not present in tag.list",
        ]
        assert all(issue.group_index == 3 for issue in issues)

    def test_empty_definitions_flag_every_item(self):
        issues = validate_cross_reference(_terms(("A", "x"), ("B", "y")), [])
        assert [issue.item_index for issue in issues] == [0, 1]

    def test_missing_list_treated_as_empty(self):
        group = TagGroup.model_validate({"descriptor": {"code": "SETTLEMENT_TERMS"}})
        issues = validate_cross_reference(group, [{"code": "A", "type": "string"}])
        assert [issue.kind for issue in issues] == [ErrorKind.CROSS_REFERENCE_MISSING]

    def test_item_without_code(self):
        group = TagGroup.model_validate({"descriptor": {"code": "SETTLEMENT_TERMS"}, "list": [{"value": "x"}]})
        issues = validate_cross_reference(group, [])
        assert issues[0].message == "SETTLEMENT_TERMS_[0], List item[0] has an invalid descriptor code: None"
        assert issues[0].codes == []


class TestTypeChecks:
    """Item values must match the type their definition declares."""

    @pytest.mark.parametrize("value", ["DELIVERY", "INVOICE_RECEIPT"])
    def test_enum_member(self, value):
        assert validate_cross_reference(_terms(("BASIS", value)), [{"code": "BASIS", "type": "enum", "value": ["DELIVERY", "INVOICE_RECEIPT"]}]) == []

    @pytest.mark.parametrize("definition", [{"code": "BASIS", "type": "enum", "value": ["DELIVERY"]}, {"code": "BASIS", "type": "enum"}])
    def test_enum_non_member(self, definition):
        issues = validate_cross_reference(_terms(("BASIS", "ON_DEMAND")), [definition])
        assert [issue.message for issue in issues] == ["SETTLEMENT_TERMS_[0], List item[0] has an invalid value for BASIS"]
        assert issues[0].kind is ErrorKind.CROSS_REFERENCE_TYPE_MISMATCH

    @pytest.mark.parametrize("value", [60, None, True, ["PT60M"]])
    def test_string_expected(self, value):
        issues = validate_cross_reference(_terms(("WINDOW", value)), [{"code": "WINDOW", "type": "string"}])
        assert [issue.message for issue in issues] == ["SETTLEMENT_TERMS_[0], List item[0] type should be string"]

    @pytest.mark.parametrize("type_", ["number", None, "STRING"])
    def test_unsupported_type(self, type_):
        issues = validate_cross_reference(_terms(("WINDOW", "PT60M")), [{"code": "WINDOW", "type": type_}])
        assert [issue.message for issue in issues] == ["SETTLEMENT_TERMS_[0], List item[0] has an invalid type"]

    def test_models_accepted(self):
        definitions = [ReferenceDefinition(code="WINDOW", type="string")]
        assert validate_cross_reference(_terms(("WINDOW", "PT60M")), definitions) == []


class TestParseReferenceDefinitions:
    def test_first_definition_wins(self):
        definitions, issues = parse_reference_definitions([{"code": "A", "type": "string"}, {"code": "A", "type": "enum", "value": ["x"]}])
        assert definitions["A"].type == "string"
        assert issues == []

    def test_malformed_definitions_reported(self):
        definitions, issues = parse_reference_definitions([{"type": "string"}, "A", {"code": "B", "type": "string"}])
        assert list(definitions) == ["B"]
        assert [issue.kind for issue in issues] == [ErrorKind.MALFORMED_REFERENCE, ErrorKind.MALFORMED_REFERENCE]
        assert issues[0].message == "Reference definition[0] is malformed: code is required"
        assert issues[1].message.startswith("Reference definition[1] is malformed:")

    def test_malformed_definition_surfaces_in_validation(self):
        issues = validate_cross_reference(_terms(("A", "x")), [{"type": "string"}, {"code": "A", "type": "string"}])
        assert [issue.kind for issue in issues] == [ErrorKind.MALFORMED_REFERENCE]


def test_unparsed_items_keep_sibling_positions():
    item = TagItem.model_validate({"descriptor": {"code": "BASIS"}, "value": "ON_DEMAND"})
    issues = validate_reference_items("SETTLEMENT_TERMS", [None, item], [{"code": "BASIS", "type": "enum", "value": ["DELIVERY"]}], group_index=1)
    assert [issue.message for issue in issues] == ["SETTLEMENT_TERMS_[1], List item[1] has an invalid value for BASIS"]
