# -*- coding: utf-8 -*-
"""Location: ./tests/unit/tagvalidator/test_models.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Tests for the Tag Validator models.
"""

# Third-Party
from pydantic import ValidationError
import pytest

# First-Party
from tagvalidator.models import DomainContext, ReferenceDefinition, TagGroup, TagItem, ValidationIssue, ValidationOutcome
from tagvalidator.types import ErrorKind


class TestTagGroup:
    def test_list_alias(self):
        group = TagGroup.model_validate({"descriptor": {"code": "META"}, "list": [{"descriptor": {"code": "AUTO"}, "value": "true"}]})
        assert group.items[0].value == "true"
        assert group.model_dump(by_alias=True)["list"][0]["descriptor"]["code"] == "AUTO"

    def test_populate_by_name(self):
        group = TagGroup(descriptor={"code": "META"}, items=[TagItem(descriptor={"code": "AUTO"})])
        assert group.items[0].descriptor_code == "AUTO"

    def test_display_kept_verbatim(self):
        assert TagGroup.model_validate({"display": "yes"}).display == "yes"

    def test_extra_fields_allowed(self):
        group = TagGroup.model_validate({"descriptor": {"code": "META", "short_desc": "meta"}, "ttl": "PT1H"})
        assert group.descriptor_code == "META"

    def test_empty_list_is_not_missing(self):
        assert TagGroup.model_validate({"list": []}).items == []

    @pytest.mark.parametrize("payload", ["META", {"list": "AUTO"}, {"descriptor": "META"}, {"list": ["AUTO"]}])
    def test_malformed(self, payload):
        with pytest.raises(ValidationError):
            TagGroup.model_validate(payload)

    def test_frozen(self):
        group = TagGroup.model_validate({"descriptor": {"code": "META"}})
        with pytest.raises(ValidationError):
            group.display = True


class TestReferenceDefinition:
    def test_code_required(self):
        with pytest.raises(ValidationError):
            ReferenceDefinition.model_validate({"type": "string"})

    def test_enum_values(self):
        definition = ReferenceDefinition.model_validate({"code": "BASIS", "type": "enum", "value": ["DELIVERY"]})
        assert definition.value == ["DELIVERY"]


class TestDomainContext:
    def test_defaults(self):
        context = DomainContext()
        assert context.reference_definitions is None
        assert context.allowed_group_codes is None

    def test_accepts_dicts_and_models(self):
        context = DomainContext(reference_definitions=[{"code": "A"}, ReferenceDefinition(code="B")])
        assert len(context.reference_definitions) == 2

    def test_rejects_non_list(self):
        with pytest.raises(ValidationError):
            DomainContext(reference_definitions={"code": "A"})


class TestValidationIssue:
    @pytest.mark.parametrize(
        "group_index,item_index,path",
        [(None, None, "tags"), (2, None, "tags[2]"), (2, 4, "tags[2].list[4]"), (None, 4, "tags")],
    )
    def test_path(self, group_index, item_index, path):
        issue = ValidationIssue(kind=ErrorKind.INVALID_ITEM_VALUE, message="m", group_index=group_index, item_index=item_index)
        assert issue.path == path

    def test_str_is_message(self):
        assert str(ValidationIssue(kind=ErrorKind.TAGS_MISSING, message="tags missing")) == "tags missing"


class TestValidationOutcome:
    def test_valid(self):
        outcome = ValidationOutcome.from_issues([])
        assert outcome.is_valid is True
        assert outcome.errors is None
        assert outcome.to_dict() == {"isValid": True}

    def test_invalid(self):
        issues = [ValidationIssue(kind=ErrorKind.UNKNOWN_GROUP_CODE, message="a"), ValidationIssue(kind=ErrorKind.MISSING_ITEM_LIST, message="b")]
        outcome = ValidationOutcome.from_issues(issues, warnings=["w"])
        assert outcome.is_valid is False
        assert outcome.errors == ["a", "b"]
        assert outcome.warnings == ["w"]
        assert outcome.to_dict() == {"isValid": False, "errors": ["a", "b"]}

    def test_json_dump(self):
        outcome = ValidationOutcome.from_issues([ValidationIssue(kind=ErrorKind.UNKNOWN_GROUP_CODE, message="a", group_index=0)])
        dumped = outcome.model_dump(mode="json")
        assert dumped["issues"][0]["kind"] == "unknown_group_code"
