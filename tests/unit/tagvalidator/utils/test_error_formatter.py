# -*- coding: utf-8 -*-
"""Location: ./tests/unit/tagvalidator/utils/test_error_formatter.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti
"""

# Third-Party
from pydantic import BaseModel, field_validator, ValidationError
import pytest

# First-Party
from tagvalidator.models import ReferenceDefinition, TagGroup
from tagvalidator.utils.error_formatter import ErrorFormatter


class _Positive(BaseModel):
    amount: int

    @field_validator("amount")
    @classmethod
    def _check(cls, v):
        if v <= 0:
            raise ValueError("Amount must be positive")
        return v


def _error(model, payload) -> ValidationError:
    with pytest.raises(ValidationError) as exc:
        model.model_validate(payload)
    return exc.value


def test_missing_field():
    assert ErrorFormatter.format_validation_error(_error(ReferenceDefinition, {"type": "string"})) == "code is required"


def test_nested_location():
    message = ErrorFormatter.format_validation_error(_error(TagGroup, {"list": [{"descriptor": {"code": 7}}]}))
    assert message == "list.0.descriptor.code must be a string"


def test_object_expected():
    assert ErrorFormatter.format_validation_error(_error(TagGroup, {"descriptor": "META"})) == "descriptor must be an object"


def test_list_expected():
    assert ErrorFormatter.format_validation_error(_error(TagGroup, {"list": "AUTO"})) == "list must be a list"


def test_root_level_error():
    assert ErrorFormatter.format_validation_error(_error(TagGroup, "META")) == "value must be an object"


def test_several_errors_joined():
    message = ErrorFormatter.format_validation_error(_error(TagGroup, {"descriptor": "META", "list": "AUTO"}))
    assert message == "descriptor must be an object; list must be a list"


def test_fallback_message():
    message = ErrorFormatter.format_validation_error(_error(_Positive, {"amount": -1}))
    assert message == "amount is invalid: value error, Amount must be positive"


def test_error_details():
    details = ErrorFormatter.error_details(_error(ReferenceDefinition, {"code": 5}))
    assert details == [{"field": "code", "message": "must be a string"}]
