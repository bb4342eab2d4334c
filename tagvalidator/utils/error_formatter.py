# -*- coding: utf-8 -*-
"""Tag Validator formatting of Pydantic validation errors.

Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Payload fragments (tag groups, reference definitions) are parsed with Pydantic.
When a fragment cannot be parsed, the resulting ValidationError is turned into a
short readable sentence that fits into a ValidationOutcome error list.
"""

# Standard
import logging
from typing import Any, Dict, List

# Third-Party
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ErrorFormatter:
    """
    Transform technical errors into user-friendly messages.

    Examples:
        >>> from tagvalidator.models import TagGroup
        >>> try:
        ...     TagGroup.model_validate({"descriptor": {"code": 5}})
        ... except ValidationError as e:
        ...     ErrorFormatter.format_validation_error(e)
        'descriptor.code must be a string'
    """

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert a Pydantic error to one readable sentence.

        Args:
            error (ValidationError): The Pydantic validation error.

        Returns:
            str: Semicolon-separated field messages.
        """
        details = ErrorFormatter.error_details(error)

        # Log the full error for debugging
        logger.debug(f"Validation error: {error}")

        return "; ".join(f"{d['field']} {d['message']}" for d in details)

    @staticmethod
    def error_details(error: ValidationError) -> List[Dict[str, Any]]:
        """
        List the field-level details of a Pydantic error.

        Args:
            error (ValidationError): The Pydantic validation error.

        Returns:
            List[Dict[str, Any]]: One ``{"field", "message"}`` entry per error.
        """
        details = []
        for err in error.errors():
            field = ".".join(str(part) for part in err.get("loc", ())) or "value"
            details.append({"field": field, "message": ErrorFormatter._get_user_message(err.get("type", ""), err.get("msg", "Invalid value"))})
        return details

    @staticmethod
    def _get_user_message(error_type: str, technical_msg: str) -> str:
        """
        Map technical validation messages to user-friendly ones.

        Args:
            error_type (str): The Pydantic error type.
            technical_msg (str): The technical validation message.

        Returns:
            str: User-friendly error message.

        Examples:
            >>> ErrorFormatter._get_user_message("missing", "Field required")
            'is required'
            >>> ErrorFormatter._get_user_message("custom", "Something odd")
            'is invalid: something odd'
        """
        mappings = {
            "missing": "is required",
            "string_type": "must be a string",
            "list_type": "must be a list",
            "model_type": "must be an object",
            "dict_type": "must be an object",
            "model_attributes_type": "must be an object",
        }

        if error_type in mappings:
            return mappings[error_type]

        # Default fallback
        return f"is invalid: {technical_msg[:1].lower()}{technical_msg[1:]}"
