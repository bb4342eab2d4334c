# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Tag Validator - a rule-driven validation engine for protocol message tag groups.
"""

__author__ = "Mihai Criveti"
__copyright__ = "Copyright 2025"
__license__ = "Apache 2.0"
__version__ = "0.1.0"
__description__ = "Rule-driven validation of tag groups in commerce protocol messages"
__packages__ = ["tagvalidator"]

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "validation",
]
