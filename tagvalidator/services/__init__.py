# -*- coding: utf-8 -*-
"""Location: ./tagvalidator/services/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Services Package.
Exposes the Tag Validator support services:
- Logging
"""

from tagvalidator.services.logging_service import logging_service, LoggingService

__all__ = ["LoggingService", "logging_service"]
