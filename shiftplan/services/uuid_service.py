# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Identifier generator."""

import logging
import uuid

logger = logging.getLogger(__name__)


class UuidService:
    """Hands out fresh ids and versions."""

    def new_uuid(self, usage: str) -> uuid.UUID:
        value = uuid.uuid4()
        logger.debug(f"New uuid for {usage}: {value}")
        return value
