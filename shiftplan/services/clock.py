# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Clock used to stamp entities."""

from datetime import date, datetime


class ClockService:
    """Wall clock. Replace in tests to pin the time."""

    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return self.now().date()
