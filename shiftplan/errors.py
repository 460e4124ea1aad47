# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Error types raised by the service layer."""

import uuid
from datetime import date, time


class ServiceError(Exception):
    """Base exception for service errors."""


class ForbiddenError(ServiceError):
    """The caller lacks the privilege for this operation."""

    def __init__(self, privilege: str | None = None) -> None:
        self.privilege = privilege
        super().__init__(
            f"Permission denied: {privilege}" if privilege else "Permission denied"
        )


class EntityNotFoundError(ServiceError):
    """A referenced entity does not exist or was deleted."""

    def __init__(self, entity_id: uuid.UUID | str) -> None:
        self.entity_id = entity_id
        super().__init__(f"Entity not found: {entity_id}")


class DateOrderWrongError(ServiceError):
    """A date interval is inverted or out of sequence."""

    def __init__(self, from_date: date, to_date: date) -> None:
        self.from_date = from_date
        self.to_date = to_date
        super().__init__(f"Date order wrong: {from_date} is after {to_date}")


class TimeOrderWrongError(ServiceError):
    """A time-of-day interval ends before it starts."""

    def __init__(self, from_time: time, to_time: time) -> None:
        self.from_time = from_time
        self.to_time = to_time
        super().__init__(f"Time order wrong: {from_time} is after {to_time}")


class InvalidDayOfWeekError(ServiceError):
    """A day-of-week number outside 1..7."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Invalid day of week: {number}")


class InvalidDateError(ServiceError):
    """A calendar component is out of range (e.g. week 53 in a 52-week year)."""


class InvalidExtraHoursCategoryError(ServiceError):
    """A custom definition is missing on a custom entry or set on another."""

    def __init__(
        self, category: str, custom_extra_hours_id: uuid.UUID | None
    ) -> None:
        self.category = category
        self.custom_extra_hours_id = custom_extra_hours_id
        super().__init__(
            f"Category {category} does not fit custom definition "
            f"{custom_extra_hours_id}"
        )


class InvalidWorkdaysError(ServiceError):
    """A contract's workdays per week differ from its flagged weekdays."""

    def __init__(self, workdays_per_week: int, weekdays: int) -> None:
        self.workdays_per_week = workdays_per_week
        self.weekdays = weekdays
        super().__init__(
            f"Invalid workdays per week: {workdays_per_week} "
            f"with {weekdays} working weekdays"
        )


class DatabaseQueryError(ServiceError):
    """The storage layer failed."""


class IdSetOnCreateError(ServiceError):
    """A create call carried a caller-supplied id."""

    def __init__(self) -> None:
        super().__init__("Id must not be set on create")


class VersionSetOnCreateError(ServiceError):
    """A create call carried a caller-supplied version."""

    def __init__(self) -> None:
        super().__init__("Version must not be set on create")


class EntityConflictsError(ServiceError):
    """Optimistic concurrency check failed on update."""

    def __init__(
        self,
        entity_id: uuid.UUID,
        expected_version: uuid.UUID | None,
        actual_version: uuid.UUID | None,
    ) -> None:
        self.entity_id = entity_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"Entity {entity_id} was modified: "
            f"expected version {expected_version}, found {actual_version}"
        )
