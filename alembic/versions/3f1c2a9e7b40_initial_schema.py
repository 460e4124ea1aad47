"""initial_schema

Revision ID: 3f1c2a9e7b40
Revises:
Create Date: 2025-11-03 09:12:41.518204

"""
from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9e7b40'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

EXTRA_HOURS_CATEGORIES = (
    "EXTRA_WORK",
    "VACATION",
    "SICK_LEAVE",
    "HOLIDAY",
    "UNAVAILABLE",
    "CUSTOM_EXTRA_HOURS",
)
SPECIAL_DAY_TYPES = ("HOLIDAY", "SHORT_DAY")
BILLING_PERIOD_VALUE_TYPES = (
    "BALANCE",
    "OVERALL",
    "EXPECTED_HOURS",
    "EXTRA_WORK",
    "VACATION_HOURS",
    "SICK_LEAVE",
    "HOLIDAY",
    "VACATION_DAYS",
    "VACATION_ENTITLEMENT",
)


def _timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def _versioned_columns() -> list[sa.Column]:
    return [
        sa.Column("created", sa.DateTime(), nullable=False),
        sa.Column("created_by", sa.String(100), nullable=True),
        sa.Column("deleted", sa.DateTime(), nullable=True),
        sa.Column("deleted_by", sa.String(100), nullable=True),
        sa.Column("version", sa.Uuid(), nullable=False),
    ]


def upgrade() -> None:
    # Identity and RBAC
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("full_name", sa.String(200), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="1"),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_table(
        "sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("token", sa.String(36), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("token"),
    )
    op.create_table(
        "roles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("is_system", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "permissions",
        sa.Column("code", sa.String(100), nullable=False),
        sa.Column("module", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("code"),
    )
    op.create_table(
        "role_permissions",
        sa.Column("role_id", sa.Uuid(), nullable=False),
        sa.Column("permission_code", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("role_id", "permission_code"),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["permission_code"], ["permissions.code"], ondelete="CASCADE"
        ),
    )
    op.create_table(
        "user_roles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("role_id", sa.Uuid(), nullable=False),
        sa.Column("assigned_by_id", sa.Uuid(), nullable=True),
        sa.Column("assigned_at", sa.DateTime(), nullable=False),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["assigned_by_id"], ["users.id"]),
        sa.UniqueConstraint("user_id", "role_id", name="_user_role_uc"),
    )

    # Shift planning
    op.create_table(
        "sales_persons",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("background_color", sa.String(7), nullable=False),
        sa.Column("is_paid", sa.Boolean(), nullable=False),
        sa.Column("inactive", sa.Boolean(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=True),
        *_versioned_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_table(
        "slots",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("time_from", sa.Time(), nullable=False),
        sa.Column("time_to", sa.Time(), nullable=False),
        sa.Column("min_resources", sa.Integer(), nullable=False),
        sa.Column("valid_from", sa.Date(), nullable=False),
        sa.Column("valid_to", sa.Date(), nullable=True),
        *_versioned_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "bookings",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("sales_person_id", sa.Uuid(), nullable=False),
        sa.Column("slot_id", sa.Uuid(), nullable=False),
        sa.Column("calendar_week", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        *_versioned_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["sales_person_id"], ["sales_persons.id"]),
        sa.ForeignKeyConstraint(["slot_id"], ["slots.id"]),
    )
    op.create_index(
        "ix_bookings_sales_person_year_week",
        "bookings",
        ["sales_person_id", "year", "calendar_week"],
    )

    # Contracts and hours
    op.create_table(
        "working_hours",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("sales_person_id", sa.Uuid(), nullable=False),
        sa.Column("expected_hours", sa.Float(), nullable=False),
        sa.Column("from_year", sa.Integer(), nullable=False),
        sa.Column("from_calendar_week", sa.Integer(), nullable=False),
        sa.Column("to_year", sa.Integer(), nullable=False),
        sa.Column("to_calendar_week", sa.Integer(), nullable=False),
        sa.Column("workdays_per_week", sa.Integer(), nullable=False),
        sa.Column("monday", sa.Boolean(), nullable=False),
        sa.Column("tuesday", sa.Boolean(), nullable=False),
        sa.Column("wednesday", sa.Boolean(), nullable=False),
        sa.Column("thursday", sa.Boolean(), nullable=False),
        sa.Column("friday", sa.Boolean(), nullable=False),
        sa.Column("saturday", sa.Boolean(), nullable=False),
        sa.Column("sunday", sa.Boolean(), nullable=False),
        sa.Column("vacation_days", sa.Integer(), nullable=False),
        *_versioned_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["sales_person_id"], ["sales_persons.id"]),
    )
    op.create_index(
        "ix_working_hours_sales_person_id", "working_hours", ["sales_person_id"]
    )
    op.create_table(
        "custom_extra_hours",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("modifies_balance", sa.Boolean(), nullable=False),
        *_versioned_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "extra_hours",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("sales_person_id", sa.Uuid(), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column(
            "category",
            sa.Enum(*EXTRA_HOURS_CATEGORIES, name="extrahourscategory"),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("custom_extra_hours_id", sa.Uuid(), nullable=True),
        sa.Column("date_time", sa.DateTime(), nullable=False),
        *_versioned_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["sales_person_id"], ["sales_persons.id"]),
        sa.ForeignKeyConstraint(
            ["custom_extra_hours_id"], ["custom_extra_hours.id"]
        ),
    )
    op.create_index(
        "ix_extra_hours_sales_person_id", "extra_hours", ["sales_person_id"]
    )
    op.create_table(
        "special_days",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("calendar_week", sa.Integer(), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column(
            "day_type",
            sa.Enum(*SPECIAL_DAY_TYPES, name="specialdaytype"),
            nullable=False,
        ),
        sa.Column("time_of_day", sa.Time(), nullable=True),
        sa.Column("name", sa.String(200), nullable=True),
        *_versioned_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "employee_yearly_carryover",
        sa.Column("sales_person_id", sa.Uuid(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("carryover_hours", sa.Float(), nullable=False),
        sa.Column("vacation", sa.Integer(), nullable=False),
        sa.Column("created", sa.DateTime(), nullable=False),
        sa.Column("deleted", sa.DateTime(), nullable=True),
        sa.Column("version", sa.Uuid(), nullable=False),
        sa.PrimaryKeyConstraint("sales_person_id", "year"),
        sa.ForeignKeyConstraint(["sales_person_id"], ["sales_persons.id"]),
    )

    # Billing periods
    op.create_table(
        "billing_periods",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        *_versioned_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "billing_period_sales_persons",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("billing_period_id", sa.Uuid(), nullable=False),
        sa.Column("sales_person_id", sa.Uuid(), nullable=False),
        sa.Column(
            "value_type",
            sa.Enum(*BILLING_PERIOD_VALUE_TYPES, name="billingperiodvaluetype"),
            nullable=False,
        ),
        sa.Column("value_delta", sa.Float(), nullable=False),
        sa.Column("value_ytd_from", sa.Float(), nullable=False),
        sa.Column("value_ytd_to", sa.Float(), nullable=False),
        sa.Column("value_full_year", sa.Float(), nullable=False),
        *_versioned_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["billing_period_id"], ["billing_periods.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["sales_person_id"], ["sales_persons.id"]),
        sa.UniqueConstraint(
            "billing_period_id",
            "sales_person_id",
            "value_type",
            name="_billing_period_sales_person_value_uc",
        ),
    )


def downgrade() -> None:
    op.drop_table("billing_period_sales_persons")
    op.drop_table("billing_periods")
    op.drop_table("employee_yearly_carryover")
    op.drop_table("special_days")
    op.drop_index("ix_extra_hours_sales_person_id", table_name="extra_hours")
    op.drop_table("extra_hours")
    op.drop_table("custom_extra_hours")
    op.drop_index("ix_working_hours_sales_person_id", table_name="working_hours")
    op.drop_table("working_hours")
    op.drop_index("ix_bookings_sales_person_year_week", table_name="bookings")
    op.drop_table("bookings")
    op.drop_table("slots")
    op.drop_table("sales_persons")
    op.drop_table("user_roles")
    op.drop_table("role_permissions")
    op.drop_table("permissions")
    op.drop_table("roles")
    op.drop_table("sessions")
    op.drop_table("users")
