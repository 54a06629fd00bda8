"""create_event_registration_tables

Revision ID: 6a1f3c2b9d10
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "6a1f3c2b9d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create events, attendees and notification_outbox tables."""
    op.create_table(
        "events",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=100), nullable=False, comment="Event title"),
        sa.Column(
            "description",
            sa.String(length=500),
            nullable=False,
            comment="Event description",
        ),
        sa.Column(
            "date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Scheduled date and time",
        ),
        sa.Column("location", sa.String(length=100), nullable=False, comment="Venue"),
        sa.Column(
            "max_attendees", sa.Integer(), nullable=False, comment="Capacity limit"
        ),
        sa.Column(
            "materials_ref",
            sa.String(length=2048),
            nullable=True,
            comment="Object-store locator of uploaded materials",
        ),
        sa.CheckConstraint(
            "max_attendees >= 1", name="ck_events_max_attendees_positive"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_events_created_at", "events", ["created_at"], unique=False)

    op.create_table(
        "attendees",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        # Event relationship
        sa.Column("event_id", sa.Uuid(), nullable=False, comment="FK to events table"),
        sa.Column("name", sa.String(length=100), nullable=False, comment="Attendee name"),
        sa.Column(
            "email",
            sa.String(length=100),
            nullable=False,
            comment="Attendee email (lowercase)",
        ),
        sa.Column(
            "company", sa.String(length=100), nullable=False, comment="Attendee company"
        ),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_attendees_event_id_created_at",
        "attendees",
        ["event_id", "created_at"],
        unique=False,
    )

    op.create_table(
        "notification_outbox",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "routing_key",
            sa.String(length=200),
            nullable=False,
            comment="Message routing key",
        ),
        sa.Column(
            "content_type",
            sa.String(length=100),
            nullable=False,
            comment="Payload MIME type",
        ),
        sa.Column("payload", sa.Text(), nullable=False, comment="Serialized message body"),
        sa.Column(
            "status", sa.String(length=20), nullable=False, comment="pending or dispatched"
        ),
        sa.Column("attempts", sa.Integer(), nullable=False, comment="Failed send attempts"),
        sa.Column(
            "last_error", sa.Text(), nullable=True, comment="Most recent send failure"
        ),
        sa.Column(
            "dispatched_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Transport acknowledgement time",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_notification_outbox_status_created_at",
        "notification_outbox",
        ["status", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    """Drop notification_outbox, attendees and events."""
    op.drop_index(
        "ix_notification_outbox_status_created_at", table_name="notification_outbox"
    )
    op.drop_table("notification_outbox")
    op.drop_index("ix_attendees_event_id_created_at", table_name="attendees")
    op.drop_table("attendees")
    op.drop_index("ix_events_created_at", table_name="events")
    op.drop_table("events")
