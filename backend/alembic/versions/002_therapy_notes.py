"""Therapy notes — confidential session records per mentee.

Revision ID: 002_therapy_notes
Revises: 001_initial
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_therapy_notes"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "therapy_notes",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("mentee_id", sa.Uuid(as_uuid=True), sa.ForeignKey("mentees.id", ondelete="CASCADE"), nullable=False),
        sa.Column("session_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("session_type", sa.String(100), nullable=False),
        sa.Column("duration", sa.Integer, nullable=False),
        sa.Column("therapist_name", sa.String(200), nullable=False),
        sa.Column("session_notes", sa.Text, nullable=False),
        sa.Column("progress_observations", sa.Text, nullable=True),
        sa.Column("goals_addressed", sa.JSON, nullable=False),
        sa.Column("next_steps", sa.Text, nullable=True),
        sa.Column("risk_level", sa.String(10), nullable=False, server_default="low"),
        sa.Column("mood_rating", sa.Integer, nullable=True),
        sa.Column("confidential", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_therapy_notes_mentee_id", "therapy_notes", ["mentee_id"])


def downgrade() -> None:
    op.drop_index("ix_therapy_notes_mentee_id", table_name="therapy_notes")
    op.drop_table("therapy_notes")
