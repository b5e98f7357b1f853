"""create_club_schema

Revision ID: 0b7a3c5d91e2
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op

from src.infrastructure.persistence.models import BaseModel


# revision identifiers, used by Alembic.
revision: str = "0b7a3c5d91e2"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create every club management table (baseline)."""
    BaseModel.metadata.create_all(bind=op.get_bind())


def downgrade() -> None:
    """Drop every club management table."""
    BaseModel.metadata.drop_all(bind=op.get_bind())
