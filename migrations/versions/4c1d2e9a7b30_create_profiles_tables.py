"""create_profiles_tables

Revision ID: 4c1d2e9a7b30
Revises:
Create Date: 2026-10-17 09:12:03.418220

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1d2e9a7b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profiles and profile_skills tables."""
    op.create_table('profiles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('location', sa.String(length=100), nullable=False),
        sa.Column('experience_years', sa.Integer(), nullable=False),
        sa.Column('available_for_work', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('hourly_rate', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint(
            'experience_years >= 0 AND experience_years <= 50',
            name='ck_profiles_experience_years',
        ),
        sa.CheckConstraint(
            'hourly_rate >= 0 AND hourly_rate <= 1000',
            name='ck_profiles_hourly_rate',
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='uq_profiles_email'),
    )
    op.create_index('ix_profiles_created_at', 'profiles', ['created_at'], unique=False)

    op.create_table('profile_skills',
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(['profile_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('profile_id', 'position'),
    )
    op.create_index('ix_profile_skills_name', 'profile_skills', ['name'], unique=False)


def downgrade() -> None:
    """Drop profiles and profile_skills tables."""
    op.drop_index('ix_profile_skills_name', table_name='profile_skills')
    op.drop_table('profile_skills')
    op.drop_index('ix_profiles_created_at', table_name='profiles')
    op.drop_table('profiles')
