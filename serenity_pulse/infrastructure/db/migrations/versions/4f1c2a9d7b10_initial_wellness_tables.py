"""initial_wellness_tables

Revision ID: 4f1c2a9d7b10
Revises:
Create Date: 2025-08-04 10:12:31.518203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid, primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'profiles',
        sa.Column('id', sa.Uuid, primary_key=True),
        sa.Column('user_id', sa.Uuid, sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('display_name', sa.String(100), nullable=True),
        sa.Column('age', sa.Integer, nullable=True),
        sa.Column('gender', sa.String(50), nullable=True),
        sa.Column('onboarding_completed', sa.Boolean, server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_profiles_user_id', 'profiles', ['user_id'], unique=True)

    op.create_table(
        'user_roles',
        sa.Column('id', sa.Uuid, primary_key=True),
        sa.Column('user_id', sa.Uuid, sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('role', sa.String(20), server_default='user', nullable=False),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('user_id', 'role', name='uq_user_roles_user_id_role'),
    )
    op.create_index('ix_user_roles_user_id', 'user_roles', ['user_id'])

    # One check-in per user per calendar date; saves are upserts
    op.create_table(
        'checkins',
        sa.Column('id', sa.Uuid, primary_key=True),
        sa.Column('user_id', sa.Uuid, sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('entry_date', sa.Date, nullable=False),
        sa.Column('mood_score', sa.Integer, nullable=False),
        sa.Column('stress_level', sa.Integer, nullable=False),
        sa.Column('journal_text', sa.Text, nullable=True),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('user_id', 'entry_date', name='uq_checkins_user_id_entry_date'),
    )
    op.create_index('ix_checkins_user_id', 'checkins', ['user_id'])
    op.create_index('ix_checkins_entry_date', 'checkins', ['entry_date'])

    op.create_table(
        'daily_goal_sets',
        sa.Column('id', sa.Uuid, primary_key=True),
        sa.Column('user_id', sa.Uuid, sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('goal_date', sa.Date, nullable=False),
        sa.Column('goal_1', sa.String(200), nullable=True),
        sa.Column('goal_2', sa.String(200), nullable=True),
        sa.Column('goal_3', sa.String(200), nullable=True),
        sa.Column('goal_1_status', sa.String(20), server_default='pending', nullable=False),
        sa.Column('goal_2_status', sa.String(20), server_default='pending', nullable=False),
        sa.Column('goal_3_status', sa.String(20), server_default='pending', nullable=False),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('user_id', 'goal_date', name='uq_daily_goal_sets_user_id_goal_date'),
    )
    op.create_index('ix_daily_goal_sets_user_id', 'daily_goal_sets', ['user_id'])
    op.create_index('ix_daily_goal_sets_goal_date', 'daily_goal_sets', ['goal_date'])


def downgrade() -> None:
    op.drop_index('ix_daily_goal_sets_goal_date', table_name='daily_goal_sets')
    op.drop_index('ix_daily_goal_sets_user_id', table_name='daily_goal_sets')
    op.drop_table('daily_goal_sets')
    op.drop_index('ix_checkins_entry_date', table_name='checkins')
    op.drop_index('ix_checkins_user_id', table_name='checkins')
    op.drop_table('checkins')
    op.drop_index('ix_user_roles_user_id', table_name='user_roles')
    op.drop_table('user_roles')
    op.drop_index('ix_profiles_user_id', table_name='profiles')
    op.drop_table('profiles')
    op.drop_table('users')
