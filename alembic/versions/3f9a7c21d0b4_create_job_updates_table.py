"""Create job_updates table

Revision ID: 3f9a7c21d0b4
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9a7c21d0b4'
down_revision = None
branch_labels = None
depends_on = None

update_category = sa.Enum('LATEST_JOB', 'ADMIT_CARD', 'ANSWER_KEY', 'RESULT', name='updatecategory')


def upgrade():
    op.create_table(
        'job_updates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('category', update_category, nullable=False),
        sa.Column('organization', sa.String(length=255), nullable=True),
        sa.Column('post_name', sa.String(length=255), nullable=True),
        sa.Column('qualification', sa.String(length=255), nullable=True),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('total_vacancies', sa.Integer(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('last_date', sa.Date(), nullable=True),
        sa.Column('official_link', sa.String(length=500), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_index(op.f('ix_job_updates_id'), 'job_updates', ['id'], unique=False)
    op.create_index(op.f('ix_job_updates_title'), 'job_updates', ['title'], unique=False)
    op.create_index(op.f('ix_job_updates_category'), 'job_updates', ['category'], unique=False)
    op.create_index(op.f('ix_job_updates_organization'), 'job_updates', ['organization'], unique=False)
    op.create_index(op.f('ix_job_updates_deleted_at'), 'job_updates', ['deleted_at'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_job_updates_deleted_at'), table_name='job_updates')
    op.drop_index(op.f('ix_job_updates_organization'), table_name='job_updates')
    op.drop_index(op.f('ix_job_updates_category'), table_name='job_updates')
    op.drop_index(op.f('ix_job_updates_title'), table_name='job_updates')
    op.drop_index(op.f('ix_job_updates_id'), table_name='job_updates')
    op.drop_table('job_updates')
    update_category.drop(op.get_bind(), checkfirst=True)
