"""Initial schema - Jurídico

Revision ID: 0000_initial
Revises: 
Create Date: 2026-10-19

Tables:
- users (accounts with role and JSON permission map)
- employees (soft delete via status)
- cases (legal matters; completion stamps live on the row)
- activity_log (append-only audit trail)
- dashboard_layouts (per-user widget layout)
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID, JSON

revision = '0000_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('username', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(255), nullable=True),
        sa.Column('last_name', sa.String(255), nullable=True),
        sa.Column('profile_image_url', sa.String(500), nullable=True),
        sa.Column('role', sa.String(50), server_default='viewer', nullable=False),
        sa.Column('permissions', JSON(), server_default='{}', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
        sa.UniqueConstraint('email')
    )
    op.create_index('ix_users_username', 'users', ['username'])

    op.create_table(
        'employees',
        sa.Column('id', UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('empresa', sa.String(10), nullable=True),
        sa.Column('nome', sa.String(255), nullable=False),
        sa.Column('matricula', sa.String(50), nullable=False),
        sa.Column('rg', sa.String(20), nullable=True),
        sa.Column('pis', sa.String(20), nullable=True),
        sa.Column('data_admissao', sa.Date(), nullable=True),
        sa.Column('data_demissao', sa.Date(), nullable=True),
        sa.Column('salario', sa.Numeric(10, 2), nullable=True),
        sa.Column('cargo', sa.String(255), nullable=True),
        sa.Column('centro_custo', sa.String(255), nullable=True),
        sa.Column('departamento', sa.String(255), nullable=True),
        sa.Column('status', sa.String(20), server_default='ativo', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('matricula')
    )
    op.create_index('ix_employees_matricula', 'employees', ['matricula'])
    op.create_index('idx_employees_status_nome', 'employees', ['status', 'nome'])

    op.create_table(
        'cases',
        sa.Column('id', UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('client_name', sa.String(255), nullable=False),
        sa.Column('process_number', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('status', sa.String(50), server_default='novo', nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('due_date', sa.Date(), nullable=True),
        sa.Column('data_audiencia', sa.DateTime(timezone=True), nullable=True),
        sa.Column('completed_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('data_entrega', sa.DateTime(timezone=True), nullable=True),
        sa.Column('matricula', sa.String(50), nullable=True),
        sa.Column('tipo_processo', sa.String(255), nullable=True),
        sa.Column('documentos_solicitados', JSON(), nullable=True),
        sa.Column('observacoes', sa.Text(), nullable=True),
        sa.Column('employee_id', UUID(as_uuid=True), nullable=True),
        sa.Column('assigned_to_id', UUID(as_uuid=True), nullable=True),
        sa.Column('created_by_id', UUID(as_uuid=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['employee_id'], ['employees.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['assigned_to_id'], ['users.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['created_by_id'], ['users.id'], ondelete='SET NULL')
    )
    op.create_index('ix_cases_process_number', 'cases', ['process_number'])
    op.create_index('idx_cases_status', 'cases', ['status'])
    op.create_index('idx_cases_due_date', 'cases', ['due_date'])

    op.create_table(
        'activity_log',
        sa.Column('id', UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('user_id', UUID(as_uuid=True), nullable=True),
        sa.Column('action', sa.String(100), nullable=False),
        sa.Column('resource_type', sa.String(50), nullable=False),
        sa.Column('resource_id', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('metadata', JSON(), nullable=True),
        sa.Column('ip_address', sa.String(45), nullable=True),
        sa.Column('user_agent', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='SET NULL')
    )
    op.create_index('ix_activity_log_user_id', 'activity_log', ['user_id'])
    op.create_index('idx_activity_log_created', 'activity_log', ['created_at'])
    op.create_index('idx_activity_log_action', 'activity_log', ['action'])

    op.create_table(
        'dashboard_layouts',
        sa.Column('id', UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('user_id', UUID(as_uuid=True), nullable=False),
        sa.Column('layout', JSON(), server_default='{}', nullable=False),
        sa.Column('widgets', JSON(), server_default='[]', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('user_id')
    )
    op.create_index('ix_dashboard_layouts_user_id', 'dashboard_layouts', ['user_id'])


def downgrade():
    op.drop_table('dashboard_layouts')
    op.drop_table('activity_log')
    op.drop_table('cases')
    op.drop_table('employees')
    op.drop_table('users')
