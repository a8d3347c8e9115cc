"""Create accounts and organ workflow tables

Revision ID: 3b8f2c6d1a47
Revises:
Create Date: 2025-01-14 09:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '3b8f2c6d1a47'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = postgresql.ENUM('patient', 'donor', 'doctor', 'admin', name='user_role', create_type=False)
blood_type = postgresql.ENUM('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-', name='blood_type', create_type=False)
organ_type = postgresql.ENUM('heart', 'kidney', 'liver', 'lung', 'pancreas', 'cornea', name='organ_type', create_type=False)
request_status = postgresql.ENUM('pending', 'approved', 'rejected', 'matched', 'completed',
                                 name='request_status', create_type=False)
donation_type = postgresql.ENUM('living', 'posthumous', name='donation_type', create_type=False)
priority_level = postgresql.ENUM('low', 'medium', 'high', 'critical', name='priority_level', create_type=False)

ENUM_TYPES = [user_role, blood_type, organ_type, request_status, donation_type, priority_level]


def upgrade() -> None:
    # Enum types are shared between tables, so create them once up front
    for enum_type in ENUM_TYPES:
        enum_type.create(op.get_bind(), checkfirst=True)

    op.create_table(
        'users',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('profile_image_url', sa.String(), nullable=True),
        sa.Column('role', user_role, nullable=True),
        sa.Column('phone_number', sa.Text(), nullable=True),
        sa.Column('date_of_birth', sa.DateTime(timezone=True), nullable=True),
        sa.Column('blood_type', blood_type, nullable=True),
        sa.Column('medical_condition', sa.Text(), nullable=True),
        sa.Column('weight', sa.Integer(), nullable=True),
        sa.Column('height', sa.Integer(), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('city', sa.Text(), nullable=True),
        sa.Column('state', sa.Text(), nullable=True),
        sa.Column('zip_code', sa.Text(), nullable=True),
        sa.Column('emergency_contact', sa.Text(), nullable=True),
        sa.Column('emergency_phone', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    op.create_table(
        'organ_requests',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('patient_id', sa.String(length=64), nullable=False),
        sa.Column('organ_type', organ_type, nullable=False),
        sa.Column('priority', priority_level, nullable=False),
        sa.Column('status', request_status, nullable=True),
        sa.Column('medical_reason', sa.Text(), nullable=False),
        sa.Column('doctor_notes', sa.Text(), nullable=True),
        sa.Column('approved_by', sa.String(length=64), nullable=True),
        sa.Column('rejection_reason', sa.Text(), nullable=True),
        sa.Column('estimated_wait_time', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['patient_id'], ['users.id']),
        sa.ForeignKeyConstraint(['approved_by'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_organ_requests_patient_id'), 'organ_requests', ['patient_id'], unique=False)
    op.create_index(op.f('ix_organ_requests_status'), 'organ_requests', ['status'], unique=False)
    op.create_index(op.f('ix_organ_requests_created_at'), 'organ_requests', ['created_at'], unique=False)

    op.create_table(
        'organ_pledges',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('donor_id', sa.String(length=64), nullable=False),
        sa.Column('organ_type', organ_type, nullable=False),
        sa.Column('donation_type', donation_type, nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=True),
        sa.Column('medical_notes', sa.Text(), nullable=True),
        sa.Column('approved_by', sa.String(length=64), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['donor_id'], ['users.id']),
        sa.ForeignKeyConstraint(['approved_by'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_organ_pledges_donor_id'), 'organ_pledges', ['donor_id'], unique=False)
    op.create_index(op.f('ix_organ_pledges_is_available'), 'organ_pledges', ['is_available'], unique=False)
    op.create_index(op.f('ix_organ_pledges_created_at'), 'organ_pledges', ['created_at'], unique=False)

    op.create_table(
        'organ_matches',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('request_id', sa.String(length=64), nullable=False),
        sa.Column('pledge_id', sa.String(length=64), nullable=False),
        sa.Column('compatibility_score', sa.Integer(), nullable=True),
        sa.Column('doctor_id', sa.String(length=64), nullable=True),
        sa.Column('status', request_status, nullable=True),
        sa.Column('recommended_by', sa.String(length=64), nullable=True),
        sa.Column('approved_by', sa.String(length=64), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['request_id'], ['organ_requests.id']),
        sa.ForeignKeyConstraint(['pledge_id'], ['organ_pledges.id']),
        sa.ForeignKeyConstraint(['doctor_id'], ['users.id']),
        sa.ForeignKeyConstraint(['recommended_by'], ['users.id']),
        sa.ForeignKeyConstraint(['approved_by'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_organ_matches_status'), 'organ_matches', ['status'], unique=False)

    op.create_table(
        'medical_records',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('record_type', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('results', sa.Text(), nullable=True),
        sa.Column('doctor_id', sa.String(length=64), nullable=True),
        sa.Column('attachments', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['doctor_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_medical_records_user_id'), 'medical_records', ['user_id'], unique=False)
    op.create_index(op.f('ix_medical_records_created_at'), 'medical_records', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_medical_records_created_at'), table_name='medical_records')
    op.drop_index(op.f('ix_medical_records_user_id'), table_name='medical_records')
    op.drop_table('medical_records')
    op.drop_index(op.f('ix_organ_matches_status'), table_name='organ_matches')
    op.drop_table('organ_matches')
    op.drop_index(op.f('ix_organ_pledges_created_at'), table_name='organ_pledges')
    op.drop_index(op.f('ix_organ_pledges_is_available'), table_name='organ_pledges')
    op.drop_index(op.f('ix_organ_pledges_donor_id'), table_name='organ_pledges')
    op.drop_table('organ_pledges')
    op.drop_index(op.f('ix_organ_requests_created_at'), table_name='organ_requests')
    op.drop_index(op.f('ix_organ_requests_status'), table_name='organ_requests')
    op.drop_index(op.f('ix_organ_requests_patient_id'), table_name='organ_requests')
    op.drop_table('organ_requests')
    op.drop_index(op.f('ix_users_role'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')

    for enum_type in reversed(ENUM_TYPES):
        enum_type.drop(op.get_bind(), checkfirst=True)
