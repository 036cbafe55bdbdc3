"""Create exam record and chat log tables

Revision ID: 4f2a9c1d7b3e
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision = '4f2a9c1d7b3e'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    inspector = inspect(op.get_bind())
    tables = inspector.get_table_names()

    if 'exam_records' not in tables:
        op.create_table('exam_records',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('course', sa.String(length=255), nullable=False),
            sa.Column('course_code', sa.String(length=20), nullable=True),
            sa.Column('course_title', sa.String(length=255), nullable=True),
            sa.Column('department', sa.String(length=255), nullable=True),
            sa.Column('university', sa.String(length=255), nullable=True),
            sa.Column('semester', sa.String(length=50), nullable=True),
            sa.Column('year', sa.Integer(), nullable=False),
            sa.Column('exam_session', sa.String(length=50), nullable=True),
            sa.Column('instructions', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('course', 'year', 'exam_session', name='uq_exam_records_course_year_session')
        )
        op.create_index('ix_exam_records_course', 'exam_records', ['course'], unique=False)
        op.create_index('ix_exam_records_year', 'exam_records', ['year'], unique=False)

    if 'exam_questions' not in tables:
        op.create_table('exam_questions',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('record_id', sa.Integer(), nullable=False),
            sa.Column('uid', sa.String(length=36), nullable=False),
            sa.Column('number', sa.String(length=20), nullable=False),
            sa.Column('text', sa.Text(), nullable=False),
            sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
            sa.ForeignKeyConstraint(['record_id'], ['exam_records.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_exam_questions_record_id', 'exam_questions', ['record_id'], unique=False)

    if 'analytics' not in tables:
        op.create_table('analytics',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user', sa.String(length=64), nullable=False),
            sa.Column('channel', sa.String(length=20), nullable=False),
            sa.Column('query', sa.Text(), nullable=False),
            sa.Column('course_code', sa.Text(), nullable=True),
            sa.Column('year', sa.Integer(), nullable=True),
            sa.Column('response_type', sa.String(length=20), nullable=False),
            sa.Column('response', sa.JSON(), nullable=True),
            sa.Column('timestamp', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_analytics_user', 'analytics', ['user'], unique=False)
        op.create_index('ix_analytics_response_type', 'analytics', ['response_type'], unique=False)
        op.create_index('ix_analytics_timestamp', 'analytics', ['timestamp'], unique=False)

    if 'feedback' not in tables:
        op.create_table('feedback',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user', sa.String(length=64), nullable=False),
            sa.Column('channel', sa.String(length=20), nullable=False),
            sa.Column('feedback', sa.Text(), nullable=False),
            sa.Column('timestamp', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_feedback_user', 'feedback', ['user'], unique=False)
        op.create_index('ix_feedback_timestamp', 'feedback', ['timestamp'], unique=False)


def downgrade():
    inspector = inspect(op.get_bind())
    tables = inspector.get_table_names()

    if 'feedback' in tables:
        op.drop_index('ix_feedback_timestamp', table_name='feedback')
        op.drop_index('ix_feedback_user', table_name='feedback')
        op.drop_table('feedback')

    if 'analytics' in tables:
        op.drop_index('ix_analytics_timestamp', table_name='analytics')
        op.drop_index('ix_analytics_response_type', table_name='analytics')
        op.drop_index('ix_analytics_user', table_name='analytics')
        op.drop_table('analytics')

    if 'exam_questions' in tables:
        op.drop_index('ix_exam_questions_record_id', table_name='exam_questions')
        op.drop_table('exam_questions')

    if 'exam_records' in tables:
        op.drop_index('ix_exam_records_year', table_name='exam_records')
        op.drop_index('ix_exam_records_course', table_name='exam_records')
        op.drop_table('exam_records')
