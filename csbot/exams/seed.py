"""
``flask seed-exams``: load the bundled exam papers into the database.
"""
import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError
from csbot import db
from csbot.exams.repository import upsert_record
from csbot.exams.seed_data import SEED_RECORDS


def seed_exam_records(records=None) -> int:
    """Upsert every record and commit. Returns the number of records written."""
    records = SEED_RECORDS if records is None else records
    try:
        for data in records:
            record = upsert_record(data)
            current_app.logger.info(
                f"Course {record.course!r} ({record.exam_session}) has been added or updated "
                f"with {len(record.questions)} questions"
            )
        db.session.commit()
    except (SQLAlchemyError, ValueError):
        db.session.rollback()
        raise
    return len(records)


@click.command('seed-exams')
@with_appcontext
def seed_exams_command():
    """Insert or update the sample past exam papers."""
    try:
        count = seed_exam_records()
    except (SQLAlchemyError, ValueError) as e:
        raise click.ClickException(f"Error seeding data: {e}")
    click.echo(f"Seeded {count} exam record(s).")
