"""
Lookup and upsert of exam records.
"""
from typing import List
from uuid import uuid4
from flask import current_app
from csbot import db
from csbot.exams.models import ExamRecord, ExamQuestion

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so ``text`` only matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def find_records(course_query: str) -> List[ExamRecord]:
    """
    Find every exam record whose course name contains ``course_query``,
    ignoring case. Newest year first; an empty list when nothing matches.
    """
    pattern = f"%{escape_like(course_query)}%"
    records = (
        ExamRecord.query
        .filter(ExamRecord.course.ilike(pattern, escape=LIKE_ESCAPE))
        .order_by(ExamRecord.year.desc(), ExamRecord.id.asc())
        .all()
    )
    current_app.logger.info(f"Found {len(records)} exam record(s) for course query {course_query!r}")
    return records


def upsert_record(data: dict) -> ExamRecord:
    """
    Insert or replace the record keyed by course, year and exam session.

    Questions are replaced wholesale and keep the order given. The caller
    commits the session.

    Raises:
        ValueError: when required fields are missing or there are no questions
    """
    course = (data.get('course') or '').strip()
    year = data.get('year')
    questions = data.get('questions') or []
    if not course or year is None:
        raise ValueError("course and year are required")
    if not questions:
        raise ValueError("Questions array cannot be empty")
    for q in questions:
        if not q.get('number') or not q.get('text'):
            raise ValueError(f"Question is missing a number or text: {q!r}")

    record = ExamRecord.query.filter_by(
        course=course,
        year=int(year),
        exam_session=data.get('exam_session'),
    ).first()
    if record is None:
        record = ExamRecord(course=course, year=int(year), exam_session=data.get('exam_session'))
        db.session.add(record)

    for field in ('course_code', 'course_title', 'department', 'university', 'semester', 'instructions'):
        if field in data:
            setattr(record, field, data[field])

    record.questions = [
        ExamQuestion(
            uid=q.get('id') or str(uuid4()),
            number=str(q['number']),
            text=q['text'],
            position=position,
        )
        for position, q in enumerate(questions)
    ]
    db.session.flush()
    return record
