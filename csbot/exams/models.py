"""
Database models for stored past exam papers.
"""
from datetime import datetime
from uuid import uuid4
from csbot import db


class ExamRecord(db.Model):
    """One exam paper for a course in a given year and exam session."""
    __tablename__ = "exam_records"

    id = db.Column(db.Integer, primary_key=True)
    course = db.Column(db.String(255), nullable=False, index=True)
    course_code = db.Column(db.String(20), nullable=True)
    course_title = db.Column(db.String(255), nullable=True)
    department = db.Column(db.String(255), nullable=True)
    university = db.Column(db.String(255), nullable=True)
    semester = db.Column(db.String(50), nullable=True)
    year = db.Column(db.Integer, nullable=False, index=True)
    exam_session = db.Column(db.String(50), nullable=True)
    instructions = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    questions = db.relationship(
        "ExamQuestion",
        back_populates="record",
        cascade="all, delete-orphan",
        order_by="ExamQuestion.position",
    )

    __table_args__ = (
        db.UniqueConstraint('course', 'year', 'exam_session', name='uq_exam_records_course_year_session'),
    )

    def __repr__(self) -> str:
        return f"<ExamRecord {self.course} {self.year} {self.exam_session}>"

    def to_dict(self):
        """Convert record to dictionary."""
        return {
            'id': self.id,
            'course': self.course,
            'courseCode': self.course_code,
            'courseTitle': self.course_title,
            'semester': self.semester,
            'year': self.year,
            'examSession': self.exam_session,
            'questions': [q.to_dict() for q in self.questions],
        }


class ExamQuestion(db.Model):
    """A single numbered question on an exam paper."""
    __tablename__ = "exam_questions"

    id = db.Column(db.Integer, primary_key=True)
    record_id = db.Column(db.Integer, db.ForeignKey("exam_records.id", ondelete='CASCADE'), nullable=False, index=True)
    # Opaque identifier, unique within a record only
    uid = db.Column(db.String(36), nullable=False, default=lambda: str(uuid4()))
    number = db.Column(db.String(20), nullable=False)
    text = db.Column(db.Text, nullable=False)
    position = db.Column(db.Integer, nullable=False, default=0)

    record = db.relationship("ExamRecord", back_populates="questions")

    def __repr__(self) -> str:
        return f"<ExamQuestion {self.number} of record {self.record_id}>"

    def to_dict(self):
        return {
            'id': self.uid,
            'number': self.number,
            'text': self.text,
        }
