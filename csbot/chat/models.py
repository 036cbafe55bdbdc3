"""
Append-only logs written by the chat endpoints.
"""
from datetime import datetime
from csbot import db


class AnalyticsEntry(db.Model):
    """One row per answered query."""
    __tablename__ = "analytics"

    id = db.Column(db.Integer, primary_key=True)
    user = db.Column(db.String(64), nullable=False, index=True)
    channel = db.Column(db.String(20), nullable=False)  # 'mobile' or 'whatsapp'
    query_text = db.Column('query', db.Text, nullable=False)
    course_code = db.Column(db.Text, nullable=True)
    year = db.Column(db.Integer, nullable=True)
    response_type = db.Column(db.String(20), nullable=False, index=True)  # 'past_questions' or 'general'
    response = db.Column(db.JSON, nullable=True)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<AnalyticsEntry {self.id} {self.response_type} from {self.user}>"


class FeedbackEntry(db.Model):
    """Free-text feedback sent with the ``feedback:`` prefix."""
    __tablename__ = "feedback"

    id = db.Column(db.Integer, primary_key=True)
    user = db.Column(db.String(64), nullable=False, index=True)
    channel = db.Column(db.String(20), nullable=False)
    feedback = db.Column(db.Text, nullable=False)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<FeedbackEntry {self.id} from {self.user}>"
