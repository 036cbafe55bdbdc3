"""
Merge matched exam records into a single ordered list of questions.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import List, Optional, Sequence


@dataclass
class AggregatedResult:
    """Questions for one course query, drawn from every matching record."""
    course: str
    questions: List[dict] = field(default_factory=list)
    years_found: int = 0
    total_questions: int = 0
    message: Optional[str] = None
    raw_course_data: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.questions


def no_results_message(course_query: str) -> str:
    return f"No past questions found for {course_query}."


def _get(item, name):
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _clean(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def aggregate(course_query: str, records: Sequence) -> AggregatedResult:
    """
    Flatten the questions of ``records`` (already ordered newest year first).

    Each record counts as one year found. Questions missing a number or
    text are dropped.
    """
    if not records:
        return AggregatedResult(
            course=course_query.upper(),
            message=no_results_message(course_query),
        )

    first_course = _clean(_get(records[0], 'course'))
    course_title = first_course.upper() if first_course else course_query.upper()

    questions = []
    for record in records:
        for question in _get(record, 'questions') or []:
            number = _clean(_get(question, 'number'))
            text = _clean(_get(question, 'text'))
            if not number or not text:
                continue
            questions.append({'number': number, 'text': text})

    return AggregatedResult(
        course=course_title,
        questions=questions,
        years_found=len(records),
        total_questions=len(questions),
        message=None if questions else no_results_message(course_query),
        raw_course_data=[_get(record, 'course') for record in records],
    )
