"""
Intent classification for incoming chat queries.

Rules are evaluated in order and the first one that matches decides
the intent: feedback, then past questions, then a general query.
"""
import re
from typing import Callable, NamedTuple, Optional

FEEDBACK = 'feedback'
PAST_QUESTIONS = 'past_questions'
UNRESOLVED = 'unresolved'
GENERAL = 'general'

FEEDBACK_PREFIX = 'feedback:'
PAST_QUESTIONS_PHRASE = 'past questions'

# Department prefixes recognised when no "past questions for ..." phrase is present
DEPARTMENT_CODES = ('CSC', 'MTH', 'PHY', 'CHM', 'BIO', 'STA', 'GES')

COURSE_PHRASE_RE = re.compile(r'past questions for ([\w\s&]+)', re.IGNORECASE)
COURSE_CODE_RE = re.compile(r'(%s)\s*(\d{3})' % '|'.join(DEPARTMENT_CODES), re.IGNORECASE)


class Intent(NamedTuple):
    kind: str
    payload: Optional[str] = None

    @property
    def response_type(self) -> str:
        """Label recorded in analytics."""
        if self.kind in (PAST_QUESTIONS, UNRESOLVED):
            return 'past_questions'
        return 'general'


class Rule(NamedTuple):
    name: str
    matches: Callable[[str, Optional[str]], bool]
    extract: Callable[[str, Optional[str]], Intent]


def extract_course(text: str, course_code: Optional[str] = None) -> Optional[str]:
    """
    Work out which course a past-questions request is about.

    An explicit course code wins, then the text after "past questions for",
    then a department code such as "csc451" (returned as "CSC 451").
    """
    if course_code and course_code.strip():
        return course_code.strip()

    match = COURSE_PHRASE_RE.search(text)
    if match and match.group(1).strip():
        return match.group(1).strip()

    match = COURSE_CODE_RE.search(text)
    if match:
        return f"{match.group(1).upper()} {match.group(2)}"

    return None


def _is_feedback(text, course_code):
    return text.lower().startswith(FEEDBACK_PREFIX)


def _feedback(text, course_code):
    return Intent(FEEDBACK, text[len(FEEDBACK_PREFIX):].strip())


def _is_past_questions(text, course_code):
    return bool(course_code) or PAST_QUESTIONS_PHRASE in text.lower()


def _past_questions(text, course_code):
    course = extract_course(text, course_code)
    if course is None:
        return Intent(UNRESOLVED)
    return Intent(PAST_QUESTIONS, course)


def _always(text, course_code):
    return True


def _general(text, course_code):
    return Intent(GENERAL, text)


RULES = (
    Rule('feedback', _is_feedback, _feedback),
    Rule('past_questions', _is_past_questions, _past_questions),
    Rule('general', _always, _general),
)


def classify(text: str, course_code: Optional[str] = None) -> Intent:
    """Return the intent of ``text``; ``course_code`` forces a past-questions lookup."""
    for rule in RULES:
        if rule.matches(text, course_code):
            return rule.extract(text, course_code)
    return Intent(GENERAL, text)
