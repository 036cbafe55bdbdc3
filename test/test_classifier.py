"""
Test cases for query intent classification.
"""
import pytest
from csbot.chat.classifier import (
    FEEDBACK, GENERAL, PAST_QUESTIONS, UNRESOLVED, RULES, classify, extract_course,
)


class TestFeedback:
    """Feedback prefix handling."""

    def test_feedback_payload_is_trimmed(self):
        intent = classify('feedback:   great app!  ')
        assert intent.kind == FEEDBACK
        assert intent.payload == 'great app!'

    def test_feedback_prefix_is_case_insensitive(self):
        assert classify('FeedBack: nice').kind == FEEDBACK

    def test_feedback_wins_over_past_questions(self):
        intent = classify('feedback: past questions for CSC 451 are great')
        assert intent.kind == FEEDBACK
        assert intent.payload == 'past questions for CSC 451 are great'

    def test_feedback_wins_over_course_code(self):
        assert classify('feedback: thanks', course_code='CSC 451').kind == FEEDBACK

    def test_feedback_must_be_a_prefix(self):
        assert classify('my feedback: nice').kind == GENERAL


class TestPastQuestions:
    """Course resolution for past-question requests."""

    def test_course_from_phrase(self):
        intent = classify('past questions for CSC 451')
        assert intent.kind == PAST_QUESTIONS
        assert intent.payload == 'CSC 451'

    def test_phrase_stops_at_punctuation(self):
        assert classify('Past Questions for Computer Networks?').payload == 'Computer Networks'

    def test_phrase_keeps_ampersand(self):
        assert classify('past questions for Networks & Communications').payload == 'Networks & Communications'

    def test_explicit_course_code_wins(self):
        intent = classify('past questions for MTH 101', course_code='CSC 451')
        assert intent == (PAST_QUESTIONS, 'CSC 451')

    def test_course_code_alone_triggers_lookup(self):
        intent = classify('show me everything', course_code=' CSC 999 ')
        assert intent == (PAST_QUESTIONS, 'CSC 999')

    def test_department_code_fallback(self):
        intent = classify('I need past questions, csc451 please')
        assert intent == (PAST_QUESTIONS, 'CSC 451')

    def test_department_code_fallback_with_space(self):
        assert classify('past questions: STA 202').payload == 'STA 202'

    def test_unknown_department_is_unresolved(self):
        intent = classify('past questions please, ENG 101')
        assert intent.kind == UNRESOLVED
        assert intent.payload is None

    def test_department_code_alone_is_a_general_query(self):
        # Without the phrase or an explicit course code there is no lookup
        assert classify('CSC 451').kind == GENERAL


class TestGeneral:
    """Fallthrough to the LLM."""

    def test_general_payload_is_unchanged_text(self):
        intent = classify('  Who is the HOD?  ')
        assert intent == (GENERAL, '  Who is the HOD?  ')

    @pytest.mark.parametrize('kind, expected', [
        (FEEDBACK, 'general'),
        (GENERAL, 'general'),
        (PAST_QUESTIONS, 'past_questions'),
        (UNRESOLVED, 'past_questions'),
    ])
    def test_response_type(self, kind, expected):
        from csbot.chat.classifier import Intent
        assert Intent(kind).response_type == expected


def test_rule_order():
    assert [rule.name for rule in RULES] == ['feedback', 'past_questions', 'general']


def test_extract_course_returns_none_without_a_course():
    assert extract_course('past questions') is None
