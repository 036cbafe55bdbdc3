"""
Test cases for merging exam records into one answer.
"""
from types import SimpleNamespace
import pytest
from csbot.exams.aggregator import aggregate


def record(course, year, questions):
    return SimpleNamespace(course=course, year=year, questions=questions)


def question(number, text):
    return SimpleNamespace(number=number, text=text)


@pytest.fixture
def records():
    # Already ordered newest year first, as the repository returns them
    return [
        record('  CSC 451: Computer Networks  ', 2024, [question('1', ' Define a protocol. '), question('2a', 'What is TCP?')]),
        record('CSC 451: Computer Networks', 2023, [question(3, 'Explain routing.'), question(None, 'orphan text')]),
        record('csc 451 (resit)', 2022, [{'number': '1', 'text': 'What is UDP?'}, {'number': '2', 'text': ''}]),
    ]


class TestAggregate:

    def test_empty_result(self):
        result = aggregate('CSC 999', [])
        assert result.course == 'CSC 999'
        assert result.questions == []
        assert result.years_found == 0
        assert result.total_questions == 0
        assert result.message == 'No past questions found for CSC 999.'

    def test_title_comes_from_first_record(self, records):
        assert aggregate('csc 451', records).course == 'CSC 451: COMPUTER NETWORKS'

    def test_questions_flattened_in_order(self, records):
        result = aggregate('csc 451', records)
        assert result.questions == [
            {'number': '1', 'text': 'Define a protocol.'},
            {'number': '2a', 'text': 'What is TCP?'},
            {'number': '3', 'text': 'Explain routing.'},
            {'number': '1', 'text': 'What is UDP?'},
        ]

    def test_counts(self, records):
        result = aggregate('csc 451', records)
        assert result.years_found == 3
        assert result.total_questions == 4
        assert result.message is None

    def test_total_matches_well_formed_entries(self, records):
        well_formed = sum(
            1 for r in records for q in r.questions
            if (q.get('number') if isinstance(q, dict) else q.number)
            and (q.get('text') if isinstance(q, dict) else q.text)
        )
        assert aggregate('csc', records).total_questions == well_formed

    def test_raw_course_data(self, records):
        assert aggregate('csc', records).raw_course_data == [r.course for r in records]

    def test_idempotent(self, records):
        assert aggregate('csc 451', records) == aggregate('csc 451', records)

    def test_record_without_questions(self):
        result = aggregate('mth', [record('MTH 101', 2020, [])])
        assert result.course == 'MTH 101'
        assert result.years_found == 1
        assert result.total_questions == 0
        assert result.message == 'No past questions found for mth.'
        assert result.raw_course_data == ['MTH 101']

    def test_blank_course_falls_back_to_query(self):
        result = aggregate('mth 101', [record('', 2020, [question('1', 'x')])])
        assert result.course == 'MTH 101'
