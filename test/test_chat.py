"""
Test cases for the mobile chat endpoint.
"""
from unittest.mock import Mock
from csbot import db
from csbot.chat.models import AnalyticsEntry, FeedbackEntry
from csbot.gateways import LLMGatewayError


def _analytics(app):
    with app.app_context():
        return [
            (e.user, e.channel, e.query_text, e.response_type, e.course_code, e.year)
            for e in AnalyticsEntry.query.order_by(AnalyticsEntry.id).all()
        ]


class TestPastQuestions:

    def test_past_questions_for_seeded_course(self, client, seeded):
        response = client.post('/api/chat', json={'query': 'past questions for CSC 451'})
        assert response.status_code == 200
        data = response.get_json()
        assert data['isPastQuestions'] is True
        result = data['response']
        assert result['course'] == 'CSC 451: COMPUTER NETWORKS AND COMMUNICATIONS'
        assert result['totalQuestions'] == 6
        assert result['yearsFound'] == 1
        assert [q['number'] for q in result['questions']] == ['1', '2', '3', '4', '5', '6']
        assert result['rawCourseData'] == ['CSC 451: Computer Networks and Communications']
        assert _analytics(seeded) == [
            ('flutter_user', 'mobile', 'past questions for CSC 451', 'past_questions', None, None),
        ]

    def test_unknown_course(self, client, seeded):
        response = client.post('/api/chat', json={'query': 'show me', 'courseCode': 'CSC 999', 'year': 2024})
        assert response.status_code == 200
        assert response.get_json()['response'] == {
            'course': 'CSC 999',
            'questions': [],
            'message': 'No past questions found for CSC 999.',
            'yearsFound': 0,
            'totalQuestions': 0,
        }
        assert _analytics(seeded) == [
            ('flutter_user', 'mobile', 'show me', 'past_questions', 'CSC 999', 2024),
        ]

    def test_unresolved_course_prompts_user(self, client, llm):
        response = client.post('/api/chat', json={'query': 'any past questions?'})
        assert response.status_code == 200
        data = response.get_json()
        assert data['response'].startswith('Please specify a course')
        assert 'isPastQuestions' not in data
        llm.complete.assert_not_called()


    def test_long_course_code_is_stored_whole(self, client, seeded):
        course_code = 'CSC 451 ' + 'x' * 80
        response = client.post('/api/chat', json={'query': 'x', 'courseCode': course_code})
        assert response.status_code == 200
        assert response.get_json()['response']['message'] == f'No past questions found for {course_code}.'
        assert _analytics(seeded) == [
            ('flutter_user', 'mobile', 'x', 'past_questions', course_code, None),
        ]


class TestFeedback:

    def test_feedback_is_stored(self, app, client, monkeypatch):
        lookup = Mock()
        monkeypatch.setattr('csbot.chat.service.find_records', lookup)

        response = client.post('/api/chat', json={'query': 'feedback: great app!'})

        assert response.status_code == 200
        assert response.get_json() == {'response': 'Thank you for your feedback!'}
        lookup.assert_not_called()
        with app.app_context():
            entries = FeedbackEntry.query.all()
            assert [(e.user, e.channel, e.feedback) for e in entries] == [('flutter_user', 'mobile', 'great app!')]
            assert entries[0].timestamp is not None
        assert [row[3] for row in _analytics(app)] == ['general']


class TestGeneralQuery:

    def test_llm_answer(self, app, client, llm):
        response = client.post('/api/chat', json={'query': 'Where is the CS department?'})
        assert response.status_code == 200
        assert response.get_json() == {'response': 'The CS department is in Block C.'}
        llm.complete.assert_called_once_with('Where is the CS department?')
        with app.app_context():
            assert AnalyticsEntry.query.one().response == 'The CS department is in Block C.'

    def test_llm_failure_returns_apology(self, app, client, llm):
        llm.complete.side_effect = LLMGatewayError('rate limited')
        response = client.post('/api/chat', json={'query': 'Who is the HOD?'})
        assert response.status_code == 200
        assert response.get_json() == {'response': 'Sorry, an error occurred with the AI service. Please try again.'}
        assert _analytics(app) == [('flutter_user', 'mobile', 'Who is the HOD?', 'general', None, None)]

    def test_mobile_ignores_model_unavailable_detail(self, client, llm):
        llm.complete.side_effect = LLMGatewayError('model_not_found', model_unavailable=True)
        response = client.post('/api/chat', json={'query': 'Who is the HOD?'})
        assert response.get_json()['response'] == 'Sorry, an error occurred with the AI service. Please try again.'


class TestErrors:

    def test_missing_query(self, app, client):
        response = client.post('/api/chat', json={'courseCode': 'CSC 451'})
        assert response.status_code == 400
        assert response.get_json() == {'error': 'query is required'}
        assert _analytics(app) == []

    def test_non_json_body(self, client):
        response = client.post('/api/chat', data='query=hi', content_type='application/x-www-form-urlencoded')
        assert response.status_code == 400

    def test_bad_year(self, client):
        response = client.post('/api/chat', json={'query': 'hi', 'year': 'last year'})
        assert response.status_code == 400

    def test_unexpected_failure_is_a_server_error(self, app, client, llm):
        llm.complete.side_effect = RuntimeError('boom')
        response = client.post('/api/chat', json={'query': 'Who is the HOD?'})
        assert response.status_code == 500
        assert response.get_json() == {'error': 'Internal server error'}
        assert _analytics(app) == []

    def test_unknown_api_route_returns_json(self, client):
        response = client.get('/api/nothing-here')
        assert response.status_code == 404
        assert 'error' in response.get_json()

    def test_health(self, client):
        response = client.get('/health')
        assert response.status_code == 200
        assert response.get_json() == {'status': 'ok'}

    def test_security_headers(self, client):
        response = client.get('/health')
        assert response.headers['X-Content-Type-Options'] == 'nosniff'
        assert response.headers['X-Frame-Options'] == 'DENY'
