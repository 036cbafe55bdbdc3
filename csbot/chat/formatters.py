"""
Presentation of chat replies for the mobile app (JSON) and WhatsApp (text).
"""
from csbot.exams.aggregator import AggregatedResult, no_results_message

FEEDBACK_THANKS = 'Thank you for your feedback!'

MOBILE_SPECIFY_COURSE = 'Please specify a course (e.g., "past questions for Computer Networks" or "CSC 101").'
WHATSAPP_SPECIFY_COURSE = 'Please specify a course (e.g., "past questions for Computer Networks").'

MOBILE_LLM_APOLOGY = 'Sorry, an error occurred with the AI service. Please try again.'
WHATSAPP_LLM_APOLOGY = 'Sorry, there was an issue with the AI service.'
WHATSAPP_MODEL_UNAVAILABLE = 'Model temporarily unavailable. Try again later.'


def to_structured(result: AggregatedResult) -> dict:
    """JSON view used by the mobile app."""
    if result.is_empty:
        body = {
            'course': result.course,
            'questions': [],
            'message': result.message or no_results_message(result.course),
            'yearsFound': result.years_found,
            'totalQuestions': result.total_questions,
        }
        if result.raw_course_data:
            body['rawCourseData'] = list(result.raw_course_data)
        return body
    return {
        'course': result.course,
        'questions': [dict(q) for q in result.questions],
        'yearsFound': result.years_found,
        'totalQuestions': result.total_questions,
        'rawCourseData': list(result.raw_course_data),
    }


def to_text(result: AggregatedResult) -> str:
    """Single message body for WhatsApp."""
    if result.is_empty:
        return result.message or no_results_message(result.course)

    questions_text = '\n'.join(f"{q['number']}. {q['text']}" for q in result.questions)
    return (
        f"📘 Past Questions for {result.course}:\n\n"
        f"{questions_text}\n\n"
        f"✅ Total Questions: {result.total_questions} from {result.years_found} year(s)"
    )
