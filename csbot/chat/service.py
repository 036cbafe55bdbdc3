"""
Chat service: classify a query, run the matching branch and log it.
"""
from typing import Optional, Union
from flask import current_app
from csbot import db
from csbot.chat import classifier, formatters
from csbot.chat.models import AnalyticsEntry, FeedbackEntry
from csbot.exams.aggregator import AggregatedResult, aggregate
from csbot.exams.repository import find_records
from csbot.gateways import LLMGatewayError

MOBILE = 'mobile'
WHATSAPP = 'whatsapp'


class ChatService:
    """
    Handles one request on one channel.

    The gateways are the long-lived clients held by the app; database work
    goes through the request-scoped session.
    """

    def __init__(self, llm, messaging, user: str, channel: str):
        self.llm = llm
        self.messaging = messaging
        self.user = user
        self.channel = channel

    def handle_mobile(self, query: str, course_code: Optional[str] = None, year: Optional[int] = None) -> dict:
        """
        Answer a query from the mobile app.

        Returns:
            JSON body: ``{"response": ...}`` plus ``isPastQuestions`` for lookups
        """
        intent = classifier.classify(query, course_code)
        current_app.logger.info(f"[{self.channel}] intent={intent.kind} payload={intent.payload!r}")

        if intent.kind == classifier.FEEDBACK:
            self._record_feedback(intent.payload)
            body = {'response': formatters.FEEDBACK_THANKS}
        elif intent.kind == classifier.PAST_QUESTIONS:
            result = self.lookup_past_questions(intent.payload)
            body = {'response': formatters.to_structured(result), 'isPastQuestions': True}
        elif intent.kind == classifier.UNRESOLVED:
            body = {'response': formatters.MOBILE_SPECIFY_COURSE}
        else:
            body = {'response': self._ask_llm(query, formatters.MOBILE_LLM_APOLOGY)}

        self._record_analytics(query, intent, body['response'], course_code=course_code, year=year)
        db.session.commit()
        return body

    def handle_whatsapp(self, sender: str, text: str) -> str:
        """
        Answer a WhatsApp message and deliver the reply to ``sender``.

        The analytics row is committed before delivery is attempted.

        Raises:
            MessagingGatewayError: if the reply could not be delivered
        """
        intent = classifier.classify(text)
        current_app.logger.info(f"[{self.channel}] intent={intent.kind} payload={intent.payload!r}")

        if intent.kind == classifier.FEEDBACK:
            self._record_feedback(intent.payload)
            reply = formatters.FEEDBACK_THANKS
        elif intent.kind == classifier.PAST_QUESTIONS:
            reply = formatters.to_text(self.lookup_past_questions(intent.payload))
        elif intent.kind == classifier.UNRESOLVED:
            reply = formatters.WHATSAPP_SPECIFY_COURSE
        else:
            reply = self._ask_llm(
                text,
                formatters.WHATSAPP_LLM_APOLOGY,
                model_unavailable_reply=formatters.WHATSAPP_MODEL_UNAVAILABLE,
            )

        self._record_analytics(text, intent, reply)
        db.session.commit()

        self.messaging.send_text(sender, reply)
        return reply

    @staticmethod
    def lookup_past_questions(course: str) -> AggregatedResult:
        records = find_records(course)
        result = aggregate(course, records)
        current_app.logger.info(
            f"Past questions for {result.course}: {result.total_questions} question(s) "
            f"from {result.years_found} record(s)"
        )
        return result

    def _ask_llm(self, question: str, apology: str, model_unavailable_reply: Optional[str] = None) -> str:
        try:
            return self.llm.complete(question)
        except LLMGatewayError as e:
            current_app.logger.error(f"LLM gateway failure: {e}", exc_info=True)
            if e.model_unavailable and model_unavailable_reply:
                return model_unavailable_reply
            return apology

    def _record_feedback(self, text: str) -> None:
        db.session.add(FeedbackEntry(user=self.user, channel=self.channel, feedback=text))

    def _record_analytics(self, query: str, intent, response: Union[str, dict],
                          course_code: Optional[str] = None, year: Optional[int] = None) -> None:
        db.session.add(AnalyticsEntry(
            user=self.user,
            channel=self.channel,
            query_text=query,
            course_code=course_code or None,
            year=year,
            response_type=intent.response_type,
            response=response,
        ))
