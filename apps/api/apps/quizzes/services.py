"""
Quiz submission service.
"""
import uuid
from typing import Iterable

from django.db import transaction
from django.db.models import Max

from apps.clinical.models import Patient
from apps.core.observability.events import log_domain_event
from apps.quizzes.models import Option, Quiz, QuizResult


class QuizSubmissionError(Exception):
    """Exception raised when a quiz submission fails validation."""
    pass


def _reject(quiz: Quiz, patient: Patient, reason: str, message: str):
    log_domain_event(
        'quiz_submitted',
        entity_type='QuizResult',
        entity_ids={'quiz_id': str(quiz.id), 'patient_id': str(patient.id)},
        result='blocked',
        reason=reason,
    )
    raise QuizSubmissionError(message)


def max_score_for(quiz: Quiz) -> int:
    """Sum over questions of the best option score. Questions without options count 0."""
    best_per_question = (
        quiz.questions
        .annotate(best=Max('options__score'))
        .values_list('best', flat=True)
    )
    return sum(best or 0 for best in best_per_question)


def submit_quiz(patient: Patient, quiz: Quiz, option_ids: Iterable) -> QuizResult:
    """
    Record a patient's answers to a quiz.

    Args:
        patient: Patient taking the quiz
        quiz: Quiz being answered
        option_ids: Chosen option ids, at most one per question

    Returns:
        The stored QuizResult

    Raises:
        QuizSubmissionError: If an option is unknown, belongs to another
            quiz, or two options answer the same question
    """
    try:
        option_ids = [uuid.UUID(str(option_id)) for option_id in option_ids]
    except ValueError:
        _reject(quiz, patient, 'invalid_option_id', 'Option ids must be UUIDs')

    if len(set(option_ids)) != len(option_ids):
        _reject(quiz, patient, 'duplicate_option', 'An option was chosen more than once')

    options = {
        option.id: option
        for option in Option.objects.filter(id__in=option_ids, question__quiz=quiz)
    }
    if len(options) != len(option_ids):
        _reject(quiz, patient, 'foreign_option', 'Every option must belong to a question of this quiz')

    answered = [option.question_id for option in options.values()]
    if len(set(answered)) != len(answered):
        _reject(quiz, patient, 'question_answered_twice', 'A question can only be answered once')

    with transaction.atomic():
        # answers keep the order they were submitted in
        result = QuizResult.objects.create(
            patient=patient,
            quiz=quiz,
            score=sum(option.score for option in options.values()),
            max_score=max_score_for(quiz),
            answers=[str(option_id) for option_id in option_ids],
        )

    log_domain_event(
        'quiz_submitted',
        entity_type='QuizResult',
        entity_id=str(result.id),
        entity_ids={'quiz_id': str(quiz.id), 'patient_id': str(patient.id)},
        score=result.score,
        max_score=result.max_score,
    )
    return result
