"""
Tests for quiz scoring and submission.

Fixture quiz: "How did you sleep?" (0/1/3) and "How is your energy?" (0/2).
"""
import uuid

import pytest

from apps.quizzes.models import Option, Question, Quiz, QuizResult
from apps.quizzes.services import QuizSubmissionError, max_score_for, submit_quiz

pytestmark = pytest.mark.django_db


def _option(quiz, question_position, text):
    return Option.objects.get(question__quiz=quiz, question__position=question_position, text=text)


class TestMaxScore:

    def test_sum_of_best_options(self, quiz):
        assert max_score_for(quiz) == 5

    def test_question_without_options_counts_zero(self, quiz):
        Question.objects.create(quiz=quiz, text='Anything else?', position=3)

        assert max_score_for(quiz) == 5

    def test_empty_quiz(self, doctor):
        empty = Quiz.objects.create(doctor=doctor, title='Empty')

        assert max_score_for(empty) == 0


class TestSubmitQuiz:

    def test_scores_chosen_options(self, quiz, patient):
        chosen = [_option(quiz, 1, 'Fine'), _option(quiz, 2, 'High')]

        result = submit_quiz(patient, quiz, [o.id for o in chosen])

        assert result.score == 3
        assert result.max_score == 5
        assert result.answers == [str(o.id) for o in chosen]
        assert list(patient.quiz_results.all()) == [result]

    def test_accepts_string_ids(self, quiz, patient):
        well = _option(quiz, 1, 'Well')

        result = submit_quiz(patient, quiz, [str(well.id)])

        assert result.score == 3

    def test_partial_answers_allowed(self, quiz, patient):
        result = submit_quiz(patient, quiz, [])

        assert result.score == 0
        assert result.answers == []

    def test_repeat_attempts_kept(self, quiz, patient):
        submit_quiz(patient, quiz, [_option(quiz, 1, 'Badly').id])
        submit_quiz(patient, quiz, [_option(quiz, 1, 'Well').id])

        assert sorted(QuizResult.objects.values_list('score', flat=True)) == [0, 3]

    def test_invalid_id_rejected(self, quiz, patient):
        with pytest.raises(QuizSubmissionError, match='must be UUIDs'):
            submit_quiz(patient, quiz, ['not-a-uuid'])

        assert not QuizResult.objects.exists()

    def test_duplicate_option_rejected(self, quiz, patient):
        well = _option(quiz, 1, 'Well')

        with pytest.raises(QuizSubmissionError, match='more than once'):
            submit_quiz(patient, quiz, [well.id, well.id])

    def test_unknown_option_rejected(self, quiz, patient):
        with pytest.raises(QuizSubmissionError, match='belong to a question of this quiz'):
            submit_quiz(patient, quiz, [uuid.uuid4()])

    def test_option_from_other_quiz_rejected(self, quiz, patient, doctor):
        other = Quiz.objects.create(doctor=doctor, title='Other')
        question = Question.objects.create(quiz=other, text='Other?', position=1)
        foreign = Option.objects.create(question=question, text='Yes', score=10)

        with pytest.raises(QuizSubmissionError):
            submit_quiz(patient, quiz, [foreign.id])

        assert not QuizResult.objects.exists()

    def test_question_answered_twice_rejected(self, quiz, patient):
        with pytest.raises(QuizSubmissionError, match='answered once'):
            submit_quiz(patient, quiz, [_option(quiz, 1, 'Fine').id, _option(quiz, 1, 'Well').id])

    def test_rejection_logged_with_reason(self, quiz, patient, app_logs):
        with pytest.raises(QuizSubmissionError):
            submit_quiz(patient, quiz, ['not-a-uuid'])

        blocked = [r for r in app_logs.records if getattr(r, 'event', None) == 'quiz_submitted']
        assert len(blocked) == 1
        assert blocked[0].result == 'blocked'
        assert blocked[0].reason == 'invalid_option_id'

    def test_success_logged_without_answers(self, quiz, patient, app_logs):
        result = submit_quiz(patient, quiz, [_option(quiz, 2, 'High').id])

        events = [r for r in app_logs.records if getattr(r, 'event', None) == 'quiz_submitted']
        assert len(events) == 1
        assert events[0].result == 'success'
        assert events[0].entity_id == str(result.id)
        assert events[0].score == 2
        assert not hasattr(events[0], 'answers')
