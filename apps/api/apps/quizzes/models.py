"""
Quiz models: quiz, question, option, quiz_result

A quiz belongs to the doctor who wrote it and goes away with them.
Questions, options and results cascade with their parents.
"""
import uuid
from django.db import models


class Quiz(models.Model):
    """Self-assessment quiz authored by a doctor."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    doctor = models.ForeignKey(
        'clinical.Doctor',
        on_delete=models.CASCADE,
        related_name='quizzes'
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'quiz'
        verbose_name = 'Quiz'
        verbose_name_plural = 'Quizzes'

    def __str__(self):
        return self.title


class Question(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    quiz = models.ForeignKey(
        Quiz,
        on_delete=models.CASCADE,
        related_name='questions'
    )
    text = models.TextField()
    position = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'quiz_question'
        verbose_name = 'Question'
        verbose_name_plural = 'Questions'
        ordering = ['position']

    def __str__(self):
        return self.text[:80]


class Option(models.Model):
    """Answer option; `score` is what choosing it adds to the result."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    question = models.ForeignKey(
        Question,
        on_delete=models.CASCADE,
        related_name='options'
    )
    text = models.CharField(max_length=500)
    score = models.IntegerField(default=0)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'quiz_option'
        verbose_name = 'Option'
        verbose_name_plural = 'Options'
        ordering = ['position']

    def __str__(self):
        return self.text


class QuizResult(models.Model):
    """
    A patient's attempt at a quiz.

    - score: sum of the chosen options' scores
    - max_score: best reachable score at submission time
    - answers: chosen option ids, as strings
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient = models.ForeignKey(
        'clinical.Patient',
        on_delete=models.CASCADE,
        related_name='quiz_results'
    )
    quiz = models.ForeignKey(
        Quiz,
        on_delete=models.CASCADE,
        related_name='quiz_results'
    )
    score = models.IntegerField(default=0)
    max_score = models.IntegerField(default=0)
    answers = models.JSONField(default=list)
    taken_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'quiz_result'
        verbose_name = 'Quiz Result'
        verbose_name_plural = 'Quiz Results'
        ordering = ['-taken_at']
        indexes = [
            models.Index(fields=['patient', 'taken_at'], name='idx_quiz_result_patient_time'),
        ]

    def __str__(self):
        return f"{self.quiz} - {self.score}/{self.max_score}"
