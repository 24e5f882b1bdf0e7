"""Quizzes app configuration."""
from django.apps import AppConfig


class QuizzesConfig(AppConfig):
    """Configuration for quizzes app."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.quizzes'
    verbose_name = 'Quizzes'
