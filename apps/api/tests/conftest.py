"""
Global test fixtures for pytest.

Provides reusable fixtures for schema and service tests:
- User accounts (doctor, patient, plain)
- Profile instances (Doctor, Patient)
- Authored content (Disease, Video, PatientComment, Quiz with questions)
- Log capture for the 'apps' logger tree
"""
import logging

import pytest
from apps.authz.models import User
from apps.clinical.models import Doctor, Patient, Disease, Video, PatientComment, VideoType
from apps.quizzes.models import Quiz, Question, Option


# ============================================================================
# User Fixtures
# ============================================================================

@pytest.fixture
def doctor_user(db):
    """Account that will hold a Doctor profile."""
    return User.objects.create_user(
        email='doctor_user@test.com',
        password='testpass123',
        first_name='Grace',
        last_name='Hopper',
        is_active=True
    )


@pytest.fixture
def patient_user(db):
    """Account that will hold a Patient profile."""
    return User.objects.create_user(
        email='patient_user@test.com',
        password='testpass123',
        first_name='Alan',
        last_name='Turing',
        is_active=True
    )


@pytest.fixture
def plain_user(db):
    """Account without any profile or role."""
    return User.objects.create_user(
        email='plain_user@test.com',
        password='testpass123',
        is_active=True
    )


# ============================================================================
# Profile Fixtures
# ============================================================================

@pytest.fixture
def doctor(db, doctor_user):
    """Create a doctor profile."""
    return Doctor.objects.create(
        user=doctor_user,
        specialty='Clinical Psychology',
        bio='Cognitive behavioural therapy'
    )


@pytest.fixture
def patient(db, patient_user):
    """Create a patient profile."""
    return Patient.objects.create(
        user=patient_user,
        date_of_birth='1990-01-15'
    )


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def disease(db, doctor):
    """Create a disease record authored by `doctor`."""
    return Disease.objects.create(
        doctor=doctor,
        name='Generalized Anxiety Disorder',
        description='Persistent and excessive worry',
        symptoms='Restlessness, fatigue, poor concentration',
        treatment='CBT, SSRIs'
    )


@pytest.fixture
def video(db, doctor):
    """Create a video published by `doctor`."""
    return Video.objects.create(
        doctor=doctor,
        title='Box breathing in five minutes',
        url='https://videos.example.com/box-breathing',
        type=VideoType.MEDITATION
    )


@pytest.fixture
def comment(db, doctor, patient):
    """Create a comment by `doctor` about `patient`."""
    return PatientComment.objects.create(
        doctor=doctor,
        patient=patient,
        content='Reports improved sleep since last session'
    )


@pytest.fixture
def quiz(db, doctor):
    """
    Two-question quiz authored by `doctor`.

    Best option scores are 3 and 2, so max score is 5.
    """
    quiz = Quiz.objects.create(doctor=doctor, title='Weekly mood check')

    sleep = Question.objects.create(quiz=quiz, text='How did you sleep?', position=1)
    Option.objects.create(question=sleep, text='Badly', score=0, position=1)
    Option.objects.create(question=sleep, text='Fine', score=1, position=2)
    Option.objects.create(question=sleep, text='Well', score=3, position=3)

    energy = Question.objects.create(quiz=quiz, text='How is your energy?', position=2)
    Option.objects.create(question=energy, text='Low', score=0, position=1)
    Option.objects.create(question=energy, text='High', score=2, position=2)

    return quiz


# ============================================================================
# Logging
# ============================================================================

@pytest.fixture
def app_logs(caplog):
    """
    caplog for records under the 'apps' logger, which does not propagate
    to root (see settings.LOGGING).
    """
    apps_logger = logging.getLogger('apps')
    apps_logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger='apps')
    yield caplog
    apps_logger.removeHandler(caplog.handler)
