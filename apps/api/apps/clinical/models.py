"""
Clinical models: doctor, patient, disease, patient_disease, video, patient_comment

Delete rules:
- Doctor/Patient -> User: PROTECT (an account cannot be deleted while a
  profile references it)
- Everything a Doctor authors (videos, diseases, comments) cascades with it
- Comments cascade with their Patient; disease history rows go with either side
"""
import uuid
from django.db import models
from django.conf import settings
from django.core.exceptions import ValidationError


# ============================================================================
# Enums
# ============================================================================

class VideoType(models.TextChoices):
    """
    Video kinds. Stored as the variant's text, never an ordinal, so
    reordering or inserting variants leaves existing rows valid.
    """
    EDUCATIONAL = 'Educational', 'Educational'
    MEDITATION = 'Meditation', 'Meditation'
    EXERCISE = 'Exercise', 'Exercise'
    AWARENESS = 'Awareness', 'Awareness'

    @classmethod
    def from_text(cls, text):
        """
        Map stored/submitted text to a variant. Case-insensitive.

        Raises:
            ValueError: If text names no variant
        """
        if isinstance(text, cls):
            return text
        normalized = (text or '').strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f'Unknown video type: {text!r}')


# ============================================================================
# Profiles
# ============================================================================

class Doctor(models.Model):
    """
    Doctor profile linked 1:1 to a user account.

    Authors videos, diseases, patient comments and quizzes (apps.quizzes).
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='doctor'
    )
    specialty = models.CharField(max_length=100, blank=True)
    bio = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'doctor'
        verbose_name = 'Doctor'
        verbose_name_plural = 'Doctors'

    def __str__(self):
        return self.user.full_name or self.user.email


class Patient(models.Model):
    """
    Patient profile linked 1:1 to a user account.

    disease_history goes through PatientDisease (table patient_disease).
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='patient'
    )
    date_of_birth = models.DateField(blank=True, null=True)
    disease_history = models.ManyToManyField(
        'Disease',
        through='PatientDisease',
        blank=True,
        related_name='patients'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'patient'
        verbose_name = 'Patient'
        verbose_name_plural = 'Patients'

    def __str__(self):
        return self.user.full_name or self.user.email


# ============================================================================
# Authored content
# ============================================================================

class Disease(models.Model):
    """Disease record written by a doctor."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    doctor = models.ForeignKey(
        Doctor,
        on_delete=models.CASCADE,
        related_name='diseases'
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    symptoms = models.TextField(blank=True)
    treatment = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'disease'
        verbose_name = 'Disease'
        verbose_name_plural = 'Diseases'
        indexes = [
            models.Index(fields=['name'], name='idx_disease_name'),
        ]

    def __str__(self):
        return self.name


class PatientDisease(models.Model):
    """
    Disease history row. The (patient, disease) pair is the primary key;
    the table has no other columns.
    """
    pk = models.CompositePrimaryKey('patient', 'disease')
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE)
    disease = models.ForeignKey(Disease, on_delete=models.CASCADE)

    class Meta:
        db_table = 'patient_disease'
        verbose_name = 'Patient Disease'
        verbose_name_plural = 'Patient Diseases'

    def __str__(self):
        return f"{self.patient_id} - {self.disease_id}"


class Video(models.Model):
    """Video published by a doctor."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    doctor = models.ForeignKey(
        Doctor,
        on_delete=models.CASCADE,
        related_name='videos'
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    url = models.URLField(max_length=500)
    type = models.CharField(
        max_length=32,
        choices=VideoType.choices,
        default=VideoType.EDUCATIONAL
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'video'
        verbose_name = 'Video'
        verbose_name_plural = 'Videos'
        indexes = [
            models.Index(fields=['type'], name='idx_video_type'),
        ]

    def __str__(self):
        return f"{self.title} ({self.type})"

    def clean(self):
        try:
            VideoType.from_text(self.type)
        except ValueError as exc:
            raise ValidationError({'type': str(exc)})

    def save(self, *args, **kwargs):
        # Always persist the canonical variant text
        self.type = VideoType.from_text(self.type).value
        super().save(*args, **kwargs)


class PatientComment(models.Model):
    """Note a doctor writes about a patient."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    doctor = models.ForeignKey(
        Doctor,
        on_delete=models.CASCADE,
        related_name='comments'
    )
    patient = models.ForeignKey(
        Patient,
        on_delete=models.CASCADE,
        related_name='comments'
    )
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'patient_comment'
        verbose_name = 'Patient Comment'
        verbose_name_plural = 'Patient Comments'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['patient', 'created_at'], name='idx_comment_patient_time'),
        ]

    def __str__(self):
        return f"Comment by {self.doctor} on {self.patient}"
