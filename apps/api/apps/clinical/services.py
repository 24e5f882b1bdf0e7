"""
Profile registration services.

An account holds a Doctor profile or a Patient profile, never both. The
schema allows both; these services are where the rule lives.
"""
from django.db import transaction
from django.contrib.auth import get_user_model

from apps.authz.services import assign_role
from apps.clinical.models import Doctor, Patient
from apps.core.observability.events import log_domain_event

User = get_user_model()

DOCTOR_ROLE = 'Doctor'
PATIENT_ROLE = 'Patient'


class ProfileConflictError(Exception):
    """Exception raised when an account already has a clinical profile."""
    pass


def _existing_profile(user: User) -> str:
    if Doctor.objects.filter(user=user).exists():
        return 'doctor'
    if Patient.objects.filter(user=user).exists():
        return 'patient'
    return ''


def _check_no_profile(user: User, wanted: str) -> None:
    existing = _existing_profile(user)
    if existing:
        log_domain_event(
            'profile_registered',
            entity_type=wanted.capitalize(),
            entity_ids={'user_id': str(user.id)},
            result='blocked',
            existing_profile=existing,
        )
        raise ProfileConflictError(
            f"Account {user.id} already has a {existing} profile"
        )


def register_doctor(user: User, **profile) -> Doctor:
    """
    Create the Doctor profile for `user` and grant the Doctor role.

    Args:
        user: Account without a clinical profile
        **profile: Doctor fields (specialty, bio)

    Raises:
        ProfileConflictError: If the account already has a profile
    """
    with transaction.atomic():
        _check_no_profile(user, 'doctor')
        doctor = Doctor.objects.create(user=user, **profile)
        assign_role(user, DOCTOR_ROLE)

    log_domain_event(
        'profile_registered',
        entity_type='Doctor',
        entity_id=str(doctor.id),
        entity_ids={'user_id': str(user.id)},
    )
    return doctor


def register_patient(user: User, **profile) -> Patient:
    """
    Create the Patient profile for `user` and grant the Patient role.

    Args:
        user: Account without a clinical profile
        **profile: Patient fields (date_of_birth)

    Raises:
        ProfileConflictError: If the account already has a profile
    """
    with transaction.atomic():
        _check_no_profile(user, 'patient')
        patient = Patient.objects.create(user=user, **profile)
        assign_role(user, PATIENT_ROLE)

    log_domain_event(
        'profile_registered',
        entity_type='Patient',
        entity_id=str(patient.id),
        entity_ids={'user_id': str(user.id)},
    )
    return patient


def delete_account(user: User) -> None:
    """
    Delete an account together with its clinical profile.

    The profile goes first (cascading to everything it owns), then the
    account. Deleting the account directly raises ProtectedError while a
    profile exists.
    """
    user_id = str(user.id)
    with transaction.atomic():
        removed = {}
        for model in (Doctor, Patient):
            count, per_model = model.objects.filter(user=user).delete()
            if count:
                removed.update(per_model)
        user.delete()

    log_domain_event(
        'account_deleted',
        entity_type='User',
        entity_id=user_id,
        rows_removed=removed,
    )
