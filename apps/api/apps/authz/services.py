"""
Identity capability services.

Create accounts, assign roles, attach claims and check claims. Everything
else in the project talks to the identity model through these functions.
"""
import logging
from typing import Optional, Set, Tuple

from django.contrib.auth import get_user_model
from django.db import transaction

from apps.authz.models import (
    PERMISSION_CLAIM_TYPE,
    PermissionChoices,
    Role,
    RoleClaim,
    UserRole,
    role_id_for,
)
from apps.core.observability.events import log_domain_event

User = get_user_model()
logger = logging.getLogger(__name__)


def create_account(email: str, password: Optional[str] = None, **fields) -> User:
    """
    Create a user account.

    Raises:
        ValueError: If email is blank
    """
    user = User.objects.create_user(email=email, password=password, **fields)
    logger.info('Account created', extra={'user_id': str(user.id)})
    return user


def assign_role(user: User, role_name: str) -> UserRole:
    """
    Give `user` the role named `role_name` (case-insensitive). Idempotent.

    Raises:
        Role.DoesNotExist: If no such role has been seeded or created
    """
    role = Role.objects.get(id=role_id_for(role_name))
    user_role, created = UserRole.objects.get_or_create(user=user, role=role)
    if created:
        log_domain_event(
            'role_assigned',
            entity_type='UserRole',
            entity_id=str(user_role.id),
            entity_ids={'user_id': str(user.id), 'role_id': role.id},
        )
    return user_role


def attach_claim(role: Role, claim_value: str, claim_type: str = PERMISSION_CLAIM_TYPE) -> RoleClaim:
    """
    Attach a claim to a role. Idempotent; the claim id is derived the same
    way as for seeded claims.

    Raises:
        ValueError: If claim_value is blank, or names no PermissionChoices
            value for a permission claim
    """
    if not claim_value:
        raise ValueError('Claim value is required')
    if claim_type == PERMISSION_CLAIM_TYPE and claim_value not in PermissionChoices.values:
        raise ValueError(f'Unknown permission: {claim_value!r}')

    with transaction.atomic():
        claim, created = RoleClaim.objects.get_or_create(
            role=role,
            claim_type=claim_type,
            claim_value=claim_value,
        )
    if created:
        log_domain_event(
            'claim_attached',
            entity_type='RoleClaim',
            entity_id=str(claim.id),
            entity_ids={'role_id': role.id},
            claim_type=claim_type,
            claim_value=claim_value,
        )
    return claim


def user_claims(user: User) -> Set[Tuple[str, str]]:
    """All (claim_type, claim_value) pairs granted to `user` through roles."""
    if not user.is_active:
        return set()
    return set(
        RoleClaim.objects
        .filter(role__user_roles__user=user)
        .values_list('claim_type', 'claim_value')
        .distinct()
    )


def has_claim(user: User, claim_value: str, claim_type: str = PERMISSION_CLAIM_TYPE) -> bool:
    """Check whether `user` holds a claim through any of its roles."""
    if not user.is_active:
        return False
    return RoleClaim.objects.filter(
        role__user_roles__user=user,
        claim_type=claim_type,
        claim_value=claim_value,
    ).exists()
