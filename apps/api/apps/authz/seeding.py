"""
Role and permission-claim seed data.

The initial data set is plain records built once at import time and written
by migration 0002_seed_roles (and the `seed_roles` management command).
Every id is deterministic, so applying the set again produces identical rows:

- role id is the lower-cased role name
- claim id is a UUIDv5 of (role id, claim type, claim value)
"""
import logging
import uuid
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from apps.authz.models import (
    EMPTY_CONCURRENCY_STAMP,
    PERMISSION_CLAIM_TYPE,
    PermissionChoices,
    claim_id_for,
    role_id_for,
)
from apps.core.observability.events import log_domain_event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoleRecord:
    id: str
    name: str
    normalized_name: str
    concurrency_stamp: str = EMPTY_CONCURRENCY_STAMP


@dataclass(frozen=True)
class RoleClaimRecord:
    id: uuid.UUID
    role_id: str
    claim_type: str
    claim_value: str


@dataclass(frozen=True)
class RoleSeed:
    role: RoleRecord
    claims: Tuple[RoleClaimRecord, ...]


def seed_role(role_name: str, *permissions: str) -> RoleSeed:
    """
    Build the role record and one permission claim per permission string.

    Raises:
        ValueError: blank role name, blank or unknown permission, or a
            permission listed twice (the claim ids would collide)
    """
    if not role_name or not role_name.strip():
        raise ValueError('Role name is required')

    role_name = role_name.strip()
    role = RoleRecord(
        id=role_id_for(role_name),
        name=role_name,
        normalized_name=role_name.upper(),
    )

    claims = []
    seen = set()
    for permission in permissions:
        if not permission or not permission.strip():
            raise ValueError(f'Blank permission for role {role_name!r}')
        if permission not in PermissionChoices.values:
            raise ValueError(f'Unknown permission {permission!r} for role {role_name!r}')
        if permission in seen:
            raise ValueError(f'Duplicate permission {permission!r} for role {role_name!r}')
        seen.add(permission)
        claims.append(RoleClaimRecord(
            id=claim_id_for(role.id, PERMISSION_CLAIM_TYPE, permission),
            role_id=role.id,
            claim_type=PERMISSION_CLAIM_TYPE,
            claim_value=permission,
        ))

    return RoleSeed(role=role, claims=tuple(claims))


def check_unique_roles(seeds: Iterable[RoleSeed]) -> Tuple[RoleSeed, ...]:
    """Reject seed sets that would write the same role id twice."""
    seeds = tuple(seeds)
    role_ids = [seed.role.id for seed in seeds]
    duplicates = sorted({role_id for role_id in role_ids if role_ids.count(role_id) > 1})
    if duplicates:
        raise ValueError(f"Duplicate role ids in seed set: {', '.join(duplicates)}")
    return seeds


# Initial data set, version 1. Applied by migration 0002_seed_roles.
INITIAL_ROLE_SEEDS = check_unique_roles([
    seed_role('Doctor', 'update', 'read', 'delete', 'create'),
    seed_role('Patient', 'read'),
])


def apply_role_seeds(role_model, claim_model, seeds: Iterable[RoleSeed] = INITIAL_ROLE_SEEDS) -> Dict[str, int]:
    """
    Write roles and claims.

    Roles are keyed by id. Claims are keyed by (role, claim_type,
    claim_value): a matching row is kept whatever its id, otherwise the
    row holding the seed id is restored or a new one is created.

    Takes the model classes as arguments so migrations can pass their
    historical models.

    Returns:
        Counts of created/updated roles and created/updated/unchanged claims
    """
    seeds = check_unique_roles(seeds)
    counts = {
        'roles_created': 0,
        'roles_updated': 0,
        'claims_created': 0,
        'claims_updated': 0,
        'claims_unchanged': 0,
    }

    for seed in seeds:
        _, created = role_model.objects.update_or_create(
            id=seed.role.id,
            defaults={
                'name': seed.role.name,
                'normalized_name': seed.role.normalized_name,
                'concurrency_stamp': seed.role.concurrency_stamp,
            }
        )
        counts['roles_created' if created else 'roles_updated'] += 1

        for claim in seed.claims:
            present = claim_model.objects.filter(
                role_id=claim.role_id,
                claim_type=claim.claim_type,
                claim_value=claim.claim_value,
            ).exists()
            if present:
                counts['claims_unchanged'] += 1
                continue

            _, created = claim_model.objects.update_or_create(
                id=claim.id,
                defaults={
                    'role_id': claim.role_id,
                    'claim_type': claim.claim_type,
                    'claim_value': claim.claim_value,
                }
            )
            counts['claims_created' if created else 'claims_updated'] += 1

    log_domain_event(
        'role_seeds_applied',
        entity_type='Role',
        role_ids=[seed.role.id for seed in seeds],
        **counts
    )
    return counts


def remove_role_seeds(role_model, user_role_model, seeds: Iterable[RoleSeed] = INITIAL_ROLE_SEEDS) -> int:
    """
    Delete seeded roles (claims go with them) that no user holds.

    Returns:
        Number of roles deleted
    """
    deleted = 0
    for seed in seeds:
        if user_role_model.objects.filter(role_id=seed.role.id).exists():
            logger.warning(
                'Seeded role kept: users are assigned to it',
                extra={'role_id': seed.role.id}
            )
            continue
        removed, _ = role_model.objects.filter(id=seed.role.id).delete()
        if removed:
            deleted += 1
    return deleted
