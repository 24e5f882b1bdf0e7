"""
Tests for the role and permission-claim seed data.

Covers the pure seed builder, the initial data set, the 0002_seed_roles
migration and re-application through the seed_roles command.
"""
import uuid

import pytest
from io import StringIO
from django.core.management import call_command

from apps.authz.models import EMPTY_CONCURRENCY_STAMP, Role, RoleClaim, UserRole, claim_id_for
from apps.authz.seeding import (
    INITIAL_ROLE_SEEDS,
    apply_role_seeds,
    check_unique_roles,
    remove_role_seeds,
    seed_role,
)


class TestSeedRole:
    """seed_role builds plain records without touching the database."""

    @pytest.mark.parametrize('role_name', ['Doctor', 'Patient', 'Clinic Admin', 'nUrSe'])
    def test_role_id_and_normalized_name(self, role_name):
        seed = seed_role(role_name, 'read')

        assert seed.role.id == role_name.lower()
        assert seed.role.name == role_name
        assert seed.role.normalized_name == role_name.upper()
        assert seed.role.concurrency_stamp == EMPTY_CONCURRENCY_STAMP

    def test_concurrency_stamp_is_empty_uuid(self):
        assert EMPTY_CONCURRENCY_STAMP == '00000000-0000-0000-0000-000000000000'

    def test_one_permission_claim_per_permission(self):
        permissions = ('update', 'read', 'delete', 'create')
        seed = seed_role('Doctor', *permissions)

        assert len(seed.claims) == len(permissions)
        assert all(claim.claim_type == 'permission' for claim in seed.claims)
        assert [claim.claim_value for claim in seed.claims] == list(permissions)
        assert all(claim.role_id == 'doctor' for claim in seed.claims)
        assert len({claim.id for claim in seed.claims}) == len(permissions)

    def test_role_without_permissions_has_no_claims(self):
        seed = seed_role('Observer')

        assert seed.role.id == 'observer'
        assert seed.claims == ()

    def test_claim_ids_are_stable_across_builds(self):
        first = seed_role('Doctor', 'read', 'create')
        second = seed_role('Doctor', 'read', 'create')

        assert [c.id for c in first.claims] == [c.id for c in second.claims]
        assert first.claims[0].id == claim_id_for('doctor', 'permission', 'read')

    def test_same_permission_on_different_roles_gets_different_ids(self):
        doctor = seed_role('Doctor', 'read')
        patient = seed_role('Patient', 'read')

        assert doctor.claims[0].id != patient.claims[0].id

    @pytest.mark.parametrize('role_name', ['', '   '])
    def test_blank_role_name_rejected(self, role_name):
        with pytest.raises(ValueError, match='Role name is required'):
            seed_role(role_name, 'read')

    def test_blank_permission_rejected(self):
        with pytest.raises(ValueError, match='Blank permission'):
            seed_role('Doctor', 'read', '')

    def test_unknown_permission_rejected(self):
        with pytest.raises(ValueError, match='Unknown permission'):
            seed_role('Doctor', 'read', 'archive')

    def test_duplicate_permission_rejected(self):
        with pytest.raises(ValueError, match='Duplicate permission'):
            seed_role('Doctor', 'read', 'read')

    def test_duplicate_roles_in_seed_set_rejected(self):
        with pytest.raises(ValueError, match='doctor'):
            check_unique_roles([seed_role('Doctor', 'read'), seed_role('DOCTOR', 'create')])


class TestInitialRoleSeeds:
    """The versioned initial data set."""

    def test_contains_doctor_and_patient(self):
        by_id = {seed.role.id: seed for seed in INITIAL_ROLE_SEEDS}

        assert set(by_id) == {'doctor', 'patient'}
        assert [c.claim_value for c in by_id['doctor'].claims] == ['update', 'read', 'delete', 'create']
        assert [c.claim_value for c in by_id['patient'].claims] == ['read']

    def test_all_claim_ids_distinct(self):
        ids = [claim.id for seed in INITIAL_ROLE_SEEDS for claim in seed.claims]

        assert len(ids) == len(set(ids)) == 5


@pytest.mark.django_db
class TestSeedMigration:
    """Migration 0002_seed_roles has run for the test database."""

    def test_roles_exist_after_migrations(self):
        doctor = Role.objects.get(id='doctor')
        patient = Role.objects.get(id='patient')

        assert (doctor.name, doctor.normalized_name) == ('Doctor', 'DOCTOR')
        assert (patient.name, patient.normalized_name) == ('Patient', 'PATIENT')
        assert doctor.concurrency_stamp == EMPTY_CONCURRENCY_STAMP

    def test_claims_exist_after_migrations(self):
        doctor_claims = set(
            RoleClaim.objects.filter(role_id='doctor').values_list('claim_type', 'claim_value')
        )
        patient_claims = set(
            RoleClaim.objects.filter(role_id='patient').values_list('claim_type', 'claim_value')
        )

        assert doctor_claims == {
            ('permission', 'update'),
            ('permission', 'read'),
            ('permission', 'delete'),
            ('permission', 'create'),
        }
        assert patient_claims == {('permission', 'read')}

    def test_claim_rows_use_deterministic_ids(self):
        for seed in INITIAL_ROLE_SEEDS:
            for claim in seed.claims:
                assert RoleClaim.objects.filter(id=claim.id, role_id=seed.role.id).exists()


@pytest.mark.django_db
class TestReapplySeeds:
    """Applying the seed set again leaves identical rows."""

    def _snapshot(self):
        roles = list(
            Role.objects.order_by('id').values_list('id', 'name', 'normalized_name', 'concurrency_stamp')
        )
        claims = list(
            RoleClaim.objects.order_by('id').values_list('id', 'role_id', 'claim_type', 'claim_value')
        )
        return roles, claims

    def test_apply_is_idempotent(self):
        before = self._snapshot()

        counts = apply_role_seeds(Role, RoleClaim, INITIAL_ROLE_SEEDS)

        assert counts == {
            'roles_created': 0,
            'roles_updated': 2,
            'claims_created': 0,
            'claims_updated': 0,
            'claims_unchanged': 5,
        }
        assert self._snapshot() == before

    def test_apply_keeps_claim_added_outside_seeding(self):
        doctor = Role.objects.get(id='doctor')
        RoleClaim.objects.filter(role=doctor, claim_value='read').delete()
        claim = RoleClaim.objects.create(role=doctor, claim_value='read')

        counts = apply_role_seeds(Role, RoleClaim, INITIAL_ROLE_SEEDS)

        assert claim.id == claim_id_for('doctor', 'permission', 'read')
        assert counts['claims_created'] == 0
        assert RoleClaim.objects.filter(role=doctor, claim_value='read').count() == 1

    def test_apply_keeps_claim_with_foreign_id(self):
        doctor = Role.objects.get(id='doctor')
        RoleClaim.objects.filter(role=doctor, claim_value='read').delete()
        legacy_id = uuid.uuid4()
        RoleClaim.objects.create(id=legacy_id, role=doctor, claim_value='read')

        call_command('seed_roles', stdout=StringIO())

        claims = RoleClaim.objects.filter(role=doctor, claim_value='read')
        assert list(claims.values_list('id', flat=True)) == [legacy_id]

    def test_apply_restores_edited_claim(self):
        seeded_id = claim_id_for('patient', 'permission', 'read')
        RoleClaim.objects.filter(id=seeded_id).update(claim_value='create')

        counts = apply_role_seeds(Role, RoleClaim, INITIAL_ROLE_SEEDS)

        assert counts['claims_updated'] == 1
        assert RoleClaim.objects.get(id=seeded_id).claim_value == 'read'

    def test_apply_restores_edited_role(self):
        Role.objects.filter(id='patient').update(normalized_name='SOMETHING ELSE')
        RoleClaim.objects.filter(role_id='patient').delete()

        counts = apply_role_seeds(Role, RoleClaim, INITIAL_ROLE_SEEDS)

        assert counts['claims_created'] == 1
        assert Role.objects.get(id='patient').normalized_name == 'PATIENT'
        assert RoleClaim.objects.filter(role_id='patient', claim_value='read').count() == 1

    def test_seed_roles_command(self):
        before = self._snapshot()
        out = StringIO()

        call_command('seed_roles', stdout=out)

        assert self._snapshot() == before
        output = out.getvalue()
        assert 'Doctor (doctor): update, read, delete, create' in output
        assert 'Patient (patient): read' in output
        assert '0 roles created' in output

    def test_apply_logs_domain_event(self, app_logs):
        apply_role_seeds(Role, RoleClaim, INITIAL_ROLE_SEEDS)

        events = [r for r in app_logs.records if getattr(r, 'event', None) == 'role_seeds_applied']
        assert len(events) == 1
        assert events[0].role_ids == ['doctor', 'patient']


@pytest.mark.django_db
class TestRemoveSeeds:
    """Reverse of the seed migration."""

    def test_removes_unassigned_roles_and_their_claims(self):
        deleted = remove_role_seeds(Role, UserRole, INITIAL_ROLE_SEEDS)

        assert deleted == 2
        assert not Role.objects.filter(id__in=['doctor', 'patient']).exists()
        assert not RoleClaim.objects.filter(role_id__in=['doctor', 'patient']).exists()

    def test_keeps_role_with_assigned_users(self, plain_user):
        UserRole.objects.create(user=plain_user, role=Role.objects.get(id='patient'))

        deleted = remove_role_seeds(Role, UserRole, INITIAL_ROLE_SEEDS)

        assert deleted == 1
        assert Role.objects.filter(id='patient').exists()
        assert not Role.objects.filter(id='doctor').exists()
