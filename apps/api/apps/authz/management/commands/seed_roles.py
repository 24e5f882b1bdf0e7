"""
Management command to re-apply the role and permission-claim seed data.

Usage:
    python manage.py seed_roles

This command is idempotent and safe to run multiple times.
Roles and claims are keyed by deterministic ids, so existing rows are
updated in place and missing ones are created.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.authz.models import Role, RoleClaim
from apps.authz.seeding import INITIAL_ROLE_SEEDS, apply_role_seeds


class Command(BaseCommand):
    help = 'Ensure the Doctor and Patient roles exist with their permission claims'

    def handle(self, *args, **options):
        self.stdout.write("Applying role seeds...")

        with transaction.atomic():
            counts = apply_role_seeds(Role, RoleClaim, INITIAL_ROLE_SEEDS)

        for seed in INITIAL_ROLE_SEEDS:
            permissions = ', '.join(claim.claim_value for claim in seed.claims)
            self.stdout.write(f'  - {seed.role.name} ({seed.role.id}): {permissions}')

        self.stdout.write(self.style.SUCCESS(
            f"✓ Done: {counts['roles_created']} roles created, {counts['roles_updated']} updated; "
            f"{counts['claims_created']} claims created, {counts['claims_updated']} updated, "
            f"{counts['claims_unchanged']} unchanged"
        ))
