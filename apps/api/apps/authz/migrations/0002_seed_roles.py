# Seed the Doctor and Patient roles with their permission claims

from django.db import migrations

from apps.authz.seeding import INITIAL_ROLE_SEEDS, apply_role_seeds, remove_role_seeds


def seed_roles(apps, schema_editor):
    """
    Write INITIAL_ROLE_SEEDS.
    Idempotent - safe to run multiple times.
    """
    Role = apps.get_model('authz', 'Role')
    RoleClaim = apps.get_model('authz', 'RoleClaim')
    apply_role_seeds(Role, RoleClaim, INITIAL_ROLE_SEEDS)


def unseed_roles(apps, schema_editor):
    """
    Reverse migration - delete seeded roles.
    Only deletes roles no user is assigned to.
    """
    Role = apps.get_model('authz', 'Role')
    UserRole = apps.get_model('authz', 'UserRole')
    remove_role_seeds(Role, UserRole, INITIAL_ROLE_SEEDS)


class Migration(migrations.Migration):

    dependencies = [
        ('authz', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_roles, unseed_roles),
    ]
