"""
Authz models: auth_user, auth_role, auth_role_claim, auth_user_role

The identity side of the schema. Doctor and Patient profiles in
apps.clinical hang off User; roles carry permission claims.
"""
import uuid
from django.db import models
from django.core.exceptions import ValidationError
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin


# Placeholder stamp carried by seeded roles
EMPTY_CONCURRENCY_STAMP = str(uuid.UUID(int=0))

PERMISSION_CLAIM_TYPE = 'permission'

# Fixed namespace for role claim ids. Changing it re-keys every claim.
ROLE_CLAIM_NAMESPACE = uuid.UUID('6f1d3b0e-5c2a-4e8f-9a47-2b8c1d9e7f30')


def role_id_for(role_name: str) -> str:
    return role_name.strip().lower()


def claim_id_for(role_id: str, claim_type: str, claim_value: str) -> uuid.UUID:
    """Stable primary key for a role claim."""
    return uuid.uuid5(ROLE_CLAIM_NAMESPACE, f'{role_id}:{claim_type}:{claim_value}')


# ============================================================================
# Enums
# ============================================================================

class PermissionChoices(models.TextChoices):
    """Permission claim values understood by the application."""
    CREATE = 'create', 'Create'
    READ = 'read', 'Read'
    UPDATE = 'update', 'Update'
    DELETE = 'delete', 'Delete'


# ============================================================================
# User Management
# ============================================================================

class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """
    User account.

    Owns at most one Doctor profile and at most one Patient profile
    (reverse accessors `doctor` and `patient`). The profiles are kept
    mutually exclusive by apps.clinical.services, not by the schema.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255)
    first_name = models.CharField(max_length=150, blank=True)
    last_name = models.CharField(max_length=150, blank=True)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)  # Required for admin access
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'auth_user'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        indexes = [
            models.Index(fields=['is_active'], name='idx_user_active'),
        ]

    def __str__(self):
        return self.email

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()


# ============================================================================
# Roles and claims
# ============================================================================

class Role(models.Model):
    """
    System role.

    - id: lower-cased role name (deterministic, so seed data is stable)
    - name: display name, e.g. "Doctor"
    - normalized_name: upper-cased name used for lookups
    - concurrency_stamp: opaque token; seeded roles use EMPTY_CONCURRENCY_STAMP
    """
    id = models.CharField(primary_key=True, max_length=64, editable=False)
    name = models.CharField(max_length=64, unique=True)
    normalized_name = models.CharField(max_length=64, unique=True)
    concurrency_stamp = models.CharField(max_length=36, default=EMPTY_CONCURRENCY_STAMP)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'auth_role'
        verbose_name = 'Role'
        verbose_name_plural = 'Roles'
        ordering = ['name']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        # id and normalized_name always follow name
        if not self.id:
            self.id = role_id_for(self.name)
        self.normalized_name = self.name.strip().upper()
        super().save(*args, **kwargs)


class RoleClaim(models.Model):
    """
    A key/value assertion attached to a role, e.g. ("permission", "read").

    The id is derived from (role, claim_type, claim_value) on first save,
    so a claim gets the same id whether it was seeded or added later.
    Permission claims must name a PermissionChoices value.
    """
    id = models.UUIDField(primary_key=True, editable=False)
    role = models.ForeignKey(
        Role,
        on_delete=models.CASCADE,
        related_name='claims'
    )
    claim_type = models.CharField(max_length=64, default=PERMISSION_CLAIM_TYPE)
    claim_value = models.CharField(max_length=128)

    class Meta:
        db_table = 'auth_role_claim'
        verbose_name = 'Role Claim'
        verbose_name_plural = 'Role Claims'
        unique_together = [('role', 'claim_type', 'claim_value')]
        indexes = [
            models.Index(fields=['claim_type', 'claim_value'], name='idx_role_claim_type_value'),
        ]

    def __str__(self):
        return f"{self.role_id}: {self.claim_type}={self.claim_value}"

    def clean(self):
        if self.claim_type == PERMISSION_CLAIM_TYPE and self.claim_value not in PermissionChoices.values:
            raise ValidationError({'claim_value': f'Unknown permission: {self.claim_value!r}'})

    def save(self, *args, **kwargs):
        if self.id is None:
            self.id = claim_id_for(self.role_id, self.claim_type, self.claim_value)
        super().save(*args, **kwargs)


class UserRole(models.Model):
    """
    Many-to-many relationship between users and roles.
    """
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='user_roles'
    )
    role = models.ForeignKey(
        Role,
        on_delete=models.CASCADE,
        related_name='user_roles'
    )

    class Meta:
        db_table = 'auth_user_role'
        verbose_name = 'User Role'
        verbose_name_plural = 'User Roles'
        unique_together = [('user', 'role')]
        indexes = [
            models.Index(fields=['user'], name='idx_user_role_user'),
            models.Index(fields=['role'], name='idx_user_role_role'),
        ]

    def __str__(self):
        return f"{self.user.email} - {self.role.name}"
