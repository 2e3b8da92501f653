# accounts/policies.py
"""Row-level authorization keyed on owner identity.

Each protected table names the column holding its owner's user id. A caller
may select, insert, update or delete a row only when that column equals
their own id; anything else is denied. Policies are declared once and
shared by the HTML views, the service layer and the REST API.
"""
import logging
from dataclasses import dataclass

from django.core.exceptions import PermissionDenied
from rest_framework.permissions import BasePermission, SAFE_METHODS

logger = logging.getLogger(__name__)

SELECT = 'select'
INSERT = 'insert'
UPDATE = 'update'
DELETE = 'delete'

ALL_ACTIONS = (SELECT, INSERT, UPDATE, DELETE)

METHOD_ACTIONS = {
    'PUT': UPDATE,
    'PATCH': UPDATE,
    'DELETE': DELETE,
    'POST': INSERT,
}


@dataclass(frozen=True)
class OwnerPolicy:
    """Allow an action on a row only to the user whose id it carries"""

    table: str
    owner_field: str
    actions: tuple = ALL_ACTIONS

    def owner_of(self, row):
        return getattr(row, self.owner_field)

    def allows(self, user, action, row) -> bool:
        if action not in self.actions:
            return False
        if user is None or not user.is_authenticated:
            return False
        return self.owner_of(row) == user.pk

    def enforce(self, user, action, row):
        if not self.allows(user, action, row):
            logger.warning(
                "Denied %s on %s for user %s (owner %s)",
                action, self.table, getattr(user, 'pk', None), self.owner_of(row),
            )
            raise PermissionDenied(f"Not allowed to {action} this row.")

    def scope(self, queryset, user):
        """Restrict a queryset to the rows ``user`` may select"""
        if SELECT not in self.actions or user is None or not user.is_authenticated:
            return queryset.none()
        return queryset.filter(**{self.owner_field: user.pk})


# Profiles are created by signup and never deleted through the app.
PROFILE_POLICY = OwnerPolicy('profiles', 'user_id', actions=(SELECT, INSERT, UPDATE))


class IsOwner(BasePermission):
    """DRF object permission backed by an OwnerPolicy"""

    policy = None

    def has_object_permission(self, request, view, obj):
        action = SELECT if request.method in SAFE_METHODS else METHOD_ACTIONS.get(request.method)
        return self.policy.allows(request.user, action, obj)


class IsProfileOwner(IsOwner):
    policy = PROFILE_POLICY
