"""
Status-transition permissions.

Role defaults:
- admin: every transition, edit and delete any case
- editor: may move cases to andamento or concluido
- anyone else: may only move cases to concluido

A user's permission map may carry ``statusTransitions`` overrides, e.g.
``{"andamento": true, "novo": false}``, merged over the role defaults. Admins
are never narrowed by overrides.
"""

from dataclasses import dataclass, replace
from typing import Any

from juridico_app.domain.case.status import CaseStatus

STATUS_OVERRIDES_KEY = "statusTransitions"


@dataclass(frozen=True)
class StatusPermissions:
    can_change_to_novo: bool = False
    can_change_to_andamento: bool = False
    can_change_to_pendente: bool = False
    can_change_to_concluido: bool = False
    can_edit_all_cases: bool = False
    can_delete_cases: bool = False

    def allows(self, status: CaseStatus) -> bool:
        return getattr(self, f"can_change_to_{status.value}")

    def to_dict(self) -> dict[str, bool]:
        return {
            "canChangeToNovo": self.can_change_to_novo,
            "canChangeToAndamento": self.can_change_to_andamento,
            "canChangeToPendente": self.can_change_to_pendente,
            "canChangeToConcluido": self.can_change_to_concluido,
            "canEditAllCases": self.can_edit_all_cases,
            "canDeleteCases": self.can_delete_cases,
        }


NO_PERMISSIONS = StatusPermissions()

ROLE_PERMISSIONS = {
    "admin": StatusPermissions(
        can_change_to_novo=True,
        can_change_to_andamento=True,
        can_change_to_pendente=True,
        can_change_to_concluido=True,
        can_edit_all_cases=True,
        can_delete_cases=True,
    ),
    "editor": StatusPermissions(
        can_change_to_andamento=True,
        can_change_to_concluido=True,
    ),
}

# Everyone may mark a case as done
DEFAULT_PERMISSIONS = StatusPermissions(can_change_to_concluido=True)


def _apply_overrides(base: StatusPermissions, overrides: dict[str, Any]) -> StatusPermissions:
    changes = {}
    for key, allowed in overrides.items():
        status = CaseStatus.parse(key)
        if status is None or not isinstance(allowed, bool):
            continue
        changes[f"can_change_to_{status.value}"] = allowed
    return replace(base, **changes) if changes else base


def get_status_permissions(user) -> StatusPermissions:
    """Effective permissions for a user (anything with ``role`` and ``permissions``)."""
    if user is None:
        return NO_PERMISSIONS

    role = getattr(user, "role", None)
    base = ROLE_PERMISSIONS.get(role, DEFAULT_PERMISSIONS)
    if role == "admin":
        return base

    permission_map = getattr(user, "permissions", None) or {}
    overrides = permission_map.get(STATUS_OVERRIDES_KEY) or {}
    if not isinstance(overrides, dict):
        return base
    return _apply_overrides(base, overrides)


def can_change_status(user, from_status: str | None, to_status: str | None) -> bool:
    """Whether ``user`` may move a case to ``to_status``; unknown targets are never allowed."""
    target = CaseStatus.parse(to_status)
    if target is None:
        return False
    return get_status_permissions(user).allows(target)
