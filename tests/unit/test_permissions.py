"""
Tests for status transition permissions.
"""

from types import SimpleNamespace

import pytest

from juridico_app.domain.case.permissions import (
    NO_PERMISSIONS,
    can_change_status,
    get_status_permissions,
)


def make_user(role, permissions=None):
    return SimpleNamespace(role=role, permissions=permissions or {})


class TestRolePermissions:
    """Tests for the role defaults."""

    @pytest.mark.parametrize("target", ["novo", "andamento", "pendente", "concluido"])
    def test_admin_may_move_anywhere(self, target):
        assert can_change_status(make_user("admin"), "pendente", target) is True

    def test_editor(self):
        editor = make_user("editor")
        assert can_change_status(editor, "novo", "andamento") is True
        assert can_change_status(editor, "novo", "concluido") is True
        assert can_change_status(editor, "andamento", "novo") is False
        assert can_change_status(editor, "andamento", "pendente") is False

    def test_viewer_may_only_complete(self):
        viewer = make_user("viewer")
        assert can_change_status(viewer, "pendente", "concluido") is True
        assert can_change_status(viewer, "pendente", "novo") is False
        assert can_change_status(viewer, "novo", "andamento") is False

    def test_unknown_role_gets_default(self):
        assert get_status_permissions(make_user("estagiario")).can_change_to_concluido is True
        assert get_status_permissions(make_user(None)).can_change_to_novo is False

    def test_only_admin_edits_and_deletes(self):
        assert get_status_permissions(make_user("admin")).can_delete_cases is True
        assert get_status_permissions(make_user("editor")).can_edit_all_cases is False
        assert get_status_permissions(make_user("viewer")).can_delete_cases is False

    def test_no_user(self):
        assert get_status_permissions(None) == NO_PERMISSIONS
        assert can_change_status(None, "novo", "concluido") is False

    def test_unknown_target_never_allowed(self):
        assert can_change_status(make_user("admin"), "novo", "arquivado") is False
        assert can_change_status(make_user("admin"), "novo", None) is False


class TestStatusOverrides:
    """Tests for per-user statusTransitions overrides."""

    def test_override_grants_andamento_and_revokes_nothing_else(self):
        # reviewer who may reopen to andamento and complete, never novo/pendente
        user = make_user("viewer", {"statusTransitions": {"andamento": True, "concluido": True}})
        perms = get_status_permissions(user)
        assert perms.can_change_to_andamento is True
        assert perms.can_change_to_concluido is True
        assert perms.can_change_to_novo is False
        assert perms.can_change_to_pendente is False

    def test_override_can_narrow_a_role(self):
        user = make_user("editor", {"statusTransitions": {"concluido": False}})
        assert can_change_status(user, "andamento", "concluido") is False
        assert can_change_status(user, "novo", "andamento") is True

    def test_admin_ignores_overrides(self):
        user = make_user("admin", {"statusTransitions": {"novo": False}})
        assert can_change_status(user, "pendente", "novo") is True

    def test_malformed_overrides_are_ignored(self):
        user = make_user("viewer", {"statusTransitions": {"novo": "yes", "arquivado": True}})
        assert get_status_permissions(user) == get_status_permissions(make_user("viewer"))

        user = make_user("viewer", {"statusTransitions": ["novo"]})
        assert get_status_permissions(user) == get_status_permissions(make_user("viewer"))

    def test_to_dict_uses_camel_case(self):
        data = get_status_permissions(make_user("editor")).to_dict()
        assert data == {
            "canChangeToNovo": False,
            "canChangeToAndamento": True,
            "canChangeToPendente": False,
            "canChangeToConcluido": True,
            "canEditAllCases": False,
            "canDeleteCases": False,
        }
