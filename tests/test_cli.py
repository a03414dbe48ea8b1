"""
Tests for the administration CLI.
"""

import pytest
from typer.testing import CliRunner

from juridico_app.cli import main as cli_main
from juridico_app.models import User

runner = CliRunner()


@pytest.fixture
def cli_db(db_session, monkeypatch):
    """Point the CLI at the test database."""
    monkeypatch.setattr(cli_main, "get_db", lambda: db_session)
    return db_session


class TestCreateUser:
    def test_creates_admin(self, cli_db):
        result = runner.invoke(cli_main.app, ["create-user", "chefe", "--password", "s3nha", "--role", "admin"])

        assert result.exit_code == 0, result.output
        assert "Created user chefe" in result.output
        user = cli_db.query(User).filter(User.username == "chefe").one()
        assert user.role == "admin"

    def test_invalid_role(self, cli_db):
        result = runner.invoke(cli_main.app, ["create-user", "x", "--password", "p", "--role", "root"])
        assert result.exit_code == 1

    def test_duplicate(self, cli_db, viewer):
        result = runner.invoke(cli_main.app, ["create-user", "viewer", "--password", "p"])
        assert result.exit_code == 1


class TestSetStatusPermissions:
    def test_allow_and_deny(self, cli_db, viewer):
        result = runner.invoke(
            cli_main.app,
            ["set-status-permissions", "viewer", "--allow", "andamento", "--deny", "concluido"],
        )

        assert result.exit_code == 0, result.output
        cli_db.expire_all()
        user = cli_db.query(User).filter(User.username == "viewer").one()
        assert user.permissions["statusTransitions"] == {"andamento": True, "concluido": False}

    def test_reset(self, cli_db, user_factory):
        user_factory("lucas", permissions={"statusTransitions": {"andamento": True}})

        result = runner.invoke(cli_main.app, ["set-status-permissions", "lucas", "--reset"])

        assert result.exit_code == 0, result.output
        cli_db.expire_all()
        assert cli_db.query(User).filter(User.username == "lucas").one().permissions["statusTransitions"] == {}

    def test_invalid_status(self, cli_db, viewer):
        result = runner.invoke(cli_main.app, ["set-status-permissions", "viewer", "--allow", "arquivado"])
        assert result.exit_code == 1

    def test_unknown_user(self, cli_db):
        result = runner.invoke(cli_main.app, ["set-status-permissions", "ghost", "--allow", "novo"])
        assert result.exit_code == 1


class TestListCases:
    def test_lists_with_bucket(self, cli_db, case_factory):
        case_factory(process_number="777/2026", status="pendente")

        result = runner.invoke(cli_main.app, ["list-cases"])

        assert result.exit_code == 0, result.output
        assert "777/2026" in result.output
        assert "pendente" in result.output

    def test_empty(self, cli_db):
        result = runner.invoke(cli_main.app, ["list-cases"])
        assert result.exit_code == 0
        assert "No cases found" in result.output
