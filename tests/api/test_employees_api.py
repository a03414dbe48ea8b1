"""
Tests for the employee endpoints (soft delete, Brazilian input formats).
"""

from decimal import Decimal

from juridico_app.models import ActivityLog, Employee


def stored_employee(db_session, employee_id):
    db_session.expire_all()
    return db_session.query(Employee).filter(Employee.id == employee_id).one()


class TestEmployeeCreate:
    """POST /api/employees."""

    def test_create_with_brazilian_formats(self, client_for, viewer, db_session):
        response = client_for(viewer).post(
            "/api/employees",
            json={
                "nome": "Fernanda Costa",
                "matricula": "2002",
                "empresa": 33,
                "dataAdmissao": "05/02/2024",
                "salario": "5.000,50",
                "cargo": "Analista",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "ativo"
        assert body["empresa"] == "33"
        assert body["dataAdmissao"] == "2024-02-05"
        assert Decimal(str(body["salario"])) == Decimal("5000.50")

        db_session.expire_all()
        [entry] = db_session.query(ActivityLog).filter(ActivityLog.action == "CREATE_EMPLOYEE").all()
        assert entry.description == "Criou funcionário Fernanda Costa - Matrícula: 2002"

    def test_duplicate_matricula(self, client_for, viewer, employee_factory):
        employee_factory(matricula="1001")

        response = client_for(viewer).post("/api/employees", json={"nome": "Outro", "matricula": "1001"})

        assert response.status_code == 409
        assert response.json()["code"] == "duplicate"

    def test_matricula_of_deleted_employee_stays_taken(self, client_for, viewer, employee_factory):
        employee_factory(matricula="1001", status="deletado")

        response = client_for(viewer).post("/api/employees", json={"nome": "Outro", "matricula": "1001"})

        assert response.status_code == 409

    def test_impossible_admission_date_rejected(self, client_for, viewer, db_session):
        response = client_for(viewer).post(
            "/api/employees",
            json={"nome": "Fernanda Costa", "matricula": "2003", "dataAdmissao": "31/02/2024"},
        )

        assert response.status_code == 400
        assert [error["field"] for error in response.json()["errors"]] == ["dataAdmissao"]
        db_session.expire_all()
        assert db_session.query(Employee).count() == 0

    def test_missing_required_fields(self, client_for, viewer):
        response = client_for(viewer).post("/api/employees", json={"cargo": "Auxiliar"})

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"nome", "matricula"}

    def test_unauthenticated(self, client):
        assert client.post("/api/employees", json={"nome": "X", "matricula": "1"}).status_code == 401


class TestEmployeeQueries:
    """GET /api/employees and /api/employees/{id}."""

    def test_list_is_ordered_and_hides_deleted(self, client_for, viewer, employee_factory):
        employee_factory(nome="Zélia", matricula="3")
        employee_factory(nome="Bruno", matricula="2")
        employee_factory(nome="Apagado", matricula="1", status="deletado")

        response = client_for(viewer).get("/api/employees")

        assert [e["nome"] for e in response.json()] == ["Bruno", "Zélia"]

    def test_include_deleted(self, client_for, viewer, employee_factory):
        employee_factory(nome="Apagado", matricula="1", status="deletado")

        response = client_for(viewer).get("/api/employees", params={"includeDeleted": "true"})

        assert [e["status"] for e in response.json()] == ["deletado"]

    def test_search_by_codigo(self, client_for, viewer, employee_factory):
        employee_factory(nome="Bruno", matricula="4455")
        employee_factory(nome="Carla 4455", matricula="9999")

        response = client_for(viewer).get("/api/employees", params={"search": "4455", "searchType": "codigo"})

        assert [e["matricula"] for e in response.json()] == ["4455"]

    def test_default_search_matches_name_or_matricula(self, client_for, viewer, employee_factory):
        employee_factory(nome="Bruno", matricula="4455")
        employee_factory(nome="Carla 4455", matricula="9999")

        response = client_for(viewer).get("/api/employees", params={"search": "4455"})

        assert len(response.json()) == 2

    def test_get_missing(self, client_for, viewer):
        response = client_for(viewer).get("/api/employees/00000000-0000-0000-0000-000000000000")
        assert response.status_code == 404
        assert response.json()["message"] == "Funcionário não encontrado"


class TestEmployeeMutations:
    """PATCH and DELETE /api/employees/{id}."""

    def test_update(self, client_for, viewer, employee_factory):
        employee = employee_factory()

        response = client_for(viewer).patch(
            f"/api/employees/{employee.id}",
            json={"cargo": "Supervisor", "status": "inativo", "dataDemissao": "01/03/2026"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["cargo"] == "Supervisor"
        assert body["status"] == "inativo"
        assert body["dataDemissao"] == "2026-03-01"

    def test_status_patch_cannot_delete(self, client_for, viewer, employee_factory):
        employee = employee_factory()

        response = client_for(viewer).patch(f"/api/employees/{employee.id}", json={"status": "deletado"})

        assert response.status_code == 400

    def test_update_to_taken_matricula(self, client_for, viewer, employee_factory):
        employee_factory(matricula="1")
        other = employee_factory(matricula="2")

        response = client_for(viewer).patch(f"/api/employees/{other.id}", json={"matricula": "1"})

        assert response.status_code == 409

    def test_soft_delete(self, client_for, viewer, employee_factory, db_session):
        employee = employee_factory()
        client = client_for(viewer)

        response = client.delete(f"/api/employees/{employee.id}")

        assert response.status_code == 200
        assert stored_employee(db_session, employee.id).status == "deletado"
        assert client.get(f"/api/employees/{employee.id}").status_code == 404
        assert db_session.query(ActivityLog).filter(ActivityLog.action == "DELETE_EMPLOYEE").count() == 1
