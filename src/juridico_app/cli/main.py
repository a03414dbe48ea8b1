"""
Jurídico CLI

Command-line interface for administration tasks.

Commands:
- init-db: Create all tables (development databases; production uses alembic)
- create-user: Create an application user
- set-status-permissions: Override which statuses a user may move cases to
- list-cases: List cases with their deadline bucket
"""

from typing import List, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from juridico_app.core.logging import setup_logging
from juridico_app.domain.case.exceptions import DomainException
from juridico_app.domain.case.status import Bucket, CaseStatus

app = typer.Typer(
    name="juridico-cli",
    help="Jurídico administration CLI",
)

console = Console()

BUCKET_STYLES = {
    Bucket.NOVO: "cyan",
    Bucket.PENDENTE: "yellow",
    Bucket.ATRASADO: "red",
    Bucket.CONCLUIDO: "green",
}


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    setup_logging("DEBUG" if verbose else None)


def get_db():
    """Get database session."""
    from juridico_app.core.database import get_db as _get_db
    return next(_get_db())


@app.command()
def init_db():
    """Create every table in the configured database."""
    from juridico_app.core.database import create_all

    create_all()
    rprint("[green]Tables created[/green]")


@app.command()
def create_user(
    username: str = typer.Argument(..., help="Login name"),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Password"),
    role: str = typer.Option("viewer", help="Role (admin, editor, viewer)"),
    email: Optional[str] = typer.Option(None, help="Email address"),
    first_name: Optional[str] = typer.Option(None, help="First name"),
    last_name: Optional[str] = typer.Option(None, help="Last name"),
):
    """
    Create an application user.

    The first admin has to be created this way; later users can be managed
    through the API.
    """
    from juridico_app.application.services import UserService
    from juridico_app.models.user import UserRole
    from juridico_app.schemas.user import UserCreate

    try:
        user_role = UserRole(role)
    except ValueError:
        rprint(f"[red]Invalid role: {role}[/red]")
        raise typer.Exit(1)

    db = get_db()

    try:
        service = UserService(db)
        data = UserCreate(
            username=username,
            password=password,
            role=user_role,
            email=email,
            first_name=first_name,
            last_name=last_name,
        )
        try:
            user = service.create_user(data, actor=None)
        except DomainException as e:
            rprint(f"[red]{e.message}[/red]")
            raise typer.Exit(1)

        rprint(f"[green]Created user {user.username}[/green] ({user.role})")
        rprint(f"  ID: {user.id}")

    finally:
        db.close()


@app.command()
def set_status_permissions(
    username: str = typer.Argument(..., help="Login name"),
    allow: List[str] = typer.Option([], "--allow", help="Status the user may move cases to (repeatable)"),
    deny: List[str] = typer.Option([], "--deny", help="Status the user may not move cases to (repeatable)"),
    reset: bool = typer.Option(False, "--reset", help="Drop all overrides and use the role defaults"),
):
    """
    Grant or revoke status transitions for a single user.

    Example: juridico-cli set-status-permissions maria --allow andamento --allow pendente
    """
    from juridico_app.application.services import UserService
    from juridico_app.domain.case.permissions import STATUS_OVERRIDES_KEY, get_status_permissions

    overrides: dict[str, bool] = {}
    for value, allowed in [(v, True) for v in allow] + [(v, False) for v in deny]:
        status = CaseStatus.parse(value)
        if status is None:
            rprint(f"[red]Invalid status: {value}[/red]")
            raise typer.Exit(1)
        overrides[status.value] = allowed

    if not overrides and not reset:
        rprint("[yellow]Nothing to change; pass --allow, --deny or --reset[/yellow]")
        raise typer.Exit(1)

    db = get_db()

    try:
        service = UserService(db)
        user = service.get_by_username(username)
        if not user:
            rprint(f"[red]User not found: {username}[/red]")
            raise typer.Exit(1)

        if not reset:
            current = (user.permissions or {}).get(STATUS_OVERRIDES_KEY) or {}
            overrides = {**current, **overrides}

        user = service.set_status_overrides(user.id, overrides, actor=None)

        table = Table(title=f"Status permissions for {user.username} ({user.role})")
        table.add_column("Permission")
        table.add_column("Allowed")
        for key, allowed in get_status_permissions(user).to_dict().items():
            table.add_row(key, "[green]yes[/green]" if allowed else "[red]no[/red]")
        console.print(table)

    finally:
        db.close()


@app.command()
def list_cases(
    status: Optional[str] = typer.Option(None, help="Filter by stored status"),
    bucket: Optional[str] = typer.Option(None, help="Filter by bucket (novo, pendente, atrasado, concluido)"),
    search: Optional[str] = typer.Option(None, help="Client name or process number"),
    limit: int = typer.Option(50, help="Maximum number of cases to show"),
):
    """
    List cases with their deadline bucket.
    """
    from juridico_app.application.services import CaseService

    if bucket and bucket not in {b.value for b in Bucket}:
        rprint(f"[yellow]Unknown bucket: {bucket}[/yellow]")
        raise typer.Exit(1)

    db = get_db()

    try:
        service = CaseService(db)
        now = service.clock()
        cases = service.list_cases(status=status, search=search, bucket=bucket, limit=limit)

        if not cases:
            rprint("[yellow]No cases found[/yellow]")
            raise typer.Exit(0)

        table = Table(title="Cases")
        table.add_column("ID", style="dim")
        table.add_column("Process")
        table.add_column("Client")
        table.add_column("Status")
        table.add_column("Bucket")
        table.add_column("Due")

        for case in cases:
            case_bucket = service.bucket_for(case, now)
            table.add_row(
                str(case.id)[:8] + "...",
                case.process_number,
                case.client_name,
                case.status,
                f"[{BUCKET_STYLES[case_bucket]}]{case_bucket.value}[/{BUCKET_STYLES[case_bucket]}]",
                case.due_date.strftime("%d/%m/%Y") if case.due_date else "-",
            )

        console.print(table)

    finally:
        db.close()


if __name__ == "__main__":
    app()
