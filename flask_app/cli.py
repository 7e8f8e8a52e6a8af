import click
from flask.cli import with_appcontext

from domain import services
from domain.core.errors import ConflictError
from infrastructure.db.base import Base
from infrastructure.db.engine import engine, SessionLocal


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables."""
    Base.metadata.create_all(bind=engine)
    click.echo("Database initialized")


@click.command("create-admin")
@click.argument("username")
@click.password_option()
@with_appcontext
def create_admin_command(username: str, password: str):
    """Create an admin account."""
    db = SessionLocal()
    try:
        admin_id = services.create_admin(db, username, password)
        db.commit()
    except ConflictError as e:
        db.rollback()
        raise click.ClickException(str(e))
    finally:
        db.close()

    click.echo(f"Admin {username} created with id={admin_id}")


@click.command("update-analytics")
@with_appcontext
def update_analytics_command():
    """Recompute the dashboard analytics snapshot now."""
    db = SessionLocal()
    try:
        snapshot = services.update_dashboard_analytics(db)
        if snapshot is None:
            db.rollback()
            raise click.ClickException("Analytics update failed")
        db.commit()
    finally:
        db.close()

    click.echo(f"Analytics updated at {snapshot.updated_at.isoformat()}")
