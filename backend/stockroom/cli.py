# Overview: Flask CLI command groups for bootstrap, inspection, and maintenance.

# backend/stockroom/cli.py
# Commands Legend (run from the backend directory):
# Prereqs:
# - Activate your virtualenv.
# - Set FLASK_APP to wsgi.py (PowerShell: $env:FLASK_APP="wsgi.py").
# - Use: python -m flask <group> <command> [options]
#
# System:
# - python -m flask system init-db
#   Create any missing tables (use `flask db upgrade` for migrated deployments).
# - python -m flask system reset-db --yes
#   DEV/TEST only: drop and recreate all tables (deletes all data).
# - python -m flask system check-db
#   Verify the database connection; exits non-zero on failure.
#
# Users:
# - python -m flask users list
# - python -m flask users create --username admin --password secret
#
# Stock:
# - python -m flask stock list

import click
from flask.cli import with_appcontext
from sqlalchemy import text

from .errors import ApiError
from .extensions import db
from .models import StockItem, User
from .services import auth_service


@click.group('system')
def system_group():
    """Database bootstrap and connectivity commands."""


@system_group.command('init-db')
@with_appcontext
def init_db():
    """Create all tables that do not exist yet."""
    db.create_all()
    click.echo("PASS Tables created.")


@system_group.command('reset-db')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def reset_db(yes):
    """
    DANGER: Drop all tables and recreate schema.

    This will DELETE ALL DATA! Uploaded image files are left in place.
    """
    if not yes:
        click.confirm("WARN This will DELETE ALL DATA. Are you sure?", abort=True)

    click.echo("DELETE  Dropping all tables...")
    db.drop_all()

    click.echo("BUILD  Creating all tables...")
    db.create_all()

    click.echo("PASS Database reset complete.")


@system_group.command('check-db')
@with_appcontext
def check_db():
    """Open a connection and run a trivial query."""
    try:
        db.session.execute(text("SELECT 1"))
    except Exception as e:
        raise click.ClickException(f"Database connection failed: {e}")
    click.echo("PASS Database connection successful")


@click.group('users')
def users_group():
    """User inspection and bootstrap."""


@users_group.command('list')
@with_appcontext
def list_users():
    users = db.session.query(User).order_by(User.username.asc()).all()
    if not users:
        click.echo("No users.")
        return
    for user in users:
        click.echo(f"{user.id:>4}  {user.username:<32} created {user.created_at:%Y-%m-%d %H:%M}")


@users_group.command('create')
@click.option('--username', prompt=True)
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
@with_appcontext
def create_user(username, password):
    """Register a user the same way POST /api/register does."""
    try:
        result = auth_service.register(username, password)
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo(f"PASS {result['message']}: {username}")


@click.group('stock')
def stock_group():
    """Stock inspection."""


@stock_group.command('list')
@with_appcontext
def list_stock():
    items = db.session.query(StockItem).order_by(StockItem.created_at.asc()).all()
    if not items:
        click.echo("No stock items.")
        return
    for item in items:
        price = "-" if item.purchase_price is None else f"{item.purchase_price:.2f}"
        qty = "-" if item.quantity is None else item.quantity
        click.echo(f"{item.id:>4}  {item.name:<32} qty {qty:<6} price {price:<10} {item.image or '(no image)'}")


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(system_group)
    app.cli.add_command(users_group)
    app.cli.add_command(stock_group)
