import click
from datetime import datetime
from flask.cli import with_appcontext

from app.config import Config
from app.extensions import db
from app.models.notification import NotificationType
from app.services.api_client import APIClient
from app.services.container import container
from app.services.session_service import SessionManager
from app.services.session_store import FileSessionStore

@click.command('init-db')
@with_appcontext
def init_db_command():
    """Initialize the database tables."""
    click.echo('Initializing the database...')

    # Create all tables
    db.create_all()

    click.echo('Database initialized successfully!')

@click.command('notify')
@click.option('--user-id', type=int, required=True, help='Recipient of the notification')
@click.option('--actor-id', type=int, required=True, help='User who performed the action')
@click.option('--post-id', type=int, required=True, help='Post the action was performed on')
@click.option('--type', 'notification_type', type=click.Choice(NotificationType.values()), required=True)
@with_appcontext
def notify_command(user_id, actor_id, post_id, notification_type):
    """Create a notification (skipped for self-actions and recent duplicates)."""
    started = datetime.utcnow()
    container().get('notification_service').create_notification(user_id, actor_id, post_id, notification_type)
    created = container().get('notification_repository').find_recent(
        user_id, actor_id, post_id, notification_type, since=started
    )

    if created is not None:
        click.echo(f"Created {notification_type} notification for user {user_id}")
    else:
        click.echo("No notification created")

def register_commands(app):
    """Register CLI commands with the Flask application."""
    app.cli.add_command(init_db_command)
    app.cli.add_command(notify_command)


@click.group('session')
@click.option('--api-url', envvar='API_BASE_URL', default=Config.API_BASE_URL, show_default=True,
              help='Base URL of the remote API')
@click.option('--session-file', envvar='POSTBOARD_SESSION_FILE', default=Config.SESSION_FILE,
              type=click.Path(dir_okay=False), help='Where the session is stored')
@click.pass_context
def session_cli(ctx, api_url, session_file):
    """Manage the local login session."""
    ctx.obj = SessionManager(APIClient(api_url, timeout=Config.API_TIMEOUT), FileSessionStore(session_file))

def _report(result):
    if result.success:
        return
    click.echo(result.message, err=True)
    raise SystemExit(1)

@session_cli.command('login')
@click.option('--email', prompt=True)
@click.option('--password', prompt=True, hide_input=True)
@click.pass_obj
def login_command(session, email, password):
    """Log in and store the session."""
    result = session.login(email, password)
    _report(result)
    name = session.get_username() or session.get_user_id()
    click.echo(f"Logged in as {name}")

@session_cli.command('register')
@click.option('--username', prompt=True)
@click.option('--email', prompt=True)
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
@click.pass_obj
def register_command(session, username, email, password):
    """Create an account. Log in afterwards with `login`."""
    result = session.register(username, email, password)
    _report(result)
    click.echo(f"Account {username} registered, you can now log in")

@session_cli.command('logout')
@click.pass_obj
def logout_command(session):
    """Remove the stored session."""
    session.logout()
    click.echo("Logged out")

@session_cli.command('status')
@click.pass_obj
def status_command(session):
    """Show whether a session is stored."""
    if not session.is_authenticated():
        click.echo("Not logged in")
        raise SystemExit(1)
    click.echo(f"Logged in as {session.get_username() or '<unknown>'} (user id {session.get_user_id()})")
