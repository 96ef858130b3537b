from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()


def create_app(config_class=Config, line_client=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS') or [])

    # Credentials are resolved once per process; a missing value aborts startup
    from app.services.line import LineCredentials, LineMessagingClient
    from app.services.notifications import NotificationRelay

    if line_client is None:
        credentials = LineCredentials.from_config(flask_app.config)
        line_client = LineMessagingClient(
            credentials,
            base_url=flask_app.config.get('LINE_API_BASE_URL', 'https://api.line.me'),
            timeout=flask_app.config.get('LINE_TIMEOUT_SEC', 10.0),
        )
    flask_app.extensions['notification_relay'] = NotificationRelay(line_client)

    # Import and register blueprints here
    from app.routes import main
    flask_app.register_blueprint(main)

    from app.api.notify import notify
    flask_app.register_blueprint(notify, url_prefix='/api')

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the database tables."""
        import app.models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            click.echo('Database has been reset!')

    @click.command('users-add')
    @click.argument('user_id')
    @click.option('--line-user-id', default=None, help='LINE user id to push notifications to.')
    @click.option('--display-name', default=None)
    def users_add_command(user_id, line_user_id, display_name):
        """Creates or updates a user record."""
        from app.models import User
        with flask_app.app_context():
            user = User.query.filter_by(id=user_id).first()
            created = user is None
            if created:
                user = User(id=user_id)
            if line_user_id is not None:
                user.line_user_id = line_user_id
            if display_name is not None:
                user.display_name = display_name
            db.session.add(user)
            db.session.commit()
            click.echo(f"{'Created' if created else 'Updated'} user {user_id}")

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(users_add_command)

    return flask_app
