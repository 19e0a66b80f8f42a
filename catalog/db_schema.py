from catalog.extensions import db

# model modules must be imported so their tables are on db.metadata
from catalog import models  # noqa: F401


def ensure_db_objects(app):
    """Create missing tables; existing ones are left alone (Flask-Migrate owns changes)."""
    if not app.config.get("CATALOG_CREATE_TABLES", True):
        app.logger.info("[db_schema] Table creation disabled, skipping.")
        return

    with app.app_context():
        db.create_all()
        app.logger.info("[db_schema] Tables ensured.")
