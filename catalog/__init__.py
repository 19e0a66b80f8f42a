import logging

from flask import Flask
from catalog.config import Config
from catalog.extensions import db, migrate

from catalog.db_schema import ensure_db_objects
from catalog.errors import register_error_handlers


def create_app(config_object=Config, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # 1) db init first, everything below needs db.engine / db.session
    db.init_app(app)
    migrate.init_app(app, db)

    # 2) tables
    ensure_db_objects(app)

    # 3) blueprints
    from catalog.controllers.catalog_controller import catalog_bp
    from catalog.controllers.book_controller import book_bp
    from catalog.controllers.author_controller import author_bp
    from catalog.controllers.genre_controller import genre_bp
    from catalog.controllers.bookinstance_controller import bookinstance_bp
    app.register_blueprint(catalog_bp)
    app.register_blueprint(book_bp)
    app.register_blueprint(author_bp)
    app.register_blueprint(genre_bp)
    app.register_blueprint(bookinstance_bp)

    # 4) one place for every handler error
    register_error_handlers(app)

    return app
