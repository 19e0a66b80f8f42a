# catalog/errors.py
from flask import render_template
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException


class CatalogError(Exception):
    status_code = 500
    message = "Something went wrong"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class NotFoundError(CatalogError):
    status_code = 404

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class DatabaseConnectionError(CatalogError, ConnectionError):
    message = "Database is unreachable"


def _render_error(message: str, status: int, headers=None):
    body = render_template("error.html", title="Error", message=message, status=status)
    return body, status, headers or {}


def register_error_handlers(app):
    """
    All handler errors end up here instead of being caught in the views.
    The user only ever sees a generic message; details go to the log.
    """

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        app.logger.info(f"[errors] {e.entity} #{e.entity_id} not found")
        return _render_error(e.message, e.status_code)

    @app.errorhandler(DatabaseConnectionError)
    def _db_down(e: DatabaseConnectionError):
        app.logger.error(f"[errors] {e}")
        return _render_error("Something went wrong", e.status_code)

    @app.errorhandler(SQLAlchemyError)
    def _db_error(e: SQLAlchemyError):
        app.logger.exception(f"[errors] database error: {e}")
        return _render_error("Something went wrong", 500)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        # keeps headers such as Allow on a 405
        return _render_error(e.description or e.name, e.code or 500, e.get_headers())

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        app.logger.exception(f"[errors] unhandled error: {e}")
        return _render_error("Something went wrong", 500)
