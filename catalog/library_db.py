# catalog/library_db.py
"""
Per-request database session handling.

Views never open or close the session themselves: they are wrapped with
``uses_database`` (see catalog/utils/decorators.py), which runs them inside
``session_scope()``. Independent read queries of one request go through
``run_parallel``.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager

from flask import current_app
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError

from catalog.errors import DatabaseConnectionError
from catalog.extensions import db


def connect():
    """
    Ping the store and hand back the session of the current app context.

    The ping runs on a connection of its own that goes straight back to the
    pool; the session only checks one out when its first query runs.
    """
    try:
        with db.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except DBAPIError as e:
        current_app.logger.error(f"[library_db] Database unreachable: {e}")
        raise DatabaseConnectionError() from e
    return db.session


def close():
    # remove() closes the session, which also rolls back anything not committed
    db.session.remove()


@contextmanager
def session_scope():
    session = connect()
    try:
        yield session
    finally:
        close()


def run_parallel(*queries):
    """
    Run independent read queries concurrently and wait for all of them.

    Every query is a zero-argument callable. Results come back in argument
    order; the first exception raised by a query is re-raised here.
    """
    workers = int(current_app.config.get("CATALOG_QUERY_WORKERS", 1) or 1)
    if workers <= 1 or len(queries) < 2:
        return [query() for query in queries]

    # end the caller's read transaction so its pooled connection is free
    # before the workers check out theirs
    db.session.rollback()
    app = current_app._get_current_object()

    def _run(query):
        # own app context -> own session, released on context teardown
        with app.app_context():
            return query()

    with ThreadPoolExecutor(max_workers=min(workers, len(queries))) as ex:
        futures = [ex.submit(_run, query) for query in queries]
        return [f.result() for f in futures]
