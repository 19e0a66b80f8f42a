from functools import wraps

from catalog import library_db


def uses_database(fn):
    """Run the view inside a database session that is released on every exit path."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        with library_db.session_scope():
            return fn(*args, **kwargs)
    return wrapper
