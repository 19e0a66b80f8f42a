# tests/conftest.py
from datetime import date
from types import SimpleNamespace

import pytest

from catalog import create_app
from catalog.config import TestingConfig
from catalog.extensions import db
from catalog.models import Author, Book, BookInstance, Genre


@pytest.fixture
def app(tmp_path):
    """App bound to a fresh SQLite file per test."""
    db_file = tmp_path / "library_test.db"
    app = create_app(TestingConfig, SQLALCHEMY_DATABASE_URI=f"sqlite:///{db_file}")
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed(app):
    """Two authors and three genres; returns their ids."""
    with app.app_context():
        herbert = Author(
            first_name="Frank",
            family_name="Herbert",
            date_of_birth=date(1920, 10, 8),
            date_of_death=date(1986, 2, 11),
        )
        le_guin = Author(first_name="Ursula", family_name="LeGuin", date_of_birth=date(1929, 10, 21))
        scifi = Genre(name="Science Fiction")
        fantasy = Genre(name="Fantasy")
        poetry = Genre(name="Poetry")
        db.session.add_all([herbert, le_guin, scifi, fantasy, poetry])
        db.session.commit()

        return SimpleNamespace(
            herbert=herbert.id,
            le_guin=le_guin.id,
            scifi=scifi.id,
            fantasy=fantasy.id,
            poetry=poetry.id,
        )


@pytest.fixture
def seed_books(app, seed):
    """Adds two books and three copies (one available) on top of ``seed``."""
    with app.app_context():
        dune = Book(
            title="Dune",
            summary="A desert planet saga.",
            isbn="9780441013593",
            author_id=seed.herbert,
        )
        dune.set_genres([db.session.get(Genre, seed.scifi)])
        earthsea = Book(
            title="A Wizard of Earthsea",
            summary="A young mage learns the cost of power.",
            isbn="9780547773742",
            author_id=seed.le_guin,
        )
        earthsea.set_genres([db.session.get(Genre, seed.fantasy), db.session.get(Genre, seed.scifi)])
        db.session.add_all([dune, earthsea])
        db.session.flush()

        db.session.add_all([
            BookInstance(book_id=dune.id, imprint="Ace, 1990", status="Available"),
            BookInstance(book_id=dune.id, imprint="Ace, 2005", status="Loaned", due_back=date(2026, 11, 1)),
            BookInstance(book_id=earthsea.id, imprint="Parnassus, 1968", status="Maintenance"),
        ])
        db.session.commit()

        seed.dune = dune.id
        seed.earthsea = earthsea.id
        return seed


@pytest.fixture
def count_rows(app):
    def _count(model) -> int:
        with app.app_context():
            return db.session.query(model).count()
    return _count
