# tests/test_repositories.py
import pytest

from catalog.errors import NotFoundError
from catalog.models import Book, Genre
from catalog.repositories.author_repo import AuthorRepo
from catalog.repositories.book_repo import BookRepo
from catalog.repositories.bookinstance_repo import BookInstanceRepo
from catalog.repositories.genre_repo import GenreRepo


def test_counts_on_empty_store(app):
    with app.app_context():
        assert BookRepo.count() == 0
        assert AuthorRepo.count() == 0
        assert GenreRepo.count() == 0
        assert BookInstanceRepo.count() == 0
        assert BookInstanceRepo.count_available() == 0


def test_count_with_filter(app, seed_books):
    with app.app_context():
        assert BookInstanceRepo.count() == 3
        assert BookInstanceRepo.count({"status": "Loaned"}) == 1
        assert BookInstanceRepo.count_available() == 1


def test_find_all_sorted(app, seed):
    with app.app_context():
        assert [g.name for g in GenreRepo.list_sorted()] == ["Fantasy", "Poetry", "Science Fiction"]
        assert [g.name for g in GenreRepo.find_all(sort=["-name"])] == ["Science Fiction", "Poetry", "Fantasy"]
        assert [a.family_name for a in AuthorRepo.list_sorted()] == ["Herbert", "LeGuin"]


def test_find_all_with_filter(app, seed_books):
    with app.app_context():
        books = BookRepo.find_all(filters={"author_id": seed_books.herbert})
        assert [b.title for b in books] == ["Dune"]


def test_find_by_id_populates_references(app, seed_books):
    with app.app_context():
        book = BookRepo.find_by_id(seed_books.earthsea, populate=["author", "genre"])
        assert book.author.name == "LeGuin, Ursula"
        assert [g.name for g in book.genre] == ["Fantasy", "Science Fiction"]


def test_find_by_id_missing(app):
    with app.app_context():
        assert BookRepo.find_by_id(404) is None
        with pytest.raises(NotFoundError) as exc:
            BookRepo.require(404)
        assert exc.value.entity == "Book"
        assert exc.value.status_code == 404


def test_list_with_author_is_sorted_by_title(app, seed_books):
    with app.app_context():
        books = BookRepo.list_with_author()
        assert [b.title for b in books] == ["A Wizard of Earthsea", "Dune"]
        assert books[1].author.family_name == "Herbert"


def test_find_by_author_and_genre(app, seed_books):
    with app.app_context():
        assert [b.title for b in BookRepo.find_by_author(seed_books.le_guin)] == ["A Wizard of Earthsea"]
        assert [b.title for b in BookRepo.find_by_genre(seed_books.scifi)] == ["A Wizard of Earthsea", "Dune"]
        assert BookRepo.find_by_genre(seed_books.poetry) == []


def test_find_by_book(app, seed_books):
    with app.app_context():
        copies = BookInstanceRepo.find_by_book(seed_books.dune)
        assert [c.imprint for c in copies] == ["Ace, 1990", "Ace, 2005"]


def test_genre_find_by_name_ignores_case(app, seed):
    with app.app_context():
        assert GenreRepo.find_by_name("fantasy").id == seed.fantasy
        assert GenreRepo.find_by_name("Horror") is None


def test_save_persists(app, seed):
    with app.app_context():
        genre = GenreRepo.save(Genre(name="Horror"))
        assert genre.id is not None
    with app.app_context():
        assert GenreRepo.find_by_name("horror") is not None


def test_set_genres_drops_repeats_and_keeps_order(app, seed):
    with app.app_context():
        poetry = GenreRepo.find_by_id(seed.poetry)
        scifi = GenreRepo.find_by_id(seed.scifi)
        book = Book(title="Mixed", summary="Odd mixture", isbn="1")
        book.set_genres([poetry, scifi, poetry])
        BookRepo.save(book)
        book_id = book.id
    with app.app_context():
        stored = BookRepo.find_by_id(book_id, populate=["genre"])
        assert stored.genre_ids == [seed.poetry, seed.scifi]
