from sqlalchemy.orm import joinedload, load_only, selectinload

from catalog.models.book import Book, BookGenre
from catalog.repositories.base_repo import BaseRepo


class BookRepo(BaseRepo):
    model = Book
    entity_name = "Book"

    loaders = {
        "author": lambda: joinedload(Book.author),
        "genre": lambda: selectinload(Book.genre_links).joinedload(BookGenre.genre),
    }

    @staticmethod
    def list_with_author():
        return BookRepo.find_all(sort=["title"], columns=["title", "author_id"], populate=["author"])

    @staticmethod
    def find_by_author(author_id: int):
        return BookRepo.find_all(
            filters={"author_id": author_id},
            sort=["title"],
            columns=["title", "summary"],
        )

    @staticmethod
    def find_by_genre(genre_id: int):
        return (
            Book.query
            .join(BookGenre, BookGenre.book_id == Book.id)
            .filter(BookGenre.genre_id == genre_id)
            .options(load_only(Book.title, Book.summary))
            .order_by(Book.title.asc())
            .all()
        )
