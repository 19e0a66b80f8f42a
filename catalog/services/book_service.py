from flask import current_app

from catalog.errors import NotFoundError
from catalog.library_db import run_parallel
from catalog.models.book import Book
from catalog.repositories.author_repo import AuthorRepo
from catalog.repositories.book_repo import BookRepo
from catalog.repositories.bookinstance_repo import BookInstanceRepo
from catalog.repositories.genre_repo import GenreRepo
from catalog.utils.validators import parse_id


class BookService:
    @staticmethod
    def list_books():
        return BookRepo.list_with_author()

    @staticmethod
    def get_book_detail(book_id: int):
        book, instances = run_parallel(
            lambda: BookRepo.find_by_id(book_id, populate=["author", "genre"]),
            lambda: BookInstanceRepo.find_by_book(book_id),
        )
        if book is None:
            raise NotFoundError("Book", book_id)
        return book, instances

    @staticmethod
    def form_choices(selected_genres=()):
        """
        Authors and genres for the book form.
        Genres come back as dicts with a ``checked`` flag for the ones
        previously selected, so a re-rendered form keeps the user's ticks.
        """
        authors, genres = run_parallel(AuthorRepo.list_sorted, GenreRepo.list_sorted)
        selected = {str(g) for g in selected_genres or ()}
        genre_choices = [
            {"id": g.id, "name": g.name, "checked": str(g.id) in selected}
            for g in genres
        ]
        return authors, genre_choices

    @staticmethod
    def create_book(form):
        """
        form: a submitted BookForm
        return: (book or None, form)
        The book is only persisted when the form is valid and every
        referenced author and genre exists.
        """
        form.validate()
        values = form.values()

        author = None
        if values["author"]:
            author_id = parse_id(values["author"])
            author = AuthorRepo.find_by_id(author_id) if author_id else None
            if author is None:
                form.add_error("author", "Author not found")

        genre_ids = [parse_id(g) for g in values["genre"]]
        found = {g.id: g for g in GenreRepo.find_by_ids([i for i in genre_ids if i])}
        if any(i not in found for i in genre_ids):
            form.add_error("genre", "Genre not found")

        if not form.is_valid:
            current_app.logger.info(
                f"[book] Create rejected: {', '.join(e['field'] for e in form.field_errors())}"
            )
            return None, form

        book = Book(
            title=values["title"],
            summary=values["summary"],
            isbn=values["isbn"],
            author=author,
        )
        book.set_genres([found[i] for i in genre_ids])
        BookRepo.save(book)

        current_app.logger.info(f"[book] Created book #{book.id} '{book.title}'")
        return book, form
