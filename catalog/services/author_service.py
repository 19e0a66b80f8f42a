from flask import current_app

from catalog.errors import NotFoundError
from catalog.library_db import run_parallel
from catalog.models.author import Author
from catalog.repositories.author_repo import AuthorRepo
from catalog.repositories.book_repo import BookRepo


class AuthorService:
    @staticmethod
    def list_authors():
        return AuthorRepo.list_sorted()

    @staticmethod
    def get_author_detail(author_id: int):
        author, books = run_parallel(
            lambda: AuthorRepo.find_by_id(author_id),
            lambda: BookRepo.find_by_author(author_id),
        )
        if author is None:
            raise NotFoundError("Author", author_id)
        return author, books

    @staticmethod
    def create_author(form):
        if not form.validate():
            current_app.logger.info(
                f"[author] Create rejected: {', '.join(e['field'] for e in form.field_errors())}"
            )
            return None, form

        values = form.values()
        author = Author(
            first_name=values["first_name"],
            family_name=values["family_name"],
            date_of_birth=values["date_of_birth"],
            date_of_death=values["date_of_death"],
        )
        AuthorRepo.save(author)

        current_app.logger.info(f"[author] Created author #{author.id} '{author.name}'")
        return author, form
