from flask import current_app

from catalog.errors import NotFoundError
from catalog.library_db import run_parallel
from catalog.models.genre import Genre
from catalog.repositories.book_repo import BookRepo
from catalog.repositories.genre_repo import GenreRepo


class GenreService:
    @staticmethod
    def list_genres():
        return GenreRepo.list_sorted()

    @staticmethod
    def get_genre_detail(genre_id: int):
        genre, books = run_parallel(
            lambda: GenreRepo.find_by_id(genre_id),
            lambda: BookRepo.find_by_genre(genre_id),
        )
        if genre is None:
            raise NotFoundError("Genre", genre_id)
        return genre, books

    @staticmethod
    def create_genre(form):
        """
        return: (genre or None, form)
        A name that already exists (ignoring case) gives back the stored genre
        instead of a second one.
        """
        if not form.validate():
            current_app.logger.info("[genre] Create rejected: name")
            return None, form

        name = form.values()["name"]
        existing = GenreRepo.find_by_name(name)
        if existing is not None:
            current_app.logger.info(f"[genre] '{name}' already exists as #{existing.id}")
            return existing, form

        genre = GenreRepo.save(Genre(name=name))
        current_app.logger.info(f"[genre] Created genre #{genre.id} '{genre.name}'")
        return genre, form
