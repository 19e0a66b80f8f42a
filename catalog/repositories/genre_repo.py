from sqlalchemy import func

from catalog.models.genre import Genre
from catalog.repositories.base_repo import BaseRepo


class GenreRepo(BaseRepo):
    model = Genre
    entity_name = "Genre"

    @staticmethod
    def list_sorted():
        return GenreRepo.find_all(sort=["name"])

    @staticmethod
    def find_by_name(name: str):
        return Genre.query.filter(func.lower(Genre.name) == name.lower()).first()

    @staticmethod
    def find_by_ids(genre_ids):
        if not genre_ids:
            return []
        return Genre.query.filter(Genre.id.in_(genre_ids)).all()
