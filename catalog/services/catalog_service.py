from catalog.library_db import run_parallel
from catalog.repositories.author_repo import AuthorRepo
from catalog.repositories.book_repo import BookRepo
from catalog.repositories.bookinstance_repo import BookInstanceRepo
from catalog.repositories.genre_repo import GenreRepo


class CatalogService:
    @staticmethod
    def summary_counts() -> dict:
        (
            book_count,
            author_count,
            book_instance_count,
            book_instance_available_count,
            genre_count,
        ) = run_parallel(
            BookRepo.count,
            AuthorRepo.count,
            BookInstanceRepo.count,
            BookInstanceRepo.count_available,
            GenreRepo.count,
        )
        return {
            "book_count": book_count,
            "author_count": author_count,
            "book_instance_count": book_instance_count,
            "book_instance_available_count": book_instance_available_count,
            "genre_count": genre_count,
        }
