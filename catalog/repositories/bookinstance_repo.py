from sqlalchemy.orm import joinedload

from catalog.models.bookinstance import BookInstance, STATUS_AVAILABLE
from catalog.repositories.base_repo import BaseRepo


class BookInstanceRepo(BaseRepo):
    model = BookInstance
    entity_name = "BookInstance"

    loaders = {
        "book": lambda: joinedload(BookInstance.book),
    }

    @staticmethod
    def list_with_book():
        return BookInstanceRepo.find_all(sort=["id"], populate=["book"])

    @staticmethod
    def find_by_book(book_id: int):
        return BookInstanceRepo.find_all(filters={"book_id": book_id}, sort=["id"])

    @staticmethod
    def count_available() -> int:
        return BookInstanceRepo.count({"status": STATUS_AVAILABLE})
