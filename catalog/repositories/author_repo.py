from catalog.models.author import Author
from catalog.repositories.base_repo import BaseRepo


class AuthorRepo(BaseRepo):
    model = Author
    entity_name = "Author"

    @staticmethod
    def list_sorted():
        return AuthorRepo.find_all(sort=["family_name"])
