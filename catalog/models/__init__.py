from catalog.models.author import Author
from catalog.models.genre import Genre
from catalog.models.book import Book, BookGenre
from catalog.models.bookinstance import BookInstance, STATUSES

__all__ = ["Author", "Genre", "Book", "BookGenre", "BookInstance", "STATUSES"]
