# catalog/controllers/book_controller.py

from flask import Blueprint, render_template, redirect

from catalog.services.book_service import BookService
from catalog.services.forms import BookForm
from catalog.utils.decorators import uses_database

book_bp = Blueprint("books", __name__)


@book_bp.get("/books")
@uses_database
def book_list():
    books = BookService.list_books()
    return render_template("book_list.html", title="Book List", book_list=books)


@book_bp.get("/book/<int:book_id>")
@uses_database
def book_detail(book_id: int):
    book, instances = BookService.get_book_detail(book_id)
    return render_template("book_detail.html", title=book.title, book=book, book_instances=instances)


@book_bp.get("/book/create")
@uses_database
def book_create_get():
    authors, genres = BookService.form_choices()
    return render_template(
        "book_form.html", title="Create Book", form=BookForm(), authors=authors, genres=genres
    )


@book_bp.post("/book/create")
@uses_database
def book_create_post():
    book, form = BookService.create_book(BookForm())
    if book is None:
        authors, genres = BookService.form_choices(form.genre.data)
        return render_template(
            "book_form.html",
            title="Create Book",
            form=form,
            authors=authors,
            genres=genres,
            errors=form.field_errors(),
        )
    return redirect(book.url, code=303)


@book_bp.get("/book/<int:book_id>/delete")
def book_delete_get(book_id: int):
    return "NOT IMPLEMENTED: Book delete GET"


@book_bp.post("/book/<int:book_id>/delete")
def book_delete_post(book_id: int):
    return "NOT IMPLEMENTED: Book delete POST"


@book_bp.get("/book/<int:book_id>/update")
def book_update_get(book_id: int):
    return "NOT IMPLEMENTED: Book update GET"


@book_bp.post("/book/<int:book_id>/update")
def book_update_post(book_id: int):
    return "NOT IMPLEMENTED: Book update POST"
