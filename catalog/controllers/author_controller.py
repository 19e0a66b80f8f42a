# catalog/controllers/author_controller.py

from flask import Blueprint, render_template, redirect

from catalog.services.author_service import AuthorService
from catalog.services.forms import AuthorForm
from catalog.utils.decorators import uses_database

author_bp = Blueprint("authors", __name__)


@author_bp.get("/authors")
@uses_database
def author_list():
    authors = AuthorService.list_authors()
    return render_template("author_list.html", title="Author List", author_list=authors)


@author_bp.get("/author/<int:author_id>")
@uses_database
def author_detail(author_id: int):
    author, books = AuthorService.get_author_detail(author_id)
    return render_template("author_detail.html", title="Author Detail", author=author, author_books=books)


@author_bp.get("/author/create")
def author_create_get():
    return render_template("author_form.html", title="Create Author", form=AuthorForm())


@author_bp.post("/author/create")
@uses_database
def author_create_post():
    author, form = AuthorService.create_author(AuthorForm())
    if author is None:
        return render_template(
            "author_form.html",
            title="Create Author",
            form=form,
            errors=form.field_errors(),
        )
    return redirect(author.url, code=303)


@author_bp.get("/author/<int:author_id>/delete")
def author_delete_get(author_id: int):
    return "NOT IMPLEMENTED: Author delete GET"


@author_bp.post("/author/<int:author_id>/delete")
def author_delete_post(author_id: int):
    return "NOT IMPLEMENTED: Author delete POST"


@author_bp.get("/author/<int:author_id>/update")
def author_update_get(author_id: int):
    return "NOT IMPLEMENTED: Author update GET"


@author_bp.post("/author/<int:author_id>/update")
def author_update_post(author_id: int):
    return "NOT IMPLEMENTED: Author update POST"
