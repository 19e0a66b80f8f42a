# catalog/controllers/genre_controller.py

from flask import Blueprint, render_template, redirect

from catalog.services.forms import GenreForm
from catalog.services.genre_service import GenreService
from catalog.utils.decorators import uses_database

genre_bp = Blueprint("genres", __name__)


@genre_bp.get("/genres")
@uses_database
def genre_list():
    genres = GenreService.list_genres()
    return render_template("genre_list.html", title="Genre List", genre_list=genres)


@genre_bp.get("/genre/<int:genre_id>")
@uses_database
def genre_detail(genre_id: int):
    genre, books = GenreService.get_genre_detail(genre_id)
    return render_template("genre_detail.html", title="Genre Detail", genre=genre, genre_books=books)


@genre_bp.get("/genre/create")
def genre_create_get():
    return render_template("genre_form.html", title="Create Genre", form=GenreForm())


@genre_bp.post("/genre/create")
@uses_database
def genre_create_post():
    genre, form = GenreService.create_genre(GenreForm())
    if genre is None:
        return render_template(
            "genre_form.html",
            title="Create Genre",
            form=form,
            errors=form.field_errors(),
        )
    return redirect(genre.url, code=303)


@genre_bp.get("/genre/<int:genre_id>/delete")
def genre_delete_get(genre_id: int):
    return "NOT IMPLEMENTED: Genre delete GET"


@genre_bp.post("/genre/<int:genre_id>/delete")
def genre_delete_post(genre_id: int):
    return "NOT IMPLEMENTED: Genre delete POST"


@genre_bp.get("/genre/<int:genre_id>/update")
def genre_update_get(genre_id: int):
    return "NOT IMPLEMENTED: Genre update GET"


@genre_bp.post("/genre/<int:genre_id>/update")
def genre_update_post(genre_id: int):
    return "NOT IMPLEMENTED: Genre update POST"
