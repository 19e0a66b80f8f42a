# catalog/controllers/bookinstance_controller.py

from flask import Blueprint, render_template, redirect

from catalog.services.bookinstance_service import BookInstanceService
from catalog.services.forms import BookInstanceForm
from catalog.utils.decorators import uses_database

bookinstance_bp = Blueprint("bookinstances", __name__)


@bookinstance_bp.get("/bookinstances")
@uses_database
def bookinstance_list():
    instances = BookInstanceService.list_instances()
    return render_template(
        "bookinstance_list.html", title="Book Instance List", bookinstance_list=instances
    )


@bookinstance_bp.get("/bookinstance/<int:instance_id>")
@uses_database
def bookinstance_detail(instance_id: int):
    instance = BookInstanceService.get_instance_detail(instance_id)
    return render_template("bookinstance_detail.html", title="Book:", bookinstance=instance)


@bookinstance_bp.get("/bookinstance/create")
@uses_database
def bookinstance_create_get():
    books = BookInstanceService.form_choices()
    return render_template(
        "bookinstance_form.html",
        title="Create BookInstance",
        form=BookInstanceForm(),
        book_list=books,
        statuses=BookInstanceService.statuses,
    )


@bookinstance_bp.post("/bookinstance/create")
@uses_database
def bookinstance_create_post():
    instance, form = BookInstanceService.create_instance(BookInstanceForm())
    if instance is None:
        return render_template(
            "bookinstance_form.html",
            title="Create BookInstance",
            book_list=BookInstanceService.form_choices(),
            statuses=BookInstanceService.statuses,
            form=form,
            errors=form.field_errors(),
        )
    return redirect(instance.url, code=303)


@bookinstance_bp.get("/bookinstance/<int:instance_id>/delete")
def bookinstance_delete_get(instance_id: int):
    return "NOT IMPLEMENTED: BookInstance delete GET"


@bookinstance_bp.post("/bookinstance/<int:instance_id>/delete")
def bookinstance_delete_post(instance_id: int):
    return "NOT IMPLEMENTED: BookInstance delete POST"


@bookinstance_bp.get("/bookinstance/<int:instance_id>/update")
def bookinstance_update_get(instance_id: int):
    return "NOT IMPLEMENTED: BookInstance update GET"


@bookinstance_bp.post("/bookinstance/<int:instance_id>/update")
def bookinstance_update_post(instance_id: int):
    return "NOT IMPLEMENTED: BookInstance update POST"
