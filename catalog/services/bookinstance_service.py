from flask import current_app

from catalog.models.bookinstance import BookInstance, STATUS_MAINTENANCE, STATUSES
from catalog.repositories.book_repo import BookRepo
from catalog.repositories.bookinstance_repo import BookInstanceRepo
from catalog.utils.validators import parse_id


class BookInstanceService:
    statuses = STATUSES

    @staticmethod
    def list_instances():
        return BookInstanceRepo.list_with_book()

    @staticmethod
    def get_instance_detail(instance_id: int):
        return BookInstanceRepo.require(instance_id, populate=["book"])

    @staticmethod
    def form_choices():
        return BookRepo.find_all(sort=["title"], columns=["title"])

    @staticmethod
    def create_instance(form):
        form.validate()
        values = form.values()

        book = None
        if values["book"]:
            book_id = parse_id(values["book"])
            book = BookRepo.find_by_id(book_id) if book_id else None
            if book is None:
                form.add_error("book", "Book not found")

        if not form.is_valid:
            current_app.logger.info(
                f"[bookinstance] Create rejected: {', '.join(e['field'] for e in form.field_errors())}"
            )
            return None, form

        instance = BookInstance(
            book=book,
            imprint=values["imprint"],
            status=values["status"] or STATUS_MAINTENANCE,
        )
        # due_back falls back to the column default (today)
        if values["due_back"]:
            instance.due_back = values["due_back"]
        BookInstanceRepo.save(instance)

        current_app.logger.info(f"[bookinstance] Created copy #{instance.id} of book #{book.id}")
        return instance, form
