from datetime import date
from catalog.extensions import db

STATUS_AVAILABLE = "Available"
STATUS_MAINTENANCE = "Maintenance"
STATUS_LOANED = "Loaned"
STATUS_RESERVED = "Reserved"

STATUSES = (STATUS_AVAILABLE, STATUS_MAINTENANCE, STATUS_LOANED, STATUS_RESERVED)


class BookInstance(db.Model):
    __tablename__ = "book_instances"

    id = db.Column(db.Integer, primary_key=True)

    book_id = db.Column(db.Integer, db.ForeignKey("books.id"), nullable=False, index=True)
    imprint = db.Column(db.String(200), nullable=False)
    status = db.Column(
        db.Enum(*STATUSES, name="book_instance_status"),
        nullable=False,
        default=STATUS_MAINTENANCE,
        index=True,
    )
    due_back = db.Column(db.Date, nullable=False, default=date.today)

    book = db.relationship("Book", back_populates="instances")

    @property
    def url(self) -> str:
        return f"/bookinstance/{self.id}"

    @property
    def due_back_formatted(self) -> str:
        if not self.due_back:
            return ""
        return f"{self.due_back.strftime('%b')} {self.due_back.day}, {self.due_back.year}"
