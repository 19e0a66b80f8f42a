from catalog.extensions import db


class Author(db.Model):
    __tablename__ = "authors"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    family_name = db.Column(db.String(100), nullable=False, index=True)
    date_of_birth = db.Column(db.Date, nullable=True)
    date_of_death = db.Column(db.Date, nullable=True)

    books = db.relationship("Book", back_populates="author")

    @property
    def name(self) -> str:
        # empty when either part is missing, so lists don't show a lone comma
        if not self.first_name or not self.family_name:
            return ""
        return f"{self.family_name}, {self.first_name}"

    @property
    def lifespan(self) -> str:
        born = self.date_of_birth.isoformat() if self.date_of_birth else ""
        died = self.date_of_death.isoformat() if self.date_of_death else ""
        return f"{born} - {died}"

    @property
    def url(self) -> str:
        return f"/author/{self.id}"

    def __repr__(self):
        return f"Author(id = {self.id}, name = {self.name})"
