from catalog.extensions import db


class Genre(db.Model):
    __tablename__ = "genres"

    id = db.Column(db.Integer, primary_key=True)
    # unique by convention only (see GenreService.create_genre)
    name = db.Column(db.String(100), nullable=False, index=True)

    @property
    def url(self) -> str:
        return f"/genre/{self.id}"

    def __repr__(self):
        return f"Genre(id = {self.id}, name = {self.name})"
