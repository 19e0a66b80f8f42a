from catalog.extensions import db


class BookGenre(db.Model):
    """Book <-> Genre link; ``position`` keeps the genres in submitted order."""
    __tablename__ = "book_genres"

    book_id = db.Column(db.Integer, db.ForeignKey("books.id"), primary_key=True)
    genre_id = db.Column(db.Integer, db.ForeignKey("genres.id"), primary_key=True)
    position = db.Column(db.Integer, nullable=False, default=0)

    book = db.relationship("Book", back_populates="genre_links")
    genre = db.relationship("Genre")


class Book(db.Model):
    __tablename__ = "books"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    summary = db.Column(db.Text, nullable=False)
    isbn = db.Column(db.String(32), nullable=False, index=True)

    author_id = db.Column(db.Integer, db.ForeignKey("authors.id"), nullable=True, index=True)
    author = db.relationship("Author", back_populates="books")

    genre_links = db.relationship(
        "BookGenre",
        back_populates="book",
        order_by="BookGenre.position",
        cascade="all, delete-orphan",
    )
    instances = db.relationship("BookInstance", back_populates="book")

    @property
    def genre(self):
        return [link.genre for link in self.genre_links]

    @property
    def genre_ids(self):
        return [link.genre_id for link in self.genre_links]

    def set_genres(self, genres):
        """Replace the genre list, dropping repeats but keeping first-seen order."""
        seen = set()
        links = []
        for g in genres:
            if g.id in seen:
                continue
            seen.add(g.id)
            links.append(BookGenre(genre=g, genre_id=g.id, position=len(links)))
        self.genre_links = links

    @property
    def url(self) -> str:
        return f"/book/{self.id}"

    def __repr__(self):
        return f"Book(id = {self.id}, title = {self.title})"
