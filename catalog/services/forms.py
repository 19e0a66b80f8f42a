# catalog/services/forms.py
from wtforms import SelectMultipleField, StringField, TextAreaField
from wtforms.validators import AnyOf, DataRequired, Length, Optional, Regexp

from catalog.models.bookinstance import STATUSES
from catalog.utils.validators import CatalogForm, EscapedLength, IsoDateField, strip

# letters and digits only, like str.isalnum
ALPHANUMERIC = r"^[^\W_]+$"


class BookForm(CatalogForm):
    escaped_fields = ("title", "summary", "isbn", "author", "genre")

    title = StringField("Title", filters=[strip], validators=[
        DataRequired("Book title is required"),
        Length(min=3, message="Book title is required"),
        EscapedLength(200, "Book title must not exceed 200 characters"),
    ])
    summary = TextAreaField("Summary", filters=[strip], validators=[
        DataRequired("Summary is required"),
        Length(min=3, message="Summary is required"),
    ])
    isbn = StringField("ISBN", filters=[strip], validators=[
        DataRequired("ISBN is required"),
        EscapedLength(32, "ISBN must not exceed 32 characters"),
    ])
    author = StringField("Author", filters=[strip])
    # absent -> [], one value -> [value], several -> all of them in submitted order
    genre = SelectMultipleField("Genre", choices=[], default=list, validate_choice=False)


class AuthorForm(CatalogForm):
    escaped_fields = ("first_name", "family_name")

    first_name = StringField("First Name", filters=[strip], validators=[
        DataRequired("First name must be specified."),
        Regexp(ALPHANUMERIC, message="First name has non-alphanumeric characters."),
        EscapedLength(100, "First name is too long."),
    ])
    family_name = StringField("Family Name", filters=[strip], validators=[
        DataRequired("Family name must be specified."),
        Regexp(ALPHANUMERIC, message="Family name has non-alphanumeric characters."),
        EscapedLength(100, "Family name is too long."),
    ])
    date_of_birth = IsoDateField("Date of birth", [Optional()], message="Invalid date of birth")
    date_of_death = IsoDateField("Date of death", [Optional()], message="Invalid date of death")


class GenreForm(CatalogForm):
    escaped_fields = ("name",)

    name = StringField("Genre", filters=[strip], validators=[
        DataRequired("Genre name must contain at least 3 characters"),
        Length(min=3, message="Genre name must contain at least 3 characters"),
        EscapedLength(100, "Genre name must not exceed 100 characters"),
    ])


class BookInstanceForm(CatalogForm):
    escaped_fields = ("book", "imprint")

    book = StringField("Book", filters=[strip], validators=[DataRequired("Book must be specified")])
    imprint = StringField("Imprint", filters=[strip], validators=[
        DataRequired("Imprint must be specified"),
        EscapedLength(200, "Imprint must not exceed 200 characters"),
    ])
    status = StringField("Status", filters=[strip], validators=[
        Optional(),
        AnyOf(STATUSES, message="Invalid status"),
    ])
    due_back = IsoDateField("Date when book available", [Optional()], message="Invalid date")
