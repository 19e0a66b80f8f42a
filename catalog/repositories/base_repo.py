from sqlalchemy.orm import load_only, selectinload

from catalog.errors import NotFoundError
from catalog.extensions import db


class BaseRepo:
    model = None
    entity_name = "Record"

    # populate name -> callable returning a loader option
    loaders = {}

    @classmethod
    def _loader(cls, name: str):
        if name in cls.loaders:
            return cls.loaders[name]()
        return selectinload(getattr(cls.model, name))

    @classmethod
    def _apply(cls, query, filters=None, sort=None, columns=None, populate=()):
        if filters:
            query = query.filter_by(**filters)
        for key in sort or ():
            if key.startswith("-"):
                query = query.order_by(getattr(cls.model, key[1:]).desc())
            else:
                query = query.order_by(getattr(cls.model, key).asc())
        if columns:
            query = query.options(load_only(*[getattr(cls.model, c) for c in columns]))
        for name in populate or ():
            query = query.options(cls._loader(name))
        return query

    @classmethod
    def find_all(cls, filters=None, sort=None, columns=None, populate=()):
        return cls._apply(cls.model.query, filters, sort, columns, populate).all()

    @classmethod
    def find_by_id(cls, entity_id: int, populate=()):
        options = [cls._loader(name) for name in populate or ()]
        return db.session.get(cls.model, entity_id, options=options)

    @classmethod
    def require(cls, entity_id: int, populate=()):
        entity = cls.find_by_id(entity_id, populate)
        if entity is None:
            raise NotFoundError(cls.entity_name, entity_id)
        return entity

    @classmethod
    def count(cls, filters=None) -> int:
        return cls._apply(cls.model.query, filters).count()

    @classmethod
    def save(cls, entity):
        db.session.add(entity)
        db.session.commit()
        return entity
