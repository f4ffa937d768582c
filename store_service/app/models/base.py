from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class StoreServiceBase(DeclarativeBase):
    """Base class for all Store Service database models."""

    pass


class StoreServiceBaseModel(StoreServiceBase):
    """Base model with the store-generated primary key."""

    __abstract__ = True
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
