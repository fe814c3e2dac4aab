from sqlalchemy import Column, String, Date

from models.base_model import BaseModel, Base


class AuthorRecord(BaseModel, Base):
    __tablename__ = "authors"

    name = Column(String(255), nullable=False)  # not unique; names can collide
    birth_date = Column(Date, nullable=False)
