from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from projects.db.base import Base

class Category(Base):
    __tablename__ = "category"

    category_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_name: Mapped[str] = mapped_column(String(128), unique=True)
