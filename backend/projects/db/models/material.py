from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from projects.db.base import Base

class Material(Base):
    __tablename__ = "material"

    material_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(ForeignKey("project.project_id", ondelete="CASCADE"), index=True)
    material_name: Mapped[str] = mapped_column(String(128))
    num_required: Mapped[int | None] = mapped_column(Integer, nullable=True)
    cost: Mapped[Decimal | None] = mapped_column(Numeric(7, 2), nullable=True)

    project = relationship("Project", back_populates="materials")
