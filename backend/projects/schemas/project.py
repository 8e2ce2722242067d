from decimal import Decimal

from pydantic import BaseModel, Field


class Material(BaseModel):
    material_id: int | None = None
    project_id: int | None = None
    material_name: str
    num_required: int | None = None
    cost: Decimal | None = None


class Step(BaseModel):
    step_id: int | None = None
    project_id: int | None = None
    step_text: str
    step_order: int


class Category(BaseModel):
    category_id: int | None = None
    category_name: str


class Project(BaseModel):
    project_id: int | None = None
    project_name: str
    estimated_hours: Decimal | None = None
    actual_hours: Decimal | None = None
    difficulty: int | None = None
    notes: str | None = None

    # empty until a full fetch by id; never None
    materials: list[Material] = Field(default_factory=list)
    steps: list[Step] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
