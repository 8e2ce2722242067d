from decimal import Decimal

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from projects.db import models
from projects.db.session import build_engine, init_db


@pytest.fixture
def engine():
    # in-memory sqlite with StaticPool so every session sees the same database
    eng = build_engine("sqlite://", poolclass=StaticPool)
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def add_children(session_factory):
    def _add(project_id: int, materials=(), steps=(), categories=()):
        db = session_factory()
        try:
            for name, num, cost in materials:
                db.add(models.Material(project_id=project_id, material_name=name, num_required=num, cost=Decimal(cost)))
            for order, text in steps:
                db.add(models.Step(project_id=project_id, step_text=text, step_order=order))
            for name in categories:
                c = db.query(models.Category).filter(models.Category.category_name == name).one_or_none()
                if not c:
                    c = models.Category(category_name=name)
                    db.add(c)
                    db.flush()
                db.add(models.ProjectCategory(project_id=project_id, category_id=c.category_id))
            db.commit()
        finally:
            db.close()
    return _add
