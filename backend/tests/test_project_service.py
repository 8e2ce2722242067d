from decimal import Decimal

import pytest

from projects.core.exceptions import DbException, ProjectNotFound
from projects.crud import projects as crud
from projects.schemas.project import Project
from projects.services.projects import ProjectService


@pytest.fixture
def service(session_factory):
    return ProjectService(session_factory=session_factory)


def test_add_and_fetch(service):
    p = service.add_project(Project(project_name="Build a bench", estimated_hours=Decimal("6"), difficulty=2))
    fetched = service.fetch_project_by_id(p.project_id)
    assert fetched.project_name == "Build a bench"
    assert fetched.estimated_hours == Decimal("6")
    assert fetched.materials == [] and fetched.steps == [] and fetched.categories == []


def test_fetch_all_delegates(service):
    service.add_project(Project(project_name="Zebra mural"))
    service.add_project(Project(project_name="Attic insulation"))
    assert [p.project_name for p in service.fetch_all_projects()] == ["Attic insulation", "Zebra mural"]


def test_fetch_missing_raises_not_found(service):
    with pytest.raises(ProjectNotFound) as exc:
        service.fetch_project_by_id(42)
    assert exc.value.project_id == 42
    assert "42" in str(exc.value)
    assert str(exc.value) == "Project with project ID=42 does not exist."


def test_db_exception_propagates_unchanged(service, monkeypatch):
    err = DbException(RuntimeError("connection refused"))

    def _boom(*args, **kwargs):
        raise err

    monkeypatch.setattr(crud, "fetch_project_by_id", _boom)
    with pytest.raises(DbException) as exc:
        service.fetch_project_by_id(1)
    assert exc.value is err
