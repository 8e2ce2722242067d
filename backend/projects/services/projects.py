from sqlalchemy.orm import sessionmaker

from projects.core.exceptions import ProjectNotFound
from projects.crud import projects as crud
from projects.schemas.project import Project


class ProjectService:
    """Entry point for callers; DbException from the repository passes through."""

    def __init__(self, session_factory: sessionmaker | None = None):
        self.session_factory = session_factory

    def add_project(self, project: Project) -> Project:
        return crud.insert_project(project, session_factory=self.session_factory)

    def fetch_all_projects(self) -> list[Project]:
        return crud.fetch_all_projects(session_factory=self.session_factory)

    def fetch_project_by_id(self, project_id: int) -> Project:
        project = crud.fetch_project_by_id(project_id, session_factory=self.session_factory)
        if project is None:
            raise ProjectNotFound(project_id)
        return project
