from sqlalchemy import insert, select
from sqlalchemy.engine import RowMapping
from sqlalchemy.orm import Session, sessionmaker

from projects.core.logging import logger
from projects.db.models.category import Category as CategoryRow
from projects.db.models.material import Material as MaterialRow
from projects.db.models.project import Project as ProjectRow
from projects.db.models.project_category import ProjectCategory
from projects.db.models.step import Step as StepRow
from projects.db.session import transaction
from projects.schemas.project import Category, Material, Project, Step

_PROJECT_COLUMNS = (
    ProjectRow.project_id,
    ProjectRow.project_name,
    ProjectRow.estimated_hours,
    ProjectRow.actual_hours,
    ProjectRow.difficulty,
    ProjectRow.notes,
)


def _project_from_row(row: RowMapping) -> Project:
    return Project(
        project_id=row["project_id"],
        project_name=row["project_name"],
        estimated_hours=row["estimated_hours"],
        actual_hours=row["actual_hours"],
        difficulty=row["difficulty"],
        notes=row["notes"],
    )


def _material_from_row(row: RowMapping) -> Material:
    return Material(
        material_id=row["material_id"],
        project_id=row["project_id"],
        material_name=row["material_name"],
        num_required=row["num_required"],
        cost=row["cost"],
    )


def _step_from_row(row: RowMapping) -> Step:
    return Step(
        step_id=row["step_id"],
        project_id=row["project_id"],
        step_text=row["step_text"],
        step_order=row["step_order"],
    )


def _category_from_row(row: RowMapping) -> Category:
    return Category(category_id=row["category_id"], category_name=row["category_name"])


def insert_project(project: Project, *, session_factory: sessionmaker | None = None) -> Project:
    stmt = insert(ProjectRow.__table__).values(
        project_name=project.project_name,
        estimated_hours=project.estimated_hours,
        actual_hours=project.actual_hours,
        difficulty=project.difficulty,
        notes=project.notes,
    )
    with transaction(session_factory) as db:
        result = db.execute(stmt)
        # generated key of this statement, read on the same connection
        project_id = result.inserted_primary_key[0]

    project.project_id = project_id
    logger.info("project_inserted", project_id=project_id, project_name=project.project_name)
    return project


def fetch_all_projects(*, session_factory: sessionmaker | None = None) -> list[Project]:
    stmt = select(*_PROJECT_COLUMNS).order_by(ProjectRow.project_name)
    with transaction(session_factory) as db:
        projects = [_project_from_row(row) for row in db.execute(stmt).mappings()]

    logger.info("projects_listed", count=len(projects))
    return projects


def _fetch_materials_for_project(db: Session, project_id: int) -> list[Material]:
    stmt = select(
        MaterialRow.material_id,
        MaterialRow.project_id,
        MaterialRow.material_name,
        MaterialRow.num_required,
        MaterialRow.cost,
    ).where(MaterialRow.project_id == project_id)
    return [_material_from_row(row) for row in db.execute(stmt).mappings()]


def _fetch_steps_for_project(db: Session, project_id: int) -> list[Step]:
    stmt = select(
        StepRow.step_id,
        StepRow.project_id,
        StepRow.step_text,
        StepRow.step_order,
    ).where(StepRow.project_id == project_id)
    return [_step_from_row(row) for row in db.execute(stmt).mappings()]


def _fetch_categories_for_project(db: Session, project_id: int) -> list[Category]:
    # one row per join row; duplicates are not collapsed
    stmt = (
        select(CategoryRow.category_id, CategoryRow.category_name)
        .join(ProjectCategory, ProjectCategory.category_id == CategoryRow.category_id)
        .where(ProjectCategory.project_id == project_id)
    )
    return [_category_from_row(row) for row in db.execute(stmt).mappings()]


def fetch_project_by_id(project_id: int, *, session_factory: sessionmaker | None = None) -> Project | None:
    """Load one project with its materials, steps and categories.

    Returns None when no project has this id. All four queries run in a
    single transaction; on any failure nothing is returned and
    ``DbException`` is raised.
    """
    stmt = select(*_PROJECT_COLUMNS).where(ProjectRow.project_id == project_id)
    with transaction(session_factory) as db:
        row = db.execute(stmt).mappings().one_or_none()
        if row is None:
            project = None
        else:
            project = _project_from_row(row)
            project.materials.extend(_fetch_materials_for_project(db, project_id))
            project.steps.extend(_fetch_steps_for_project(db, project_id))
            project.categories.extend(_fetch_categories_for_project(db, project_id))

    if project is None:
        logger.info("project_not_found", project_id=project_id)
    else:
        logger.info(
            "project_fetched",
            project_id=project_id,
            materials=len(project.materials),
            steps=len(project.steps),
            categories=len(project.categories),
        )
    return project
