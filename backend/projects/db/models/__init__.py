# import all models so Base.metadata knows every table
from projects.db.models.project import Project
from projects.db.models.material import Material
from projects.db.models.step import Step
from projects.db.models.category import Category
from projects.db.models.project_category import ProjectCategory
