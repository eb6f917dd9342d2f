"""Project types and projects."""

from sqlalchemy import func

from portfolio.exceptions import BadRequest, Conflict
from portfolio.models.project import Project, ProjectType
from portfolio.services.base import CrudService, db_action

FEATURED_LIMIT = 3


class ProjectTypeService(CrudService[ProjectType]):
    model = ProjectType
    label = "Project type"
    order_by = (ProjectType.id.asc(),)
    image_field = None

    def prepare(self, values, record=None):
        title = values.get("title")
        if title is not None:
            with db_action(self.db, "check project type title"):
                taken = (
                    self.db.query(ProjectType.id)
                    .filter(func.lower(ProjectType.title) == title.lower())
                    .first()
                )
            if taken and (record is None or taken.id != record.id):
                raise Conflict(f'Project type "{title}" already exists')
        return values

    def check_deletable(self, record):
        with db_action(self.db, "count projects"):
            in_use = self.db.query(Project).filter(Project.type_id == record.id).count()
        if in_use:
            raise BadRequest(f"Cannot delete project type with {in_use} associated projects")


class ProjectService(CrudService[Project]):
    model = Project
    label = "Project"
    image_folder = "portfolio/projects"

    def prepare(self, values, record=None):
        if values.get("type_id") is not None:
            self.require(ProjectType, values["type_id"], "Project type")
        return values

    def featured(self) -> list[Project]:
        """Newest featured projects, at most three."""
        with db_action(self.db, "fetch featured projects"):
            return (
                self.db.query(Project)
                .filter(Project.is_featured.is_(True))
                .order_by(Project.id.desc())
                .limit(FEATURED_LIMIT)
                .all()
            )
