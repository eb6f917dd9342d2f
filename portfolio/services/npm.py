"""NPM package types and packages."""

from portfolio.exceptions import BadRequest
from portfolio.models.npm import NpmPackage, NpmType
from portfolio.services.base import CrudService, db_action


class NpmTypeService(CrudService[NpmType]):
    model = NpmType
    label = "NPM type"
    order_by = (NpmType.id.asc(),)
    image_field = None

    def check_deletable(self, record):
        with db_action(self.db, "count npm packages"):
            in_use = self.db.query(NpmPackage).filter(NpmPackage.npm_type_id == record.id).count()
        if in_use:
            raise BadRequest(f"Cannot delete NPM type with {in_use} associated packages")


class NpmPackageService(CrudService[NpmPackage]):
    model = NpmPackage
    label = "NPM package"
    image_field = None

    def prepare(self, values, record=None):
        if values.get("npm_type_id") is not None:
            self.require(NpmType, values["npm_type_id"], "NPM type")
        return values
