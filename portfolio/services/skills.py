"""Skill areas and their technologies."""

from sqlalchemy import func

from portfolio.exceptions import Conflict
from portfolio.models.skill import Skill, Technology
from portfolio.services.base import CrudService, db_action


class SkillService(CrudService[Skill]):
    model = Skill
    label = "Skill"
    order_by = (Skill.id.asc(),)
    image_field = None

    def prepare(self, values, record=None):
        name = values.get("name")
        if name is not None and (record is None or name != record.name):
            with db_action(self.db, "check skill name"):
                taken = self.db.query(Skill.id).filter(func.lower(Skill.name) == name.lower()).first()
            if taken and (record is None or taken.id != record.id):
                raise Conflict(f'Skill with name "{name}" already exists')
        return values


class TechnologyService(CrudService[Technology]):
    model = Technology
    label = "Technology"
    order_by = (Technology.id.asc(),)
    image_field = "icon_url"
    image_folder = "portfolio/technologies"

    def prepare(self, values, record=None):
        if values.get("skill_id") is not None:
            self.require(Skill, values["skill_id"], "Skill")
        return values
