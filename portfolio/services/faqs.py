"""FAQ categories and questions."""

from portfolio.exceptions import BadRequest
from portfolio.models.faq import Faq, FaqCategory
from portfolio.services.base import CrudService, db_action


class FaqCategoryService(CrudService[FaqCategory]):
    model = FaqCategory
    label = "FAQ category"
    order_by = (FaqCategory.id.asc(),)
    image_field = None

    def check_deletable(self, record):
        with db_action(self.db, "count faqs"):
            in_use = self.db.query(Faq).filter(Faq.category_id == record.id).count()
        if in_use:
            raise BadRequest(f"Cannot delete FAQ category with {in_use} associated FAQs")


class FaqService(CrudService[Faq]):
    model = Faq
    label = "FAQ"
    order_by = (Faq.id.asc(),)
    image_field = None

    def prepare(self, values, record=None):
        if values.get("category_id") is not None:
            self.require(FaqCategory, values["category_id"], "FAQ category")
        return values

    def by_category(self, category_id: int) -> FaqCategory:
        """The category with its FAQs. Raises ``NotFound`` for an unknown category."""
        return self.require(FaqCategory, category_id, "FAQ category")
