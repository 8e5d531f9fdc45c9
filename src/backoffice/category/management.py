"""Category management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from backoffice.category.category import Category
from backoffice.domain import backoffice
from backoffice.shared.errors import CategoryInUse, CategoryNotFound


@backoffice.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: Text()


@backoffice.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    description: Text()


@backoffice.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


def get_category(category_id) -> Category:
    """Load a category or raise `CategoryNotFound`."""
    try:
        return current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise CategoryNotFound(category_id=str(category_id)) from None


@backoffice.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(
            name=command.name,
            description=command.description,
        )
        current_domain.repository_for(Category).add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        category = get_category(command.category_id)
        category.update_details(
            name=command.name,
            description=command.description,
        )
        current_domain.repository_for(Category).add(category)
        return str(category.id)

    @handle(DeleteCategory)
    def delete_category(self, command):
        from backoffice.product.product import Product

        category = get_category(command.category_id)

        products = (
            current_domain.repository_for(Product)._dao.query.filter(category_id=str(command.category_id)).all().items
        )
        if products:
            raise CategoryInUse(category_id=str(command.category_id), products=len(products))

        current_domain.repository_for(Category)._dao.delete(category)
