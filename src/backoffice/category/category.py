"""Category aggregate root for grouping products in the catalogue."""

from datetime import UTC, datetime

from protean.fields import DateTime, String, Text

from backoffice.domain import backoffice


@backoffice.aggregate
class Category:
    """A named grouping of products. Categories are flat; a product belongs to exactly one."""

    name: String(required=True, max_length=100)
    description: Text()
    created_at: DateTime(default=lambda: datetime.now(UTC))
    updated_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, name, description=None):
        from backoffice.category.events import CategoryCreated

        now = datetime.now(UTC)
        category = cls(
            name=name,
            description=description,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
            )
        )
        return category

    def update_details(self, name, description=None):
        from backoffice.category.events import CategoryDetailsUpdated

        self.name = name
        self.description = description
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CategoryDetailsUpdated(
                category_id=self.id,
                name=self.name,
                description=self.description,
            )
        )
