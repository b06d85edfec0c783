# Import all models here to ensure they're loaded together.
# Relationships are declared by class name, so every mapper must be
# registered before the first query or metadata.create_all().

from gallery.core.db.base import Base
from gallery.modules.categories.models import Category
from gallery.modules.dashboards.models import Dashboard
from gallery.modules.templates.models import Template
from gallery.modules.elements.models import Element, ElementType
from gallery.modules.contents.models import Content
from gallery.modules.authors.models import Author, author_dashboards
from gallery.modules.records.models import Record

__all__ = [
    "Base",
    "Category",
    "Dashboard",
    "Template",
    "Element",
    "ElementType",
    "Content",
    "Author",
    "author_dashboards",
    "Record",
]
