# soroka_food/models/category.py
from typing import Optional, List, TYPE_CHECKING

from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from .recipe import Recipe


class RecipeCategory(SQLModel, table=True):
    __tablename__ = "recipe_categories"

    recipe_id: int = Field(foreign_key="recipes.id", primary_key=True)
    category_id: int = Field(foreign_key="categories.id", primary_key=True)


class Category(SQLModel, table=True):
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    slug: str = Field(index=True, unique=True)
    description: Optional[str] = None

    recipes: List["Recipe"] = Relationship(back_populates="categories", link_model=RecipeCategory)
