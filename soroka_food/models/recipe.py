# soroka_food/models/recipe.py
import enum
from datetime import datetime, timezone
from typing import Optional, List

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field, Relationship

from .category import Category, RecipeCategory


class RecipeStatus(str, enum.Enum):
    PUBLISHED = "PUBLISHED"
    DRAFT = "DRAFT"


class CommentStatus(str, enum.Enum):
    APPROVED = "APPROVED"
    PENDING = "PENDING"
    SPAM = "SPAM"


class Recipe(SQLModel, table=True):
    __tablename__ = "recipes"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    description: str
    image: Optional[str] = None  # URL or data: URI
    cooking_time: int
    calories: Optional[int] = None
    servings: int
    author: str
    views: int = 0
    rating: float = 0.0
    status: RecipeStatus = RecipeStatus.DRAFT
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Content is embedded as structured JSON rather than normalized tables:
    #   ingredients  [{"name": ..., "amount": ...}]
    #   instructions [{"step_number": 1, "text": ...}]  (ordered)
    #   nutrition    {"calories", "protein", "fat", "carbs"}
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    ingredients: List[dict] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    instructions: List[dict] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    nutrition: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    tips: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    categories: List[Category] = Relationship(back_populates="recipes", link_model=RecipeCategory)
    comments: List["Comment"] = Relationship(
        back_populates="recipe",
        sa_relationship_kwargs={"order_by": "Comment.id"},
    )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "cooking_time": self.cooking_time,
            "servings": self.servings,
            "rating": self.rating,
            "status": RecipeStatus(self.status).value,
            "tags": list(self.tags),
            "categories": [c.slug for c in self.categories],
        }


class Comment(SQLModel, table=True):
    __tablename__ = "comments"

    id: Optional[int] = Field(default=None, primary_key=True)
    recipe_id: int = Field(foreign_key="recipes.id", index=True)
    author: str
    email: Optional[str] = None
    rating: int
    text: str
    status: CommentStatus = CommentStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    recipe: Optional[Recipe] = Relationship(back_populates="comments")
