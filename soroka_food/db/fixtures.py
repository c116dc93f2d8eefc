# soroka_food/db/fixtures.py
"""
Seed dataset schema + loader.

The sample content lives in a JSON file (seed_data.json next to this module
by default, or whatever SEED_FIXTURE points at) and is validated in full
before the seed script touches the database.
"""
import json
import os
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

from soroka_food.models.recipe import CommentStatus, RecipeStatus
from soroka_food.models.user import UserRole

DEFAULT_FIXTURE = Path(__file__).with_name("seed_data.json")


class FixtureError(ValueError):
    """Seed file missing, unreadable or not matching the schema."""


class AdminSeed(BaseModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)
    role: UserRole = UserRole.ADMIN


class CategorySeed(BaseModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: Optional[str] = None


class IngredientSeed(BaseModel):
    name: str = Field(min_length=1)
    amount: str = Field(min_length=1)


class InstructionStep(BaseModel):
    step_number: int = Field(ge=1)
    text: str = Field(min_length=1)


class NutritionSeed(BaseModel):
    calories: Optional[float] = Field(default=None, ge=0)
    protein: Optional[float] = Field(default=None, ge=0)
    fat: Optional[float] = Field(default=None, ge=0)
    carbs: Optional[float] = Field(default=None, ge=0)


class CommentSeed(BaseModel):
    author: str = Field(min_length=2, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    rating: int = Field(ge=1, le=5)
    text: str = Field(min_length=10, max_length=1000)
    status: CommentStatus = CommentStatus.PENDING


class RecipeSeed(BaseModel):
    title: str = Field(min_length=1)
    description: str
    image: Optional[str] = None
    cooking_time: int = Field(ge=1)
    calories: Optional[int] = Field(default=None, ge=0)
    servings: int = Field(ge=1)
    author: str
    views: int = Field(default=0, ge=0)
    rating: float = Field(default=0.0, ge=0, le=5)
    tags: List[str] = Field(default_factory=list)
    status: RecipeStatus = RecipeStatus.DRAFT
    ingredients: List[IngredientSeed] = Field(default_factory=list)
    instructions: List[InstructionStep] = Field(default_factory=list)
    nutrition: Optional[NutritionSeed] = None
    tips: List[str] = Field(default_factory=list)
    category_slugs: List[str] = Field(min_length=1)
    comments: List[CommentSeed] = Field(default_factory=list)


class SiteSettingsSeed(BaseModel):
    site_name: str
    site_description: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


class SeedFixture(BaseModel):
    admin: AdminSeed
    categories: List[CategorySeed]
    recipes: List[RecipeSeed] = Field(default_factory=list)
    site_settings: SiteSettingsSeed

    @model_validator(mode="after")
    def check_category_refs(self):
        slugs = [c.slug for c in self.categories]
        dupes = sorted({s for s in slugs if slugs.count(s) > 1})
        if dupes:
            raise ValueError(f"duplicate category slugs: {', '.join(dupes)}")

        known = set(slugs)
        for recipe in self.recipes:
            unknown = [s for s in recipe.category_slugs if s not in known]
            if unknown:
                raise ValueError(
                    f"recipe {recipe.title!r} references unknown categories: {', '.join(unknown)}"
                )
        return self


def load_fixture(path: Union[str, Path, None] = None) -> SeedFixture:
    path = Path(path or os.getenv("SEED_FIXTURE") or DEFAULT_FIXTURE)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise FixtureError(f"cannot read seed fixture {path}: {e}") from e

    try:
        return SeedFixture.model_validate(raw)
    except ValidationError as e:
        raise FixtureError(f"invalid seed fixture {path}: {e}") from e
