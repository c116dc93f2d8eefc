# soroka_food/db/seed.py
"""
One-shot bootstrap: creates tables + seeds the admin account, categories,
sample recipes with comments and the site settings singleton.
Run with:
    python -m soroka_food.db.seed      (or the `soroka-seed` script)

Categories, the admin user and site settings are upserted by their unique
key, so re-running leaves them as they are. Recipes and their comments are
created unconditionally and DO duplicate on a second run unless
SEED_SKIP_EXISTING_RECIPES is set.
"""
import os
import sys
import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from sqlmodel import Session, select

from soroka_food.db.crud import get_or_create
from soroka_food.db.fixtures import (
    AdminSeed,
    CategorySeed,
    CommentSeed,
    RecipeSeed,
    SeedFixture,
    SiteSettingsSeed,
    load_fixture,
)
from soroka_food.db.session import SessionLocal, dispose_engine, env_flag, init_db
from soroka_food.models.category import Category
from soroka_food.models.recipe import Comment, Recipe
from soroka_food.models.settings import SETTINGS_ID, SiteSettings
from soroka_food.models.user import User
from soroka_food.utils.password import hash_password

log = logging.getLogger("soroka-seed")


@dataclass
class SeedReport:
    admin: str = ""
    categories: int = 0
    recipes_created: int = 0
    recipes_skipped: int = 0
    comments_created: int = 0


# ── Steps ────────────────────────────────────────────────────────────────
def seed_admin(session: Session, admin: AdminSeed) -> User:
    user, created = get_or_create(
        session,
        User,
        username=admin.username,
        defaults={
            "email": admin.email,
            "password": hash_password(admin.password),
            "role": admin.role,
        },
    )
    session.commit()
    session.refresh(user)
    log.debug("admin %s %s", user.username, "created" if created else "already present")
    return user


def seed_categories(session: Session, categories: Sequence[CategorySeed]) -> Dict[str, Category]:
    # Independent keys, no ordering between them: one batch, one commit
    by_slug = {}
    for cat in categories:
        obj, _ = get_or_create(
            session,
            Category,
            slug=cat.slug,
            defaults={"name": cat.name, "description": cat.description},
        )
        by_slug[cat.slug] = obj
    session.commit()
    return by_slug


def _build_recipe(seed: RecipeSeed, categories_by_slug: Dict[str, Category]) -> Recipe:
    return Recipe(
        title=seed.title,
        description=seed.description,
        image=seed.image,
        cooking_time=seed.cooking_time,
        calories=seed.calories,
        servings=seed.servings,
        author=seed.author,
        views=seed.views,
        rating=seed.rating,
        status=seed.status,
        tags=list(seed.tags),
        ingredients=[i.model_dump() for i in seed.ingredients],
        instructions=[
            s.model_dump() for s in sorted(seed.instructions, key=lambda s: s.step_number)
        ],
        nutrition=seed.nutrition.model_dump(exclude_none=True) if seed.nutrition else None,
        tips=list(seed.tips),
        categories=[categories_by_slug[slug] for slug in seed.category_slugs],
    )


def seed_recipes(
    session: Session,
    recipes: Sequence[RecipeSeed],
    categories_by_slug: Dict[str, Category],
    *,
    skip_existing: bool = False,
) -> Tuple[List[Tuple[RecipeSeed, Recipe]], int]:
    """Returns the (seed, row) pairs actually created and the skipped count."""
    created, skipped = [], 0
    for seed in recipes:
        if skip_existing:
            existing = session.exec(select(Recipe).where(Recipe.title == seed.title)).first()
            if existing is not None:
                print(f"Skipped (already exists): {seed.title}")
                skipped += 1
                continue

        recipe = _build_recipe(seed, categories_by_slug)
        session.add(recipe)
        session.flush()
        created.append((seed, recipe))
    session.commit()

    for _, recipe in created:
        print(f"✅ Created recipe: {recipe.title}")
    return created, skipped


def seed_comments(session: Session, recipe: Recipe, comments: Sequence[CommentSeed]) -> int:
    session.add_all([
        Comment(
            recipe_id=recipe.id,
            author=c.author,
            email=c.email,
            rating=c.rating,
            text=c.text,
            status=c.status,
        )
        for c in comments
    ])
    session.commit()
    return len(comments)


def seed_site_settings(session: Session, settings: SiteSettingsSeed) -> SiteSettings:
    obj, _ = get_or_create(session, SiteSettings, id=SETTINGS_ID, defaults=settings.model_dump())
    session.commit()
    return obj


# ── Procedure ────────────────────────────────────────────────────────────
def run_seed(
    session: Session,
    fixture: SeedFixture,
    *,
    skip_existing_recipes: bool = False,
) -> SeedReport:
    report = SeedReport()
    try:
        admin = seed_admin(session, fixture.admin)
        report.admin = admin.username
        print(f"✅ Admin user created: {admin.username}")

        categories = seed_categories(session, fixture.categories)
        report.categories = len(categories)
        print(f"✅ Categories created: {len(categories)}")

        created, skipped = seed_recipes(
            session, fixture.recipes, categories, skip_existing=skip_existing_recipes
        )
        report.recipes_created = len(created)
        report.recipes_skipped = skipped

        for seed, recipe in created:
            if seed.comments:
                report.comments_created += seed_comments(session, recipe, seed.comments)
                print(f"✅ Created comments for recipe: {recipe.title}")

        seed_site_settings(session, fixture.site_settings)
        print("✅ Site settings created")
    except Exception:
        # Steps already committed stay; the failing one is discarded
        session.rollback()
        raise
    return report


def main() -> int:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    print("Starting database seed...")
    try:
        fixture = load_fixture()
        init_db()  # Creates all registered tables
        with SessionLocal() as session:
            run_seed(
                session,
                fixture,
                skip_existing_recipes=env_flag("SEED_SKIP_EXISTING_RECIPES"),
            )
    except Exception as e:
        print(f"❌ Error during seed: {e}", file=sys.stderr)
        log.debug("seed aborted", exc_info=True)
        return 1
    finally:
        dispose_engine()

    print("\n🎉 Seed completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
