"""
Tests for table models, the upsert helper and password hashing.
"""

from sqlmodel import select

from soroka_food.db.crud import get_or_create
from soroka_food.db.session import env_flag
from soroka_food.models.category import Category
from soroka_food.models.recipe import Comment, CommentStatus, Recipe, RecipeStatus
from soroka_food.models.settings import SiteSettings
from soroka_food.models.user import User
from soroka_food.utils.password import hash_password, verify_password


class TestGetOrCreate:

    def test_creates_then_returns_existing(self, session):
        first, created = get_or_create(
            session, Category, slug="soups", defaults={"name": "Супы"}
        )
        assert created
        assert first.id is not None

        again, created = get_or_create(
            session, Category, slug="soups", defaults={"name": "Другое"}
        )
        assert not created
        assert again.id == first.id
        assert again.name == "Супы"  # empty update: existing row untouched
        assert len(session.exec(select(Category)).all()) == 1


class TestSiteSettings:

    def test_public_view_defaults(self):
        view = SiteSettings().public_view()
        assert view["site_name"] == "Soroka Food"
        assert view["site_description"] == ""
        assert view["social_links"] == {
            "youtube": "", "instagram": "", "telegram": "", "tiktok": "",
        }

    def test_public_view_values(self):
        settings = SiteSettings(site_name="Soroka", telegram="https://t.me/soroka")
        view = settings.public_view()
        assert view["site_name"] == "Soroka"
        assert view["social_links"]["telegram"] == "https://t.me/soroka"

    def test_singleton_id(self):
        assert SiteSettings().id == 1


class TestRecipe:

    def test_to_dict_with_categories(self, session):
        baking = Category(name="Выпечка", slug="baking")
        desserts = Category(name="Десерты", slug="desserts")
        recipe = Recipe(
            title="Маффины",
            description="Пышные",
            cooking_time=45,
            servings=6,
            author="Soroka",
            status=RecipeStatus.PUBLISHED,
            tags=["Десерт"],
            categories=[baking, desserts],
        )
        session.add(recipe)
        session.commit()
        session.refresh(recipe)

        d = recipe.to_dict()
        assert d["status"] == "PUBLISHED"
        assert sorted(d["categories"]) == ["baking", "desserts"]
        assert d["tags"] == ["Десерт"]


class TestPassword:

    def test_hash_and_verify(self):
        hashed = hash_password("admin123")
        assert hashed != "admin123"
        assert hashed.startswith("$2")
        assert verify_password("admin123", hashed)
        assert not verify_password("wrong", hashed)

    def test_verify_against_garbage_hash(self):
        assert not verify_password("admin123", "not-a-bcrypt-hash")


class TestTimestamps:

    def test_default_created_at_is_timezone_aware(self):
        assert User(username="u", email="u@example.com", password="x").created_at.tzinfo is not None
        assert Comment(recipe_id=1, author="Аня", rating=5, text="Очень вкусно!").created_at.tzinfo is not None

    def test_rows_with_default_timestamp_insert(self, session):
        user = User(username="admin", email="admin@example.com", password=hash_password("admin123"))
        recipe = Recipe(title="Суп", description="Простой", cooking_time=30, servings=2, author="Soroka")
        session.add_all([user, recipe])
        session.commit()

        comment = Comment(
            recipe_id=recipe.id,
            author="Мария",
            rating=5,
            text="Потрясающий рецепт!",
            status=CommentStatus.APPROVED,
        )
        session.add(comment)
        session.commit()

        assert session.exec(select(User)).one().created_at is not None
        assert session.exec(select(Recipe)).one().created_at is not None
        assert session.exec(select(Comment)).one().created_at is not None


class TestEnvFlag:

    def test_truthy_values(self, monkeypatch):
        for value in ("1", "true", "YES", " on "):
            monkeypatch.setenv("SEED_SKIP_EXISTING_RECIPES", value)
            assert env_flag("SEED_SKIP_EXISTING_RECIPES")

    def test_falsy_and_unset(self, monkeypatch):
        monkeypatch.setenv("SQL_ECHO", "0")
        assert not env_flag("SQL_ECHO")
        monkeypatch.delenv("SQL_ECHO")
        assert not env_flag("SQL_ECHO")
