"""
Tests for the Template Catalog
"""

import uuid

import pytest

from shotify.errors import InvalidArgument, TemplateNotFound
from shotify.models import Template
from shotify.schemas.configuration import Configuration, Platform
from shotify.services.seed import DEFAULT_TEMPLATE_COUNT, default_templates


def make_template(name: str, platform: str, config: dict) -> Template:
    return Template(name=name, platform=platform, category="test", thumbnail="", json_config=config)


class TestCreate:
    """Tests for template creation."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, catalog, minimal_dark_config):
        template = make_template("fresh", "ios", minimal_dark_config)

        await catalog.create(template)

        assert uuid.UUID(template.id)
        assert template.created_at is not None
        assert template.created_at == template.updated_at
        assert template.is_active is True

    @pytest.mark.asyncio
    async def test_unknown_platform_rejected(self, catalog, minimal_dark_config):
        with pytest.raises(InvalidArgument):
            await catalog.create(make_template("web", "web", minimal_dark_config))

        assert await catalog.count() == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "config",
        [
            None,
            {"layers": []},
            {"canvas": {"width": 0, "height": 100}},
            {"canvas": {"width": 100, "height": 100}, "layers": [{"id": "a", "type": "video"}]},
        ],
    )
    async def test_malformed_configuration_rejected(self, catalog, config):
        with pytest.raises(InvalidArgument):
            await catalog.create(make_template("broken", "ios", config))

        assert await catalog.count() == 0

    @pytest.mark.asyncio
    async def test_create_stores_normalized_document(self, catalog):
        template = await catalog.create(
            make_template("bare", Platform.ANDROID, {"canvas": {"width": 1080, "height": 1920}})
        )

        assert template.platform == "android"
        assert template.json_config["canvas"]["backgroundColor"] == "#FFFFFF"
        assert template.json_config["layers"] == []

    @pytest.mark.asyncio
    async def test_created_template_is_retrievable(self, catalog, minimal_dark):
        found = await catalog.get_by_id(minimal_dark.id)

        assert found is not None
        assert found.name == "minimal-dark"
        assert found.configuration.layers[0].properties.content == "Transform Your App"


class TestList:
    """Tests for listing with the platform filter."""

    @pytest.fixture
    async def populated(self, catalog, minimal_dark_config):
        for name, platform in (("ios-only", "ios"), ("android-only", "android"), ("shared", "both")):
            await catalog.create(make_template(name, platform, minimal_dark_config))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("platform", ["", "all", None])
    async def test_no_filter_returns_everything(self, catalog, populated, platform):
        templates = await catalog.list(platform)

        assert {t.name for t in templates} == {"ios-only", "android-only", "shared"}

    @pytest.mark.asyncio
    async def test_platform_filter_includes_both(self, catalog, populated):
        templates = await catalog.list("ios")

        assert {t.name for t in templates} == {"ios-only", "shared"}

    @pytest.mark.asyncio
    async def test_android_filter(self, catalog, populated):
        templates = await catalog.list("android")

        assert {t.name for t in templates} == {"android-only", "shared"}

    @pytest.mark.asyncio
    async def test_newest_first(self, catalog, populated):
        templates = await catalog.list("all")

        created = [t.created_at for t in templates]
        assert created == sorted(created, reverse=True)

    @pytest.mark.asyncio
    async def test_inactive_templates_never_listed(self, catalog, populated):
        shared = next(t for t in await catalog.list("") if t.name == "shared")

        await catalog.delete(shared.id)

        assert "shared" not in {t.name for t in await catalog.list("")}
        assert "shared" not in {t.name for t in await catalog.list("ios")}


class TestGetById:
    """Tests for point lookup."""

    @pytest.mark.asyncio
    async def test_missing_template_is_none(self, catalog):
        assert await catalog.get_by_id(str(uuid.uuid4())) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", ["", "   ", "not-a-uuid", "12345"])
    async def test_malformed_id_is_invalid_argument(self, catalog, bad_id):
        with pytest.raises(InvalidArgument):
            await catalog.get_by_id(bad_id)

    @pytest.mark.asyncio
    async def test_soft_deleted_template_is_none(self, catalog, minimal_dark):
        await catalog.delete(minimal_dark.id)

        assert await catalog.get_by_id(minimal_dark.id) is None


class TestUpdate:
    """Tests for admin updates."""

    @pytest.mark.asyncio
    async def test_update_replaces_mutable_fields(self, catalog, minimal_dark, minimal_dark_config):
        minimal_dark_config["canvas"]["backgroundColor"] = "#000000"
        before = minimal_dark.updated_at

        updated = await catalog.update(
            minimal_dark.id,
            name="Minimal Black",
            platform=Platform.IOS,
            category="dark",
            thumbnail="/templates/minimal-black.png",
            json_config=Configuration.from_document(minimal_dark_config),
        )

        assert updated.id == minimal_dark.id
        assert updated.name == "Minimal Black"
        assert updated.platform == "ios"
        assert updated.json_config["canvas"]["backgroundColor"] == "#000000"
        assert updated.updated_at >= before
        assert updated.created_at == minimal_dark.created_at

    @pytest.mark.asyncio
    async def test_update_does_not_resurrect(self, catalog, minimal_dark, minimal_dark_config):
        await catalog.delete(minimal_dark.id)

        updated = await catalog.update(
            minimal_dark.id,
            name="Still gone",
            platform="both",
            category="minimal",
            thumbnail="",
            json_config=Configuration.from_document(minimal_dark_config),
        )

        assert updated.is_active is False
        assert await catalog.get_by_id(minimal_dark.id) is None

    @pytest.mark.asyncio
    async def test_update_unknown_template(self, catalog, minimal_dark, minimal_dark_config):
        with pytest.raises(TemplateNotFound):
            await catalog.update(
                str(uuid.uuid4()),
                name="Ghost",
                platform="both",
                category="",
                thumbnail="",
                json_config=Configuration.from_document(minimal_dark_config),
            )

        # Records already loaded in the session stay readable
        assert minimal_dark.name == "minimal-dark"
        assert minimal_dark.is_active is True


class TestDelete:
    """Tests for soft delete."""

    @pytest.mark.asyncio
    async def test_delete_keeps_row(self, catalog, minimal_dark):
        await catalog.delete(minimal_dark.id)

        assert await catalog.count() == 1

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, catalog, minimal_dark):
        await catalog.delete(minimal_dark.id)
        await catalog.delete(minimal_dark.id)

        assert await catalog.get_by_id(minimal_dark.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_id_is_not_an_error(self, catalog):
        await catalog.delete(str(uuid.uuid4()))


class TestSeed:
    """Tests for seeding the default template set."""

    def test_default_templates_are_fresh_values(self):
        first = default_templates()
        second = default_templates()

        assert len(first) == DEFAULT_TEMPLATE_COUNT
        assert first == second
        first[0].json_config["layers"].clear()
        assert second[0].json_config["layers"]

    def test_default_templates_are_valid(self):
        names = [seed.name for seed in default_templates()]

        assert "Minimal Dark" in names
        for seed in default_templates():
            Configuration.from_document(seed.json_config)

    @pytest.mark.asyncio
    async def test_seed_empty_catalog(self, catalog):
        inserted = await catalog.seed()

        assert inserted == DEFAULT_TEMPLATE_COUNT
        assert len(await catalog.list("")) == DEFAULT_TEMPLATE_COUNT

    @pytest.mark.asyncio
    async def test_seed_without_force_is_noop_when_populated(self, catalog, minimal_dark):
        inserted = await catalog.seed(force=False)

        assert inserted == 0
        assert await catalog.count() == 1

    @pytest.mark.asyncio
    async def test_seed_counts_inactive_templates(self, catalog, minimal_dark):
        await catalog.delete(minimal_dark.id)

        assert await catalog.seed(force=False) == 0

    @pytest.mark.asyncio
    async def test_forced_seed_replaces_everything(self, catalog, minimal_dark, minimal_dark_config):
        await catalog.create(make_template("extra", "android", minimal_dark_config))
        await catalog.delete(minimal_dark.id)

        inserted = await catalog.seed(force=True)

        assert inserted == DEFAULT_TEMPLATE_COUNT
        assert await catalog.count() == DEFAULT_TEMPLATE_COUNT
        assert await catalog.get_by_id(minimal_dark.id) is None

    @pytest.mark.asyncio
    async def test_forced_seed_twice(self, catalog):
        await catalog.seed(force=True)
        await catalog.seed(force=True)

        assert await catalog.count() == DEFAULT_TEMPLATE_COUNT
