"""Schema map lookup flow tests against the sample configuration."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from admin_form_schema.configuration import UnknownEntityError, load_configuration
from admin_form_schema.field_definitions import EntityIdentifier
from admin_form_schema.schema_caching import (
    RequestMemoizer,
    SchemaCacheService,
    build_localization_context,
    get_field_schema_map,
    reload_configuration,
)

PAGES = EntityIdentifier(collection_slug="pages")
NAVIGATION = EntityIdentifier(global_slug="navigation")


def _sample_path() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "sample-admin-config.yaml"


def test_sample_collection_flattens_every_field_kind() -> None:
    configuration = load_configuration(_sample_path())

    schema_map = get_field_schema_map(
        PAGES,
        configuration,
        build_localization_context(configuration),
        cache=SchemaCacheService(),
        request=RequestMemoizer(),
    )

    assert schema_map.paths() == (
        "title",
        "subtitle",
        "meta.description",
        "sections.hero.text",
        "sections.hero.image",
        "sections.quote.text",
        "sections.quote.author",
        "links.*.url",
        "links.*.appearance.style",
        "slug",
    )
    assert schema_map["title"].required is True
    assert schema_map["title"].label == "Title"
    assert schema_map["subtitle"].label == "Subtitle"
    assert schema_map["meta.description"].metadata["maxLength"] == 160
    assert schema_map["sections.hero.image"].metadata["relationTo"] == "media"
    assert schema_map["links.*.appearance.style"].metadata["options"] == ["primary", "secondary"]


def test_sample_global_uses_array_placeholder() -> None:
    configuration = load_configuration(_sample_path())

    schema_map = get_field_schema_map(
        NAVIGATION,
        configuration,
        build_localization_context(configuration),
        cache=SchemaCacheService(),
        request=RequestMemoizer(),
    )

    assert schema_map.paths() == ("items.*.label",)


def test_german_labels_fall_back_to_english_catalog() -> None:
    configuration = load_configuration(_sample_path())

    schema_map = get_field_schema_map(
        PAGES,
        configuration,
        build_localization_context(configuration, "de"),
        cache=SchemaCacheService(),
        request=RequestMemoizer(),
    )

    assert schema_map["title"].label == "Titel"
    assert schema_map["subtitle"].label == "Subtitle"
    assert schema_map["meta.description"].label == "description"


def test_requests_share_the_process_cache_but_not_memoized_lookups() -> None:
    configuration = load_configuration(_sample_path())
    localization = build_localization_context(configuration)
    cache = SchemaCacheService()
    first_request = RequestMemoizer()
    second_request = RequestMemoizer()

    first = get_field_schema_map(
        PAGES, configuration, localization, cache=cache, request=first_request
    )
    repeated = get_field_schema_map(
        PAGES, configuration, localization, cache=cache, request=first_request
    )
    other_request = get_field_schema_map(
        PAGES, configuration, localization, cache=cache, request=second_request
    )

    assert first is repeated
    assert other_request is first
    assert cache.statistics().builds == 1
    assert cache.statistics().hits == 1


def test_unknown_entity_is_not_cached() -> None:
    configuration = load_configuration(_sample_path())
    cache = SchemaCacheService()
    request = RequestMemoizer()

    for _ in range(2):
        with pytest.raises(UnknownEntityError, match="missing"):
            get_field_schema_map(
                EntityIdentifier(collection_slug="missing"),
                configuration,
                build_localization_context(configuration),
                cache=cache,
                request=request,
            )

    assert cache.cached_identifiers() == ()
    assert len(request) == 0
    assert cache.statistics().misses == 2


def test_reload_configuration_invalidates_cached_maps(tmp_path: Path) -> None:
    config_path = tmp_path / "admin.yaml"
    shutil.copy(_sample_path(), config_path)
    cache = SchemaCacheService()
    configuration = load_configuration(config_path)
    localization = build_localization_context(configuration)
    before = get_field_schema_map(
        NAVIGATION, configuration, localization, cache=cache, request=RequestMemoizer()
    )

    config_path.write_text(
        "globals:\n  navigation:\n    fields:\n      - {name: heading, type: text}\n",
        encoding="utf-8",
    )
    reloaded = reload_configuration(config_path, cache)
    after = get_field_schema_map(
        NAVIGATION,
        reloaded,
        build_localization_context(reloaded),
        cache=cache,
        request=RequestMemoizer(),
    )

    assert before.paths() == ("items.*.label",)
    assert after.paths() == ("heading",)
    assert cache.statistics().invalidations == 1


def test_contexts_built_twice_in_one_request_share_the_map() -> None:
    configuration = load_configuration(_sample_path())
    cache = SchemaCacheService()
    request = RequestMemoizer()

    first = get_field_schema_map(
        PAGES,
        configuration,
        build_localization_context(configuration, "en"),
        cache=cache,
        request=request,
    )
    cache.invalidate()
    second = get_field_schema_map(
        PAGES,
        configuration,
        build_localization_context(configuration, "en"),
        cache=cache,
        request=request,
    )

    assert build_localization_context(configuration, "en") == build_localization_context(
        configuration, "en"
    )
    assert first is second
    assert len(request) == 1
    assert cache.statistics().builds == 1
