"""Annotation resolver tests."""

from dataclasses import dataclass, field
from typing import Annotated

import pytest
from popover_labels.annotations import (
    POPOVER_METADATA_KEY,
    ConfigurationError,
    PopoverAnnotation,
    metadata_type,
)
from popover_labels.attribute_resolution import (
    ResolvedAnnotation,
    direct_annotation_strategy,
    resolution_strategies,
    resolve_annotation,
    shadow_metadata_strategy,
)
from popover_labels.resource_catalog import ResourceCatalog


class Labels(ResourceCatalog):
    T1 = "Hello"
    C1 = "World"


class OtherLabels(ResourceCatalog):
    T1 = "Other hello"
    Hi = "Greeting"


@dataclass
class Article:
    author: Annotated[str, PopoverAnnotation(title="T1", content="C1")]
    editor: Annotated[str, PopoverAnnotation(title="T1", content="C1", catalog_type=OtherLabels)]
    reviewer: Annotated[str, PopoverAnnotation()]
    headline: str = ""
    body: str = field(default="", metadata={POPOVER_METADATA_KEY: PopoverAnnotation(title="T1")})


class ArticleMetadata:
    summary: Annotated[object, PopoverAnnotation(title="Hi", catalog_type=OtherLabels)]
    author: Annotated[object, PopoverAnnotation(title="Shadow title")]
    notes: Annotated[object, PopoverAnnotation(title="Plain shadow text", content="Plain body")]
    broken: Annotated[object, PopoverAnnotation(title="Missing", catalog_type=OtherLabels)]
    untouched: object
    orphan: Annotated[object, PopoverAnnotation(title="Orphan")]


@metadata_type(ArticleMetadata)
@dataclass
class ShadowedArticle:
    author: Annotated[str, PopoverAnnotation(title="T1")]
    summary: str = ""
    notes: str = ""
    broken: str = ""
    untouched: str = ""


@dataclass
class DerivedArticle(ShadowedArticle):
    extra: str = ""


def test_direct_annotation_resolves_against_default_catalog() -> None:
    resolved = resolve_annotation(Article, "author", default_catalog=Labels)

    assert resolved == ResolvedAnnotation(title="Hello", content="World")


def test_direct_annotation_ignores_declared_catalog() -> None:
    resolved = resolve_annotation(Article, "editor", default_catalog=Labels)

    assert resolved == ResolvedAnnotation(title="Hello", content="World")


def test_direct_annotation_from_dataclass_metadata() -> None:
    resolved = resolve_annotation(Article, "body", default_catalog=Labels)

    assert resolved == ResolvedAnnotation(title="Hello", content="")


def test_direct_annotation_without_text_is_empty() -> None:
    resolved = resolve_annotation(Article, "reviewer", default_catalog=Labels)

    assert resolved.is_empty


def test_direct_annotation_missing_entry_raises() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_annotation(Article, "author", default_catalog=OtherLabels)

    assert excinfo.value.field_name == "content"
    assert excinfo.value.key == "C1"
    assert excinfo.value.catalog_name.endswith("OtherLabels")


def test_direct_annotation_uses_built_in_catalog_when_none_given() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_annotation(Article, "author")

    assert excinfo.value.catalog_name == "popover_labels.resource_catalog.catalog.DefaultLabels"
    assert excinfo.value.key == "T1"


def test_direct_path_does_not_mutate_declared_annotation() -> None:
    resolve_annotation(Article, "editor", default_catalog=Labels)

    declared = Article.__annotations__["editor"].__metadata__[0]
    assert declared.catalog_type is OtherLabels
    assert declared.title == "Other hello"


def test_field_without_annotation_is_empty() -> None:
    assert resolve_annotation(Article, "headline", default_catalog=Labels) == ResolvedAnnotation()


def test_unknown_field_is_empty() -> None:
    assert resolve_annotation(Article, "missing", default_catalog=Labels).is_empty


def test_shadow_annotation_respects_its_own_catalog() -> None:
    resolved = resolve_annotation(ShadowedArticle, "summary", default_catalog=Labels)

    assert resolved == ResolvedAnnotation(title="Greeting", content="")


def test_shadow_annotation_with_literal_text() -> None:
    resolved = resolve_annotation(ShadowedArticle, "notes", default_catalog=Labels)

    assert resolved == ResolvedAnnotation(title="Plain shadow text", content="Plain body")


def test_direct_annotation_takes_precedence_over_shadow() -> None:
    resolved = resolve_annotation(ShadowedArticle, "author", default_catalog=Labels)

    assert resolved.title == "Hello"


def test_shadow_field_without_annotation_is_empty() -> None:
    assert resolve_annotation(ShadowedArticle, "untouched", default_catalog=Labels).is_empty


def test_shadow_only_field_not_on_model_is_empty() -> None:
    assert resolve_annotation(ShadowedArticle, "orphan", default_catalog=Labels).is_empty


def test_shadow_metadata_is_inherited_by_subclasses() -> None:
    resolved = resolve_annotation(DerivedArticle, "summary", default_catalog=Labels)

    assert resolved.title == "Greeting"
    assert resolve_annotation(DerivedArticle, "extra", default_catalog=Labels).is_empty


def test_shadow_annotation_missing_entry_raises() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_annotation(ShadowedArticle, "broken", default_catalog=Labels)

    assert excinfo.value.key == "Missing"
    assert excinfo.value.catalog_name.endswith("OtherLabels")


def test_strategies_are_tried_direct_first() -> None:
    direct, shadow = resolution_strategies(Labels)

    assert shadow is shadow_metadata_strategy
    assert direct(ShadowedArticle, "author") is not None
    assert direct(ShadowedArticle, "summary") is None
    assert shadow(ShadowedArticle, "summary") is not None


def test_direct_strategy_builds_fresh_annotation_bound_to_catalog() -> None:
    strategy = direct_annotation_strategy(Labels)

    first = strategy(Article, "editor")
    second = strategy(Article, "editor")

    assert first is not None and second is not None
    assert first is not second
    assert first.catalog_type is Labels
    assert first.declared_title == "T1"
