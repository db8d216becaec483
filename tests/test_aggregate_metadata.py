"""Tests for merging items into groups and namespace buckets."""

import logging
from pathlib import Path

import pytest

from property_documenter.aggregate_metadata import aggregate_metadata
from property_documenter.group_properties_by_namespace import (
    group_properties_by_namespace,
)
from property_documenter.item_metadata import ItemDeprecation, ItemMetadata
from property_documenter.top_level_groups import top_level_groups


def _group(name: str, description: str | None = None) -> ItemMetadata:
    return ItemMetadata(name=name, kind="group", description=description)


def _prop(name: str, default: object = None, **kwargs: object) -> ItemMetadata:
    return ItemMetadata(name=name, kind="property", default_value=default, **kwargs)


def test_top_level_groups_skip_nested_and_properties() -> None:
    """Verify that only dot-free groups are kept, in encounter order."""
    items = [
        _group("server"),
        _group("server.ssl"),
        _prop("management"),
        _group("management"),
    ]
    assert [g.name for g in top_level_groups(items)] == ["server", "management"]


def test_duplicate_groups_are_preserved() -> None:
    """Verify that the same group from two files appears twice."""
    file_a = [_group("server", "From A")]
    file_b = [_group("server", "From B")]
    aggregated = aggregate_metadata([file_a, file_b])
    assert [g.description for g in aggregated.groups] == ["From A", "From B"]


def test_buckets_follow_first_occurrence_order() -> None:
    """Verify stable grouping: namespaces and rows keep stream order."""
    items = [
        _prop("zeta.a"),
        _prop("alpha.a"),
        _prop("zeta.b"),
        _prop("alpha.b.c"),
        _prop("middle"),
    ]
    buckets = group_properties_by_namespace(items)
    assert list(buckets) == ["zeta", "alpha", "middle"]
    assert [p.name for p in buckets["zeta"]] == ["zeta.a", "zeta.b"]
    assert [p.name for p in buckets["alpha"]] == ["alpha.a", "alpha.b.c"]
    assert [p.name for p in buckets["middle"]] == ["middle"]


def test_bucket_without_declared_group() -> None:
    """Verify that a namespace exists even when no group declares it."""
    aggregated = aggregate_metadata([[_prop("cache.eviction.size", 100)]])
    assert aggregated.groups == []
    assert list(aggregated.properties_by_namespace) == ["cache"]


def test_bucket_keys_are_first_segments() -> None:
    """Verify that bucket keys equal the distinct first segments of properties."""
    file_a = [_prop("a.x"), _group("g"), _prop("b.y.z")]
    file_b = [_prop("c"), _prop("a.q"), _group("unused")]
    aggregated = aggregate_metadata([file_a, file_b])
    assert set(aggregated.properties_by_namespace) == {"a", "b", "c"}


def test_duplicate_properties_are_kept() -> None:
    """Verify that the same property declared twice yields two rows."""
    aggregated = aggregate_metadata(
        [[_prop("server.port", 8080)], [_prop("server.port", 9090)]]
    )
    rows = aggregated.properties_by_namespace["server"]
    assert [p.default_value for p in rows] == ["8080", "9090"]


def test_properties_are_normalized() -> None:
    """Verify that defaults are rendered and deprecation is carried over."""
    dep = ItemDeprecation(reason="gone")
    aggregated = aggregate_metadata(
        [
            [
                _prop("app.list", ("a", "b", "c")),
                _prop("app.none"),
                _prop("app.flag", True, deprecation=dep),
            ]
        ]
    )
    rows = aggregated.properties_by_namespace["app"]
    assert [p.default_value for p in rows] == ["a,b,c", "", "true"]
    assert rows[2].deprecation is dep
    assert rows[0].deprecation is None


def test_duplicate_property_logs_both_files(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that a property declared in two files is reported with both paths."""
    first = ItemMetadata(name="server.port", kind="property", file=Path("a/meta.json"))
    second = ItemMetadata(name="server.port", kind="property", file=Path("b/meta.json"))
    with caplog.at_level(logging.INFO):
        buckets = group_properties_by_namespace([first, second])
    assert len(buckets["server"]) == 2
    assert str(Path("a/meta.json")) in caplog.text
    assert str(Path("b/meta.json")) in caplog.text
