"""Tests for merging local and remote results."""

from recipe_finder.core.merge import merge_results
from recipe_finder.core.models import Recipe


def _recipe(name, recipe_id=None):
    return Recipe(id=recipe_id or name, name=name)


def test_remote_name_collision_is_suppressed():
    merged = merge_results([_recipe("Soup", "local_Soup")], [_recipe("SOUP", "1"), _recipe("Pie", "2")])

    assert [r.name for r in merged] == ["Soup", "Pie"]
    assert merged[0].id == "local_Soup"


def test_local_results_keep_order_and_are_all_kept():
    local = [_recipe("B"), _recipe("A"), _recipe("a")]
    merged = merge_results(local, [])
    assert [r.name for r in merged] == ["B", "A", "a"]


def test_remote_duplicates_of_each_other_are_dropped():
    merged = merge_results([], [_recipe("Pie", "1"), _recipe("pie", "2"), _recipe("Tart", "3")])
    assert [r.id for r in merged] == ["1", "3"]


def test_empty_inputs():
    assert merge_results([], []) == []
