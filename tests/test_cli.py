"""Tests for the command line interface."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from recipe_finder.cli import cli
from recipe_finder.core.mealdb import MealDBClient
from recipe_finder.core.selection import SelectionStore


@pytest.fixture
def runner(tmp_path, monkeypatch, local_records):
    data_path = tmp_path / "recipes.json"
    data_path.write_text(json.dumps(local_records))
    monkeypatch.setenv("RECIPE_FINDER_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("RECIPE_FINDER_LOCAL_DATA_PATH", str(data_path))
    monkeypatch.setenv("RECIPE_FINDER_LOCALE", "en")
    return CliRunner()


@pytest.fixture
def api(fake_api):
    with patch.object(MealDBClient, "from_config", side_effect=lambda config: fake_api.client()):
        yield fake_api


class TestSearchCommand:
    def test_table_output(self, runner, api, make_meal):
        api.by_name["soup"] = [make_meal("3", "Leek Soup", area="French")]

        result = runner.invoke(cli, ["search", "soup"])

        assert result.exit_code == 0
        assert "Tomato Soup" in result.output
        assert "Leek Soup" in result.output
        assert "French" in result.output

    def test_json_output(self, runner, api):
        result = runner.invoke(cli, ["search", "pancakes", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0]["id"] == "local_Pancakes"

    def test_no_results(self, runner, api):
        result = runner.invoke(cli, ["search", "zzz"])

        assert result.exit_code == 0
        assert "No recipes found." in result.output

    def test_select_saves_for_details(self, runner, api, tmp_path):
        result = runner.invoke(cli, ["search", "pancakes", "--select", "local_Pancakes"])
        assert result.exit_code == 0

        stored = SelectionStore(tmp_path / "home" / "selected_recipe.json").load()
        assert stored.name == "Pancakes"

        details = runner.invoke(cli, ["details"])
        assert details.exit_code == 0
        assert "Ingredients (3):" in details.output

    def test_select_unknown_id_fails(self, runner, api):
        result = runner.invoke(cli, ["search", "pancakes", "--select", "nope"])
        assert result.exit_code != 0


class TestOtherCommands:
    def test_category(self, runner, api, make_meal):
        api.add(make_meal("30", "Ratatouille", category="Vegetarian"))
        api.by_category["Vegetarian"] = ["30"]

        result = runner.invoke(cli, ["category", "Vegetarian"])

        assert result.exit_code == 0
        assert "Ratatouille" in result.output

    def test_random_count(self, runner, api, make_meal):
        api.random = [make_meal("1", "Bigos"), make_meal("2", "Pierogi")]

        result = runner.invoke(cli, ["random", "--count", "2"])

        assert result.exit_code == 0
        assert api.count("random.php") == 2
        assert "Here are some suggested recipes:" in result.output
        assert "Pierogi" in result.output

    def test_details_without_selection(self, runner):
        result = runner.invoke(cli, ["details"])

        assert result.exit_code == 1
        assert "No recipe selected" in result.output

    def test_details_with_malformed_selection(self, runner, tmp_path):
        home = tmp_path / "home"
        home.mkdir()
        (home / "selected_recipe.json").write_text(json.dumps({"selectedRecipe": {"name": "Soup", "cookingTime": "abc"}}))

        result = runner.invoke(cli, ["details"])

        assert result.exit_code == 1
        assert "No recipe selected" in result.output
