"""Tests for CLI commands."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from maxprotein.cli import app

runner = CliRunner()


def parse_json(result) -> dict:
    """Parse the JSON envelope printed by a --json command."""
    return json.loads(result.stdout)


class TestMainCommands:
    """Tests for main CLI commands."""

    def test_help(self):
        """Test that --help works."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "protein" in result.output.lower()

    def test_select_greedy_json(self, abbrev_file):
        """Greedy selection over the sample file."""
        result = runner.invoke(
            app, ["select", str(abbrev_file), "--budget", "400", "--json"]
        )
        assert result.exit_code == 0

        response = parse_json(result)
        assert response["success"] is True
        assert response["command"] == "select"
        data = response["data"]
        assert data["method"] == "greedy"
        # Water is dropped by min_kcal=0; rice and butter no longer fit after egg
        assert data["candidates"] == 4
        assert [f["description"] for f in data["foods"]] == [
            "CHICKEN,BREAST,ROASTED",
            "EGG,WHL,RAW",
        ]
        assert data["total_kcal"] <= 400

    def test_select_exhaustive_json(self, abbrev_file):
        """Exhaustive selection over the sample file."""
        result = runner.invoke(
            app,
            ["select", str(abbrev_file), "-m", "exhaustive", "-b", "450", "--json"],
        )
        assert result.exit_code == 0

        data = parse_json(result)["data"]
        assert data["method"] == "exhaustive"
        assert data["total_protein_g"] == 47
        assert data["solver_info"]["evaluations"] == 16

    def test_select_table(self, abbrev_file):
        """Table output is the default."""
        result = runner.invoke(app, ["select", str(abbrev_file), "--budget", "400"])
        assert result.exit_code == 0
        assert "TOTAL" in result.output

    def test_select_unknown_method(self, abbrev_file):
        """An unknown method is an error."""
        result = runner.invoke(
            app, ["select", str(abbrev_file), "--method", "simplex", "--json"]
        )
        assert result.exit_code == 1
        assert parse_json(result)["errors"] == ["Unknown method: simplex"]

    def test_select_missing_file(self, tmp_path):
        """A missing data file is an error."""
        result = runner.invoke(app, ["select", str(tmp_path / "missing.txt"), "--json"])
        assert result.exit_code == 1
        assert "not found" in parse_json(result)["errors"][0]

    def test_select_too_many_candidates(self, abbrev_line, abbrev_writer):
        """Exhaustive search refuses 64 candidates."""
        lines = [abbrev_line(f"~FOOD {i}~", "100", "5") for i in range(64)]
        path = abbrev_writer(lines)

        result = runner.invoke(
            app,
            ["select", str(path), "-m", "exhaustive", "--limit", "64", "--json"],
        )
        assert result.exit_code == 1
        assert "fewer than 64" in parse_json(result)["errors"][0]

    def test_compare_json(self, abbrev_line, abbrev_writer):
        """Compare reports both results and the gap."""
        path = abbrev_writer([
            abbrev_line("~ITEM 1~", "200", "20"),
            abbrev_line("~ITEM 2~", "300", "25"),
            abbrev_line("~ITEM 3~", "150", "10"),
        ])
        result = runner.invoke(app, ["compare", str(path), "--budget", "400", "--json"])
        assert result.exit_code == 0

        data = parse_json(result)["data"]
        assert data["greedy"]["total_protein_g"] == 25
        assert data["exhaustive"]["total_protein_g"] == 30
        assert data["protein_gap_g"] == 5

    def test_candidates_json(self, abbrev_file):
        """Candidates lists the filtered foods."""
        result = runner.invoke(
            app,
            ["candidates", str(abbrev_file), "--min-kcal", "140", "--max-kcal", "700", "--json"],
        )
        assert result.exit_code == 0

        data = parse_json(result)["data"]
        assert [f["description"] for f in data["foods"]] == [
            "CHICKEN,BREAST,ROASTED",
            "EGG,WHL,RAW",
        ]

    def test_candidates_limit(self, abbrev_file):
        """--limit caps the candidate count."""
        result = runner.invoke(
            app, ["candidates", str(abbrev_file), "--limit", "2", "--json"]
        )
        assert result.exit_code == 0
        assert parse_json(result)["data"]["count"] == 2


class TestConfigCommands:
    """Tests for config subcommands."""

    def test_config_help(self):
        """Test that config --help works."""
        result = runner.invoke(app, ["config", "--help"])
        assert result.exit_code == 0

    def test_config_init(self, tmp_path):
        """config init writes a file and refuses to overwrite it."""
        path = tmp_path / "config.yaml"

        result = runner.invoke(app, ["config", "init", "--path", str(path)])
        assert result.exit_code == 0
        assert path.exists()

        result = runner.invoke(app, ["config", "init", "--path", str(path)])
        assert result.exit_code == 1

    def test_config_file_sets_defaults(self, tmp_path, abbrev_file):
        """--config values are used when options are not given."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            f"data:\n  path: {abbrev_file}\nselection:\n  method: exhaustive\n  total_kcal: 450\n"
        )
        result = runner.invoke(app, ["--config", str(config_path), "select", "--json"])
        assert result.exit_code == 0
        data = parse_json(result)["data"]
        assert data["method"] == "exhaustive"
        assert data["budget_kcal"] == 450
