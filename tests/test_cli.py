"""Tests for CLI commands."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from maxprotein.cli import app

runner = CliRunner()


class TestMainCommands:
    """Tests for top-level CLI behavior."""

    def test_help(self):
        """Test that --help works."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "protein" in result.output.lower()

    def test_missing_data_path(self):
        """Without a path or configured database the command fails."""
        result = runner.invoke(app, ["select"])
        assert result.exit_code == 1
        assert "No USDA database" in result.output

    def test_nonexistent_file(self, tmp_path):
        """A path that does not exist is reported."""
        result = runner.invoke(app, ["select", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestSelectCommand:
    """Tests for the select command."""

    def test_greedy_json(self, abbrev_path):
        """JSON output wraps the result in the agent envelope."""
        result = runner.invoke(
            app, ["select", str(abbrev_path), "--budget", "400", "--json"]
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["success"] is True
        assert payload["command"] == "select"
        foods = [f["description"] for f in payload["data"]["foods"]]
        # Chicken (31 g), egg (13 g), broccoli (3 g); rice no longer fits
        assert foods == ["CHICKEN,BROILERS,BREAST", "EGG,WHL,RAW,FRSH", "BROCCOLI,RAW"]
        assert payload["data"]["total_kcal"] == 342
        assert payload["data"]["candidate_count"] == 5

    def test_exhaustive_json(self, abbrev_path):
        """Exhaustive search finds the best subset."""
        result = runner.invoke(
            app,
            ["select", str(abbrev_path), "-m", "exhaustive", "-b", "400", "--json"],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["method"] == "exhaustive"
        assert data["total_protein_g"] == 47
        assert data["total_kcal"] <= 400

    def test_count_limits_candidates(self, abbrev_path):
        """--count bounds the candidate list."""
        result = runner.invoke(
            app, ["select", str(abbrev_path), "-n", "2", "--json"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["candidate_count"] == 2

    def test_table_output(self, abbrev_path):
        """The default output is a table."""
        result = runner.invoke(app, ["select", str(abbrev_path)])

        assert result.exit_code == 0, result.output
        assert "CHICKEN" in result.output
        assert "TOTAL" in result.output

    def test_markdown_output(self, abbrev_path):
        """Markdown output is printed as text."""
        result = runner.invoke(app, ["select", str(abbrev_path), "-o", "markdown"])

        assert result.exit_code == 0, result.output
        assert "# Max Protein Selection" in result.output

    def test_unknown_output(self, abbrev_path):
        """Unknown output formats exit with an error."""
        result = runner.invoke(app, ["select", str(abbrev_path), "-o", "xml"])
        assert result.exit_code == 1
        assert "Unknown output format" in result.output

    def test_too_many_candidates(self, tmp_path, abbrev_line):
        """Exhaustive search over 64 foods reports the size limit."""
        lines = [abbrev_line(str(i), f"~FOOD {i}~", "10", "1") for i in range(70)]
        path = tmp_path / "ABBREV.txt"
        path.write_text("\n".join(lines) + "\n")

        result = runner.invoke(
            app, ["select", str(path), "-m", "exhaustive", "-n", "64", "--json"]
        )

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["success"] is False
        assert "fewer than 64" in payload["errors"][0]

    def test_negative_budget(self, abbrev_path):
        """A negative budget is rejected."""
        result = runner.invoke(app, ["select", str(abbrev_path), "--budget=-5"])
        assert result.exit_code == 1
        assert "non-negative" in result.output


class TestCompareCommand:
    """Tests for the compare command."""

    def test_compare_json(self, abbrev_path):
        """Both methods run and the protein gap is reported."""
        result = runner.invoke(
            app, ["compare", str(abbrev_path), "-b", "400", "--json"]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["greedy"]["total_protein_g"] == 47
        assert data["exhaustive"]["total_protein_g"] == 47
        assert data["protein_gap_g"] == 0

    def test_compare_table(self, abbrev_path):
        """Table mode prints both results and a summary panel."""
        result = runner.invoke(app, ["compare", str(abbrev_path)])

        assert result.exit_code == 0, result.output
        assert "Comparison" in result.output


class TestBenchmarkCommand:
    """Tests for the benchmark command."""

    def test_benchmark_json(self, abbrev_path):
        """Each size/method pair is reported."""
        result = runner.invoke(
            app, ["benchmark", str(abbrev_path), "--sizes", "2,4", "--json"]
        )

        assert result.exit_code == 0, result.output
        runs = json.loads(result.output)["data"]["runs"]
        assert [(r["method"], r["n"]) for r in runs] == [
            ("greedy", 2), ("exhaustive", 2), ("greedy", 4), ("exhaustive", 4),
        ]

    def test_benchmark_single_method(self, abbrev_path):
        """--method restricts the timed methods."""
        result = runner.invoke(
            app,
            ["benchmark", str(abbrev_path), "-s", "3", "-m", "greedy", "--json"],
        )

        assert result.exit_code == 0, result.output
        runs = json.loads(result.output)["data"]["runs"]
        assert [r["method"] for r in runs] == ["greedy"]

    def test_invalid_sizes(self, abbrev_path):
        """Non-numeric sizes are rejected."""
        result = runner.invoke(app, ["benchmark", str(abbrev_path), "-s", "five"])
        assert result.exit_code == 1

    def test_benchmark_table(self, abbrev_path):
        """Table mode prints the timing table."""
        result = runner.invoke(app, ["benchmark", str(abbrev_path), "-s", "3"])

        assert result.exit_code == 0, result.output
        assert "Selection Timing" in result.output


class TestConfigCommands:
    """Tests for config subcommands."""

    def test_config_show(self):
        """The active settings are printed as YAML."""
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "total_kcal: 5000" in result.output

    def test_config_init(self, tmp_path, abbrev_path):
        """config init writes a loadable file."""
        from maxprotein.config.settings import Settings

        path = tmp_path / "config.yaml"
        result = runner.invoke(
            app, ["config", "init", "--path", str(path), "--data", str(abbrev_path)]
        )

        assert result.exit_code == 0, result.output
        assert Settings.load(path).data.abbrev_path == abbrev_path

    def test_configured_data_path(self, default_settings, abbrev_path):
        """select falls back to the configured database path."""
        default_settings.data.abbrev_path = abbrev_path

        result = runner.invoke(app, ["select", "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["candidate_count"] == 5
