"""Unit tests for CLI components."""

import json
from unittest.mock import patch

from click.testing import CliRunner

from rail_journey_search.cli.main import cli


class TestCLI:
    """Test CLI commands."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_cli_version(self):
        """Test CLI version option."""
        result = self.runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_cli_help(self):
        """Test CLI help."""
        result = self.runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Railway Journey Search" in result.output

    def test_journeys_text_format(self, network_file):
        """Test journeys are printed as route summaries."""
        result = self.runner.invoke(
            cli, ["journeys", str(network_file), "Central", "Harbour", "5"]
        )

        assert result.exit_code == 0
        assert "Routes found: 4" in result.output
        assert "Route Summary" in result.output
        assert "Embark at Central on Red Line." in result.output
        assert "At Market, change to Blue Line." in result.output
        assert "Arrive at Harbour" in result.output
        assert "Total distance :12" in result.output
        assert "Changes :0" in result.output
        assert "Passing through: Central, Market, Harbour" in result.output

    def test_journeys_max_results(self, network_file):
        """Test the result count is capped."""
        result = self.runner.invoke(
            cli, ["journeys", str(network_file), "Central", "Harbour", "1"]
        )

        assert result.exit_code == 0
        assert "Routes found: 1" in result.output
        assert "change to" not in result.output

    def test_journeys_max_transfers(self, network_file):
        """Test --max-transfers skips journeys with more changes."""
        result = self.runner.invoke(
            cli,
            [
                "journeys",
                str(network_file),
                "Central",
                "Harbour",
                "10",
                "--max-transfers",
                "0",
            ],
        )

        assert result.exit_code == 0
        assert "Routes found: 1" in result.output

    def test_journeys_json_format(self, network_file):
        """Test JSON output."""
        result = self.runner.invoke(
            cli,
            ["journeys", str(network_file), "Central", "Harbour", "2", "-f", "json"],
        )

        assert result.exit_code == 0
        output_data = json.loads(result.output)
        assert isinstance(output_data, list)
        assert len(output_data) == 2
        first = output_data[0]
        assert first["distance"] == 12
        assert first["changes"] == 0
        assert [s["name"] for s in first["stations"]] == ["Central", "Market", "Harbour"]
        assert first["text"] == "Embark at Central on Red Line."

    def test_journeys_defaults_from_environment(self, network_file):
        """Test format and transfer limit fall back to RAIL_JOURNEY_* values."""
        result = self.runner.invoke(
            cli,
            ["journeys", str(network_file), "Central", "Harbour", "10"],
            env={
                "RAIL_JOURNEY_OUTPUT_FORMAT": "json",
                "RAIL_JOURNEY_MAX_TRANSFERS": "0",
            },
        )

        assert result.exit_code == 0
        output_data = json.loads(result.output)
        assert len(output_data) == 1
        assert output_data[0]["changes"] == 0

    def test_journeys_options_override_environment(self, network_file):
        """Test explicit options win over RAIL_JOURNEY_* values."""
        result = self.runner.invoke(
            cli,
            [
                "journeys",
                str(network_file),
                "Central",
                "Harbour",
                "10",
                "--format",
                "text",
                "--max-transfers",
                "1",
            ],
            env={
                "RAIL_JOURNEY_OUTPUT_FORMAT": "json",
                "RAIL_JOURNEY_MAX_TRANSFERS": "0",
            },
        )

        assert result.exit_code == 0
        assert "Routes found: 3" in result.output

    def test_journeys_invalid_environment(self, network_file):
        """Test an invalid RAIL_JOURNEY_* value exits with an error."""
        result = self.runner.invoke(
            cli,
            ["journeys", str(network_file), "Central", "Harbour", "5"],
            env={"RAIL_JOURNEY_OUTPUT_FORMAT": "xml"},
        )

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_journeys_table_format(self, network_file):
        """Test table output."""
        result = self.runner.invoke(
            cli,
            ["journeys", str(network_file), "Central", "Harbour", "5", "-f", "table"],
        )

        assert result.exit_code == 0
        assert "Journeys" in result.output
        assert "Central" in result.output

    def test_journeys_detailed_format(self, network_file):
        """Test detailed output."""
        result = self.runner.invoke(
            cli,
            ["journeys", str(network_file), "Central", "Harbour", "5", "-f", "detailed"],
        )

        assert result.exit_code == 0
        assert "Route Summary 1" in result.output

    def test_journeys_no_path(self, tmp_path):
        """Test disconnected stations report zero routes successfully."""
        path = tmp_path / "split.json"
        path.write_text(
            json.dumps(
                {
                    "routes": [
                        {
                            "name": "Red",
                            "stops": [
                                {"stationID": 1, "stationName": "A"},
                                {"stationID": 2, "stationName": "B", "distanceToPrev": 1},
                            ],
                        },
                        {
                            "name": "Blue",
                            "stops": [
                                {"stationID": 3, "stationName": "C"},
                                {"stationID": 4, "stationName": "D", "distanceToPrev": 1},
                            ],
                        },
                    ]
                }
            ),
            encoding="utf-8",
        )

        result = self.runner.invoke(cli, ["journeys", str(path), "A", "D", "5"])

        assert result.exit_code == 0
        assert "Routes found: 0" in result.output

    def test_journeys_station_not_found(self, network_file):
        """Test an unknown station exits with an error."""
        result = self.runner.invoke(
            cli, ["journeys", str(network_file), "Atlantis", "Harbour", "5"]
        )

        assert result.exit_code == 1
        assert "One or more station cannot be found on this network" in result.output
        assert "Routes found: 0" in result.output

    def test_journeys_non_numeric_max_results(self, network_file):
        """Test a non-numeric max results is a usage error."""
        result = self.runner.invoke(
            cli, ["journeys", str(network_file), "Central", "Harbour", "many"]
        )

        assert result.exit_code != 0
        assert "Invalid value" in result.output

    def test_journeys_negative_max_results(self, network_file):
        """Test a negative max results is a usage error."""
        result = self.runner.invoke(
            cli, ["journeys", str(network_file), "Central", "Harbour", "-1"]
        )

        assert result.exit_code != 0

    def test_journeys_wrong_argument_count(self, network_file):
        """Test missing arguments are a usage error."""
        result = self.runner.invoke(cli, ["journeys", str(network_file), "Central"])

        assert result.exit_code != 0
        assert "Missing argument" in result.output

    def test_journeys_missing_file(self, tmp_path):
        """Test a missing network file exits with an error."""
        result = self.runner.invoke(
            cli, ["journeys", str(tmp_path / "nope.json"), "A", "B", "5"]
        )

        assert result.exit_code == 1
        assert "File error" in result.output

    def test_journeys_bad_data(self, tmp_path):
        """Test a malformed network file exits with an error."""
        path = tmp_path / "bad.json"
        path.write_text('{"routes": [{"name": "Red"}]}', encoding="utf-8")

        result = self.runner.invoke(cli, ["journeys", str(path), "A", "B", "5"])

        assert result.exit_code == 1
        assert "Data error" in result.output

    @patch("rail_journey_search.cli.main.find_best_journeys")
    def test_journeys_unexpected_error(self, mock_find, network_file):
        """Test unexpected errors are reported, not raised."""
        mock_find.side_effect = RuntimeError("boom")

        result = self.runner.invoke(
            cli, ["journeys", str(network_file), "Central", "Harbour", "5"]
        )

        assert result.exit_code == 1
        assert "Unexpected error" in result.output
        assert "boom" in result.output

    @patch("rail_journey_search.cli.main.find_best_journeys")
    def test_journeys_passes_arguments(self, mock_find, network_file):
        """Test arguments reach the search."""
        mock_find.return_value = []

        result = self.runner.invoke(
            cli,
            [
                "journeys",
                str(network_file),
                "Central",
                "Harbour",
                "3",
                "--max-transfers",
                "2",
            ],
        )

        assert result.exit_code == 0
        args, kwargs = mock_find.call_args
        assert args[1:] == ("Central", "Harbour", 3)
        assert kwargs == {"max_transfers": 2}

    def test_config_show(self):
        """Test configuration display."""
        result = self.runner.invoke(
            cli,
            ["config", "show"],
            env={"RAIL_JOURNEY_MAX_RESULTS": "3", "RAIL_JOURNEY_MAX_TRANSFERS": None},
        )

        assert result.exit_code == 0
        assert "Current Configuration" in result.output
        assert "Default max results: 3" in result.output
        assert "no limit" in result.output

    def test_config_show_invalid(self):
        """Test invalid configuration exits with an error."""
        result = self.runner.invoke(
            cli, ["config", "show"], env={"RAIL_JOURNEY_MAX_RESULTS": "lots"}
        )

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
