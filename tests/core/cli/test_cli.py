"""Tests for the CLI entry point."""

import json
import os

from click.testing import CliRunner

from healthlog.core.cli import main


class TestCliGroup:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.output
        assert "report" in result.output
        assert "log" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestCheckCommand:
    def test_no_entries(self, tmp_config_file):
        runner = CliRunner()
        result = runner.invoke(main, ["--config", tmp_config_file, "check", "--now", "2025-01-05T09:15:00"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "skip": False,
            "slot": "morning",
            "current_time": "2025-01-05 09:15",
            "current_date": "2025-01-05",
            "target_time": "09:30",
            "recent_entry": None,
        }

    def test_recent_entry(self, tmp_config_file, write_entry):
        write_entry("2025-01-05-1620", {"timestamp": "2025-01-05T16:20:00-05:00"})
        runner = CliRunner()
        result = runner.invoke(main, ["--config", tmp_config_file, "check", "--now", "2025-01-05T17:00:00"])
        data = json.loads(result.output)
        assert data["skip"] is True
        assert data["slot"] == "afternoon"
        assert data["recent_entry"] == "2025-01-05-1620"

    def test_window_option(self, tmp_config_file, write_entry):
        write_entry("2025-01-05-0900", {})
        runner = CliRunner()
        args = ["--config", tmp_config_file, "check", "--now", "2025-01-05T09:45:00", "--window", "30"]
        result = runner.invoke(main, args)
        assert json.loads(result.output)["skip"] is False

    def test_now_converted_to_zone(self, tmp_config_file):
        runner = CliRunner()
        result = runner.invoke(main, ["--config", tmp_config_file, "check", "--now", "2025-01-05T18:30:00+00:00"])
        assert json.loads(result.output)["current_time"] == "2025-01-05 13:30"

    def test_creates_entries_dir(self, tmp_dir, tmp_config_file, entries_dir):
        os.rmdir(entries_dir)
        runner = CliRunner()
        result = runner.invoke(main, ["--config", tmp_config_file, "check"])
        assert result.exit_code == 0
        assert os.path.isdir(entries_dir)

    def test_bad_now(self, tmp_config_file):
        runner = CliRunner()
        result = runner.invoke(main, ["--config", tmp_config_file, "check", "--now", "soon"])
        assert result.exit_code != 0

    def test_invalid_config(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            f.write("checker:\n  timezone: Nowhere/Special\n")
        runner = CliRunner()
        result = runner.invoke(main, ["--config", config_path, "check"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestReportCommand:
    def test_no_data(self, tmp_config_file):
        runner = CliRunner()
        result = runner.invoke(main, ["--config", tmp_config_file, "report"])
        assert result.exit_code == 1
        assert "No data files found" in result.output

    def test_writes_dashboard(self, tmp_dir, tmp_config_file, write_entry):
        write_entry("2025-01-05-0930", {"timestamp": "2025-01-05T09:30:00", "pain_level": 4, "coffee": True})
        write_entry("2025-01-05-1630", {"timestamp": "2025-01-05T16:30:00", "pain_level": 2})
        write_entry("2025-01-06-0930", "{broken")
        runner = CliRunner()
        result = runner.invoke(main, ["--config", tmp_config_file, "report"])
        assert result.exit_code == 0
        assert "2 entries" in result.output

        with open(os.path.join(tmp_dir, "index.html")) as f:
            html = f.read()
        assert "1/2" in html
        assert "3.0" in html

    def test_output_option(self, tmp_dir, tmp_config_file, write_entry):
        write_entry("2025-01-05-0930", {"timestamp": "2025-01-05T09:30:00"})
        output = os.path.join(tmp_dir, "public", "health.html")
        runner = CliRunner()
        result = runner.invoke(main, ["--config", tmp_config_file, "report", "--output", output])
        assert result.exit_code == 0
        assert os.path.exists(output)


class TestLogCommand:
    def test_saves_entry(self, tmp_config_file, entries_dir):
        runner = CliRunner()
        args = [
            "--config", tmp_config_file, "log",
            "--now", "2025-01-05T09:41:00",
            "--bedtime", "23:10", "--wake-time", "06:50",
            "--waking", "02:00", "--waking", "04:30",
            "--coffee", "--pain", "3", "--headache", "none",
        ]  # fmt: skip
        result = runner.invoke(main, args)
        assert result.exit_code == 0

        with open(os.path.join(entries_dir, "2025-01-05-0941.json")) as f:
            data = json.load(f)
        assert data["slot"] == "morning"
        assert data["timestamp"] == "2025-01-05T09:41:00-05:00"
        assert data["night_wakings"] == ["02:00", "04:30"]
        assert data["coffee"] is True
        assert data["pain_level"] == 3
        assert "exercise" not in data

    def test_duplicate_identifier(self, tmp_config_file):
        runner = CliRunner()
        args = ["--config", tmp_config_file, "log", "--now", "2025-01-05T16:41:00"]
        assert runner.invoke(main, args).exit_code == 0
        result = runner.invoke(main, args)
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_invalid_clock(self, tmp_config_file):
        runner = CliRunner()
        result = runner.invoke(main, ["--config", tmp_config_file, "log", "--bedtime", "late"])
        assert result.exit_code == 1

    def test_then_check_skips(self, tmp_config_file):
        runner = CliRunner()
        runner.invoke(main, ["--config", tmp_config_file, "log", "--now", "2025-01-05T16:20:00"])
        result = runner.invoke(main, ["--config", tmp_config_file, "check", "--now", "2025-01-05T16:50:00"])
        assert json.loads(result.output)["skip"] is True
