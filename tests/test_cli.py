"""Tests for the command-line entry point."""

import json
from pathlib import Path

import pytest

from bank_sim.cli import add_demo_accounts, build_parser, load_config, main
from bank_sim.models import BankAccount
from bank_sim.registry import AccountRegistry

ENV_VARS = (
    "BANK_SIM_DATA_FILE",
    "BANK_SIM_PRETTY_JSON",
    "BANK_SIM_DEMO_ACCOUNTS",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "SEED",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, restore_root_logger: None) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def feed_input(monkeypatch: pytest.MonkeyPatch, answers: list[str]) -> None:
    replies = iter(answers)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


class TestLoadConfig:
    """Tests for combining flags with the environment."""

    def test_flags_override_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        monkeypatch.setenv("SEED", "1")
        args = build_parser().parse_args(
            ["--data-file", str(tmp_path / "a.json"), "--log-level", "DEBUG", "--demo", "3"]
        )

        config = load_config(args)

        assert config.storage.data_file == tmp_path / "a.json"
        assert config.log_level == "DEBUG"
        assert config.demo_accounts == 3
        assert config.seed == 1

    def test_env_used_without_flags(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BANK_SIM_DATA_FILE", "bank.json")

        config = load_config(build_parser().parse_args([]))

        assert config.storage.data_file == Path("bank.json")
        assert config.log_format == "standard"

    def test_invalid_log_format_flag(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--log-format", "xml"])


class TestAddDemoAccounts:
    def test_adds_requested_number(self) -> None:
        registry = AccountRegistry()
        registry.add(BankAccount("1", 0))

        add_demo_accounts(registry, 5, seed=3)

        assert len(registry) == 6


class TestMain:
    """Tests for running the shell from the command line."""

    def test_lists_demo_accounts(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, tmp_path: Path
    ) -> None:
        feed_input(monkeypatch, ["3"])

        main(["--data-file", str(tmp_path / "accounts.json"), "--demo", "4", "--seed", "1"])

        out = capsys.readouterr().out
        assert out.count("Type: ") == 4

    def test_loads_existing_file(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, tmp_path: Path
    ) -> None:
        data_file = tmp_path / "accounts.json"
        data_file.write_text(
            json.dumps(
                {
                    "format_version": 1,
                    "accounts": [
                        {
                            "kind": "basic",
                            "account_number": "000-000-042",
                            "balance": "12.50",
                            "cash_on_hand": "0",
                        }
                    ],
                }
            ),
            encoding="utf-8",
        )
        feed_input(monkeypatch, ["3", "5"])

        main(["--data-file", str(data_file)])

        assert "Number: 000-000-042, Balance: 12.50" in capsys.readouterr().out

    def test_reports_corrupt_file(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, tmp_path: Path
    ) -> None:
        data_file = tmp_path / "accounts.json"
        data_file.write_text("<accounts/>", encoding="utf-8")
        feed_input(monkeypatch, ["3"])

        main(["--data-file", str(data_file)])

        out = capsys.readouterr().out
        assert "Failed to load accounts" in out
        assert "No accounts available." in out

    def test_create_save_and_exit(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        data_file = tmp_path / "accounts.json"
        feed_input(monkeypatch, ["1", "3", "123-456-789", "10", "100", "4", "1", "5"])

        main(["--data-file", str(data_file)])

        saved = json.loads(data_file.read_text(encoding="utf-8"))
        assert saved["accounts"][0]["account_number"] == "123-456-789"
        assert saved["accounts"][0]["credit_limit"] == "100"

    def test_invalid_env_reports_usage_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BANK_SIM_DEMO_ACCOUNTS", "many")

        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
