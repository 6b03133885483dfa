"""
Tests for the command line entry point. Only the paths that exit before an
editing session starts are exercised here.
"""

from ghosttext.entrypoint import main


def test_unknown_provider_exits_with_an_error(tmp_path, capsys):
    exit_code = main(
        [
            "--config",
            str(tmp_path / "config.json"),
            "--provider",
            "ghosttext.no_such_module:provider",
        ]
    )

    assert exit_code == 1
    assert "ProviderLoadException" in capsys.readouterr().out


def test_negative_debounce_exits_with_an_error(tmp_path, capsys):
    exit_code = main(["--config", str(tmp_path / "config.json"), "--debounce", "-5"])

    assert exit_code == 1
    assert "InvalidConfigException" in capsys.readouterr().out
