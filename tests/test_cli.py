"""
CLI tests.
"""

import json

from gesture_config.cli import GestureConfigCLI

from .samples import MALFORMED_CONFIG, SAMPLE_CONFIG


class TestCheckCommand:
    """Test `gesture-config check`."""

    def test_valid_file(self, write_file, capsys):
        path = write_file(SAMPLE_CONFIG)

        status = GestureConfigCLI().run(["check", str(path)])

        out = capsys.readouterr().out
        assert status == 0
        assert "is valid" in out
        assert "4 gesture configs for 3 applications" in out

    def test_invalid_file(self, write_file, capsys):
        path = write_file(MALFORMED_CONFIG)

        status = GestureConfigCLI().run(["check", str(path)])

        assert status == 1
        assert "Error parsing configuration file" in capsys.readouterr().err

    def test_defaults_to_user_config(self, config_paths, capsys):
        config_paths.user_config_dir.mkdir(parents=True)
        config_paths.user_config_file.write_text(SAMPLE_CONFIG)

        status = GestureConfigCLI().run(["--home", str(config_paths.home), "check"])

        assert status == 0
        assert str(config_paths.user_config_file) in capsys.readouterr().out


class TestShowCommand:
    """Test `gesture-config show`."""

    def test_text_output(self, write_file, capsys):
        status = GestureConfigCLI().run(["show", str(write_file(SAMPLE_CONFIG))])

        out = capsys.readouterr().out
        assert status == 0
        assert "Chromium-browser: SWIPE 3 LEFT -> SEND_KEYS" in out
        assert "    keys = Left" in out

    def test_json_output(self, write_file, capsys):
        GestureConfigCLI().run(["show", "--json", str(write_file(SAMPLE_CONFIG))])

        data = json.loads(capsys.readouterr().out)
        assert len(data) == 4
        assert data[0] == {
            "application": "All",
            "gesture_type": "SWIPE",
            "fingers": "3",
            "direction": "UP",
            "action_type": "MAXIMIZE_RESTORE_WINDOW",
            "settings": {"animate": "true", "color": "3E9FED"},
        }


def test_no_command_prints_help(capsys):
    assert GestureConfigCLI().run([]) == 1
    assert "usage" in capsys.readouterr().out
