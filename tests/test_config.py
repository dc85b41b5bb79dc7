# Copyright (C) 2023 Anthony Harrison
# SPDX-License-Identifier: Apache-2.0

from license4project.config import CONFIG_ENV, load_config, user_config_file


class TestConfig:
    def test_bundled_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.toml")
        assert config["default_file_name"] == "LICENSE"
        assert config.get("author") is None

    def test_user_config_overrides(self, tmp_path):
        filename = tmp_path / "config.toml"
        filename.write_text(
            'author = "Jane Doe"\nemail = "jane@example.com"\n'
            'default_file_name = "COPYING"\n'
        )
        config = load_config(filename)
        assert config["author"] == "Jane Doe"
        assert config["email"] == "jane@example.com"
        assert config["default_file_name"] == "COPYING"

    def test_malformed_user_config(self, tmp_path, capsys):
        filename = tmp_path / "config.toml"
        filename.write_text("author = \n")
        config = load_config(filename)
        assert config["default_file_name"] == "LICENSE"
        assert "[ERROR] Unable to process configuration file" in capsys.readouterr().out

    def test_user_config_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "config.toml"))
        assert user_config_file() == tmp_path / "config.toml"
