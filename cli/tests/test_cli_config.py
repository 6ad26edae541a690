from __future__ import annotations

from textmagic_cli import config


def _use_tmp_config_dir(monkeypatch, tmp_path) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def test_load_config_defaults_without_file(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)
    for name in (config.ENV_USERNAME, config.ENV_TOKEN, config.ENV_BASE_URL):
        monkeypatch.delenv(name, raising=False)

    cfg = config.load_config()

    assert cfg.base_url == "https://rest.textmagic.com/api/v2"
    assert cfg.auth.username == ""
    assert cfg.auth.token == ""


def test_save_and_load_round_trip(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)
    monkeypatch.delenv(config.ENV_USERNAME, raising=False)
    monkeypatch.delenv(config.ENV_TOKEN, raising=False)
    monkeypatch.delenv(config.ENV_BASE_URL, raising=False)

    path = config.save_config(
        config.AppConfig(base_url="https://sandbox.example.test/api/v2", auth=config.AuthConfig("demo", "key"))
    )
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")

    assert path.endswith("config.toml")
    assert 'username = "demo"' in contents
    cfg = config.load_config()
    assert cfg.base_url == "https://sandbox.example.test/api/v2"
    assert cfg.auth.token == "key"


def test_env_overrides_file(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)
    tmp_path.joinpath("config.toml").write_text(
        '\n'.join(['base_url = "https://rest.textmagic.com/api/v2"', "", "[auth]", 'username = "file-user"',
                   'token = "file-token"', ""]),
        encoding="utf-8",
    )
    monkeypatch.setenv(config.ENV_TOKEN, "env-token")
    monkeypatch.setenv(config.ENV_BASE_URL, "localhost:8080/api/v2/")
    monkeypatch.delenv(config.ENV_USERNAME, raising=False)

    cfg = config.load_config()

    assert cfg.auth.username == "file-user"
    assert cfg.auth.token == "env-token"
    assert cfg.base_url == "http://localhost:8080/api/v2"


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("rest.textmagic.com/api/v2") == "https://rest.textmagic.com/api/v2"


def test_normalize_base_url_strips_trailing_slash() -> None:
    assert config.normalize_base_url("https://example.com/") == "https://example.com"
