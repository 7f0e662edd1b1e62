import pytest

from urlsign.config import DEFAULT_SECRET_ENV, SignerConfig, load_config, resolve_secret_key


def test_load_config_missing_file_returns_defaults(tmp_path) -> None:
    config = load_config(tmp_path / "config.yml")

    assert config == SignerConfig()
    assert config.secret_key is None
    assert config.secret_key_env == DEFAULT_SECRET_ENV
    assert config.log_level == "WARNING"


def test_load_config_reads_config_list(tmp_path) -> None:
    # Arrange
    path = tmp_path / "config.yml"
    path.write_text(
        "config:\n"
        "  - secret_key: vNIXE0xscrmjlyV-12Nj_BvUPaw=\n"
        "    log_level: info\n",
        encoding="utf-8",
    )

    # Act
    config = load_config(path)

    # Assert
    assert config.secret_key == "vNIXE0xscrmjlyV-12Nj_BvUPaw="
    assert config.log_level == "info"


def test_load_config_later_entries_override_earlier(tmp_path) -> None:
    path = tmp_path / "config.yml"
    path.write_text(
        "config:\n"
        "  - secret_key_env: FIRST_SECRET\n"
        "    log_level: DEBUG\n"
        "  - secret_key_env: SECOND_SECRET\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.secret_key_env == "SECOND_SECRET"
    assert config.log_level == "DEBUG"


def test_load_config_accepts_single_mapping(tmp_path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("config:\n  log_level: ERROR\n", encoding="utf-8")

    assert load_config(path).log_level == "ERROR"


def test_load_config_empty_file_returns_defaults(tmp_path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == SignerConfig()


@pytest.mark.parametrize(
    "content",
    [
        "config: [unterminated\n",            # not valid YAML
        "- just\n- a\n- list\n",              # top level is not a mapping
        "config: 42\n",                       # config is neither list nor mapping
        "config:\n  - just a string\n",       # entry is not a mapping
        "config:\n  - log_level: [1, 2]\n",   # wrong type for a field
    ],
)
def test_load_config_rejects_malformed_content(tmp_path, content: str) -> None:
    path = tmp_path / "config.yml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)


def test_resolve_secret_key_prefers_override(monkeypatch) -> None:
    monkeypatch.setenv(DEFAULT_SECRET_ENV, "from-env")
    config = SignerConfig(secret_key="from-file")

    assert resolve_secret_key(config, override="from-cli") == "from-cli"


def test_resolve_secret_key_uses_file_before_env(monkeypatch) -> None:
    monkeypatch.setenv(DEFAULT_SECRET_ENV, "from-env")
    config = SignerConfig(secret_key="from-file")

    assert resolve_secret_key(config) == "from-file"


def test_resolve_secret_key_falls_back_to_env(monkeypatch) -> None:
    # Goal: The configured environment variable is read and whitespace is stripped.

    monkeypatch.setenv("MY_MAPS_SECRET", "  vNIXE0xscrmjlyV-12Nj_BvUPaw=\n")
    config = SignerConfig(secret_key_env="MY_MAPS_SECRET")

    assert resolve_secret_key(config) == "vNIXE0xscrmjlyV-12Nj_BvUPaw="


def test_resolve_secret_key_skips_blank_values(monkeypatch) -> None:
    monkeypatch.setenv(DEFAULT_SECRET_ENV, "from-env")
    config = SignerConfig(secret_key="   ")

    assert resolve_secret_key(config, override="") == "from-env"


def test_resolve_secret_key_raises_when_missing(monkeypatch) -> None:
    monkeypatch.delenv(DEFAULT_SECRET_ENV, raising=False)

    with pytest.raises(RuntimeError, match=DEFAULT_SECRET_ENV):
        resolve_secret_key(SignerConfig())
