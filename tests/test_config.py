import pytest

from readingclub_client_sdk.config import ClientConfig, ConfigError, load_config, load_retry_policy

_ENV_VARS = [
    "READINGCLUB_ENV",
    "READINGCLUB_API_BASE_URL",
    "READINGCLUB_API_BASE_URL_PROD",
    "READINGCLUB_APP_URL",
    "READINGCLUB_TIMEOUT_SECONDS",
    "READINGCLUB_CREDENTIAL_MODE",
    "READINGCLUB_DEBUG",
    "READINGCLUB_LOGIN_PATH",
    "READINGCLUB_RETRY_MAX",
    "READINGCLUB_RETRY_BASE_DELAY_MS",
    "READINGCLUB_RETRY_STATUSES",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # set then delete so values loaded from a .env file are undone too
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)


def test_config_defaults(monkeypatch) -> None:
    monkeypatch.setenv("READINGCLUB_API_BASE_URL", "https://api.readingclub.test/")

    cfg = load_config(env_file=".missing-env")

    assert cfg.api_base_url == "https://api.readingclub.test"
    assert cfg.env_name == "dev"
    assert cfg.timeout_seconds == 10.0
    assert cfg.credential_mode == "include"
    assert cfg.sends_credentials is True
    assert cfg.default_headers == {"Content-Type": "application/json"}
    assert cfg.debug is True
    assert cfg.login_path == "/login"
    assert cfg.app_url is None


def test_missing_base_url_fails() -> None:
    with pytest.raises(ConfigError, match="READINGCLUB_API_BASE_URL"):
        load_config(env_file=".missing-env")


def test_env_specific_base_url_wins(monkeypatch) -> None:
    monkeypatch.setenv("READINGCLUB_ENV", "prod")
    monkeypatch.setenv("READINGCLUB_API_BASE_URL", "https://fallback.test")
    monkeypatch.setenv("READINGCLUB_API_BASE_URL_PROD", "https://api.readingclub.kr")

    cfg = load_config(env_file=".missing-env")

    assert cfg.api_base_url == "https://api.readingclub.kr"
    assert cfg.normalized_env == "prod"
    assert cfg.debug is False


def test_debug_flag_overrides_env_default(monkeypatch) -> None:
    monkeypatch.setenv("READINGCLUB_API_BASE_URL", "https://api.test")
    monkeypatch.setenv("READINGCLUB_ENV", "prod")
    monkeypatch.setenv("READINGCLUB_DEBUG", "yes")

    assert load_config(env_file=".missing-env").debug is True


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("READINGCLUB_TIMEOUT_SECONDS", "abc"),
        ("READINGCLUB_TIMEOUT_SECONDS", "0"),
        ("READINGCLUB_CREDENTIAL_MODE", "same-origin"),
        ("READINGCLUB_LOGIN_PATH", "login"),
    ],
)
def test_invalid_values_raise(monkeypatch, name, value) -> None:
    monkeypatch.setenv("READINGCLUB_API_BASE_URL", "https://api.test")
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigError, match=name):
        load_config(env_file=".missing-env")


def test_omit_mode_disables_credentials(monkeypatch) -> None:
    monkeypatch.setenv("READINGCLUB_API_BASE_URL", "https://api.test")
    monkeypatch.setenv("READINGCLUB_CREDENTIAL_MODE", "OMIT")

    cfg = load_config(env_file=".missing-env")

    assert cfg.credential_mode == "omit"
    assert cfg.sends_credentials is False


def test_env_file_is_read(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "READINGCLUB_API_BASE_URL=https://from-file.test\nREADINGCLUB_APP_URL=https://app.test/\n"
    )

    cfg = load_config(env_file=str(env_file))

    assert cfg.api_base_url == "https://from-file.test"
    assert cfg.app_url == "https://app.test"


def test_retry_policy_defaults() -> None:
    policy = load_retry_policy(env_file=".missing-env")

    assert policy.max_retries == 2
    assert policy.base_delay_ms == 1000
    assert policy.retryable_statuses == frozenset({500, 502, 503, 504})


def test_retry_policy_overrides(monkeypatch) -> None:
    monkeypatch.setenv("READINGCLUB_RETRY_MAX", "4")
    monkeypatch.setenv("READINGCLUB_RETRY_BASE_DELAY_MS", "250")
    monkeypatch.setenv("READINGCLUB_RETRY_STATUSES", "429, 503")

    policy = load_retry_policy(env_file=".missing-env")

    assert policy.max_retries == 4
    assert policy.base_delay_ms == 250
    assert policy.retryable_statuses == frozenset({429, 503})


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("READINGCLUB_RETRY_MAX", "-1"),
        ("READINGCLUB_RETRY_MAX", "two"),
        ("READINGCLUB_RETRY_BASE_DELAY_MS", "-10"),
        ("READINGCLUB_RETRY_STATUSES", "200,503"),
        ("READINGCLUB_RETRY_STATUSES", "5xx"),
    ],
)
def test_invalid_retry_values_raise(monkeypatch, name, value) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigError, match=name):
        load_retry_policy(env_file=".missing-env")


def test_client_config_is_frozen() -> None:
    cfg = ClientConfig(api_base_url="https://api.test")

    with pytest.raises(AttributeError):
        cfg.timeout_seconds = 5  # type: ignore[misc]
