import pytest

from hexservice.envs import ConfigError, EnvConfig, get

BASE = {
    "PROJECT_ID": "demo-project",
    "SERVICE_NAME": "demo-service",
    "MONGO_URL": "mongodb://localhost:27017",
    "MONGO_DB": "demo",
}


def test_from_env_reads_all_fields():
    config = EnvConfig.from_env(BASE)
    assert config.project_id == "demo-project"
    assert config.service_name == "demo-service"
    assert config.mongo_uri == "mongodb://localhost:27017"
    assert config.mongo_db == "demo"


def test_port_defaults_to_8080():
    assert EnvConfig.from_env(BASE).port == 8080


def test_port_is_parsed():
    config = EnvConfig.from_env({**BASE, "PORT": "9000"})
    assert config.port == 9000


@pytest.mark.parametrize("name", ["PROJECT_ID", "SERVICE_NAME", "MONGO_URL", "MONGO_DB"])
def test_missing_variable_is_reported(name):
    environ = {key: value for key, value in BASE.items() if key != name}
    with pytest.raises(ConfigError, match=f"{name} is required"):
        EnvConfig.from_env(environ)


@pytest.mark.parametrize("raw", ["abc", "", "70000", "-1"])
def test_invalid_port_raises(raw):
    with pytest.raises(ConfigError):
        EnvConfig.from_env({**BASE, "PORT": raw})


def test_get_reads_process_environment_once(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for key, value in BASE.items():
        monkeypatch.setenv(key, value)
    monkeypatch.setenv("PORT", "9100")
    get.cache_clear()
    try:
        first = get()
        assert first.port == 9100
        assert first.service_name == "demo-service"
        assert get() is first
    finally:
        get.cache_clear()