import pytest

from mbta_router.config import MBTAConfig, get_config, reset_config
from mbta_router.container import create_data_source, create_service
from mbta_router.adapters.graph import CSVRouteRepository
from mbta_router.adapters.mbta import MBTAClient
from mbta_router.domain.errors import ConfigurationError


def test_defaults():
    config = get_config()

    assert config.api.base_url == "https://api-v3.mbta.com"
    assert config.api.route_types == "0,1"
    assert config.data.source == "api"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MBTA_API_ROUTE_TYPES", "1")
    monkeypatch.setenv("MBTA_DATA_SOURCE", "csv")
    monkeypatch.setenv("MBTA_DATA_CSV_PATH", str(tmp_path / "net.csv"))
    reset_config()

    config = get_config()

    assert config.api.route_types == "1"
    assert config.data.source == "csv"
    assert config.data.csv_path == tmp_path / "net.csv"


def test_explicit_key_wins(tmp_path):
    key_file = tmp_path / "api_key.txt"
    key_file.write_text("from-file\n", encoding="utf-8")

    assert MBTAConfig(key="explicit", key_file=key_file).resolve_api_key() == "explicit"
    assert MBTAConfig(key_file=key_file).resolve_api_key() == "from-file"


def test_missing_key_file_is_anonymous(tmp_path):
    assert MBTAConfig(key_file=tmp_path / "absent.txt").resolve_api_key() is None


def test_unreadable_key_file(tmp_path):
    # A directory exists but cannot be read as text
    with pytest.raises(ConfigurationError) as excinfo:
        MBTAConfig(key_file=tmp_path).resolve_api_key()

    assert excinfo.value.setting_name == "key_file"


def test_container_selects_data_source(monkeypatch, tmp_path, routes_csv):
    monkeypatch.setenv("MBTA_API_KEY_FILE", str(tmp_path / "absent.txt"))
    reset_config()

    assert isinstance(create_data_source(), MBTAClient)
    assert isinstance(create_data_source(csv_path=routes_csv), CSVRouteRepository)

    monkeypatch.setenv("MBTA_DATA_SOURCE", "csv")
    monkeypatch.setenv("MBTA_DATA_CSV_PATH", str(routes_csv))
    reset_config()

    service = create_service()
    assert isinstance(service.data_source, CSVRouteRepository)
    assert "Park Street" in service.stop_names()
