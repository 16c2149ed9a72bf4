from rental_roi.core import config


def test_shipped_defaults():
    assert config.INTEREST_RATE == 7.0
    assert config.LOAN_TERM_YEARS == 30
    assert config.DOWN_PAYMENT_PCT == 20.0
    assert config.MAINTENANCE_PCT == 5.0
    assert config.VACANCY_RATE == 5.0
    assert config.MANAGEMENT_PCT == 0.0
    assert config.PROPERTY_TYPE == "single-family"


def test_missing_file_gives_empty_mapping(tmp_path):
    assert config._load_yaml(tmp_path / "absent.yaml") == {}


def test_non_mapping_file_gives_empty_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    assert config._load_yaml(path) == {}


def test_reads_mapping(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("interest_rate: 6.25\nvacancy_rate: 8\n", encoding="utf-8")
    assert config._load_yaml(path) == {"interest_rate": 6.25, "vacancy_rate": 8}
