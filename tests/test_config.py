import pytest

from nincheck.config import NinCheckConfig, Policy, load_config


def test_defaults():
    cfg = load_config(None)
    assert cfg == NinCheckConfig()
    assert cfg.policy.production is True
    assert cfg.policy.strict_calendar is False
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.json_output is False


def test_load_yaml(tmp_path):
    p = tmp_path / ".nincheck.yaml"
    p.write_text(
        "policy:\n"
        "  production: false\n"
        "  strict_calendar: true\n"
        "logging:\n"
        "  level: DEBUG\n"
        "  json: true\n"
    )
    cfg = load_config(p)
    assert cfg.policy == Policy(production=False, strict_calendar=True)
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.json_output is True


def test_empty_file_gives_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(p) == NinCheckConfig()


def test_partial_file(tmp_path):
    p = tmp_path / "partial.yaml"
    p.write_text("policy:\n  production: false\n")
    cfg = load_config(p)
    assert cfg.policy.production is False
    assert cfg.logging.level == "WARNING"


def test_non_mapping_is_rejected(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- production\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config(p)
