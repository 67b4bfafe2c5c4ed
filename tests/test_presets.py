import pytest

from codeprompt.core.exceptions import PresetError
from codeprompt.presets import dump_preset, load_preset


def test_load_preset(tmp_path):
    path = tmp_path / "login.yaml"
    path.write_text("type: feature\noptions:\n  feature: user login\n  pattern: service\n")

    shared = load_preset(path)

    assert shared.type == "feature"
    assert shared.options == {"feature": "user login", "pattern": "service"}


def test_options_are_optional(tmp_path):
    path = tmp_path / "fix.yaml"
    path.write_text("type: fix\n")
    assert load_preset(path).options == {}


def test_dump_then_load(tmp_path, express_options):
    path = dump_preset(tmp_path / "init.yaml", "init", express_options)
    shared = load_preset(path)
    assert (shared.type, shared.options) == ("init", express_options)


def test_missing_file(tmp_path):
    with pytest.raises(PresetError, match="not found"):
        load_preset(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("type: [unclosed\n")
    with pytest.raises(PresetError, match="Invalid YAML"):
        load_preset(path)


def test_missing_type(tmp_path):
    path = tmp_path / "notype.yaml"
    path.write_text("options:\n  feature: x\n")
    with pytest.raises(PresetError, match="missing 'type'"):
        load_preset(path)


def test_options_must_be_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("type: init\noptions:\n  - a\n  - b\n")
    with pytest.raises(PresetError, match="must be a mapping"):
        load_preset(path)
