import json

import pytest

from chartsheet.config import RenderOptions, default_options, load_options
from chartsheet.exceptions import ConfigError


def _write(tmp_path, data) -> str:
    path = tmp_path / "chartsheet.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return str(path)


def test_defaults():
    opts = default_options()
    assert opts.font_size == 14
    assert opts.tab_size == 8
    assert opts.label_scale == 0.85
    assert opts.shrink_scale == 0.75


def test_load_overrides_given_keys(tmp_path):
    opts = load_options(_write(tmp_path, {"font_size": 18, "suffix_scale": 0.65}))
    assert opts.font_size == 18
    assert opts.suffix_scale == 0.65
    assert opts.tab_size == 8


def test_load_over_base(tmp_path):
    base = RenderOptions(font_size=20)
    opts = load_options(_write(tmp_path, {"tab_size": 4}), base=base)
    assert opts.font_size == 20
    assert opts.tab_size == 4


def test_tab_size_coerced_to_int(tmp_path):
    assert load_options(_write(tmp_path, {"tab_size": 4.0})).tab_size == 4


def test_unknown_key(tmp_path):
    with pytest.raises(ConfigError, match="unknown option 'colour'"):
        load_options(_write(tmp_path, {"colour": "red"}))


@pytest.mark.parametrize("value", ["big", True, None, [14]])
def test_non_numeric_value(tmp_path, value):
    with pytest.raises(ConfigError, match="must be a number"):
        load_options(_write(tmp_path, {"font_size": value}))


def test_non_positive_value(tmp_path):
    with pytest.raises(ConfigError, match="must be positive"):
        load_options(_write(tmp_path, {"font_size": 0}))


def test_invalid_json(tmp_path):
    with pytest.raises(ConfigError, match="invalid JSON"):
        load_options(_write(tmp_path, "{not json"))


def test_not_an_object(tmp_path):
    with pytest.raises(ConfigError, match="expected a JSON object"):
        load_options(_write(tmp_path, "[1, 2]"))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError) as exc_info:
        load_options(tmp_path / "nope.json")
    assert exc_info.value.path.endswith("nope.json")
