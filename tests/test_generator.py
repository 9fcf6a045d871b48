from make_karabiner.generator import generate_karabiner_config
from make_karabiner.mappings_parser import LAYOUT_MAPPINGS, MODIFIERS_LAYOUT_MAPPINGS


def _manipulators(config):
    assert len(config.rules) == 1
    return [m.to_dict() for m in config.rules[0].manipulators]


def test_description_is_kept():
    config = generate_karabiner_config("my layout", [])
    assert config.rules[0].description == "my layout"
    assert config.rules[0].manipulators == []


def test_lowercase_letter_gets_shifted_variant():
    result = _manipulators(generate_karabiner_config("d", [("q", "k")]))
    assert result == [
        {"from": {"key_code": "q"}, "to": {"key_code": "k"}, "type": "basic"},
        {
            "from": {"key_code": "q", "modifiers": {"mandatory": ["left_shift"]}},
            "to": {"key_code": "k", "modifiers": ["left_shift"]},
            "type": "basic",
        },
    ]


def test_shifted_target_does_not_duplicate_shift():
    result = _manipulators(generate_karabiner_config("d", [("t", "=")]))
    assert result[0]["to"] == {"key_code": "hyphen", "modifiers": ["left_shift"]}
    assert result[1]["to"] == {"key_code": "hyphen", "modifiers": ["left_shift"]}
    assert result[1]["from"]["modifiers"] == {"mandatory": ["left_shift"]}


def test_symbol_source_has_single_manipulator():
    result = _manipulators(generate_karabiner_config("d", [("@", "z")]))
    assert result == [
        {"from": {"key_code": "open_bracket"}, "to": {"key_code": "z"}, "type": "basic"}
    ]


def test_modifier_keys_are_passed_through():
    result = _manipulators(generate_karabiner_config("d", MODIFIERS_LAYOUT_MAPPINGS))
    assert [(m["from"]["key_code"], m["to"]["key_code"]) for m in result] == list(
        MODIFIERS_LAYOUT_MAPPINGS
    )
    assert all("modifiers" not in m["from"] and "modifiers" not in m["to"] for m in result)


def test_uppercase_source_is_not_doubled():
    result = _manipulators(generate_karabiner_config("d", [("Q", "k")]))
    assert len(result) == 1


def test_layout_manipulators_follow_mapping_order():
    result = _manipulators(generate_karabiner_config("d", LAYOUT_MAPPINGS))
    unshifted = [m for m in result if "modifiers" not in m["from"]]
    assert len(unshifted) == len(LAYOUT_MAPPINGS)
    shifted = [m for m in result if "modifiers" in m["from"]]
    assert all(m["from"]["modifiers"] == {"mandatory": ["left_shift"]} for m in shifted)
    assert all("left_shift" in m["to"]["modifiers"] for m in shifted)