import json

import pytest

from make_karabiner.cli import DEFAULT_DESCRIPTION, main
from make_karabiner.generator import generate_karabiner_config
from make_karabiner.mappings_parser import LAYOUT_MAPPINGS

LAYOUT_SOURCE = "pub const MAPPINGS: &[(&str, &str)] = &[\n" + "".join(
    f'    ("{left}", "{right}"),\n' for left, right in LAYOUT_MAPPINGS
) + "];\n"


@pytest.fixture
def layout_file(tmp_path):
    path = tmp_path / "layout.rs"
    path.write_text(LAYOUT_SOURCE, encoding="utf-8")
    return path


def test_writes_generated_config(tmp_path, layout_file, capsys):
    output = tmp_path / "out.json"
    status = main(
        ["--input-rs", str(layout_file), "--output", str(output), "--description", "mine"]
    )
    assert status == 0
    expected = generate_karabiner_config("mine", LAYOUT_MAPPINGS)
    assert output.read_text(encoding="utf-8") == expected.to_json()
    stdout = capsys.readouterr().out
    assert f"Successfully wrote to {output}" in stdout
    assert f"Reading mappings from: {layout_file}" in stdout


def test_defaults_for_output_and_description(tmp_path, layout_file, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--input-rs", str(layout_file)]) == 0
    data = json.loads((tmp_path / "layout.json").read_text(encoding="utf-8"))
    assert data["rules"][0]["description"] == DEFAULT_DESCRIPTION


def test_unknown_arguments_are_ignored(tmp_path, layout_file):
    output = tmp_path / "out.json"
    assert main(["--verbose", "--input-rs", str(layout_file), "--output", str(output)]) == 0
    assert json.loads(output.read_text(encoding="utf-8")) == generate_karabiner_config(
        DEFAULT_DESCRIPTION, LAYOUT_MAPPINGS
    ).to_dict()


def test_missing_input_option(capsys):
    assert main([]) == 1
    assert "Input Rust file path must be specified" in capsys.readouterr().err


@pytest.mark.parametrize(
    "option, message",
    [
        ("--input-rs", "Error: --input-rs requires a file path"),
        ("--output", "Error: --output requires a file path"),
        ("--description", "Error: --description requires a value"),
    ],
)
def test_option_without_value(option, message, capsys):
    assert main([option]) == 1
    assert message in capsys.readouterr().err


def test_parse_failure_is_reported(tmp_path, capsys):
    source = tmp_path / "bad.rs"
    source.write_text("fn main() {}", encoding="utf-8")
    output = tmp_path / "out.json"
    assert main(["--input-rs", str(source), "--output", str(output)]) == 1
    err = capsys.readouterr().err
    assert f"Error parsing mappings from Rust file '{source}'" in err
    assert "'MAPPINGS' constant not found" in err
    assert not output.exists()


def test_write_failure_is_reported(tmp_path, layout_file, capsys):
    assert main(["--input-rs", str(layout_file), "--output", str(tmp_path)]) == 1
    assert f"Failed to write to {tmp_path}" in capsys.readouterr().err