# make_karabiner

Turns a keyboard layout table into a Karabiner-Elements complex modification file.

The layout is a top-level `const MAPPINGS` in a Rust source file. It pairs keys
as written on a JIS keyboard with the keys they should produce:

```
pub const MAPPINGS: &[(&str, &str)] = &[
    ("q", "k"),
    ("w", "y"),
    ("t", "="),
    ("v", "'"),
];
```

JIS symbols are changed into Karabiner key codes (for example `@` becomes
`open_bracket` and `:` becomes `quote`); anything else is used as the key code
as written. `=` and `'` are sent as `hyphen` and `7` with `left_shift` held.
Every mapping whose left-hand side is a single lowercase letter `a`–`z` also
gets a second manipulator that maps its shifted form, so capitals follow the
new layout. All manipulators go into one rule of type `basic`.

## Installation

```
pip install .
```

## Usage

```
make-karabiner --input-rs layout.rs --output ./layout.json --description "My layout"
```

- `--input-rs PATH` — the file holding the `MAPPINGS` constant (required)
- `--output PATH` — where the JSON is written, `./layout.json` by default
- `--description TEXT` — the rule's description, `JIS配列から自作配列への変換` by default

Unknown arguments are ignored. The command prints what it reads and writes, and
exits with status 1 and a message on standard error when an option lacks its
value, `--input-rs` is missing, the table cannot be read, or the output cannot
be written.

Copy the resulting file into `~/.config/karabiner/assets/complex_modifications/`
and enable the rule in Karabiner-Elements.

## Use from Python

```python
from make_karabiner.mappings_parser import parse_mappings
from make_karabiner.generator import generate_karabiner_config

mappings = parse_mappings('pub const MAPPINGS: &[(&str, &str)] = &[("a", "h")];')
config = generate_karabiner_config("My layout", mappings)
print(config.to_json())
```

- `make_karabiner.mappings_parser` — `parse_mappings(source)` and
  `parse_mappings_from_rust_file(path)` return the table as a list of string
  pairs. `LAYOUT_MAPPINGS` and `MODIFIERS_LAYOUT_MAPPINGS` hold two ready-made
  tables (a letter layout, and `japanese_eisuu`/`japanese_kana` turned into
  `left_control`/`left_shift`).
- `make_karabiner.keycodes` — `process_key_symbol(symbol)` returns a
  `TransformedKey` (key code and mandatory modifiers);
  `convert_jis_symbol_to_keycode_str(symbol)` looks up a single JIS symbol.
- `make_karabiner.generator` — `generate_karabiner_config(description, mappings)`
  returns a `KarabinerFile`.
- `make_karabiner.models` — `KarabinerFile`, `Rule`, `Manipulator`, `FromEvent`,
  `ToEvent` and `Modifiers`, each with `to_dict()`; `KarabinerFile.to_json()`
  gives the pretty-printed JSON.

`parse_mappings` raises a `ParseError` subclass (`SourceParseError`,
`MappingsNotFound` or `InvalidMappingsFormat`) when the table cannot be read;
`parse_mappings_from_rust_file` also raises `FileReadError`.

## Limits

The table is read by a small tokenizer, not a full Rust compiler front end: only
a `const MAPPINGS` at the top level of the file is found, and its value must be
`&[...]` of two-element tuples of string literals.

## Running the tests

```
pip install .[test]
pytest
```