"""End-to-end tests for noxdoc.parser.core."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from noxdoc.models import DocBlock, ExampleTag, GenericTag, SourceFile
from noxdoc.parser import ReadError, parse_file, parse_files, parse_region, parse_text


def _expected_fixture_documentation() -> list[dict[str, object]]:
    return [
        {
            "description": "Mock - A module with comments for testing the parser",
            "code": "var mock = exports;\n\n",
            "tags": [
                {"tag": "namespace", "type": "", "name": "", "description": "mock"},
            ],
        },
        {
            "description": "This is the single line description for the first function.",
            "code": (
                "mock.foo = function(flag, callback) {\n"
                "  if (flag) {\n"
                "    return callback(null, 'foo');\n"
                "  } else {\n"
                "    return callback('err', null);\n"
                "  }\n"
                "};\n\n"
            ),
            "tags": [
                {
                    "tag": "example",
                    "description": "mock.foo(true, function(err, result) {\n  // result => 'foo'\n});",
                },
                {"tag": "public", "type": "", "name": "", "description": ""},
                {
                    "tag": "param",
                    "type": "Boolean",
                    "name": "flag",
                    "description": "This is a tag description",
                },
                {"tag": "callbackParam", "type": "Object", "name": "err", "description": ""},
                {
                    "tag": "callbackParam",
                    "type": "String",
                    "name": "result",
                    "description": "This is a tag description that spans multiple lines",
                },
            ],
        },
        {
            "description": "This is the multi line description for the second function",
            "code": (
                "mock.bar = function() {\n"
                "  // this is a inner comment\n"
                "  // and should not be regarded as a tag\n"
                "  // but as part of the code\n"
                "  return 'bar';\n"
                "};\n"
            ),
            "tags": [
                {"tag": "example", "description": "mock.bar()\n// => 'bar'"},
                {"tag": "public", "type": "", "name": "", "description": ""},
                {
                    "tag": "return",
                    "type": "String",
                    "name": "This is a return tag description",
                    "description": "",
                },
            ],
        },
    ]


def test_parse_files_matches_fixture(parser_fixture_path: Path) -> None:
    results = parse_files([str(parser_fixture_path)])

    assert [result.to_dict() for result in results] == [
        {
            "filePath": str(parser_fixture_path),
            "documentation": _expected_fixture_documentation(),
        }
    ]


def test_parse_file_result_is_json_serialisable(parser_fixture_path: Path) -> None:
    result = parse_file(parser_fixture_path)

    assert isinstance(result, SourceFile)
    assert result.file_path == str(parser_fixture_path)
    payload = json.loads(json.dumps(result.to_dict()))
    assert len(payload["documentation"]) == 3


def test_parse_text_keeps_tag_order() -> None:
    text = "/**\n * Doc\n * @b\n * @a\n * @c {T} x - y\n */\nrun();\n"
    blocks = parse_text(text)

    assert len(blocks) == 1
    assert [tag.tag for tag in blocks[0].tags] == ["b", "a", "c"]
    assert blocks[0].tags[2] == GenericTag(tag="c", type="T", name="x", description="y")


def test_parse_text_without_doc_comments_returns_empty_list() -> None:
    assert parse_text("var a = 1;\n// comment\n/* block */\n") == []
    assert parse_text("") == []


def test_parse_text_skips_comment_without_code() -> None:
    text = "/**\n * Documented\n */\nfoo();\n\n/**\n * Dangling comment\n */\n"
    blocks = parse_text(text)

    assert [block.description for block in blocks] == ["Documented"]


def test_parse_text_back_to_back_comments() -> None:
    text = "/**\n * First\n */\n/**\n * Second\n */\nsecond();\n"
    blocks = parse_text(text)

    assert blocks == [DocBlock(description="Second", code="second();\n", tags=())]


def test_parse_text_handles_windows_line_endings() -> None:
    text = "/**\r\n * Doc\r\n * @example\r\n *   run()\r\n *\r\n * @public\r\n */\r\nrun();\r\n"
    blocks = parse_text(text)

    assert len(blocks) == 1
    assert blocks[0].description == "Doc"
    assert blocks[0].tags[0] == ExampleTag(description="run()")
    assert blocks[0].tags[1] == GenericTag(tag="public")
    assert blocks[0].code == "run();\r\n"


def test_parse_file_keeps_crlf_line_endings_in_code(tmp_path: Path) -> None:
    source = tmp_path / "windows.js"
    source.write_bytes(b"/**\r\n * Doc\r\n */\r\nfoo();\r\n\r\nbar();\r\n")

    block = parse_file(source).documentation[0]

    assert block.description == "Doc"
    assert block.code == "foo();\r\n\r\nbar();\r\n"


def test_parse_region_code_round_trips_non_comment_lines() -> None:
    fragment = " * Doc\n */\nfunction f() {\n\n  return 1; // *\n}\n\n"
    block = parse_region(fragment)

    assert block is not None
    assert block.code == "function f() {\n\n  return 1; // *\n}\n\n"


def test_parse_file_missing_path_raises_read_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.js"
    with pytest.raises(ReadError) as excinfo:
        parse_file(missing)

    assert excinfo.value.path == str(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_parse_file_rejects_binary_content(tmp_path: Path) -> None:
    binary = tmp_path / "blob.js"
    binary.write_bytes(b"\xff\xfe\x00/**\n")

    with pytest.raises(ReadError):
        parse_file(binary)


def test_parse_files_preserves_input_order(source_tree) -> None:
    names = [f"mod{index}.js" for index in range(12)]
    source_tree.write(
        {name: f"/**\n * Module {name}\n */\nexports.n = '{name}';\n" for name in names}
    )
    paths = [str(source_tree.path(name)) for name in reversed(names)]

    results = parse_files(paths, max_workers=4)

    assert [result.file_path for result in results] == paths
    assert [result.documentation[0].description for result in results] == [
        f"Module {name}" for name in reversed(names)
    ]


def test_parse_files_sequential_and_concurrent_agree(parser_fixture_path: Path, source_tree) -> None:
    source_tree.write({"empty.js": "var nothing = true;\n"})
    paths = [str(parser_fixture_path), str(source_tree.path("empty.js"))]

    assert parse_files(paths, max_workers=1) == parse_files(paths, max_workers=8)


def test_parse_files_fails_fast_without_partial_results(parser_fixture_path: Path, tmp_path: Path) -> None:
    missing = tmp_path / "nope.js"
    paths = [str(parser_fixture_path)] * 3 + [str(missing)] + [str(parser_fixture_path)]

    with pytest.raises(ReadError) as excinfo:
        parse_files(paths)

    assert excinfo.value.path == str(missing)


def test_parse_files_with_no_paths() -> None:
    assert parse_files([]) == []
