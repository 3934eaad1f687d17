import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

import pytest

from treemark.cli import main

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_render_to_stdout(tmp_path: Path, capsys):
    page = tmp_path / "page.sexp"
    page.write_text('(html (body .page (h1 "Hello") (p "{{ name }}")))', encoding="utf-8")
    context = tmp_path / "context.yaml"
    context.write_text("name: Ada\n", encoding="utf-8")

    main(["render", str(page), "--context", str(context)])

    assert capsys.readouterr().out == (
        "<!DOCTYPE html>\n<html>\n"
        '<body class="page">\n<h1>Hello</h1>\n<p>Ada</p>\n</body>\n'
        "</html>\n"
    )


def test_render_xml_with_extension_tags(tmp_path: Path):
    feed = tmp_path / "feed.json"
    feed.write_text('["feed", ["entry", ":id", 1, "x"]]', encoding="utf-8")
    out = tmp_path / "out" / "feed.xml"

    main(["render", str(feed), "--xml", "--extension-tag", "feed", "--extension-tag", "entry", "--out", str(out)])

    assert out.read_text(encoding="utf-8") == (
        '<?xml version="1.0" encoding="UTF-8"?>\n<feed>\n<entry id="1">x</entry>\n</feed>\n'
    )


def test_render_with_config_and_doctype(tmp_path: Path, capsys):
    page = tmp_path / "page.yaml"
    page.write_text("- html\n- [body]\n", encoding="utf-8")
    config = tmp_path / "options.yaml"
    config.write_text("doctypeParams: [html, SYSTEM]\n", encoding="utf-8")

    main(["render", str(page), "--config", str(config)])
    assert capsys.readouterr().out.startswith("<!DOCTYPE html SYSTEM>\n")

    main(["render", str(page), "--config", str(config), "--doctype", "HTML5"])
    assert capsys.readouterr().out.startswith("<!DOCTYPE HTML5>\n")


def test_reformat_command(tmp_path: Path, capsys):
    markup = tmp_path / "flat.html"
    markup.write_text("<ul><li>a</li><li>b</li></ul>\n", encoding="utf-8")

    main(["reformat", str(markup)])

    assert capsys.readouterr().out == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n"


def test_preview_command(tmp_path: Path, capsys):
    page = tmp_path / "page.sexp"
    page.write_text('(ul (li "a"))', encoding="utf-8")

    main(["preview", str(page)])

    assert capsys.readouterr().out == "<ul>\n  <li>a</li>\n</ul>\n"


def test_invalid_tag_exits_with_message(tmp_path: Path, capsys):
    page = tmp_path / "page.sexp"
    page.write_text("(blink)", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["render", str(page)])

    assert excinfo.value.code == 1
    assert "invalid tag: 'blink'" in capsys.readouterr().err


def test_missing_input_exits(tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        main(["render", str(tmp_path / "missing.sexp")])
    assert excinfo.value.code == 1


def test_no_command_prints_help(capsys):
    main([])
    assert "usage:" in capsys.readouterr().out


class ModuleEntryPointTest(unittest.TestCase):
    def test_render_from_stdin(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "treemark", "render", "-"],
            input='(div @main .a .b "text")',
            capture_output=True,
            text=True,
            cwd=REPO_ROOT,
        )
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, '<div id="main" class="a b">text</div>\n')

    def test_reformat_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.xml"
            path.write_text('<?xml version="1.0"?><a><b/></a>', encoding="utf-8")
            result = subprocess.run(
                [sys.executable, "-m", "treemark", "reformat", "--xml", str(path)],
                capture_output=True,
                text=True,
                cwd=REPO_ROOT,
            )
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, '<?xml version="1.0"?>\n<a>\n<b/>\n</a>\n')


if __name__ == "__main__":
    unittest.main()
