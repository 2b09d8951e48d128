"""Unit tests for the template engines"""

import pytest

from tinyview.exceptions import InvalidArgumentException
from tinyview.view import (
    JinjaTemplateEngine,
    PythonTemplateEngine,
    View,
    create_engine,
)


class TestPythonTemplateEngine:
    def test_captures_print_and_echo(self, write_template):
        path = write_template("page.py", 'print("a", "b")\necho(1, 2)\n')

        assert PythonTemplateEngine().render(path, {}) == "a b\n12"

    def test_scope_names_are_globals(self, write_template):
        path = write_template(
            "page.py",
            "def shout():\n"
            "    return name.upper()\n"
            "echo(shout())\n",
        )

        assert PythonTemplateEngine().render(path, {"name": "ada"}) == "ADA"

    def test_output_does_not_reach_stdout(self, write_template, capsys):
        path = write_template("page.py", 'print("captured")\n')

        PythonTemplateEngine().render(path, {})

        assert capsys.readouterr().out == ""

    def test_print_to_explicit_file_is_not_captured(self, write_template, capsys):
        path = write_template("page.py", 'import sys\nprint("err", file=sys.stderr)\necho("ok")\n')

        assert PythonTemplateEngine().render(path, {}) == "ok"
        assert capsys.readouterr().err == "err\n"

    def test_template_assignments_do_not_leak_into_scope(self, write_template):
        path = write_template("page.py", 'title = "changed"\n')
        scope = {"title": "original"}

        PythonTemplateEngine().render(path, scope)

        assert scope == {"title": "original"}

    def test_syntax_error_propagates(self, write_template):
        path = write_template("page.py", "echo(\n")

        with pytest.raises(SyntaxError):
            PythonTemplateEngine().render(path, {})

    def test_reads_with_configured_encoding(self, tmp_path):
        path = tmp_path / "page.py"
        path.write_bytes('echo("café")\n'.encode("latin-1"))

        assert PythonTemplateEngine(encoding="latin-1").render(str(path), {}) == "café"


class TestJinjaTemplateEngine:
    def test_renders_scope(self, write_template):
        path = write_template("page.html", "<h1>{{ title }}</h1>\n")

        assert JinjaTemplateEngine().render(path, {"title": "Home"}) == "<h1>Home</h1>\n"

    def test_include_is_resolved_next_to_template(self, write_template):
        write_template("partials/nav.html", "<nav></nav>")
        path = write_template("page.html", '{% include "partials/nav.html" %}body')

        assert JinjaTemplateEngine().render(path, {}) == "<nav></nav>body"

    def test_autoescape(self, write_template):
        path = write_template("page.html", "{{ text }}")

        assert JinjaTemplateEngine(autoescape=True).render(path, {"text": "<b>"}) == "&lt;b&gt;"
        assert JinjaTemplateEngine().render(path, {"text": "<b>"}) == "<b>"

    def test_view_with_jinja_layout(self, write_template):
        page = write_template("page.html", "<p>{{ view.title }}</p>")
        layout = write_template("layout.html", "<body>{{ content }}</body>")
        view = View({"title": "Hi"}, page, layout, engine=JinjaTemplateEngine())

        assert view.render() == "<body><p>Hi</p></body>"


class TestCreateEngine:
    def test_known_engines(self):
        assert isinstance(create_engine("python"), PythonTemplateEngine)
        assert isinstance(create_engine("Jinja", autoescape=True), JinjaTemplateEngine)

    def test_options_are_passed(self):
        engine = create_engine("python", encoding="latin-1")

        assert engine.encoding == "latin-1"

    @pytest.mark.parametrize("name", ["blade", "", None])
    def test_unknown_engine_fails(self, name):
        with pytest.raises(InvalidArgumentException, match="is unsupported"):
            create_engine(name)


class TestPythonTemplateEncoding:
    def test_utf8_byte_order_mark_is_ignored(self, tmp_path):
        path = tmp_path / "page.py"
        path.write_bytes(b"\xef\xbb\xbf" + 'echo("A")\n'.encode("utf-8"))

        assert PythonTemplateEngine().render(str(path), {}) == "A"
