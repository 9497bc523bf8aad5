from fabricator_assemble.templating import render_markdown


class TestRenderMarkdown:
    def test_renders_inline_markup(self):
        assert render_markdown("A *primary* button") == "<p>A <em>primary</em> button</p>"

    def test_renders_headings(self):
        result = render_markdown("# Getting started\n\nRun it.")

        assert "<h1>Getting started</h1>" in result
        assert "<p>Run it.</p>" in result

    def test_renders_tables(self):
        result = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n")

        assert "<table>" in result
        assert "<td>1</td>" in result

    def test_raw_html_passes_through(self):
        assert "<span>x</span>" in render_markdown("<span>x</span>")

    def test_empty_text(self):
        assert render_markdown("") == ""
