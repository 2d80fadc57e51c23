"""Tests for the page templates."""

from postgen.pages import (
    render_index_entry,
    render_index_page,
    render_post_page,
    render_stylesheet,
    render_template,
)


class TestRenderTemplate:
    def test_fills_placeholders(self):
        assert render_template("<h1>{{title}}</h1>", title="Hi") == "<h1>Hi</h1>"

    def test_unknown_placeholder_left_alone(self):
        assert render_template("{{missing}}", title="Hi") == "{{missing}}"

    def test_values_are_not_expanded_again(self):
        result = render_template("{{content}}|{{title}}", content="{{title}}", title="T")
        assert result == "{{title}}|T"


class TestPostPage:
    def test_contains_title_summary_and_content(self):
        page = render_post_page("Hello", "Short <em>intro</em>", "<p>Body</p>")
        assert '<h1 class="post-title">Hello</h1>' in page
        assert '<p class="post-summary">Short <em>intro</em></p>' in page
        assert '<div class="post-body"><p>Body</p></div>' in page

    def test_standalone_document(self):
        page = render_post_page("Hello", "s", "c")
        assert page.startswith("<!DOCTYPE html>")
        assert '<meta charset="UTF-8">' in page
        assert '<link rel="stylesheet" href="styles.css">' in page
        assert page.rstrip().endswith("</html>")

    def test_links_back_to_index(self):
        assert '<a href="index.html">Back to index</a>' in render_post_page("Hello", "s", "c")

    def test_title_is_escaped(self):
        page = render_post_page("Fish & <Chips>", "s", "c")
        assert "Fish &amp; &lt;Chips&gt;" in page
        assert "<Chips>" not in page

    def test_document_title_uses_site_name(self):
        page = render_post_page("Hello", "s", "c", site_name="Notes")
        assert "<title>Hello | Notes</title>" in page

    def test_empty_title_uses_site_name(self):
        page = render_post_page("", "s", "c", site_name="Notes")
        assert "<title>Notes</title>" in page

    def test_content_with_braces_survives(self):
        page = render_post_page("T", "s", "<p>{{title}}</p>")
        assert "<p>{{title}}</p>" in page


class TestIndexEntry:
    def test_links_to_post_page(self):
        entry = render_index_entry("Hello", "Intro", "hello.html")
        assert '<a href="hello.html">Hello</a>' in entry
        assert '<p class="post-summary">Intro</p>' in entry

    def test_link_only_by_default(self):
        entry = render_index_entry("Hello", "Intro", "hello.html", html_content="<p>Full body</p>")
        assert "Full body" not in entry
        assert "post-toggle" not in entry

    def test_inline_embeds_hidden_content(self):
        entry = render_index_entry("Hello", "Intro", "hello.html", html_content="<p>Full body</p>", inline=True)
        assert '<div class="post-content post-body" hidden><p>Full body</p></div>' in entry
        assert 'class="post-toggle"' in entry
        assert '<a href="hello.html">Hello</a>' in entry

    def test_filename_is_url_quoted(self):
        entry = render_index_entry("Trip", "s", "road trip.html")
        assert 'href="road%20trip.html"' in entry

    def test_empty_title_falls_back_to_filename(self):
        entry = render_index_entry("", "s", "untitled.html")
        assert '<a href="untitled.html">untitled.html</a>' in entry

    def test_duplicate_titles_are_not_merged(self):
        first = render_index_entry("Same", "s", "a.html")
        second = render_index_entry("Same", "s", "b.html")
        assert first != second


class TestIndexPage:
    def test_wraps_entries(self):
        page = render_index_page("<article>one</article>", site_name="My Blog")
        assert '<div id="posts-list"><article>one</article></div>' in page
        assert "<h1>My Blog</h1>" in page
        assert "<title>My Blog</title>" in page
        assert '<link rel="stylesheet" href="styles.css">' in page

    def test_no_script_without_inline(self):
        assert "<script>" not in render_index_page("")

    def test_toggle_script_with_inline(self):
        page = render_index_page("", inline=True)
        assert "<script>" in page
        assert ".post-toggle" in page


class TestStylesheet:
    def test_fixed_output(self):
        assert render_stylesheet() == render_stylesheet()

    def test_styles_posts_and_code(self):
        css = render_stylesheet()
        assert ".post-summary" in css
        assert ".codehilite" in css
