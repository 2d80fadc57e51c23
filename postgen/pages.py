from __future__ import annotations

import html
import re
from urllib.parse import quote

from .config import DEFAULT_SITE_NAME
from .render import highlight_css

INDEX_NAME = "index.html"
STYLESHEET_NAME = "styles.css"
PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")

BASE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{title}}</title>
  <link rel="stylesheet" href="{{stylesheet}}">
</head>
<body>
  <main class="container">
{{content}}
  </main>
{{scripts}}</body>
</html>
"""

TOGGLE_SCRIPT = """  <script>
    document.querySelectorAll(".post-toggle").forEach(function (button) {
      button.addEventListener("click", function () {
        var content = button.nextElementSibling;
        var expand = content.hidden;
        content.hidden = !expand;
        button.setAttribute("aria-expanded", String(expand));
        button.textContent = expand ? "Hide post" : "Show post";
      });
    });
  </script>
"""

STYLESHEET = """body {
  margin: 0;
  font-family: Arial, sans-serif;
  line-height: 1.6;
  color: #1f2328;
  background: #fafafa;
}

.container {
  max-width: 760px;
  margin: 0 auto;
  padding: 24px 16px 48px;
}

.site-header h1 {
  margin-bottom: 24px;
}

.post-entry {
  padding: 16px 0;
  border-bottom: 1px solid #d0d7de;
}

.post-title a {
  color: #0969da;
  text-decoration: underline;
}

.post-summary {
  font-style: italic;
  color: #57606a;
}

.post-toggle {
  cursor: pointer;
  border: 1px solid #d0d7de;
  border-radius: 4px;
  background: #fff;
  padding: 2px 10px;
}

.post-content {
  padding: 10px 0;
}

.post-body table {
  border-collapse: collapse;
}

.post-body th,
.post-body td {
  border: 1px solid #d0d7de;
  padding: 4px 10px;
}

.post-body pre {
  overflow-x: auto;
  padding: 12px;
}

.post-footer {
  margin-top: 32px;
}
"""


def render_template(template: str, **context: str) -> str:
    # Single pass, so substituted values are never scanned for placeholders.
    def repl(match: re.Match) -> str:
        return context.get(match.group(1), match.group(0))

    return PLACEHOLDER_RE.sub(repl, template)


def render_post_page(title: str, summary: str, html_content: str, site_name: str = DEFAULT_SITE_NAME) -> str:
    page_title = f"{title} | {site_name}" if title else site_name
    content = (
        '<article class="post">'
        f'<h1 class="post-title">{html.escape(title)}</h1>'
        f'<p class="post-summary">{summary}</p>'
        f'<div class="post-body">{html_content}</div>'
        f'<div class="post-footer"><a href="{INDEX_NAME}">Back to index</a></div>'
        "</article>"
    )
    return render_template(
        BASE_TEMPLATE,
        title=html.escape(page_title),
        stylesheet=STYLESHEET_NAME,
        content=content,
        scripts="",
    )


def render_index_entry(
    title: str,
    summary: str,
    output_filename: str,
    html_content: str = "",
    inline: bool = False,
) -> str:
    """List entry linking to the post page.

    With ``inline`` the full post is embedded as well, hidden until its
    toggle button is pressed.
    """
    url = html.escape(quote(output_filename))
    label = html.escape(title) if title else html.escape(output_filename)
    parts = [
        '<article class="post-entry">',
        f'<h2 class="post-title"><a href="{url}">{label}</a></h2>',
        f'<p class="post-summary">{summary}</p>',
    ]
    if inline:
        parts.append('<button class="post-toggle" type="button" aria-expanded="false">Show post</button>')
        parts.append(f'<div class="post-content post-body" hidden>{html_content}</div>')
    parts.append("</article>")
    return "".join(parts)


def render_index_page(entries: str, site_name: str = DEFAULT_SITE_NAME, inline: bool = False) -> str:
    content = (
        f'<header class="site-header"><h1>{html.escape(site_name)}</h1></header>'
        f'<div id="posts-list">{entries}</div>'
    )
    return render_template(
        BASE_TEMPLATE,
        title=html.escape(site_name),
        stylesheet=STYLESHEET_NAME,
        content=content,
        scripts=TOGGLE_SCRIPT if inline else "",
    )


def render_stylesheet() -> str:
    return f"{STYLESHEET}\n{highlight_css()}\n"
