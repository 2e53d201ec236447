import markdown

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]


def render_markdown(text):
    """Convert blog Markdown to HTML."""
    return markdown.markdown(text or "", extensions=MARKDOWN_EXTENSIONS)
