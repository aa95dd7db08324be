"""HTML export of rendered results pages.

Converts the markdown produced by ResultsRenderer into a standalone,
styled HTML document.
"""

import markdown


def export_html(
    markdown_content: str, output_path: str, title: str = "Security Audit Results"
) -> str:
    """Export markdown results page to a styled HTML document.

    Args:
        markdown_content: Markdown from ResultsRenderer.render()
        output_path: Path to write HTML file
        title: Document title

    Returns:
        Path to written HTML file

    Example:
        >>> page = ResultsRenderer().render(view)
        >>> html_path = export_html(page, "/tmp/results.html")
    """
    html_body = markdown.markdown(
        markdown_content,
        extensions=["tables", "fenced_code", "toc"],
    )

    html_document = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
            line-height: 1.6;
            max-width: 960px;
            margin: 0 auto;
            padding: 24px;
            color: #1f2937;
            background-color: #f9fafb;
        }}

        h1 {{
            border-bottom: 3px solid #2563eb;
            padding-bottom: 8px;
        }}

        h3 {{
            margin-top: 2em;
            padding: 12px 16px;
            border-radius: 12px;
            background-color: #ffffff;
            box-shadow: 0 1px 3px rgba(0,0,0,0.1);
        }}

        h4 {{
            color: #374151;
            margin-bottom: 0.25em;
        }}

        table {{
            border-collapse: collapse;
            margin: 16px 0;
            background-color: white;
        }}

        th, td {{
            border: 1px solid #e5e7eb;
            padding: 8px 16px;
            text-align: left;
        }}

        th {{
            background-color: #2563eb;
            color: white;
        }}

        code {{
            background-color: #f3f4f6;
            border-radius: 4px;
            padding: 2px 6px;
            font-family: "Courier New", monospace;
            font-size: 0.9em;
        }}
    </style>
</head>
<body>
{html_body}
</body>
</html>
"""

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html_document)

    return output_path
