"""Certificate PDF rendering.

Builds a one-page HTML certificate and renders it to PDF with WeasyPrint.
"""

import html
import logging
from datetime import date

from weasyprint import HTML

logger = logging.getLogger(__name__)


def build_certificate_html(recipient: str, issuer: str, issued_on: date) -> str:
    """Build the HTML document of a certificate."""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Certificate - {html.escape(recipient)}</title>
    <style>
        @page {{
            size: A4 landscape;
            margin: 2cm;
        }}
        body {{
            font-family: "Helvetica", "Arial", sans-serif;
            text-align: center;
            color: #222;
        }}
        .frame {{
            border: 6px double #8a6d3b;
            padding: 3cm 2cm;
        }}
        h1 {{
            font-size: 32pt;
            margin-bottom: 1.5cm;
        }}
        .recipient {{
            font-size: 24pt;
            font-weight: bold;
        }}
        .issued {{
            margin-top: 2cm;
            font-size: 12pt;
            color: #555;
        }}
    </style>
</head>
<body>
    <div class="frame">
        <h1>Certificate of Completion</h1>
        <p>Awarded to</p>
        <p class="recipient">{html.escape(recipient)}</p>
        <p class="issued">Issued by {html.escape(issuer)} on {issued_on.isoformat()}</p>
    </div>
</body>
</html>"""


def render_certificate_pdf(recipient: str, issuer: str, issued_on: date) -> bytes:
    """Render a one-page certificate naming the recipient."""
    html_str = build_certificate_html(recipient, issuer, issued_on)
    pdf_bytes = HTML(string=html_str).write_pdf()
    logger.debug(f"Rendered certificate PDF for {recipient!r} ({len(pdf_bytes)} bytes)")
    return pdf_bytes
