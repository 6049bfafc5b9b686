"""
PDF export of a rendered résumé.

The PDF backend (fpdf2) is imported on first use. Concurrent first calls from
different Streamlit sessions share one import: a caller that finds a load in
progress polls until it finishes.
"""
from __future__ import annotations
import importlib
import logging
import threading
import time

from config import PDF_OPTIONS
from markdown_renderer import render_html

logger = logging.getLogger(__name__)

_POLL_INTERVAL = 0.05
_MM_PER_INCH = 25.4
_backend = None
_loading = False
_state_lock = threading.Lock()

# typographic characters the core PDF fonts cannot encode
_LATIN1_FIXES = str.maketrans({
    "‘": "'", "’": "'", "“": '"', "”": '"',
    "–": "-", "—": "-", "•": "*", "…": "...",
})


class ExportError(RuntimeError):
    """The PDF could not be produced."""


def load_pdf_backend(module: str = "fpdf"):
    """Import the PDF backend once and return its module."""
    global _backend, _loading

    while True:
        with _state_lock:
            if _backend is not None:
                return _backend
            if not _loading:
                _loading = True
                break
        time.sleep(_POLL_INTERVAL)

    try:
        backend = importlib.import_module(module)
    except ImportError as e:
        logger.error("Failed to load PDF backend %s: %s", module, e)
        raise ExportError(f"Failed to load PDF backend '{module}'") from e
    finally:
        with _state_lock:
            _loading = False

    with _state_lock:
        _backend = backend
    return backend


def _reset_backend() -> None:
    global _backend, _loading
    with _state_lock:
        _backend = None
        _loading = False


def to_latin1(text: str) -> str:
    return text.translate(_LATIN1_FIXES).encode("latin-1", "replace").decode("latin-1")


def export_filename(data: dict) -> str:
    name = ((data.get("personal") or {}).get("full_name") or "").strip()
    return f"{name or 'Resume'}_Resume.pdf"


def export_pdf(markdown: str, title: str = "Resume", options: dict | None = None) -> bytes:
    """Render ``markdown`` through the print template into PDF bytes."""
    opt = {**PDF_OPTIONS, **(options or {})}
    fpdf = load_pdf_backend()

    # write_html measures indents in user units, so lay out in mm
    margin = opt["margin"] * _MM_PER_INCH
    try:
        pdf = fpdf.FPDF(orientation=opt["orientation"], unit="mm", format=opt["format"])
        pdf.set_margins(margin, margin, margin)
        pdf.set_auto_page_break(auto=True, margin=margin)
        pdf.set_title(to_latin1(title))
        pdf.add_page()
        pdf.set_font(opt["font"], size=opt["font_size"])
        pdf.write_html(to_latin1(render_html(markdown, printable=True)))
        return bytes(pdf.output())
    except Exception as e:
        logger.error("PDF generation failed: %s", e, exc_info=True)
        raise ExportError(f"PDF generation failed: {e}") from e
