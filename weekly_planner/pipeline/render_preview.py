from __future__ import annotations

from pathlib import Path
from typing import List

import fitz  # PyMuPDF

from ..config import PREVIEW_PAGE_COUNT
from ..storage import artifact_path


def _render_page_to_png(doc: fitz.Document, page_index: int, out_path: Path, min_px: int = 1200) -> None:
    page = doc.load_page(page_index)

    # scale so the short side comes out at roughly min_px pixels
    rect = page.rect
    short_side = min(rect.width, rect.height)
    zoom = max(1.0, min_px / float(short_side))
    mat = fitz.Matrix(zoom, zoom)

    pix = page.get_pixmap(matrix=mat, alpha=False)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    pix.save(str(out_path))


def render_previews(
    slug: str,
    pdf_path: Path,
    base_dir: Path | None = None,
    include_slug: bool = True,
) -> List[Path]:
    """PNG thumbnails of the first page triad (planning, weekly grid, reflection)."""
    previews: List[Path] = []
    with fitz.open(pdf_path) as doc:
        count = min(PREVIEW_PAGE_COUNT, doc.page_count)
        for index in range(count):
            out_path = artifact_path(slug, f"preview_{index + 1}", base_dir=base_dir, include_slug=include_slug)
            _render_page_to_png(doc, index, out_path)
            previews.append(out_path)
    return previews
