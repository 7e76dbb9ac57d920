"""
Shared test helpers: an in-memory file client and tiny document builders.
"""
import io
from typing import Dict, List, Optional

from PIL import Image

from docintake.api.exceptions import DownloadFailed


class FakeFileClient:
    """Stands in for TelegramFileClient; serves bytes from a dict and records calls."""

    def __init__(self, files: Optional[Dict[str, bytes]] = None):
        self.files = dict(files or {})
        self.calls: List[str] = []

    async def download(self, remote_path: str) -> bytes:
        self.calls.append(remote_path)
        if remote_path not in self.files:
            raise DownloadFailed()
        return self.files[remote_path]


def _pdf_string(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def make_pdf(pages: List[str], info: Optional[Dict[str, str]] = None) -> bytes:
    """Build a minimal valid PDF with one line of Helvetica text per page."""
    objects: List[str] = []
    page_count = len(pages)
    first_page_obj = 4

    kids = " ".join(f"{first_page_obj + 2 * i} 0 R" for i in range(page_count))
    objects.append("<< /Type /Catalog /Pages 2 0 R >>")
    objects.append(f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>")
    objects.append("<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")

    for i, text in enumerate(pages):
        content_obj = first_page_obj + 2 * i + 1
        objects.append(
            "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >> >> /Contents {content_obj} 0 R >>"
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({_pdf_string(text)}) Tj ET"
        objects.append(f"<< /Length {len(stream.encode('latin-1'))} >>\nstream\n{stream}\nendstream")

    info_ref = ""
    if info:
        entries = " ".join(f"/{key} ({_pdf_string(value)})" for key, value in info.items())
        objects.append(f"<< {entries} >>")
        info_ref = f" /Info {len(objects)} 0 R"

    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(out.tell())
        out.write(f"{number} 0 obj\n{body}\nendobj\n".encode("latin-1"))

    xref_offset = out.tell()
    out.write(f"xref\n0 {len(objects) + 1}\n".encode("latin-1"))
    out.write(b"0000000000 65535 f \n")
    for offset in offsets:
        out.write(f"{offset:010d} 00000 n \n".encode("latin-1"))
    out.write(
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R{info_ref} >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n".encode("latin-1")
    )
    return out.getvalue()


def make_png(size=(32, 16)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color="white").save(buffer, format="PNG")
    return buffer.getvalue()
