import pytest
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

from reportlab.pdfgen import canvas

# Add src to sys.path so we can import nup_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from nup_toolkit.imposer.documents import (  # noqa: E402
    DocumentBackend,
    DocumentLoadError,
    EmbedError,
    EmbeddedPage,
)
from nup_toolkit.imposer.layout import SourcePage  # noqa: E402


class FakeDocument:
    """In-memory stand-in for a loaded PDF."""

    def __init__(self, name: str, width: float, height: float, pages: int):
        self.name = name
        self.width = width
        self.height = height
        self.pages = pages
        self.closed = False


class FakeOutput:
    """In-memory stand-in for the output document."""

    def __init__(self):
        self.pages: List[Dict[str, Any]] = []
        self.closed = False


class RecordingBackend(DocumentBackend):
    """
    Backend that parses "FAKEPDF <name> <w> <h> <pages>" files and
    records every page and draw call instead of producing a real PDF.
    """

    def __init__(
        self,
        *,
        fail_embed: Tuple[str, ...] = (),
        fail_serialize: bool = False,
        locked: Tuple[str, ...] = (),
        crash_on_size: Tuple[str, ...] = (),
    ):
        self.fail_embed = set(fail_embed)
        self.locked = set(locked)
        self.crash_on_size = set(crash_on_size)
        self.fail_serialize = fail_serialize
        self.loaded: List[FakeDocument] = []
        self.outputs: List[FakeOutput] = []

    def load_document(self, data: bytes) -> FakeDocument:
        parts = data.decode("ascii", errors="replace").split()
        if len(parts) != 5 or parts[0] != "FAKEPDF":
            raise DocumentLoadError("not a fake pdf")
        _, name, width, height, pages = parts
        document = FakeDocument(name, float(width), float(height), int(pages))
        self.loaded.append(document)
        return document

    def page_count(self, document: FakeDocument) -> int:
        return document.pages

    def page_size(self, document: FakeDocument, page_index: int) -> Tuple[float, float]:
        if document.name in self.locked:
            raise DocumentLoadError("document closed or encrypted")
        if document.name in self.crash_on_size:
            raise RuntimeError(f"unexpected failure reading {document.name}")
        return document.width, document.height

    def close_document(self, document: Any) -> None:
        document.closed = True

    def new_output(self) -> FakeOutput:
        output = FakeOutput()
        self.outputs.append(output)
        return output

    def create_page(self, output: FakeOutput, width: float, height: float) -> Dict[str, Any]:
        page = {"size": (width, height), "draws": []}
        output.pages.append(page)
        return page

    def embed_page(self, output: FakeOutput, document: FakeDocument, page_index: int) -> EmbeddedPage:
        if document.name in self.fail_embed:
            raise EmbedError(f"cannot embed {document.name}")
        return EmbeddedPage(document, page_index, document.width, document.height)

    def draw_embedded_page(self, page, embedded, x, y, width, height) -> None:
        page["draws"].append((embedded.document.name, x, y, width, height))

    def serialize(self, output: FakeOutput) -> bytes:
        if self.fail_serialize:
            raise RuntimeError("disk full")
        return f"FAKEOUT {len(output.pages)}".encode("ascii")

    @property
    def pages(self) -> List[Dict[str, Any]]:
        """Pages of the most recent output document."""
        return self.outputs[-1].pages if self.outputs else []


# Common test fixtures
@pytest.fixture
def backend():
    """Return a recording in-memory backend."""
    return RecordingBackend()


@pytest.fixture
def fake_pdf(tmp_path: Path):
    """Factory writing fake PDF files understood by RecordingBackend."""
    def _create(name: str, width: float = 100, height: float = 100, pages: int = 1) -> Path:
        path = tmp_path / f"{name}.pdf"
        path.write_text(f"FAKEPDF {name} {width} {height} {pages}")
        return path
    return _create


@pytest.fixture
def make_pdf(tmp_path: Path):
    """Factory writing real one-page PDFs with reportlab."""
    def _create(name: str, size: Tuple[float, float] = (100, 100), label: str | None = None) -> Path:
        path = tmp_path / f"{name}.pdf"
        width, height = size
        c = canvas.Canvas(str(path), pagesize=size)
        c.rect(2, 2, width - 4, height - 4)
        c.setFont("Helvetica", 10)
        c.drawString(6, height / 2, label or name)
        c.showPage()
        c.save()
        return path
    return _create


@pytest.fixture
def source_factory():
    """Factory for SourcePages without a backing document."""
    def _create(count: int, width: float = 100, height: float = 100) -> List[SourcePage]:
        return [
            SourcePage(path=Path(f"s{i}.pdf"), position=i, width=width, height=height)
            for i in range(count)
        ]
    return _create


@pytest.fixture
def failing_backend():
    """Factory for recording backends that fail on demand."""
    def _create(**failures: Any) -> RecordingBackend:
        return RecordingBackend(**failures)
    return _create
