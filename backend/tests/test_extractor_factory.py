import pytest

from docintake.api.exceptions import UnsupportedFileType
from docintake.core.config import ProcessorConfig
from docintake.domain.value_objects import ExtractionCategory
from docintake.services.text_extractors import (
    TextExtractorFactory,
    PDFExtractor,
    ImageExtractor,
    TextExtractor,
)


@pytest.fixture
def factory(config):
    return TextExtractorFactory(config)


@pytest.mark.parametrize("file_name", [
    "a.pdf", "A.PDF", "scan.jpg", "scan.JPEG", "shot.png", "pic.webp", "fax.TIFF",
    "notes.txt", "README.md", "data.CSV",
])
def test_recognized_extensions_are_supported(factory, file_name):
    assert factory.is_supported(file_name)


@pytest.mark.parametrize("file_name", ["setup.exe", "doc.docx", "README", ".pdf", "image.gif", ""])
def test_other_extensions_are_not_supported(factory, file_name):
    assert not factory.is_supported(file_name)


@pytest.mark.parametrize("file_name, category, extractor_cls", [
    ("report.pdf", ExtractionCategory.PDF, PDFExtractor),
    ("photo.JPG", ExtractionCategory.IMAGE, ImageExtractor),
    ("notes.md", ExtractionCategory.TEXT, TextExtractor),
])
def test_get_extractor_by_extension(factory, file_name, category, extractor_cls):
    assert factory.get_category(file_name) is category
    assert isinstance(factory.get_extractor(file_name), extractor_cls)


def test_unsupported_extension_carries_extension(factory):
    with pytest.raises(UnsupportedFileType) as exc_info:
        factory.get_extractor("installer.EXE")
    assert exc_info.value.extension == ".exe"
    assert "Unsupported file type: .exe" in str(exc_info.value)


def test_dispatch_order_is_pdf_image_text():
    # Overlapping tables resolve to the earliest category
    config = ProcessorConfig(supported_types={"text": [".dat"], "image": [".dat"], "pdf": [".dat"]})
    assert TextExtractorFactory(config).get_category("x.dat") is ExtractionCategory.PDF

    config = ProcessorConfig(supported_types={"text": [".dat"], "image": [".dat"]})
    assert TextExtractorFactory(config).get_category("x.dat") is ExtractionCategory.IMAGE


def test_supported_types_is_read_only(factory, config):
    types = factory.get_supported_types()
    assert types == config.supported_types
    with pytest.raises(TypeError):
        types["pdf"] = frozenset()


def test_supported_extensions_sorted(factory):
    assert factory.get_supported_extensions() == [
        ".csv", ".jpeg", ".jpg", ".md", ".pdf", ".png", ".tiff", ".txt", ".webp",
    ]
