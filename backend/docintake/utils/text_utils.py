"""
Text utilities - Pure functions with no dependencies.
"""
from typing import Optional


def count_words(text: Optional[str]) -> int:
    """
    Count whitespace-separated words.

    Empty or missing text counts as zero; runs of whitespace act as a single
    separator and leading/trailing whitespace is ignored.
    """
    if not text:
        return 0
    return len([word for word in text.strip().split() if word])


def file_extension(file_name: Optional[str]) -> str:
    """
    Lowercased extension of a file name, leading dot included.

    Only the final path component is considered; names without a dot, or
    whose only dot is the first character (".env"), have no extension.
    """
    if not file_name:
        return ""
    base_name = file_name.replace("\\", "/").rsplit("/", 1)[-1]
    dot = base_name.rfind(".")
    if dot <= 0:
        return ""
    return base_name[dot:].lower()
