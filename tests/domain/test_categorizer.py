"""Tests for domain/categorizer.py: pure Python, no Discord dependency."""

import pytest

from relay.domain.categorizer import (
    CATEGORIES,
    CONTENT_TYPE_RULES,
    EXTENSION_CATEGORIES,
    categorize,
    file_extension,
    media_type,
)


class TestContentType:
    @pytest.mark.parametrize("content_type,expected", [
        ("image/png", "image"),
        ("video/mp4", "video"),
        ("audio/ogg", "audio"),
        ("application/pdf", "pdf"),
        ("application/msword", "document"),
        ("text/plain", "document"),
        ("application/vnd.ms-excel", "spreadsheet"),
        ("application/vnd.ms-powerpoint", "presentation"),
        ("application/zip", "archive"),
        ("application/x-7z-compressed", "archive"),
        ("application/json", "other"),
    ])
    def test_families(self, content_type, expected):
        assert categorize(content_type, None) == expected

    def test_content_type_wins_over_name(self):
        assert categorize("application/pdf", "ignored.zip") == "pdf"

    def test_parameters_and_case_ignored(self):
        assert categorize("Image/PNG; charset=binary", None) == "image"
        assert categorize("text/plain; charset=utf-8", "x.bin") == "document"
        assert categorize("TEXT/PLAIN", None) == "document"

    def test_officedocument_matches_document_first(self):
        # "document" is checked before "spreadsheet"
        ct = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        assert categorize(ct, "report.xlsx") == "document"

    def test_blank_content_type_falls_back_to_name(self):
        assert categorize("", "photo.png") == "image"
        assert categorize("   ", "clip.mp4") == "video"

    def test_parameters_only_content_type_falls_back_to_name(self):
        assert categorize("; charset=utf-8", "notes.txt") == "document"
        assert categorize(" ;boundary=x", "clip.mp4") == "video"
        assert categorize(";", None) == "other"

    def test_rule_order(self):
        assert [c for _, c in CONTENT_TYPE_RULES] == [
            "image", "video", "audio", "pdf",
            "document", "spreadsheet", "presentation", "archive",
        ]


class TestExtensionFallback:
    def test_spreadsheet(self):
        assert categorize(None, "report.xlsx") == "spreadsheet"

    def test_video(self):
        assert categorize(None, "movie.mkv") == "video"

    def test_unknown(self):
        assert categorize(None, "unknown.xyz") == "other"

    def test_uppercase_extension(self):
        assert categorize(None, "PHOTO.JPG") == "image"

    def test_last_extension_only(self):
        assert categorize(None, "backup.tar.gz") == "archive"

    @pytest.mark.parametrize("name", [None, "", "README", "trailingdot.", ".", "  "])
    def test_missing_extension(self, name):
        assert categorize(None, name) == "other"

    def test_every_extension_maps_to_its_category(self):
        for category, extensions in EXTENSION_CATEGORIES.items():
            for ext in extensions:
                assert categorize(None, f"file.{ext}") == category


class TestTotality:
    @pytest.mark.parametrize("content_type,name", [
        (None, None),
        ("", ""),
        ("garbage", "garbage"),
        ("/", "."),
        ("image/", "a.b.c"),
        ("\x00", "\x00.\x00"),
        (123, 456),
    ])
    def test_always_returns_known_category(self, content_type, name):
        assert categorize(content_type, name) in CATEGORIES

    def test_deterministic(self):
        assert categorize(None, "a.mp3") == categorize(None, "a.mp3") == "audio"


class TestFileExtension:
    def test_basic(self):
        assert file_extension("a.PDF") == "pdf"

    def test_none(self):
        assert file_extension(None) == ""
        assert file_extension("noext") == ""


class TestMediaType:
    def test_strips_parameters(self):
        assert media_type("Text/Plain; charset=utf-8") == "text/plain"

    def test_parameters_only(self):
        assert media_type("; charset=utf-8") == ""

    def test_not_a_string(self):
        assert media_type(None) == ""
