from __future__ import annotations

import pytest

from vtkwriter.titles import PLACEHOLDER_TITLE, sanitize_field_name, sanitize_title


def test_title_is_trimmed():
    assert sanitize_title("  Sphere scan 42 \n") == "Sphere scan 42"


@pytest.mark.parametrize("title", ["", "   ", "\t\n", None])
def test_blank_title_gets_placeholder(title):
    assert sanitize_title(title) == PLACEHOLDER_TITLE


def test_long_title_is_truncated_with_ellipsis():
    title = "x" * 300
    cleaned = sanitize_title(title)
    assert len(cleaned) == 253
    assert cleaned == "x" * 250 + "..."


def test_title_at_limit_is_kept():
    title = "y" * 254
    assert sanitize_title(title) == title
    assert len(sanitize_title(title + "y")) == 253


def test_truncation_measures_trimmed_title():
    assert sanitize_title("   " + "z" * 254 + "   ") == "z" * 254


def test_field_name_replaces_inner_spaces():
    assert sanitize_field_name("  surface height map ") == "surface_height_map"
    assert sanitize_field_name("   ") == ""


def test_line_breaks_inside_title_become_spaces():
    assert sanitize_title("scan\nrun 2") == "scan run 2"
    assert sanitize_title("scan\r\n\r\nrun\t2") == "scan run 2"


def test_title_is_ascii():
    assert sanitize_title("Messung Kugel Ø 5 mm, Temperatur 20 °C") == "Messung Kugel ? 5 mm, Temperatur 20 ?C"
    assert sanitize_title("café") == "cafe"


def test_field_name_collapses_all_whitespace():
    assert sanitize_field_name(" a\tb\n c ") == "a_b_c"
    assert sanitize_field_name("höhe") == "hohe"
