# tests/test_era_names.py

import pytest
from babel import Locale

from eracal.core.locale import calendar_type_of, language_of
from eracal.core.types import TextStyle
from eracal.engines.era import Era, build_eras


def test_thai_names_resolve_by_language(thai):
    be = thai.era_of(1)
    bb = thai.era_of(0)
    assert be.display_name(TextStyle.FULL, "th") == "พุทธศักราช"
    assert be.display_name(TextStyle.SHORT, "th") == "พ.ศ."
    assert bb.display_name(TextStyle.FULL, "th") == "ก่อนพุทธศักราช"
    assert be.display_name(TextStyle.NARROW, "th") == "BE"


@pytest.mark.parametrize("tag", ["th", "th-TH", "th_TH", "th-TH-u-ca-buddhist", "TH"])
def test_language_tag_forms(thai, tag):
    assert thai.era_of(1).display_name("short", tag) == "พ.ศ."


def test_babel_locale_object(thai):
    assert thai.era_of(1).display_name("full", Locale("th", "TH")) == "พุทธศักราช"


def test_falls_back_to_english(thai):
    be = thai.era_of(1)
    assert be.display_name("full", "fr-FR") == "Buddhist Era"
    assert be.display_name("short", None) == "B.E."
    # Unknown to Babel: the primary subtag still decides the language.
    assert be.display_name("full", "xx-YY") == "Buddhist Era"


def test_falls_back_to_ordinal_when_no_names():
    before, current = build_eras("Bare", ("B", "C"), {})
    assert before.display_name("full", "en") == "0"
    assert current.display_name(TextStyle.NARROW, "th") == "1"


def test_style_strings_and_enum_agree(minguo):
    roc = minguo.era_of(1)
    assert roc.display_name("full", "zh-Hant-TW") == roc.display_name(TextStyle.FULL, "zh") == "民國"
    assert minguo.era_of(0).display_name("short", "zh") == "民國前"

    with pytest.raises(ValueError):
        roc.display_name("medium", "en")


def test_name_tables_are_read_only(thai):
    names = thai.era_of(1).names
    with pytest.raises(TypeError):
        names[TextStyle.FULL] = {}
    with pytest.raises(TypeError):
        names[TextStyle.FULL]["en"] = "changed"


def test_era_identity_and_order(thai, iso):
    bb, be = thai.eras()
    assert bb < be
    assert (bb.value, be.value) == (0, 1)
    assert be.ordinal_value() == 1
    assert str(be) == "BE"
    assert be != iso.era_of(1)
    assert isinstance(be, Era)


def test_language_of_and_calendar_type_of():
    assert language_of(None) == "en"
    assert language_of("zh_Hant_TW") == "zh"
    assert language_of("") == "en"
    assert calendar_type_of("th-TH-u-ca-buddhist") == "buddhist"
    assert calendar_type_of("zh-TW-u-nu-hanidec-ca-roc") == "roc"
    assert calendar_type_of("en-US") is None
    assert calendar_type_of(None) is None
