# PL/pagelinks/tests/test_links.py
import pytest

from pagelinks.services.links import (
    DISABLED_URL,
    LinkRole,
    LinkTexts,
    StyleConfig,
    build_css_class,
    derive_link,
    is_disabled,
)


@pytest.mark.parametrize("role", list(LinkRole))
def test_disabled_depends_only_on_target_page(role, style, url_builder):
    """disabled ⇔ ссылка ведёт на текущую страницу, для любой роли."""
    assert derive_link(role, 3, 3, style, url_builder).disabled is True
    assert derive_link(role, 4, 3, style, url_builder).disabled is False
    assert is_disabled(1, 1) and not is_disabled(1, 2)


def test_css_class_for_current_page_link(style):
    assert build_css_class(LinkRole.PAGE, True, style) == "page active disabled"
    assert build_css_class(LinkRole.PAGE, False, style) == "page"


@pytest.mark.parametrize(
    "role, expected",
    [
        (LinkRole.FIRST, "first disabled"),
        (LinkRole.PREVIOUS, "previous disabled"),
        (LinkRole.NEXT, "next disabled"),
        (LinkRole.LAST, "last disabled"),
    ],
)
def test_active_class_only_for_page_links(role, expected, style):
    assert build_css_class(role, True, style) == expected
    assert "active" not in build_css_class(role, True, style)


def test_empty_class_names_leave_no_stray_spaces():
    style = StyleConfig(page="", active="", disabled="off")
    assert build_css_class(LinkRole.PAGE, True, style) == "off"
    assert build_css_class(LinkRole.PAGE, False, style) == ""
    assert build_css_class(LinkRole.FIRST, True, StyleConfig(disabled="")) == "first"


def test_custom_class_names(style):
    custom = StyleConfig(page="page-item", active="is-current", disabled="is-off")
    assert build_css_class(LinkRole.PAGE, True, custom) == "page-item is-current is-off"


def test_disabled_link_does_not_call_url_builder(style, url_builder):
    link = derive_link(LinkRole.FIRST, 1, 1, style, url_builder)
    assert link.url == DISABLED_URL
    assert url_builder.calls == []


def test_enabled_link_uses_url_builder(style, url_builder):
    link = derive_link(LinkRole.NEXT, 6, 5, style, url_builder)
    assert link.url == "/items/?page=6"
    assert url_builder.calls == [6]
    assert link.css_class == "next"
    assert link.active is False


def test_link_text_and_active_flag(style, url_builder):
    page = derive_link(LinkRole.PAGE, 7, 7, style, url_builder)
    assert page.text == "7"
    assert page.active is True

    texts = LinkTexts(first="«", last="»")
    assert derive_link(LinkRole.FIRST, 1, 4, style, url_builder, texts).text == "«"
    assert derive_link(LinkRole.LAST, 9, 4, style, url_builder, texts).text == "»"
    assert derive_link(LinkRole.PREVIOUS, 3, 4, style, url_builder).text == "Previous"


def test_url_builder_errors_propagate(style):
    def broken(page):
        raise RuntimeError("no route")

    with pytest.raises(RuntimeError, match="no route"):
        derive_link(LinkRole.PAGE, 2, 1, style, broken)
