# PL/pagelinks/tests/test_navigation.py
import pytest

from pagelinks.services.links import LinkRole, LinkTexts, StyleConfig
from pagelinks.services.navigation import (
    PagingContext,
    build_links,
    render_navigation,
    shows_leading,
    shows_trailing,
)
from pagelinks.services.rendering import Renderers


def _ctx(current, total, url_builder, radius=2, always_show=True):
    return PagingContext(
        current_page=current,
        total_pages=total,
        page_url_builder=url_builder,
        window_radius=radius,
        always_show_navigation=always_show,
    )


def _summary(links):
    return [(link.role, link.page_number, link.disabled) for link in links]


def test_first_page_of_ten(url_builder):
    """current=1, total=10, r=2: First и Previous ведут на 1 и неактивны."""
    links = build_links(_ctx(1, 10, url_builder))
    assert _summary(links) == [
        (LinkRole.FIRST, 1, True),
        (LinkRole.PREVIOUS, 1, True),
        (LinkRole.PAGE, 1, True),
        (LinkRole.PAGE, 2, False),
        (LinkRole.PAGE, 3, False),
        (LinkRole.PAGE, 4, False),
        (LinkRole.PAGE, 5, False),
        (LinkRole.NEXT, 2, False),
        (LinkRole.LAST, 10, False),
    ]


def test_middle_page_targets(url_builder):
    links = build_links(_ctx(5, 9, url_builder))
    assert [link.page_number for link in links] == [1, 4, 3, 4, 5, 6, 7, 6, 9]
    assert [link.role for link in links][0] is LinkRole.FIRST
    assert [link.role for link in links][-1] is LinkRole.LAST


def test_last_page_shifts_window_left(url_builder):
    links = build_links(_ctx(9, 9, url_builder, radius=3))
    pages = [link.page_number for link in links if link.role is LinkRole.PAGE]
    assert pages == [3, 4, 5, 6, 7, 8, 9]
    next_link, last_link = links[-2:]
    assert (next_link.page_number, next_link.disabled) == (9, True)
    assert (last_link.page_number, last_link.disabled) == (9, True)


def test_single_page_hides_navigation_when_not_forced(url_builder):
    links = build_links(_ctx(1, 1, url_builder, always_show=False))
    assert len(links) == 1
    only = links[0]
    assert only.role is LinkRole.PAGE
    assert only.disabled and only.active
    assert only.css_class == "page active disabled"


def test_single_page_with_always_show_renders_everything_disabled(url_builder):
    links = build_links(_ctx(1, 1, url_builder, always_show=True))
    assert [link.role for link in links] == [
        LinkRole.FIRST, LinkRole.PREVIOUS, LinkRole.PAGE, LinkRole.NEXT, LinkRole.LAST,
    ]
    assert all(link.disabled for link in links)
    assert url_builder.calls == []


def test_navigation_pairs_are_independent(url_builder):
    first_page = _ctx(1, 5, url_builder, always_show=False)
    assert not shows_leading(first_page) and shows_trailing(first_page)
    roles = [link.role for link in build_links(first_page)]
    assert LinkRole.FIRST not in roles and LinkRole.NEXT in roles

    last_page = _ctx(5, 5, url_builder, always_show=False)
    assert shows_leading(last_page) and not shows_trailing(last_page)
    roles = [link.role for link in build_links(last_page)]
    assert LinkRole.PREVIOUS in roles and LinkRole.LAST not in roles


def test_active_class_only_on_current_page_link(url_builder):
    links = build_links(_ctx(1, 10, url_builder))
    active = [link for link in links if "active" in link.css_class.split()]
    assert [(link.role, link.page_number) for link in active] == [(LinkRole.PAGE, 1)]


def test_zero_pages_degrades_gracefully(url_builder):
    links = build_links(_ctx(1, 0, url_builder, always_show=False))
    assert links == []
    html = render_navigation(_ctx(1, 0, url_builder, always_show=False))
    assert html == '<div class="pagination"><ul></ul></div>'


def test_out_of_range_current_page_is_logged(url_builder, caplog):
    with caplog.at_level("WARNING", logger="pagelinks"):
        links = build_links(_ctx(12, 10, url_builder, always_show=False))
    assert "outside" in caplog.text
    # Previous ведёт на 11, Next/Last скрыты
    assert [link.role for link in links][:2] == [LinkRole.FIRST, LinkRole.PREVIOUS]
    assert [link.page_number for link in links if link.role is LinkRole.PAGE] == [6, 7, 8, 9, 10]


def test_render_single_page_markup(url_builder):
    html = render_navigation(_ctx(1, 1, url_builder, always_show=False))
    assert html == (
        '<div class="pagination"><ul>'
        '<li class="page active disabled">'
        '<a href="javascript:void(0);" class="page active disabled">1</a>'
        "</li></ul></div>"
    )


def test_render_order_and_labels(url_builder):
    html = render_navigation(_ctx(2, 3, url_builder, radius=1))
    positions = [html.index(text) for text in (">First<", ">Previous<", ">1<", ">2<", ">3<", ">Next<", ">Last<")]
    assert positions == sorted(positions)
    assert 'href="/items/?page=3" class="next"' in html


def test_render_with_custom_style_texts_and_layout(url_builder):
    renderers = Renderers(layout=lambda items: f"<nav>{items}</nav>")
    html = render_navigation(
        _ctx(2, 2, url_builder, radius=0, always_show=False),
        StyleConfig(previous="prev"),
        renderers,
        LinkTexts(first="«", previous="‹"),
    )
    assert html.startswith("<nav>") and html.endswith("</nav>")
    assert ">«<" in html and ">‹<" in html
    assert 'class="prev"' in html


def test_render_is_repeatable(url_builder):
    ctx = _ctx(4, 8, url_builder)
    assert render_navigation(ctx) == render_navigation(ctx)


def test_url_builder_failure_propagates():
    def broken(page):
        raise KeyError(page)

    with pytest.raises(KeyError):
        render_navigation(_ctx(1, 3, broken))
