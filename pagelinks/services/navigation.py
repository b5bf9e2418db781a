# PL/pagelinks/services/navigation.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: сборка полной навигации First, Previous, окно страниц, Next, Last
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from django.utils.safestring import SafeString, mark_safe

from .links import LinkDescriptor, LinkRole, LinkTexts, StyleConfig, derive_link
from .rendering import Renderers, as_markup, render_item
from .window import select_window

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PagingContext:
    """Состояние страниц на один рендер. Номера не валидируются."""
    current_page: int
    total_pages: int
    page_url_builder: Callable[[int], str]
    window_radius: int = 2
    always_show_navigation: bool = True

    @property
    def window(self) -> List[int]:
        return select_window(self.current_page, self.total_pages, self.window_radius)


def shows_leading(ctx: PagingContext) -> bool:
    """Показывать ли пару First/Previous."""
    return ctx.always_show_navigation or (ctx.total_pages > 1 and ctx.current_page != 1)


def shows_trailing(ctx: PagingContext) -> bool:
    """Показывать ли пару Next/Last."""
    return ctx.always_show_navigation or ctx.current_page < ctx.total_pages


def build_links(
    ctx: PagingContext,
    style: Optional[StyleConfig] = None,
    texts: Optional[LinkTexts] = None,
) -> List[LinkDescriptor]:
    """Упорядоченный список видимых ссылок (без разметки)."""
    style = style or StyleConfig()
    texts = texts or LinkTexts()

    def link(role: LinkRole, page_number: int) -> LinkDescriptor:
        return derive_link(role, page_number, ctx.current_page, style, ctx.page_url_builder, texts)

    if not 1 <= ctx.current_page <= max(ctx.total_pages, 1):
        logger.warning("Current page %s is outside 1..%s", ctx.current_page, ctx.total_pages)

    links: List[LinkDescriptor] = []
    if shows_leading(ctx):
        links.append(link(LinkRole.FIRST, 1))
        links.append(link(LinkRole.PREVIOUS, max(1, ctx.current_page - 1)))

    links.extend(link(LinkRole.PAGE, n) for n in ctx.window)

    if shows_trailing(ctx):
        links.append(link(LinkRole.NEXT, min(ctx.current_page + 1, ctx.total_pages)))
        links.append(link(LinkRole.LAST, ctx.total_pages))
    return links


def render_navigation(
    ctx: PagingContext,
    style: Optional[StyleConfig] = None,
    renderers: Optional[Renderers] = None,
    texts: Optional[LinkTexts] = None,
) -> SafeString:
    """Один проход рендеринга: элементы склеиваются и целиком отдаются в layout."""
    renderers = renderers or Renderers()
    links = build_links(ctx, style, texts)
    logger.debug(
        "Rendering paging links: page=%s total=%s links=%s",
        ctx.current_page, ctx.total_pages, len(links),
    )
    items = mark_safe("".join(render_item(link, renderers) for link in links))
    return as_markup(renderers.layout(items))
