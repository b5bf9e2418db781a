# PL/pagelinks/services/builder.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: конфигурация навигации (из settings) и fluent-билдер поверх неё
# Принципы: билдер мутабелен, но каждый рендер получает замороженную копию
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode

from django.conf import settings
from django.utils.safestring import SafeString

from .links import LinkTexts, StyleConfig
from .navigation import PagingContext, render_navigation
from .rendering import Renderers, template_renderer

DEFAULTS: Dict[str, Any] = {
    "WINDOW_RADIUS": 2,
    "ALWAYS_SHOW_NAVIGATION": True,
    "CSS_CLASSES": {},
    "LABELS": {},
    "PAGE_PARAM": "page",
}

Hook = Union[str, Callable[[Any], Any]]


@dataclass(frozen=True)
class PagingConfig:
    """Неизменяемая конфигурация, общая для многих рендеров."""
    window_radius: int = 2
    always_show_navigation: bool = True
    style: StyleConfig = field(default_factory=StyleConfig)
    texts: LinkTexts = field(default_factory=LinkTexts)
    renderers: Renderers = field(default_factory=Renderers)
    page_param: str = "page"

    def context(self, current_page: int, total_pages: int,
                page_url_builder: Callable[[int], str]) -> PagingContext:
        return PagingContext(
            current_page=current_page,
            total_pages=total_pages,
            page_url_builder=page_url_builder,
            window_radius=self.window_radius,
            always_show_navigation=self.always_show_navigation,
        )

    def render(self, current_page: int, total_pages: int,
               page_url_builder: Callable[[int], str]) -> SafeString:
        ctx = self.context(current_page, total_pages, page_url_builder)
        return render_navigation(ctx, self.style, self.renderers, self.texts)


def config_from_settings(**overrides: Any) -> PagingConfig:
    """Собирает :class:`PagingConfig` из ``settings.PAGING_LINKS``.

    Недостающие ключи берутся из ``DEFAULTS``; ``overrides`` применяются
    поверх как поля ``PagingConfig`` (неизвестное имя → ``TypeError``).
    """
    raw = {**DEFAULTS, **getattr(settings, "PAGING_LINKS", {})}
    config = PagingConfig(
        window_radius=int(raw["WINDOW_RADIUS"]),
        always_show_navigation=bool(raw["ALWAYS_SHOW_NAVIGATION"]),
        style=StyleConfig(**raw["CSS_CLASSES"]),
        texts=LinkTexts(**raw["LABELS"]),
        page_param=raw["PAGE_PARAM"],
    )
    return replace(config, **overrides) if overrides else config


def query_url_builder(base_url: str = "", param: str = "page",
                      extra: Optional[Mapping[str, Any]] = None) -> Callable[[int], str]:
    """URL вида ``base_url?<extra>&page=N``."""
    def build(page: int) -> str:
        params = dict(extra or {})
        params[param] = page
        return f"{base_url}?{urlencode(params, doseq=True)}"

    build.do_not_call_in_templates = True  # type: ignore[attr-defined]
    return build


def request_url_builder(request, param: str = "page") -> Callable[[int], str]:
    """URL на текущий путь с сохранением остальных GET-параметров запроса."""
    def build(page: int) -> str:
        query = request.GET.copy()
        query[param] = str(page)
        return f"{request.path}?{query.urlencode()}"

    build.do_not_call_in_templates = True  # type: ignore[attr-defined]
    return build


def as_hook(value: Hook, context_name: str) -> Callable[[Any], Any]:
    """Имя шаблона превращаем в хук, callable оставляем как есть."""
    if isinstance(value, str):
        return template_renderer(value, context_name)
    return value


class PagingLinksBuilder:
    """Fluent-билдер навигации.

    Пример::

        PagingLinksBuilder(page, total, lambda n: f"/items/?page={n}") \\
            .window_radius(3) \\
            .always_show_navigation(False) \\
            .item_template("myapp/paging_item.html") \\
            .render()

    Экземпляр можно вывести прямо в шаблоне: ``__html__`` отдаёт разметку.
    """

    def __init__(self, current_page: int, total_pages: int,
                 page_url_builder: Optional[Callable[[int], str]] = None,
                 config: Optional[PagingConfig] = None):
        self._current_page = current_page
        self._total_pages = total_pages
        self._config = config or config_from_settings()
        self._page_url_builder = page_url_builder or query_url_builder(param=self._config.page_param)

    def _set(self, **changes: Any) -> "PagingLinksBuilder":
        self._config = replace(self._config, **changes)
        return self

    def _style(self, **changes: str) -> "PagingLinksBuilder":
        return self._set(style=replace(self._config.style, **changes))

    def _hooks(self, **changes: Callable[[Any], Any]) -> "PagingLinksBuilder":
        return self._set(renderers=replace(self._config.renderers, **changes))

    # ── layout ──────────────────────────────────────────────────────────────
    def layout_template(self, layout: Hook) -> "PagingLinksBuilder":
        return self._hooks(layout=as_hook(layout, "items"))

    def item_template(self, item: Hook) -> "PagingLinksBuilder":
        return self._hooks(item=as_hook(item, "item"))

    def link_template(self, link: Hook) -> "PagingLinksBuilder":
        return self._hooks(link=as_hook(link, "link"))

    # ── misc ────────────────────────────────────────────────────────────────
    def always_show_navigation(self, value: bool) -> "PagingLinksBuilder":
        return self._set(always_show_navigation=bool(value))

    def page_url_builder(self, page_url_builder: Callable[[int], str]) -> "PagingLinksBuilder":
        self._page_url_builder = page_url_builder
        return self

    def window_radius(self, radius: int) -> "PagingLinksBuilder":
        return self._set(window_radius=radius)

    max_number_of_trailing_leading_pages = window_radius

    def labels(self, **texts: str) -> "PagingLinksBuilder":
        return self._set(texts=replace(self._config.texts, **texts))

    # ── css-классы ──────────────────────────────────────────────────────────
    def first_css_class(self, value: str) -> "PagingLinksBuilder":
        return self._style(first=value)

    def previous_css_class(self, value: str) -> "PagingLinksBuilder":
        return self._style(previous=value)

    def next_css_class(self, value: str) -> "PagingLinksBuilder":
        return self._style(next=value)

    def last_css_class(self, value: str) -> "PagingLinksBuilder":
        return self._style(last=value)

    def page_css_class(self, value: str) -> "PagingLinksBuilder":
        return self._style(page=value)

    def disabled_css_class(self, value: str) -> "PagingLinksBuilder":
        return self._style(disabled=value)

    def active_css_class(self, value: str) -> "PagingLinksBuilder":
        return self._style(active=value)

    # ── рендер ──────────────────────────────────────────────────────────────
    def build(self) -> Tuple[PagingContext, PagingConfig]:
        """Замороженные контекст и конфиг для одного рендера."""
        config = self._config
        return config.context(self._current_page, self._total_pages, self._page_url_builder), config

    def render(self) -> SafeString:
        ctx, config = self.build()
        return render_navigation(ctx, config.style, config.renderers, config.texts)

    def __html__(self) -> SafeString:
        return self.render()

    def __str__(self) -> str:
        return self.render()
