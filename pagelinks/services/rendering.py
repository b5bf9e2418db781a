# PL/pagelinks/services/rendering.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: три точки рендеринга (layout → item → link) и их реализации по умолчанию
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from django.template.loader import render_to_string
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from .links import LinkDescriptor, LinkRole


@dataclass(frozen=True)
class ItemDescriptor:
    """Модель для шаблона элемента: ссылка + её уже отрисованный фрагмент."""
    link: LinkDescriptor
    link_render: SafeString
    css_class: str

    # удобные сокращения для шаблонов: {{ item.role }}, {{ item.page_number }}
    @property
    def role(self) -> LinkRole:
        return self.link.role

    @property
    def page_number(self) -> int:
        return self.link.page_number

    @property
    def current_page(self) -> int:
        return self.link.current_page

    @property
    def disabled(self) -> bool:
        return self.link.disabled


LayoutRenderer = Callable[[SafeString], Any]
ItemRenderer = Callable[[ItemDescriptor], Any]
LinkRenderer = Callable[[LinkDescriptor], Any]


def default_layout(items: SafeString) -> SafeString:
    return format_html('<div class="pagination"><ul>{}</ul></div>', items)


def default_item(item: ItemDescriptor) -> SafeString:
    return format_html('<li class="{}">{}</li>', item.css_class, item.link_render)


def default_link(link: LinkDescriptor) -> SafeString:
    return format_html('<a href="{}" class="{}">{}</a>', link.url, link.css_class, link.text)


def as_markup(value: Any) -> SafeString:
    """Результат пользовательского рендерера считается готовой разметкой."""
    return mark_safe(str(value))


def template_renderer(template_name: str, context_name: str) -> Callable[[Any], SafeString]:
    """Хук рендеринга на основе Django-шаблона.

    Аргумент хука кладётся в контекст шаблона под именем ``context_name``
    (``items`` для layout, ``item`` для элемента, ``link`` для ссылки).
    ``TemplateDoesNotExist`` пробрасывается вызывающему при первом рендере.
    """
    def render(value: Any) -> SafeString:
        return as_markup(render_to_string(template_name, {context_name: value}))

    return render


@dataclass(frozen=True)
class Renderers:
    """Набор из трёх хуков; любой можно заменить."""
    layout: LayoutRenderer = default_layout
    item: ItemRenderer = default_item
    link: LinkRenderer = default_link

    @classmethod
    def from_templates(
        cls,
        layout: str = "pagelinks/layout.html",
        item: str = "pagelinks/item.html",
        link: str = "pagelinks/link.html",
    ) -> "Renderers":
        return cls(
            layout=template_renderer(layout, "items"),
            item=template_renderer(item, "item"),
            link=template_renderer(link, "link"),
        )


def render_item(link: LinkDescriptor, renderers: Renderers) -> SafeString:
    """Рендерит ссылку, заворачивает её в элемент и возвращает разметку элемента."""
    link_render = as_markup(renderers.link(link))
    item = ItemDescriptor(link=link, link_render=link_render, css_class=link.css_class)
    return as_markup(renderers.item(item))
