from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from django import template
from django.utils.safestring import SafeString

from pagelinks.services.builder import (
    PagingLinksBuilder,
    config_from_settings,
    query_url_builder,
    request_url_builder,
)
from pagelinks.services.window import select_window

logger = logging.getLogger(__name__)

register = template.Library()


def _as_int(value: Any, default: int, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("paging_links: %s=%r is not an integer, using %s", name, value, default)
        return default


@register.simple_tag(takes_context=True)
def paging_links(context, current_page, total_pages,
                 url_builder: Optional[Callable[[int], str]] = None, **options) -> SafeString:
    """
    Навигация по страницам.
    Использование в шаблоне:
      {% load pagelinks_tags %}
      {% paging_links page_obj.number paginator.num_pages radius=3 always_show=False %}
      {% paging_links 5 20 item_template="myapp/item.html" base_url="/list/" %}

    Без ``url_builder`` ссылки строятся от текущего запроса (остальные
    GET-параметры сохраняются) либо от ``base_url``.
    Свой ``url_builder`` из контекста должен иметь
    ``do_not_call_in_templates = True``, иначе шаблонизатор его вызовет.
    """
    config = config_from_settings()
    current = _as_int(current_page, 1, "current_page")
    total = _as_int(total_pages, 0, "total_pages")
    param = options.get("param", config.page_param)

    if url_builder is None:
        request = context.get("request")
        if request is not None and "base_url" not in options:
            url_builder = request_url_builder(request, param)
        else:
            url_builder = query_url_builder(options.get("base_url", ""), param)

    builder = PagingLinksBuilder(current, total, url_builder, config=config)
    if "radius" in options:
        builder.window_radius(_as_int(options["radius"], config.window_radius, "radius"))
    if "always_show" in options:
        builder.always_show_navigation(options["always_show"])
    if options.get("layout_template"):
        builder.layout_template(options["layout_template"])
    if options.get("item_template"):
        builder.item_template(options["item_template"])
    if options.get("link_template"):
        builder.link_template(options["link_template"])
    return builder.render()


@register.simple_tag
def page_window(current_page, total_pages, radius=2) -> List[int]:
    """
    Номера страниц вокруг текущей — для шаблонов, которые рисуют ссылки сами:
      {% page_window page_obj.number paginator.num_pages 2 as pages %}
    """
    return select_window(
        _as_int(current_page, 1, "current_page"),
        _as_int(total_pages, 0, "total_pages"),
        _as_int(radius, 2, "radius"),
    )
