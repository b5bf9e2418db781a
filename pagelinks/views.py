# PL/pagelinks/views.py
from typing import Any

from django.views.generic import TemplateView


def _int_param(request, name: str, default: int) -> int:
    # безопасно парсим число из GET
    try:
        return int(request.GET.get(name) or default)
    except (TypeError, ValueError):
        return default


class DemoView(TemplateView):
    """Демо: навигация по ?total= страницам, текущая — ?page=."""
    template_name = "pagelinks/demo.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        ctx = super().get_context_data(**kwargs)
        total = max(0, min(_int_param(self.request, "total", 20), 10_000))
        ctx.update(
            title="Навигация по страницам",
            page=_int_param(self.request, "page", 1),
            total=total,
            radius=max(0, min(_int_param(self.request, "radius", 2), 50)),
        )
        return ctx
