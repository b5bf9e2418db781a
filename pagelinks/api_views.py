# PL/pagelinks/api_views.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/pagelinks/api_views.py
# Назначение: DRF-представления для структурной выдачи навигации (JSON вместо HTML)
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations  # поддержка современных аннотаций

import logging

from rest_framework import viewsets  # базовый ViewSet
from rest_framework.response import Response  # DRF-ответ

from .serializers import PagingLinksSerializer, PagingQuerySerializer
from .services.builder import config_from_settings, request_url_builder
from .services.navigation import build_links

logger = logging.getLogger(__name__)


class PagingLinksViewSet(viewsets.ViewSet):
    """GET /api/paging/ — ссылки навигации для ?page=&total= в виде JSON."""
    authentication_classes: list = []   # публичная read-only ручка
    permission_classes: list = []

    def list(self, request) -> Response:
        query = PagingQuerySerializer(data=request.query_params.dict())
        query.is_valid(raise_exception=True)  # 400 с ошибками полей
        params = query.validated_data

        overrides = {}
        if "radius" in params:
            overrides["window_radius"] = params["radius"]
        if "always_show" in params:
            overrides["always_show_navigation"] = params["always_show"]
        config = config_from_settings(**overrides)

        # ссылки ведут на эту же ручку, остальные параметры сохраняются
        ctx = config.context(params["page"], params["total"],
                             request_url_builder(request, config.page_param))
        links = build_links(ctx, config.style, config.texts)
        logger.debug("API paging: page=%s total=%s links=%s", ctx.current_page, ctx.total_pages, len(links))

        payload = PagingLinksSerializer({
            "current_page": ctx.current_page,
            "total_pages": ctx.total_pages,
            "window": ctx.window,
            "links": links,
        })
        return Response(payload.data)
