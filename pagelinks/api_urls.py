# PL/pagelinks/api_urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/pagelinks/api_urls.py
# Назначение: маршруты DRF (router)
# ─────────────────────────────────────────────────────────────────────────────

from django.urls import path, include                    # функции маршрутизации
from rest_framework.routers import DefaultRouter         # роутер DRF
from .api_views import PagingLinksViewSet                # ViewSet навигации

router = DefaultRouter()                                 # создаём роутер
router.register(r"paging", PagingLinksViewSet, basename="api-paging")  # навигация по страницам

urlpatterns = [
    path("", include(router.urls)),  # подключаем все ViewSet’ы
]
