# PL/PL/urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/PL/urls.py
# Назначение: корневые URL-маршруты проекта
# ─────────────────────────────────────────────────────────────────────────────

from django.urls import path, include       # функции для описания маршрутов

urlpatterns = [
    path("", include(("pagelinks.urls", "pagelinks"), namespace="pagelinks")),  # маршруты приложения навигации
]
