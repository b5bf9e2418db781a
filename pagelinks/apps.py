# pagelinks/apps.py
from django.apps import AppConfig


class PagelinksConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pagelinks"
    verbose_name = "Навигация по страницам"
