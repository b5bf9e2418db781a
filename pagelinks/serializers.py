# PL/pagelinks/serializers.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/pagelinks/serializers.py
# Назначение: DRF-сериализаторы структурного представления навигации
# ─────────────────────────────────────────────────────────────────────────────

from rest_framework import serializers  # базовые сериализаторы DRF


class PagingQuerySerializer(serializers.Serializer):
    """Входные GET-параметры: ?page=&total=&radius=&always_show=."""
    page = serializers.IntegerField(default=1)                                    # текущая страница (не валидируем против total)
    total = serializers.IntegerField(default=0, min_value=0)                      # всего страниц
    radius = serializers.IntegerField(required=False, min_value=0, max_value=50)  # радиус окна (по умолчанию из settings)
    always_show = serializers.BooleanField(required=False)                        # всегда показывать First/Prev/Next/Last


class LinkDescriptorSerializer(serializers.Serializer):
    """Одна ссылка навигации (без разметки)."""
    role = serializers.CharField(source="role.value")  # first/previous/page/next/last
    page_number = serializers.IntegerField()
    current_page = serializers.IntegerField()
    disabled = serializers.BooleanField()
    active = serializers.BooleanField()
    css_class = serializers.CharField()
    text = serializers.CharField()
    url = serializers.CharField()


class PagingLinksSerializer(serializers.Serializer):
    """Навигация целиком: окно страниц + упорядоченный список ссылок."""
    current_page = serializers.IntegerField()
    total_pages = serializers.IntegerField()
    window = serializers.ListField(child=serializers.IntegerField())
    links = LinkDescriptorSerializer(many=True)
