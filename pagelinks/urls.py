from django.urls import path, include
from . import views

app_name = "pagelinks"

urlpatterns = [
    path("", views.DemoView.as_view(), name="demo"),

    # API
    path("api/", include(("pagelinks.api_urls", "pagelinks_api"), namespace="pagelinks_api")),
]
