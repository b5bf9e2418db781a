# PL/PL/settings.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PL/PL/settings.py
# Назначение: глобальные настройки проекта Django + конфигурация навигации PAGING_LINKS
# Принципы: секреты и переключатели берём из .env, всё остальное задаём здесь
# ─────────────────────────────────────────────────────────────────────────────

from pathlib import Path  # стандартный модуль для работы с путями (Path-объект)
import os                 # модуль для чтения переменных окружения
from dotenv import load_dotenv  # загрузка значений из .env

# BASE_DIR — корень проекта. Используем для формирования других путей.
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Быстрая стартовая секция (важное для безопасности) ───────────────────────

# Подгружаем файл окружения .env, расположенный в корне проекта
load_dotenv(BASE_DIR / ".env")

# Флаг режима разработки. В продакшене должен быть False (DJ_DEBUG=0).
DEBUG = os.getenv("DJ_DEBUG", "1") == "1"

# Секретный ключ берём из переменной окружения KEY_DJ
SECRET_KEY = os.getenv("KEY_DJ")

# Без ключа в проде падаем сразу; в Dev подставляем заглушку
if not SECRET_KEY:
    if not DEBUG:
        raise ValueError("❌ SECRET_KEY не найден в .env! Установите KEY_DJ.")
    SECRET_KEY = "dev-only-insecure-key"

# Список разрешённых хостов. В проде — обязательно заполнить через DJ_ALLOWED_HOSTS.
ALLOWED_HOSTS: list[str] = [h for h in os.getenv("DJ_ALLOWED_HOSTS", "").split(",") if h]

# ── Приложения проекта ───────────────────────────────────────────────────────

INSTALLED_APPS = [
    "django.contrib.auth",             # нужен DRF (AnonymousUser)
    "django.contrib.contenttypes",     # контент-тайпы (зависимость auth)
    "django.contrib.staticfiles",      # работа со статикой
    "rest_framework",                  # DRF — API фреймворк
    "pagelinks",                       # навигация по страницам
]

# ── Middleware ───────────────────────────────────────────────────────────────

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",        # базовая безопасность
    "django.middleware.common.CommonMiddleware",            # общие улучшения (ETag и пр.)
    "django.middleware.clickjacking.XFrameOptionsMiddleware",   # защита от clickjacking
]

# ── Урлы и WSGI ──────────────────────────────────────────────────────────────

ROOT_URLCONF = "PL.urls"              # корневой файл с маршрутами

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",  # бэкенд движка шаблонов
        "DIRS": [BASE_DIR / "templates"],  # дополнительная папка с шаблонами проекта
        "APP_DIRS": True,                  # включаем поиск шаблонов в приложениях
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",  # добавляет request в контекст
            ],
        },
    },
]

WSGI_APPLICATION = "PL.wsgi.application"  # точка входа WSGI-сервера

# ── База данных ──────────────────────────────────────────────────────────────
# Моделей нет; SQLite нужен только contrib.auth/contenttypes.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",    # движок БД
        "NAME": BASE_DIR / "db.sqlite3",           # путь до файла SQLite
    }
}

# ── Локализация и часовой пояс ──────────────────────────────────────────────

LANGUAGE_CODE = "ru-ru"       # язык интерфейса
TIME_ZONE = "Europe/Moscow"   # часовой пояс проекта
USE_I18N = True               # поддержка интернационализации
USE_TZ = True                 # хранить даты/время в UTC

# ── Статика ─────────────────────────────────────────────────────────────────

STATIC_URL = "static/"                 # URL-префикс для статики

# ── Первичный ключ по умолчанию ─────────────────────────────────────────────

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"  # тип авто-поля id

# ── DRF: базовые безопасные настройки ────────────────────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",  # JSON рендерер
        "rest_framework.renderers.BrowsableAPIRenderer",  # удобно при разработке
    ],
    "UNAUTHENTICATED_USER": None,  # API без пользователей — не трогаем БД
}

# ── Навигация по страницам ──────────────────────────────────────────────────
# Значения по умолчанию для {% paging_links %}, PagingLinksBuilder и /api/paging/
PAGING_LINKS = {
    "WINDOW_RADIUS": int(os.getenv("PAGING_WINDOW_RADIUS", "2")),        # страниц слева/справа от текущей
    "ALWAYS_SHOW_NAVIGATION": os.getenv("PAGING_ALWAYS_SHOW", "1") == "1",  # First/Prev/Next/Last всегда (неактивные)
    "CSS_CLASSES": {                                                    # css-классы по типам ссылок
        "first": "first",
        "previous": "previous",
        "page": "page",
        "next": "next",
        "last": "last",
        "active": "active",
        "disabled": "disabled",
    },
    "PAGE_PARAM": "page",                                               # имя GET-параметра с номером страницы
}

# ── Логирование ─────────────────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "pagelinks": {
            "handlers": ["console"],
            "level": os.getenv("PAGING_LOG_LEVEL", "WARNING"),
        },
    },
}
