# PL/pagelinks/services/links.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: состояние отдельной ссылки навигации (disabled/active/css/url)
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

from django.utils.translation import gettext_lazy as _

# href для неактивной ссылки: никуда не ведёт
DISABLED_URL = "javascript:void(0);"


class LinkRole(str, enum.Enum):
    """Тип ссылки в навигации."""
    FIRST = "first"
    PREVIOUS = "previous"
    PAGE = "page"
    NEXT = "next"
    LAST = "last"


@dataclass(frozen=True)
class StyleConfig:
    """Имена css-классов для каждого типа ссылки + active/disabled."""
    first: str = "first"
    previous: str = "previous"
    page: str = "page"
    next: str = "next"
    last: str = "last"
    active: str = "active"
    disabled: str = "disabled"

    def base_class(self, role: LinkRole) -> str:
        return getattr(self, role.value)


@dataclass(frozen=True)
class LinkTexts:
    """Подписи навигационных ссылок. У ссылок на страницы подпись — сам номер."""
    first: str = _("First")
    previous: str = _("Previous")
    next: str = _("Next")
    last: str = _("Last")

    def text_for(self, role: LinkRole, page_number: int) -> str:
        if role is LinkRole.PAGE:
            return str(page_number)
        return str(getattr(self, role.value))


@dataclass(frozen=True)
class LinkDescriptor:
    """Всё, что нужно шаблону ссылки. Создаётся на каждый рендер и сразу выбрасывается."""
    role: LinkRole
    page_number: int
    current_page: int
    disabled: bool
    css_class: str
    text: str
    url: str

    @property
    def active(self) -> bool:
        # текущая страница в окне: она же и disabled
        return self.role is LinkRole.PAGE and self.disabled


def is_disabled(page_number: int, current_page: int) -> bool:
    """Ссылка неактивна, если ведёт на текущую страницу. Тип ссылки не важен."""
    return page_number == current_page


def build_css_class(role: LinkRole, disabled: bool, style: StyleConfig) -> str:
    """Базовый класс роли, затем ``active`` (только для текущей страницы), затем ``disabled``."""
    classes = [style.base_class(role)]
    if role is LinkRole.PAGE and disabled:
        classes.append(style.active)
    if disabled:
        classes.append(style.disabled)
    return " ".join(c.strip() for c in classes if c and c.strip())


def derive_link(
    role: LinkRole,
    page_number: int,
    current_page: int,
    style: StyleConfig,
    page_url_builder: Callable[[int], str],
    texts: LinkTexts | None = None,
) -> LinkDescriptor:
    """Собирает :class:`LinkDescriptor` для ссылки ``role`` на страницу ``page_number``.

    ``page_url_builder`` вызывается только для активных ссылок; его исключения
    не перехватываются.
    """
    texts = texts or LinkTexts()
    disabled = is_disabled(page_number, current_page)
    url = DISABLED_URL if disabled else page_url_builder(page_number)
    return LinkDescriptor(
        role=role,
        page_number=page_number,
        current_page=current_page,
        disabled=disabled,
        css_class=build_css_class(role, disabled, style),
        text=texts.text_for(role, page_number),
        url=url,
    )
