# PL/pagelinks/services/window.py
from __future__ import annotations
from typing import List


def select_window(current_page: int, total_pages: int, radius: int) -> List[int]:
    """Возвращает номера страниц вокруг текущей (по ``radius`` слева и справа).

    Окно сначала сдвигается вправо, если вылезает за 1, затем влево, если
    вылезает за ``total_pages``. Номера вне ``[1, total_pages]`` отбрасываются,
    поэтому при малом числе страниц окно просто короче (или пустое).

    Parameters
    ----------
    current_page : int
        Текущий номер страницы (1-based), не обязательно валидный.
    total_pages : int
        Общее число страниц.
    radius : int
        Сколько страниц показывать до и после текущей.

    Returns
    -------
    List[int]
        Номера страниц по возрастанию.
    """
    low = current_page - radius
    high = current_page + radius

    if low < 1:
        # прижимаем окно к первой странице
        offset = 1 - low
        low += offset
        high += offset

    if high > total_pages:
        # прижимаем окно к последней странице
        offset = high - total_pages
        low -= offset
        high -= offset

    return [n for n in range(low, high + 1) if 1 <= n <= total_pages]
