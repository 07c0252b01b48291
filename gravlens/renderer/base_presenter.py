# -*- coding: utf-8 -*-
"""
Абстрактный «презентер» – куда уходит готовый RGBA‑кадр.
"""

from abc import ABC, abstractmethod


class BasePresenter(ABC):
    @abstractmethod
    def present(self, buffer) -> None:
        """Показать (или сохранить) один кадр."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Пустой кадр – пока карта считается."""
        pass

    def close(self) -> None:
        pass
