# cg2d/errors.py
from __future__ import annotations


class InvalidInput(ValueError):
    """Немає точок для обробки (n < 1)."""


class DegenerateHull(ValueError):
    """
    Оболонка не є многокутником: n < 3, усі точки колінеарні або збігаються.
    Кидається лише в strict-режимі; інакше результат повертається як є.
    """

    def __init__(self, message: str, vertices=None):
        super().__init__(message)
        self.vertices = list(vertices or [])
