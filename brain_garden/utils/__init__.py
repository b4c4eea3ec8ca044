"""Утилиты: логирование и текстовые помощники."""
