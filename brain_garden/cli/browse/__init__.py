"""Интерактивный каталог (REPL).

Содержит slash-команды, которые отображаются на события страницы.
"""

from brain_garden.cli.browse.slash import BrowseContext, SlashCommandHandler, build_handler

__all__ = ["BrowseContext", "SlashCommandHandler", "build_handler"]
