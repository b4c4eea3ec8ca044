"""Slash-команды интерактивного каталога.

Классы:
    BaseSlashCommand
        Абстрактный базовый класс для slash-команд.
    SlashCommandHandler
        Обработчик и роутер slash-команд.
    BrowseContext
        Контекст каталога для передачи в команды.

Команды:
    Basic: HelpCommand, ClearCommand, QuitCommand
    Catalog: TopicCommand, SearchCommand, ListCommand
    Overlay: OpenCommand, CloseCommand, OutsideCommand, EscapeCommand,
             ShareCommand, BackCommand, ForwardCommand, WhereCommand
"""

from brain_garden.cli.browse.slash.base import BaseSlashCommand, SlashAction, SlashResult
from brain_garden.cli.browse.slash.handler import BrowseContext, SlashCommandHandler
from brain_garden.cli.browse.slash.basic import ClearCommand, HelpCommand, QuitCommand
from brain_garden.cli.browse.slash.catalog import ListCommand, SearchCommand, TopicCommand, show_catalog
from brain_garden.cli.browse.slash.overlay import (
    BackCommand,
    CloseCommand,
    EscapeCommand,
    ForwardCommand,
    OpenCommand,
    OutsideCommand,
    ShareCommand,
    WhereCommand,
)


def build_handler() -> SlashCommandHandler:
    """Обработчик со всеми командами каталога."""
    handler = SlashCommandHandler()
    handler.register(HelpCommand(handler))
    handler.register(ClearCommand())
    handler.register(QuitCommand())
    handler.register(TopicCommand())
    handler.register(SearchCommand())
    handler.register(ListCommand())
    handler.register(OpenCommand())
    handler.register(CloseCommand())
    handler.register(OutsideCommand())
    handler.register(EscapeCommand())
    handler.register(ShareCommand())
    handler.register(BackCommand())
    handler.register(ForwardCommand())
    handler.register(WhereCommand())
    return handler


__all__ = [
    "BaseSlashCommand",
    "SlashResult",
    "SlashAction",
    "SlashCommandHandler",
    "BrowseContext",
    "build_handler",
    "show_catalog",
    "HelpCommand",
    "ClearCommand",
    "QuitCommand",
    "TopicCommand",
    "SearchCommand",
    "ListCommand",
    "OpenCommand",
    "CloseCommand",
    "OutsideCommand",
    "EscapeCommand",
    "ShareCommand",
    "BackCommand",
    "ForwardCommand",
    "WhereCommand",
]
