"""Slash-команды каталога: тема, поиск, список.

Команды:
    TopicCommand: /topic, /t
    SearchCommand: /search, /find
    ListCommand: /list, /ls
"""

from brain_garden.cli.browse.slash.base import BaseSlashCommand, SlashResult
from brain_garden.cli.browse.slash.handler import BrowseContext
from brain_garden.cli.ui import render_cards, render_topics


def show_catalog(ctx: BrowseContext) -> None:
    """Фильтры тем и карточки текущего представления."""
    archive = ctx.archive
    render_topics(archive.counts, archive.query.topic, console=ctx.console)
    render_cards(archive.view, latest=archive.latest, total=archive.total, console=ctx.console)


class TopicCommand(BaseSlashCommand):
    """Выбрать тему; неизвестная тема сбрасывает фильтр на All."""

    name = "topic"
    description = "Фильтр по теме"
    aliases = ["t"]
    usage = "/topic AI | /topic all"

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        if args.strip():
            ctx.archive.set_topic(args.strip())
        show_catalog(ctx)
        return SlashResult()


class SearchCommand(BaseSlashCommand):
    name = "search"
    description = "Поиск по заголовку и описанию (без аргумента сбрасывает)"
    aliases = ["find"]
    usage = "/search agents"

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        ctx.archive.set_search(args)
        show_catalog(ctx)
        return SlashResult()


class ListCommand(BaseSlashCommand):
    name = "list"
    description = "Показать карточки"
    aliases = ["ls"]

    def execute(self, ctx: BrowseContext, args: str) -> SlashResult:
        show_catalog(ctx)
        return SlashResult()


__all__ = ["TopicCommand", "SearchCommand", "ListCommand", "show_catalog"]
