"""Команды CLI.

Модули:
    notes: list, show, share
    browse: интерактивный каталог (REPL)
    config_cmd: просмотр конфигурации
    doctor_cmd: диагностика окружения
"""
