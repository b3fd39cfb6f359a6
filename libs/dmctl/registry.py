"""registry.py — База данных модулей и групп набора дискретной математики.

Структура:
  MODULES — 4 модуля: {name: ModuleInfo}
  GROUPS  — 2 группы: {id: GroupInfo}

Каждый модуль знает:
  - где он живёт (путь к Python-модулю)
  - какие CLI-команды он поддерживает
  - поддерживает ли --json вывод
  - к какой группе принадлежит
"""
from __future__ import annotations
import sys
from dataclasses import dataclass


@dataclass
class ModuleInfo:
    name: str                     # краткое имя: 'relprops'
    path: str                     # путь запуска: 'projects.relprops.relprops'
    commands: list[str]           # доступные команды CLI
    group: str                    # ID группы: 'G1'
    description: str              # одна строка
    json_ready: bool = False      # поддерживает --json


@dataclass
class GroupInfo:
    id: str                       # 'G1'
    name: str                     # 'Отношения и порядки'
    modules: list[str]            # имена модулей
    description: str


# ─── Модули ───────────────────────────────────────────────────────────────────

MODULES: dict[str, ModuleInfo] = {
    # G1: отношения и порядки
    'relprops': ModuleInfo(
        name='relprops', path='projects.relprops.relprops',
        commands=['check', 'matrix'],
        group='G1', json_ready=True,
        description='Свойства отношения со свидетелями, порядок/эквивалентность',
    ),
    'relclosure': ModuleInfo(
        name='relclosure', path='projects.relclosure.relclosure',
        commands=['closure', 'reduce'],
        group='G1', json_ready=True,
        description='Замыкание покрытия и редукция порядка к рёбрам Хассе',
    ),
    'hasselayout': ModuleInfo(
        name='hasselayout', path='projects.hasselayout.hasselayout',
        commands=['levels', 'layout'],
        group='G1', json_ready=True,
        description='Уровни и координаты узлов диаграммы Хассе',
    ),

    # G2: арифметика
    'modarith': ModuleInfo(
        name='modarith', path='projects.modarith.modarith',
        commands=['norm', 'gcd', 'inv', 'pow', 'solve', 'table', 'units'],
        group='G2', json_ready=True,
        description='Модульная арифметика ℤₙ: Евклид, обратные, сравнения, Кэли',
    ),
}


# ─── Группы ───────────────────────────────────────────────────────────────────

GROUPS: dict[str, GroupInfo] = {
    'G1': GroupInfo(
        id='G1', name='Отношения и порядки',
        modules=['relprops', 'relclosure', 'hasselayout'],
        description='Свойства отношений, замыкания, диаграммы Хассе',
    ),
    'G2': GroupInfo(
        id='G2', name='Модульная арифметика',
        modules=['modarith'],
        description='Точные вычисления в кольце вычетов ℤₙ',
    ),
}


# ─── Вспомогательные функции ──────────────────────────────────────────────────

def get_module(name: str) -> ModuleInfo | None:
    return MODULES.get(name)


def get_group(gid: str) -> GroupInfo | None:
    return GROUPS.get(gid)


def modules_in_group(gid: str) -> list[ModuleInfo]:
    g = GROUPS.get(gid)
    if not g:
        return []
    return [MODULES[m] for m in g.modules if m in MODULES]


def group_of_module(name: str) -> GroupInfo | None:
    m = MODULES.get(name)
    if not m:
        return None
    return GROUPS.get(m.group)


def all_module_names() -> list[str]:
    return sorted(MODULES.keys())


def all_group_ids() -> list[str]:
    return sorted(GROUPS.keys())


def json_ready_modules() -> list[str]:
    return [name for name, m in MODULES.items() if m.json_ready]


def command_line(module: str, cmd: str, args: list[str] | None = None,
                 json_mode: bool = False) -> list[str]:
    """Полная команда Python для вызова модуля.

    Порядок: python -m <path> [--json] <cmd> [args]
    --json — глобальный флаг, идёт ДО подкоманды (argparse-соглашение).
    """
    mi = MODULES.get(module)
    if mi is None:
        raise ValueError(f'Неизвестный модуль: {module}')
    line = [sys.executable, '-m', mi.path]
    if json_mode and mi.json_ready:
        line.append('--json')
    line.append(cmd)
    line.extend(args or [])
    return line
