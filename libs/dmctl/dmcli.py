"""dmcli.py — Главный CLI оркестратор набора дискретной математики.

Использование:
  python -m libs.dmctl.dmcli <команда> [опции]

Команды:
  list modules               — список модулей
  list groups                — список групп
  info <module|group>        — подробности об объекте
  call [--json] <module> <cmd> [args] — запустить один модуль

Флаги:
  --json   — попросить модуль вывести JSON (ставится до имени модуля)
"""
from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

# Добавить корень репозитория в PYTHONPATH
_REPO = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(_REPO))

from libs.dmctl import registry as reg


# ─── ANSI-цвета ───────────────────────────────────────────────────────────────

_R = '\033[0m'
_B = '\033[1m'
_G = '\033[1;32m'
_Y = '\033[1;33m'
_C = '\033[1;36m'


def _h(s: str) -> str: return f'{_B}{s}{_R}'
def _g(s: str) -> str: return f'{_G}{s}{_R}'
def _y(s: str) -> str: return f'{_Y}{s}{_R}'
def _c(s: str) -> str: return f'{_C}{s}{_R}'


# ─── list ──────────────────────────────────────────────────────────────────────

def cmd_list(sub: str) -> int:
    if sub == 'modules':
        _list_modules()
    elif sub == 'groups':
        _list_groups()
    else:
        print(f'  Неизвестно: {sub!r}. Используй: modules | groups')
        return 1
    return 0


def _list_modules() -> None:
    print(f'\n{_h("Модули")}  ({len(reg.MODULES)} модулей)\n')
    for gid in reg.all_group_ids():
        gi = reg.GROUPS[gid]
        print(f'  {_c(gid)} {_y(gi.name)}')
        for m in reg.modules_in_group(gid):
            json_tag = _g('✓json') if m.json_ready else '     '
            print(f'    {json_tag}  {m.name:<14} {m.description}')
            print(f'           {" " * 14} команды: {", ".join(m.commands)}')
    print()


def _list_groups() -> None:
    print(f'\n{_h("Группы")}  ({len(reg.GROUPS)} групп)\n')
    for gid, gi in sorted(reg.GROUPS.items()):
        print(f'  {_c(gid)}  {_y(gi.name):<25} {len(gi.modules)} модулей')
        print(f'       {gi.description}')
        print(f'       Модули: {", ".join(gi.modules)}')
        print()


# ─── info ──────────────────────────────────────────────────────────────────────

def cmd_info(name: str) -> int:
    m = reg.get_module(name)
    if m:
        gi = reg.group_of_module(name)
        print(f'\n{_h("Модуль:")} {_c(m.name)}')
        print(f'  Путь:       {m.path}')
        print(f'  Группа:     {m.group} ({gi.name if gi else "?"})')
        print(f'  JSON:       {"✓ поддерживается" if m.json_ready else "✗ не поддерживается"}')
        print(f'  Описание:   {m.description}')
        print(f'  Команды:    {", ".join(m.commands)}')
        print(f'  Запуск:     python -m {m.path} <команда>')
        return 0

    g = reg.get_group(name)
    if g:
        print(f'\n{_h("Группа:")} {_c(g.id)} — {_y(g.name)}')
        print(f'  Описание:   {g.description}')
        print(f'  Модули ({len(g.modules)}):')
        for mi in reg.modules_in_group(g.id):
            print(f'    {mi.name:<14} {mi.description}')
        return 0

    print(f'  ✗ "{name}" не найден. Попробуй: dmctl list modules')
    return 1


# ─── call ──────────────────────────────────────────────────────────────────────

def _env() -> dict[str, str]:
    """Окружение для subprocess с корнем репозитория в PYTHONPATH."""
    env = os.environ.copy()
    pp = env.get('PYTHONPATH', '')
    root = str(_REPO)
    if root not in pp:
        env['PYTHONPATH'] = f'{root}{os.pathsep}{pp}' if pp else root
    return env


def cmd_call(module: str, cmd: str, args: list[str],
             json_mode: bool = False) -> int:
    mi = reg.get_module(module)
    if mi is None:
        print(f'  ✗ Неизвестный модуль: {module!r}')
        print(f'  Доступные: {", ".join(reg.all_module_names())}')
        return 1
    if cmd not in mi.commands:
        print(f'  ✗ У модуля {module} нет команды {cmd!r}')
        print(f'  Доступные: {", ".join(mi.commands)}')
        return 1
    line = reg.command_line(module, cmd, args, json_mode=json_mode)
    result = subprocess.run(line, capture_output=True, text=True,
                            cwd=str(_REPO), env=_env())
    print(result.stdout, end='')
    if result.returncode != 0:
        print(f'  ✗ {module}:{cmd} завершился с кодом {result.returncode}',
              file=sys.stderr)
        if result.stderr:
            print(result.stderr, file=sys.stderr, end='')
    return result.returncode


# ─── Главный парсер ───────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='dmctl',
        description=(
            'Оркестратор: отношения, порядки, модульная арифметика.\n'
            '  dmctl list modules                      — все модули\n'
            '  dmctl info relprops                     — информация о модуле\n'
            '  dmctl call modarith inv 7 12            — вызвать модуль'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = p.add_subparsers(dest='cmd', metavar='команда')

    lp = sub.add_parser('list', help='Список модулей/групп')
    lp.add_argument('what', choices=['modules', 'groups'], help='Что показать')

    ip = sub.add_parser('info', help='Информация об объекте')
    ip.add_argument('name', help='Имя модуля / группы')

    cp = sub.add_parser('call', help='Запустить один модуль')
    cp.add_argument('module', help='Имя модуля')
    cp.add_argument('module_cmd', metavar='cmd', help='Команда')
    cp.add_argument('args', nargs=argparse.REMAINDER, help='Аргументы модуля')
    cp.add_argument('--json', dest='json_mode', action='store_true')

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cmd is None:
        parser.print_help()
        return 0

    if args.cmd == 'list':
        return cmd_list(args.what)

    if args.cmd == 'info':
        return cmd_info(args.name)

    if args.cmd == 'call':
        return cmd_call(args.module, args.module_cmd, args.args,
                        json_mode=args.json_mode)

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
