"""hasselayout — раскладка диаграммы Хассе по уровням.

Вход: универсум U (упорядоченный список) и рёбра покрытия H.
Выход: для каждого элемента уровень и координаты (x, y) на плоскости.

Алгоритм уровней (longest-path, не shortest-path):
  1. pred/succ по рёбрам H (рёбра с концами вне U игнорируются)
  2. Очередь = все элементы без предшественников, уровень 0
  3. Релаксация a → b:  level(b) = max(level(b), level(a) + 1);
     b снова в очередь, если уровень вырос
  Так каждый элемент строго выше всех прямых предшественников,
  и ни одно ребро Хассе не идёт вниз или вбок.

Вырожденный вход (цикл — у каждого элемента есть предшественник):
  первый элемент U принудительно получает уровень 0. Уровни ограничены
  сверху |U| − 1 (длина самой длинной простой цепи), поэтому релаксация
  на цикле завершается. Это запасной вариант, а не корректная раскладка.
  Недостигнутые элементы остаются на уровне 0.

Координаты (как в SVG: y растёт вниз):
  x — равномерно по ширине внутри уровня: x = W·(i+1)/(k+1)
  y — ось перевёрнута: уровень 0 внизу (y = H − margin),
      максимальный уровень вверху (y = margin)
"""
from __future__ import annotations
import sys
import json
import argparse
from collections import deque
from dataclasses import dataclass

sys.path.insert(0, str(__import__('pathlib').Path(__file__).resolve().parents[2]))

from libs.relcore.relcore import parse_elements, parse_pairs, adjacency_matrix

DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 400
DEFAULT_MARGIN = 40


@dataclass(frozen=True)
class NodePosition:
    level: int
    index: int       # позиция внутри уровня (0, 1, ...)
    x: float
    y: float


# ---------------------------------------------------------------------------
# Уровни
# ---------------------------------------------------------------------------

def neighbours(universe, covers) -> tuple[dict, dict]:
    """(pred, succ): множества прямых предшественников и последователей."""
    pred: dict[str, list[str]] = {u: [] for u in universe}
    succ: dict[str, list[str]] = {u: [] for u in universe}
    for a, b in covers:
        if a not in succ or b not in pred or b in succ[a]:
            continue
        succ[a].append(b)
        pred[b].append(a)
    return pred, succ


def levels(universe, covers) -> dict[str, int]:
    """Уровень каждого элемента: длина самой длинной цепи покрытий снизу."""
    universe = list(dict.fromkeys(universe))
    if not universe:
        return {}
    pred, succ = neighbours(universe, covers)
    cap = len(universe) - 1

    level: dict[str, int] = {}
    queue: deque[str] = deque()
    for u in universe:
        if not pred[u]:
            level[u] = 0
            queue.append(u)
    if not queue:
        level[universe[0]] = 0
        queue.append(universe[0])

    while queue:
        a = queue.popleft()
        nxt = level[a] + 1
        if nxt > cap:
            continue
        for b in succ[a]:
            if nxt > level.get(b, -1):
                level[b] = nxt
                queue.append(b)

    return {u: level.get(u, 0) for u in universe}


def level_groups(universe, covers) -> list[list[str]]:
    """Элементы по уровням [[уровень 0], [уровень 1], ...] в порядке U."""
    lv = levels(universe, covers)
    if not lv:
        return []
    groups: list[list[str]] = [[] for _ in range(max(lv.values()) + 1)]
    for u, k in lv.items():
        groups[k].append(u)
    return groups


# ---------------------------------------------------------------------------
# Координаты
# ---------------------------------------------------------------------------

def layout(universe, covers,
           width: float = DEFAULT_WIDTH,
           height: float = DEFAULT_HEIGHT,
           margin: float = DEFAULT_MARGIN) -> dict[str, NodePosition]:
    """Позиции узлов диаграммы Хассе: уровень 0 внизу, верхний уровень вверху."""
    groups = level_groups(universe, covers)
    top = len(groups) - 1
    positions: dict[str, NodePosition] = {}
    for k, group in enumerate(groups):
        if top <= 0:
            y = height / 2
        else:
            y = margin + (top - k) * (height - 2 * margin) / top
        n = len(group)
        for i, u in enumerate(group):
            positions[u] = NodePosition(k, i, width * (i + 1) / (n + 1), y)
    return positions


# ---------------------------------------------------------------------------
# Текстовая диаграмма
# ---------------------------------------------------------------------------

def render_levels(universe, covers) -> str:
    """Уровни сверху вниз, под каждым элементом — кого он покрывает."""
    groups = level_groups(universe, covers)
    pred, _ = neighbours(list(dict.fromkeys(universe)), covers)
    lines: list[str] = []
    for k in range(len(groups) - 1, -1, -1):
        cells = []
        for u in groups[k]:
            below = ','.join(pred[u])
            cells.append(f'{u}' + (f' ⋗ {below}' if below else ''))
        lines.append(f'  Уровень {k}:  ' + '   '.join(cells))
    return '\n'.join(lines)


def json_layout(universe, covers, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT,
                margin=DEFAULT_MARGIN) -> dict:
    universe = list(dict.fromkeys(universe))
    pos = layout(universe, covers, width, height, margin)
    return {
        'universe': universe,
        'covers': [list(p) for p in covers],
        'nodes': {u: {'level': p.level, 'index': p.index, 'x': p.x, 'y': p.y}
                  for u, p in pos.items()},
        'adjacency': adjacency_matrix(universe, covers),
    }


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='hasselayout',
        description='Раскладка диаграммы Хассе по уровням',
    )
    p.add_argument('--json', action='store_true',
                   help='Машиночитаемый JSON-вывод (для пайплайнов)')
    sub = p.add_subparsers(dest='cmd', required=True)

    s = sub.add_parser('levels', help='уровни элементов (текст)')
    s.add_argument('--universe', '-u', required=True)
    s.add_argument('--pairs', '-r', default='', help='рёбра покрытия "(1,2) (2,3)"')

    s = sub.add_parser('layout', help='координаты узлов')
    s.add_argument('--universe', '-u', required=True)
    s.add_argument('--pairs', '-r', default='', help='рёбра покрытия "(1,2) (2,3)"')
    s.add_argument('--width', type=float, default=DEFAULT_WIDTH)
    s.add_argument('--height', type=float, default=DEFAULT_HEIGHT)
    s.add_argument('--margin', type=float, default=DEFAULT_MARGIN)
    return p


def main(argv: list[str] | None = None) -> None:
    p = _make_parser()
    args = p.parse_args(argv)
    universe = parse_elements(args.universe)
    covers = parse_pairs(args.pairs)

    if args.cmd == 'levels':
        if args.json:
            print(json.dumps({'levels': levels(universe, covers),
                              'groups': level_groups(universe, covers)},
                             ensure_ascii=False, indent=2))
        else:
            print(render_levels(universe, covers))
    elif args.cmd == 'layout':
        data = json_layout(universe, covers, args.width, args.height, args.margin)
        if args.json:
            print(json.dumps(data, ensure_ascii=False, indent=2))
        else:
            for u, node in data['nodes'].items():
                print(f'  {u:>6}  уровень {node["level"]}  '
                      f'x={node["x"]:7.1f}  y={node["y"]:7.1f}')


if __name__ == '__main__':
    main()
