"""relclosure — переход между порядком и его диаграммой Хассе.

Два направления:

  closure(U, H):  отношение покрытия H → рефлексивно-транзитивное замыкание R
                  R = наименьшее отношение ⊇ H ∪ Δ_U, замкнутое по транзитивности.
                  Для каждого a ∈ U: (a, a), затем обход в глубину по рёбрам H
                  (явный стек, без рекурсии) → (a, v) для всех достижимых v.
                  Сложность O(|U|·(|U| + |H|)).

  reduce(U, R):   полный порядок R → пары покрытия
                  (a, b) ∈ R, a ≠ b, и нет c ∉ {a, b} с (a, c), (c, b) ∈ R.
                  Сложность O(|R|·|U|).
                  Предусловие: R — предпорядок (рефлексивно и транзитивно).
                  Оно не проверяется; см. relprops.is_preorder.

Круговой обход: reduce(closure(H)) = H только для неизбыточного
ациклического H. Для цикла замыкание всё равно строится (достижимость),
но результат не антисимметричен.

Экстремальные элементы:
  минимальный x  — нет y ≠ x с y ≤ x
  максимальный x — нет y ≠ x с x ≤ y
  наименьший m   — m ≤ y для всех y (единственный, если есть)
  наибольший M   — y ≤ M для всех y
"""
from __future__ import annotations
import sys
import json
import argparse
from dataclasses import dataclass

sys.path.insert(0, str(__import__('pathlib').Path(__file__).resolve().parents[2]))

from libs.relcore.relcore import (
    make_relation, parse_elements, parse_pairs, format_pairs,
)
from projects.relprops.relprops import analyze, is_preorder


# ---------------------------------------------------------------------------
# Замыкание: Хассе → порядок
# ---------------------------------------------------------------------------

def _adjacency(universe, covers) -> dict[str, list[str]]:
    members = set(universe)
    adj: dict[str, list[str]] = {u: [] for u in universe}
    for a, b in covers:
        if a in members and b in members and b not in adj[a]:
            adj[a].append(b)
    return adj


def closure(universe, covers) -> list[tuple[str, str]]:
    """
    Рефлексивно-транзитивное замыкание отношения покрытия.

    Пары в порядке обнаружения: для каждого a ∈ U сначала (a, a),
    затем достижимые вершины в порядке обхода в глубину.
    """
    universe = list(dict.fromkeys(universe))
    adj = _adjacency(universe, covers)
    result: list[tuple[str, str]] = []
    seen_pairs: set[tuple[str, str]] = set()

    for a in universe:
        visited = {a}
        seen_pairs.add((a, a))
        result.append((a, a))
        stack = list(reversed(adj[a]))
        while stack:
            v = stack.pop()
            if v in visited:
                continue
            visited.add(v)
            if (a, v) not in seen_pairs:
                seen_pairs.add((a, v))
                result.append((a, v))
            for nxt in reversed(adj[v]):
                if nxt not in visited:
                    stack.append(nxt)
    return result


# ---------------------------------------------------------------------------
# Редукция: порядок → Хассе
# ---------------------------------------------------------------------------

def reduce(universe, pairs) -> list[tuple[str, str]]:
    """
    Пары покрытия порядка R: (a, b) без промежуточного c.

    Пары с концами вне U пропускаются, как и петли (a, a).
    """
    rel = make_relation(universe, pairs)
    covers: list[tuple[str, str]] = []
    for a, b in rel.inside():
        if a == b:
            continue
        if any(c != a and c != b and rel.has(a, c) and rel.has(c, b)
               for c in rel.universe):
            continue
        covers.append((a, b))
    return covers


def is_cover(universe, pairs, a: str, b: str) -> bool:
    """True, если b покрывает a в порядке R. Проверяется одна пара, без полной редукции."""
    rel = make_relation(universe, pairs)
    if a == b or not (rel.in_universe(a) and rel.in_universe(b)) or not rel.has(a, b):
        return False
    return not any(c != a and c != b and rel.has(a, c) and rel.has(c, b)
                   for c in rel.universe)


# ---------------------------------------------------------------------------
# Экстремальные элементы
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Extrema:
    minimals: tuple[str, ...]
    maximals: tuple[str, ...]
    minimum: str | None
    maximum: str | None


def extrema(universe, pairs) -> Extrema:
    """Минимальные/максимальные и наименьший/наибольший по полному порядку R."""
    rel = make_relation(universe, pairs)
    arr = rel.universe

    minimals = tuple(x for x in arr
                     if not any(y != x and rel.has(y, x) for y in arr))
    maximals = tuple(x for x in arr
                     if not any(y != x and rel.has(x, y) for y in arr))
    minimum = next((m for m in minimals if all(rel.has(m, y) for y in arr)), None)
    maximum = next((m for m in maximals if all(rel.has(y, m) for y in arr)), None)
    return Extrema(minimals, maximals, minimum, maximum)


def hasse_extrema(universe, covers) -> Extrema:
    """
    Экстремумы прямо по рёбрам Хассе.

    Минимальные — без предшественников, максимальные — без последователей.
    Наименьший/наибольший берутся из замыкания closure(U, H).
    """
    universe = list(dict.fromkeys(universe))
    preds: dict[str, set[str]] = {u: set() for u in universe}
    succs: dict[str, set[str]] = {u: set() for u in universe}
    for a, b in covers:
        if a not in succs or b not in preds:
            continue
        preds[b].add(a)
        succs[a].add(b)
    full = extrema(universe, closure(universe, covers))
    return Extrema(
        minimals=tuple(u for u in universe if not preds[u]),
        maximals=tuple(u for u in universe if not succs[u]),
        minimum=full.minimum,
        maximum=full.maximum,
    )


# ---------------------------------------------------------------------------
# JSON-экспорт
# ---------------------------------------------------------------------------

def _extrema_json(e: Extrema) -> dict:
    return {
        'minimals': list(e.minimals),
        'maximals': list(e.maximals),
        'minimum': e.minimum,
        'maximum': e.maximum,
    }


def json_closure(universe, covers) -> dict:
    full = closure(universe, covers)
    return {
        'universe': list(dict.fromkeys(universe)),
        'covers': [list(p) for p in covers],
        'closure': [list(p) for p in full],
        'extrema': _extrema_json(hasse_extrema(universe, covers)),
    }


def json_reduce(universe, pairs) -> dict:
    props = analyze(make_relation(universe, pairs))
    return {
        'universe': list(dict.fromkeys(universe)),
        'pairs': [list(p) for p in pairs],
        'is_preorder': is_preorder(props),
        'covers': [list(p) for p in reduce(universe, pairs)],
        'extrema': _extrema_json(extrema(universe, pairs)),
    }


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _describe_extrema(e: Extrema) -> list[str]:
    return [
        f'  Минимальные:  {", ".join(e.minimals) or "—"}',
        f'  Максимальные: {", ".join(e.maximals) or "—"}',
        f'  Наименьший:   {e.minimum if e.minimum is not None else "нет"}',
        f'  Наибольший:   {e.maximum if e.maximum is not None else "нет"}',
    ]


def _cmd_closure(universe, covers) -> None:
    full = closure(universe, covers)
    print(f'  Замыкание ({len(full)} пар):')
    print(f'    {format_pairs(full)}')
    print()
    for line in _describe_extrema(hasse_extrema(universe, covers)):
        print(line)


def _cmd_reduce(universe, pairs) -> None:
    if not is_preorder(analyze(make_relation(universe, pairs))):
        print('  ⚠ R не является предпорядком — покрытие может быть бессмысленным')
    covers = reduce(universe, pairs)
    print(f'  Рёбра Хассе ({len(covers)}):')
    print(f'    {format_pairs(covers) or "—"}')
    print()
    for line in _describe_extrema(extrema(universe, pairs)):
        print(line)


def _make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='relclosure',
        description='Замыкание покрытия и редукция порядка к диаграмме Хассе',
    )
    p.add_argument('--json', action='store_true',
                   help='Машиночитаемый JSON-вывод (для пайплайнов)')
    sub = p.add_subparsers(dest='cmd', required=True)

    s = sub.add_parser('closure', help='рёбра Хассе → полный порядок')
    s.add_argument('--universe', '-u', required=True)
    s.add_argument('--pairs', '-r', default='', help='рёбра покрытия "(1,2) (2,3)"')

    s = sub.add_parser('reduce', help='полный порядок → рёбра Хассе')
    s.add_argument('--universe', '-u', required=True)
    s.add_argument('--pairs', '-r', default='', help='пары порядка')
    return p


def main(argv: list[str] | None = None) -> None:
    p = _make_parser()
    args = p.parse_args(argv)
    universe = parse_elements(args.universe)
    pairs = parse_pairs(args.pairs)

    if args.cmd == 'closure':
        if args.json:
            print(json.dumps(json_closure(universe, pairs), ensure_ascii=False, indent=2))
        else:
            _cmd_closure(universe, pairs)
    elif args.cmd == 'reduce':
        if args.json:
            print(json.dumps(json_reduce(universe, pairs), ensure_ascii=False, indent=2))
        else:
            _cmd_reduce(universe, pairs)


if __name__ == '__main__':
    main()
