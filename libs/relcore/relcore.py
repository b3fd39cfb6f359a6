"""
relcore — ядро системы отношений: универсум, пары, матрицы

Отношение R на конечном универсуме U — множество упорядоченных пар (a, b).
Все модули projects/rel* и projects/hasselayout строят свои вычисления
поверх этого представления.

Соглашения:
  - Элемент = строка (сравнение — точное равенство строк)
  - Универсум = кортеж уникальных элементов в порядке первого появления
  - Пары дедуплицируются, порядок вставки сохраняется (для вывода)
  - Пары с концами вне U хранятся, но алгоритмы, которым нужна
    принадлежность U (замыкание, редукция, матрицы), их пропускают
  - Проверка (a, b) ∈ R — O(1) через frozenset кортежей (a, b)
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Iterable

Elem = str
Pair = tuple[str, str]


# ---------------------------------------------------------------------------
# Отношение
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Relation:
    """Конечное отношение над универсумом с O(1)-проверкой пар."""
    universe: tuple[Elem, ...] = field(compare=False)
    pairs: tuple[Pair, ...] = field(compare=False)
    # равенство и хеш по множествам, порядок вставки не важен
    _keys: frozenset = field(init=False, repr=False)
    _members: frozenset = field(init=False, repr=False)

    def __post_init__(self) -> None:
        universe = tuple(dict.fromkeys(self.universe))
        pairs = tuple(dict.fromkeys((a, b) for a, b in self.pairs))
        object.__setattr__(self, 'universe', universe)
        object.__setattr__(self, 'pairs', pairs)
        object.__setattr__(self, '_keys', frozenset(pairs))
        object.__setattr__(self, '_members', frozenset(universe))

    def has(self, a: Elem, b: Elem) -> bool:
        """(a, b) ∈ R. Пары с концами вне U просто отсутствуют."""
        return (a, b) in self._keys

    def __contains__(self, pair) -> bool:
        return tuple(pair) in self._keys

    def __iter__(self):
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def in_universe(self, x: Elem) -> bool:
        return x in self._members

    def inside(self) -> list[Pair]:
        """Пары, оба конца которых лежат в U (в порядке R)."""
        return [(a, b) for a, b in self.pairs
                if a in self._members and b in self._members]

    def successors(self, a: Elem) -> list[Elem]:
        """Все b с (a, b) ∈ R, в порядке R."""
        return [y for x, y in self.pairs if x == a]

    def successor_index(self) -> dict[Elem, list[Elem]]:
        """Индекс по первой координате: a → [b, ...]."""
        index: dict[Elem, list[Elem]] = {}
        for a, b in self.pairs:
            index.setdefault(a, []).append(b)
        return index


def make_relation(universe: Iterable[Elem], pairs: Iterable) -> Relation:
    """Построить Relation из любых итерируемых (списки, множества, генераторы)."""
    return Relation(tuple(universe), tuple((a, b) for a, b in pairs))


def identity_relation(universe: Iterable[Elem]) -> Relation:
    """Диагональ Δ_U = {(x, x) : x ∈ U}."""
    u = tuple(universe)
    return Relation(u, tuple((x, x) for x in u))


# ---------------------------------------------------------------------------
# Порядок отображения
# ---------------------------------------------------------------------------

_INT_RE = re.compile(r'^[+-]?\d+$')


def _display_key(x: Elem) -> tuple:
    # числа по значению, затем остальное по строке
    if _INT_RE.match(x):
        return (0, int(x), x)
    return (1, 0, x)


def sorted_universe(universe: Iterable[Elem]) -> list[Elem]:
    """Универсум по возрастанию: '2' < '10' < 'a' < 'b'."""
    return sorted(dict.fromkeys(universe), key=_display_key)


# ---------------------------------------------------------------------------
# Матрицы
# ---------------------------------------------------------------------------

def relation_matrix(order: list[Elem], pairs: Iterable) -> list[list[int]]:
    """
    Матрица отношения M (n×n, построчно): M[i][j] = 1 ⟺ (order[i], order[j]) ∈ R.
    Пары с элементами вне order пропускаются.
    """
    idx = {e: i for i, e in enumerate(order)}
    n = len(order)
    m = [[0] * n for _ in range(n)]
    for a, b in pairs:
        i = idx.get(a)
        j = idx.get(b)
        if i is not None and j is not None:
            m[i][j] = 1
    return m


def adjacency_matrix(order: list[Elem], covers: Iterable) -> list[list[int]]:
    """Матрица смежности диаграммы Хассе: A[i][j] = 1 ⟺ order[i] ⋖ order[j]."""
    return relation_matrix(order, covers)


# ---------------------------------------------------------------------------
# Разбор текстового ввода (для CLI)
# ---------------------------------------------------------------------------

_SPLIT_RE = re.compile(r'[\n,;\s]+')
_PAIR_RE = re.compile(r'\(\s*([^(),]+?)\s*,\s*([^(),]+?)\s*\)')


def parse_elements(text: str) -> list[Elem]:
    """'1, 2;3 4' → ['1', '2', '3', '4'] (без пустых и повторов)."""
    tokens = (t.strip() for t in _SPLIT_RE.split(text))
    return list(dict.fromkeys(t for t in tokens if t))


def parse_pairs(text: str) -> list[Pair]:
    """'(1,2) (2, 3)' → [('1', '2'), ('2', '3')]."""
    return [(a.strip(), b.strip()) for a, b in _PAIR_RE.findall(text)]


def format_pairs(pairs: Iterable) -> str:
    """[('1','2')] → '(1,2)'."""
    return ' '.join(f'({a},{b})' for a, b in pairs)
