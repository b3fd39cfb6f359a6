"""relprops — свойства бинарного отношения с контрпримерами.

Для отношения R на конечном универсуме U проверяются четыре свойства:

  Рефлексивность:    ∀x ∈ U: (x, x) ∈ R
  Симметричность:    ∀(a, b) ∈ R: (b, a) ∈ R
  Антисимметричность: ∀(a, b) ∈ R, a ≠ b: (b, a) ∉ R
  Транзитивность:    ∀(a, b), (b, c) ∈ R: (a, c) ∈ R

Каждая проверка — проверка существования: останавливается на первом
нарушении и возвращает его как свидетеля (witness):

  reflexive      → первый x ∈ U (в порядке U) без (x, x)
  symmetric      → первая пара (a, b) ∈ R (в порядке R) без (b, a)
  antisymmetric  → первая пара (a, b), a ≠ b, для которой (b, a) ∈ R
  transitive     → TransitivityWitness: (a, b), (b, d) и отсутствующая (a, d)

Классификация:
  частичный порядок     = рефлексивно ∧ антисимметрично ∧ транзитивно
  отношение эквивалентности = рефлексивно ∧ симметрично ∧ транзитивно
  Оба могут выполняться одновременно (тождественное отношение Δ_U).
"""
from __future__ import annotations
import sys
import json
import argparse
from dataclasses import dataclass
from typing import Any

sys.path.insert(0, str(__import__('pathlib').Path(__file__).resolve().parents[2]))

from libs.relcore.relcore import (
    Relation, make_relation, parse_elements, parse_pairs, format_pairs,
    sorted_universe, relation_matrix,
)


# ---------------------------------------------------------------------------
# Результаты проверок
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TransitivityWitness:
    first: tuple[str, str]       # (a, b) ∈ R
    second: tuple[str, str]      # (b, d) ∈ R
    missing: tuple[str, str]     # (a, d) ∉ R


@dataclass(frozen=True)
class PropertyResult:
    """holds=True без свидетеля, либо holds=False со свидетелем нарушения."""
    holds: bool
    witness: Any = None

    def __bool__(self) -> bool:
        return self.holds


_HOLDS = PropertyResult(True)


@dataclass(frozen=True)
class RelationProperties:
    reflexive: PropertyResult
    symmetric: PropertyResult
    antisymmetric: PropertyResult
    transitive: PropertyResult


@dataclass(frozen=True)
class Classification:
    is_partial_order: bool
    is_equivalence: bool

    @property
    def label(self) -> str:
        if self.is_partial_order and self.is_equivalence:
            return 'both'
        if self.is_partial_order:
            return 'partial_order'
        if self.is_equivalence:
            return 'equivalence'
        return 'neither'


# ---------------------------------------------------------------------------
# Четыре свойства
# ---------------------------------------------------------------------------

def check_reflexive(rel: Relation) -> PropertyResult:
    """Рефлексивность: каждый x ∈ U связан сам с собой."""
    for x in rel.universe:
        if not rel.has(x, x):
            return PropertyResult(False, x)
    return _HOLDS


def check_symmetric(rel: Relation) -> PropertyResult:
    """Симметричность. Пары (a, a) нарушить её не могут."""
    for a, b in rel.pairs:
        if not rel.has(b, a):
            return PropertyResult(False, (a, b))
    return _HOLDS


def check_antisymmetric(rel: Relation) -> PropertyResult:
    """Антисимметричность: (a, b) и (b, a) одновременно только при a = b."""
    for a, b in rel.pairs:
        if a != b and rel.has(b, a):
            return PropertyResult(False, (a, b))
    return _HOLDS


def check_transitive(rel: Relation) -> PropertyResult:
    """
    Транзитивность: для каждой (a, b) ∈ R перебрать (b, d) ∈ R
    и найти первую отсутствующую (a, d).

    Внутренний перебор идёт по индексу первой координаты, поэтому
    стоимость O(Σ deg) вместо O(|R|²).
    """
    index = rel.successor_index()
    for a, b in rel.pairs:
        for d in index.get(b, ()):
            if not rel.has(a, d):
                return PropertyResult(
                    False, TransitivityWitness((a, b), (b, d), (a, d)))
    return _HOLDS


def analyze(rel: Relation) -> RelationProperties:
    """Все четыре свойства одним вызовом."""
    return RelationProperties(
        reflexive=check_reflexive(rel),
        symmetric=check_symmetric(rel),
        antisymmetric=check_antisymmetric(rel),
        transitive=check_transitive(rel),
    )


def analyze_pairs(universe, pairs) -> RelationProperties:
    return analyze(make_relation(universe, pairs))


# ---------------------------------------------------------------------------
# Классификация
# ---------------------------------------------------------------------------

def classify(props: RelationProperties) -> Classification:
    r = props.reflexive.holds
    t = props.transitive.holds
    return Classification(
        is_partial_order=r and props.antisymmetric.holds and t,
        is_equivalence=r and props.symmetric.holds and t,
    )


def is_preorder(props: RelationProperties) -> bool:
    """Предпорядок = рефлексивно ∧ транзитивно (условие для редукции Хассе)."""
    return props.reflexive.holds and props.transitive.holds


def equivalence_classes(rel: Relation) -> list[list[str]]:
    """
    Классы эквивалентности [x] = {y : (x, y) ∈ R} в порядке U.

    Если R не является эквивалентностью, возвращает [].
    """
    if not classify(analyze(rel)).is_equivalence:
        return []
    seen: set[str] = set()
    classes: list[list[str]] = []
    for x in rel.universe:
        if x in seen:
            continue
        cls = [y for y in rel.universe if rel.has(x, y)]
        seen.update(cls)
        classes.append(cls)
    return classes


# ---------------------------------------------------------------------------
# JSON-экспорт
# ---------------------------------------------------------------------------

def _witness_json(w: Any) -> Any:
    if isinstance(w, TransitivityWitness):
        return {'first': list(w.first), 'second': list(w.second),
                'missing': list(w.missing)}
    if isinstance(w, tuple):
        return list(w)
    return w


def json_properties(rel: Relation) -> dict:
    props = analyze(rel)
    cls = classify(props)
    out: dict[str, Any] = {
        'universe': list(rel.universe),
        'pairs': [list(p) for p in rel.pairs],
    }
    for name in ('reflexive', 'symmetric', 'antisymmetric', 'transitive'):
        res: PropertyResult = getattr(props, name)
        out[name] = {'holds': res.holds, 'witness': _witness_json(res.witness)}
    out['is_partial_order'] = cls.is_partial_order
    out['is_equivalence'] = cls.is_equivalence
    out['label'] = cls.label
    out['equivalence_classes'] = equivalence_classes(rel)
    return out


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

_NAMES_RU = {
    'reflexive': 'Рефлексивность',
    'symmetric': 'Симметричность',
    'antisymmetric': 'Антисимметричность',
    'transitive': 'Транзитивность',
}

_LABELS_RU = {
    'both': 'частичный порядок и эквивалентность',
    'partial_order': 'частичный порядок',
    'equivalence': 'отношение эквивалентности',
    'neither': 'ни порядок, ни эквивалентность',
}


def _describe_witness(name: str, w: Any) -> str:
    if name == 'reflexive':
        return f'нет пары ({w},{w})'
    if name == 'symmetric':
        return f'есть ({w[0]},{w[1]}), нет ({w[1]},{w[0]})'
    if name == 'antisymmetric':
        return f'есть ({w[0]},{w[1]}) и ({w[1]},{w[0]})'
    return (f'есть {format_pairs([w.first])} и {format_pairs([w.second])}, '
            f'нет {format_pairs([w.missing])}')


def render_report(rel: Relation) -> str:
    props = analyze(rel)
    cls = classify(props)
    lines = [f'  U = {{{", ".join(rel.universe)}}}   |R| = {len(rel)}', '']
    for name, title in _NAMES_RU.items():
        res: PropertyResult = getattr(props, name)
        if res.holds:
            lines.append(f'  ✓ {title}')
        else:
            lines.append(f'  ✗ {title}: {_describe_witness(name, res.witness)}')
    lines.append('')
    lines.append(f'  Итог: {_LABELS_RU[cls.label]}')
    classes = equivalence_classes(rel)
    if classes:
        lines.append('  Классы: ' + '  '.join('{' + ', '.join(c) + '}' for c in classes))
    return '\n'.join(lines)


def render_matrix(rel: Relation) -> str:
    order = sorted_universe(rel.universe)
    m = relation_matrix(order, rel.pairs)
    w = max((len(e) for e in order), default=1)
    lines = ['  ' + ' ' * w + ' ' + ' '.join(e.rjust(w) for e in order)]
    for e, row in zip(order, m):
        lines.append('  ' + e.rjust(w) + ' ' + ' '.join(str(v).rjust(w) for v in row))
    return '\n'.join(lines)


def _make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='relprops',
        description='Свойства бинарного отношения (со свидетелями нарушений)',
    )
    p.add_argument('--json', action='store_true',
                   help='Машиночитаемый JSON-вывод (для пайплайнов)')
    sub = p.add_subparsers(dest='cmd', required=True)

    for name, help_text in (('check', 'четыре свойства + классификация'),
                            ('matrix', 'матрица отношения')):
        s = sub.add_parser(name, help=help_text)
        s.add_argument('--universe', '-u', required=True,
                       help='элементы через запятую/пробел: "1,2,3"')
        s.add_argument('--pairs', '-r', default='',
                       help='пары: "(1,2) (2,3)"')
    return p


def main(argv: list[str] | None = None) -> None:
    p = _make_parser()
    args = p.parse_args(argv)
    rel = make_relation(parse_elements(args.universe), parse_pairs(args.pairs))

    if args.cmd == 'check':
        if args.json:
            print(json.dumps(json_properties(rel), ensure_ascii=False, indent=2))
        else:
            print(render_report(rel))
    elif args.cmd == 'matrix':
        if args.json:
            order = sorted_universe(rel.universe)
            print(json.dumps({'order': order,
                              'matrix': relation_matrix(order, rel.pairs)},
                             ensure_ascii=False, indent=2))
        else:
            print(render_matrix(rel))


if __name__ == '__main__':
    main()
