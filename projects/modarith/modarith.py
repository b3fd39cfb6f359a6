"""modarith.py — Модульная арифметика в кольце ℤₙ.

Элементы ℤₙ ≡ вычеты 0..n−1. Все результаты точные (целые Python).

Операции:
  • normalize(a, n)           — a mod n в [0, |n|) (знак модуля не важен)
  • extended_gcd(a, b)        — (g, x, y):  g = gcd(a, b) = a·x + b·y,  g ≥ 0
  • mod_inverse(a, n)         — a⁻¹ mod n, либо None если gcd(a, n) ≠ 1
  • mod_pow(b, e, n)          — бинарное возведение b^e mod n
  • solve_linear_congruence   — a·x ≡ b (mod n):  x = x₀ + k·n₁
  • build_table(n, op)        — таблица Кэли ℤₙ для '+' или '·'

Дополнительные структуры:
  • units(n)          — группа обратимых элементов ℤₙ*
  • euler_phi(n)      — |ℤₙ*| = φ(n)
  • element_order(a)  — мультипликативный порядок a в ℤₙ*

«Нет решения» и «нет обратного» — обычные значения (None / has_solution=False),
а не исключения.
"""
from __future__ import annotations
import json
import argparse
from dataclasses import dataclass

TABLE_OPS = ('add', 'mul')


# ── нормализация и НОД ────────────────────────────────────────────────────────

def normalize(a: int, n: int) -> int:
    """a mod n в диапазоне [0, |n|). При n = 0 возвращает a без изменений."""
    if n == 0:
        return a
    return a % abs(n)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Расширенный алгоритм Евклида (итеративный).

    Возвращает (g, x, y) с g = gcd(a, b) ≥ 0 и g = a·x + b·y.
    """
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b != 0:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    if a < 0:
        return -a, -x0, -y0
    return a, x0, y0


def mod_inverse(a: int, n: int) -> int | None:
    """Обратный a⁻¹ mod n в [0, |n|), либо None если gcd(a, n) ≠ 1."""
    g, x, _ = extended_gcd(a, n)
    if g != 1:
        return None
    return normalize(x, n)


# ── возведение в степень ──────────────────────────────────────────────────────

def mod_pow(base: int, exp: int, n: int) -> int | None:
    """
    base^exp mod n (бинарное возведение, каждое произведение по модулю n).

    exp = 0 → 1 mod n (1 mod 1 = 0).
    exp < 0 → (base⁻¹)^|exp|, либо None если обратного нет.
    n = 0   → обычная целая степень.
    """
    if exp < 0:
        inv = mod_inverse(base, n)
        if inv is None:
            return None
        return mod_pow(inv, -exp, n)
    result = normalize(1, n)
    b = normalize(base, n)
    e = exp
    while e > 0:
        if e & 1:
            result = normalize(result * b, n)
        b = normalize(b * b, n)
        e >>= 1
    return result


# ── линейные сравнения ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CongruenceSolution:
    """Решение a·x ≡ b (mod n):  x ≡ x0 (mod modulus)."""
    has_solution: bool
    x0: int | None = None
    modulus: int | None = None
    original_modulus: int | None = None

    def solutions(self, count: int | None = None) -> list[int]:
        """
        Представители решений в [0, |n|).

        Их ровно |n| / modulus = gcd(a, n). При n = 0 — единственное x0.
        """
        if not self.has_solution:
            return []
        n = abs(self.original_modulus or 0)
        if n == 0 or self.modulus == 0:
            out = [self.x0]
        else:
            out = list(range(self.x0, n, self.modulus))
        return out if count is None else out[:count]


_NO_SOLUTION = CongruenceSolution(False)


def solve_linear_congruence(a: int, b: int, n: int) -> CongruenceSolution:
    """
    Решить a·x ≡ b (mod n).

    g = gcd(|a|, |n|). Решение есть ⟺ g | b. Тогда
      a₁ = a/g,  b₁ = b/g,  n₁ = n/g,
      x₀ = a₁⁻¹ · b₁ mod n₁,
    и все решения: {x₀ + k·n₁ : k ∈ ℤ}.
    """
    g, _, _ = extended_gcd(abs(a), abs(n))
    if g == 0:
        # 0·x ≡ b (mod 0): верно для всех x только при b = 0
        if b == 0:
            return CongruenceSolution(True, 0, 1, n)
        return _NO_SOLUTION
    if b % g != 0:
        return _NO_SOLUTION
    a1, b1, n1 = a // g, b // g, abs(n) // g
    inv = mod_inverse(normalize(a1, n1), n1)
    if inv is None:
        return _NO_SOLUTION
    return CongruenceSolution(True, normalize(inv * b1, n1), n1, n)


# ── таблицы Кэли ──────────────────────────────────────────────────────────────

def build_table(n: int, op: str) -> list[list[int]]:
    """
    Таблица Кэли ℤₙ: T[i][j] = (i op j) mod n,  op ∈ {'add', 'mul'}.
    n ≤ 0 → пустая таблица.
    """
    if op not in TABLE_OPS:
        raise ValueError(f"op must be one of {TABLE_OPS}, got {op!r}")
    if n <= 0:
        return []
    if op == 'add':
        return [[normalize(i + j, n) for j in range(n)] for i in range(n)]
    return [[normalize(i * j, n) for j in range(n)] for i in range(n)]


# ── группа обратимых элементов ────────────────────────────────────────────────

def units(n: int) -> list[int]:
    """ℤₙ* = {a ∈ [0, n) : gcd(a, n) = 1}."""
    if n <= 0:
        return []
    return [a for a in range(n) if extended_gcd(a, n)[0] == 1]


def euler_phi(n: int) -> int:
    """Функция Эйлера φ(n) = |ℤₙ*|."""
    return len(units(n))


def element_order(a: int, n: int) -> int | None:
    """Наименьшее k ≥ 1 с a^k ≡ 1 (mod n), либо None если a не обратим."""
    if n <= 1 or mod_inverse(a, n) is None:
        return None
    a = normalize(a, n)
    x, k = a, 1
    while x != 1:
        x = normalize(x * a, n)
        k += 1
    return k


# ── CLI ───────────────────────────────────────────────────────────────────────

def _format_table(table: list[list[int]], op: str) -> str:
    n = len(table)
    w = max(len(str(n - 1)), 1)
    sym = '+' if op == 'add' else '·'
    lines = ['  ' + sym.rjust(w) + ' │ ' + ' '.join(str(j).rjust(w) for j in range(n))]
    lines.append('  ' + '─' * w + '─┼─' + '─' * ((w + 1) * n - 1))
    for i, row in enumerate(table):
        lines.append('  ' + str(i).rjust(w) + ' │ ' + ' '.join(str(v).rjust(w) for v in row))
    return '\n'.join(lines)


def _make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='modarith',
        description='Модульная арифметика ℤₙ: НОД, обратные, степени, сравнения',
    )
    p.add_argument('--json', action='store_true',
                   help='Машиночитаемый JSON-вывод (для пайплайнов)')
    sub = p.add_subparsers(dest='cmd', required=True)

    s = sub.add_parser('norm', help='a mod n')
    s.add_argument('a', type=int)
    s.add_argument('n', type=int)

    s = sub.add_parser('gcd', help='расширенный Евклид: g = a·x + b·y')
    s.add_argument('a', type=int)
    s.add_argument('b', type=int)

    s = sub.add_parser('inv', help='обратный a⁻¹ mod n')
    s.add_argument('a', type=int)
    s.add_argument('n', type=int)

    s = sub.add_parser('pow', help='base^exp mod n')
    s.add_argument('base', type=int)
    s.add_argument('exp', type=int)
    s.add_argument('n', type=int)

    s = sub.add_parser('solve', help='a·x ≡ b (mod n)')
    s.add_argument('a', type=int)
    s.add_argument('b', type=int)
    s.add_argument('n', type=int)

    s = sub.add_parser('table', help='таблица Кэли ℤₙ')
    s.add_argument('n', type=int)
    s.add_argument('op', choices=TABLE_OPS)

    s = sub.add_parser('units', help='группа обратимых ℤₙ* и порядки элементов')
    s.add_argument('n', type=int)
    return p


def main(argv: list[str] | None = None) -> None:
    p = _make_parser()
    args = p.parse_args(argv)

    if args.cmd == 'norm':
        r = normalize(args.a, args.n)
        result = {'a': args.a, 'n': args.n, 'result': r}
        text = f'  {args.a} mod {args.n} = {r}'

    elif args.cmd == 'gcd':
        g, x, y = extended_gcd(args.a, args.b)
        result = {'a': args.a, 'b': args.b, 'g': g, 'x': x, 'y': y}
        text = f'  gcd({args.a}, {args.b}) = {g} = {args.a}·({x}) + {args.b}·({y})'

    elif args.cmd == 'inv':
        inv = mod_inverse(args.a, args.n)
        result = {'a': args.a, 'n': args.n, 'inverse': inv}
        if inv is None:
            text = f'  {args.a}⁻¹ mod {args.n}: не существует (gcd ≠ 1)'
        else:
            text = f'  {args.a}⁻¹ ≡ {inv} (mod {args.n})'

    elif args.cmd == 'pow':
        r = mod_pow(args.base, args.exp, args.n)
        result = {'base': args.base, 'exp': args.exp, 'n': args.n, 'result': r}
        if r is None:
            text = f'  {args.base}^{args.exp} mod {args.n}: не определено (нет обратного)'
        else:
            text = f'  {args.base}^{args.exp} ≡ {r} (mod {args.n})'

    elif args.cmd == 'solve':
        sol = solve_linear_congruence(args.a, args.b, args.n)
        result = {'a': args.a, 'b': args.b, 'n': args.n,
                  'has_solution': sol.has_solution,
                  'x0': sol.x0, 'modulus': sol.modulus,
                  'solutions': sol.solutions()}
        if not sol.has_solution:
            text = f'  {args.a}·x ≡ {args.b} (mod {args.n}): решений нет'
        else:
            text = (f'  {args.a}·x ≡ {args.b} (mod {args.n})  ⟹  '
                    f'x ≡ {sol.x0} (mod {sol.modulus})\n'
                    f'  Решения в [0, {abs(args.n)}): {sol.solutions()}')

    elif args.cmd == 'table':
        table = build_table(args.n, args.op)
        result = {'n': args.n, 'op': args.op, 'table': table}
        text = _format_table(table, args.op) if table else '  (пустая таблица)'

    else:  # units
        us = units(args.n)
        orders = {a: element_order(a, args.n) for a in us}
        result = {'n': args.n, 'units': us, 'phi': len(us),
                  'orders': {str(a): k for a, k in orders.items()}}
        text = (f'  ℤ{args.n}* = {us}   φ({args.n}) = {len(us)}\n' +
                '\n'.join(f'    ord({a}) = {k}' for a, k in orders.items()))

    if args.json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        print(text)


if __name__ == '__main__':
    main()
