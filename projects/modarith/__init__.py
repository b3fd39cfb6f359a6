"""modarith — модульная арифметика ℤₙ: Евклид, обратные, степени, сравнения, таблицы Кэли."""
from .modarith import (
    TABLE_OPS,
    normalize, extended_gcd, mod_inverse, mod_pow,
    CongruenceSolution, solve_linear_congruence,
    build_table,
    units, euler_phi, element_order,
)
