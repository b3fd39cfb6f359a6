"""relcore — ядро: конечное отношение над универсумом, матрицы, разбор ввода."""
from .relcore import (
    Elem, Pair, Relation,
    make_relation, identity_relation,
    sorted_universe,
    relation_matrix, adjacency_matrix,
    parse_elements, parse_pairs, format_pairs,
)
