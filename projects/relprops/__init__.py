"""relprops — свойства отношения (рефлексивность, симметричность, ...) и классификация."""
from .relprops import (
    PropertyResult, TransitivityWitness, RelationProperties, Classification,
    check_reflexive, check_symmetric, check_antisymmetric, check_transitive,
    analyze, analyze_pairs,
    classify, is_preorder, equivalence_classes,
    json_properties,
)
