"""relclosure — замыкание покрытия (Хассе → порядок) и редукция (порядок → Хассе)."""
from .relclosure import (
    closure, reduce, is_cover,
    Extrema, extrema, hasse_extrema,
    json_closure, json_reduce,
)
