"""hasselayout — уровни и координаты узлов диаграммы Хассе."""
from .hasselayout import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_MARGIN,
    NodePosition,
    neighbours, levels, level_groups, layout,
    render_levels, json_layout,
)
