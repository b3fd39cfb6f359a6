"""dmctl — Оркестратор: реестр модулей, вызов CLI модулей.

Использование:
  python -m libs.dmctl.dmcli list modules
  python -m libs.dmctl.dmcli info relprops
  python -m libs.dmctl.dmcli call --json modarith solve 4 6 8
"""
from .registry import (
    MODULES, GROUPS,
    ModuleInfo, GroupInfo,
    get_module, get_group,
    modules_in_group, group_of_module,
    all_module_names, all_group_ids,
    json_ready_modules, command_line,
)
