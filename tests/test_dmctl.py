"""Тесты libs/dmctl — целостность реестра и CLI-оркестратор."""
import sys
sys.path.insert(0, str(__import__('pathlib').Path(__file__).resolve().parents[1]))

import importlib
import io
import subprocess
import unittest
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

from libs.dmctl.registry import (
    MODULES, GROUPS,
    get_module, get_group,
    modules_in_group, group_of_module,
    all_module_names, all_group_ids,
    json_ready_modules, command_line,
    ModuleInfo, GroupInfo,
)
from libs.dmctl import dmcli


class TestModulesIntegrity(unittest.TestCase):
    """Целостность словаря MODULES."""

    def test_module_names(self):
        self.assertEqual(all_module_names(),
                         ['hasselayout', 'modarith', 'relclosure', 'relprops'])

    def test_name_matches_key(self):
        for key, m in MODULES.items():
            self.assertIsInstance(m, ModuleInfo)
            self.assertEqual(key, m.name)

    def test_group_exists(self):
        for name, m in MODULES.items():
            self.assertIn(m.group, GROUPS, f"{name}: group {m.group!r} not in GROUPS")

    def test_path_importable(self):
        """Путь каждого модуля импортируется и даёт main()."""
        for name, m in MODULES.items():
            mod = importlib.import_module(m.path)
            self.assertTrue(callable(getattr(mod, 'main', None)), name)

    def test_commands_match_parser(self):
        """Команды реестра совпадают с подкомандами argparse модуля."""
        for name, m in MODULES.items():
            mod = importlib.import_module(m.path)
            parser = mod._make_parser()
            sub = next(a for a in parser._actions
                       if a.__class__.__name__ == '_SubParsersAction')
            self.assertEqual(sorted(sub.choices), sorted(m.commands), name)

    def test_all_json_ready(self):
        self.assertEqual(sorted(json_ready_modules()), all_module_names())


class TestGroupsIntegrity(unittest.TestCase):

    def test_group_ids(self):
        self.assertEqual(all_group_ids(), ['G1', 'G2'])

    def test_every_module_in_exactly_one_group(self):
        seen = [m for g in GROUPS.values() for m in g.modules]
        self.assertEqual(sorted(seen), all_module_names())

    def test_group_back_reference(self):
        for gid, g in GROUPS.items():
            self.assertIsInstance(g, GroupInfo)
            for mi in modules_in_group(gid):
                self.assertEqual(mi.group, gid)
                self.assertIs(group_of_module(mi.name), g)


class TestLookups(unittest.TestCase):

    def test_get_module(self):
        self.assertEqual(get_module('modarith').group, 'G2')
        self.assertIsNone(get_module('nope'))

    def test_get_group(self):
        self.assertEqual(get_group('G1').name, 'Отношения и порядки')
        self.assertIsNone(get_group('G9'))
        self.assertEqual(modules_in_group('G9'), [])
        self.assertIsNone(group_of_module('nope'))

    def test_command_line(self):
        line = command_line('modarith', 'inv', ['7', '12'], json_mode=True)
        self.assertEqual(line, [sys.executable, '-m', 'projects.modarith.modarith',
                                '--json', 'inv', '7', '12'])

    def test_command_line_plain(self):
        line = command_line('relprops', 'check')
        self.assertEqual(line[-1], 'check')
        self.assertNotIn('--json', line)

    def test_command_line_unknown(self):
        with self.assertRaises(ValueError):
            command_line('nope', 'x')


# ── CLI ──────────────────────────────────────────────────────────────────────

class TestDmcli(unittest.TestCase):

    def _run(self, argv):
        buf = io.StringIO()
        with redirect_stdout(buf), redirect_stderr(io.StringIO()):
            code = dmcli.main(argv)
        return code, buf.getvalue()

    def test_list_modules(self):
        code, out = self._run(['list', 'modules'])
        self.assertEqual(code, 0)
        for name in MODULES:
            self.assertIn(name, out)

    def test_list_groups(self):
        code, out = self._run(['list', 'groups'])
        self.assertEqual(code, 0)
        self.assertIn('G2', out)

    def test_info_module(self):
        code, out = self._run(['info', 'relclosure'])
        self.assertEqual(code, 0)
        self.assertIn('projects.relclosure.relclosure', out)

    def test_info_group(self):
        code, out = self._run(['info', 'G2'])
        self.assertEqual(code, 0)
        self.assertIn('modarith', out)

    def test_info_unknown(self):
        code, out = self._run(['info', 'nope'])
        self.assertEqual(code, 1)
        self.assertIn('не найден', out)

    def test_no_command_prints_help(self):
        code, out = self._run([])
        self.assertEqual(code, 0)
        self.assertIn('dmctl', out)

    def test_call_unknown_module(self):
        code, out = self._run(['call', 'nope', 'x'])
        self.assertEqual(code, 1)
        self.assertIn('Неизвестный модуль', out)

    def test_call_unknown_command(self):
        code, out = self._run(['call', 'modarith', 'nope'])
        self.assertEqual(code, 1)
        self.assertIn('нет команды', out)

    def test_call_runs_subprocess(self):
        done = subprocess.CompletedProcess([], 0, stdout='  7⁻¹ ≡ 7 (mod 12)\n', stderr='')
        with mock.patch.object(dmcli.subprocess, 'run', return_value=done) as run:
            code, out = self._run(['call', '--json', 'modarith', 'inv', '7', '12'])
        self.assertEqual(code, 0)
        self.assertIn('7⁻¹ ≡ 7', out)
        line = run.call_args.args[0]
        self.assertEqual(line[1:], ['-m', 'projects.modarith.modarith',
                                    '--json', 'inv', '7', '12'])

    def test_call_propagates_exit_code(self):
        done = subprocess.CompletedProcess([], 2, stdout='', stderr='usage: ...')
        with mock.patch.object(dmcli.subprocess, 'run', return_value=done):
            code, _ = self._run(['call', 'relprops', 'check'])
        self.assertEqual(code, 2)

    def test_env_has_repo_on_path(self):
        env = dmcli._env()
        self.assertIn(str(dmcli._REPO), env['PYTHONPATH'])


if __name__ == '__main__':
    unittest.main(verbosity=2)
