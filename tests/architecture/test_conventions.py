"""
Convention Enforcement Tests.

Permanent tests that catch anti-patterns which import-based layer rules
cannot detect: frozen dataclass conventions, silent exception swallowing,
interface contracts and stateless guards.
"""

import ast
import inspect
from pathlib import Path

SRC_ROOT = Path(__file__).parent.parent.parent / "src" / "shapeguard"


def _dataclass_info(filepath: Path) -> list[tuple[str, bool]]:
    """Parse a file and return (class_name, is_frozen) for each @dataclass."""
    tree = ast.parse(filepath.read_text())
    results = []

    for node in ast.walk(tree):
        if not isinstance(node, ast.ClassDef):
            continue
        for decorator in node.decorator_list:
            if isinstance(decorator, ast.Name) and decorator.id == "dataclass":
                results.append((node.name, False))
            elif (
                isinstance(decorator, ast.Call)
                and isinstance(decorator.func, ast.Name)
                and decorator.func.id == "dataclass"
            ):
                frozen = any(
                    kw.arg == "frozen"
                    and isinstance(kw.value, ast.Constant)
                    and kw.value.value is True
                    for kw in decorator.keywords
                )
                results.append((node.name, frozen))
    return results


class TestFrozenDataclassConvention:
    """All dataclasses must be frozen so options and results can be shared."""

    def test_all_dataclasses_are_frozen(self):
        violations = []
        for py_file in SRC_ROOT.rglob("*.py"):
            for class_name, is_frozen in _dataclass_info(py_file):
                if not is_frozen:
                    violations.append(f"{py_file.name}:{class_name}")

        assert not violations, f"Dataclasses must be frozen. Violations: {violations}"


class TestNoSilentExceptionSwallowing:
    """No bare 'except: pass' or 'except Exception: pass' in src/."""

    def test_no_bare_except_pass(self):
        violations = []

        for py_file in SRC_ROOT.rglob("*.py"):
            source = py_file.read_text()
            tree = ast.parse(source)

            for node in ast.walk(tree):
                if not isinstance(node, ast.ExceptHandler):
                    continue
                if len(node.body) == 1 and isinstance(node.body[0], ast.Pass):
                    rel_path = py_file.relative_to(SRC_ROOT.parent.parent)
                    violations.append(f"{rel_path}:{node.lineno}")

        assert not violations, "Silent exception swallowing found:\n" + "\n".join(
            f"  - {v}" for v in violations
        )


class TestInterfaceConventions:
    """Interface naming and contract conventions."""

    def test_all_ports_end_with_interface(self):
        """All ABCs in domain/interfaces.py must end with 'Interface'."""
        from shapeguard.domain import interfaces

        abstract_classes = [
            name
            for name, obj in inspect.getmembers(interfaces, inspect.isclass)
            if inspect.isabstract(obj) and not name.startswith("_")
        ]

        violations = [
            name for name in abstract_classes if not name.endswith("Interface")
        ]

        assert not violations, (
            f"Abstract classes should end with 'Interface': {violations}"
        )

    def test_concrete_guards_satisfy_interface(self):
        """Every exported guard instance is a concrete GuardInterface."""
        import shapeguard
        from shapeguard.domain.interfaces import GuardInterface

        exported = [
            getattr(shapeguard, name)
            for name in shapeguard.__all__
            if name.startswith("is_")
        ]

        assert exported
        for guard in exported:
            assert isinstance(guard, GuardInterface)
            assert not inspect.isabstract(type(guard))
            assert guard.label, f"{guard!r} has no label"


class TestStatelessGuards:
    """Guards keep no per-call state."""

    def test_guard_state_unchanged_by_calls(self):
        from shapeguard import is_map, is_number, is_string

        before = dict(vars(is_map))
        is_map({"a": 1}, key_guard=is_string, value_guard=is_number)
        is_map({"a": "b"}, key_guard=is_string, value_guard=is_number)

        assert vars(is_map) == before
