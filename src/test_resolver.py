from grid_calc.address import Address
from grid_calc.cells import CellGrid, Error
from grid_calc.errors import ErrorKind
from grid_calc.registry import FormulaRegistry
from grid_calc.resolver import CyclePolicy, DependencyResolver


def build_registry(formulas):
    registry = FormulaRegistry()
    for cell_ref, formula in formulas:
        registry.register(Address.parse(cell_ref), formula)
    return registry


def names(addresses):
    return [str(a) for a in addresses]


def test_registry_records_dependents():
    registry = build_registry([("A1", "A0 2 *"), ("B1", "A0 A1 + A0 *")])
    assert names(registry.dependents_of(Address.parse("A0"))) == ["A1", "B1"]
    assert names(registry.dependents_of(Address.parse("A1"))) == ["B1"]
    assert not registry[Address.parse("A0")].is_formula
    assert names(registry[Address.parse("B1")].references) == ["A0", "A1"]


def test_order_respects_references():
    registry = build_registry([
        ("A3", "A2 A1 +"),
        ("A1", "A0 2 *"),
        ("A2", "A1 1 +"),
        ("B0", "A3 A0 -"),
    ])
    resolution = DependencyResolver(registry).resolve(CellGrid())
    order = names(resolution.order)
    assert sorted(order) == sorted(names(registry))
    for address, entry in registry.items():
        for ref in entry.references:
            assert order.index(str(ref)) < order.index(str(address))
    assert not resolution.tainted


def test_two_cell_cycle():
    grid = CellGrid()
    registry = build_registry([("A0", "A1 1 +"), ("A1", "A0 1 +")])
    resolution = DependencyResolver(registry).resolve(grid)
    assert set(names(resolution.tainted)) == {"A0", "A1"}
    for cell_ref in ("A0", "A1"):
        value = grid.get(Address.parse(cell_ref))
        assert isinstance(value, Error)
        assert value.kind is ErrorKind.CYCLIC_REFERENCE
    # Tainted addresses stay in the order
    assert set(names(resolution.order)) == {"A0", "A1"}


def test_self_reference():
    grid = CellGrid()
    resolution = DependencyResolver(build_registry([("A0", "A0 1 +")])).resolve(grid)
    assert names(resolution.tainted) == ["A0"]
    assert grid.get(Address.parse("A0")) == Error()


def cycle_behind_input():
    # D0 reads C0; C0 feeds A0, which is on a cycle with A1
    return build_registry([("D0", "C0 1 +"), ("A0", "C0 A1 +"), ("A1", "A0 1 +")])


def test_members_policy_marks_only_cycle():
    grid = CellGrid()
    resolution = DependencyResolver(cycle_behind_input(), CyclePolicy.MEMBERS).resolve(grid)
    assert set(names(resolution.tainted)) == {"A0", "A1"}
    assert Address.parse("C0") not in grid
    assert Address.parse("D0") not in grid


def test_path_policy_marks_active_path():
    grid = CellGrid()
    resolution = DependencyResolver(cycle_behind_input(), CyclePolicy.PATH).resolve(grid)
    assert set(names(resolution.tainted)) == {"C0", "A0", "A1"}
    assert grid.get(Address.parse("C0")) == Error()
    assert not resolution.is_tainted(Address.parse("D0"))


def test_deep_chain_without_recursion():
    depth = 5000
    registry = build_registry([(f"A{i}", f"A{i - 1} 1 +") for i in range(1, depth + 1)])
    resolution = DependencyResolver(registry).resolve(CellGrid())
    assert names(resolution.order) == [f"A{i}" for i in range(depth + 1)]


def test_cycle_member_reached_after_cycle_finished():
    # A0 -> A1 -> A0 is found first; A2 (read by A1, reading A0) only meets finished A1
    grid = CellGrid()
    registry = build_registry([("A0", "A1 1 +"), ("A1", "A0 A2 +"), ("A2", "A0 1 +")])
    resolution = DependencyResolver(registry).resolve(grid)
    assert set(names(resolution.tainted)) == {"A0", "A1"}
    assert not resolution.is_tainted(Address.parse("A2"))
    order = names(resolution.order)
    assert order.index("A0") < order.index("A2")
