"""Tests for generation-order resolution."""

import pytest

from dartweave.errors import CyclicDependencyError, MissingDependencyError
from dartweave.graph.ordering import get_generation_order
from dartweave.graph.store import GraphStore
from tests.conftest import make_artifact


def _store(*artifacts):
    store = GraphStore()
    for artifact in artifacts:
        store.add_artifact(artifact)
    return store


def _assert_dependencies_first(store, order):
    position = {path: index for index, path in enumerate(order)}
    for node in store.nodes():
        for dep in node.depends_on:
            if dep in store:
                assert position[dep] < position[node.path], f"{dep} must precede {node.path}"


def test_dependencies_precede_dependents(flutter_store):
    order = get_generation_order(flutter_store, strict=False)

    _assert_dependencies_first(flutter_store, order)


def test_every_artifact_appears_exactly_once(flutter_store):
    order = get_generation_order(flutter_store, strict=False)

    assert len(order) == len(flutter_store)
    assert set(order) == set(flutter_store.paths())


def test_order_is_independent_of_insertion_order():
    forward = _store(
        make_artifact("lib/c.dart", "lib/b.dart"),
        make_artifact("lib/b.dart", "lib/a.dart"),
        make_artifact("lib/a.dart"),
    )
    backward = _store(
        make_artifact("lib/a.dart"),
        make_artifact("lib/b.dart", "lib/a.dart"),
        make_artifact("lib/c.dart", "lib/b.dart"),
    )

    assert get_generation_order(forward, strict=False) == ["lib/a.dart", "lib/b.dart", "lib/c.dart"]
    assert get_generation_order(backward, strict=False) == ["lib/a.dart", "lib/b.dart", "lib/c.dart"]


def test_diamond_emits_shared_dependency_once():
    store = _store(
        make_artifact("top.dart", "left.dart", "right.dart"),
        make_artifact("left.dart", "base.dart"),
        make_artifact("right.dart", "base.dart"),
        make_artifact("base.dart"),
    )

    order = get_generation_order(store, strict=False)

    assert order.count("base.dart") == 1
    assert order[0] == "base.dart"
    assert order[-1] == "top.dart"


def test_cycle_is_reported_with_its_paths():
    store = _store(
        make_artifact("a", "b"),
        make_artifact("b", "c"),
        make_artifact("c", "a"),
    )

    with pytest.raises(CyclicDependencyError) as excinfo:
        get_generation_order(store, strict=False)

    cycle = excinfo.value.cycle
    assert cycle[0] == cycle[-1]
    assert len(cycle) == 4
    rotations = [["a", "b", "c"], ["b", "c", "a"], ["c", "a", "b"]]
    assert cycle[:-1] in rotations


def test_self_dependency_is_a_cycle():
    store = _store(make_artifact("lib/a.dart", "lib/a.dart"))

    with pytest.raises(CyclicDependencyError) as excinfo:
        get_generation_order(store, strict=False)

    assert excinfo.value.cycle == ["lib/a.dart", "lib/a.dart"]


def test_store_stays_usable_after_cycle_error():
    store = _store(
        make_artifact("a", "b", "ghost"),
        make_artifact("b", "a"),
    )

    with pytest.raises(CyclicDependencyError):
        get_generation_order(store, strict=False)

    assert len(store) == 2
    assert [(m.artifact_path, m.missing_dependency_path) for m in store.unresolved_dependencies()] == [
        ("a", "ghost")
    ]


def test_missing_dependencies_are_skipped_in_lenient_mode():
    store = _store(
        make_artifact("lib/a.dart", "lib/missing.dart", "lib/b.dart"),
        make_artifact("lib/b.dart"),
    )

    assert get_generation_order(store, strict=False) == ["lib/b.dart", "lib/a.dart"]


def test_strict_mode_rejects_missing_dependencies():
    store = _store(make_artifact("X", "Y"))

    with pytest.raises(MissingDependencyError) as excinfo:
        get_generation_order(store, strict=True)

    assert [(m.artifact_path, m.missing_dependency_path) for m in excinfo.value.missing] == [("X", "Y")]


def test_long_chain_does_not_hit_recursion_limit():
    depth = 3000
    store = _store(
        *(make_artifact(f"lib/n{i}.dart", f"lib/n{i + 1}.dart") for i in range(depth)),
        make_artifact(f"lib/n{depth}.dart"),
    )

    order = get_generation_order(store, strict=False)

    assert order[0] == f"lib/n{depth}.dart"
    assert order[-1] == "lib/n0.dart"
    assert len(order) == depth + 1


def test_empty_store_gives_empty_order():
    assert get_generation_order(GraphStore(), strict=False) == []
