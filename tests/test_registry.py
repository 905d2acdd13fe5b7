import numpy as np

from group_census.canon import canonical_flat
from group_census.registry import IsomorphismRegistry


def test_add_and_membership(z4, klein):
    reg = IsomorphismRegistry()
    a, b = canonical_flat(z4), canonical_flat(klein)
    assert a not in reg
    assert reg.add(a)
    assert a in reg
    assert b not in reg
    assert not reg.add(a.copy())
    assert reg.add(b)
    assert len(reg) == 2


def test_registry_owns_its_copies(z4):
    reg = IsomorphismRegistry()
    buf = canonical_flat(z4)
    reg.add(buf)
    original = buf.copy()
    buf[:] = 0
    assert original in reg
    assert buf not in reg


def test_iteration_in_insertion_order():
    reg = IsomorphismRegistry()
    forms = [np.array([0, 1, 1, 0]), np.array([0, 0, 0, 0])]
    for f in forms:
        reg.add(f)
    assert [f.tolist() for f in reg] == [f.tolist() for f in forms]


def test_different_lengths_never_match():
    reg = IsomorphismRegistry()
    reg.add(np.array([0]))
    assert np.array([0, 1, 1, 0]) not in reg


def test_save_writes_npz(tmp_path, z4, klein):
    reg = IsomorphismRegistry()
    reg.add(canonical_flat(z4))
    reg.add(canonical_flat(klein))
    path = reg.save(str(tmp_path / "out" / "order4"), tables=[z4, klein])
    assert path.endswith("order4.npz")
    data = np.load(path)
    assert data["canonical"].shape == (2, 16)
    assert data["tables"].shape == (2, 4, 4)
    assert np.array_equal(data["tables"][1], klein)
