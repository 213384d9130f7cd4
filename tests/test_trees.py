import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.trees import AncestorTable

SAMPLE_LINKS = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6)]


@pytest.fixture
def sample():
    return AncestorTable.from_parent_links(6, SAMPLE_LINKS)


def test_sample_kth_ancestor(sample):
    assert sample.kth_ancestor(5, 2) == 1


def test_sample_lca_and_distance(sample):
    assert sample.lca(4, 5) == 2
    assert sample.lca(4, 6) == 1
    assert sample.distance(4, 6) == 4


def test_parent_links_match_edge_construction(sample):
    table = AncestorTable(6, SAMPLE_LINKS, 1)
    for node in range(1, 7):
        assert table.depth(node) == sample.depth(node)
        for other in range(1, 7):
            assert table.lca(node, other) == sample.lca(node, other)


def test_kth_ancestor_beyond_root_is_none(sample):
    assert sample.kth_ancestor(5, sample.depth(5) + 1) is None
    assert sample.kth_ancestor(5, 0) == 5


def test_rejects_negative_k(sample):
    with pytest.raises(ValueError):
        sample.kth_ancestor(5, -1)


def test_rejects_unknown_node(sample):
    with pytest.raises(ValueError):
        sample.lca(1, 7)


def test_rejects_disconnected_edges():
    with pytest.raises(ValueError):
        AncestorTable(4, [(1, 2), (2, 1), (3, 4)], 1)


def test_rejects_wrong_edge_count():
    with pytest.raises(ValueError):
        AncestorTable(3, [(1, 2)], 1)


def test_rejects_two_roots():
    with pytest.raises(ValueError):
        AncestorTable.from_parent_links(4, [(1, 2), (3, 4), (1, 3), (2, 4)])


def test_single_node_tree():
    table = AncestorTable(1, [], 1)
    assert table.lca(1, 1) == 1
    assert table.distance(1, 1) == 0


@st.composite
def trees(draw):
    size = draw(st.integers(min_value=1, max_value=40))
    links = [(draw(st.integers(1, child - 1)), child) for child in range(2, size + 1)]
    root = draw(st.integers(1, size))
    return size, links, root


@given(trees(), st.data())
def test_lca_is_deepest_common_ancestor(tree, data):
    size, links, root = tree
    table = AncestorTable(size, links, root)
    a = data.draw(st.integers(1, size))
    b = data.draw(st.integers(1, size))
    meet = table.lca(a, b)
    assert table.lca(b, a) == meet
    up_a = table.depth(a) - table.depth(meet)
    up_b = table.depth(b) - table.depth(meet)
    assert table.kth_ancestor(a, up_a) == meet
    assert table.kth_ancestor(b, up_b) == meet
    if up_a > 0 and up_b > 0:
        assert table.kth_ancestor(a, up_a - 1) != table.kth_ancestor(b, up_b - 1)
    assert table.distance(a, b) == up_a + up_b


@given(trees(), st.data())
def test_every_node_climbs_to_root(tree, data):
    size, links, root = tree
    table = AncestorTable(size, links, root)
    node = data.draw(st.integers(1, size))
    assert table.depth(root) == 0
    assert table.kth_ancestor(node, table.depth(node)) == root
    assert table.lca(node, root) == root
    assert table.lca(node, node) == node
    assert table.distance(node, root) == table.depth(node)


@given(trees(), st.data())
def test_kth_ancestor_steps_compose(tree, data):
    size, links, root = tree
    table = AncestorTable(size, links, root)
    node = data.draw(st.integers(1, size))
    total = table.depth(node)
    first = data.draw(st.integers(0, total))
    middle = table.kth_ancestor(node, first)
    assert table.depth(middle) == total - first
    assert table.kth_ancestor(middle, total - first) == table.kth_ancestor(node, total)