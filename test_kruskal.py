import contextlib
import io
import os
import tempfile
import types
import unittest
from unittest import mock

import networkx as nx

import kruskal
from edges import Edge, EdgeList
from graphgen import generate
from kruskal import BuildOrderError, ForcedCycleError, SpanTree
from nx_utils import from_nx_graph, reference_weight, to_nx_graph, to_output_file

def graph(n_verts, *records):
    return EdgeList(n_verts, [Edge(u, v, w, f == 1) for (u, v, w, f) in records])

FORCED_EXAMPLE = [(1, 2, 1, 0), (2, 3, 2, 0), (3, 4, 3, 0), (1, 4, 4, 0), (1, 3, 5, 1)]

class TestSpanTree(unittest.TestCase):

    def test_forced_example(self):
        st = SpanTree(graph(4, *FORCED_EXAMPLE))
        mst = st.build()
        assert st.total_weight() == 11
        assert len(mst) == 3
        assert Edge(1, 3, 5, True) in mst
        assert st.is_spanning_tree()

    def test_forced_edge_comes_first(self):
        st = SpanTree(graph(4, *FORCED_EXAMPLE))
        st.add_forced_edges()
        assert st.tree == [Edge(1, 3, 5, True)]
        assert st.uf.connected(1, 3)
        assert st.total_weight() == 5

    def test_equal_weights(self):
        st = SpanTree(graph(3, (1, 2, 5, 0), (2, 3, 5, 0), (1, 3, 5, 0)))
        assert len(st.build()) == 2
        assert st.total_weight() == 10

    def test_single_vertex(self):
        st = SpanTree(graph(1))
        assert st.build() == ()
        assert st.total_weight() == 0
        assert st.is_spanning_tree()

    def test_plain_mst(self):
        st = SpanTree(graph(4, (1, 2, 10, 0), (2, 3, 1, 0), (3, 4, 1, 0), (1, 4, 2, 0), (1, 3, 9, 0)))
        st.build()
        assert st.total_weight() == 4

    def test_forced_expensive_edges(self):
        edges = graph(3, (1, 2, 1, 0), (2, 3, 1, 0), (1, 3, 100, 1), (2, 3, 50, 1))
        st = SpanTree(edges)
        mst = st.build()
        assert st.total_weight() == 150
        assert set(mst) == {Edge(1, 3, 100, True), Edge(2, 3, 50, True)}

    def test_disconnected(self):
        st = SpanTree(graph(4, (1, 2, 3, 0), (3, 4, 2, 0)))
        st.build()
        assert st.total_weight() == 5
        assert not st.is_spanning_tree()

    def test_forced_cycle_strict(self):
        edges = graph(3, (1, 2, 1, 1), (2, 3, 1, 1), (1, 3, 1, 1))
        with self.assertRaises(ForcedCycleError) as cm:
            SpanTree(edges).build()
        assert cm.exception.edge == Edge(1, 3, 1, True)

    def test_forced_cycle_lenient(self):
        edges = graph(3, (1, 2, 1, 1), (2, 3, 1, 1), (1, 3, 1, 1))
        st = SpanTree(edges, strict=False)
        st.build()
        assert len(st.tree) == 3
        assert st.total_weight() == 3
        assert not st.is_spanning_tree()

    def test_order_enforced(self):
        st = SpanTree(graph(2, (1, 2, 1, 0)))
        with self.assertRaises(BuildOrderError):
            st.run_kruskal()
        with self.assertRaises(BuildOrderError):
            st.finalize()
        st.add_forced_edges()
        with self.assertRaises(BuildOrderError):
            st.add_forced_edges()
        st.run_kruskal()
        st.finalize()
        with self.assertRaises(BuildOrderError):
            st.build()

    def test_input_order_untouched(self):
        edges = graph(4, *FORCED_EXAMPLE)
        before = list(edges)
        SpanTree(edges).build()
        assert list(edges) == before

    def test_tree_frozen(self):
        st = SpanTree(graph(2, (1, 2, 1, 0)))
        mst = st.build()
        assert isinstance(mst, tuple)
        assert st.tree is mst

class TestAgainstNetworkx(unittest.TestCase):

    def test_random_graphs(self):
        for seed in range(30):
            n = 3 + seed % 10
            edges, _ = generate(n, density=0.6, min_weight=1, max_weight=20, nforced=seed % 4, seed=seed)
            forced = list(edges.forced())
            expected = reference_weight(edges)
            connected = nx.is_connected(to_nx_graph(edges))

            st = SpanTree(edges)
            mst = st.build()

            assert st.total_weight() == expected, seed
            for e in forced:
                assert e in mst, (seed, e)
            assert st.is_spanning_tree() == connected, seed
            if connected:
                assert len(mst) == n - 1, seed

    def test_rerun_same_weight(self):
        edges, _ = generate(15, density=0.4, min_weight=1, max_weight=3, nforced=3, seed=7)
        weights = set()
        for _ in range(3):
            st = SpanTree(edges)
            st.build()
            weights.add(st.total_weight())
        assert len(weights) == 1

    def test_networkx_generated(self):
        g = nx.circulant_graph(30, [1, 2])
        forced = [(0, 1), (5, 6), (10, 12)]
        edges = from_nx_graph(g, lambda a, b: (a * 7 + b * 3) % 11 + 1, forced=forced)
        assert sum(1 for _ in edges.forced()) == 3

        st = SpanTree(edges)
        mst = st.build()
        assert len(mst) == 29
        assert st.total_weight() == reference_weight(edges)
        assert st.is_spanning_tree()

class TestCommandLine(unittest.TestCase):

    def run_main(self, argv, stdin=''):
        out = io.StringIO()
        err = io.StringIO()
        with mock.patch('sys.stdin', io.StringIO(stdin)), \
                contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            status = kruskal.main(argv)
        return status, out.getvalue(), err.getvalue()

    def test_stdin(self):
        text = '4 5\n' + ''.join(f'{u} {v} {w} {f}\n' for (u, v, w, f) in FORCED_EXAMPLE)
        status, out, err = self.run_main([], text)
        assert status == 0
        assert out == '11\n'
        assert err == ''

    def test_binary_stdin(self):
        data = b''.join(num.to_bytes(4, 'little', signed=True)
                        for num in [2, 2, 1, 2, 4, 0, 2, 1, 9, 1])
        stdin = types.SimpleNamespace(buffer=io.BytesIO(data))
        out = io.StringIO()
        with mock.patch('sys.stdin', stdin), contextlib.redirect_stdout(out):
            status = kruskal.main(['--binary'])
        assert status == 0
        # the forced edge wins over the cheaper parallel one
        assert out.getvalue() == '9\n'

    def test_verbose_keeps_stdout_clean(self):
        status, out, err = self.run_main(['-v'], '2 1\n1 2 4 0\n')
        assert status == 0
        assert out == '4\n'
        assert '(1, 2, 4)' in err

    def test_check_disconnected(self):
        text = '3 1\n1 2 4 0\n'
        assert self.run_main([], text)[1] == '4\n'
        assert self.run_main(['--check'], text)[1] == '-1\n'

    def test_forced_cycle(self):
        text = '2 2\n1 2 4 1\n2 1 3 1\n'
        status, out, err = self.run_main([], text)
        assert status == 1
        assert out == ''
        assert 'forced edge' in err

        status, out, _ = self.run_main(['--lenient'], text)
        assert status == 0
        assert out == '7\n'

    def test_malformed(self):
        status, out, err = self.run_main([], '2 1\n1 2 four 0\n')
        assert status == 1
        assert 'error' in err

    def test_files(self):
        edges = graph(4, *FORCED_EXAMPLE)
        with tempfile.TemporaryDirectory() as tmp:
            txt = os.path.join(tmp, 'g.txt')
            binf = os.path.join(tmp, 'g.bin')
            to_output_file(edges, txt)
            to_output_file(edges, binf, binary=True)

            assert self.run_main([txt])[1] == '11\n'
            assert self.run_main(['-b', binf])[1] == '11\n'
            assert self.run_main([os.path.join(tmp, 'missing.txt')])[0] == 1

if __name__ == '__main__':
    unittest.main()
