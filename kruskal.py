import enum
import sys

from edges import Edge, EdgeList, read_binary, read_text
from treecheck import is_spanning_tree
from unionfind import UnionFind


class ForcedCycleError(ValueError):
    def __init__(self, edge: Edge) -> None:
        super().__init__(f'forced edge {edge} closes a cycle among the forced edges')
        self.edge = edge


class BuildOrderError(RuntimeError):
    pass


class Stage(enum.Enum):
    INITIALIZED = 0
    FORCED = 1
    KRUSKAL = 2
    FINALIZED = 3


class SpanTree:
    # forced edges first, then Kruskal over the rest
    def __init__(self, edges: EdgeList, strict: bool=True) -> None:
        # sorted later, keep the caller's order intact
        self.edges = EdgeList(edges.n_verts, edges)
        self.n_verts = edges.n_verts
        self.strict = strict
        self.uf = UnionFind(self.n_verts)
        self.tree = []
        self.stage = Stage.INITIALIZED

    def _advance(self, expected: Stage, to: Stage) -> None:
        if self.stage != expected:
            raise BuildOrderError(f'cannot move to {to.name} from {self.stage.name}, expected {expected.name}')
        self.stage = to

    def add_forced_edges(self) -> None:
        self._advance(Stage.INITIALIZED, Stage.FORCED)

        for edge in self.edges.forced():
            if self.strict and self.uf.connected(edge.u, edge.v):
                raise ForcedCycleError(edge)
            self.tree.append(edge)
            self.uf.union(edge.u, edge.v)

    def run_kruskal(self) -> None:
        self._advance(Stage.FORCED, Stage.KRUSKAL)

        self.edges.sort_by_weight()
        for edge in self.edges:
            if self.uf.count == 1:
                break
            if self.uf.find(edge.u) != self.uf.find(edge.v):
                self.tree.append(edge)
                self.uf.union(edge.u, edge.v)

    def finalize(self) -> tuple[Edge, ...]:
        self._advance(Stage.KRUSKAL, Stage.FINALIZED)
        self.tree = tuple(self.tree)
        return self.tree

    def build(self) -> tuple[Edge, ...]:
        self.add_forced_edges()
        self.run_kruskal()
        return self.finalize()

    def total_weight(self) -> int:
        return sum(e.weight for e in self.tree)

    def is_spanning_tree(self) -> bool:
        return is_spanning_tree(self.n_verts, self.tree)


def main(argv: list[str] | None = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog='kruskal',
                                     description='Weight of the minimum spanning tree containing every forced edge')
    parser.add_argument('infile', nargs='?', default='-',
                        help='graph file, or - for stdin (the default)')
    parser.add_argument('-b', '--binary', action='store_true',
                        help='read the binary format written by gconverter')
    parser.add_argument('-c', '--check', action='store_true',
                        help='print -1 when the result is not a spanning tree')
    parser.add_argument('--lenient', action='store_true',
                        help='accept forced edges that form a cycle')
    parser.add_argument('-v', '--verbose', action='store_true')

    args = parser.parse_args(argv)

    try:
        if args.infile == '-':
            edges = read_binary(sys.stdin.buffer) if args.binary else read_text(sys.stdin)
        elif args.binary:
            with open(args.infile, 'rb') as f:
                edges = read_binary(f)
        else:
            with open(args.infile, 'r') as f:
                edges = read_text(f)

        st = SpanTree(edges, strict=not args.lenient)
        mst = st.build()
    except (OSError, ValueError) as err:
        print(f'{parser.prog}: error: {err}', file=sys.stderr)
        return 1

    if args.verbose:
        print(f'Read {edges.n_verts} vertices, {len(edges)} edges '
              f'({sum(1 for _ in edges.forced())} forced)', file=sys.stderr)
        print(f'Tree edges ({len(mst)}):', list(mst), file=sys.stderr)

    if args.check and not st.is_spanning_tree():
        if args.verbose:
            print('Result is not a spanning tree', file=sys.stderr)
        print(-1)
    else:
        print(st.total_weight())

    return 0


if __name__ == '__main__':
    sys.exit(main())
