import networkx as nx
import random

from typing import Any, Callable, Iterable

from edges import Edge, EdgeList

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def from_nx_graph(g: nx.Graph,
                  decide_weight: Callable[[Any, Any], int],
                  forced: Iterable[tuple[Any, Any]]=(),
                  nodename_to_idx: Callable[[Any], int]= lambda x: int(x) + 1) -> EdgeList:
    # networkx generators number nodes from 0, our vertices start at 1
    forced = {frozenset(e) for e in forced}
    edges = EdgeList(g.number_of_nodes())
    for (a, b) in g.edges():
        edges.append(Edge(nodename_to_idx(a),
                          nodename_to_idx(b),
                          decide_weight(a, b),
                          frozenset((a, b)) in forced))
    return edges

def to_nx_graph(edges: EdgeList) -> nx.MultiGraph:
    # MultiGraph so parallel edges survive
    g = nx.MultiGraph()
    g.add_nodes_from(range(1, edges.n_verts + 1))
    for e in edges:
        g.add_edge(e.u, e.v, weight=e.weight, in_f=e.in_f)
    return g

def reference_weight(edges: EdgeList) -> int:
    # forced edges are ranked below every other edge so networkx takes them first
    g = to_nx_graph(edges)
    offset = sum(abs(e.weight) for e in edges) + 1
    for (_, _, d) in g.edges(data=True):
        d['rank'] = d['weight'] - offset if d['in_f'] else d['weight']

    chosen = nx.minimum_spanning_edges(g, algorithm='kruskal', weight='rank', keys=True, data=True)
    return sum(d['weight'] for (_, _, _, d) in chosen)

def to_output_file(edges: EdgeList,
                   fname: str,
                   binary: bool=False) -> None:

    if binary:
        to_bin = lambda num: int(num).to_bytes(length=4, byteorder='little', signed=True)
        with open(fname, 'wb') as f:
            f.write(to_bin(edges.n_verts))
            f.write(to_bin(len(edges)))

            for e in edges:
                for num in (e.u, e.v, e.weight, int(e.in_f)):
                    f.write(to_bin(num))
    else:
        with open(fname, 'w') as f:
            f.write(f'{edges.n_verts} {len(edges)}\n')

            for e in edges:
                f.write(e.to_line() + '\n')


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='nx_utils',
                                     description='Write a networkx generated graph as a forced MST input')
    parser.add_argument('kind', choices=['circulant', 'hypercube', 'caveman', 'gnp'])
    parser.add_argument('n', type=int,
                        help='vertices (circulant, gnp), dimension (hypercube) or groups of 10 (caveman)')
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-b', '--binary', action='store_true')
    parser.add_argument('-s', '--seed', default=0, type=int)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=500, type=int)

    args = parser.parse_args()

    nodename_to_idx = lambda x: int(x) + 1
    if args.kind == 'circulant':
        g = nx.circulant_graph(args.n, [1, 2])
    elif args.kind == 'hypercube':
        g = nx.hypercube_graph(args.n)
        nodename_to_idx = lambda node: sum(node[-i-1]* 2**i for i in range(len(node))) + 1
    elif args.kind == 'caveman':
        g = nx.connected_caveman_graph(args.n, 10)
    else:
        g = nx.fast_gnp_random_graph(args.n, 0.1, seed=args.seed)

    edges = from_nx_graph(g,
                          arbitrary_weight(args.min_weight, args.max_weight, args.seed),
                          nodename_to_idx=nodename_to_idx)
    to_output_file(edges, args.outfile, binary=args.binary)
    print(f'Wrote {edges.n_verts} vertices, {len(edges)} edges to {args.outfile}')
