import argparse
import random

import numpy as np

from edges import Edge, EdgeList
from unionfind import UnionFind

def generate(nvertices: int,
             density: float=0.5,
             min_weight: int=1,
             max_weight: int=100,
             nforced: int=0,
             seed: int | None=None) -> tuple[EdgeList, np.ndarray]:
    # the forced edges always form a forest; the matrix holds shifted weights
    rng = random.Random(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)

    for _ in range(total_edges):
        # Generate a random edge
        new_spot = False

        # keep trying until an unoccupied spot is found
        while not new_spot:
            i = rng.randint(0, nvertices-2)
            j = rng.randint(i+1, nvertices-1) # ensure no self-loops
            if adj_matrix[i, j] == 0:
                new_spot = True

        # weights are stored shifted by one so that 0 still means "no edge"
        adj_matrix[i, j] = rng.randint(min_weight, max_weight) - min_weight + 1

    pairs = [(i, j) for i in range(nvertices) for j in range(i+1, nvertices) if adj_matrix[i, j] != 0]

    # pick the forced edges greedily, skipping any that would close a cycle
    uf = UnionFind(nvertices)
    forced = set()
    for (i, j) in rng.sample(pairs, len(pairs)):
        if len(forced) == nforced:
            break
        if uf.union(i+1, j+1):
            forced.add((i, j))

    edges = EdgeList(nvertices)
    for (i, j) in pairs:
        weight = int(adj_matrix[i, j]) + min_weight - 1
        edges.append(Edge(i+1, j+1, weight, (i, j) in forced))

    return edges, adj_matrix

if __name__ == '__main__':
    from nx_utils import to_output_file

    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate graphs with forced edges for the spanning tree solver')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('-f', '--forced', default=0, type=int,
                        help='how many edges to flag as forced (they always form a forest)')
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-b', '--binary', action='store_true')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    if args.nvertices < 2:
        parser.error('nvertices must be at least 2')
    if not 0 <= args.density <= 1:
        parser.error('density must be between 0 and 1')
    if args.min_weight > args.max_weight:
        parser.error('--min-weight must not exceed --max-weight')

    edges, adj_matrix = generate(args.nvertices,
                                 density=args.density,
                                 min_weight=args.min_weight,
                                 max_weight=args.max_weight,
                                 nforced=args.forced,
                                 seed=args.seed)

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({len(edges)} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')
        print(f'  Forced edges: {sum(1 for _ in edges.forced())}')

    if args.verbose:
        print()
        print('Graph adjacency matrix (weights shifted so that 0 means no edge):')
        print(adj_matrix)

    to_output_file(edges, args.outfile, binary=args.binary)

'''
File format:

<nvertices> <nedges>
<v1> <v2> <w> <inF>
<v1> <v2> <w> <inF>
...

Vertices are numbered from 1, inF is 1 for forced edges and 0 otherwise.
'''
