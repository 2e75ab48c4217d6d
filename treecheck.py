from typing import Iterable

from edges import Edge

Adjacency = list[list[int]]


def build_adjacency(n_verts: int, edges: Iterable[Edge]) -> Adjacency:
    # index 0 is unused, vertices are 1-indexed
    adj = [[] for _ in range(n_verts + 1)]
    for edge in edges:
        adj[edge.u].append(edge.v)
        adj[edge.v].append(edge.u)
    return adj


def has_cycle(adj: Adjacency) -> bool:
    # the link back to the parent is skipped once, so parallel edges and
    # self-loops still count as cycles
    seen = [False] * len(adj)

    for root in range(1, len(adj)):
        if seen[root]:
            continue

        seen[root] = True
        stack = [(root, -1)]
        while stack:
            s, prev = stack.pop()
            skipped_parent = False
            for u in adj[s]:
                if u == prev and not skipped_parent:
                    skipped_parent = True
                    continue
                if seen[u]:
                    return True
                seen[u] = True
                stack.append((u, s))

    return False


def is_connected(adj: Adjacency) -> bool:
    n_verts = len(adj) - 1
    if n_verts <= 1:
        return True

    seen = [False] * len(adj)
    seen[1] = True
    reached = 1
    stack = [1]
    while stack:
        s = stack.pop()
        for u in adj[s]:
            if not seen[u]:
                seen[u] = True
                reached += 1
                stack.append(u)

    return reached == n_verts


def is_spanning_tree(n_verts: int, edges: Iterable[Edge]) -> bool:
    adj = build_adjacency(n_verts, edges)
    return not has_cycle(adj) and is_connected(adj)
