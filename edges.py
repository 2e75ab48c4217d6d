from typing import BinaryIO, Iterable, Iterator, NamedTuple, TextIO

FIELDS_PER_EDGE = 4
INT_SIZE = 4


class GraphFormatError(ValueError):
    pass


class Edge(NamedTuple):
    u: int
    v: int
    weight: int
    in_f: bool = False

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        if len(parts) != FIELDS_PER_EDGE:
            raise GraphFormatError(f'expected {FIELDS_PER_EDGE} fields, got {len(parts)}: {s.strip()!r}')

        u, v, weight, f = _to_ints(parts)
        return cls(u, v, weight, f == 1)

    def to_line(self) -> str:
        return f'{self.u} {self.v} {self.weight} {int(self.in_f)}'

    def __repr__(self):
        marker = ', F' if self.in_f else ''
        return f'({self.u}, {self.v}, {self.weight}{marker})'

    __str__ = __repr__


class EdgeList(list):
    # edges of a graph on vertices 1..n_verts, in input order until sorted

    def __init__(self, n_verts: int, edges: Iterable[Edge] = ()) -> None:
        super().__init__(edges)
        self.n_verts = n_verts

    def sort_by_weight(self) -> None:
        # weight only; equal weights keep their relative order
        self.sort(key=lambda e: e.weight)

    def forced(self) -> Iterator[Edge]:
        return (e for e in self if e.in_f)

    def check(self) -> None:
        for i, e in enumerate(self):
            for vert in (e.u, e.v):
                if not 1 <= vert <= self.n_verts:
                    raise GraphFormatError(f'edge {i}: vertex {vert} not in [1, {self.n_verts}]')

    def __repr__(self):
        return f'EdgeList({self.n_verts}, {list.__repr__(self)})'


def _to_ints(tokens: Iterable[str]) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError as err:
        raise GraphFormatError(f'not an integer: {err}') from None


def _from_ints(nums: list[int]) -> EdgeList:
    # <nvertices> <nedges>, then <u> <v> <w> <inF> per edge
    if len(nums) < 2:
        raise GraphFormatError('input is missing its "<nvertices> <nedges>" header')

    nvertices, nedges = nums[0], nums[1]
    if nvertices < 0 or nedges < 0:
        raise GraphFormatError(f'negative counts in header: {nvertices} {nedges}')

    body = nums[2:]
    if len(body) != nedges * FIELDS_PER_EDGE:
        raise GraphFormatError(f'expected {nedges} edges ({nedges * FIELDS_PER_EDGE} numbers), '
                               f'got {len(body)} numbers')

    edges = EdgeList(nvertices)
    for i in range(0, len(body), FIELDS_PER_EDGE):
        u, v, weight, f = body[i:i+FIELDS_PER_EDGE]
        edges.append(Edge(u, v, weight, f == 1))

    edges.check()
    return edges


def read_text(f: TextIO) -> EdgeList:
    # line breaks carry no meaning, only the order of the numbers does
    return _from_ints(_to_ints(f.read().split()))


def read_binary(f: BinaryIO) -> EdgeList:
    data = f.read()
    if len(data) % INT_SIZE != 0:
        raise GraphFormatError(f'binary input length {len(data)} is not a multiple of {INT_SIZE}')

    return _from_ints([int.from_bytes(data[i:i+INT_SIZE], byteorder='little', signed=True)
                       for i in range(0, len(data), INT_SIZE)])


def read_graph(fname: str, binary: bool=False) -> EdgeList:
    if binary:
        with open(fname, 'rb') as f:
            return read_binary(f)
    with open(fname, 'r') as f:
        return read_text(f)
