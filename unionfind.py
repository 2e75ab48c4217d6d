class UnionFind:
    # every vertex points straight at its representative, union relabels the
    # smaller side
    def __init__(self, n_verts: int) -> None:
        # slot 0 is unused, vertices are 1-indexed
        self.boss = [i for i in range(n_verts + 1)]
        self.size = [1] * (n_verts + 1)
        self.sets = [{i} for i in range(n_verts + 1)]
        self.count = n_verts

    def __len__(self) -> int:
        return len(self.boss) - 1

    def find(self, index: int) -> int:
        return self.boss[index]

    def connected(self, i: int, j: int) -> bool:
        return self.boss[i] == self.boss[j]

    def members(self, index: int) -> frozenset[int]:
        return frozenset(self.sets[self.boss[index]])

    def union(self, i: int, j: int) -> bool:
        i = self.boss[i]
        j = self.boss[j]
        if i == j:
            return False

        # the smaller side is absorbed; on a tie i goes into j
        if self.size[i] > self.size[j]:
            i, j = j, i

        for z in self.sets[i]:
            self.boss[z] = j
        self.sets[j] |= self.sets[i]
        self.size[j] += self.size[i]
        self.sets[i] = set()
        self.count -= 1
        return True
