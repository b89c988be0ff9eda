"""Ridge extraction by profile recognition and polygon breaking (PPA)."""

from __future__ import annotations

from typing import Optional

from terrainmetrics.heightfield import HeightField

Cell = tuple[int, int]
RidgeSegment = tuple[Cell, Cell]
RidgesTree = list[set[int]]
EdgeSet = set[tuple[int, int]]

NUM_DIRS = 4
PROFILE_DIRS: tuple[Cell, ...] = (
    (1, 0),   # E
    (1, 1),   # NE
    (0, 1),   # N
    (-1, 1),  # NW
)


def _direction(d: int) -> Cell:
    """Offset of direction ``d`` in the eight counter-clockwise directions from east."""
    k = d % 8
    if k < 4:
        return PROFILE_DIRS[k]
    dx, dy = PROFILE_DIRS[k - 4]
    return -dx, -dy


class DisjointSets:
    """Union-find with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n + 1))
        self.rank = [0] * (n + 1)

    def find(self, u: int) -> int:
        root = u
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[u] != root:
            self.parent[u], u = root, self.parent[u]
        return root

    def merge(self, x: int, y: int) -> None:
        x = self.find(x)
        y = self.find(y)
        if self.rank[x] > self.rank[y]:
            self.parent[y] = x
        else:
            self.parent[x] = y
        if self.rank[x] == self.rank[y]:
            self.rank[y] += 1


def _add_edge(tree: RidgesTree, n1: int, n2: int) -> None:
    tree[n1].add(n2)
    tree[n2].add(n1)


def _remove_edge(tree: RidgesTree, n1: int, n2: int) -> None:
    tree[n1].discard(n2)
    tree[n2].discard(n1)


def _copy_tree(tree: RidgesTree) -> RidgesTree:
    return [set(s) for s in tree]


def prune_ridge_leaves(ridges: RidgesTree, reliable: EdgeSet) -> RidgesTree:
    """Remove every leaf edge of the original tree not listed as reliable.

    Leaves are detected on the input, so one call removes one layer only.
    """
    pruned = _copy_tree(ridges)
    for node, neighbours in enumerate(ridges):
        if len(neighbours) == 1:
            neigh = next(iter(neighbours))
            if (node, neigh) not in reliable:
                _remove_edge(pruned, node, neigh)
    return pruned


def prune_small_branches(ridges: RidgesTree, min_branch_length: int) -> RidgesTree:
    """Remove branches from a leaf to the first bifurcation shorter than the limit."""
    pruned = _copy_tree(ridges)
    for leaf, neighbours in enumerate(ridges):
        if len(neighbours) != 1:
            continue
        branch = {leaf}
        curr = next(iter(neighbours))
        while len(ridges[curr]) <= 2 and len(branch) < min_branch_length:
            branch.add(curr)
            if len(ridges[curr]) < 2:
                break
            unvisited = [n for n in ridges[curr] if n not in branch]
            if not unvisited:
                break
            curr = unvisited[-1]
        if len(branch) < min_branch_length:
            for node in branch:
                for neigh in list(pruned[node]):
                    _remove_edge(pruned, node, neigh)
                pruned[node].clear()
    return pruned


class PPA:
    """Ridge network of a height field as a pruned minimum spanning tree."""

    def __init__(self, heights: HeightField) -> None:
        self.heights = heights
        self.nx = heights.nx
        self.ny = heights.ny
        self.hmin, self.hmax = heights.value_range()
        self._reset()

    def _reset(self) -> None:
        n = self.nx * self.ny
        self._candidate = [False] * n
        self._is_segment = [[False] * NUM_DIRS for _ in range(n)]
        self._seg_height = [[0.0] * NUM_DIRS for _ in range(n)]
        self._is_reliable = [[False] * NUM_DIRS for _ in range(n)]
        self._reliable_edges: EdgeSet = set()
        self._mst: RidgesTree = [set() for _ in range(n)]
        self._pruned: RidgesTree = [set() for _ in range(n)]

    def compute(self, profile_length: int = 5) -> None:
        """Run candidate detection, segment linking, MST and pruning."""
        self._reset()
        self._compute_candidates(profile_length)
        self._connect_candidates()
        self._check_reliable_segments(remove_parallels=False)
        self._compute_mst()

        pruned = _copy_tree(self._mst)
        for _ in range(profile_length):
            pruned = prune_ridge_leaves(pruned, set())
        self._pruned = prune_small_branches(pruned, profile_length)

    def _node_cell(self, node: int) -> Cell:
        return node % self.nx, node // self.nx

    def _cells(self):
        for i in range(self.nx):
            for j in range(self.ny):
                yield i, j

    def _compute_candidates(self, profile_length: int) -> None:
        hf = self.heights
        half = profile_length // 2
        for i, j in self._cells():
            centre = hf.at(i, j)
            for dx, dy in PROFILE_DIRS:
                lower_left = lower_right = False
                for k in range(1, half + 1):
                    il, jl = i - dx * k, j - dy * k
                    if hf.is_valid_cell(il, jl) and hf.at(il, jl) < centre:
                        lower_left = True
                    ir, jr = i + dx * k, j + dy * k
                    if hf.is_valid_cell(ir, jr) and hf.at(ir, jr) < centre:
                        lower_right = True
                if lower_left and lower_right:
                    self._candidate[hf.cell_id(i, j)] = True
                    break

    def _connect_candidates(self) -> None:
        hf = self.heights
        seg, height = self._is_segment, self._seg_height
        for i, j in self._cells():
            idx = hf.cell_id(i, j)
            if not self._candidate[idx]:
                continue
            for d, (dx, dy) in enumerate(PROFILE_DIRS):
                i_n, j_n = i + dx, j + dy
                if not hf.is_valid_cell(i_n, j_n):
                    continue
                if not self._candidate[hf.cell_id(i_n, j_n)]:
                    continue
                seg[idx][d] = True
                height[idx][d] = 0.5 * (hf[idx] + hf.at(i_n, j_n))
                # Crossing diagonals in one square: keep the higher.
                if d == 3 and i > 0:
                    idd = hf.cell_id(i - 1, j)
                    if seg[idd][1]:
                        if height[idx][3] > height[idd][1]:
                            seg[idd][1] = False
                        else:
                            seg[idx][3] = False

    def _check_reliable_segments(self, remove_parallels: bool) -> None:
        hf = self.heights
        for i in range(1, self.nx - 1):
            for j in range(1, self.ny - 1):
                idx = hf.cell_id(i, j)
                for d in range(NUM_DIRS):
                    if not self._is_segment[idx][d]:
                        continue
                    dx, dy = _direction(d)
                    h = self._seg_height[idx][d]
                    if d % 2 == 0:
                        dx1, dy1 = _direction(d + 2)
                        i1, j1 = i + dx1, j + dy1
                        h1 = 0.5 * (hf.at(i1, j1) + hf.at(i1 + dx, j1 + dy))
                        dx2, dy2 = _direction(d - 2)
                        i2, j2 = i + dx2, j + dy2
                        h2 = 0.5 * (hf.at(i2, j2) + hf.at(i2 + dx, j2 + dy))
                        if h > h1 and h > h2:
                            self._is_reliable[idx][d] = True
                            if remove_parallels:
                                self._is_segment[hf.cell_id(i1, j1)][d] = False
                                self._is_segment[hf.cell_id(i2, j2)][d] = False
                    else:
                        dx1, dy1 = _direction(d + 1)
                        i1, j1 = i + dx1, j + dy1
                        dx2, dy2 = _direction(d - 1)
                        i2, j2 = i + dx2, j + dy2
                        h1, h2 = hf.at(i1, j1), hf.at(i2, j2)
                        if h > h1 and h > h2:
                            self._is_reliable[idx][d] = True
                            if remove_parallels:
                                self._is_segment[hf.cell_id(i1, j1)][d] = False
                                self._is_segment[hf.cell_id(i2, j2)][d] = False
                                dxo, dyo = _direction(d + 4)
                                self._is_segment[hf.cell_id(i1 + dxo, j1 + dyo)][d] = False
                                self._is_segment[hf.cell_id(i2 + dxo, j2 + dyo)][d] = False

    def _ridge_edges(self, favour_reliables: bool) -> list[tuple[float, int, int]]:
        hf = self.heights
        edges = []
        for i, j in self._cells():
            id1 = hf.cell_id(i, j)
            for d, (dx, dy) in enumerate(PROFILE_DIRS):
                if not self._is_segment[id1][d]:
                    continue
                id2 = hf.cell_id(i + dx, j + dy)
                w = self._seg_height[id1][d]
                if favour_reliables and self._is_reliable[id1][d]:
                    w = self.hmax - w
                else:
                    w = 2 * self.hmax - w
                edges.append((w, id1, id2))
        return edges

    def _compute_mst(self) -> None:
        edges = sorted(self._ridge_edges(True))
        ds = DisjointSets(self.nx * self.ny)
        mst: RidgesTree = [set() for _ in range(self.nx * self.ny)]
        for w, n1, n2 in edges:
            s1, s2 = ds.find(n1), ds.find(n2)
            if s1 == s2:
                continue
            ds.merge(s1, s2)
            _add_edge(mst, n1, n2)
            if w < self.hmax:
                self._reliable_edges.add((n1, n2))
                self._reliable_edges.add((n2, n1))
        self._mst = mst

    def ridge_candidates(self) -> list[Cell]:
        return [c for c in self._cells() if self._candidate[self.heights.cell_id(*c)]]

    def _segments_where(self, reliable_only: bool) -> list[RidgeSegment]:
        segs = []
        for i, j in self._cells():
            idx = self.heights.cell_id(i, j)
            for d, (dx, dy) in enumerate(PROFILE_DIRS):
                if self._is_segment[idx][d] and (not reliable_only or self._is_reliable[idx][d]):
                    segs.append(((i, j), (i + dx, j + dy)))
        return segs

    def segments(self) -> list[RidgeSegment]:
        return self._segments_where(False)

    def reliable_segments(self) -> list[RidgeSegment]:
        return self._segments_where(True)

    def _tree_segments(self, tree: RidgesTree) -> list[RidgeSegment]:
        return [
            (self._node_cell(n1), self._node_cell(n2))
            for n1, neighbours in enumerate(tree)
            for n2 in sorted(neighbours)
            if n2 >= n1
        ]

    def segments_in_mst(self) -> list[RidgeSegment]:
        return self._tree_segments(self._mst)

    def segments_in_pruned_mst(self) -> list[RidgeSegment]:
        return self._tree_segments(self._pruned)

    def mst(self) -> RidgesTree:
        return _copy_tree(self._mst)

    def pruned_mst(self) -> RidgesTree:
        return _copy_tree(self._pruned)