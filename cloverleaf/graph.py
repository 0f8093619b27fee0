"""Compressed sparse row graphs and their transition-probability variants."""

from __future__ import annotations

import itertools
from typing import Iterable, Iterator, Protocol, Sequence

Edge = tuple[int, int, float]


class _GraphLike(Protocol):
    def __len__(self) -> int: ...

    def num_edges(self) -> int: ...

    def get_edges(self, idx: int) -> tuple[list[int], list[float]]: ...

    def get_edge_range(self, idx: int) -> tuple[int, int]: ...


def cdf_to_p(cdf: Iterable[float]) -> Iterator[float]:
    """Yield the individual probabilities encoded by a cumulative distribution."""
    previous = 0.0
    for value in cdf:
        yield value - previous
        previous = value


def convert_edges_to_cdf(weights: Sequence[float]) -> list[float]:
    """Return the cumulative distribution of ``weights``.

    All-zero weights are treated as uniform. The final entry is pinned to 1.0
    so accumulation error never leaves it short.
    """
    values = [float(w) for w in weights]
    if not values:
        return []
    denom = sum(values)
    if denom == 0.0:
        values = [1.0] * len(values)
        denom = float(len(values))
    cdf = [acc / denom for acc in itertools.accumulate(values)]
    cdf[-1] = 1.0
    return cdf


def _deduplicate(edges: list[Edge]) -> list[Edge]:
    def key(edge: Edge) -> tuple[int, int]:
        return edge[0], edge[1]

    merged: list[Edge] = []
    for (from_node, to_node), group in itertools.groupby(sorted(edges, key=key), key=key):
        total = 0.0
        for _, _, weight in group:
            total += weight
        merged.append((from_node, to_node, total))
    return merged


class CSR:
    """Compressed sparse row adjacency: row offsets, target columns and weights."""

    __slots__ = ("rows", "columns", "weights")

    def __init__(
        self, rows: Sequence[int], columns: Sequence[int], weights: Sequence[float]
    ) -> None:
        rows = list(rows)
        columns = list(columns)
        weights = [float(w) for w in weights]
        if not rows:
            raise ValueError("rows must hold at least one offset")
        if len(columns) != len(weights):
            raise ValueError("columns and weights must have the same length")
        if rows[-1] != len(columns):
            raise ValueError("last row offset must equal the number of edges")
        self.rows = rows
        self.columns = columns
        self.weights = weights

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], deduplicate: bool = False) -> "CSR":
        """Build a graph from ``(from, to, weight)`` triples.

        With ``deduplicate`` repeated edges are merged by summing their weights,
        and each node's edges end up sorted by target.
        """
        edge_list = [(int(f), int(t), float(w)) for f, t, w in edges]
        if deduplicate:
            edge_list = _deduplicate(edge_list)

        max_node = max((max(f, t) for f, t, _ in edge_list), default=0)
        counts = [0] * (max_node + 1)
        for from_node, _, _ in edge_list:
            counts[from_node] += 1
        rows = [0, *itertools.accumulate(counts)]

        columns = [0] * len(edge_list)
        weights = [0.0] * len(edge_list)
        next_slot = rows[:-1]
        for from_node, to_node, weight in edge_list:
            idx = next_slot[from_node]
            columns[idx] = to_node
            weights[idx] = weight
            next_slot[from_node] += 1

        return CSR(rows, columns, weights)

    def __len__(self) -> int:
        return len(self.rows) - 1

    def num_edges(self) -> int:
        """Total number of edges."""
        return len(self.weights)

    def degree(self, idx: int) -> int:
        """Number of outbound edges of node ``idx``."""
        start, stop = self.get_edge_range(idx)
        return stop - start

    def get_edges(self, idx: int) -> tuple[list[int], list[float]]:
        """Targets and weights of node ``idx``'s outbound edges."""
        start, stop = self.get_edge_range(idx)
        return self.columns[start:stop], self.weights[start:stop]

    def get_edge_range(self, idx: int) -> tuple[int, int]:
        """Offsets of node ``idx``'s edges in the flat edge arrays."""
        if not 0 <= idx < len(self):
            raise IndexError(f"node {idx} is out of range")
        return self.rows[idx], self.rows[idx + 1]

    def set_edge_weights(self, idx: int, weights: Sequence[float]) -> None:
        """Replace the weights of node ``idx``'s edges."""
        start, stop = self.get_edge_range(idx)
        if len(weights) != stop - start:
            raise ValueError(
                f"node {idx} has {stop - start} edges, got {len(weights)} weights"
            )
        self.weights[start:stop] = [float(w) for w in weights]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={len(self)}, edges={self.num_edges()})"


class NormalizedCSR(CSR):
    """CSR graph whose outbound weights sum to one for every node."""

    __slots__ = ()

    @classmethod
    def from_csr(cls, csr: CSR) -> "NormalizedCSR":
        weights = list(csr.weights)
        for start, stop in itertools.pairwise(csr.rows):
            segment = weights[start:stop]
            if not segment:
                continue
            denom = sum(segment)
            if denom > 0.0:
                weights[start:stop] = [w / denom for w in segment]
            else:
                weights[start:stop] = [1.0 / len(segment)] * len(segment)
        return cls(list(csr.rows), list(csr.columns), weights)


class CumCSR(CSR):
    """CSR graph whose weights are stored as per-node cumulative distributions."""

    __slots__ = ()

    @classmethod
    def from_csr(cls, csr: CSR) -> "CumCSR":
        weights = list(csr.weights)
        for start, stop in itertools.pairwise(csr.rows):
            if start < stop:
                weights[start:stop] = convert_edges_to_cdf(weights[start:stop])
        return cls(list(csr.rows), list(csr.columns), weights)

    def clone_with_edges(self, weights: Sequence[float]) -> "CumCSR":
        """Copy of this graph with new CDF weights, checked for validity."""
        weights = [float(w) for w in weights]
        if len(weights) != len(self.weights):
            raise ValueError("weights lengths not equal!")

        for start, stop in itertools.pairwise(self.rows):
            segment = weights[start:stop]
            for previous, current in itertools.pairwise(segment):
                if previous > 1.0:
                    raise ValueError("Edge weight exceeds 1.0, illegal in CDF")
                if current < previous:
                    raise ValueError("Edge weight for node in decreasing order")
            if segment and segment[-1] > 1.0:
                raise ValueError("Edge weight exceeds 1.0, illegal in CDF")

        return CumCSR(list(self.rows), list(self.columns), weights)

    def transpose(self) -> "CumCSR":
        """Graph with every edge reversed, keeping each edge's probability."""
        n = len(self)
        inbound = [0] * n
        for target in self.columns:
            inbound[target] += 1
        rows = [0, *itertools.accumulate(inbound)]

        weights = list(self.weights)
        columns = list(self.columns)
        for node_id in range(n):
            edges, edge_weights = self.get_edges(node_id)
            for target, probability in zip(edges, cdf_to_p(edge_weights)):
                idx = rows[target] + inbound[target] - 1
                weights[idx] = probability
                columns[idx] = node_id
                inbound[target] -= 1

        return CumCSR.from_csr(CSR(rows, columns, weights))


class OptCDFGraph:
    """A graph's structure paired with its own, swappable, CDF edge weights."""

    __slots__ = ("_graph", "_weights")

    def __init__(self, graph: _GraphLike, weights: Sequence[float]) -> None:
        values = [float(w) for w in weights]
        if len(values) != graph.num_edges():
            raise ValueError("weights must have one entry per edge of the graph")
        self._graph = graph
        self._weights = values
        for idx in range(len(graph)):
            start, stop = graph.get_edge_range(idx)
            if start < stop:
                self._weights[start:stop] = convert_edges_to_cdf(self._weights[start:stop])

    @classmethod
    def clone_from_cdf(cls, graph: _GraphLike) -> "OptCDFGraph":
        """Wrap a CDF graph, copying its existing weights unchanged."""
        weights = [0.0] * graph.num_edges()
        for idx in range(len(graph)):
            start, stop = graph.get_edge_range(idx)
            weights[start:stop] = graph.get_edges(idx)[1]
        instance = cls.__new__(cls)
        instance._graph = graph
        instance._weights = weights
        return instance

    def __len__(self) -> int:
        return len(self._graph)

    def num_edges(self) -> int:
        return self._graph.num_edges()

    def degree(self, idx: int) -> int:
        start, stop = self.get_edge_range(idx)
        return stop - start

    def get_edges(self, idx: int) -> tuple[list[int], list[float]]:
        edges = self._graph.get_edges(idx)[0]
        start, stop = self.get_edge_range(idx)
        return edges, self._weights[start:stop]

    def get_edge_range(self, idx: int) -> tuple[int, int]:
        return self._graph.get_edge_range(idx)

    def into_weights(self) -> list[float]:
        """The flat list of CDF weights."""
        return list(self._weights)