"""Discrete per-node features backed by a shared feature vocabulary."""

from __future__ import annotations

from typing import Iterable, Iterator


class FeatureStore:
    """Lists of feature ids for each node, with ``(type, name)`` lookup."""

    __slots__ = ("_features", "_ids", "_names")

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("FeatureStore size must be non-negative")
        self._features: list[list[int]] = [[] for _ in range(size)]
        self._ids: dict[tuple[str, str], int] = {}
        self._names: list[tuple[str, str]] = []

    def _check_node(self, node: int) -> None:
        if not 0 <= node < len(self._features):
            raise IndexError(f"node {node} is out of range")

    def _intern(self, feature_type: str, name: str) -> int:
        key = (str(feature_type), str(name))
        feat_id = self._ids.get(key)
        if feat_id is None:
            feat_id = len(self._names)
            self._ids[key] = feat_id
            self._names.append(key)
        return feat_id

    def set_features(self, node: int, features: Iterable[tuple[str, str]]) -> None:
        """Replace the features of ``node`` with ``(type, name)`` pairs."""
        self._check_node(node)
        self._features[node] = [self._intern(ft, name) for ft, name in features]

    def set_features_raw(self, node: int, feature_ids: Iterable[int]) -> None:
        """Append already-known feature ids to ``node``."""
        self._check_node(node)
        ids = list(feature_ids)
        for feat_id in ids:
            if not 0 <= feat_id < len(self._names):
                raise IndexError(f"feature id {feat_id} is unknown")
        self._features[node].extend(ids)

    def get_features(self, node: int) -> list[int]:
        """Feature ids of ``node``."""
        self._check_node(node)
        return list(self._features[node])

    def get_pretty_feature(self, feat_id: int) -> tuple[str, str]:
        """The ``(type, name)`` pair of a feature id."""
        if not 0 <= feat_id < len(self._names):
            raise IndexError(f"feature id {feat_id} is unknown")
        return self._names[feat_id]

    def get_pretty_features(self, node: int) -> list[tuple[str, str]]:
        """The ``(type, name)`` pairs of ``node``'s features."""
        return [self.get_pretty_feature(f) for f in self.get_features(node)]

    def feature_id(self, feature_type: str, name: str) -> int:
        """Id of a known feature; raises ``KeyError`` if it was never added."""
        return self._ids[(feature_type, name)]

    def num_features(self) -> int:
        return len(self._names)

    def num_nodes(self) -> int:
        return len(self._features)

    def fill_missing_nodes(self) -> None:
        """Give each featureless node a unique ``("node", <id>)`` feature."""
        for node, feats in enumerate(self._features):
            if not feats:
                self.set_features(node, [("node", str(node))])

    def count_features(self) -> list[int]:
        """Number of occurrences of each feature id across all nodes."""
        counts = [0] * len(self._names)
        for feats in self._features:
            for feat_id in feats:
                counts[feat_id] += 1
        return counts

    def prune_min_count(self, count: int) -> "FeatureStore":
        """New store keeping only features that occur at least ``count`` times."""
        counts = self.count_features()
        pruned = FeatureStore(len(self._features))
        for node, feats in enumerate(self._features):
            pruned.set_features(
                node, (self._names[f] for f in feats if counts[f] >= count)
            )
        return pruned

    def __iter__(self) -> Iterator[list[int]]:
        for feats in self._features:
            yield list(feats)

    def __repr__(self) -> str:
        return f"FeatureStore(nodes={self.num_nodes()}, features={self.num_features()})"