# cloverleaf

Building blocks for working with large, sparse, weighted graphs:

- `cloverleaf.graph`: compressed sparse row graphs (`CSR`), row-normalised
  graphs (`NormalizedCSR`) and graphs whose edge weights are held as
  per-node cumulative distributions (`CumCSR`, with `clone_with_edges` and
  `transpose`). `OptCDFGraph` pairs a graph's structure with its own set of
  CDF edge weights. `convert_edges_to_cdf` and `cdf_to_p` convert between
  weights and cumulative distributions.
- `cloverleaf.distance`: the `Distance` metrics (`ALT`, `COSINE`, `DOT`,
  `EUCLIDEAN`, `HAMMING`, `JACCARD`), arranged so that a lower value means
  closer.
- `cloverleaf.feature_store`: `FeatureStore`, discrete `(type, name)`
  features per node, with counting, filling of featureless nodes and pruning
  by minimum count.
- `cloverleaf.utils`: `count_runs`, `get_best_count`, `FeatureHasher`,
  `reservoir_sample`, `weighted_reservoir_sample` and `Sample` (all, a fixed
  count, or a probability).
- `cloverleaf.bitset`: `BitSet`, a fixed-size set of flags.

## Installation

```
pip install .
```

## Examples

```python
from cloverleaf.graph import CSR, CumCSR, cdf_to_p

edges = [(0, 1, 1.0), (1, 1, 3.0), (1, 2, 2.0), (2, 0, 2.5), (1, 0, 10.0)]
graph = CumCSR.from_csr(CSR.from_edges(edges, False))

neighbours, cdf = graph.get_edges(1)
print(neighbours)            # [1, 2, 0]
print(list(cdf_to_p(cdf)))   # transition probabilities 3/15, 2/15, 10/15

reversed_graph = graph.transpose()
```

```python
from cloverleaf.distance import Distance

print(Distance.EUCLIDEAN.compute([1.0, 2.0, 1.0], [3.0, 2.0, 4.0]))  # sqrt(13)
print(Distance.JACCARD.compute([1.0, 2.0, -1.0], [2.0, 4.0, 5.0]))   # 0.75
```

```python
from cloverleaf.feature_store import FeatureStore

store = FeatureStore(3)
store.set_features(0, [("word", "red"), ("word", "apple")])
store.set_features(1, [("word", "red")])
store.fill_missing_nodes()          # node 2 gets ("node", "2")
print(store.count_features())       # [2, 1, 1]
pruned = store.prune_min_count(2)
print(pruned.get_pretty_features(0))  # [("word", "red")]
```

```python
import random
from cloverleaf.utils import Sample

rng = random.Random(7)
print(Sample.from_value(3).sample(10, False, rng))  # (3, 10/3)
```

## What this package does not do

It holds no dense embedding store or nearest-neighbour search, reads and
writes no graph or embedding files, and runs no learning or propagation
algorithms over a graph. It provides the graph structures, metrics, feature
store and sampling helpers those would be built on, and has no command-line
tool.

## Running the tests

```
pip install .[test]
pytest
```