"""
Dataset generators: the data source for the demo, the benchmarks and the tests.

Distributions:
- "random":        integers drawn uniformly from params["range"] (inclusive).
- "nearly_sorted": [0, 1, ..., n-1] with ceil(swap_frac * n) random swaps.
- "few_uniques":   up to k distinct values, repeated at random.
- "small_range":   uniform over a small domain, [0, 255] by default.
- "reversed":      [n-1, n-2, ..., 0]; worst case for the first-element-pivot
                   quick sort.
- "sorted":        [0, 1, ..., n-1]; the other worst case for quick sort and the
                   best case for insertion / bubble sort.
- "mwc64":         signed 64-bit values from the multiply-with-carry generator,
                   seeded from params["seed"] or, if absent, from `rng`.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Conventions:
- Returns a Python `list[int]`; the algorithms never see NumPy types.
- The caller supplies the RNG (seeded upstream) for reproducibility.
- Invalid arguments raise ValueError naming the offending key.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

from .mwc import MWCGenerator

__all__ = ["SUPPORTED_DISTS", "make_dataset"]

_Builder = Callable[[int, Dict[str, Any], np.random.Generator], List[int]]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        {"dist": <one of SUPPORTED_DISTS>, "params": {...}}

        random:         {"range": [lo, hi]}                  required, inclusive
        nearly_sorted:  {"swap_frac": 0.05}                  in [0.0, 1.0]
        few_uniques:    {"k": 100, "range": [lo, hi]}        range optional
        small_range:    {"min_val": 0, "max_val": 255}       or {"range": [lo, hi]}
        reversed:       {}
        sorted:         {}
        mwc64:          {"seed": 12345}                      seed optional
    rng : numpy.random.Generator
        Random number generator owned by the caller. Unused by the
        deterministic distributions.

    Returns
    -------
    list[int]
        A list of length `n`.

    Raises
    ------
    ValueError
        If inputs are invalid or the distribution is unsupported.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    builder = _BUILDERS.get(dist)  # type: ignore[arg-type]
    if builder is None:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return builder(n, params, rng)


# ------------------------- distributions ------------------------- #


def _random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _parse_range(params["range"], "random")
    return _uniform(n, lo, hi, rng)


def _nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    val = params.get("swap_frac", 0.05)
    try:
        swap_frac = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not 0.0 <= swap_frac <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {swap_frac}")

    arr = list(range(n))
    # ceil so that any nonzero fraction makes at least one swap
    num_swaps = int(np.ceil(swap_frac * n))
    if n == 0 or num_swaps == 0:
        return arr

    idxs = rng.integers(0, n, size=2 * num_swaps)
    for i, j in zip(idxs[0::2].tolist(), idxs[1::2].tolist()):
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params.get("range", (0, 4294967295)), "few_uniques")
    if n == 0:
        return []

    actual_k = min(k, n, hi - lo + 1)
    # Sample distinct values with `rng` itself so the dataset depends on the seed only.
    chosen: List[int] = []
    seen = set()
    while len(chosen) < actual_k:
        batch = rng.integers(lo, hi + 1, size=2 * (actual_k - len(chosen)), dtype=np.int64)
        for v in batch.tolist():
            if v not in seen:
                seen.add(v)
                chosen.append(v)
                if len(chosen) == actual_k:
                    break

    picks = rng.integers(0, actual_k, size=n)
    return [chosen[t] for t in picks.tolist()]


def _small_range(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" in params:
        lo, hi = _parse_range(params["range"], "small_range")
    else:
        lo, hi = _parse_range((params.get("min_val", 0), params.get("max_val", 255)), "small_range")
    return _uniform(n, lo, hi, rng)


def _reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _mwc64(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    seed = params.get("seed")
    if seed is None:
        seed = int(rng.integers(1, 2**32))
    elif not _is_int_like(seed):
        raise ValueError(f"mwc64.params.seed must be an integer; got {seed!r}")
    return MWCGenerator.from_seed(int(seed)).integers(n)


_BUILDERS: Dict[str, _Builder] = {
    "random": _random,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
    "small_range": _small_range,
    "reversed": _reversed,
    "sorted": _sorted,
    "mwc64": _mwc64,
}

SUPPORTED_DISTS = frozenset(_BUILDERS)


# ------------------------- helpers ------------------------- #


def _uniform(n: int, lo: int, hi: int, rng: np.random.Generator) -> List[int]:
    if n == 0:
        return []
    # Generator.integers is half-open; +1 makes `hi` inclusive.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _parse_range(spec: Any, dist: str) -> Tuple[int, int]:
    """Validate an inclusive [min, max] pair."""
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{dist}.params range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types, but not bools
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
