from __future__ import annotations
import hashlib
import numpy as np
from numpy.random import Generator

class RngManager:
    """
    Single source of truth for randomness in a run.
    Creates named, order-independent child seeds/streams by hashing:
      child_seed(name)       -> stable int seed
      child_generator(name)  -> np.random.Generator seeded from that int
      child_manager(name)    -> RngManager whose streams live under `name`

    Bootstrap draws, OC random colorings, learner annealing and synthetic data
    each take their own named stream, so adding a method to a comparison does
    not perturb the draws seen by the others.
    """
    def __init__(self, seed: int | None):
        self._root = 0 if seed is None else int(seed) & 0xFFFFFFFF

    def _mix(self, name: str) -> int:
        # Stable across runs and Python versions; 32 bits for sklearn random_state
        h = hashlib.sha256(f"{self._root}:{name}".encode("utf-8")).digest()
        return int.from_bytes(h[:4], "little", signed=False)

    def child_seed(self, name: str) -> int:
        return self._mix(name)

    def child_generator(self, name: str) -> Generator:
        return np.random.default_rng(self._mix(name))

    def child_manager(self, name: str) -> "RngManager":
        # One per comparison try: every method's streams are namespaced by the try
        return RngManager(self._mix(name))
