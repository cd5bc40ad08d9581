from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, List, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Name -> factory table behind the ensemble and learner registries.

        _LEARNERS = Registry[str, LearnerFactoryBuilder](_name="learners")

        @_LEARNERS.register("ridge")
        def _ridge(cfg, rngm, stream):
            ...

    A key can be registered once. Pass `replace=True` to override a builtin
    on purpose.

    `_builtins` names a module whose import registers the shipped entries.
    It is imported on the first lookup, so registering modules can depend on
    the registry without an import cycle.
    """

    _items: Dict[K, V] = field(default_factory=dict)
    _name: str = "registry"
    _builtins: Optional[str] = None
    _loaded: bool = field(default=False, repr=False)

    def register(self, key: K, *, replace: bool = False) -> Callable[[V], V]:
        def deco(value: V) -> V:
            if key in self._items and not replace:
                raise KeyError(f"{self._name}: key {key!r} is already registered")
            self._items[key] = value
            return value

        return deco

    def _load_builtins(self) -> None:
        if self._loaded or self._builtins is None:
            return
        self._loaded = True
        importlib.import_module(self._builtins)

    def get(self, key: K) -> V:
        self._load_builtins()
        try:
            return self._items[key]
        except KeyError:
            raise ValueError(f"Unknown {self._name} key: {key!r}") from None

    def names(self) -> List[K]:
        self._load_builtins()
        return sorted(self._items)
