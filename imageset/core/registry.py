# imageset/core/registry.py
import logging
from threading import RLock
from typing import Dict, List, Type

from .base_predicate import FilterPredicate
from .errors import BadExpressionError

logger = logging.getLogger(__name__)


class PredicateRegistry:
    """Minimal thread-safe registry mapping expression symbols to predicates."""

    def __init__(self):
        self._lock = RLock()
        self._predicates: Dict[str, Type[FilterPredicate]] = {}

    def register_predicate(
        self, symbol: str, predicate_class: Type[FilterPredicate]
    ) -> None:
        """Register predicate class."""
        with self._lock:
            existing = self._predicates.get(symbol)
            if existing is not None and existing is not predicate_class:
                raise ValueError(
                    f"Symbol '{symbol}' is already registered to "
                    f"{existing.__name__}"
                )
            predicate_class.symbol = symbol
            self._predicates[symbol] = predicate_class
            logger.debug(
                f"Registered predicate {predicate_class.__name__} for symbol "
                f"'{symbol}'"
            )

    def get_predicate_class(self, symbol: str) -> Type[FilterPredicate]:
        """Get predicate class."""
        with self._lock:
            if symbol not in self._predicates:
                available = sorted(self._predicates.keys())
                raise BadExpressionError(
                    f"Unknown predicate '{symbol}'. Available: {available}"
                )
            return self._predicates[symbol]

    def symbols(self) -> List[str]:
        with self._lock:
            return sorted(self._predicates.keys())


# Global registry instance
_registry = PredicateRegistry()


# Simple public interface
def get_predicate_class(symbol: str) -> Type[FilterPredicate]:
    return _registry.get_predicate_class(symbol)


def available_symbols() -> List[str]:
    return _registry.symbols()


def register_predicate(symbol: str):
    """Decorator for predicate registration."""

    def decorator(cls: Type[FilterPredicate]):
        _registry.register_predicate(symbol, cls)
        return cls

    return decorator
