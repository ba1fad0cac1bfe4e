r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from combinq import from_sequence, Source
from typing import Any, Dict, List, Optional


class Generator:
    """
    turns a small schema into element values for test sequences.

    a schema is one of:
      - a faker provider name ('word', 'name', 'uuid4', ...)
      - a (provider, kwargs) tuple, e.g. ('pyint', {'min_value': 1, 'max_value': 9})
      - {'_qen_provider': 'choice', 'from': [...]} or {'_qen_provider': 'literal', 'value': x}
      - a plain dict of field -> schema, producing a record
      - anything else, used as a literal
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            picked = config["from"][self._rng.integers(len(config["from"]))]
            # numpy scalars back to python values
            return picked.item() if hasattr(picked, 'item') else picked
        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema)
            return {key: self.create(value) for key, value in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._call_faker(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def list(self, count: int) -> List[Any]:
        return [self._generator.create(self._schema) for _ in range(count)]

    def unique(self, count: int, max_attempts: int = 1000) -> List[Any]:
        """count pairwise distinct values, so projected tuples map back to unique indices"""
        values, seen = [], set()
        attempts = 0
        while len(values) < count:
            attempts += 1
            if attempts > max_attempts:
                raise ValueError(f"could not draw {count} distinct values in {max_attempts} attempts")
            value = self._generator.create(self._schema)
            marker = repr(value)
            if marker not in seen:
                seen.add(marker)
                values.append(value)
        return values

    def take(self, count: int) -> Source:
        return from_sequence(self.list(count))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
