from typing import Dict, Iterator
from minibasic.errors import BasicError
from minibasic.types import Alias, ErrorVal, Primitive, Value, is_value, type_name


class Environment:
    """Maps variable names to the Integer or Text value they hold."""
    def __init__(self):
        self.values: Dict[str, Value] = {}

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get(self, name: str) -> Value:
        if name in self.values:
            return self.values[name]
        raise BasicError(ErrorVal('NameError', f'undefined variable {name}'))

    def set(self, name: str, value: Value):
        # Aliases are resolved by the caller; only concrete values are stored
        if not is_value(value):
            raise BasicError(ErrorVal('TypeError', f'cannot store {type_name(value)} in {name}'))
        self.values[name] = value

    def resolve(self, value: Primitive) -> Value:
        """Turn an Alias into a copy of the value it names."""
        if isinstance(value, Alias):
            return self.get(value.name)
        return value
