from typing import Dict, Iterator

from minnow.errors import UnboundNameError


class Environment:
    """Maps variable names to their most recently assigned integer value."""
    def __init__(self):
        self.values: Dict[str, int] = {}

    def get(self, name: str) -> int:
        if name in self.values:
            return self.values[name]
        raise UnboundNameError(name)

    def set(self, name: str, value: int):
        self.values[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __getitem__(self, name: str) -> int:
        return self.get(name)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)
