from typing import List
from dataclasses import fields, is_dataclass


class Configurable:
    def get_configurations(self) -> List[str]:
        if is_dataclass(self):
            return [f.name for f in fields(self)]
        return []
