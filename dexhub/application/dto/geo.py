from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class ResolveGeoInput:
    headers: Mapping[str, str]
