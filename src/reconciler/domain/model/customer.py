"""Customer aggregate.

Owned by the customer store; order creation only checks that one exists.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:

    id: str
    name: str = ""
