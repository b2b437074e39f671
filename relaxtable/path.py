"""Reconstructing routes from the ``previous`` pointers of a result."""

from __future__ import annotations

from typing import List, Optional, Set

from .engine import RelaxationResult
from .graph import VertexKey


def reconstruct_path(result: RelaxationResult, target: VertexKey) -> List[VertexKey]:
    """Return the route from the source to ``target`` following ``previous``.

    Args:
        result: Output of the relaxation engine.
        target: Vertex to reach.

    Returns:
        Keys from source to target (inclusive), or an empty list if the chain
        of predecessors breaks or loops before reaching the source.

    Raises:
        UnknownVertexError: If ``target`` is not in the table.
    """
    result.entry(target)
    if target == result.source:
        return [target]

    chain: List[VertexKey] = []
    seen: Set[VertexKey] = set()
    cur: Optional[VertexKey] = target
    while cur is not None:
        chain.append(cur)
        if cur == result.source:
            chain.reverse()
            return chain
        if cur in seen:
            # predecessor pointers can form a loop after a Case-C overwrite
            break
        seen.add(cur)
        cur = result.previous(cur)
    return []
