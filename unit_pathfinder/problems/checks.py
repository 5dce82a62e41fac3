from ..core.table import BestKnownTable


def sanity_check_table(table: BestKnownTable) -> str:
    """Checks that the table only holds a Pareto front per (location, loaded, moved)."""
    buckets = {}
    for vertex in table:
        if not vertex.cost.is_valid():
            raise AssertionError(f"negative cost admitted: {vertex!r}")
        buckets.setdefault(vertex.key, []).append(vertex)
    for key, vertices in buckets.items():
        for i, a in enumerate(vertices):
            for b in vertices[i + 1:]:
                if a.cost.comparable(b.cost):
                    raise AssertionError(f"comparable vertices kept together at {key}: {a.cost} vs {b.cost}")
    return f"OK: {len(buckets)} buckets; no dominated vertex kept."
