from models.entities import EntityKind


def select_entity_kinds(requested=()):
    """
    Decide which entity kinds to process.

    With nothing requested every kind is imported; otherwise only the
    requested ones. The result is always in fixed processing order
    (agent, customer, customer_user, ci), never in request order.

    Args:
        requested: Iterable of EntityKind or kind names; unknown names are
            ignored

    Returns:
        list of EntityKind
    """
    wanted = set()
    for kind in requested:
        try:
            wanted.add(EntityKind(kind))
        except ValueError:
            continue

    if not wanted:
        return EntityKind.ordered()
    return [kind for kind in EntityKind.ordered() if kind in wanted]
