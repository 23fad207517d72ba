"""Association replace-set

Many-to-many collections (permission roles, role permissions) are replaced
wholesale from an id list: members missing from the list are removed and
listed members not yet present are added. The change is computed up front
so that it can be logged and asserted on.
"""

from typing import Iterable, NamedTuple, FrozenSet


class AssociationChange(NamedTuple):
    added: FrozenSet[int]
    removed: FrozenSet[int]
    unchanged: FrozenSet[int]

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


def diff_association(current_ids: Iterable[int], requested_ids: Iterable[int]) -> AssociationChange:
    """
    Compute the change that turns current_ids into requested_ids

    Args:
        current_ids: Ids currently associated
        requested_ids: Ids that must be associated afterwards

    Returns:
        AssociationChange with added, removed and unchanged ids
    """
    current = frozenset(current_ids)
    requested = frozenset(requested_ids)
    return AssociationChange(
        added=requested - current,
        removed=current - requested,
        unchanged=current & requested,
    )


def apply_association(members: list, requested: list, change: AssociationChange) -> list:
    """
    Build the new member list for a collection

    Keeps members whose id survives, then appends the requested objects
    whose id was added. Order of surviving members is preserved.
    """
    kept = [member for member in members if member.id not in change.removed]
    kept_ids = {member.id for member in kept}
    added = [obj for obj in requested if obj.id in change.added and obj.id not in kept_ids]
    return kept + added
