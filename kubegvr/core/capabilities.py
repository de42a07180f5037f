import logging
from typing import Dict, Iterable, List, Tuple

from .exceptions import UnknownActionError

logger = logging.getLogger(__name__)

VERB_MAP: Dict[str, Tuple[str, ...]] = {
    "describe": ("get",),
    "view": ("get", "list"),
    "delete": ("delete",),
    "edit": ("patch", "update"),
}


def map_verb(action: str) -> Tuple[str, ...]:
    """Returns the kubernetes verbs granting the given user `action`.

    **parameters**

    * **action** - One of `describe`, `view`, `delete` or `edit`.

    **raises** `UnknownActionError` if the action is not known.
    """
    try:
        return VERB_MAP[action]
    except KeyError:
        raise UnknownActionError(action) from None


def can(verbs: Iterable[str], action: str) -> bool:
    """Determines if `action` is available for a resource exposing the given `verbs`.

    **parameters**

    * **verbs** - Verbs granted on the resource. Example `['get', 'list', 'watch']`
    * **action** - User action to check. Example `view`

    **returns** `True` if any of `verbs` matches one of the verbs mapped to `action`. An unknown
    action is logged and reported as not available.
    """
    # resolved once per call, so an unknown action logs even when no verbs are granted
    try:
        candidates = map_verb(action)
    except UnknownActionError:
        logger.error("verb mapping failed", exc_info=True)
        return False

    return any(verb in candidates for verb in verbs)


def allowed_actions(verbs: Iterable[str]) -> List[str]:
    """Returns all the actions available for a resource exposing the given `verbs`"""
    verbs = list(verbs)
    return [action for action in VERB_MAP if can(verbs, action)]
