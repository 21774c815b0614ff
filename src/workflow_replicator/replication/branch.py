"""
Branch naming for replication pull requests.
"""

import random
import string
from typing import Optional

BRANCH_PREFIX = "bot/update-global-workflow-"
MANUAL_BRANCH_PREFIX = "bot/manual-update-global-workflow-"

_BASE36_DIGITS = string.digits + string.ascii_lowercase
_FRACTION_DIGITS = 11


def _base36_fraction(value: float, digits: int = _FRACTION_DIGITS) -> str:
    """Render a fraction in ``[0, 1)`` as ``0.<base36 digits>``."""
    rendered = []
    for _ in range(digits):
        value *= 36
        digit = int(value)
        rendered.append(_BASE36_DIGITS[digit])
        value -= digit
    return "0." + "".join(rendered)


def get_branch_name(commit_id: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    """
    Create a branch name for the replicated changes.

    A push run names the branch after its commit. Without a commit the run
    was started manually, so the name gets a short random suffix instead.

    Args:
        commit_id: Commit that triggered the run
        rng: Random source, the module-level generator when omitted

    Returns:
        Branch name
    """
    if commit_id:
        return f"{BRANCH_PREFIX}{commit_id}"

    fraction = (rng or random).random()
    suffix = _base36_fraction(fraction)[7:]
    return f"{MANUAL_BRANCH_PREFIX}{suffix}"
