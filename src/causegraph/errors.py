"""Load-time failures.

Both indicate the caller handed over inconsistent or corrupt data. Runtime
queries (training against an unknown conclusion, inferring from unseen
evidence) never raise.
"""

from __future__ import annotations


class GraphStateError(ValueError):
    """Serialized graph state could not be loaded."""


class MalformedStateError(GraphStateError):
    """State blob is not valid JSON or does not match the expected shape."""


class UnknownRightNodeError(GraphStateError):
    """State references a right node outside the configured label set."""

    def __init__(self, left_label: str, right_label: str) -> None:
        self.left_label = left_label
        self.right_label = right_label
        super().__init__(
            f"Left node {left_label!r} references unknown right node {right_label!r}; "
            f"the right-node labels passed to load() must include every label in the state."
        )
