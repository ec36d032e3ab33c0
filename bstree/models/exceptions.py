"""
Custom exceptions for the binary search tree.
"""


class EmptyInputError(ValueError):
    """
    Raised when a tree is built from a sequence that holds no keys.

    Without at least one key there is no seed for the root node.
    """

    def __init__(self, source: str = "sequence"):
        """
        Initialize empty input error.

        Args:
            source: Short description of what was empty, used in the message.
        """
        self.source = source
        super().__init__(
            f"Cannot build a tree from an empty {source}: "
            f"at least one key is needed to seed the root"
        )
