from dataclasses import dataclass
from typing import Optional

from detective.errors import allocate


@dataclass
class ClueNode:
    text: str
    left: Optional["ClueNode"] = None
    right: Optional["ClueNode"] = None


# ==========================================================
# BST OPERATIONS (work on any subtree root, None is empty)
# ==========================================================
def contains_clue(root, text):
    if root is None:
        return False
    if text < root.text:
        return contains_clue(root.left, text)
    if text > root.text:
        return contains_clue(root.right, text)
    return True


def insert_clue(root, text):
    """
    Inserts text if absent and returns the subtree root for the caller to rebind.
    An equal value leaves the subtree untouched.
    """
    if root is None:
        return allocate(ClueNode, "clue ledger node", text)
    if text < root.text:
        root.left = insert_clue(root.left, text)
    elif text > root.text:
        root.right = insert_clue(root.right, text)
    return root


def iter_in_order(root):
    """Lazily yields clue texts in ascending order."""
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.text
        node = node.right


def count_for_suspect(root, suspect_name, directory):
    """How many clues in the subtree the directory attributes to suspect_name."""
    if root is None:
        return 0
    here = 1 if directory.lookup(root.text) == suspect_name else 0
    return (
        count_for_suspect(root.left, suspect_name, directory)
        + here
        + count_for_suspect(root.right, suspect_name, directory)
    )


class ClueLedger:
    def __init__(self, clues=()):
        """
        The CLUE LEDGER. Owns the BST root of every distinct clue collected so far.
        """
        self.root = None
        self._size = 0
        for text in clues:
            self.add(text)

    def add(self, text):
        """Returns True if the clue was new, False if it was already in the ledger."""
        if contains_clue(self.root, text):
            return False
        self.root = insert_clue(self.root, text)
        self._size += 1
        return True

    def count_for(self, suspect_name, directory):
        return count_for_suspect(self.root, suspect_name, directory)

    def __contains__(self, text):
        return contains_clue(self.root, text)

    def __iter__(self):
        return iter_in_order(self.root)

    def __len__(self):
        return self._size
