# Unbalanced binary search tree: insert, remove, lookups and a few structural queries.

from collections import deque


class EmptyTreeError(Exception):
    """Raised when asking an empty tree for its smallest or largest key."""

    def __init__(self, message='tree is empty'):
        super().__init__(message)


class Node:

    def __init__(self, key, left=None, right=None):
        self.key = key
        self.left = left
        self.right = right

    def __str__(self):
        def _key(node):
            return node.key if node else None
        return f'({self.key}) -> ({_key(self.left)}, {_key(self.right)})'


def insert(x, root: Node):
    # returns the root of the tree
    if root is None:
        return Node(x)

    node = root
    while True:
        if x < node.key:
            if node.left is None:
                node.left = Node(x)
                break
            node = node.left
        elif x > node.key:
            if node.right is None:
                node.right = Node(x)
                break
            node = node.right
        else:
            # duplicate, nothing to do
            break

    return root


def remove(x, root: Node):
    parent, went_left = None, False
    node = root
    while node is not None:
        if x < node.key:
            parent, went_left, node = node, True, node.left
        elif x > node.key:
            parent, went_left, node = node, False, node.right
        else:
            break

    if node is None:
        return root

    if node.left is not None and node.right is not None:
        # take the successor's key, then unlink the successor instead
        parent, went_left, successor = node, False, node.right
        while successor.left is not None:
            parent, went_left, successor = successor, True, successor.left
        node.key = successor.key
        node = successor

    child = node.left if node.left is not None else node.right
    if parent is None:
        return child
    if went_left:
        parent.left = child
    else:
        parent.right = child
    return root


def find_min(node: Node):
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def find_max(node: Node):
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def contains(x, node: Node):
    while node is not None:
        if x < node.key:
            node = node.left
        elif x > node.key:
            node = node.right
        else:
            return True
    return False


def traverse_in_order(root: Node):
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left

        node = stack.pop()
        yield node.key
        node = node.right


def _nodes_by_levels(root: Node):
    queue = deque()
    if root is not None:
        queue.append(root)

    while queue:
        # everything queued right now belongs to the current level
        level = [queue.popleft() for _ in range(len(queue))]
        for node in level:
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        yield level


def traverse_by_levels(root: Node):
    """Yield one list of keys per level, top to bottom, left to right."""
    for level in _nodes_by_levels(root):
        yield [node.key for node in level]


def size(node: Node):
    return sum(len(level) for level in _nodes_by_levels(node))


def count_leaves(node: Node):
    return sum(1 for level in _nodes_by_levels(node) for n in level
               if n.left is None and n.right is None)


def count_left_child_relations(root: Node):
    """Count the nodes that have a left child, walking the tree breadth first."""
    if root is None:
        return 0

    queue = deque([root])
    count = 0
    while queue:
        node = queue.popleft()
        if node.left is not None:
            count += 1
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return count


def is_full(node: Node):
    """Check that `node` has either two children or is absent.

    Only the given node is inspected, its descendants are not. A leaf is
    therefore reported as not full.
    """
    if node is None:
        return True
    return node.left is not None and node.right is not None


def depth(node: Node):
    # number of nodes on the longest downward path, one per level; an absent node counts 0
    return sum(1 for _ in _nodes_by_levels(node))


def height(node: Node):
    # number of edges on the longest downward path; -1 for an absent node
    return depth(node) - 1


def verify_is_bst(root: Node):
    # every node carries the open interval its key has to fall into
    stack = [(root, None, None)]
    while stack:
        node, t_min, t_max = stack.pop()
        if node is None:
            continue

        if t_min is not None and not t_min < node.key:
            return False
        if t_max is not None and not node.key < t_max:
            return False

        stack.append((node.left, t_min, node.key))
        stack.append((node.right, node.key, t_max))

    return True


class BinarySearchTree:
    """Unbalanced binary search tree over mutually comparable keys.

    Keys are ordered with ``<`` and ``>``; inserting a key already present and
    removing a key that is absent both leave the tree untouched.
    """

    def __init__(self):
        self.root = None

    def insert(self, x):
        self.root = insert(x, self.root)

    def remove(self, x):
        self.root = remove(x, self.root)

    def find_min(self):
        if self.is_empty():
            raise EmptyTreeError('find_min() on an empty tree')
        return find_min(self.root).key

    def find_max(self):
        if self.is_empty():
            raise EmptyTreeError('find_max() on an empty tree')
        return find_max(self.root).key

    def contains(self, x):
        return contains(x, self.root)

    def is_empty(self):
        return self.root is None

    def make_empty(self):
        self.root = None

    def print_tree(self):
        """Return an iterator over the keys in sorted order.

        An empty tree returns None instead, so callers can tell "nothing to
        print" apart from an exhausted iterator.
        """
        if self.is_empty():
            return None
        return traverse_in_order(self.root)

    def size(self):
        return size(self.root)

    def count_leaves(self):
        return count_leaves(self.root)

    def count_left_child_relations(self):
        return count_left_child_relations(self.root)

    def is_full(self, node: Node):
        return is_full(node)

    def depth(self, node: Node):
        return depth(node)

    def height(self, node: Node):
        return height(node)

    def print_by_levels(self, node: Node):
        return traverse_by_levels(node)

    def __len__(self):
        return self.size()

    def __contains__(self, x):
        return self.contains(x)

    def __iter__(self):
        return traverse_in_order(self.root)

    def __str__(self):
        return '[' + ', '.join(str(key) for key in self) + ']'
