import sys
import traceback

from bst import BinarySearchTree, EmptyTreeError, verify_is_bst


"""
This script accepts 2 optional positional arguments
1) NUMS, the exclusive upper bound of the keys (default 4000)
2) GAP, the step used to shuffle the insertion order (default 37)

It inserts GAP, 2 * GAP, ... (mod NUMS) into a tree, removes the odd keys,
checks the result and prints a few statistics about the tree.
GAP has to be coprime with NUMS, otherwise some keys are never inserted.

sample usage:

python3 bst_demo.py 4000 37
"""


NUMS = 4000
GAP = 37

USAGE = 'usage: bst_demo.py [NUMS] [GAP]'


def build_tree(nums, gap):
    tree = BinarySearchTree()

    i = gap % nums
    while i != 0:
        tree.insert(i)
        i = (i + gap) % nums

    for i in range(1, nums, 2):
        tree.remove(i)

    return tree


def check_tree(tree, nums):
    """Return the error messages for every failed check, empty if all passed."""
    errors = []

    if tree.find_min() != 2 or tree.find_max() != nums - 2:
        errors.append('FindMin or FindMax error!')

    if not all(tree.contains(i) for i in range(2, nums, 2)):
        errors.append('Find error1!')

    if any(tree.contains(i) for i in range(1, nums, 2)):
        errors.append('Find error2!')

    if not verify_is_bst(tree.root):
        errors.append('Ordering error!')

    return errors


def print_tree(tree):
    keys = tree.print_tree()
    if keys is None:
        print('Empty tree')
        return
    for key in keys:
        print(key)


def print_report(tree):
    print('Size of the tree is:', tree.size())
    print('Number of leaf nodes:', tree.count_leaves())
    print('Number of left children:', tree.count_left_child_relations())
    print('The tree is full:', tree.is_full(tree.root))
    print('Depth of the node:', tree.depth(tree.root))
    print('the tree:')
    for level in tree.print_by_levels(tree.root):
        print(' '.join(str(key) for key in level))


def main(nums=NUMS, gap=GAP):
    print('Checking... (no more output means success)')

    tree = build_tree(nums, gap)

    if nums < 40:
        print_tree(tree)

    try:
        errors = check_tree(tree, nums)
    except EmptyTreeError:
        traceback.print_exc(file=sys.stderr)
        return 1

    for error in errors:
        print(error)

    print_report(tree)
    return 1 if errors else 0


def parse_args(argv):
    if len(argv) > 2:
        raise ValueError('too many arguments')
    nums = int(argv[0]) if len(argv) > 0 else NUMS
    gap = int(argv[1]) if len(argv) > 1 else GAP
    if nums < 1 or gap < 1:
        raise ValueError('NUMS and GAP must be positive')
    return nums, gap


if __name__ == '__main__':
    try:
        nums, gap = parse_args(sys.argv[1:])
    except ValueError as ex:
        print(USAGE, file=sys.stderr)
        print('error:', ex, file=sys.stderr)
        sys.exit(2)
    sys.exit(main(nums=nums, gap=gap))
