# redblack

A red-black tree of integers. It keeps its values unique and sorted, and it
stays balanced through insertions and removals. A pre-order listing shows the
colour of every node.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Using the library

```python
from redblack.tree import RedBlackTree, Color

tree = RedBlackTree()
for value in (10, 20, 30):
    tree.insert(value)

print(tree.format_preorder())   # [20 B][10 R][30 R]
print(20 in tree, len(tree))    # True 3
print(list(tree))               # [10, 20, 30]

tree.remove(20)
print(tree.format_preorder())   # [10 B][30 R]
for value, color in tree.preorder():
    print(value, color is Color.BLACK)
```

`RedBlackTree` has these operations:

- `insert(value)` adds a value. It returns `True`, or `False` if the value was
  already present, and the tree is then unchanged.
- `remove(value)` deletes a value. It returns `True`, or `False` if the value
  was not present.
- `preorder()` yields `(value, Color)` pairs in pre-order: the root, then the
  left subtree, then the right subtree.
- `format_preorder()` gives the same walk as one string. Each node appears as
  `[value R]` or `[value B]`.
- `value in tree` tests membership, `len(tree)` counts the values, and
  iterating over the tree yields the values in ascending order.
- `tree.root` is the root `Node`, or `None` when the tree is empty.

`Color` has the members `RED`, `BLACK` and `DOUBLE_BLACK`. Each value is the
label used in listings: `"R"`, `"B"` and `"DB"`. `DOUBLE_BLACK` is used only
inside a removal and never appears in a finished tree.

A `Node` has the fields `value`, `color`, `parent`, `left` and `right`. It also
has the helpers `is_left_child()`, `is_root()`, `grandparent()`, `uncle()` and
`sibling()`. A missing relative is `None`.

When a removal rebalances the tree, each fix-up case it applies is logged at
DEBUG level on the `redblack.tree` logger.

## The command loop

The `redblack` command reads whitespace-separated integers from standard input
and takes them as a sequence of commands:

| Command   | Effect                                        |
|-----------|-----------------------------------------------|
| `1 <n>`   | insert `n`                                    |
| `2`       | print the pre-order listing and a newline     |
| `3 <n>`   | remove `n`                                    |
| `99`      | quit                                          |

Any other number is ignored. The loop also stops at the end of the input, or
when `1` or `3` has no number after it. A token that is not an integer raises
`ValueError`. The command takes no options apart from `--help`.

```
$ printf '1 10 1 20 1 30 2 3 20 2 99\n' | redblack
[20 B][10 R][30 R]
[10 B][30 R]
```

You can drive the same loop from Python with `redblack.cli.run(stream, out)`.
It reads commands from any iterable of lines, writes the listings to `out` and
returns the resulting `RedBlackTree`.

## What it does not do

The tree holds only integers in memory. Nothing saves it to disk or loads it
back, and the command loop has no prompt and prints no error messages.