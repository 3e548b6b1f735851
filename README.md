# dsalab

Classic data structures and algorithms in plain Python, with no runtime
dependencies: balanced and unbalanced search trees, a threaded tree, two kinds
of hash table, graph traversal, Prim's minimum spanning tree, and two simple
record-file formats.

## Modules

| Module | Contents |
| --- | --- |
| `dsalab.avl` | `AVLTree` of integer keys and string values: `insert`, `update`, `search` (returns a `SearchResult` with `found`, `value` and `comparisons`), `height`, `keys` in ascending order and a sideways `render`. Nodes are `AVLNode`. |
| `dsalab.binary_tree` | `BinaryTree` of `TreeNode`s, built with `BinaryTree.from_preorder(values, sentinel)`. Recursive and iterative pre-, in- and postorder, `level_order`, `height`, `count_nodes` (internal, leaf), `mirror`, `copy`, `clear`, `heapify_min`, `heapify_max` and `render`. |
| `dsalab.bst` | `BST` of distinct integers: `insert`, `delete`, `search` (comparison count or `None`), `min_value`, `max_value`, `height`, `mirror`, traversals, `levels` and `render`. |
| `dsalab.threaded_bst` | `ThreadedBST`: an in-order threaded search tree with stackless `preorder` and `inorder`, `insert`, `delete`, `predecessor` and `successor`. |
| `dsalab.closed_hashing` | `ClosedHashTable` of `Client(phone, name)` entries with linear probing, `insert_without_replacement` and `insert_with_replacement`; `search` returns the comparison count or `None`; `slots` and `render` show the table. Raises `TableFullError` when no slot is free. |
| `dsalab.open_hashing` | `ChainedDictionary`: separate chaining with `insert` (replaces an existing key), `search`, `delete` (raises `KeyError` if absent), `chains` and `render`. |
| `dsalab.adjacency` | `AdjacencyList` of named vertices: `add_vertex`, `dfs`, `bfs` (both start at the first vertex added) and `render`. |
| `dsalab.prims` | `WeightedGraph` on an adjacency matrix (up to 20 vertices, weight 0 means no edge): `add_edge`, `render`, `minimum_spanning_tree` (a list of `Edge`) and `minimum_cost`. Raises `ValueError` if the graph is not connected. |
| `dsalab.student_file` | `StudentFile`: a text file of `Student(roll_number, name, division, address)` records, four lines each, with `add`, `find`, `delete` (raises `KeyError` if none match) and `records`. |
| `dsalab.direct_access` | `DirectAccessFile`: fixed-size binary `DirectRecord` slots placed by roll number, with `position`, `insert`, `read` and `delete`; missing or deleted records raise `RecordNotFoundError`. |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

AVL tree:

```python
from dsalab.avl import AVLTree

tree = AVLTree()
for key, value in [(10, "ten"), (20, "twenty"), (30, "thirty")]:
    tree.insert(key, value)

print(tree.keys())     # [10, 20, 30]
print(tree.search(30)) # SearchResult(found=True, value='thirty', comparisons=2)
print(tree.render())
```

Binary tree from a preorder listing, where `-1` marks an empty child:

```python
from dsalab.binary_tree import BinaryTree

tree = BinaryTree.from_preorder(
    [40, 60, 30, 32, -1, -1, -1, 16, -1, -1, 15, 20, -1, -1, 25, -1, -1],
    -1,
)
print(tree.level_order())  # [40, 60, 15, 30, 16, 20, 25, 32]
print(tree.height())       # 4
print(tree.count_nodes())  # (4, 4)
```

Minimum spanning tree:

```python
from dsalab.prims import WeightedGraph

graph = WeightedGraph(5)
for source, destination, weight in [
    (0, 1, 4), (0, 3, 5), (0, 4, 2), (4, 3, 2),
    (1, 3, 3), (1, 2, 1), (2, 3, 8),
]:
    graph.add_edge(source, destination, weight)

for edge in graph.minimum_spanning_tree():
    print(edge)
print(graph.minimum_cost())  # 8
```

Graph traversal:

```python
from dsalab.adjacency import AdjacencyList

graph = AdjacencyList()
graph.add_vertex("Khadak", ["Kothrud", "Swargate", "Katraj"])
graph.add_vertex("Kothrud", ["Khadak", "Swargate"])
graph.add_vertex("Katraj", ["Khadak", "Swargate", "Hadap"])
graph.add_vertex("Swargate", ["Kothrud", "Khadak", "Katraj", "Hadap"])
graph.add_vertex("Hadap", ["Swargate", "Katraj"])

print(graph.dfs())  # ['Khadak', 'Katraj', 'Hadap', 'Swargate', 'Kothrud']
print(graph.bfs())  # ['Khadak', 'Kothrud', 'Swargate', 'Katraj', 'Hadap']
```

Hash tables:

```python
from dsalab.closed_hashing import ClosedHashTable
from dsalab.open_hashing import ChainedDictionary

table = ClosedHashTable()
table.insert_without_replacement(12, "Asha")  # slot 2
table.insert_without_replacement(22, "Ravi")  # slot 3
print(table.search(22))                       # 2
print(table.render())

words = ChainedDictionary()
words.insert(7, "seven")
words.insert(17, "seventeen")
print(words.search(17))  # seventeen
print(words.delete(7))   # seven
```

Record files:

```python
from dsalab.student_file import Student, StudentFile
from dsalab.direct_access import DirectAccessFile, DirectRecord

students = StudentFile("students.txt")
students.add(Student(1, "Asha", "A", "Pune"))
print(students.find(1))

direct = DirectAccessFile("students.bin")
direct.insert(DirectRecord(3, "Ravi"))
print(direct.read(3))
```

## What it does not do

- It is a library only: there is no command-line program or interactive menu.
- `AVLTree` has no deletion; keys can be inserted, updated and searched.
- `AdjacencyList.dfs` and `bfs` raise `KeyError` when a neighbour has no row of
  its own.