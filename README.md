# graphdrills

A collection of classic search exercises in plain Python. Every function
takes ordinary lists, strings and numbers and returns an answer. The package
depends only on the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### `graphdrills.grids`: searches over 2-D grids

- `oranges_rotting(grid)`: minutes until every fresh orange has rotted, `0` if none are fresh, or `-1` if some never rot
- `max_distance_from_land(grid)`: the farthest a water cell can be from its nearest land, or `-1` when the grid is all land or all water
- `shortest_path_binary_matrix(grid)`: the number of cells on the shortest 8-directional clear path from the top-left corner to the bottom-right corner, or `-1`
- `capture_surrounded(board)`: flips, in place, every `'O'` region that does not touch the border to `'X'`
- `has_valid_path(grid)`: whether the street tiles (1 to 6) connect the top-left corner to the bottom-right corner
- `highest_peak(is_water)`: a new grid of heights, with water at `0` and each step away from water one higher
- `nearest_exit(maze, entrance)`: the fewest steps from the entrance to an open (`'.'`) border cell other than the entrance, or `-1`
- `reveal(board, click)`: applies one click to a minesweeper board in place and returns the board
- `distance_to_nearest_zero(mat)`: a new grid holding each cell's distance to the nearest `0`
- `max_area_of_island(grid)`: the area of the largest 4-connected island of ones

The input grids are left unchanged, except by `capture_surrounded` and `reveal`,
which work in place.

```python
from graphdrills.grids import oranges_rotting, max_area_of_island

oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]])   # 4
max_area_of_island([[1, 1, 0], [0, 1, 0], [0, 0, 1]])  # 3
```

### `graphdrills.graphs`: searches over implicit and explicit graphs

- `ladder_length(begin_word, end_word, word_list)`: the number of words in the shortest word ladder, or `0`
- `maximum_detonation(bombs)`: the most bombs that setting off a single `[x, y, radius]` bomb detonates
- `calc_equation(equations, values, queries)`: answers division queries from the given ratios, with `-1.0` when a query has no answer
- `count_provinces(is_connected)`: the number of connected groups in an adjacency matrix
- `total_importance(employees, employee_id)`: an `Employee`'s importance together with that of everyone below them
- `open_lock(deadends, target)`: the fewest wheel turns from `"0000"` to the target, or `-1`
- `num_buses_to_destination(routes, source, target)`: the fewest buses to take, or `-1`
- `can_visit_all_rooms(rooms)`: whether the keys found from room 0 open every room
- `snakes_and_ladders(board)`: the fewest dice rolls to reach the last square, or `-1`

`Employee` is a dataclass with `id`, `importance` and `subordinates`.

```python
from graphdrills.graphs import open_lock

open_lock(["0201", "0101", "0102", "1212", "2002"], "0202")  # 6
```

### `graphdrills.trees`: binary trees

`TreeNode` is a dataclass with `val`, `left` and `right`; nodes compare by
identity. Build a tree from a level-order list (with `None` for a missing
child) with `build_tree(values)`, read it back in order with
`inorder_values(root)`, and look up a node with `find_node(root, value)`.

- `lca_deepest_leaves(root)`: the lowest common ancestor of the deepest leaves
- `sum_even_grandparent(root)`: the sum of the nodes whose grandparent is even
- `sum_root_to_leaf_numbers(root)`: the sum of the numbers spelled by each root-to-leaf path
- `distance_k(root, target, k)`: the values of the nodes exactly `k` edges from `target`
- `recover_tree(root)`: repairs a search tree in place when two of its values have been swapped

```python
from graphdrills.trees import build_tree, inorder_values, recover_tree

root = build_tree([1, 3, None, None, 2])
recover_tree(root)
inorder_values(root)  # [1, 2, 3]
```

### `graphdrills.puzzles`

- `detect_capital_use(word)`: whether the word is all capitals, all lower case, or capitalised only in its first letter
- `racecar(target)`: the length of the shortest run of accelerate and reverse instructions that reaches `target`; a negative target raises `ValueError`

### `graphdrills.students`

A `Student` dataclass (`id`, `cgpa`, `name`) and `combine(x, y)`. Two
integers add, two strings are joined, and two floats give their average.
Values of different types, or of any other type, raise `TypeError`.

## Commands

`graphdrills-inventory` reads, from standard input, the number of workers and
a product's name, category, initial inventory, price and number of items
sold. It then prints a sales report that gives the inventory status, the
category name (1 to 5), a line per item sold, and totals with and without a
15% tax. A missing or malformed answer prints an error and exits with
status 1.

```
graphdrills-inventory
```

`graphdrills-students` prints a sample student, reads a second student's
name, id and CGPA from standard input, and prints their ids added, their
CGPAs added, and a joined greeting. A missing or malformed answer prints an
error and exits with status 1.

```
graphdrills-students
```

## What it does not do

The two commands handle one product or one student per run. They keep nothing
between runs and write no files.