# dsalab

Classic data structures and algorithms in plain Python, most with a small
command for trying them out from a terminal. There are no runtime
dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsalab.tree23` | `Tree23`: a balanced 2-3 tree of distinct strings with `insert`, `remove`, `search` (also `in`), and `pre_order`, `in_order`, `post_order` lists |
| `dsalab.avl_tree` | `AVLTree`: a self-balancing tree of strings; `balance_factors()`, `format_balance_factors()`, `to_dot()` and `visualize_tree(filename)` |
| `dsalab.expression` | `ArithmeticExpression` and `ExpressionNode`: an expression tree built from an infix string of single-character operands, printed as `infix()`, `prefix()`, `postfix()` or `to_dot()`; plus `infix_to_postfix` and `priority` |
| `dsalab.doubly_linked` | `DoublyLinkedList`: integers between two sentinel nodes, with `push_front`, `push_back`, `pop_front`, `pop_back`, iteration both ways and `format_reverse()` |
| `dsalab.bst` | `BSTree`: an unbalanced binary search tree of strings that counts duplicates; `smallest`, `largest`, `height`, `remove`, and traversals as `(value, count)` pairs |
| `dsalab.graph` | `Graph`, `Vertex` and `Color`: a weighted directed graph searched breadth-first from its first vertex |
| `dsalab.sorting` | `quicksort_midpoint`, `quicksort_median_of_three`, their partition functions, `insertion_sort` and `random_numbers` |
| `dsalab.sentiment` | `HashTable` of `WordEntry` scores, and `load_reviews`, `review_score` and `classify` for rating movie reviews |
| `dsalab.print_queue` | `PrintQueue`: a bounded max-heap of `PrintJob` objects ordered by priority |
| `dsalab.bounded_stack` | `BoundedStack`: a stack with a fixed capacity (20 by default) |
| `dsalab.int_list` | `IntList`: a singly linked list of integers with `selection_sort`, `insert_ordered`, `remove_duplicates` and `copy` |
| `dsalab.sorted_set` | `SortedSet`: an `IntList` of distinct integers kept in ascending order, with `|`, `&`, `|=` and `&=` |
| `dsalab.selection` | `min_index`, `selection_sort`, `letter_sequence` and `get_element` |
| `dsalab.word_ladder` | `WordLadder` and `is_one_letter_off`: the shortest ladder between two five-letter words, one letter changed per step |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from dsalab.bst import BSTree
from dsalab.sorted_set import SortedSet
from dsalab.bounded_stack import BoundedStack
from dsalab.expression import ArithmeticExpression
from dsalab.word_ladder import WordLadder

tree = BSTree()
for word in ["pear", "apple", "fig", "apple"]:
    tree.insert(word)
assert "fig" in tree
assert tree.smallest() == "apple"
assert tree.largest() == "pear"
print(tree.in_order())          # [('apple', 2), ('fig', 1), ('pear', 1)]

evens = SortedSet([4, 2, 8])
small = SortedSet([1, 2, 3, 4])
print(evens & small)            # 2 4
print(evens | small)            # 1 2 3 4 8

stack = BoundedStack(20)
stack.push("A")
stack.push("B")
assert stack.top() == "B"

expr = ArithmeticExpression("a + b * c - ( d * e + f ) * g")
expr.build_tree()
print(expr.prefix())
print(expr.to_dot())

ladder = WordLadder(["cold", "cord", "card", "ward", "warm"][:0] or ["sling", "sting", "stint"])
print(ladder.find_ladder("sling", "stint"))   # ['sling', 'sting', 'stint']
```

Operations that cannot be carried out raise exceptions:

- `PrintQueue.enqueue` on a full queue raises `QueueFullError`; `dequeue` and
  `highest` on an empty one raise `QueueEmptyError`.
- `BoundedStack.push` on a full stack raises `StackOverflowError` (an
  `OverflowError`); `pop` and `top` on an empty one raise `StackUnderflowError`
  (an `IndexError`).
- `WordLadder` raises `DictionaryError` when a dictionary word is not five
  letters long or the file cannot be read; `find_ladder` raises `ValueError`
  when either word is not in the dictionary, and returns `None` when no ladder
  exists.
- `Graph.distance` and `Graph.previous` raise `KeyError` for an unknown label
  and return `None` for a vertex the search did not reach.
- `IntList.front` and `back` on an empty list raise `IndexError`;
  `get_element` raises `IndexError` for a negative or too large index.

## Commands

| Command | What it does |
| --- | --- |
| `dsalab-tree23` | Menu to insert, remove, search and print a 2-3 tree of titles |
| `dsalab-avl` | Menu to insert into an AVL tree and print balance factors; on quitting writes the tree as DOT text to `output.txt` |
| `dsalab-expression` | Builds three sample expression trees, prints them in infix, prefix and postfix form, and writes `expr1.dot` to `expr3.dot` |
| `dsalab-bst` | Menu for a binary search tree: insert, remove, print, search, smallest, largest and height |
| `dsalab-graph FILE` | Reads a graph file, searches it breadth-first and writes `FILE.dot` |
| `dsalab-sorting [--size N] [--seed S]` | Prints the milliseconds each quicksort and insertion sort take on the same random numbers (50000 by default) |
| `dsalab-sentiment [REVIEWS] [--size N]` | Learns word scores from a file of rated reviews (`movieReviews.txt` by default), then rates each review you type until an empty line |
| `dsalab-print-queue` | Menu to enqueue, print and dequeue print jobs by priority |
| `dsalab-word-ladder [--dictionary FILE] [--output FILE]` | Asks for two five-letter words and writes the ladder between them, or `No Word Ladder Found.`, to the output file (`dictionary.txt` and `output.txt` by default) |

A graph file starts with the number of vertices and the number of edges, then
one vertex label per line, then edges as `from to weight`. The search starts
at the first vertex listed; a vertex's distance is the sum of edge weights
along the path by which the search first reached it.

A review file holds one review per line, each starting with its integer score.

## What it does not do

Everything lives in memory; no structure is saved between runs. Pictures of
trees and graphs are written as DOT text; `visualize_tree` and `output_graph`
additionally try to render a JPEG with the Graphviz `dot` program and return
the image name only if that program is on your `PATH` and succeeds.