# solvedkit

A library of solved algorithm challenges, grouped by theme. Every solution is a
plain function or a small class that takes Python data (lists, strings, tuples,
small node classes) and returns Python data. Invalid input that a solution
cannot work with raises `ValueError` (or `IndexError` for out-of-range
disjoint-set elements).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `solvedkit.linkedlists`: `ListNode` (iterable over its nodes), `build_list`,
  `list_values`, `delete_duplicates`, `remove_nth_from_end`
- `solvedkit.trees`: `TreeNode`, `average_of_levels`, `level_order_bottom`,
  `is_complete_tree`, `is_symmetric`, `sorted_list_to_bst`, `delete_node`,
  `preorder`, `in_order`, `find_target`
- `solvedkit.tries`: `WordDictionary` (search with `.` as a wildcard),
  `MagicDictionary` (one-letter-away lookup), `Trie`, `replace_words`,
  `replace_words_by_length`
- `solvedkit.disjointset`: `DisjointSet` (`find`, `merge`, `sets`),
  `group_duplicate_contacts`, `accounts_merge`
- `solvedkit.graphs`: `inverse_graph`, `strongly_connected_components`,
  `can_finish`, `can_finish_dfs`, `find_order`
- `solvedkit.grids`: `num_islands`, `num_islands_union_find`,
  `solve_surrounded` (changes the board in place)
- `solvedkit.arrays`: `k_smallest_pairs`, `find_peak_element`,
  `product_except_self`, `remove_duplicates`, `remove_duplicates_map`,
  `rotate` (in place), `search_range`, `search_rotated`, `top_k_frequent`,
  `unique_paths`, `unique_paths_with_obstacles`, `is_valid_sudoku`
- `solvedkit.nqueens`: `solve_n_queens`, `count_queens`, `check_queen`
- `solvedkit.text`: `letter_combinations`, `title_to_number`, `common_chars`,
  `generate_parenthesis`, `group_anagrams`, `group_anagrams_by_length`,
  `length_of_longest_substring`, `longest_word`,
  `repeated_substring_pattern`, `frequency_sort`
- `solvedkit.stringchallenges`: `alternating_deletions`, `bigger_is_greater`,
  `is_funny`, `can_form_palindrome`, `gem_stones`, `palindrome_index`,
  `is_pangram`, `share_substring`
- `solvedkit.patterns`: `detect_html_links`, `detect_domains`, `count_words`,
  `count_inner_substrings`, `validate_languages`, `identify_comments`,
  `saying_hi`, `split_number`, `scrape_stack_exchange`, `count_uk_us`,
  `is_utopian_id`
- `solvedkit.sorting`: `big_sort`, `counting_frequencies`, `counting_sort`,
  `counting_prefix_sums`, `full_counting_sort`, `insertion_sort_step`,
  `insertion_sort_trace`, `quicksort_partition`, `quicksort_trace`, `index_of`
- `solvedkit.search`: `largest_region`, `count_luck`, `cut_the_tree`,
  `gridland_metro`, `radio_transmitters`, `icecream_parlor`, `knightl_bfs`,
  `knightl_moves`, `missing_numbers`, `count_pairs`, `balanced_sums`

## Examples

```python
from solvedkit.trees import TreeNode, level_order_bottom
from solvedkit.arrays import unique_paths
from solvedkit.graphs import find_order
from solvedkit.text import frequency_sort
from solvedkit.tries import Trie

root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
level_order_bottom(root)          # [[15, 7], [9, 20], [3]]

unique_paths(7, 3)                # 28

find_order(2, [[1, 0]])           # [0, 1]
find_order(2, [[1, 0], [0, 1]])   # []  (the prerequisites form a cycle)

frequency_sort("tree")            # "eert"

trie = Trie()
trie.insert("apple")
trie.search("apple")              # True
trie.starts_with("app")           # True
```

## Notes

- Tries, anagram grouping and several letter puzzles accept only lowercase
  `a`-`z`; other characters raise `ValueError`.
- `generate_parenthesis` builds strings by wrapping and prefixing/suffixing
  `()`, so from four pairs on some balanced arrangements such as `(())(())`
  are not produced.
- The counting sorts in `solvedkit.sorting` work on values in `0..99`.

## What the package does not do

It is a library only: there is no command-line program, and nothing reads
standard input, prints results or fetches anything over the network. Callers
parse their own input and pass the values to the functions.