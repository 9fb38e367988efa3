# puzzlebox

Small, self-contained programming puzzles with working solutions, and a
command that searches for rectangular collages made from a folder of images.

## Installation

```
pip install puzzlebox
```

To run the test suite:

```
pip install "puzzlebox[test]"
pytest
```

## The puzzles

Each puzzle lives in its own module and exposes one or a few plain functions.

| Module | What it offers |
| --- | --- |
| `puzzlebox.anagram` | `find_anagrams(dictionary, word)` returns the entries that are anagrams of a phrase (ignoring case and non-letters, and leaving out the phrase itself); `normalize(s)` gives the sorted-letters key |
| `puzzlebox.brokennode` | `find_broken_nodes(broken_nodes, reports)` marks each node of a ring `B` (broken), `W` (working) or `?` (unknown) |
| `puzzlebox.buildword` | `build_word(word, fragments)` gives the fewest fragments that spell a word, or 0 |
| `puzzlebox.chess` | `can_knight_attack(white, black)` tells whether knights on two squares such as `"a8"` and `"b6"` attack each other |
| `puzzlebox.coins` | `piles(n)` counts the ways to split `n` coins into unordered piles |
| `puzzlebox.compression` | `encode(s)` / `decode(s)`; the encoding is the text itself, so nothing is compressed |
| `puzzlebox.floyd` | `triangle(rows)` builds Floyd's triangle |
| `puzzlebox.jaro` | `distance(word1, word2)` computes the case-insensitive Jaro similarity |
| `puzzlebox.mergesort` | `merge_sort(values)` returns a new sorted list |
| `puzzlebox.missingnumbers` | `missing(numbers)` finds the two numbers missing from `1..len(numbers)+2` |
| `puzzlebox.reverseparentheses` | `reverse(s)` reverses every parenthesised part, innermost first, and drops the parentheses |
| `puzzlebox.romannumerals` | `encode(n)` / `decode(s)` for Roman numerals |
| `puzzlebox.secretmessage` | `decode(encoded)` returns the letters seen at least as often as `_`, most frequent first |
| `puzzlebox.shorthash` | `generate_short_hashes(dictionary, length)` lists every string of 1 to `length` characters over an alphabet |
| `puzzlebox.snowflakes` | `overlaid_triangles(n, m)` counts triangles `m` levels deep after `n` iterations |
| `puzzlebox.sumdecimal` | `sum_decimal(c)` sums the first 1000 decimal digits of the square root of `c` |
| `puzzlebox.warriors` | `count(image)` counts figures drawn with `1`s in a newline-separated grid of digits |
| `puzzlebox.wordladder` | `word_ladder(start, end, dictionary)` gives the number of words in the shortest ladder, or 0 |
| `puzzlebox.functionfrequency` | `function_frequency(code)` names the three most called functions in a piece of Go source; `count_calls(code)` returns a `Counter` of all calls |
| `puzzlebox.lastlettergame` | `sequence(words)` finds the longest chain where each word starts with the last letter of the one before |
| `puzzlebox.nodedegree` | `degree(nodes, graph, node)` and the alternative strategies `degree_linear`, `degree_linear_copy`, `degree_linear_reverse`, `degree_step_reverse` and `degree_interpol` count the edges touching a node in a sorted edge list |
| `puzzlebox.spiral` | `element(n, x, y)` and `render(n)` for a square number spiral |

A few examples:

```python
from puzzlebox.coins import piles
from puzzlebox.floyd import triangle
from puzzlebox.reverseparentheses import reverse
from puzzlebox.buildword import build_word
from puzzlebox.romannumerals import encode, decode

piles(4)                              # 5
triangle(3)                           # [[1], [2, 3], [4, 5, 6]]
reverse("foo(bar)baz")                # "foorabbaz"
build_word("answer", ["wer", "ans"])  # 2
encode(2714)                          # "MMDCCXIV"
decode("MMMCD")                       # 3400
```

Input a function cannot work with raises an exception instead of returning
an error value: `ValueError` for invalid Roman numerals, off-board or
shared chess squares and impossible broken-node counts, and
`puzzlebox.nodedegree.NodeNotFoundError` (a `LookupError`) for a node beyond
the graph.

`function_frequency` recognises calls with a small state machine over the
text rather than a full parser: only indented lines are looked at, string
literals and the keyword `func` are skipped, and a call is a (possibly
dotted) name directly followed by `(`.

To print a number spiral (size 10 unless another is given):

```
puzzlebox-spiral
puzzlebox-spiral 5
```

## Image collages

`puzzlebox.nasacollage` searches for arrangements of images that tile a
rectangle exactly, without scaling or cropping, and writes each one it
finds as a PNG file.

The building blocks can be used on their own:

* `puzzlebox.nasacollage.imgres.list_dir(path)` reads the size of every file
  in a directory as `ImageRes(filename, width, height)` records, sorted by
  name; a file that is not a readable image raises `ValueError`.
* `puzzlebox.nasacollage.solve.Solver(images, progress_callback=None).solve(ground_row_size)`
  tries every ordered bottom row of `ground_row_size` images, stacks further
  images on the lowest gap, and saves each collage of more than ten images
  as `collage_<time>_<area>.png` in the current directory. It returns the
  ground row size and the images of the last collage found, or `(0, [])`.
* `puzzlebox.nasacollage.write.layout`, `build_collage` and
  `write_collage_png` place a set of images and render them.
* `puzzlebox.nasacollage.bargraph.BarGraph` tracks the skyline of stacked
  images; `Bar`, `new_bar_graph`, `stack` and `stack_row` build it up.
* `puzzlebox.nasacollage.comb` yields `combinations`, `permutations` and
  `variations` of index tuples; `puzzlebox.nasacollage.progress.Progress`
  counts steps and reports to a callback every 2**24 steps.
* `puzzlebox.nasacollage.apod.scrape_image_urls(main_url)` yields the image
  links found on the pages listed in an archive index page; it raises
  `ScrapeError` when a page cannot be fetched. `find_links(lines, pattern)`
  does the matching on its own.

The `nasacollage` command ties these together:

```
nasacollage scrape https://archive.example.com/pictures/archive.html > urls.txt
nasacollage solve images 2
```

`scrape` prints one image URL per line. `solve` takes a directory of images
and the number of images in the ground row. The search is exhaustive and
can run for a very long time; progress and every collage found are logged,
and it can be interrupted at any point. Running `nasacollage` with no
arguments, or with wrong ones, prints the usage text.

### What it does not do

The command does not download images: fetching the listed URLs into a
directory, and removing logos and files that are not pictures, is left to
you before running `solve`.