# cslabs

A small collection of data-structure exercises. Each one works as a library,
and most also work from the command line:

- **AVL tree** (`cslabs.avltree`): a self-balancing binary search tree. It
  reports every rotation it performs and draws itself as ASCII art
  (`cslabs.printtree`). `cslabs.avl_demo` runs demonstrations of rotations and
  removals, and `cslabs.coloredout` colours that output against an expected
  transcript.
- **Word dictionaries**: anagram lookup (`cslabs.anagram_dict`), homophone
  checks over a CMU-style pronunciation dictionary (`cslabs.pronounce_dict`),
  the "remove a letter, keep the sound" puzzle (`cslabs.cartalk`), and word
  counts across text files (`cslabs.common_words`).
- **Memoization** (`cslabs.memo`): plain and memoized Fibonacci numbers and
  factorials. Results wrap modulo 2**64, the way an unsigned 64-bit integer does.
- **Images** (`cslabs.pixel`, `cslabs.image`, `cslabs.sketchify`): RGBA pixels,
  RGB/HSL conversion, a simple PNG image class and an edge-detecting sketch
  filter.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

The package needs Python 3.10 or newer. Pillow is its only runtime dependency.

## Library use

### AVL tree

```python
from cslabs.avltree import AVLTree

tree = AVLTree()
for key in (3, 8, 6):
    tree.insert(key, str(key))   # the third insert writes the rotations it performs

print(tree.find(6))              # "6"; a missing key gives None
print(tree.render())             # the tree as ASCII art
tree.remove(6)
```

The tree writes rotation names to standard output unless you give it another
stream, either as `AVLTree(out)` or later with `tree.set_output(out)`.
`tree.print(out)` writes the drawing to a stream. The tree keeps equal keys,
storing them to the right. Iterating over a tree yields `(key, value)` pairs in
key order. `copy.copy(tree)` makes an independent copy of the tree.

`cslabs.printtree.format_tree(root)` draws any node structure that has `key`,
`left` and `right` attributes.

### Dictionaries

```python
from cslabs.anagram_dict import AnagramDict
from cslabs.pronounce_dict import PronounceDict
from cslabs.common_words import CommonWords

anagrams = AnagramDict(["dog", "god", "cat"])
anagrams.get_anagrams("dog")       # ["dog", "god"]
anagrams.get_all_anagrams()        # [["dog", "god"]]

pronunciations = PronounceDict({
    "SCENT": ["S", "EH1", "N", "T"],
    "SENT": ["S", "EH1", "N", "T"],
})
pronunciations.homophones("scent", "sent")   # True

CommonWords(["small1.txt", "small2.txt"]).get_common_words(3)
```

`AnagramDict.from_file` builds a dictionary from a newline-separated word list.
`PronounceDict.from_file` builds one from a CMU pronunciation dictionary file,
skipping comment lines that start with `#` or `;;;`. A missing file gives an
empty dictionary.

`CommonWords.get_common_words(n)` returns, sorted, every word whose total count
across all the given files is at least `n`. It removes punctuation from each
word before counting. If a file does not end in whitespace, its last word is
not counted.

### Memoization

```python
from cslabs.memo import fib, memoized_fib, fac, memoized_fac

memoized_fib(45)   # 1134903170
fac(10)            # 3628800
```

A negative argument raises `ValueError`.

### Images

```python
from cslabs.image import PNG
from cslabs.sketchify import sketchify

image = PNG(4, 4)
image.get_pixel(1, 1)          # a white, opaque RGBAPixel that can be changed in place
image.write_to_file("blank.png")

sketchify("photo.png", "sketch.png")
```

`get_pixel` clamps out-of-range coordinates to the last column or row and
issues a warning. On an empty image it raises `IndexError`. `write_to_file`
raises `ValueError` for an image with no pixels. `read_from_file` raises
`OSError` when the file cannot be read or decoded.

## Commands

| Command             | What it does |
|---------------------|--------------|
| `avl-demo`          | Runs the AVL rotation and removal demonstrations. The argument `r` skips the two largest ones. The argument `c`, used on a terminal, colours the output against `soln_testavl.out` in the current directory. |
| `anagram-finder`    | `-w WORD_LIST` (default `words.txt`), `-o FILE`, and either words to look up or `-a` for all anagram groups. |
| `fib-generator`     | `NUM [-m]`: prints the Fibonacci numbers from the 0th to the NUMth. `-m` memoizes. It stops with a message on 64-bit overflow. |
| `fac`               | `NUM [-m]`: prints NUM!. `-m` memoizes. On 64-bit overflow it reports the last good value and stops. |
| `homophone-puzzle`  | `-w WORD_LIST -d PRONUNCIATION_DICT` (defaults `words.txt` and `cmudict.0.7a`): solves the homophone puzzle. |
| `find-common-words` | `FILE ... -n NUM -o FILE`: prints the words whose total count across the files is at least NUM. |
| `sketchify`         | Sketches `given_imgs/in_0.png` … `in_3.png` into `out_ubc.png`, `out_rose.png`, `out_icics.png` and `out_nest.png`. |

`anagram-finder` and `find-common-words` write to the `-o` file when it can be
opened, and to standard output otherwise.

## What it does not do

`sketchify` takes no arguments; it always processes the four fixed sample
paths above. To sketch other images, call `cslabs.sketchify.sketchify` from
Python. The package ships no word lists, pronunciation dictionaries or sample
images. The commands expect you to supply those files.