[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cslabs"
version = "0.1.0"
description = "Data-structure lab exercises: an AVL tree with ASCII rendering, word dictionaries, memoized recursion and a PNG edge sketcher."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "avl-tree",
    "data-structures",
    "anagrams",
    "homophones",
    "memoization",
    "png",
    "edge-detection",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
avl-demo = "cslabs.avl_demo:main"
anagram-finder = "cslabs.anagram_dict:main"
fib-generator = "cslabs.memo:fib_main"
fac = "cslabs.memo:fac_main"
homophone-puzzle = "cslabs.cartalk:main"
find-common-words = "cslabs.common_words:main"
sketchify = "cslabs.sketchify:main"

[tool.hatch.build.targets.wheel]
packages = ["cslabs"]

[tool.hatch.build.targets.sdist]
include = [
    "cslabs",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
