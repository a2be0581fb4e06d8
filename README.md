# nearfacsimile

Find similar or identical text files in a directory.

`near-facsimile` walks a directory tree and loads every UTF-8 text file it
finds. Hidden files and directories (names starting with `.`) are skipped, as
are paths excluded by `.ignore` files and, inside a git repository, by
`.gitignore` files. Files that are not valid UTF-8 are left out. Every pair of
files is then compared once, and the pairs whose similarity is above a
threshold are reported. The results can also be saved as CSV or JSON.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```
near-facsimile [OPTIONS]
```

Compare all files under the current directory and report pairs that are more
than 85% similar:

```
near-facsimile
```

Compare only AsciiDoc files under `docs/`, report pairs above 90%, and save
the results:

```
near-facsimile --path docs --require-ext adoc --threshold 90 --csv results.csv --json results.json
```

### Options

| Option | Meaning |
| --- | --- |
| `-p`, `--path DIR` | Root directory to search. Default: `.` |
| `-t`, `--threshold DECIMAL` | Report pairs above this similarity percentage. Default: `85.0` |
| `-f`, `--fast` | Use a faster, less precise method. Give it once for Jaro and twice for trigram only. |
| `-v`, `--verbose` | Show debugging output; give it twice to also show trace output. |
| `-c`, `--csv FILE` | Save the results as CSV. |
| `-j`, `--json FILE` | Save the results as pretty-printed JSON. |
| `--ignore-file NAME` | Skip files with this name. Can be repeated. |
| `--ignore-ext EXTENSION` | Skip files with this extension. Can be repeated. |
| `--require-file NAME` | Compare only files with this name. Can be repeated. |
| `--require-ext EXTENSION` | Compare only files with this extension. Can be repeated. |
| `--skip-lines REGEX` | Leave out lines that match this regular expression. Can be repeated. |
| `-P`, `--progress` | Show a progress bar while comparing. |
| `-V`, `--version` | Print the version and exit. |

`--ignore-file` cannot be combined with `--require-file`,
`--ignore-ext` cannot be combined with `--require-ext`, and
`--require-file` cannot be combined with `--ignore-ext`.

If the threshold is outside 0–100, if fewer than two matching files are found,
or if a file cannot be read, the command prints `Error: ...` to standard error
and exits with status 1.

### Comparison methods

- Default: normalized Levenshtein similarity. Slow and accurate.
- `-f`: Jaro similarity. Faster.
- `-ff`: trigram similarity. Rough but very fast.

Before any of these runs, a quick trigram check discards pairs whose trigram
similarity is below half of the threshold.

### Output

Each matching pair is logged to standard output as *identical* (100%) or
*similar*, with the percentage rounded to one decimal place, in colour when the
terminal supports it (set `NO_COLOR` to turn colour off). A pair that is not
fully identical is never shown as 100.0%; such values are shown as 99.9% at
most.

Saved results are sorted from the most to the least similar. Each record holds
`pct_similar`, `file1` and `file2`, and the paths are relative to the search
directory. The CSV header is `% similar,File 1,File 2`.

## Library use

```python
from nearfacsimile.cli import parse_options
from nearfacsimile.app import run

options = parse_options(["--path", "docs", "--threshold", "90"])
results = run(options)
for comparison in results:
    print(comparison.path1, comparison.path2, comparison.similarity_pct.rounded())
```

`parse_options` returns an `Options` (from `nearfacsimile.options`) whose
`threshold` is a fraction between 0.0 and 1.0. `run` returns the list of
`Comparison` objects above the threshold, writes the CSV and JSON files if
they are set, and raises `RunError` if the threshold is outside 0.0–1.0 or if
fewer than two matching files are found.

Other building blocks:

- `nearfacsimile.metrics`: `normalized_levenshtein`, `jaro` and
  `trigram_similarity`, each returning a value between 0.0 and 1.0.
- `nearfacsimile.load_files`: `walk`, `load_file`, `load_files`, `wanted` and
  `strip_lines`.
- `nearfacsimile.comparison`: `compare_files` and `comparisons`.
- `nearfacsimile.serialize`: `serialize`, `write_csv`, `write_json` and
  `OutputComparison`.
- `nearfacsimile.percentage`: `Percentage`, with the display rounding.
- `nearfacsimile.logsetup`: `init_logging`, the terminal log handler used by
  the command.

## Limitations

Comparisons run one pair after another in a single process; there is no
parallel comparison.