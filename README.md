# doksnet

`doksnet` keeps documentation and code in step. You tie a passage of your
documentation to the piece of code it describes, and `doksnet` records a
BLAKE3 hash of each side. When either side changes later, `doksnet test`
reports the mapping as failed, so stale examples and outdated explanations
are caught before they reach readers.

It has no dependencies outside the Python standard library (3.10 or later);
the BLAKE3 hash is computed in pure Python.

## Installation

```
pip install .
```

Running the test suite needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Commands

```
doksnet new [PATH]        # create a .doks file in PATH (default: current directory)
doksnet add               # add a documentation-code mapping interactively
doksnet edit ID           # edit the first mapping whose ID starts with ID
doksnet remove-failed     # list failed mappings and offer to remove them
doksnet test              # verify every mapping; exits with status 1 on failure
doksnet test-interactive  # verify mappings and fix failures one by one
doksnet --help
doksnet --version
```

`doksnet new` looks in the target directory for documentation files
(`README`, `README.md`, `README.rst`, `README.txt`, `DOCS.md`,
`DOCUMENTATION.md`, `GUIDE.md`, `MANUAL.md`, matched without regard to case,
and any other file ending in `.md`). If it finds one it uses it; if it finds
several it lists them, README files first, and asks which one should be the
default; if it finds none it asks for a name, offering `README.md`. It refuses
to run when a `.doks` file already exists there.

All other commands search for a `.doks` file in the current directory and
its parents, and stop with `No .doks file found. Run 'doksnet new' first.`
when there is none.

- `add` asks for a documentation partition (pre-filled with the default
  document), shows a preview, asks for a code partition, shows a preview,
  asks for an optional description, and stores the new mapping under a
  random UUID.
- `edit` lets you change the documentation partition, the code partition,
  both, or the description. A changed partition is re-read and re-hashed.
- `remove-failed` lists every mapping whose documentation or code no longer
  matches its hash (or can no longer be read) and removes them all after you
  confirm; the default answer is no.
- `test` prints each mapping with `✅ PASS` or `❌ FAIL`, then a summary such
  as `✅ Passed: 1/2` and `❌ Failed: 1/2` with the reason for each failure.
  Its exit status is 1 when any mapping fails, which suits continuous
  integration.
- `test-interactive` runs the same checks and then, for each failed mapping,
  shows the current content and offers to update the hashes to accept it,
  to remove the mapping, to skip it, or points you to `doksnet edit`.
  Changes are saved to the `.doks` file.

Errors are printed to standard error as `Error: ...` and give exit status 1.

### Answering prompts

Prompts read whole lines from standard input, so they can be answered from a
script as well as by hand:

- text prompts: an empty answer takes the value shown in brackets;
- yes/no prompts: `y`/`yes` or `n`/`no`; an empty answer takes the default
  shown as `[Y/n]` or `[y/N]`;
- selections: type the number of the item, counted from 0; an empty answer
  takes the default.

For example, `echo 0 | doksnet new` picks the first file offered.

## Partitions

A partition names a file, optionally narrowed to lines and columns.
Lines and columns are 1-based and inclusive.

| Partition                    | Selects                                            |
|------------------------------|----------------------------------------------------|
| `README.md`                  | the whole file                                     |
| `README.md:42`               | line 42                                            |
| `src/main.rs:10-20`          | lines 10 to 20                                     |
| `src/main.rs:10-20@5-15`     | from column 5 of line 10 to column 15 of line 20   |
| `file.txt:10@5`              | column 5 of line 10                                |

Selected lines are joined with `\n`. Line or column numbers that are zero,
out of range, or in the wrong order are reported as errors.

## The `.doks` file

A plain-text file you can commit alongside your project:

```
# .doks - Mapping doks to code
default_doc=README.md

# Format: id|doc_partition|code_partition|doc_hash|code_hash|description
main-function-example|README.md:11-15|src/main.rs:3-7|<doc hash>|<code hash>|Main function example
```

Blank lines and lines starting with `#` are ignored, as are lines that are
neither `default_doc=...` nor a mapping. A mapping line needs at least five
`|`-separated fields; the description is optional. Hashes are BLAKE3 digests
written as 64 lowercase hexadecimal characters.

## Using it from Python

The building blocks are importable:

```python
from doksnet.config import DoksConfig, Mapping, find_doks_file
from doksnet.errors import DoksError
from doksnet.hashing import hash_content, verify_hash
from doksnet.partition import Partition

part = Partition.parse("README.md:11-15")
digest = hash_content(part.extract_content())
print(str(part), digest)

config = DoksConfig.from_file(find_doks_file())
for mapping in config.mappings:
    print(mapping.id, mapping.doc_partition, mapping.code_partition)
```

- `doksnet.partition.Partition` — `parse()`, `extract_content()`, and
  `str()` to write a partition back out.
- `doksnet.hashing` — `hash_content(text)`, `verify_hash(text, digest)` and
  `blake3_hex(data)` for raw bytes.
- `doksnet.config` — `DoksConfig` (`parse`, `from_file`, `to_file`,
  `to_text`, `add_mapping`, `find_mapping_by_id`), `Mapping`, and
  `find_doks_file(start=None)`.
- `doksnet.errors.DoksError` — raised for every error the package reports.
- `doksnet.prompts.Prompter` — the line-based prompts; the command handlers
  in `doksnet.commands` accept one built on any pair of text streams.
- `doksnet.cli.main(argv=None)` — the command line, returning its exit
  status.

## Notes

`doksnet --version` reports the command-line version `0.1.0`; the package
version is in `doksnet.__version__`.