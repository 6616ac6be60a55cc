# plxdy

`plxdy` parses DY. DY is a small line-based syntax that people can read and write
easily. A line may start with a key, and the rest of the line is the key's value.
A specification defines the keys and how they nest. The package includes
specifications for PLX courses, skills and exercises.

## The syntax

- A line that starts with `//` is a comment and is ignored.
- A line is a key line when it starts with a known key. The key must be followed by a
  space or by the end of the line.
- A key with a multiline value takes the lines that follow it as part of its value.
  This continues until the next key line. Comments between those lines are skipped.
- A key with a single-line value accepts only empty lines after it.
- A line that starts with ```` ``` ```` or `~~~` opens or closes a Markdown code
  snippet. Every line inside a snippet is treated as plain content, including the
  fence lines themselves. Inside a snippet, comments and keys are not recognised.

## Installation

```
pip install plxdy
```

## Parsing PLX files

```python
from plxdy.course import parse_course
from plxdy.skill import parse_skills
from plxdy.exo import parse_exos

text = """course Programmation 1
code PRG1
goal Apprendre des bases solides du C++"""

result = parse_course("course.dy", text)
course = result.items[0]
print(course.name, course.code, course.goal)
print(result.errors)   # [] when the file is valid
```

Each function takes a file path, which may be `None`, and the file's content.
Each returns a `ParseResult`. Its `items` are `Course`, `Skill` or `Exo` objects.
The conventional file names are available as `COURSE_FILE`, `SKILLS_FILE` and
`EXO_FILE` in `plxdy.course`.

An exercise file:

```python
text = """exo Just greet me
A simple hello program.

check Can enter the name
args kinda
see What is your firstname ?
type John
see Hello John
exit 0
"""
result = parse_exos("exo.dy", text)
exo = result.items[0]
for check in exo.checks:
    print(check.name, check.args, check.exit, check.sequence)
```

The arguments of a check are split on single spaces. The exit code must fit in a
32-bit signed integer. Each check's `sequence` holds `See` and `Type` actions in the
order they appear in the file.

In a skill or exercise, the first line of the value is the name. The remaining lines
form the description or instruction. Skills may contain `subskill` entries, which are
collected in `Skill.subskills`.

## Reporting errors

Parsing does not stop at the first problem. Every problem is collected as a
`ParseError` from `plxdy.errors`. A `ParseError` has two parts:

- a `range`, which is a `plxdy.ranges.Range` of zero-based `Position`s;
- an `error`, which is one of the error classes listed below.

The error classes are:

- `WrongKeyPosition`
- `DuplicatedKey`
- `InvalidMultilineContent`
- `ContentOutOfKey`
- `MissingRequiredKey`
- `MissingRequiredValue`
- `ValidationError`

Calling `str()` on any of these gives its message. For a misplaced key, the parent is
reported as `??`. Errors from the block tree come sorted by their start position, and
errors from building the items follow them.

`ParseResult.file_content` keeps the parsed text only when there are errors.
`ParseResult.render(color)` builds a report that you can show to a person. The report
contains the offending lines, with markers underneath. When `color` is true, the
report uses ANSI colours. `str(result)` gives the same report without colours.

```python
result = parse_course("course.dy", "course\ncode PRG1\ngoal Learn C++\n")
print(result.render(color=False))
```

```
Found 1 item in course.dy with 1 error.

Error at course.dy:0:6
course
      | Missing a value for the required key 'course'
```

## Your own specifications

Describe your keys with `KeySpec` and `ValueType` from `plxdy.spec`. Then wrap the
root keys in `ValidSpec`.

`ValidSpec` raises `InvalidSpecError` in two cases:

- the specification is empty;
- the same key identifier appears twice anywhere in the tree.

Call `parse_with_spec` from `plxdy.result` with a function that turns each top-level
`Block` into your item. The function returns a tuple of a list of `ParseError`s and
the item, in that order.

```python
from plxdy.spec import KeySpec, ValueType, ValidSpec
from plxdy.result import parse_with_spec

note = KeySpec(id="note", desc="A note", subkeys=(), vt=ValueType.MULTILINE,
               once=False, required=True)
spec = ValidSpec([note])

result = parse_with_spec(spec, lambda block: ([], block.joined_text()), None, "note hello\nworld")
print(result.items)  # ['hello\nworld']
```

A `Block` has the following members:

- `key`, its `KeySpec`;
- `text`, the value lines;
- `range`, a `Range`;
- `subblocks`;
- `joined_text()`, which joins the lines and strips the result;
- `split_text(n)`, which joins and strips the lines before and after line `n` separately.

The lower-level steps can also be called on their own:

- `plxdy.parser.tokenize_into_lines` classifies the lines of a text;
- `plxdy.semantic.build_blocks_tree` builds the block tree and reports hierarchy errors.

## What it does not do

`plxdy` only parses and validates text. It does not:

- read files from disk;
- check that a skill's directory exists;
- run the checks described in an exercise;
- provide a command-line tool.