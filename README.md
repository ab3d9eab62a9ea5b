# cmdide

A compact editor for C++ that runs inside a terminal. It shows line numbers,
colours keywords, types, strings, numbers, comments and preprocessor lines,
keeps indentation when you press Enter, pulls a typed `}` back one level and
pairs `(`, `[`, `"` and `'` as you type them (except inside strings and
comments). It completes keywords, finds and replaces text and can compile and
run the file with a configured compiler.

The package also ships a few small command-line tools for C++ sources.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The editor

```
cmdide [SETTINGS_DIR [FILE]]
```

`SETTINGS_DIR` defaults to `./setting`. If `FILE` is given it is loaded at
start-up; the command exits with status 1 if it cannot be read. Ctrl+C leaves
the editor.

Keys while editing:

| Key            | Action                                              |
|----------------|-----------------------------------------------------|
| arrows         | move the cursor                                     |
| Home / End     | start / end of the line                             |
| PgUp / PgDn    | scroll one line up / down                           |
| Enter          | split the line, keeping the indentation             |
| Backspace      | delete left, joining lines at the start of a line   |
| Tab            | insert four spaces                                  |
| F1             | paste mode: each Enter inserts a line, Esc finishes |
| F3             | replace every tab in the text with four spaces      |
| F4             | complete the keyword left of the cursor             |
| Esc            | open the menu                                       |

Menu keys:

| Key | Action                                                      |
|-----|-------------------------------------------------------------|
| 0   | back to the text                                            |
| 1   | paste mode                                                  |
| 2   | quit                                                        |
| 3   | save (asks for a name if the text has none)                 |
| 4   | load a file                                                 |
| 5   | build                                                       |
| 6   | build, then start the program in a console of its own       |
| 8   | write an obfuscated copy of the current file                |
| 9   | jump to a line                                              |
| b   | colour scheme menu                                          |
| c   | write a tidied copy of the current file                     |
| d   | find                                                        |
| e   | find next                                                   |
| f   | replace the first or every occurrence                       |
| g   | interface language menu                                     |
| h   | edit the compiler flags                                     |

Saving without a name given reuses the current file name with its suffix
replaced by `.cpp`. Building compiles the current file into the same name with
`.exe` in place of its suffix.

Under the text the editor shows the cursor position and, when the cursor line
holds a keyword listed in `docmap.ini`, that keyword's help lines.

### Settings

The settings directory holds:

- `mingw_g++.ini` – four lines: the compiler path, the flags (default
  `-std=c++14 -O2 -s`), the extra flags (default `-static-libgcc`) and the
  include flags. Menu key `h` writes this file back.
- `lang_mr.ini` – the name of the interface language; `<name>.lang` holds
  `number=text` lines, `#` starts a comment. Missing messages show as
  `[missing:N]`.
- `view_mr.ini` – the name of the colour scheme; `<name>.view` holds nine
  console colour numbers (function, type, line number, code, string, comment,
  preprocessor, operator, number) followed by the scheme's name, author and
  description, one per line. Without it a built-in scheme is used.
- `plugins.ini` – `event=command` lines. The events are `onSave`,
  `beforeRun` and `onRun`; the command is run through the shell with the file
  name appended in quotes.
- `docmap.ini` – a keyword, then its help lines, then a blank line; a blank
  line where a keyword is expected ends the table.

## Tools

Tidy the spacing of a C++ file (removes spaces around common operators and
brackets, turns tabs into four spaces):

```
cmdide-style input.cpp output.cpp
```

Rename every identifier to a random ten-character name, fold lines of up to
150 characters into one, and put the `#define` lines that map the names back
at the top:

```
cmdide-obfuscate input.cpp output.cpp
```

Without both file names it asks for them on two lines.

Run a program and report how long it took and its exit code, then wait for
Enter:

```
cmdide-pauser program
```

Turn a `word,py1/py2` CSV list into `word py` lines, one per reading
(defaults: `pinyin.csv` to `pinyin.ini`; stops at the first empty line):

```
cmdide-csvtrans [input.csv [output.ini]]
```

## Library use

The pieces work on their own:

- `cmdide.buffer.Buffer` – lines, cursor, scrolling, editing, find and replace.
- `cmdide.highlight.highlight_line` – coloured spans of one line.
- `cmdide.keywords.find_completion` – keyword completion.
- `cmdide.compiler` – `CompilerConfig`, `build`, `run_process`.
- `cmdide.lang`, `cmdide.view`, `cmdide.docmap`, `cmdide.settings` – the
  settings files.
- `cmdide.colors` – the sixteen console colours, `nearest_color`,
  `attribute`, `split_attribute`, `color_test_rows`.
- `cmdide.dialog` – `word_wrap`, `dialog_geometry`, `ButtonSelector` and
  `LineInput`: layout and key handling for dialog boxes.
- `cmdide.encoding` – code-page and UTF-8 conversions.
- `cmdide.strutil` – `replace_all` and `replace_all_ignore_case`.

```python
from cmdide.buffer import Buffer
from cmdide.strutil import replace_all
from cmdide.dialog import word_wrap

buf = Buffer(["int main(){"], 20)
buf.end()
buf.enter()
print(repr(buf.text()))          # 'int main(){\n    '

print(replace_all("a + b", " + ", "+"))            # a+b
print(word_wrap("a long message to fit in a box", 10))
```

## What it does not do

- There is no Chinese (pinyin) input mode; F2 does nothing.
- There is no copy to the system clipboard.
- There is no file browser; files are loaded by typing their name.
- `cmdide.dialog` computes dialog layout and handles keys, but nothing in the
  package draws dialog boxes on the screen.