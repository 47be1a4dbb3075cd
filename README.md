# soshell

`soshell` is a small interactive shell for POSIX systems. It runs external
programs, joins commands into pipelines with `|`, and redirects standard
output, standard error and standard input with `>`, `>>`, `2>` and `<`. It also
has built-in commands for quick calculations, file checks, permission changes
and file copies that run in the background.

## Installation

```
pip install .
```

## Starting the shell

```
soshell
```

The shell prints a banner and then the prompt `SOSHELL:`. Type a command and
press Enter. End of input (Ctrl-D) or the `sair` command leaves the shell.

A line is split into words on whitespace. Redirections are recognised only at
the end of a command, in the order `2> file`, then `>> file` or `> file`, then
`< file`. Files created by a redirection get mode `0600`.

In a pipeline such as `ls -l | wc -l`, each command runs in a child process
and the shell waits for it to finish before starting the next one, with the
output of each fed to the input of the next. Built-in commands can take part
in pipelines and redirections as well.

## Built-in commands

| Command | What it does |
| --- | --- |
| `sair` | Leave the shell |
| `42...` | Any word starting with `42` prints the answer to life, the universe and everything |
| `obterinfo` | Print the shell version |
| `PS1=<text>` | Change the prompt to `<text>` |
| `quemsoueu` | Run `id` |
| `cd [dir]` | Change directory; no argument, `~` or `$HOME` go to `$HOME`, `-` goes back to the previous directory and prints it |
| `calc <a> <op> <b>` | Floating-point arithmetic with `+ - * / ^`, printed with three decimals |
| `bits <a> <op> <b>` | 32-bit integer operations with `& ^ \| << >>`; `~` negates the first operand |
| `isjpg <file>` | Check whether a file begins with a JPEG signature (`FF D8 FF` followed by `E0`, `E1`, `E2` or `E8`) |
| `socp <source> <dest>` | Copy a file; the destination is created with mode `0644` |
| `socpthread <source> <dest>` | Copy a file in a background thread and record the outcome |
| `InfoCopias` | List the recorded background copies (the last 100), oldest first |
| `aviso <message> <seconds>` | Print `Aviso : <message>` to standard error after a delay, in the background |
| `avisoMAU <message> <seconds>` | Same as `aviso` |
| `avisoTeste <message> <seconds>` | Same, but the shell waits for it |
| `maior <file1> <file2>` | Report which of two files is larger, with its size in KB |
| `setx <file>` | Give the owner execute permission |
| `removerl <file>` | Remove read permission for group and others |
| `sols <dir>` | List a directory with inode, size and modification time |
| `neofetch` | Show a summary of the user, host, kernel, CPUs, memory, directory and uptime |

Any other command is run as an external program.

## Examples

```
SOSHELL:calc 2.0 + 3.0
Resultado: 5.000
SOSHELL:calc 1 / 0
Erro: Divisão por zero
SOSHELL:bits 11 & 14
Resultado 11 & 14 = 10
SOSHELL:bits 5 ~ 0
~5 = -6
SOSHELL:ls -l | wc -l > count.txt
SOSHELL:socpthread bigfile copy1
SOSHELL:InfoCopias
```

Each `InfoCopias` line holds the time of the copy, the source file and
`SUCCESS` or `FAILED`.

## Using it from Python

The pieces of the shell can be used on their own:

```python
from soshell.parse import parse_line
from soshell.calc import calc, bits, CalcError
from soshell.jpeg import is_jpeg_file
from soshell.fileutils import larger_file, list_directory
from soshell.socp import socp
from soshell.threads import CopyLog, copy_and_log

parse_line("ls   -l  /tmp")      # ['ls', '-l', '/tmp']
calc("2", "^", "10")             # 1024.0
bits("11", "&", "14")            # 10
is_jpeg_file("photo.jpg")        # True or False

log = CopyLog()
copy_and_log("notes.txt", "notes.bak", log)
log.entries()
```

`calc` and `bits` raise `CalcError` for an unknown operator, a division by
zero or a shift count outside 0 to 31.

`soshell.shell.Shell` drives the shell programmatically: `run_line` runs one
command line, `builtin` runs a built-in command or pipeline and tells whether
it did, `change_directory` behaves as `cd`, and `loop` reads lines from a text
stream until end of input or `sair`. An `executor` callable can be passed to
`Shell` to replace how external commands are run.

## What it does not do

The shell splits lines on whitespace only. It has no quoting or escaping, no
variable or `~` expansion outside `cd`, no wildcards, no background jobs with
`&`, no command history and no line editing. Redirection operators are only
recognised as separate words at the end of a command.

## Running the tests

```
pip install .[test]
pytest
```