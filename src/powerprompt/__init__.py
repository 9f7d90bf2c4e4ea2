"""
Yet another powerline-style shell prompt

``powerprompt`` is a program for Git-aware customization of the command prompt
in the style of the powerline plugins: a chain of colored segments joined by
wedge-shaped separators, followed by a short status line.

Features:

- Shows the exit code of the previous command when it failed
- Shows how long the previous command took to run
- Shows the current directory, abbreviating your home directory to ``~``
- Shows the current Git branch (or commit), how far it has diverged from its
  upstream, and how many files have pending changes
- Works in any shell that can pass ``$?`` and a duration to a command and
  print its output
"""

__version__ = "0.1.0"
__license__ = "MIT"
