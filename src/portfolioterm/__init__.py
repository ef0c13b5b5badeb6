"""portfolioterm -- an embedded portfolio terminal.

This package implements a simulated shell for a personal portfolio: a
visitor types short commands and gets back author-written text. The
interpreter core is framework-free; an HTTP endpoint, an HTTP client and
a command-line REPL host it.
"""

__version__ = "0.1.0"
