# topmark:header:start
#
#   project      : TypeSniff
#   file         : __main__.py
#   file_relpath : src/typesniff/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TypeSniff via ``python -m typesniff``.

It delegates directly to :func:`typesniff.cli.main.cli`, the same entry point
as the ``typesniff`` console script.

Examples:
    Detect the type of a directory of sample files::

        python -m typesniff detect ./data
"""

from __future__ import annotations

from typesniff.cli.main import cli

if __name__ == "__main__":
    cli()
