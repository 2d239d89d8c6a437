"""config_loading.py

Loads the command tree in argtree.yaml next to this file and resolves the
command line against it. The same tree can be explored with the bundled CLI:

    argtree --config examples/argtree.yaml show
    argtree --config examples/argtree.yaml check --args "push --tag v1 --dry-run"
"""

import sys
from pathlib import Path

from rich.pretty import Pretty

from argtree.config import loader
from argtree.console import console
from argtree.utils import setup_logging

setup_logging(mode="cli")

tree = loader(Path(__file__).parent / "argtree.yaml")

if __name__ == "__main__":
    outcome = tree.try_parse(sys.argv[1:])
    if outcome.ok:
        console.print(Pretty(outcome.value))
    else:
        console.print(str(outcome.error), markup=False, highlight=False)
