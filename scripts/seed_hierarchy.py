"""Seed category hierarchies (run with --list to see structures)"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from category_tree.commands.seed import main


if __name__ == "__main__":
    sys.exit(main())
