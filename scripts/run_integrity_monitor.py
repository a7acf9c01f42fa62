"""Scan the category tree for orphans on a schedule"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from category_tree.commands.monitor import main


if __name__ == "__main__":
    sys.exit(main())
