"""Find orphaned wall subcategories, promote them to roots with --fix"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from category_tree.commands.repair import main


if __name__ == "__main__":
    sys.exit(main())
