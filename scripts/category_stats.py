"""Print category, subcategory and chapter counts"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from category_tree.commands.stats import main


if __name__ == "__main__":
    sys.exit(main())
