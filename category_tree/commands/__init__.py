"""Command implementations behind the scripts/ entry points"""

BANNER_WIDTH = 60


def print_banner(title: str, width: int = BANNER_WIDTH) -> None:
    """Print a section title between rules"""
    print("\n" + "=" * width)
    print(title)
    print("=" * width)
