"""
Allow running the package directly: python -m mandelview
"""
from .app import run


def main():
    run()


if __name__ == "__main__":
    main()
