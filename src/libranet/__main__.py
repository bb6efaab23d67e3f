"""Main entry point for the libranet package."""

from libranet.demo import run_demo


def main():
    """Run the sample lending session."""
    print("=== LibraNet Example ===\n")
    run_demo()


if __name__ == "__main__":
    main()
