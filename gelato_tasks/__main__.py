import sys

from gelato_tasks.cli import main

if __name__ == "__main__":
    sys.exit(main())
