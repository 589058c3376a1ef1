import sys

from randomaker.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
