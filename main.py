import sys

from scripts.acl_cli import main

if __name__ == "__main__":
    sys.exit(main())
