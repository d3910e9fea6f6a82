import sys

from worldclock.entrypoint import main


if __name__ == "__main__":
    sys.exit(main())
