"""Allow ``python -m argcount``."""

from argcount.dispatcher import main

if __name__ == "__main__":
    main()
