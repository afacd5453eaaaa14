import sys

from lzw12.application import Application, Reporter, main


if __name__ == '__main__':
    sys.exit(main())
