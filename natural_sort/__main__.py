import sys

from natural_sort.cli import main

sys.exit(main())
