import sys

from csv_interpreter.cli import main

sys.exit(main())
