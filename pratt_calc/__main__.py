import sys

from pratt_calc.cli import main

sys.exit(main())
