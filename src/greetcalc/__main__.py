"""``python -m greetcalc`` behaves like the ``greetcalc`` console script."""

import sys

from greetcalc.adapters.cli.main import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
