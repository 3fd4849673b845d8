import sys

from sessioncookie.console import main

sys.exit(main())
