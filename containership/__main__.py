import sys

from containership.cli.main import main

sys.exit(main())
