import sys

from trip_capacity.cli import main

sys.exit(main())
