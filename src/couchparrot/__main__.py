import sys

from couchparrot.cli import main

sys.exit(main())
