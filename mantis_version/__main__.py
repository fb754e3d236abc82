import sys

from mantis_version.main import main

sys.exit(main())
